"""
CreateUser and ListUsers Use Cases.

Creation failures (blank username, duplicate username, store errors) are
reported through the result instead of raised, together with the store's
error code. Listing failures propagate.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from application.exceptions import StoreError
from application.ports import UserRepository

logger = logging.getLogger(__name__)

CREATE_USER_FAILED = "User creation unsuccessful. See error code for details"


def user_to_dict(user: Dict[str, Any]) -> Dict[str, Any]:
    """Public shape of a user record."""
    return {"username": user["username"], "_id": user["id"]}


@dataclass
class CreateUserResult:
    """Result of the CreateUser use case execution."""

    success: bool
    user: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return user_to_dict(self.user)
        return {"message": self.error, "error_code": self.error_code}


class CreateUserUseCase:
    """
    Use case for registering a username.

    Usage:
        >>> result = CreateUserUseCase(user_repo=user_repo).execute("alice")
        >>> result.to_dict()
        {'username': 'alice', '_id': 'Xk3_f9QaZ'}
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, username: Optional[str]) -> CreateUserResult:
        username = (username or "").strip()
        if not username:
            logger.warning("User creation rejected: username is required")
            return CreateUserResult(success=False, error=CREATE_USER_FAILED)

        try:
            user = self._user_repo.create(username)
        except StoreError as e:
            logger.warning(f"User creation failed for {username!r}: {e.message}")
            return CreateUserResult(
                success=False,
                error=CREATE_USER_FAILED,
                error_code=e.code,
            )

        return CreateUserResult(success=True, user=user)


class ListUsersUseCase:
    """Use case for listing every user."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self) -> List[Dict[str, Any]]:
        return [user_to_dict(u) for u in self._user_repo.list_all()]
