"""
User Repository Interface (Port).

This module defines the abstract interface for user persistence.
Users are created once and never updated or deleted.
"""
from typing import Protocol, Optional, List, Dict, Any


class UserRepository(Protocol):
    """
    Abstract interface for user persistence.

    Records are dicts with at least "id" and "username".
    """

    def create(self, username: str) -> Dict[str, Any]:
        """
        Insert a new user with a freshly generated id.

        Args:
            username: Unique username

        Returns:
            The stored user record

        Raises:
            DuplicateUsernameError: If the username is already taken
            StoreError: On any other store failure
        """
        ...

    def list_all(self) -> List[Dict[str, Any]]:
        """
        Get every user.

        Returns:
            List of user records (insertion order in practice, not guaranteed)

        Raises:
            StoreError: On store failure
        """
        ...

    def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a single user.

        Args:
            user_id: User id

        Returns:
            User record or None if not found

        Raises:
            StoreError: On store failure
        """
        ...
