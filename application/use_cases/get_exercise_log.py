"""
GetExerciseLog Use Case.

Answers "what did this user do, optionally within a date window,
optionally capped in count" with a single shaped log.

Date and limit parameters are lenient: a bound that does not parse is
treated as open instead of rejecting the request, and an invalid limit
means no truncation.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from application.exceptions import UserNotFoundError
from application.ports import ExerciseRepository, UserRepository
from domain.dates import EPOCH, parse_date, parse_limit, to_date_string, utc_now

logger = logging.getLogger(__name__)


@dataclass
class LogEntry:
    """A single exercise as it appears in a log."""

    description: str
    duration: Union[int, float]
    date: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "duration": self.duration,
            "date": self.date,
        }


@dataclass
class ExerciseLog:
    """Result of the GetExerciseLog use case execution.

    ``date_from``/``date_to`` are only set when the caller supplied a
    parseable bound; open bounds stay None and are left out of the
    serialized log.
    """

    user_id: str
    username: str
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    entries: List[LogEntry] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.entries)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the response shape ``{_id, username, from?, to?, count, log}``."""
        payload: Dict[str, Any] = {
            "_id": self.user_id,
            "username": self.username,
        }
        if self.date_from is not None:
            payload["from"] = to_date_string(self.date_from)
        if self.date_to is not None:
            payload["to"] = to_date_string(self.date_to)
        payload["count"] = self.count
        payload["log"] = [entry.to_dict() for entry in self.entries]
        return payload


class GetExerciseLogUseCase:
    """
    Use case for querying a user's exercise log.

    Orchestrates the following workflow:
    1. Parse the optional from/to bounds, substituting open defaults
    2. Resolve the user (raises UserNotFoundError when missing)
    3. Fetch exercises strictly inside the window, newest first, limited
    4. Shape the log

    Store failures propagate unchanged.

    Usage:
        >>> use_case = GetExerciseLogUseCase(user_repo=user_repo, exercise_repo=exercise_repo)
        >>> log = use_case.execute("Xk3_f9QaZ", from_raw="2023-01-01", limit_raw="5")
        >>> log.count <= 5
        True
    """

    def __init__(
        self,
        user_repo: UserRepository,
        exercise_repo: ExerciseRepository,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            user_repo: Repository for user lookup
            exercise_repo: Repository for exercise retrieval
        """
        self._user_repo = user_repo
        self._exercise_repo = exercise_repo

    def execute(
        self,
        user_id: Optional[str],
        *,
        from_raw: Optional[str] = None,
        to_raw: Optional[str] = None,
        limit_raw: Optional[str] = None,
    ) -> ExerciseLog:
        """
        Build the exercise log for a user.

        Args:
            user_id: Id of the user whose log is requested
            from_raw: Optional lower bound as supplied by the client
            to_raw: Optional upper bound as supplied by the client
            limit_raw: Optional maximum number of entries as supplied by the client

        Returns:
            ExerciseLog with entries sorted by date, most recent first

        Raises:
            UserNotFoundError: If no user exists for user_id
        """
        date_from = parse_date(from_raw)
        date_to = parse_date(to_raw)
        limit = parse_limit(limit_raw)

        user = self._user_repo.get_by_id(user_id) if user_id else None
        if user is None:
            logger.info(f"Exercise log requested for unknown user {user_id!r}")
            raise UserNotFoundError(user_id)

        exercises = self._exercise_repo.query(
            user_id,
            date_from=date_from or EPOCH,
            date_to=date_to or utc_now(),
            limit=limit,
        )

        return ExerciseLog(
            user_id=user_id,
            username=user["username"],
            date_from=date_from,
            date_to=date_to,
            entries=[
                LogEntry(
                    description=e["description"],
                    duration=e["duration"],
                    date=to_date_string(e["date"]),
                )
                for e in exercises
            ],
        )
