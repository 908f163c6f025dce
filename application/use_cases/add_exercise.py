"""
AddExercise Use Case.

Records an exercise for an existing user. Every failure (unknown user,
invalid payload, store error) is reported through the result, never
raised, so the API can answer with an error-shaped body.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from application.exceptions import StoreError
from application.ports import ExerciseRepository, UserRepository
from domain.dates import parse_date, to_date_string, utc_now

logger = logging.getLogger(__name__)

USER_LOOKUP_FAILED = "Could not add exercise. See error code for details"
SAVE_EXERCISE_FAILED = "Failed to save exercise. See error code for details"


def parse_duration(raw: Any) -> Optional[Union[int, float]]:
    """Coerce a duration in minutes; None when missing or not a finite number."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = raw
    else:
        text = str(raw).strip()
        if not text:
            return None
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer():
            return int(value)
    return value


@dataclass
class AddExerciseResult:
    """Result of the AddExercise use case execution."""

    success: bool
    exercise: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize; the exercise is identified by its owner's id."""
        if not self.success:
            return {"message": self.error, "error_code": self.error_code}
        return {
            "username": self.exercise["username"],
            "description": self.exercise["description"],
            "duration": self.exercise["duration"],
            "date": to_date_string(self.exercise["date"]),
            "_id": self.exercise["user_id"],
        }


class AddExerciseUseCase:
    """
    Use case for adding an exercise to a user's log.

    Orchestrates the following workflow:
    1. Resolve the owning user
    2. Validate description and duration
    3. Default the date to now when missing or unparsable
    4. Persist with the owner's username copied onto the record
    """

    def __init__(
        self,
        user_repo: UserRepository,
        exercise_repo: ExerciseRepository,
    ) -> None:
        self._user_repo = user_repo
        self._exercise_repo = exercise_repo

    def execute(
        self,
        user_id: Optional[str],
        *,
        description: Optional[str],
        duration: Any,
        date_raw: Optional[str] = None,
    ) -> AddExerciseResult:
        """
        Add an exercise.

        Args:
            user_id: Owning user's id
            description: What was done (required, non-blank)
            duration: Minutes as a number or numeric string (required)
            date_raw: Optional date as supplied by the client

        Returns:
            AddExerciseResult with the stored exercise or the failure details
        """
        try:
            user = self._user_repo.get_by_id(user_id) if user_id else None
        except StoreError as e:
            return AddExerciseResult(success=False, error=USER_LOOKUP_FAILED, error_code=e.code)

        if user is None:
            logger.warning(f"Exercise rejected: unknown user {user_id!r}")
            return AddExerciseResult(success=False, error=USER_LOOKUP_FAILED)

        description = (description or "").strip()
        minutes = parse_duration(duration)
        if not description or minutes is None:
            logger.warning(f"Exercise rejected for user {user_id}: description and numeric duration are required")
            return AddExerciseResult(success=False, error=SAVE_EXERCISE_FAILED)

        try:
            exercise = self._exercise_repo.add(
                user["id"],
                user["username"],
                description=description,
                duration=minutes,
                date=parse_date(date_raw) or utc_now(),
            )
        except StoreError as e:
            return AddExerciseResult(success=False, error=SAVE_EXERCISE_FAILED, error_code=e.code)

        return AddExerciseResult(success=True, exercise=exercise)
