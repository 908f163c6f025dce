"""
Exercise Repository Interface (Port).

This module defines the abstract interface for exercise persistence.
Exercises belong to a user and carry a denormalized copy of the
owner's username.
"""
from datetime import datetime
from typing import Protocol, Optional, List, Dict, Any, Union


class ExerciseRepository(Protocol):
    """
    Abstract interface for exercise persistence.

    Records are dicts with "id", "user_id", "username", "description",
    "duration" and "date" (ISO 8601 timestamp string).
    """

    def add(
        self,
        user_id: str,
        username: str,
        *,
        description: str,
        duration: Union[int, float],
        date: datetime,
    ) -> Dict[str, Any]:
        """
        Persist a new exercise.

        Args:
            user_id: Owning user's id (existence checked by the caller)
            username: Owning user's username, stored as-is
            description: What was done
            duration: Duration in minutes
            date: When it was done (already defaulted by the caller)

        Returns:
            The stored exercise record

        Raises:
            StoreError: On store failure
        """
        ...

    def query(
        self,
        user_id: str,
        *,
        date_from: datetime,
        date_to: datetime,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Get a user's exercises within an exclusive date window.

        Args:
            user_id: Owning user's id
            date_from: Lower bound, exclusive
            date_to: Upper bound, exclusive
            limit: Maximum records to return, None for all

        Returns:
            Exercise records sorted by date, most recent first

        Raises:
            StoreError: On store failure
        """
        ...
