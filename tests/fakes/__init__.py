"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Supports fail_with() to simulate store failures

Usage:
    from tests.fakes import FakeUserRepository, create_user_with_exercises

    repo = FakeUserRepository()
    repo.seed([{"id": "u1", "username": "alice"}])
"""
from typing import Any, Dict, List, Tuple

from tests.fakes.user_repository import FakeUserRepository
from tests.fakes.exercise_repository import FakeExerciseRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_user_with_exercises(
    *,
    user_id: str = "user-1",
    username: str = "alice",
    exercises: List[Tuple[str, Any, str]] = (),
) -> Tuple[FakeUserRepository, FakeExerciseRepository]:
    """
    Create a pair of fakes holding one user and their exercises.

    Args:
        user_id: Id of the seeded user
        username: Username of the seeded user
        exercises: (description, duration, ISO date) tuples

    Returns:
        (user_repo, exercise_repo)
    """
    user_repo = FakeUserRepository()
    user_repo.seed([{"id": user_id, "username": username}])

    exercise_repo = FakeExerciseRepository()
    exercise_repo.seed([
        {
            "user_id": user_id,
            "username": username,
            "description": description,
            "duration": duration,
            "date": date,
        }
        for description, duration, date in exercises
    ])
    return user_repo, exercise_repo


__all__ = [
    "FakeUserRepository",
    "FakeExerciseRepository",
    "create_user_with_exercises",
]
