"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- exercise_tracker: User and exercise request bodies
"""

from api.schemas.exercise_tracker import (
    NewUserForm,
    AddExerciseForm,
    read_body,
)

__all__ = [
    "NewUserForm",
    "AddExerciseForm",
    "read_body",
]
