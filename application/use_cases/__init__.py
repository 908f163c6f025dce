"""
Application Use Cases for the Exercise Tracker API.

This package contains application-level use cases that coordinate the
repository ports. Use cases are the entry points for business operations
and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate repository ports and domain helpers
- Dependencies are injected via constructors for testability
- Soft failures come back as result objects; hard failures are raised

Usage:
    from application.use_cases import GetExerciseLogUseCase

    use_case = GetExerciseLogUseCase(user_repo=user_repo, exercise_repo=exercise_repo)
    log = use_case.execute("Xk3_f9QaZ", from_raw="2023-01-01", to_raw="2023-01-31")
"""

from application.use_cases.create_user import (
    CreateUserUseCase,
    CreateUserResult,
    ListUsersUseCase,
)
from application.use_cases.add_exercise import (
    AddExerciseUseCase,
    AddExerciseResult,
)
from application.use_cases.get_exercise_log import (
    GetExerciseLogUseCase,
    ExerciseLog,
    LogEntry,
)

__all__ = [
    # Users
    "CreateUserUseCase",
    "CreateUserResult",
    "ListUsersUseCase",
    # Exercises
    "AddExerciseUseCase",
    "AddExerciseResult",
    # Log query
    "GetExerciseLogUseCase",
    "ExerciseLog",
    "LogEntry",
]
