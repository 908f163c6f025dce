"""
Repository Interfaces (Ports) for the Exercise Tracker API.

This package defines abstract interfaces that decouple the use cases from
infrastructure (database). Implementations are provided in the
infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import UserRepository, ExerciseRepository

    class GetExerciseLogUseCase:
        def __init__(self, user_repo: UserRepository, exercise_repo: ExerciseRepository):
            ...
"""

# User persistence
from application.ports.user_repository import UserRepository

# Exercise persistence
from application.ports.exercise_repository import ExerciseRepository

__all__ = [
    "UserRepository",
    "ExerciseRepository",
]
