"""
Infrastructure Layer for the Exercise Tracker API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseUserRepository,
    SupabaseExerciseRepository,
)

__all__ = [
    "SupabaseUserRepository",
    "SupabaseExerciseRepository",
]
