"""
FastAPI Dependency Providers for the Exercise Tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and use case providers create new instances per-request

Usage in routers:
    from api.deps import get_exercise_log_use_case
    from application.use_cases import GetExerciseLogUseCase

    @router.get("/log")
    def get_log(
        user_id: str,
        use_case: GetExerciseLogUseCase = Depends(get_exercise_log_use_case),
    ):
        return use_case.execute(user_id).to_dict()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_user_repo] = lambda: FakeUserRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import UserRepository, ExerciseRepository

# Concrete implementations
from infrastructure import SupabaseUserRepository, SupabaseExerciseRepository

from application.use_cases import (
    CreateUserUseCase,
    ListUsersUseCase,
    AddExerciseUseCase,
    GetExerciseLogUseCase,
)

from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_user_repo(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> UserRepository:
    """
    Get UserRepository implementation.

    Returns a SupabaseUserRepository instance with injected client.
    The return type is the Protocol to enable easy faking.
    """
    return SupabaseUserRepository(client, table=settings.users_table)


def get_exercise_repo(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> ExerciseRepository:
    """
    Get ExerciseRepository implementation.

    Returns a SupabaseExerciseRepository instance with injected client.
    """
    return SupabaseExerciseRepository(client, table=settings.exercises_table)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_create_user_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
) -> CreateUserUseCase:
    return CreateUserUseCase(user_repo=user_repo)


def get_list_users_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
) -> ListUsersUseCase:
    return ListUsersUseCase(user_repo=user_repo)


def get_add_exercise_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> AddExerciseUseCase:
    return AddExerciseUseCase(user_repo=user_repo, exercise_repo=exercise_repo)


def get_exercise_log_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> GetExerciseLogUseCase:
    return GetExerciseLogUseCase(user_repo=user_repo, exercise_repo=exercise_repo)
