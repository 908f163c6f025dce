"""
Exercise tracker router for users and their exercise logs.

This router contains endpoints for:
- /api/exercise/new-user - Create a user
- /api/exercise/users - List users
- /api/exercise/add - Add an exercise to a user's log
- /api/exercise/log - Query a user's exercise log

Creation failures are answered with HTTP 200 and a
``{"message", "error_code"}`` body. Log lookups for unknown users and
unexpected store errors are raised and rendered by the application's
error handlers instead.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError

from api.deps import (
    get_create_user_use_case,
    get_list_users_use_case,
    get_add_exercise_use_case,
    get_exercise_log_use_case,
)
from api.schemas import NewUserForm, AddExerciseForm, read_body
from application.use_cases import (
    CreateUserUseCase,
    CreateUserResult,
    ListUsersUseCase,
    AddExerciseUseCase,
    AddExerciseResult,
    GetExerciseLogUseCase,
)
from application.use_cases.create_user import CREATE_USER_FAILED
from application.use_cases.add_exercise import SAVE_EXERCISE_FAILED

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/exercise",
    tags=["Exercise Tracker"],
)


# =============================================================================
# Users
# =============================================================================


@router.post("/new-user")
def create_user_endpoint(
    body: Dict[str, Any] = Depends(read_body),
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
):
    """
    Create a user.

    Returns:
        ``{username, _id}`` on success, ``{message, error_code}`` otherwise
    """
    try:
        form = NewUserForm.model_validate(body)
    except ValidationError as e:
        logger.warning(f"Invalid new-user body: {e.errors()[0]['msg']}")
        return CreateUserResult(success=False, error=CREATE_USER_FAILED).to_dict()

    return use_case.execute(form.username).to_dict()


@router.get("/users")
def list_users_endpoint(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    """
    List every user.

    Returns:
        List of ``{username, _id}``
    """
    return use_case.execute()


# =============================================================================
# Exercises
# =============================================================================


@router.post("/add")
def add_exercise_endpoint(
    body: Dict[str, Any] = Depends(read_body),
    use_case: AddExerciseUseCase = Depends(get_add_exercise_use_case),
):
    """
    Add an exercise to a user's log.

    ``date`` is optional and defaults to now when omitted or unparsable.

    Returns:
        ``{username, description, duration, date, _id}`` where ``_id`` is the
        owning user's id, or ``{message, error_code}`` on failure

    The response keeps ``username`` alongside the exercise fields, matching
    the shape the service has always returned for added exercises.
    """
    try:
        form = AddExerciseForm.model_validate(body)
    except ValidationError as e:
        logger.warning(f"Invalid add-exercise body: {e.errors()[0]['msg']}")
        return AddExerciseResult(success=False, error=SAVE_EXERCISE_FAILED).to_dict()

    result = use_case.execute(
        form.user_id,
        description=form.description,
        duration=form.duration,
        date_raw=form.date,
    )
    return result.to_dict()


@router.get("/log")
def get_exercise_log_endpoint(
    user_id: str = Query(..., alias="userId", description="Id of the user"),
    date_from: Optional[str] = Query(default=None, alias="from", description="Exclusive lower date bound"),
    date_to: Optional[str] = Query(default=None, alias="to", description="Exclusive upper date bound"),
    limit: Optional[str] = Query(default=None, description="Maximum number of entries"),
    use_case: GetExerciseLogUseCase = Depends(get_exercise_log_use_case),
):
    """
    Get a user's exercise log, most recent first.

    Unparsable ``from``/``to`` values are ignored (the window stays open on
    that side) and an invalid ``limit`` returns every entry.

    Returns:
        ``{_id, username, from?, to?, count, log}``
    """
    log = use_case.execute(
        user_id,
        from_raw=date_from,
        to_raw=date_to,
        limit_raw=limit,
    )
    return log.to_dict()
