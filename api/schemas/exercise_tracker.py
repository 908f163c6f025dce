"""
Exercise Tracker Schemas.

Schemas for:
- NewUserForm: Body of POST /api/exercise/new-user
- AddExerciseForm: Body of POST /api/exercise/add

Both endpoints accept either a JSON object or a URL-encoded/multipart form,
so bodies are read with read_body() and validated explicitly by the router
instead of being declared as FastAPI body parameters.
"""

from typing import Any, Dict, Optional, Union

from fastapi import HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_body(request: Request) -> Dict[str, Any]:
    """Read a JSON or form body into a plain dict (empty for other content types)."""
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Malformed JSON body")
        return data if isinstance(data, dict) else {}

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        # Uploaded files are not meaningful here
        return {k: v for k, v in form.items() if isinstance(v, str)}

    return {}


class NewUserForm(BaseModel):
    """Request body for POST /api/exercise/new-user."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    username: Optional[str] = Field(
        default=None,
        description="Unique username",
    )


class AddExerciseForm(BaseModel):
    """Request body for POST /api/exercise/add."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    user_id: Optional[str] = Field(
        default=None,
        alias="userId",
        description="Id of the user the exercise belongs to",
    )
    description: Optional[str] = Field(
        default=None,
        description="What was done",
    )
    duration: Optional[Union[int, float, str]] = Field(
        default=None,
        description="Duration in minutes",
    )
    date: Optional[str] = Field(
        default=None,
        description="When it was done (defaults to now when omitted or unparsable)",
    )
