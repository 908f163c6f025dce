"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Errors carrying a ``status`` are rendered with that HTTP status by the
handlers registered in backend.main; anything else becomes a 500.
"""
from typing import Optional


class AppError(Exception):
    """Base class for errors surfaced through the generic error handler."""

    status: int = 500

    def __init__(self, message: str, *, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class StoreError(AppError):
    """The backing store rejected or failed an operation.

    ``code`` is passed through unchanged from the store (e.g. a PostgREST
    or Postgres error code) so callers can report it to clients.
    """

    pass


class DuplicateUsernameError(StoreError):
    """A user with the same username already exists."""

    status = 400


class UserNotFoundError(AppError):
    """No user exists for the requested id."""

    status = 404

    def __init__(self, user_id: Optional[str]):
        super().__init__("unknown userId")
        self.user_id = user_id
