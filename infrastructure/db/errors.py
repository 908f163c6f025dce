"""
Translation of Supabase/PostgREST failures into application errors.
"""
import logging

from postgrest.exceptions import APIError

from application.exceptions import StoreError, DuplicateUsernameError

logger = logging.getLogger(__name__)

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


def to_store_error(exc: Exception, action: str) -> StoreError:
    """Wrap a client exception, keeping the store's error code when it has one."""
    if isinstance(exc, APIError):
        code = exc.code
        message = exc.message or str(exc)
    else:
        code = None
        message = str(exc) or type(exc).__name__

    logger.error(f"Failed to {action}: {message} (code={code})")

    if code == UNIQUE_VIOLATION:
        return DuplicateUsernameError(message, code=code)
    if "PGRST" in (code or "") or "row-level security" in message.lower():
        logger.error("RLS/Permissions error: Consider using SUPABASE_SERVICE_ROLE_KEY instead of SUPABASE_ANON_KEY for backend API")
    return StoreError(message, code=code)
