"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from pathlib import Path
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from application.exceptions import AppError
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parents[1] / "public"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="Exercise Tracker API",
        description="Users and their exercise logs",
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _register_error_handlers(app)
    _include_routers(app)

    app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")

    logger.info(f"Exercise Tracker API created (environment={settings.environment})")
    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        )
        logger.info("Sentry initialized for exercise-tracker-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    origins = settings.cors_origins_list
    # Credentials are only allowed with concrete origins, never with "*"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _register_error_handlers(app: FastAPI) -> None:
    """
    Install the generic error handlers.

    Every error that reaches these handlers is answered in plain text:
    - HTTP errors keep their status (unknown routes answer "not found")
    - request validation errors answer 400 with the first message
    - application errors answer with their own status and message
    - anything else answers 500 with the exception message
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = "not found" if exc.status_code == 404 else str(exc.detail)
        return PlainTextResponse(message, status_code=exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = "Invalid request"
        if errors:
            first = errors[0]
            field = first.get("loc", ())[-1] if first.get("loc") else None
            message = f"{field}: {first.get('msg')}" if field is not None else str(first.get("msg"))
        return PlainTextResponse(message, status_code=400)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message} (code={exc.code})")
        return PlainTextResponse(exc.message, status_code=exc.status)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return PlainTextResponse(str(exc) or "Internal Server Error", status_code=500)


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import health_router, exercise_tracker_router

    # Health router (no prefix - /health and / at root)
    app.include_router(health_router)

    # Users and exercise logs (/api/exercise)
    app.include_router(exercise_tracker_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
