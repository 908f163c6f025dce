"""
Health check router.

This router provides health check endpoints for monitoring and load balancers,
as well as the static landing page served at the root path.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

VIEWS_DIR = Path(__file__).resolve().parents[2] / "views"

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


@router.get("/", include_in_schema=False)
def index():
    """Serve the landing page."""
    return FileResponse(VIEWS_DIR / "index.html", media_type="text/html")
