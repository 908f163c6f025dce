"""
Router package for the Exercise Tracker API.

This package contains all API routers organized by domain:
- health: Health check and landing page
- exercise_tracker: Users and exercise logs under /api/exercise
"""

from api.routers.health import router as health_router
from api.routers.exercise_tracker import router as exercise_tracker_router

__all__ = [
    "health_router",
    "exercise_tracker_router",
]
