"""
Pytest fixtures shared by the Exercise Tracker API tests.

Provides fake repositories and a TestClient whose repository dependencies
are overridden with those fakes, so no database is required.
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Ensure the project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from api.deps import get_user_repo, get_exercise_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeUserRepository, FakeExerciseRepository


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture(scope="session")
def app(test_settings) -> FastAPI:
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def exercise_repo() -> FakeExerciseRepository:
    return FakeExerciseRepository()


@pytest.fixture
def client(app, user_repo, exercise_repo) -> Generator[TestClient, None, None]:
    """
    Per-test TestClient backed by fresh fake repositories.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_user_repo] = lambda: user_repo
    app.dependency_overrides[get_exercise_repo] = lambda: exercise_repo
    # Unhandled errors are asserted on as 500 responses
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
