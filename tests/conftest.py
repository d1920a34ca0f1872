"""
Pytest configuration and fixtures for the Exercise Tracker tests.
"""

import os

import pytest

# Set test environment before importing app modules
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from exercise_tracker.app.core.store import UserStore  # noqa: E402
from exercise_tracker.app.main import create_app  # noqa: E402


@pytest.fixture
def store():
    """An empty in-memory store."""
    return UserStore()


@pytest.fixture
def client(store):
    """Test client for an app serving ``store``."""
    with TestClient(create_app(store)) as client:
        yield client


@pytest.fixture
def user_id(client):
    """Id of a freshly created ``fcc_test`` user."""
    response = client.post("/api/users", data={"username": "fcc_test"})
    assert response.status_code == 200
    return response.json()["id"]
