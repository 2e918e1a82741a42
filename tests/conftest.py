"""
pytest configuration and fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from user_directory.app.main import create_app
from user_directory.app.services.user_store import UserStore


@pytest.fixture
def store() -> UserStore:
    """Fresh, empty user store."""
    return UserStore()


@pytest.fixture
def client(store: UserStore) -> TestClient:
    """Test client for an application serving ``store``."""
    return TestClient(create_app(store))
