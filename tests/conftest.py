"""
pytest configuration and fixtures.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from user_store_api.app.core.config import Settings
from user_store_api.app.core.store import UserStore
from user_store_api.app.main import create_app


@pytest.fixture
def store() -> UserStore:
    """Empty store using the default id strategy."""
    return UserStore()


@pytest.fixture
def app_settings() -> Settings:
    """Test configuration."""
    return Settings(log_level="WARNING", id_strategy="sequence")


@pytest.fixture
def client(app_settings: Settings, store: UserStore) -> Generator[TestClient, None, None]:
    """Client for an application serving the ``store`` fixture."""
    app = create_app(app_settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
