"""
Shared pytest fixtures for user-backend tests.
"""
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from user_backend.core.config import reset_settings
from user_backend.di.container import reset_container
from user_backend.infrastructure.db.memory_user_repository import InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "USER_STORE_BACKEND": "memory",
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_db",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        yield env_vars
    reset_settings()


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.user_store_backend = "memory"
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_user_collection = "users"
    mock.log_level = "INFO"
    mock.log_file = None
    mock.cors_allow_origins = ["http://localhost:3000"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("user_backend.core.config.get_settings", return_value=mock), patch(
        "user_backend.di.providers.database_provider.get_settings", return_value=mock
    ), patch("user_backend.infrastructure.db.mongo_connection.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


@pytest.fixture
def memory_repo():
    """Fresh in-memory user store."""
    return InMemoryUserRepository()


@pytest.fixture(autouse=True)
def _fresh_container():
    """Every test starts and ends without a cached DI container."""
    reset_container()
    yield
    reset_container()
