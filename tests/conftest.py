"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry
from mongomock_motor import AsyncMongoMockClient

from socialmedia.config import Settings
from socialmedia.database.connection import SocialMediaStore, create_store


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the process environment and any .env file."""
    return Settings(
        _env_file=None,
        mongo_url="mongodb://localhost:27017",
        database_name="SocialMediaTest",
        debug=False,
    )


@pytest.fixture
def store(test_settings: Settings) -> SocialMediaStore:
    """In-memory document store exposing the Motor API."""
    return create_store(AsyncMongoMockClient(), test_settings)


@pytest.fixture
def graphql_context(store: SocialMediaStore) -> dict[str, Any]:
    return {"request": None, "store": store}


@pytest.fixture
def mock_info(graphql_context: dict[str, Any]):
    """Create a mock GraphQL info object carrying the test store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = graphql_context
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
