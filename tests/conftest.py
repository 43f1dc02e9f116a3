"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing application modules
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("ADMIN_PASSWORD", "admin123")
os.environ.setdefault("CART_ID_PREFIX", "LW")

from src.core.store import InMemoryStore  # noqa: E402


@pytest.fixture(scope="session")
def test_settings() -> Generator[Any, None, None]:
    """Provide test settings with cleared cache.

    Yields:
        Settings: Test configuration settings.
    """
    from src.core.config import get_settings

    get_settings.cache_clear()

    settings = get_settings()
    yield settings

    get_settings.cache_clear()


@pytest.fixture
def store() -> InMemoryStore:
    """Provide an empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def sample_items() -> list[dict]:
    """Two lines: 2 ginger 7-packs and 1 beet 12oz bottle."""
    return [
        {
            "product_id": "ginger-shot",
            "product_name": "Ginger Zinger",
            "size": "7-Pack (2oz shots)",
            "quantity": 2,
        },
        {
            "product_id": "beet-shot",
            "product_name": "Beet Boost",
            "size": "12oz Bottle",
            "quantity": 1,
        },
    ]


@pytest.fixture
def client(store: InMemoryStore) -> Generator[TestClient, None, None]:
    """Provide a test client for the FastAPI application backed by ``store``.

    Args:
        store: In-memory store fixture shared with the test.

    Yields:
        TestClient: FastAPI test client.
    """
    from src.core.store import get_store
    from src.main import app

    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client: TestClient, store: InMemoryStore) -> TestClient:
    """Provide a test client with the organizer views unlocked."""
    store.set("is_admin", True)
    return client
