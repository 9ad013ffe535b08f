"""
Products API: Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── memory_store: Empty InMemoryProductStore
    ├── sql_store: SqlProductStore on a temporary SQLite file (aiosqlite)
    ├── mock_store: AsyncMock standing in for any ProductStore
    ├── sample_product: Unsaved Product instance
    └── test_client: HTTPX AsyncClient wired to an app serving memory_store
"""

import os
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Set before any products_api import builds the settings singleton
os.environ["STORE_BACKEND"] = "memory"
os.environ["SEED_SAMPLE_PRODUCTS"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from products_api.store.base import Product, ProductStore  # noqa: E402
from products_api.store.memory import InMemoryProductStore  # noqa: E402


@pytest.fixture
def memory_store():
    return InMemoryProductStore()


@pytest_asyncio.fixture
async def sql_store(tmp_path):
    """
    SqlProductStore backed by a throwaway SQLite database file.

    A file (not :memory:) so every pooled aiosqlite connection sees the
    same database.
    """
    from products_api.database import create_engine
    from products_api.store.sql import SqlProductStore

    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'products.db'}")
    store = SqlProductStore(engine)
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture
def mock_store():
    """
    An AsyncMock honoring the ProductStore interface.

    Usage:
        mock_store.get_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await service.get_product(mock_store, 1)
    """
    store = AsyncMock(spec=ProductStore)
    store.backend_name = "mock"
    return store


@pytest.fixture
def sample_product():
    return Product(name="Tomato Soup", price=Decimal("1.39"))


@pytest_asyncio.fixture
async def test_client(memory_store):
    """
    HTTPX AsyncClient talking to a fresh app that serves `memory_store`.

    ASGITransport does not run the lifespan, so the store is injected
    directly through create_app(). test_lifespan.py covers startup.
    """
    from products_api.main import create_app

    app = create_app(store=memory_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
