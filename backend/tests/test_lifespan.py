"""
Products API: Application Lifespan Tests
===========================================

What:  Startup and shutdown of apps built by create_app().
How:   Enters `app.router.lifespan_context(app)` directly, which runs the
       same startup/shutdown code uvicorn runs (ASGITransport skips it).

What we test:
    ✅ setup_logging runs with the configured level
    ✅ STORE_BACKEND=sql opens a SqlProductStore at startup
    ✅ samples are seeded into an empty store only, so restarts do not duplicate them
    ✅ stores the app built are closed at shutdown
    ✅ injected stores are neither seeded nor closed
"""

from unittest.mock import patch

import pytest

from products_api.config import Settings
from products_api.main import create_app
from products_api.store.memory import InMemoryProductStore
from products_api.store.sql import SqlProductStore


def _sql_settings(tmp_path, **overrides):
    values = {
        "store_backend": "sql",
        "seed_sample_products": True,
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'app.db'}",
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


async def _run_app(config):
    """Start and stop one app; return its store and the product names seen while up."""
    app = create_app(config=config)
    async with app.router.lifespan_context(app):
        store = app.state.store
        return store, [p.name for p in await store.list_all()]


class TestStartup:
    """What happens before the first request."""

    @pytest.mark.asyncio
    async def test_setup_logging_uses_configured_level(self, tmp_path):
        """Startup should configure logging at LOG_LEVEL."""
        with patch("products_api.main.setup_logging") as mock_setup:
            await _run_app(_sql_settings(tmp_path, log_level="error"))

        mock_setup.assert_called_once_with("ERROR")

    @pytest.mark.asyncio
    async def test_sql_backend_opened_and_seeded(self, tmp_path):
        """An app without a store opens the SQL backend and seeds it."""
        with patch("products_api.main.setup_logging"):
            store, names = await _run_app(_sql_settings(tmp_path))

        assert isinstance(store, SqlProductStore)
        assert names == ["Tomato Soup", "Yo-yo", "Hammer"]

    @pytest.mark.asyncio
    async def test_restart_does_not_seed_twice(self, tmp_path):
        """A second startup on the same database keeps exactly three products."""
        config = _sql_settings(tmp_path)

        with patch("products_api.main.setup_logging"):
            await _run_app(config)
            _, names = await _run_app(config)

        assert names == ["Tomato Soup", "Yo-yo", "Hammer"]

    @pytest.mark.asyncio
    async def test_memory_backend_seeded_with_ids_from_one(self):
        """The default in-memory store gets the samples as ids 1..3."""
        config = Settings(store_backend="memory", seed_sample_products=True, log_level="WARNING")
        app = create_app(config=config)

        with patch("products_api.main.setup_logging"):
            async with app.router.lifespan_context(app):
                products = await app.state.store.list_all()

        assert isinstance(app.state.store, InMemoryProductStore)
        assert [p.id for p in products] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_seeding_off_leaves_store_empty(self, tmp_path):
        """SEED_SAMPLE_PRODUCTS=false starts with no products."""
        with patch("products_api.main.setup_logging"):
            _, names = await _run_app(_sql_settings(tmp_path, seed_sample_products=False))

        assert names == []


class TestShutdown:
    """Store ownership at shutdown."""

    @pytest.mark.asyncio
    async def test_owned_sql_store_closed(self, tmp_path):
        """The SQL store the app opened is closed when the app stops."""
        closed = []
        real_close = SqlProductStore.close

        async def tracking_close(store):
            closed.append(store)
            await real_close(store)

        with patch("products_api.main.setup_logging"), \
                patch.object(SqlProductStore, "close", tracking_close):
            store, _ = await _run_app(_sql_settings(tmp_path))

        assert closed == [store]

    @pytest.mark.asyncio
    async def test_injected_store_not_seeded_or_closed(self, mock_store):
        """A store passed to create_app belongs to the caller."""
        app = create_app(
            store=mock_store,
            config=Settings(seed_sample_products=True, log_level="WARNING"),
        )

        with patch("products_api.main.setup_logging"):
            async with app.router.lifespan_context(app):
                assert app.state.store is mock_store

        mock_store.add.assert_not_awaited()
        mock_store.count.assert_not_awaited()
        mock_store.close.assert_not_awaited()
