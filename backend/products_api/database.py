"""
Products API: Database Engine Helpers
=======================================

What:  Async SQLAlchemy engine/session factories and the declarative Base.
How:   Engines are built on demand by `create_engine` so importing this
       module never opens a connection; only the sql backend calls it.
Who:   Used by SqlProductStore and by the app lifespan.

Schema management:
    Tables are created with `Base.metadata.create_all` when the SQL store
    starts. There are no migrations.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Build an async engine for `database_url`.

    SQLite (aiosqlite) ignores pool sizing, so pool options are only passed
    for server databases.
    """
    options: Dict[str, Any] = {"echo": echo}
    if not database_url.startswith("sqlite"):
        options.update(pool_pre_ping=True, pool_recycle=3600)
    return create_async_engine(database_url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: attributes stay readable after commit
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    """Create any missing tables registered on Base.metadata."""
    # Import registers the model on Base.metadata
    from products_api.models import product  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
