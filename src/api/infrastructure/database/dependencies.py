"""Database session dependencies for FastAPI.

Two engines back the application: ``write`` for onboarding and team changes,
``read`` for tenant resolution and scoped reads. Each is created on first use
together with its sessionmaker and shared by all requests until shutdown.
"""

from __future__ import annotations

import threading
from typing import AsyncGenerator, Callable

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_read_engine, create_write_engine
from infrastructure.observability import DefaultDatabaseEngineProbe
from infrastructure.settings import DatabaseSettings, get_database_settings

_probe = DefaultDatabaseEngineProbe()

_WRITE = "write"
_READ = "read"

_factories: dict[str, Callable[[DatabaseSettings], AsyncEngine]] = {
    _WRITE: create_write_engine,
    _READ: create_read_engine,
}

_engines: dict[str, AsyncEngine] = {}
_sessionmakers: dict[str, async_sessionmaker[AsyncSession]] = {}

_engine_lock = threading.Lock()


def _engine(kind: str) -> AsyncEngine:
    engine = _engines.get(kind)
    if engine is None:
        with _engine_lock:
            engine = _engines.get(kind)
            if engine is None:
                settings = get_database_settings()
                engine = _factories[kind](settings)
                _sessionmakers[kind] = async_sessionmaker(
                    engine, expire_on_commit=False, class_=AsyncSession
                )
                _engines[kind] = engine
                _probe.engine_created(
                    settings.connection_string, settings.pool_max_connections
                )
    return engine


def get_write_engine() -> AsyncEngine:
    """Get the engine used for mutations."""
    return _engine(_WRITE)


def get_read_engine() -> AsyncEngine:
    """Get the engine used for tenant resolution and scoped reads."""
    return _engine(_READ)


async def get_write_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a write session (FastAPI dependency).

    The session does not auto-commit; services open their own
    ``async with session.begin()`` block.
    """
    _engine(_WRITE)
    async with _sessionmakers[_WRITE]() as session:
        yield session


async def get_read_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a read session (FastAPI dependency).

    Read-only by convention, not enforced by the database.
    """
    _engine(_READ)
    async with _sessionmakers[_READ]() as session:
        yield session


async def close_database_connections() -> None:
    """Dispose every engine created so far.

    Called on application shutdown; the next request recreates them.
    """
    for kind in list(_engines):
        engine = _engines.pop(kind)
        _sessionmakers.pop(kind, None)
        await engine.dispose()
        _probe.engine_disposed()
