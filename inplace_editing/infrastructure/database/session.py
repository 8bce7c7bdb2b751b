"""Async SQLAlchemy engine and session management.

The engine is built lazily from ``settings.database`` and kept in a single
module-level holder; :func:`dispose_engine` drops it so a changed database
URL (tests, CLI scripts) takes effect on the next access.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from inplace_editing.core.config import Settings, get_settings
from inplace_editing.infrastructure.database.base import Base


@dataclass(slots=True)
class _DatabaseHandle:
    engine: AsyncEngine
    sessions: async_sessionmaker[AsyncSession]


_handle: _DatabaseHandle | None = None


def engine_options(settings: Settings) -> dict[str, Any]:
    """Keyword arguments for ``create_async_engine`` derived from settings."""
    database = settings.database
    options: dict[str, Any] = {"echo": database.echo or settings.debug}
    pool_options = {"pool_size": database.pool_size, "max_overflow": database.max_overflow}
    options.update({key: value for key, value in pool_options.items() if value is not None})
    return options


def _open() -> _DatabaseHandle:
    global _handle
    if _handle is None:
        settings = get_settings()
        engine = create_async_engine(settings.database_url, **engine_options(settings))
        _handle = _DatabaseHandle(
            engine=engine,
            sessions=async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False),
        )
    return _handle


def get_engine() -> AsyncEngine:
    return _open().engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return _open().sessions


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session: commit when the handler returns, roll back on error."""
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create the editable model tables (alembic migrations are preferred outside tests)."""
    # models register themselves on Base.metadata when imported
    from inplace_editing.db import models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    global _handle
    handle, _handle = _handle, None
    if handle is not None:
        await handle.engine.dispose()
