"""Alembic environment for the in-place editing demo tables.

Offline mode renders SQL against the synchronous form of the configured URL;
online mode reuses the application's async engine.
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection, make_url

from inplace_editing.core.config import get_settings
from inplace_editing.db import models  # noqa: F401
from inplace_editing.infrastructure.database import Base, dispose_engine, get_engine

# async driver -> driver alembic can use without an event loop
SYNC_DRIVERS = {
    "sqlite+aiosqlite": "sqlite",
    "postgresql+asyncpg": "postgresql+psycopg",
    "mysql+aiomysql": "mysql+pymysql",
}

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def offline_url() -> str:
    url = make_url(get_settings().database_url)
    driver = SYNC_DRIVERS.get(url.drivername, url.drivername)
    return url.set(drivername=driver).render_as_string(hide_password=False)


def _migrate(connection: Connection | None = None) -> None:
    if connection is None:
        context.configure(
            url=offline_url(),
            target_metadata=Base.metadata,
            literal_binds=True,
            dialect_opts={"paramstyle": "named"},
        )
    else:
        context.configure(connection=connection, target_metadata=Base.metadata)

    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online() -> None:
    async with get_engine().connect() as connection:
        await connection.run_sync(_migrate)
    await dispose_engine()


if context.is_offline_mode():
    _migrate()
else:
    asyncio.run(_migrate_online())
