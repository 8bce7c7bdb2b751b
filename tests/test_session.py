"""Tests for async engine options and engine lifecycle."""

import pytest

from inplace_editing.core.config import DatabaseSettings, Settings
from inplace_editing.infrastructure.database import dispose_engine, get_engine, get_session_factory
from inplace_editing.infrastructure.database.session import engine_options


def test_engine_options_skip_unset_pool_settings():
    settings = Settings(database=DatabaseSettings(url="sqlite+aiosqlite:///:memory:"))

    assert engine_options(settings) == {"echo": False}


def test_engine_options_pass_pool_settings_and_debug_echo():
    settings = Settings(
        debug=True,
        database=DatabaseSettings(url="postgresql+asyncpg://db/app", pool_size=5, max_overflow=2),
    )

    assert engine_options(settings) == {"echo": True, "pool_size": 5, "max_overflow": 2}


@pytest.mark.asyncio
async def test_dispose_engine_rebuilds_on_next_access(database):
    engine = get_engine()
    assert get_session_factory() is database

    await dispose_engine()

    assert get_engine() is not engine
    await dispose_engine()
