"""Shared fixtures: a throwaway SQLite database, seeded blog rows and an HTTP client."""

from types import SimpleNamespace

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from inplace_editing.core.config import SecuritySettings, get_settings
from inplace_editing.core.container import ApplicationContainer
from inplace_editing.db.models import Category, Post
from inplace_editing.infrastructure.database import dispose_engine, get_session_factory, init_db
from inplace_editing.main import create_app

TEST_SECRET = "test-secret-key"


def make_app(csrf_enabled: bool = False):
    settings = get_settings().model_copy(
        update={"security": SecuritySettings(secret_key=TEST_SECRET, csrf_enabled=csrf_enabled)}
    )
    return create_app(ApplicationContainer(settings=settings))


@pytest_asyncio.fixture
async def database(tmp_path, monkeypatch):
    """Point the engine at a fresh SQLite file and create the tables."""
    monkeypatch.setenv("DATABASE__URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    get_settings.cache_clear()
    await dispose_engine()
    await init_db()
    yield get_session_factory()
    await dispose_engine()
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def blog(database):
    async with database() as session:
        general = Category(name="General")
        python = Category(name="Python")
        session.add_all([general, python])
        await session.flush()

        post = Post(title="Hello", body="First body", category_id=general.id)
        session.add(post)
        await session.commit()

        return SimpleNamespace(post_id=post.id, general_id=general.id, python_id=python.id)


@pytest_asyncio.fixture
async def client(database):
    app = make_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http
