"""Database infrastructure helpers (engine, sessions, migrations)."""

from .base import Base, RecordErrors
from .session import dispose_engine, get_engine, get_session, get_session_factory, init_db

__all__ = [
    "Base",
    "RecordErrors",
    "dispose_engine",
    "get_engine",
    "get_session",
    "get_session_factory",
    "init_db",
]
