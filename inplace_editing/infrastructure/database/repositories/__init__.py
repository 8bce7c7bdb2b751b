"""SQLAlchemy-backed repository implementations."""

from .record_repository import SqlRecordRepository

__all__ = ["SqlRecordRepository"]
