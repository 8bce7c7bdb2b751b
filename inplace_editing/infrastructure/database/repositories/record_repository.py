"""SQLAlchemy implementation of the editable record repository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession


class SqlRecordRepository:
    """Record repository backed by the SQLAlchemy session identity map.

    Satisfies :class:`inplace_editing.modules.editing.repository.RecordRepository`.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, model: type, record_id: Any) -> Any | None:
        key = self._primary_key(model, record_id)
        if key is None:
            return None
        return await self._session.get(model, key)

    @staticmethod
    def _primary_key(model: type, record_id: Any) -> Any | None:
        if record_id is None:
            return None
        column = inspect(model).primary_key[0]
        try:
            python_type = column.type.python_type
        except NotImplementedError:
            return record_id
        if python_type is int and not isinstance(record_id, int):
            try:
                return int(str(record_id).strip())
            except ValueError:
                return None
        return record_id
