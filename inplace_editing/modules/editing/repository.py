"""Repository protocol for editable records."""

from __future__ import annotations

from typing import Any, Protocol


class RecordRepository(Protocol):
    """Loads records by primary key for a given model."""

    async def get_by_id(self, model: type, record_id: Any) -> Any | None:
        ...
