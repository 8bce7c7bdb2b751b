"""Domain service applying in-place edits to records."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from inplace_editing.core.inflection import humanize
from inplace_editing.infrastructure.database.repositories.record_repository import SqlRecordRepository

from .exceptions import RecordNotFoundError
from .models import EditableField, EditRequest, EditResult
from .repository import RecordRepository

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Oooops!"


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _display(value: Any) -> str:
    return "" if value is None else str(value)


class InPlaceEditService:
    """Loads a record, applies a validated write and builds the display text."""

    def __init__(
        self,
        repository: RecordRepository,
        session: AsyncSession,
        *,
        fallback_error_message: str = DEFAULT_ERROR_MESSAGE,
    ) -> None:
        self._repository = repository
        self._session = session
        self._fallback_error_message = fallback_error_message

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        *,
        fallback_error_message: str = DEFAULT_ERROR_MESSAGE,
    ) -> "InPlaceEditService":
        return cls(
            SqlRecordRepository(session),
            session,
            fallback_error_message=fallback_error_message,
        )

    async def apply(self, field: EditableField, request: EditRequest) -> EditResult:
        record = await self._load(field.model, field.type_name, request.record_id)

        if not await record.update_attribute_with_validation(self._session, field.attribute, request.value):
            message = record.errors.on(field.attribute) or self._fallback_error_message
            logger.warning(
                "Rejected %s for %s %s: %s",
                field.action_name,
                field.type_name,
                request.record_id,
                message,
            )
            return EditResult(success=False, display_value=f"{humanize(field.attribute)} {message}")

        logger.info("Applied %s to %s %s", field.action_name, field.type_name, request.record_id)
        if _is_blank(request.value) and field.empty_text:
            return EditResult(success=True, display_value=field.empty_text)

        value = getattr(record, field.attribute)
        if field.foreign_key is not None:
            related = await self._load(field.foreign_key.model, field.foreign_key.type_name, value)
            value = getattr(related, field.foreign_key.display_attribute)
        return EditResult(success=True, display_value=_display(value))

    async def _load(self, model: type, type_name: str, record_id: Any) -> Any:
        record = await self._repository.get_by_id(model, record_id)
        if record is None:
            raise RecordNotFoundError(type_name, record_id)
        return record
