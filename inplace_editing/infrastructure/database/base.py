"""Declarative base shared by all ORM models, with validated single-field writes."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase

from inplace_editing.core.inflection import humanize

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}


class RecordErrors:
    """Validation messages collected per attribute during a write."""

    def __init__(self) -> None:
        self._messages: dict[str, list[str]] = {}

    def add(self, attribute: str, message: str) -> None:
        self._messages.setdefault(attribute, []).append(message)

    def on(self, attribute: str) -> str | None:
        messages = self._messages.get(attribute)
        if not messages:
            return None
        return ", ".join(messages)

    def clear(self) -> None:
        self._messages.clear()

    def full_messages(self) -> list[str]:
        return [
            f"{humanize(attribute)} {message}"
            for attribute, messages in self._messages.items()
            for message in messages
        ]

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __bool__(self) -> bool:
        return bool(self._messages)


def _coerce(python_type: type, raw: str) -> Any:
    text = raw.strip()
    if not text:
        return None
    if python_type is bool:
        lowered = text.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError("is not a valid boolean")
    try:
        return python_type(text)
    except (ValueError, InvalidOperation) as exc:
        raise ValueError("is not a number") from exc


class ValidatedWriteMixin:
    """Adds ``update_attribute_with_validation`` to mapped classes."""

    @property
    def errors(self) -> RecordErrors:
        errors = self.__dict__.get("_record_errors")
        if errors is None:
            errors = RecordErrors()
            self.__dict__["_record_errors"] = errors
        return errors

    def _typecast(self, attribute: str, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        column = inspect(type(self)).columns[attribute]
        try:
            python_type = column.type.python_type
        except NotImplementedError:
            return value
        if python_type in (int, float, bool, Decimal):
            return _coerce(python_type, value)
        return value

    async def update_attribute_with_validation(
        self,
        session: AsyncSession,
        attribute: str,
        value: Any,
    ) -> bool:
        """Set ``attribute`` and flush it; return ``False`` when validation fails.

        Type coercion problems and ``ValueError`` raised by ``@validates``
        hooks are stored on :attr:`errors` under ``attribute``. Database
        errors raised by the flush propagate unchanged.
        """
        self.errors.clear()
        try:
            setattr(self, attribute, self._typecast(attribute, value))
        except ValueError as exc:
            message = str(exc) or "is invalid"
            self.errors.add(attribute, message)
            logger.debug("Validation failed for %s.%s: %s", type(self).__name__, attribute, message)
            return False

        await session.flush()
        return True


class Base(ValidatedWriteMixin, DeclarativeBase):
    """Declarative base for application models."""


__all__ = ["Base", "RecordErrors", "ValidatedWriteMixin"]
