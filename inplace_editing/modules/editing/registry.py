"""Registry mapping declared record type names to ORM models."""

from __future__ import annotations

import logging

from sqlalchemy import inspect

from inplace_editing.core.inflection import underscore

from .exceptions import UnknownAttributeError, UnknownRecordTypeError

logger = logging.getLogger(__name__)


class RecordTypeRegistry:
    """Resolves type names such as ``post`` to mapped classes at configuration time."""

    def __init__(self) -> None:
        self._models: dict[str, type] = {}

    def register(self, model: type, type_name: str | None = None) -> str:
        name = type_name or underscore(model.__name__)
        self._models[name] = model
        logger.debug("Registered editable record type %s -> %s", name, model.__name__)
        return name

    def resolve(self, type_name: str) -> type:
        try:
            return self._models[type_name]
        except KeyError:
            raise UnknownRecordTypeError(type_name) from None

    def resolve_attribute(self, type_name: str, attribute: str) -> type:
        model = self.resolve(type_name)
        if attribute not in inspect(model).columns:
            raise UnknownAttributeError(f"{type_name}.{attribute}")
        return model

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._models

    def type_names(self) -> list[str]:
        return sorted(self._models)
