"""Generated in-place edit endpoints.

Each declaration adds one ``POST /set_<type>_<attribute>/{record_id}`` route
to a table; :meth:`InPlaceEditRouter.build` turns the table into a FastAPI
router whose route names equal the action names, so views can resolve them
with ``request.url_for``.

Example::

    editing = InPlaceEditRouter(registry)
    editing.in_place_edit_for("post", "title")
    editing.in_place_edit_for_foreign_key("post", "category_id", "category", "name")
    app.include_router(editing.build(), prefix="/edit")
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from inplace_editing.core.csrf import ForgeryProtection
from inplace_editing.interfaces.http.deps import get_db_session
from inplace_editing.modules.editing import (
    DuplicateEditableFieldError,
    EditableField,
    EditRequest,
    ForeignKeyDisplay,
    InPlaceEditService,
    RecordTypeRegistry,
    action_name_for,
)
from inplace_editing.modules.editing.service import DEFAULT_ERROR_MESSAGE

logger = logging.getLogger(__name__)

VALUE_FIELD = "value"

Endpoint = Callable[..., Awaitable[PlainTextResponse]]


class InPlaceEditRouter:
    """Declarative table of editable (type, attribute) pairs."""

    def __init__(
        self,
        registry: RecordTypeRegistry,
        *,
        protection: ForgeryProtection | None = None,
        fallback_error_message: str = DEFAULT_ERROR_MESSAGE,
    ) -> None:
        self._registry = registry
        self._protection = protection
        self._fallback_error_message = fallback_error_message
        self._fields: dict[str, EditableField] = {}

    def get(self, type_name: str, attribute: str) -> EditableField:
        return self._fields[action_name_for(type_name, attribute)]

    def in_place_edit_for(
        self,
        type_name: str,
        attribute: str,
        *,
        empty_text: str | None = None,
    ) -> EditableField:
        model = self._registry.resolve_attribute(type_name, attribute)
        return self._declare(
            EditableField(type_name=type_name, model=model, attribute=attribute, empty_text=empty_text)
        )

    def in_place_edit_for_foreign_key(
        self,
        type_name: str,
        attribute: str,
        foreign_type: str,
        display_attribute: str,
        *,
        empty_text: str | None = None,
    ) -> EditableField:
        model = self._registry.resolve_attribute(type_name, attribute)
        foreign_model = self._registry.resolve_attribute(foreign_type, display_attribute)
        return self._declare(
            EditableField(
                type_name=type_name,
                model=model,
                attribute=attribute,
                empty_text=empty_text,
                foreign_key=ForeignKeyDisplay(
                    type_name=foreign_type,
                    model=foreign_model,
                    display_attribute=display_attribute,
                ),
            )
        )

    def _declare(self, field: EditableField) -> EditableField:
        if field.action_name in self._fields:
            raise DuplicateEditableFieldError(field.action_name)
        self._fields[field.action_name] = field
        logger.debug("Declared in-place edit action %s", field.action_name)
        return field

    def build(self) -> APIRouter:
        router = APIRouter()
        dependencies = []
        if self._protection is not None:
            dependencies.append(Depends(self._protection.verify_request))

        for field in self._fields.values():
            router.add_api_route(
                f"/{field.action_name}/{{record_id}}",
                self._make_endpoint(field),
                methods=["POST"],
                name=field.action_name,
                response_class=PlainTextResponse,
                dependencies=dependencies,
                summary=f"In-place edit of {field.type_name}.{field.attribute}",
            )
        return router

    def _make_endpoint(self, field: EditableField) -> Endpoint:
        fallback = self._fallback_error_message

        async def endpoint(
            record_id: str,
            request: Request,
            db: AsyncSession = Depends(get_db_session),
        ) -> PlainTextResponse:
            value = await _submitted_value(request)
            service = InPlaceEditService.with_session(db, fallback_error_message=fallback)
            result = await service.apply(field, EditRequest(record_id=record_id, value=value))
            return PlainTextResponse(result.display_value)

        endpoint.__name__ = field.action_name
        return endpoint


async def _submitted_value(request: Request) -> Any:
    form = await request.form()
    value = form.get(VALUE_FIELD)
    if value is None:
        value = request.query_params.get(VALUE_FIELD)
    return value if isinstance(value, str) or value is None else None


__all__ = ["InPlaceEditRouter", "VALUE_FIELD"]
