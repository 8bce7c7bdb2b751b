"""View helpers rendering script.aculo.us in-place editors.

``in_place_editor`` makes the DOM element ``field_id`` editable: clicking it
shows a small form that is posted to ``options["url"]``; the response body
replaces the element's content. ``in_place_collection_editor`` does the same
with a ``<select>`` built from ``options["collection"]``.

``in_place_editor_field`` and ``in_place_editor_select_field`` also render
the element itself for a record attribute and point the editor at the
generated ``set_<type>_<attribute>`` route.

Recognised options (all optional except ``url``):

``url``
    Target of the submission; a path string, or a mapping with an
    ``action`` route name plus its path parameters.
``rows`` / ``cols`` / ``size``
    Text area rows (more than 1 uses a TEXTAREA), input width.
``cancel_text`` / ``save_text``
    Labels of the cancel and ok controls.
``loading_text`` / ``saving_text``
    Texts shown while loading or submitting.
``external_control``
    Id of an element that also enters edit mode.
``load_text_url``
    URL the editor fetches its initial text from.
``options``
    Passed through to ``Ajax.Updater``.
``with``
    JavaScript expression giving the submitted parameters; ``form`` is in
    scope.
``script``
    Evaluate the response as JavaScript.
``click_to_edit_text``
    Tooltip on mouseover.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from jinja2 import pass_context
from markupsafe import Markup, escape

from inplace_editing.core.config import EditorSettings
from inplace_editing.core.csrf import TOKEN_FIELD, ForgeryProtection
from inplace_editing.modules.editing import action_name_for

from .options import (
    COLLECTION_EDITOR,
    DEFAULT_WITH,
    TEXT_EDITOR,
    build_js_options,
    escape_javascript,
    options_for_javascript,
)

logger = logging.getLogger(__name__)

TEXT_CONSTRUCTOR = "Ajax.InPlaceEditor"
COLLECTION_CONSTRUCTOR = "Ajax.InPlaceCollectionEditor"

UrlFor = Callable[..., str]


class EditorOptionsError(ValueError):
    """Raised when editor options are incomplete."""


def javascript_tag(content: str) -> Markup:
    return Markup('<script type="text/javascript">\n//<![CDATA[\n{}\n//]]>\n</script>').format(
        Markup(content)
    )


def content_tag(name: str, content: Any, attributes: Mapping[str, Any]) -> Markup:
    attrs = "".join(
        f' {escape(key)}="{escape(value)}"'
        for key, value in attributes.items()
        if value is not None
    )
    body = "" if content is None else escape(content)
    return Markup(f"<{escape(name)}{attrs}>{body}</{escape(name)}>")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


class InPlaceMacros:
    """Helper set bound to one URL resolver and forgery protection."""

    def __init__(
        self,
        *,
        url_for: UrlFor,
        protection: ForgeryProtection | None = None,
        editor_settings: EditorSettings | None = None,
    ) -> None:
        self._url_for = url_for
        self._protection = protection
        self._settings = editor_settings or EditorSettings()

    @classmethod
    def for_request(
        cls,
        request: Request,
        protection: ForgeryProtection | None = None,
        editor_settings: EditorSettings | None = None,
    ) -> "InPlaceMacros":
        def url_for(name: str, **path_params: Any) -> str:
            params = {key: str(value) for key, value in path_params.items()}
            return request.url_for(name, **params).path

        return cls(url_for=url_for, protection=protection, editor_settings=editor_settings)

    def resolve_url(self, target: Any) -> str:
        if isinstance(target, Mapping):
            params = dict(target)
            action = params.pop("action", None)
            if not action:
                raise EditorOptionsError("url mapping needs an 'action' route name")
            return self._url_for(action, **params)
        if target is None or target == "":
            raise EditorOptionsError("in-place editors require a 'url' option")
        return str(target)

    def protect_against_forgery(self) -> bool:
        return self._protection is not None and self._protection.is_active

    def in_place_editor(self, field_id: str, options: Mapping[str, Any] | None = None) -> Markup:
        return self._editor(TEXT_CONSTRUCTOR, TEXT_EDITOR, field_id, options or {})

    def in_place_collection_editor(self, field_id: str, options: Mapping[str, Any] | None = None) -> Markup:
        return self._editor(COLLECTION_CONSTRUCTOR, COLLECTION_EDITOR, field_id, options or {})

    def in_place_editor_field(
        self,
        type_name: str,
        attribute: str,
        record: Any,
        tag_options: Mapping[str, Any] | None = None,
        editor_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        """Render the attribute value inside an editable element plus its editor script."""
        tag_options = dict(tag_options or {})
        default_value = tag_options.pop("default_value", None)
        value = getattr(record, attribute)
        if _is_blank(value):
            value = default_value
        return self._field(type_name, attribute, record, value, tag_options, editor_options, self.in_place_editor)

    def in_place_editor_select_field(
        self,
        type_name: str,
        attribute: str,
        record: Any,
        tag_options: Mapping[str, Any] | None = None,
        editor_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        """Like :meth:`in_place_editor_field` with a select box.

        For foreign keys pass ``initial_value`` in ``tag_options`` to show a
        label instead of the raw key.
        """
        tag_options = dict(tag_options or {})
        value = getattr(record, attribute)
        if "initial_value" in tag_options:
            value = tag_options.pop("initial_value")
        return self._field(
            type_name, attribute, record, value, tag_options, editor_options, self.in_place_collection_editor
        )

    def _field(
        self,
        type_name: str,
        attribute: str,
        record: Any,
        display_value: Any,
        tag_options: dict[str, Any],
        editor_options: Mapping[str, Any] | None,
        emit: Callable[[str, Mapping[str, Any]], Markup],
    ) -> Markup:
        record_id = getattr(record, "id")
        attributes: dict[str, Any] = {
            "tag": self._settings.default_tag,
            "id": f"{type_name}_{attribute}_{record_id}{self._settings.id_suffix}",
            "class": self._settings.field_class,
        }
        attributes.update(tag_options)
        tag = attributes.pop("tag")

        options = dict(editor_options or {})
        if not options.get("url"):
            options["url"] = {"action": action_name_for(type_name, attribute), "record_id": record_id}
        return content_tag(tag, display_value, attributes) + emit(attributes["id"], options)

    def _editor(self, constructor: str, editor: str, field_id: str, options: Mapping[str, Any]) -> Markup:
        options = dict(options)
        target = self.resolve_url(options.get("url"))

        if self.protect_against_forgery():
            token = escape_javascript(self._protection.form_authenticity_token())
            options["with"] = (
                f"{options.get('with') or DEFAULT_WITH}"
                f" + '&{TOKEN_FIELD}=' + encodeURIComponent('{token}')"
            )

        function = f"new {constructor}('{escape_javascript(field_id)}', '{escape_javascript(target)}'"
        js_options = build_js_options(editor, options, self.resolve_url)
        if js_options:
            function += ", " + options_for_javascript(js_options)
        function += ")"
        logger.debug("Rendered %s for #%s", constructor, field_id)
        return javascript_tag(function)


def install_helpers(
    templates: Jinja2Templates,
    protection: ForgeryProtection | None = None,
    editor_settings: EditorSettings | None = None,
) -> None:
    """Expose the helpers as Jinja2 globals bound to the rendering request."""

    def macros(context) -> InPlaceMacros:
        return InPlaceMacros.for_request(context["request"], protection, editor_settings)

    @pass_context
    def in_place_editor(context, field_id, options=None):
        return macros(context).in_place_editor(field_id, options)

    @pass_context
    def in_place_collection_editor(context, field_id, options=None):
        return macros(context).in_place_collection_editor(field_id, options)

    @pass_context
    def in_place_editor_field(context, type_name, attribute, record, tag_options=None, editor_options=None):
        return macros(context).in_place_editor_field(type_name, attribute, record, tag_options, editor_options)

    @pass_context
    def in_place_editor_select_field(context, type_name, attribute, record, tag_options=None, editor_options=None):
        return macros(context).in_place_editor_select_field(
            type_name, attribute, record, tag_options, editor_options
        )

    templates.env.globals.update(
        in_place_editor=in_place_editor,
        in_place_collection_editor=in_place_collection_editor,
        in_place_editor_field=in_place_editor_field,
        in_place_editor_select_field=in_place_editor_select_field,
    )


__all__ = [
    "EditorOptionsError",
    "InPlaceMacros",
    "content_tag",
    "install_helpers",
    "javascript_tag",
]
