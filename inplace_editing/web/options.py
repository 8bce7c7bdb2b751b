"""Translation table from helper options to script.aculo.us editor options."""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

TEXT_EDITOR = "text"
COLLECTION_EDITOR = "collection"
ALL_EDITORS = frozenset({TEXT_EDITOR, COLLECTION_EDITOR})

DEFAULT_WITH = "Form.serialize(form)"

UrlResolver = Callable[[Any], str]
Formatter = Callable[[Any, UrlResolver], str]

_JS_ESCAPES = {
    "\\": "\\\\",
    "</": "<\\/",
    "\r\n": "\\n",
    "\n": "\\n",
    "\r": "\\n",
    '"': '\\"',
    "'": "\\'",
}
_JS_ESCAPE_RE = re.compile(r"(\\|</|\r\n|[\n\r\"'])")


def escape_javascript(text: Any) -> str:
    """Escape text for use inside a quoted JavaScript string literal."""
    if text is None:
        return ""
    return _JS_ESCAPE_RE.sub(lambda match: _JS_ESCAPES[match.group(1)], str(text))


_SCRIPT_UNSAFE = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}


def script_json(value: Any) -> str:
    """JSON literal that cannot close the surrounding <script> element."""
    text = json.dumps(dict(value) if isinstance(value, Mapping) else value)
    return "".join(_SCRIPT_UNSAFE.get(char, char) for char in text)


def quoted(value: Any, resolve_url: UrlResolver) -> str:
    return f"'{escape_javascript(value)}'"


def raw(value: Any, resolve_url: UrlResolver) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list, tuple)):
        return script_json(value)
    return str(value)


def url(value: Any, resolve_url: UrlResolver) -> str:
    return quoted(resolve_url(value), resolve_url)


def inverted(value: Any, resolve_url: UrlResolver) -> str:
    return raw(not value, resolve_url)


def callback(value: Any, resolve_url: UrlResolver) -> str:
    return f"function(form) {{ return {value} }}"


def collection(value: Any, resolve_url: UrlResolver) -> str:
    if value is None:
        return "[]"
    if isinstance(value, (list, tuple)):
        return script_json([list(item) if isinstance(item, tuple) else item for item in value])
    return str(value)


@dataclass(frozen=True, slots=True)
class EditorOption:
    internal: str
    external: str
    format: Formatter
    editors: frozenset[str] = ALL_EDITORS
    always: bool = False

    def applies_to(self, editor: str) -> bool:
        return editor in self.editors

    def is_supplied(self, options: Mapping[str, Any]) -> bool:
        value = options.get(self.internal)
        return value is not None and value is not False


_TEXT_ONLY = frozenset({TEXT_EDITOR})
_COLLECTION_ONLY = frozenset({COLLECTION_EDITOR})

EDITOR_OPTIONS: tuple[EditorOption, ...] = (
    EditorOption("collection", "collection", collection, _COLLECTION_ONLY, always=True),
    EditorOption("cancel_text", "cancelText", quoted),
    EditorOption("save_text", "okText", quoted),
    EditorOption("ok_button", "okButton", quoted, _TEXT_ONLY),
    EditorOption("ok_link", "okLink", quoted, _TEXT_ONLY),
    EditorOption("loading_text", "loadingText", quoted),
    EditorOption("saving_text", "savingText", quoted),
    EditorOption("rows", "rows", raw),
    EditorOption("cols", "cols", raw),
    EditorOption("size", "size", raw),
    EditorOption("external_control", "externalControl", quoted),
    EditorOption("load_text_url", "loadTextURL", url),
    EditorOption("options", "ajaxOptions", raw),
    EditorOption("script", "htmlResponse", inverted),
    EditorOption("script", "evalScripts", raw, _TEXT_ONLY),
    EditorOption("with", "callback", callback),
    EditorOption("click_to_edit_text", "clickToEditText", quoted),
    EditorOption("text_between_controls", "textBetweenControls", quoted),
    EditorOption("text_before_controls", "textBeforeControls", quoted, _TEXT_ONLY),
    EditorOption("text_after_controls", "textAfterControls", quoted, _TEXT_ONLY),
    EditorOption("cancel_link", "cancelLink", quoted, _TEXT_ONLY),
    EditorOption("on_failure", "onFailure", raw, _TEXT_ONLY),
    EditorOption("on_complete", "onComplete", raw, _TEXT_ONLY),
)


def build_js_options(
    editor: str,
    options: Mapping[str, Any],
    resolve_url: UrlResolver,
) -> dict[str, str]:
    """Map supplied helper options to formatted editor options, in table order."""
    js_options: dict[str, str] = {}
    for option in EDITOR_OPTIONS:
        if not option.applies_to(editor):
            continue
        if option.always or option.is_supplied(options):
            js_options[option.external] = option.format(options.get(option.internal), resolve_url)
    return js_options


def options_for_javascript(js_options: Mapping[str, str]) -> str:
    return "{" + ", ".join(f"{key}: {value}" for key, value in js_options.items()) + "}"


__all__ = [
    "ALL_EDITORS",
    "COLLECTION_EDITOR",
    "DEFAULT_WITH",
    "EDITOR_OPTIONS",
    "EditorOption",
    "TEXT_EDITOR",
    "build_js_options",
    "escape_javascript",
    "script_json",
    "options_for_javascript",
]
