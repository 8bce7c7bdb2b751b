"""Server-rendered view layer: in-place editor helpers and templates."""

from .helpers import EditorOptionsError, InPlaceMacros, install_helpers

__all__ = ["EditorOptionsError", "InPlaceMacros", "install_helpers"]
