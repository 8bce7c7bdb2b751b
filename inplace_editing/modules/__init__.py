"""Domain modules."""

from . import editing

__all__ = ["editing"]
