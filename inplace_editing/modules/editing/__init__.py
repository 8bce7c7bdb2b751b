"""In-place editing domain package."""

from .exceptions import (
    DuplicateEditableFieldError,
    InPlaceEditError,
    RecordNotFoundError,
    UnknownAttributeError,
    UnknownRecordTypeError,
)
from .models import EditableField, EditRequest, EditResult, ForeignKeyDisplay, action_name_for
from .registry import RecordTypeRegistry
from .service import InPlaceEditService

__all__ = [
    "DuplicateEditableFieldError",
    "EditRequest",
    "EditResult",
    "EditableField",
    "ForeignKeyDisplay",
    "InPlaceEditError",
    "InPlaceEditService",
    "RecordNotFoundError",
    "RecordTypeRegistry",
    "UnknownAttributeError",
    "UnknownRecordTypeError",
    "action_name_for",
]
