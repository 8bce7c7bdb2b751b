"""In-place editing domain specific exceptions."""


class InPlaceEditError(Exception):
    """Base class for in-place editing errors."""


class UnknownRecordTypeError(InPlaceEditError, LookupError):
    """Raised when a record type name has not been registered."""


class UnknownAttributeError(InPlaceEditError, LookupError):
    """Raised when an editable attribute is not a mapped column of its model."""


class DuplicateEditableFieldError(InPlaceEditError):
    """Raised when the same ``set_<type>_<attribute>`` action is declared twice."""


class RecordNotFoundError(InPlaceEditError, LookupError):
    """Raised when the record (or the related record) cannot be loaded."""

    def __init__(self, type_name: str, record_id: object) -> None:
        self.type_name = type_name
        self.record_id = record_id
        super().__init__(f"{type_name} with id {record_id!r} not found")
