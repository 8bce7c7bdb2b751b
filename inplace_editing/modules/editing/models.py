"""Domain models for in-place editing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


def action_name_for(type_name: str, attribute: str) -> str:
    return f"set_{type_name}_{attribute}"


@dataclass(frozen=True, slots=True)
class ForeignKeyDisplay:
    """Related record whose attribute is shown instead of the raw key."""

    type_name: str
    model: type
    display_attribute: str


@dataclass(frozen=True, slots=True)
class EditableField:
    type_name: str
    model: type
    attribute: str
    empty_text: Optional[str] = None
    foreign_key: Optional[ForeignKeyDisplay] = None

    @property
    def action_name(self) -> str:
        return action_name_for(self.type_name, self.attribute)


@dataclass(frozen=True, slots=True)
class EditRequest:
    record_id: str
    value: Any


@dataclass(frozen=True, slots=True)
class EditResult:
    success: bool
    display_value: str
