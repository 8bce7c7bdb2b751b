"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from inplace_editing.core.config import Settings, get_settings
from inplace_editing.core.csrf import ForgeryProtection
from inplace_editing.infrastructure.database.session import get_engine
from inplace_editing.modules.editing import RecordTypeRegistry


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    registry: RecordTypeRegistry = field(default_factory=RecordTypeRegistry)
    protection: ForgeryProtection | None = None

    def __post_init__(self) -> None:
        if self.protection is None:
            self.protection = ForgeryProtection(self.settings.security)

    def init_infrastructure(self) -> None:
        """Ensure infrastructure singletons (database engine, etc.) are initialised."""
        get_engine()


@lru_cache()
def get_container() -> ApplicationContainer:
    container = ApplicationContainer(settings=get_settings())
    container.init_infrastructure()
    return container


__all__ = ["ApplicationContainer", "get_container"]
