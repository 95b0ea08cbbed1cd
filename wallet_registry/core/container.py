"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field

from wallet_registry.core.config import Settings, get_settings
from wallet_registry.infrastructure.database.session import get_engine
from wallet_registry.modules.wallet_owners.memory_repository import MemoryWalletOwnerRepository


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    # Only used when the memory backend is selected; shared by every request.
    memory_repository: MemoryWalletOwnerRepository = field(default_factory=MemoryWalletOwnerRepository)

    def init_infrastructure(self) -> None:
        """Ensure infrastructure singletons (database engine, etc.) are initialised."""
        if self.settings.uses_database:
            get_engine(self.settings)


def build_container(settings: Settings | None = None) -> ApplicationContainer:
    return ApplicationContainer(settings=settings or get_settings())


__all__ = ["ApplicationContainer", "build_container"]
