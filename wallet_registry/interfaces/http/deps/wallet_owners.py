"""Wallet owner related dependency providers."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from wallet_registry.core.container import ApplicationContainer
from wallet_registry.infrastructure.database.repositories.wallet_owner_repository import (
    SqlWalletOwnerRepository,
)
from wallet_registry.infrastructure.database.session import get_session_factory
from wallet_registry.modules.wallet_owners import WalletOwnerRepository, WalletOwnerService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


async def get_wallet_owner_repository(
    container: ApplicationContainer = Depends(get_container),
) -> AsyncGenerator[WalletOwnerRepository, None]:
    if not container.settings.uses_database:
        yield container.memory_repository
        return

    async with get_session_factory()() as session:
        yield SqlWalletOwnerRepository(session)


def get_wallet_owner_service(
    repository: WalletOwnerRepository = Depends(get_wallet_owner_repository),
) -> WalletOwnerService:
    if isinstance(repository, SqlWalletOwnerRepository):
        return WalletOwnerService.with_session(repository.session)
    return WalletOwnerService.in_memory(repository)


__all__ = [
    "get_container",
    "get_wallet_owner_repository",
    "get_wallet_owner_service",
]
