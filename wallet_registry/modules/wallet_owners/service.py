"""Domain services for wallet owner management."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import (
    DuplicateIdCardError,
    DuplicateWalletNumberError,
    WalletOwnerNotFoundError,
)
from .memory_repository import MemoryWalletOwnerRepository
from .models import UNSET, WalletOwner
from .repository import WalletOwnerRepository
from .validation import validate_create, validate_update

logger = logging.getLogger(__name__)


class WalletOwnerService:
    """Encapsulates wallet owner use cases.

    Uniqueness of ``id_card`` and ``wallet_number`` is checked here before
    every write. The check and the write are separate calls, so concurrent
    writers can still race; the repositories raise the same duplicate errors
    when the store itself rejects the write.
    """

    def __init__(self, repository: WalletOwnerRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "WalletOwnerService":
        # Deferred: the SQL repository imports this package.
        from wallet_registry.infrastructure.database.repositories import SqlWalletOwnerRepository

        return cls(SqlWalletOwnerRepository(session))

    @classmethod
    def in_memory(cls, repository: MemoryWalletOwnerRepository | None = None) -> "WalletOwnerService":
        return cls(repository if repository is not None else MemoryWalletOwnerRepository())

    @property
    def repository(self) -> WalletOwnerRepository:
        return self._repository

    async def list_owners(self) -> Sequence[WalletOwner]:
        return await self._repository.list_all()

    async def search_owners(self, query: str) -> Sequence[WalletOwner]:
        return await self._repository.search(query)

    async def get_owner(self, owner_id: str) -> WalletOwner:
        owner = await self._repository.get_by_id(owner_id)
        if owner is None:
            raise WalletOwnerNotFoundError(owner_id)
        return owner

    async def create_owner(self, data: Any) -> WalletOwner:
        payload = validate_create(data)

        if await self._repository.get_by_id_card(payload.id_card) is not None:
            logger.warning("Rejected owner with duplicate id card %s", payload.id_card)
            raise DuplicateIdCardError(payload.id_card)
        if await self._repository.get_by_wallet_number(payload.wallet_number) is not None:
            logger.warning("Rejected owner with duplicate wallet number %s", payload.wallet_number)
            raise DuplicateWalletNumberError(payload.wallet_number)

        owner = await self._repository.create(payload)
        logger.info("Created wallet owner %s", owner.id)
        return owner

    async def update_owner(self, owner_id: str, data: Any) -> WalletOwner:
        payload = validate_update(owner_id, data)

        current = await self._repository.get_by_id(owner_id)
        if current is None:
            raise WalletOwnerNotFoundError(owner_id)

        if payload.id_card is not UNSET and payload.id_card != current.id_card:
            if await self._repository.get_by_id_card(payload.id_card) is not None:
                logger.warning("Rejected update of %s: id card %s taken", owner_id, payload.id_card)
                raise DuplicateIdCardError(payload.id_card)
        if payload.wallet_number is not UNSET and payload.wallet_number != current.wallet_number:
            if await self._repository.get_by_wallet_number(payload.wallet_number) is not None:
                logger.warning(
                    "Rejected update of %s: wallet number %s taken", owner_id, payload.wallet_number
                )
                raise DuplicateWalletNumberError(payload.wallet_number)

        if payload.is_empty():
            return current

        updated = await self._repository.update(owner_id, payload)
        if updated is None:
            raise WalletOwnerNotFoundError(owner_id)
        logger.info("Updated wallet owner %s", owner_id)
        return updated

    async def delete_owner(self, owner_id: str) -> None:
        if not await self._repository.delete(owner_id):
            raise WalletOwnerNotFoundError(owner_id)
        logger.info("Deleted wallet owner %s", owner_id)
