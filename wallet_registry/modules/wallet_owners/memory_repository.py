"""In-process wallet owner repository.

Records live in a dict keyed by id, so the data disappears with the process
and must not be shared between worker processes.
"""

from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Iterable, Sequence

from wallet_registry.core.clock import utcnow_monotonic

from .exceptions import DuplicateIdCardError, DuplicateWalletNumberError
from .models import WalletOwner, WalletOwnerCreateInput, WalletOwnerUpdateInput
from .repository import WalletOwnerRepository


def _newest_first(owners: Iterable[WalletOwner]) -> list[WalletOwner]:
    return sorted(owners, key=lambda owner: (owner.created_at, owner.id), reverse=True)


def matches_query(owner: WalletOwner, query: str) -> bool:
    """Case-insensitive substring match over the searchable fields."""
    needle = query.lower()
    fields = [owner.name, owner.id_card, owner.wallet_number]
    if owner.phone is not None:
        fields.append(owner.phone)
    return any(needle in value.lower() for value in fields)


class MemoryWalletOwnerRepository(WalletOwnerRepository):
    """Wallet owner repository backed by a plain dict."""

    def __init__(self) -> None:
        self._owners: dict[str, WalletOwner] = {}

    async def list_all(self) -> Sequence[WalletOwner]:
        return [replace(owner) for owner in _newest_first(self._owners.values())]

    async def get_by_id(self, owner_id: str) -> WalletOwner | None:
        owner = self._owners.get(owner_id)
        return replace(owner) if owner is not None else None

    async def get_by_id_card(self, id_card: str) -> WalletOwner | None:
        return self._find(lambda owner: owner.id_card == id_card)

    async def get_by_wallet_number(self, wallet_number: str) -> WalletOwner | None:
        return self._find(lambda owner: owner.wallet_number == wallet_number)

    async def create(self, payload: WalletOwnerCreateInput) -> WalletOwner:
        self._ensure_unique(payload.id_card, payload.wallet_number)
        owner = WalletOwner(
            id=str(uuid.uuid4()),
            name=payload.name,
            id_card=payload.id_card,
            wallet_number=payload.wallet_number,
            phone=payload.phone,
            created_at=utcnow_monotonic(),
        )
        self._owners[owner.id] = owner
        return replace(owner)

    async def update(self, owner_id: str, payload: WalletOwnerUpdateInput) -> WalletOwner | None:
        current = self._owners.get(owner_id)
        if current is None:
            return None

        changes = payload.changes()
        self._ensure_unique(
            changes.get("id_card"),
            changes.get("wallet_number"),
            exclude_id=owner_id,
        )
        updated = replace(current, **changes)
        self._owners[owner_id] = updated
        return replace(updated)

    async def delete(self, owner_id: str) -> bool:
        return self._owners.pop(owner_id, None) is not None

    async def search(self, query: str) -> Sequence[WalletOwner]:
        found = (owner for owner in self._owners.values() if matches_query(owner, query))
        return [replace(owner) for owner in _newest_first(found)]

    async def count(self) -> int:
        return len(self._owners)

    def clear(self) -> None:
        self._owners.clear()

    def _find(self, predicate) -> WalletOwner | None:
        for owner in self._owners.values():
            if predicate(owner):
                return replace(owner)
        return None

    def _ensure_unique(
        self,
        id_card: object,
        wallet_number: object,
        *,
        exclude_id: str | None = None,
    ) -> None:
        others = [owner for owner in self._owners.values() if owner.id != exclude_id]
        if id_card is not None and any(owner.id_card == id_card for owner in others):
            raise DuplicateIdCardError(str(id_card))
        if wallet_number is not None and any(owner.wallet_number == wallet_number for owner in others):
            raise DuplicateWalletNumberError(str(wallet_number))
