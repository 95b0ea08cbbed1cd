"""Repository protocol for wallet owner persistence."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import WalletOwner, WalletOwnerCreateInput, WalletOwnerUpdateInput


class WalletOwnerRepository(Protocol):
    """Storage contract shared by the in-memory and SQL backends.

    Listing and search results are ordered newest ``created_at`` first, with
    ``id`` descending as the tie-breaker. Lookups return ``None`` when nothing
    matches. ``create`` and ``update`` raise a duplicate error when the store
    itself detects an ``id_card`` or ``wallet_number`` collision.
    """

    async def list_all(self) -> Sequence[WalletOwner]:
        ...

    async def get_by_id(self, owner_id: str) -> WalletOwner | None:
        ...

    async def get_by_id_card(self, id_card: str) -> WalletOwner | None:
        ...

    async def get_by_wallet_number(self, wallet_number: str) -> WalletOwner | None:
        ...

    async def create(self, payload: WalletOwnerCreateInput) -> WalletOwner:
        ...

    async def update(self, owner_id: str, payload: WalletOwnerUpdateInput) -> WalletOwner | None:
        ...

    async def delete(self, owner_id: str) -> bool:
        ...

    async def search(self, query: str) -> Sequence[WalletOwner]:
        ...

    async def count(self) -> int:
        ...
