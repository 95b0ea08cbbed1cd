"""Domain models for wallet owners."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class WalletOwner:
    id: str
    name: str
    id_card: str
    wallet_number: str
    created_at: datetime
    phone: Optional[str] = None


@dataclass(slots=True)
class WalletOwnerCreateInput:
    name: str
    id_card: str
    wallet_number: str
    phone: Optional[str] = None


# Sentinel used to differentiate between "not provided" and explicit None.
UNSET = object()


@dataclass(slots=True)
class WalletOwnerUpdateInput:
    name: str | object = UNSET
    id_card: str | object = UNSET
    wallet_number: str | object = UNSET
    phone: Optional[str] | object = UNSET

    def changes(self) -> dict[str, object]:
        """Fields explicitly provided by the caller."""
        return {
            field: value
            for field, value in (
                ("name", self.name),
                ("id_card", self.id_card),
                ("wallet_number", self.wallet_number),
                ("phone", self.phone),
            )
            if value is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.changes()
