"""SQLAlchemy-backed repository implementations."""

from .wallet_owner_repository import SqlWalletOwnerRepository

__all__ = [
    "SqlWalletOwnerRepository",
]
