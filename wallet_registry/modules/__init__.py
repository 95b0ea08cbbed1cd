"""Feature modules."""

from . import wallet_owners

__all__ = [
    "wallet_owners",
]
