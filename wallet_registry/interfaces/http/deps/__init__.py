"""Reusable FastAPI dependencies."""

from .wallet_owners import get_container, get_wallet_owner_repository, get_wallet_owner_service

__all__ = [
    "get_container",
    "get_wallet_owner_repository",
    "get_wallet_owner_service",
]
