"""HTTP interface: routers and dependencies."""

from fastapi import APIRouter

from wallet_registry.interfaces.http.routers import wallet_owners


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(wallet_owners.router, prefix="/wallet-owners", tags=["钱包持有人"])
    return router


__all__ = [
    "create_api_router",
]
