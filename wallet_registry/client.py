"""
HTTP client for the wallet owner API.

Wraps ``httpx.AsyncClient`` and keeps fetched results in a TTL cache keyed by
query. Any successful mutation clears every cached owner entry so the next
read goes back to the server.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Hashable, Iterable, List, Literal, Optional

import httpx
from cachetools import TTLCache

from wallet_registry.core.config import get_settings

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "حدث خطأ غير متوقع"


class WalletOwnerApiError(Exception):
    """
    Raised when the API answers with a non-success status.

    Attributes:
        message: Message returned by the server (or a generic fallback)
        status_code: HTTP status code
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class WalletOwnerClient:
    """
    Client for the ``/api/wallet-owners`` endpoints.

    Attributes:
        base_url: Root URL of the service
        timeout: Request timeout in seconds
        cache: TTL cache of decoded responses keyed by query
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        cache_ttl: Optional[float] = None,
        cache_size: Optional[int] = None,
        api_prefix: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self.base_url = base_url if base_url is not None else settings.client.base_url
        self.timeout = timeout if timeout is not None else settings.client.timeout
        self.api_prefix = api_prefix if api_prefix is not None else settings.api_prefix
        self.cache: TTLCache = TTLCache(
            maxsize=cache_size if cache_size is not None else settings.client.cache_size,
            ttl=cache_ttl if cache_ttl is not None else settings.client.cache_ttl,
        )
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "WalletOwnerClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    @property
    def _owners_path(self) -> str:
        return f"{self.api_prefix}/wallet-owners"

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._get_client().request(method, path, **kwargs)
        if response.is_success:
            return response.json()

        message = GENERIC_ERROR_MESSAGE
        try:
            message = response.json().get("message", message)
        except (ValueError, AttributeError):
            pass
        logger.warning("%s %s failed with %s: %s", method, path, response.status_code, message)
        raise WalletOwnerApiError(message, response.status_code)

    async def _cached(self, key: Hashable, method: str, path: str, **kwargs: Any) -> Any:
        if key in self.cache:
            return self.cache[key]
        data = await self._request(method, path, **kwargs)
        self.cache[key] = data
        return data

    def invalidate(self) -> None:
        """Drop every cached owner query."""
        self.cache.clear()

    async def list_owners(self) -> List[Dict[str, Any]]:
        return await self._cached(("list",), "GET", self._owners_path)

    async def search_owners(self, query: str) -> List[Dict[str, Any]]:
        return await self._cached(
            ("search", query), "GET", f"{self._owners_path}/search", params={"q": query}
        )

    async def get_owner(self, owner_id: str) -> Dict[str, Any]:
        return await self._cached(("owner", owner_id), "GET", f"{self._owners_path}/{owner_id}")

    async def create_owner(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        owner = await self._request("POST", self._owners_path, json=payload)
        self.invalidate()
        return owner

    async def update_owner(self, owner_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        owner = await self._request("PUT", f"{self._owners_path}/{owner_id}", json=payload)
        self.invalidate()
        return owner

    async def delete_owner(self, owner_id: str) -> str:
        data = await self._request("DELETE", f"{self._owners_path}/{owner_id}")
        self.invalidate()
        return data["message"]


def _created_at(owner: Dict[str, Any]) -> datetime:
    return datetime.fromisoformat(str(owner["createdAt"]).replace("Z", "+00:00"))


def sort_owners(
    owners: Iterable[Dict[str, Any]],
    by: Literal["date", "name"] = "date",
) -> List[Dict[str, Any]]:
    """Return owners in display order without touching the input.

    ``date`` puts the newest first; ``name`` sorts case-insensitively A-Z.
    Both sorts are stable.
    """
    if by == "name":
        return sorted(owners, key=lambda owner: owner["name"].casefold())
    if by == "date":
        return sorted(owners, key=_created_at, reverse=True)
    raise ValueError(f"unsupported sort key: {by}")
