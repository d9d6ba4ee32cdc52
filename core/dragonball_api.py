# =============================================================================
# core/dragonball_api.py  —  Dragon Ball API Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs the single outbound GET behind each tool and hands back the
#   decoded JSON body untouched.
#
#   list_characters(page, limit) → GET {base}/characters?page=..&limit=..
#   get_character(character_id)  → GET {base}/characters/{id}
#
# FAILURES:
#   Non-2xx status               → UpstreamHttpError (carries status_code)
#   Network error / timeout      → TransportError
#   Body that is not valid JSON  → TransportError
#   No retry, no fallback data, no caching.
#
# ONE CLIENT PER CALL:
#   Every request opens its own httpx.AsyncClient inside `async with`, so
#   concurrent tool calls share no connection state.  Tests inject an
#   httpx.MockTransport through the `transport` argument.
# =============================================================================

from typing import Any, Optional

import httpx

from core.config import DEFAULT_API_BASE, DEFAULT_HTTP_TIMEOUT
from core.errors import TransportError, UpstreamHttpError


class DragonBallClient:
    """Thin async client for the public Dragon Ball REST API."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def list_characters(self, page: int = 1, limit: int = 10) -> dict[str, Any]:
        """Fetch one page of the character listing.

        Returns the paginated envelope ({items, meta, links}) as decoded JSON.
        """
        return await self._get("/characters", params={"page": page, "limit": limit})

    async def get_character(self, character_id: int) -> dict[str, Any]:
        """Fetch one character, including origin planet and transformations."""
        return await self._get(f"/characters/{character_id}")

    async def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        if not response.is_success:
            raise UpstreamHttpError(response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(f"Malformed JSON from {url}: {exc}") from exc
