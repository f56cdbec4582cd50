"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and redirects for every request.
- Maps transport and status failures to the core error taxonomy.
- Eases testing: an `httpx.MockTransport` can be injected into the client.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import AppSettings
from core.errors import DecodeError, FetchError
from core.interfaces.fetcher import ResourceFetcher

LOGGER = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the application defaults.

    Why a builder:
    - Centralizes timeouts/headers so every request behaves the same way.
    - `transport` lets tests swap the network for an in-memory backend.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpResourceFetcher(ResourceFetcher):
    """`ResourceFetcher` backed by a shared `httpx.AsyncClient`.

    The client is owned by the caller (open/close it with `async with`).
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch_json(self, url: str) -> Any:
        LOGGER.debug("GET %s", url)
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise FetchError(url, reason=str(exc) or exc.__class__.__name__) from exc

        LOGGER.debug("GET %s -> HTTP %s", url, response.status_code)
        if not response.is_success:
            raise FetchError(url, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(url, reason="body is not valid JSON") from exc
