"""Contract for the transport collaborator.

Why Protocol:
- The aggregator treats HTTP as an injected capability, not an owned
  subsystem. Any object with a matching `fetch_json` works (httpx adapter,
  in-memory fake, recorded fixtures).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ResourceFetcher(Protocol):
    """Minimal contract: GET a URL and return its decoded JSON body.

    Rules:
    - `fetch_json` is async because it performs I/O.
    - Raises `core.errors.FetchError` on transport failure or non-2xx status.
    - Raises `core.errors.DecodeError` when the body is not valid JSON.
    """

    async def fetch_json(self, url: str) -> Any:
        ...
