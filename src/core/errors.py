"""Error taxonomy of the aggregator.

Two failure families, both carrying the URL that caused them:
- `FetchError`: the request could not be made or the status was not 2xx.
- `DecodeError`: the body was not JSON or did not match the expected record.

No stage recovers locally; callers only need to catch `AggregatorError`.
"""

from __future__ import annotations


class AggregatorError(Exception):
    """Base class for every failure surfaced by an aggregation."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url


class FetchError(AggregatorError):
    def __init__(
        self,
        url: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        if status_code is not None:
            message = f"GET failed with HTTP {status_code}"
        else:
            message = f"GET failed: {reason or 'transport error'}"
        super().__init__(url, message)
        self.status_code = status_code
        self.reason = reason


class DecodeError(AggregatorError):
    def __init__(
        self,
        url: str,
        *,
        field: str | None = None,
        reason: str | None = None,
    ) -> None:
        detail = reason or "unexpected body"
        if field:
            message = f"Invalid field '{field}': {detail}"
        else:
            message = f"Could not decode body: {detail}"
        super().__init__(url, message)
        self.field = field
        self.reason = reason
