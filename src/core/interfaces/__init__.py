"""Core contracts.

The core depends on these Protocols; adapters provide the implementations.
"""

from core.interfaces.fetcher import ResourceFetcher

__all__ = ["ResourceFetcher"]
