"""Port: raw content sources for ingestion."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Protocol

# Resolves to the raw file content once its I/O completes.
ContentProvider = Callable[[], Awaitable[str | bytes]]


class UrlFetcher(Protocol):
    """Abstract HTTP GET of a text resource."""

    async def fetch_text(self, url: str) -> str:
        """Return the response body. Raises SourceReadError on any failure."""
        ...
