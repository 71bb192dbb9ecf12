"""Gateway: HTTP GET via httpx — implements UrlFetcher port."""

from __future__ import annotations

import logging

import httpx

from flashdeck.l1_entities.errors import SourceReadError

log = logging.getLogger('fd.fetch')


class HttpxUrlFetcher:
    """Fetches text resources with an httpx.AsyncClient per request."""

    def __init__(
        self,
        timeout: float | None = None,
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._follow_redirects = follow_redirects
        self._transport = transport

    async def fetch_text(self, url: str) -> str:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=self._follow_redirects,
                transport=self._transport,
            ) as client:
                resp = await client.get(url)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise SourceReadError(f'HTTP {e.response.status_code} for {url}') from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise SourceReadError(f'Could not fetch {url}: {e}') from e
        log.debug('Fetched %s (%d bytes)', url, len(resp.content))
        return resp.text
