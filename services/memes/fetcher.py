# services/memes/fetcher.py
from typing import Any, Dict, Optional

import httpx
from loguru import logger

from core.config import Settings, get_settings
from core.exceptions import FetchError


class PageFetcher:
    """
    Fetches HTML pages with the fixed browser-like header set.

    An ``httpx.AsyncClient`` may be injected (tests pass one built on
    ``httpx.MockTransport``); otherwise one is created and owned here.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self.http_client = client or httpx.AsyncClient(
            headers=self.settings.request_headers(),
            timeout=self.settings.TIMEOUT,
            follow_redirects=True,
        )

    async def fetch(self, url: str, params: Optional[Dict[str, Any]] = None) -> str:
        """Return the body of ``url``; raise ``FetchError`` on any transport or status failure."""
        logger.debug(f"GET {url} params={params}")
        try:
            response = await self.http_client.get(url, params=params, headers=self.settings.request_headers())
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"HTTP {exc.response.status_code} for {url}",
                url=url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Request to {url} failed: {exc}", url=url) from exc
        return response.text

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "PageFetcher":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
