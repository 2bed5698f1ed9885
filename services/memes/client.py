# services/memes/client.py
"""
Public entry points: ``search`` and ``get_meme``.

Both coroutines fetch a single page and never raise.  Any failure (network,
bad status, unexpected markup, a URL from another site) is logged and turned
into the empty result: ``[]`` for ``search``, ``None`` for ``get_meme``.
"""

from typing import List, Optional

import httpx
from loguru import logger

from core.config import Settings, get_settings
from core.exceptions import InvalidMemeUrlError
from models.meme import MemeDetails, SearchHit

from .config_loader import SelectorConfig, get_selectors
from .fetcher import PageFetcher
from .metadata_extractor import extract_meme
from .search_extractor import extract_search_hits


class MemeClient:
    """Reads search listings and meme pages from the target site."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
        selectors: Optional[SelectorConfig] = None,
    ):
        self.settings = settings or get_settings()
        self._selectors = selectors
        self.fetcher = PageFetcher(client=client, settings=self.settings)

    @property
    def selectors(self) -> SelectorConfig:
        if self._selectors is None:
            self._selectors = get_selectors()
        return self._selectors

    def _validate_meme_url(self, url: str) -> str:
        if not isinstance(url, str):
            raise InvalidMemeUrlError(url, self.settings.BASE_URL)
        url = url.strip()
        if not url.startswith(self.settings.BASE_URL):
            raise InvalidMemeUrlError(url, self.settings.BASE_URL)
        return url

    async def search(self, query: str, max: int = 10) -> List[SearchHit]:
        """
        Search the site for ``query``.

        Args:
            query (str): Free-text search terms
            max (int): Maximum number of hits to return

        Returns:
            List[SearchHit]: Hits in page order, or ``[]`` on any failure
        """
        try:
            if max <= 0:
                return []
            html = await self.fetcher.fetch(self.settings.search_url, params={"q": query})
            hits = extract_search_hits(html, self.settings.BASE_URL, max, self.selectors.search)
        except Exception as e:
            logger.error(f"Searching failed: {e}")
            return []

        logger.info(f"Search for {query!r} returned {len(hits)} hit(s)")
        return hits

    async def get_meme(self, url: str) -> Optional[MemeDetails]:
        """
        Fetch and extract a single meme page.

        Args:
            url (str): Absolute meme page URL on the target site

        Returns:
            Optional[MemeDetails]: The extracted record, or ``None`` on any failure
        """
        try:
            url = self._validate_meme_url(url)
        except InvalidMemeUrlError as e:
            logger.error(f"Please enter a valid meme URL: {e}")
            return None

        try:
            html = await self.fetcher.fetch(url)
            details = extract_meme(html, url, self.selectors)
        except Exception as e:
            logger.error(f"Fetching meme failed: {e}")
            return None

        logger.info(f"Extracted {len(details.sections)} section(s) from {url}")
        return details

    async def aclose(self) -> None:
        await self.fetcher.aclose()

    async def __aenter__(self) -> "MemeClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


# ----------------------------------------------------------------------
# Module-level shortcuts – one short-lived client per call
# ----------------------------------------------------------------------
async def search(query: str, max: int = 10) -> List[SearchHit]:
    async with MemeClient() as client:
        return await client.search(query, max)


async def get_meme(url: str) -> Optional[MemeDetails]:
    async with MemeClient() as client:
        return await client.get_meme(url)
