# services/memes/search_extractor.py
"""
Reads the search results page: walks every gallery's item links in document
order and turns each into a ``SearchHit`` until ``limit`` hits are collected.
"""

from typing import Iterator, List, Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger

from models.meme import ImageRef, SearchHit

from .attributes import attr, first_attr, first_present
from .config_loader import SearchSelectors, get_selectors


def _iter_items(soup: BeautifulSoup, sel: SearchSelectors) -> Iterator[Tag]:
    for gallery in soup.select(sel.gallery):
        yield from gallery.select(sel.item)


def _hit_from_item(item: Tag, sel: SearchSelectors, base_url: str) -> Optional[SearchHit]:
    href = first_attr(item, ["href"])
    if not href:
        return None
    thumb = item.select_one(sel.thumbnail)
    return SearchHit(
        title=first_attr(item, [sel.title_attr]),
        link=f"{base_url}{href}",
        thumbnail=ImageRef(
            url=first_attr(thumb, sel.thumbnail_src_attrs),
            alt=first_present(thumb, [attr("alt")]),
        ),
    )


def extract_search_hits(
    html: str,
    base_url: str,
    limit: int = 10,
    sel: Optional[SearchSelectors] = None,
) -> List[SearchHit]:
    """Return at most ``limit`` hits from a search results page, in page order."""
    sel = sel or get_selectors().search
    soup = BeautifulSoup(html, "html.parser")

    hits: List[SearchHit] = []
    if limit <= 0:
        return hits
    for item in _iter_items(soup, sel):
        hit = _hit_from_item(item, sel, base_url)
        if hit is None:
            logger.debug("Skipping search item without a link")
            continue
        hits.append(hit)
        if len(hits) >= limit:
            break
    return hits
