# services/memes/metadata_extractor.py
"""
Fixed-path lookups for everything on a meme page that is not body text:
title, hero image, view count, classification sidebar, tags and the trends
widget.

Each lookup is independent and falls back to an empty value when its node
is missing, so one absent region never costs the rest of the record.
"""

from typing import Any, Callable, Dict, List, Optional, Union

from bs4 import BeautifulSoup, Tag
from loguru import logger

from models.meme import ImageRef, MemeDetails
from models.meme_factory import details_from_mapping

from .attributes import attr, child_attr, first_attr, first_present, text_of
from .config_loader import DetailSelectors, ExtractionRule, SelectorConfig, get_selectors
from .section_walker import walk_sections


def _select_one(region: Optional[Tag], selector: str) -> Optional[Tag]:
    return region.select_one(selector) if region is not None else None


# ----------------------------------------------------------------------
# Header region
# ----------------------------------------------------------------------
def extract_title(header: Optional[Tag], detail: DetailSelectors) -> str:
    return text_of(_select_one(header, detail.title))


def extract_hero_image(header: Optional[Tag], detail: DetailSelectors) -> ImageRef:
    link = _select_one(header, detail.hero_link)
    return ImageRef(
        url=first_attr(link, ["href"]),
        alt=first_present(link, [attr("alt"), child_attr("img", "alt")]),
    )


def parse_views(text: str) -> Optional[int]:
    """``"1,234,567"`` -> ``1234567``; anything non-numeric -> ``None``."""
    digits = text.strip().replace(",", "")
    if not digits.isdecimal():
        return None
    return int(digits)


def extract_views(header: Optional[Tag], detail: DetailSelectors) -> Optional[int]:
    return parse_views(text_of(_select_one(header, detail.views)))


# ----------------------------------------------------------------------
# Classification sidebar – label table driven
# ----------------------------------------------------------------------
def _link_texts(value: Tag) -> List[str]:
    return [a.get_text(strip=True) for a in value.find_all("a", recursive=False)]


def _first_link_text(value: Tag) -> str:
    return text_of(value.find("a", recursive=False))


_RULES: Dict[ExtractionRule, Callable[[Tag], Union[str, List[str]]]] = {
    ExtractionRule.LINK_TEXTS: _link_texts,
    ExtractionRule.FIRST_LINK_TEXT: _first_link_text,
    ExtractionRule.OWN_TEXT: text_of,
}

_EMPTY: Dict[ExtractionRule, Callable[[], Union[str, List[str]]]] = {
    ExtractionRule.LINK_TEXTS: list,
    ExtractionRule.FIRST_LINK_TEXT: str,
    ExtractionRule.OWN_TEXT: str,
}


def _value_for_label(aside: Optional[Tag], detail: DetailSelectors, label: str) -> Optional[Tag]:
    """The ``<dd>`` that follows the ``<dt>`` whose text is exactly ``label``."""
    if aside is None:
        return None
    for dl in aside.select(detail.definition_list):
        for dt in dl.find_all("dt", recursive=False):
            if dt.get_text(strip=True) == label:
                value = dt.find_next_sibling()
                return value if value is not None and value.name == "dd" else None
    return None


def extract_classification(aside: Optional[Tag], detail: DetailSelectors) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    for row in detail.classification:
        value = _value_for_label(aside, detail, row.label)
        if value is None:
            logger.debug(f"Classification label {row.label!r} not found")
            fields[row.field] = _EMPTY[row.rule]()
        else:
            fields[row.field] = _RULES[row.rule](value)
    return fields


def extract_tags(aside: Optional[Tag], detail: DetailSelectors) -> List[str]:
    if aside is None:
        return []
    return [a.get_text(strip=True) for a in aside.select(detail.tags)]


def extract_trends_url(body: Optional[Tag], detail: DetailSelectors) -> str:
    return first_attr(_select_one(body, detail.trends_iframe), detail.trends_src_attrs)


# ----------------------------------------------------------------------
# Whole page
# ----------------------------------------------------------------------
def extract_meme(html: str, url: str, cfg: Optional[SelectorConfig] = None) -> MemeDetails:
    """
    Build ``MemeDetails`` from a meme page.

    Parameters
    ----------
    html: str
        The full page source.
    url: str
        The page URL, stored as ``link``.
    cfg: SelectorConfig, optional
        Selector catalogue; defaults to ``configs/selectors.yaml``.
    """
    cfg = cfg or get_selectors()
    detail = cfg.detail
    soup = BeautifulSoup(html, "html.parser")

    article = soup.select_one(detail.article)
    if article is None:
        logger.warning(f"No '{detail.article}' element on {url}")
    header = _select_one(article, detail.header)
    body = _select_one(article, detail.body)
    aside = _select_one(article, detail.aside)

    raw: Dict[str, Any] = {
        "title": extract_title(header, detail),
        "link": url,
        "image": extract_hero_image(header, detail),
        "views": extract_views(header, detail),
        "sections": walk_sections(body, cfg),
        "trends_url": extract_trends_url(body, detail),
        "tags": extract_tags(aside, detail),
    }
    raw.update(extract_classification(aside, detail))
    return details_from_mapping(raw)
