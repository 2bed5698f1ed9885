# services/memes/config_loader.py
"""
Loads the selector catalogue from ``configs/selectors.yaml`` and validates it
with Pydantic models.

Public API:
* ``get_selectors()`` – returns the validated ``SelectorConfig`` (cached).
* ``load_selectors(path)`` – reads and validates an arbitrary file, no caching.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from core.config import get_settings
from core.exceptions import ScraperException


# ----------------------------------------------------------------------
# Pydantic schemas – runtime validation with readable error messages
# ----------------------------------------------------------------------
class SearchSelectors(BaseModel):
    """Selectors that drive the search listing walk."""
    gallery: str = "section.gallery"
    item: str = "div.groups a.item"
    title_attr: str = "data-title"
    thumbnail: str = "div > div:nth-child(1) > div.not-vertical-only > img"
    thumbnail_src_attrs: List[str] = Field(default_factory=lambda: ["data-image", "src"])


class ExtractionRule(str, Enum):
    LINK_TEXTS = "link_texts"
    FIRST_LINK_TEXT = "first_link_text"
    OWN_TEXT = "own_text"


class LabelRule(BaseModel):
    """One row of the classification table: which label feeds which field."""
    field: str
    label: str
    rule: ExtractionRule


class DetailSelectors(BaseModel):
    """Region selectors for a single meme page."""
    article: str = "article.entry"
    header: str
    title: str
    hero_link: str
    views: str
    body: str
    trends_iframe: str
    trends_src_attrs: List[str] = Field(default_factory=lambda: ["data-src"])
    aside: str
    definition_list: str = ":scope > dl"
    tags: str
    sentinel_heading: str = "Search Interest"
    classification: List[LabelRule] = Field(default_factory=list)


class MediaSelectors(BaseModel):
    """Tag and attribute names used by the media block classifier."""
    image_src_attrs: List[str] = Field(default_factory=lambda: ["data-src", "src"])
    youtube_tag: str = "lite-youtube"
    youtube_id_attr: str = "videoid"
    youtube_params_attr: str = "params"
    youtube_watch_url: str = "https://www.youtube.com/watch"
    tiktok_tag: str = "lite-tiktok"


class SocialSelectors(BaseModel):
    hosts: List[str] = Field(default_factory=list)
    canonical_host: str = "x.com"


class SelectorConfig(BaseModel):
    """Complete selector catalogue for the target site."""
    search: SearchSelectors = Field(default_factory=SearchSelectors)
    detail: DetailSelectors
    media: MediaSelectors = Field(default_factory=MediaSelectors)
    social: SocialSelectors = Field(default_factory=SocialSelectors)


# ----------------------------------------------------------------------
# Custom exception for a missing or malformed catalogue
# ----------------------------------------------------------------------
class SelectorConfigError(ScraperException):
    """Raised when selectors.yaml cannot be read or fails validation."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid selector config '{path}': {reason}")
        self.path = path


# Simple in-process cache so the YAML is read/validated only once per process
_cached: Optional[SelectorConfig] = None


def load_selectors(path: Path) -> SelectorConfig:
    """Read ``path`` and validate it against ``SelectorConfig``."""
    try:
        with Path(path).open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise SelectorConfigError(path, str(exc)) from exc

    try:
        return SelectorConfig(**raw)
    except (ValidationError, TypeError) as exc:
        raise SelectorConfigError(path, str(exc)) from exc


def get_selectors() -> SelectorConfig:
    """Return the validated catalogue named by ``Settings.SELECTORS_PATH``."""
    global _cached
    if _cached is None:
        path = get_settings().SELECTORS_PATH
        _cached = load_selectors(path)
        logger.debug(f"Loaded selector catalogue from {path}")
    return _cached


def reset_selectors_cache() -> None:
    """Forget the cached catalogue (used by tests and after editing the file)."""
    global _cached
    _cached = None
