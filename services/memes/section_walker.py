# services/memes/section_walker.py
"""
Splits the article body into titled sections.

The body's direct children are folded left to right into a ``WalkState``.
Every heading closes the open section and opens a new one; paragraphs,
media blocks and quotes add items to the open section; anything seen before
the first heading is dropped.  The sentinel heading ("Search Interest")
halts the fold, so nothing after it (the trends widget) is read.
"""

from enum import Enum
from functools import reduce
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple
from urllib.parse import urlsplit, urlunsplit

from bs4 import Tag

from models.meme import ContentItem, Section, SocialPostItem, TextItem

from .config_loader import SelectorConfig, get_selectors
from .media_classifier import classify_media_block
from .sanitizer import strip_footnotes


class NodeKind(str, Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    MEDIA = "media"
    QUOTE = "quote"
    OTHER = "other"


_KIND_BY_TAG = {
    **{f"h{level}": NodeKind.HEADING for level in range(1, 7)},
    "p": NodeKind.PARAGRAPH,
    "center": NodeKind.MEDIA,
    "blockquote": NodeKind.QUOTE,
}


def node_kind(node: Tag) -> NodeKind:
    return _KIND_BY_TAG.get(node.name, NodeKind.OTHER)


# ----------------------------------------------------------------------
# Fold state
# ----------------------------------------------------------------------
class OpenSection(NamedTuple):
    title: str
    contents: Tuple[ContentItem, ...] = ()

    def close(self) -> Section:
        return Section(title=self.title, contents=list(self.contents))


class WalkState(NamedTuple):
    current: Optional[OpenSection] = None
    finished: Tuple[Section, ...] = ()
    halted: bool = False

    def flushed(self) -> Tuple[Section, ...]:
        if self.current is None:
            return self.finished
        return self.finished + (self.current.close(),)


# ----------------------------------------------------------------------
# Per-kind content handlers
# ----------------------------------------------------------------------
def _paragraph_items(node: Tag, cfg: SelectorConfig) -> List[ContentItem]:
    if not node.get_text(strip=True):
        return []
    return [TextItem(html=strip_footnotes(node.decode_contents()))]


def _media_items(node: Tag, cfg: SelectorConfig) -> List[ContentItem]:
    return classify_media_block(node, cfg.media)


def canonical_post_url(href: str, canonical_host: str) -> str:
    """Drop the query string and fragment, and move the link to ``canonical_host``."""
    parts = urlsplit(href)
    return urlunsplit(("https", canonical_host, parts.path, "", ""))


def _social_link(node: Tag, cfg: SelectorConfig) -> Optional[str]:
    hosts = {h.lower() for h in cfg.social.hosts}
    candidates = [
        a["href"] for a in node.find_all("a", href=True)
        if (urlsplit(a["href"]).hostname or "").lower() in hosts
    ]
    # embedded posts also link hashtags and mentions; the status link is the post itself
    for href in candidates:
        if "/status/" in urlsplit(href).path:
            return href
    return candidates[0] if candidates else None


def _quote_items(node: Tag, cfg: SelectorConfig) -> List[ContentItem]:
    if not node.get_text(strip=True):
        return []
    href = _social_link(node, cfg)
    if href:
        return [SocialPostItem(url=canonical_post_url(href, cfg.social.canonical_host))]
    return [TextItem(html=strip_footnotes(node.decode_contents()))]


_CONTENT_HANDLERS: Dict[NodeKind, Callable[[Tag, SelectorConfig], List[ContentItem]]] = {
    NodeKind.PARAGRAPH: _paragraph_items,
    NodeKind.MEDIA: _media_items,
    NodeKind.QUOTE: _quote_items,
}


# ----------------------------------------------------------------------
# The fold
# ----------------------------------------------------------------------
def step(state: WalkState, node: Tag, cfg: SelectorConfig) -> WalkState:
    """Advance the walk by one body child."""
    if state.halted:
        return state

    kind = node_kind(node)
    if kind is NodeKind.HEADING:
        title = node.get_text().strip()
        if title == cfg.detail.sentinel_heading:
            return WalkState(current=None, finished=state.flushed(), halted=True)
        return WalkState(current=OpenSection(title), finished=state.flushed())

    handler = _CONTENT_HANDLERS.get(kind)
    if handler is None or state.current is None:
        return state

    items = handler(node, cfg)
    if not items:
        return state
    current = state.current._replace(contents=state.current.contents + tuple(items))
    return state._replace(current=current)


def walk_sections(body: Optional[Tag], cfg: Optional[SelectorConfig] = None) -> List[Section]:
    """Return the sections of ``body`` in heading order."""
    if body is None:
        return []
    cfg = cfg or get_selectors()
    children = body.find_all(True, recursive=False)
    final = reduce(lambda state, node: step(state, node, cfg), children, WalkState())
    return list(final.flushed())
