# services/memes/media_classifier.py
"""
Turns one media block (a ``<center>`` in the article body) into content items.

Checks run in priority order and the first match wins:

1. ``<lite-youtube>`` embeds – one ``VideoItem`` per embed, keeping the
   ``start=`` offset from the embed parameters.
2. ``<lite-tiktok>`` embed – one ``VideoItem`` pointing at the post URL.
3. Linked images – one ``ImageItem`` per ``<a><img></a>``, document order.
4. Anything else – no items.
"""

import re
from typing import List, Optional

from bs4 import Tag
from loguru import logger

from models.meme import ContentItem, ImageItem, VideoItem

from .attributes import attr, child_attr, first_attr, first_present
from .config_loader import MediaSelectors, get_selectors

START_OFFSET = re.compile(r"start=(\d+)")


def youtube_url(video_id: str, params: Optional[str], media: MediaSelectors) -> str:
    """Watch URL for ``video_id``, with ``&start=N`` when ``params`` carries one."""
    url = f"{media.youtube_watch_url}?v={video_id}"
    if params:
        match = START_OFFSET.search(params)
        if match:
            url += f"&start={match.group(1)}"
    return url


def _youtube_items(block: Tag, media: MediaSelectors) -> List[ContentItem]:
    items: List[ContentItem] = []
    for embed in block.find_all(media.youtube_tag):
        video_id = first_attr(embed, [media.youtube_id_attr])
        if not video_id:
            logger.debug("Skipping YouTube embed without a video id")
            continue
        params = embed.get(media.youtube_params_attr)
        items.append(VideoItem(url=youtube_url(video_id, params, media)))
    return items


def _tiktok_items(block: Tag, media: MediaSelectors) -> List[ContentItem]:
    embed = block.find(media.tiktok_tag)
    # the citation on the embedded quote is the canonical post URL
    url = first_present(embed, [child_attr("blockquote", "cite"), child_attr("a", "href")])
    if not url:
        logger.debug("Skipping TikTok embed without a post URL")
        return []
    return [VideoItem(url=url)]


def _inside_link(img: Tag, block: Tag) -> bool:
    """True when an <a> between ``img`` and ``block`` wraps the image."""
    for parent in img.parents:
        if parent is block:
            return False
        if parent.name == "a":
            return True
    return False


def _image_items(block: Tag, media: MediaSelectors) -> List[ContentItem]:
    items: List[ContentItem] = []
    for img in block.find_all("img"):
        if not _inside_link(img, block):
            continue
        url = first_attr(img, media.image_src_attrs)
        if url:
            items.append(ImageItem(url=url, alt=first_present(img, [attr("alt")])))
    return items


def classify_media_block(block: Tag, media: Optional[MediaSelectors] = None) -> List[ContentItem]:
    """Return the content items held by ``block`` (possibly none)."""
    media = media or get_selectors().media

    if block.find(media.youtube_tag) is not None:
        return _youtube_items(block, media)
    if block.find(media.tiktok_tag) is not None:
        return _tiktok_items(block, media)
    if block.find("a") is not None:
        return _image_items(block, media)
    return []
