from .meme import (
    ContentItem,
    ImageItem,
    ImageRef,
    MemeDetails,
    SearchHit,
    Section,
    SocialPostItem,
    TextItem,
    VideoItem,
)
from .meme_factory import details_from_mapping

__all__ = [
    'ContentItem', 'ImageItem', 'ImageRef', 'MemeDetails', 'SearchHit',
    'Section', 'SocialPostItem', 'TextItem', 'VideoItem', 'details_from_mapping',
]
