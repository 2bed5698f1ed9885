# models/meme.py
from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Frozen(BaseModel):
    """Immutable record; exported with camelCase keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    def to_dict(self) -> Dict:
        return self.model_dump(by_alias=True)


class ImageRef(_Frozen):
    url: str = ""
    alt: str = ""


class SearchHit(_Frozen):
    """One entry of the search listing."""

    title: str = ""
    link: str
    thumbnail: ImageRef = Field(default_factory=ImageRef)


# ----------------------------------------------------------------------
# Section content – a closed set of item kinds, tagged by ``kind``
# ----------------------------------------------------------------------
class TextItem(_Frozen):
    kind: Literal["text"] = "text"
    html: str


class ImageItem(_Frozen):
    kind: Literal["image"] = "image"
    url: str
    alt: str = ""


class VideoItem(_Frozen):
    kind: Literal["video"] = "video"
    url: str


class SocialPostItem(_Frozen):
    kind: Literal["social_post"] = "social_post"
    url: str


ContentItem = Annotated[
    Union[TextItem, ImageItem, VideoItem, SocialPostItem],
    Field(discriminator="kind"),
]


class Section(_Frozen):
    """A heading and everything that follows it up to the next heading."""

    title: str
    contents: List[ContentItem] = Field(default_factory=list)


class MemeDetails(_Frozen):
    """
    Everything extracted from a single meme page.

    Missing page fields degrade to empty values; ``views`` is ``None``
    (not ``0``) when the counter is absent or unreadable.
    """

    title: str = ""
    link: str = ""
    image: ImageRef = Field(default_factory=ImageRef)
    views: Optional[int] = None
    sections: List[Section] = Field(default_factory=list)
    trends_url: str = ""
    types: List[str] = Field(default_factory=list)
    year: str = ""
    origin: str = ""
    region: str = ""
    tags: List[str] = Field(default_factory=list)
