# models/meme_factory.py
from __future__ import annotations

from typing import Any, Mapping

from .meme import MemeDetails


def details_from_mapping(data: Mapping[str, Any]) -> MemeDetails:
    """
    Build a :class:`models.meme.MemeDetails` from a generic ``dict``-like object.

    Keys that are not fields of ``MemeDetails`` are dropped, so extractors
    can hand over whatever they collected without tripping validation.
    Both the python names and the camelCase export names are accepted.

    Example
    -------
    >>> details = details_from_mapping({"title": "Doge", "trendsUrl": "", "extra": 1})
    >>> details.title
    'Doge'
    """
    allowed = {}
    for name, field in MemeDetails.model_fields.items():
        allowed[name] = name
        if field.alias:
            allowed[field.alias] = name
    filtered = {allowed[k]: v for k, v in data.items() if k in allowed}
    return MemeDetails(**filtered)
