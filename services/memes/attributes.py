# services/memes/attributes.py
"""
Small lookup helpers shared by the extractors.

Attribute fallbacks ("``data-src``, else ``src``, else empty") are written as
an ordered list of lookups evaluated left to right; the first lookup that
yields a non-empty value wins.
"""

from typing import Callable, Iterable, Optional, Sequence

from bs4 import Tag

Lookup = Callable[[Tag], Optional[str]]


def attr(name: str) -> Lookup:
    """Lookup reading a single attribute."""

    def _read(tag: Tag) -> Optional[str]:
        value = tag.get(name)
        # multi-valued attributes (class, rel) come back as lists
        if isinstance(value, list):
            value = " ".join(value)
        return value

    return _read


def child_attr(child: str, name: str) -> Lookup:
    """Lookup reading an attribute of the first descendant named ``child``."""

    def _read(tag: Tag) -> Optional[str]:
        found = tag.find(child)
        return attr(name)(found) if isinstance(found, Tag) else None

    return _read


def first_present(tag: Optional[Tag], lookups: Iterable[Lookup], default: str = "") -> str:
    """Evaluate ``lookups`` in order and return the first non-empty result."""
    if tag is None:
        return default
    for lookup in lookups:
        value = lookup(tag)
        if value:
            return value.strip()
    return default


def first_attr(tag: Optional[Tag], names: Sequence[str], default: str = "") -> str:
    """Shorthand for ``first_present`` over plain attribute names."""
    return first_present(tag, [attr(n) for n in names], default)


def text_of(tag: Optional[Tag]) -> str:
    return tag.get_text().strip() if tag is not None else ""
