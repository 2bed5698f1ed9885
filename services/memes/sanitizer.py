# services/memes/sanitizer.py
import re

# "[12]" style citation references left behind by the wiki markup
FOOTNOTE_MARKER = re.compile(r"\[\d+\]")


def strip_footnotes(fragment: str) -> str:
    """Remove every ``[n]`` footnote marker; tags and other text are kept as is."""
    return FOOTNOTE_MARKER.sub("", fragment)
