"""Caption text cleanup, one policy per source family."""

import re
from collections.abc import Iterable

_TAG_PATTERN = re.compile(r"<[^>]*>")
_SPACE_BEFORE_NEWLINE = re.compile(r"\s+\n")
_SPACE_AFTER_NEWLINE = re.compile(r"\n\s+")
_HORIZONTAL_SPACE = re.compile(r"[^\S\n]+")


def strip_markup(lines: Iterable[str]) -> str:
    """Join WebVTT cue lines and remove inline tags such as <b>, <i>, <c> and <v>.

    Args:
        lines: Raw cue payload lines, in order.

    Returns:
        Cleaned text; lines stay separated by newlines.
    """
    text = "\n".join(lines).strip()
    return _TAG_PATTERN.sub("", text)


def collapse_whitespace(text: str | None) -> str:
    """Normalize whitespace in text extracted from XML elements.

    Whitespace hugging a newline is removed and any other run of spaces or
    tabs becomes a single space. Line breaks survive.

    Args:
        text: Concatenated text content of one subtitle element.

    Returns:
        Cleaned text, possibly empty.
    """
    cleaned = (text or "").strip()
    cleaned = _SPACE_BEFORE_NEWLINE.sub("\n", cleaned)
    cleaned = _SPACE_AFTER_NEWLINE.sub("\n", cleaned)
    return _HORIZONTAL_SPACE.sub(" ", cleaned)
