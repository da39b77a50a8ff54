"""Timestamp parsing for the notations found in subtitle sources.

Both parsers return integer milliseconds, or None when the text is not in a
supported notation. None is not an error: callers drop the affected cue.

Neither parser range-checks its fields. "25:61:99,999" is accepted and yields
whatever the arithmetic produces.
"""

import logging
import math
import re

logger = logging.getLogger(__name__)

_CLOCK_PATTERN = re.compile(r"^(\d{2,}):(\d{2}):(\d{2})[.,](\d{1,3})$")
_SECONDS_SUFFIX_PATTERN = re.compile(r"^(\d+)(?:[.,](\d{1,3}))?s$")
_BARE_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_VTT_PATTERN = re.compile(r"^(?:(\d{1,2}):)?(\d{1,2}):(\d{2})\.(\d{3})$")


def _fraction_to_ms(fraction: str | None) -> int:
    """Right-pad a 1-3 digit fraction so ".5" means 500 ms."""
    if not fraction:
        return 0
    return int(fraction.ljust(3, "0"))


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def parse_generic_time(time_str: str | None) -> int | None:
    """Parse a TTML or transcript time expression into milliseconds.

    Supported notations, tried in this order:
        - ``HH:MM:SS.f`` / ``HH:MM:SS,f`` with two or more hour digits and a
          1-3 digit fraction.
        - ``N[.f]s`` seconds with an ``s`` suffix, e.g. ``"123.456s"``.
        - Bare decimal seconds, e.g. ``"26.542"`` or ``"123"``.

    Args:
        time_str: Raw attribute value. May be None or empty.

    Returns:
        Offset in milliseconds, or None if the text is not a supported notation.
    """
    if not time_str:
        return None
    time_str = str(time_str).strip()

    match = _CLOCK_PATTERN.match(time_str)
    if match:
        hours, minutes, seconds, fraction = match.groups()
        return int(hours) * 3_600_000 + int(minutes) * 60_000 + int(seconds) * 1000 + _fraction_to_ms(fraction)

    match = _SECONDS_SUFFIX_PATTERN.match(time_str)
    if match:
        seconds, fraction = match.groups()
        return int(seconds) * 1000 + _fraction_to_ms(fraction)

    if _BARE_NUMBER_PATTERN.match(time_str):
        millis = float(time_str) * 1000
        if math.isfinite(millis):
            return _round_half_up(millis)

    logger.debug("Unsupported time format: %r", time_str)
    return None


def parse_vtt_time(time_str: str | None) -> int | None:
    """Parse a WebVTT cue timestamp (``[H:]MM:SS.mmm``) into milliseconds.

    The fraction must be exactly three digits and separated by a period.

    Args:
        time_str: Timestamp token from a cue timing line.

    Returns:
        Offset in milliseconds, or None if the token is not a WebVTT timestamp.
    """
    if not time_str:
        return None
    time_str = time_str.strip()

    match = _VTT_PATTERN.match(time_str)
    if match:
        hours, minutes, seconds, millis = match.groups()
        return int(hours or 0) * 3_600_000 + int(minutes) * 60_000 + int(seconds) * 1000 + int(millis)

    logger.debug("Unsupported WebVTT time format: %r", time_str)
    return None
