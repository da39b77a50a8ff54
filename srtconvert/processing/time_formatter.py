"""SRT timestamp formatting."""

import math
from numbers import Real

ZERO_TIMESTAMP = "00:00:00,000"


def format_srt_time(total_ms: object) -> str:
    """Convert a millisecond offset to SRT timestamp format.

    Never fails: anything that is not a finite, non-negative number is
    clamped to zero. Hours are not wrapped at 24.

    Args:
        total_ms: Offset in milliseconds.

    Returns:
        Timestamp in HH:MM:SS,mmm format.
    """
    if not isinstance(total_ms, Real):
        return ZERO_TIMESTAMP
    # Only floats can be non-finite; huge ints do not fit in a float
    if isinstance(total_ms, float) and not math.isfinite(total_ms):
        return ZERO_TIMESTAMP
    millis_total = max(0, math.floor(total_ms))

    milliseconds = millis_total % 1000
    total_seconds = millis_total // 1000
    seconds = total_seconds % 60
    total_minutes = total_seconds // 60
    minutes = total_minutes % 60
    hours = total_minutes // 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{milliseconds:03d}"
