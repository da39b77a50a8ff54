"""Data types shared by the cue extractors and the SRT composer.

All times are integer milliseconds measured from the start of the cue list.
"""

from dataclasses import dataclass, field
from enum import Enum


class SourceFormat(str, Enum):
    """Input dialect detected for one conversion."""

    VTT = "vtt"
    TTML = "ttml"
    TRANSCRIPT = "transcript"


class SkipReason(str, Enum):
    """Why a cue or XML candidate was dropped."""

    MISSING_TIMING = "missing_timing"
    INVALID_TIMING = "invalid_timing"
    NON_POSITIVE_DURATION = "non_positive_duration"
    EMPTY_TEXT = "empty_text"


@dataclass(frozen=True)
class Cue:
    """Single timed caption entry.

    Attributes:
        start_ms: Start offset in milliseconds.
        end_ms: End offset in milliseconds, strictly greater than start_ms.
        text: Normalized caption text, never empty.
    """

    start_ms: int
    end_ms: int
    text: str


@dataclass(frozen=True)
class SkippedCue:
    """Diagnostics record for a cue that was dropped during extraction.

    Attributes:
        position: 1-based line number (WebVTT) or candidate ordinal (XML).
        reason: Why the cue was dropped.
        detail: The offending source snippet, for display.
    """

    position: int
    reason: SkipReason
    detail: str


@dataclass
class ExtractionResult:
    """Output of a cue extractor."""

    source_format: SourceFormat
    cues: list[Cue] = field(default_factory=list)
    skipped: list[SkippedCue] = field(default_factory=list)


@dataclass
class ConversionResult:
    """Final output of one conversion, including the diagnostics channel.

    Attributes:
        source_format: Dialect the input was read as.
        cues: Cues that made it into the output, in source order.
        skipped: Cues that were dropped, in source order.
        srt_text: Serialized SRT document.
    """

    source_format: SourceFormat
    cues: list[Cue]
    skipped: list[SkippedCue]
    srt_text: str
