"""Data models for subtitle conversion."""

from srtconvert.models.subtitle import (
    ConversionResult,
    Cue,
    ExtractionResult,
    SkippedCue,
    SkipReason,
    SourceFormat,
)

__all__ = [
    "ConversionResult",
    "Cue",
    "ExtractionResult",
    "SkippedCue",
    "SkipReason",
    "SourceFormat",
]
