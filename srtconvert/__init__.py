"""Convert WebVTT, TTML and transcript XML subtitles to SRT."""

from srtconvert.processing import (
    ConversionError,
    EmptyResultError,
    MalformedDocumentError,
    NoRecognizedSubtitleContentError,
    SRTConverter,
    convert_to_srt,
)

__all__ = [
    "ConversionError",
    "EmptyResultError",
    "MalformedDocumentError",
    "NoRecognizedSubtitleContentError",
    "SRTConverter",
    "convert_to_srt",
]
