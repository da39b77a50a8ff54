"""Subtitle parsing, normalization and SRT conversion."""

from srtconvert.processing.errors import (
    ConversionError,
    EmptyResultError,
    MalformedDocumentError,
    NoRecognizedSubtitleContentError,
)
from srtconvert.processing.srt_converter import SRTConverter, compose_srt, convert_to_srt, detect_source_format
from srtconvert.processing.time_formatter import format_srt_time
from srtconvert.processing.time_parser import parse_generic_time, parse_vtt_time

__all__ = [
    "ConversionError",
    "EmptyResultError",
    "MalformedDocumentError",
    "NoRecognizedSubtitleContentError",
    "SRTConverter",
    "compose_srt",
    "convert_to_srt",
    "detect_source_format",
    "format_srt_time",
    "parse_generic_time",
    "parse_vtt_time",
]
