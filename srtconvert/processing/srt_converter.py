"""Conversion of subtitle documents to SRT.

The input kind is decided by a single prefix check: content that starts with
the WebVTT header is read as WebVTT, everything else is treated as XML.
"""

import logging

from srtconvert.models import ConversionResult, Cue, ExtractionResult, SourceFormat
from srtconvert.processing.time_formatter import format_srt_time
from srtconvert.processing.vtt_extractor import VTT_HEADER, extract_vtt_cues
from srtconvert.processing.xml_extractor import extract_xml_cues

logger = logging.getLogger(__name__)


def detect_source_format(content: str) -> SourceFormat | None:
    """Detect whether content is WebVTT.

    Args:
        content: Raw file content.

    Returns:
        SourceFormat.VTT for WebVTT content, None for anything else. The XML
        extractor decides between TTML and transcript for the latter.
    """
    if content.strip().startswith(VTT_HEADER):
        return SourceFormat.VTT
    return None


def format_srt_block(index: int, cue: Cue) -> str:
    """Render one numbered SRT block, including its trailing blank line."""
    return f"{index}\n{format_srt_time(cue.start_ms)} --> {format_srt_time(cue.end_ms)}\n{cue.text}\n\n"


def compose_srt(cues: list[Cue]) -> str:
    """Serialize cues to SRT.

    Cues keep their order and are numbered from 1. Content is written
    verbatim. Timestamps go through format_srt_time, so negative offsets
    render as zero and hours are not capped. The trailing blank line of
    the last block is trimmed.

    Args:
        cues: Cues in output order.

    Returns:
        SRT document text.
    """
    return "".join(format_srt_block(index, cue) for index, cue in enumerate(cues, start=1)).strip()


class SRTConverter:
    """Converter from WebVTT, TTML and transcript XML to SRT."""

    def convert(self, content: str) -> ConversionResult:
        """Convert a subtitle document and report skipped cues.

        Args:
            content: Raw file content.

        Returns:
            ConversionResult with the SRT text and the extraction diagnostics.

        Raises:
            EmptyResultError: If the document yields no convertible cues.
            MalformedDocumentError: If non-WebVTT content is not well-formed XML.
            NoRecognizedSubtitleContentError: If the XML has no subtitle elements.
        """
        extraction: ExtractionResult
        if detect_source_format(content) is SourceFormat.VTT:
            extraction = extract_vtt_cues(content)
        else:
            extraction = extract_xml_cues(content)

        srt_text = compose_srt(extraction.cues)
        logger.info(
            "Converted %d %s cues spanning %s --> %s (%d skipped)",
            len(extraction.cues),
            extraction.source_format.value,
            format_srt_time(extraction.cues[0].start_ms),
            format_srt_time(extraction.cues[-1].end_ms),
            len(extraction.skipped),
        )
        return ConversionResult(
            source_format=extraction.source_format,
            cues=extraction.cues,
            skipped=extraction.skipped,
            srt_text=srt_text,
        )


def convert_to_srt(content: str) -> str:
    """Convert a WebVTT, TTML or transcript XML document to SRT text.

    Args:
        content: Raw file content.

    Returns:
        SRT document text.

    Raises:
        ConversionError: If the document as a whole cannot be converted.
    """
    return SRTConverter().convert(content).srt_text
