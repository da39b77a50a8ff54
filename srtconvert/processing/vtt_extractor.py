"""WebVTT cue extraction.

The scanner walks the document line by line:

1. Preamble: blank lines, the ``WEBVTT`` header and NOTE lines are skipped.
2. Scanning: blank lines and anything that is not a timing line (cue
   identifiers, NOTE or STYLE bodies) are skipped. A timing line whose
   timestamps do not parse, or whose end is not after its start, is
   discarded together with its payload.
3. Collecting: the payload runs until the next blank line or the end of the
   document, then goes through markup stripping.
"""

import logging
import re

from srtconvert.models import Cue, ExtractionResult, SkippedCue, SkipReason, SourceFormat
from srtconvert.processing.errors import EmptyResultError
from srtconvert.processing.text_normalizer import strip_markup
from srtconvert.processing.time_parser import parse_vtt_time

logger = logging.getLogger(__name__)

VTT_HEADER = "WEBVTT"

_LINE_SPLIT_PATTERN = re.compile(r"\r?\n")
_TIMING_LINE_PATTERN = re.compile(r"^(\S+)\s+-->\s+(\S+)")


def _is_preamble_line(line: str) -> bool:
    stripped = line.strip()
    return stripped == "" or stripped.startswith(VTT_HEADER) or "NOTE" in stripped


def extract_vtt_cues(vtt_content: str) -> ExtractionResult:
    """Extract cues from a WebVTT document.

    Args:
        vtt_content: Full text of the WebVTT file.

    Returns:
        ExtractionResult with the surviving cues and the skipped ones.

    Raises:
        EmptyResultError: If no cue survives.
    """
    lines = _LINE_SPLIT_PATTERN.split(vtt_content)
    result = ExtractionResult(source_format=SourceFormat.VTT)

    i = 0
    while i < len(lines) and _is_preamble_line(lines[i]):
        i += 1

    while i < len(lines):
        while i < len(lines) and lines[i].strip() == "":
            i += 1
        if i >= len(lines):
            break

        timing_match = _TIMING_LINE_PATTERN.match(lines[i])
        if not timing_match:
            i += 1
            continue

        header_line = lines[i]
        position = i + 1
        start_ms = parse_vtt_time(timing_match.group(1))
        end_ms = parse_vtt_time(timing_match.group(2))
        i += 1

        if start_ms is None or end_ms is None:
            _skip(result, position, SkipReason.INVALID_TIMING, header_line)
            continue
        if end_ms <= start_ms:
            _skip(result, position, SkipReason.NON_POSITIVE_DURATION, header_line)
            continue

        payload: list[str] = []
        while i < len(lines) and lines[i].strip() != "":
            payload.append(lines[i])
            i += 1

        text = strip_markup(payload)
        if not text:
            _skip(result, position, SkipReason.EMPTY_TEXT, header_line)
            continue

        result.cues.append(Cue(start_ms=start_ms, end_ms=end_ms, text=text))

    if not result.cues:
        raise EmptyResultError(SourceFormat.VTT, result.skipped)

    logger.debug("Extracted %d WebVTT cues (%d skipped)", len(result.cues), len(result.skipped))
    return result


def _skip(result: ExtractionResult, position: int, reason: SkipReason, detail: str) -> None:
    logger.warning("Skipping WebVTT cue at line %d (%s): %s", position, reason.value, detail.strip())
    result.skipped.append(SkippedCue(position=position, reason=reason, detail=detail.strip()))
