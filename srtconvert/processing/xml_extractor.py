"""Cue extraction from XML caption documents.

Two dialects are recognized:

- Transcript: ``<transcript><text start="1.2" dur="3.4">...</text></transcript>``
  as served for auto-generated video transcripts.
- TTML: ``<p begin=".." end=".."|dur="..">`` elements, under ``<body>`` when
  the document has one.

Element names are compared by local name, so namespaced TTML documents match
the same way as bare ones.
"""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass

from srtconvert.models import Cue, ExtractionResult, SkippedCue, SkipReason, SourceFormat
from srtconvert.processing.errors import (
    EmptyResultError,
    MalformedDocumentError,
    NoRecognizedSubtitleContentError,
)
from srtconvert.processing.text_normalizer import collapse_whitespace
from srtconvert.processing.time_parser import parse_generic_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextNode:
    """Character data directly inside a subtitle element."""

    text: str


@dataclass(frozen=True)
class ElementNode:
    """Child element of a subtitle element."""

    element: ET.Element


def _local_name(tag: object) -> str:
    # Comments and processing instructions carry a factory function as tag
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _find_all(element: ET.Element, name: str, include_self: bool = False) -> list[ET.Element]:
    return [
        node
        for node in element.iter()
        if (include_self or node is not element) and _local_name(node.tag) == name
    ]


def _child_nodes(element: ET.Element) -> Iterator[TextNode | ElementNode]:
    """Yield the immediate children of an element in document order."""
    if element.text:
        yield TextNode(element.text)
    for child in element:
        if isinstance(child.tag, str):
            yield ElementNode(child)
        if child.tail:
            yield TextNode(child.tail)


def _text_content(element: ET.Element) -> str:
    return "".join(element.itertext())


def _ttml_text(element: ET.Element) -> str:
    """Build the text of a TTML paragraph.

    Line breaks become newlines and any other child element (spans, styling)
    contributes its full text content inline.
    """
    parts: list[str] = []
    for node in _child_nodes(element):
        match node:
            case TextNode(text=text):
                parts.append(text)
            case ElementNode(element=child) if _local_name(child.tag).lower() == "br":
                parts.append("\n")
            case ElementNode(element=child):
                parts.append(_text_content(child))
    return "".join(parts)


def _describe(element: ET.Element) -> str:
    attributes = " ".join(f'{_local_name(key)}="{value}"' for key, value in element.attrib.items())
    name = _local_name(element.tag)
    return f"<{name} {attributes}>" if attributes else f"<{name}>"


def _select_candidates(root: ET.Element) -> tuple[SourceFormat, list[ET.Element]]:
    """Pick the subtitle dialect and its candidate elements."""
    transcripts = _find_all(root, "transcript", include_self=True)
    if transcripts:
        texts = _find_all(transcripts[0], "text")
        if texts:
            return SourceFormat.TRANSCRIPT, texts

    bodies = _find_all(root, "body", include_self=True)
    if bodies:
        return SourceFormat.TTML, _find_all(bodies[0], "p")
    return SourceFormat.TTML, _find_all(root, "p", include_self=True)


def _resolve_timing(
    begin_attr: str | None,
    end_attr: str | None,
    dur_attr: str | None,
) -> tuple[int | None, int | None]:
    begin_ms = parse_generic_time(begin_attr)
    end_ms: int | None = None
    if end_attr:
        end_ms = parse_generic_time(end_attr)
    elif dur_attr:
        dur_ms = parse_generic_time(dur_attr)
        if begin_ms is not None and dur_ms is not None:
            end_ms = begin_ms + dur_ms
    return begin_ms, end_ms


def extract_xml_cues(xml_content: str) -> ExtractionResult:
    """Extract cues from a TTML or transcript XML document.

    Args:
        xml_content: Full text of the XML file.

    Returns:
        ExtractionResult with the surviving cues and the skipped ones.

    Raises:
        MalformedDocumentError: If the content is not well-formed XML.
        NoRecognizedSubtitleContentError: If there are no subtitle elements.
        EmptyResultError: If subtitle elements exist but none survives.
    """
    try:
        root = ET.fromstring(xml_content)
    except ET.ParseError as e:
        raise MalformedDocumentError(str(e)) from e

    source_format, candidates = _select_candidates(root)
    if not candidates:
        raise NoRecognizedSubtitleContentError()

    result = ExtractionResult(source_format=source_format)
    for position, element in enumerate(candidates, start=1):
        if source_format is SourceFormat.TRANSCRIPT:
            begin_attr = element.get("start")
            end_attr = None
            dur_attr = element.get("dur")
            raw_text = _text_content(element)
        else:
            begin_attr = element.get("begin")
            end_attr = element.get("end")
            dur_attr = element.get("dur")
            raw_text = _ttml_text(element)

        if not begin_attr or not (end_attr or dur_attr):
            _skip(result, position, SkipReason.MISSING_TIMING, element)
            continue

        begin_ms, end_ms = _resolve_timing(begin_attr, end_attr, dur_attr)
        if begin_ms is None or end_ms is None:
            _skip(result, position, SkipReason.INVALID_TIMING, element)
            continue
        if end_ms <= begin_ms:
            _skip(result, position, SkipReason.NON_POSITIVE_DURATION, element)
            continue

        text = collapse_whitespace(raw_text)
        if not text:
            _skip(result, position, SkipReason.EMPTY_TEXT, element)
            continue

        result.cues.append(Cue(start_ms=begin_ms, end_ms=end_ms, text=text))

    if not result.cues:
        raise EmptyResultError(source_format, result.skipped)

    logger.debug(
        "Extracted %d %s cues from %d candidates",
        len(result.cues),
        source_format.value,
        len(candidates),
    )
    return result


def _skip(result: ExtractionResult, position: int, reason: SkipReason, element: ET.Element) -> None:
    detail = _describe(element)
    logger.warning("Skipping %s element #%d (%s): %s", result.source_format.value, position, reason.value, detail)
    result.skipped.append(SkippedCue(position=position, reason=reason, detail=detail))
