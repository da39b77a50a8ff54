"""Document-level conversion failures.

Per-cue problems never raise; they are recorded as SkippedCue entries.
Only problems that make the whole document unusable surface here.
"""

from srtconvert.models import SkippedCue, SourceFormat


class ConversionError(ValueError):
    """Base class for failures that abort a conversion."""


class EmptyResultError(ConversionError):
    """Raised when a structurally valid document yields no convertible cues."""

    def __init__(self, source_format: SourceFormat, skipped: list[SkippedCue]) -> None:
        """Initialize the exception with the extraction diagnostics.

        Args:
            source_format: Dialect the document was read as.
            skipped: Cues that were dropped while scanning the document.
        """
        self.source_format = source_format
        self.skipped = skipped

        if source_format is SourceFormat.VTT:
            message = "WebVTT file parsed successfully, but no valid subtitle entries were found to convert."
        else:
            message = "File parsed successfully, but no valid subtitle entries were found to convert."
        super().__init__(f"{message} Check the file content and its timing attributes.")


class MalformedDocumentError(ConversionError):
    """Raised when the input cannot be parsed as XML at all."""

    def __init__(self, diagnostic: str) -> None:
        """Initialize the exception.

        Args:
            diagnostic: The underlying parser message; only its first line is kept.
        """
        lines = diagnostic.strip().splitlines()
        self.diagnostic = lines[0] if lines else "unknown parse error"
        super().__init__(f"Invalid XML file or parse error: {self.diagnostic}")


class NoRecognizedSubtitleContentError(ConversionError):
    """Raised when a parsed XML document contains no recognized subtitle elements."""

    def __init__(self) -> None:
        super().__init__("No recognizable subtitle content found in the XML/TTML file (e.g. <p> or <transcript>/<text> tags).")
