"""Conversion of subtitle files on disk.

Reads a subtitle file, converts it and writes the SRT result next to the
input, honouring the overwrite setting.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from srtconvert.config import ConversionConfig
from srtconvert.processing.srt_converter import SRTConverter
from srtconvert.util import FSUtil

logger = logging.getLogger(__name__)


class OutputExistsError(FileExistsError):
    """Raised when the SRT destination exists and overwriting is disabled."""

    def __init__(self, output_path: Path) -> None:
        self.output_path = output_path
        super().__init__(
            f"Output file {output_path} already exists. Enable overwrite_existing "
            "(or pass --overwrite), or rename/delete the existing file."
        )


@dataclass
class BatchReport:
    """Outcome of converting several files.

    Attributes:
        converted: (input, output) pairs that were written.
        failures: (file name, error message) pairs, message unmodified.
    """

    converted: list[tuple[Path, Path]] = field(default_factory=list)
    failures: list[tuple[str, str]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures


def convert_file(
    input_path: Path,
    overwrite: bool,
    output_extension: str = ".srt",
    converter: SRTConverter | None = None,
) -> Path:
    """Convert one subtitle file and write the SRT next to it.

    Args:
        input_path: Path of the WebVTT, TTML or transcript XML file.
        overwrite: Replace an existing output file.
        output_extension: Extension of the output file.
        converter: Converter to use; a new one is created if omitted.

    Returns:
        Path of the written SRT file.

    Raises:
        OutputExistsError: If the output exists and overwrite is False.
        ConversionError: If the document cannot be converted.
        FileNotFoundError: If the input file does not exist.
    """
    converter = converter or SRTConverter()
    content = FSUtil.read_text_file(input_path)
    result = converter.convert(content)

    output_path = FSUtil.srt_output_path(input_path, output_extension)
    if output_path.exists() and not overwrite:
        raise OutputExistsError(output_path)

    FSUtil.write_text_file(output_path, result.srt_text, create_parents=False)
    logger.info(
        "Wrote %s (%d cues from %s, %d skipped)",
        output_path,
        len(result.cues),
        result.source_format.value,
        len(result.skipped),
    )
    return output_path


def convert_files(paths: list[Path], config: ConversionConfig, overwrite: bool | None = None) -> BatchReport:
    """Convert several files, collecting failures instead of raising.

    Args:
        paths: Files to convert, in order.
        config: Conversion settings.
        overwrite: Overrides config.overwrite_existing when given.

    Returns:
        BatchReport with written files and failure messages.
    """
    overwrite_existing = config.overwrite_existing if overwrite is None else overwrite
    converter = SRTConverter()
    report = BatchReport()

    for input_path in paths:
        try:
            output_path = convert_file(
                input_path,
                overwrite=overwrite_existing,
                output_extension=config.output_extension,
                converter=converter,
            )
        except Exception as e:
            error_msg = str(e)
            logger.error("Conversion failed for %s: %s", input_path, error_msg)
            print(f"    ✗ {input_path.name}: {error_msg}")
            report.failures.append((input_path.name, error_msg))
            continue

        print(f"    ✓ {input_path.name} -> {output_path.name}")
        report.converted.append((input_path, output_path))

    return report
