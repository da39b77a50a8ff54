"""Tests for converting subtitle files on disk."""

import shutil
from pathlib import Path

import pytest

from srtconvert.config import ConversionConfig
from srtconvert.processing.errors import MalformedDocumentError
from srtconvert.processing.file_converter import OutputExistsError, convert_file, convert_files

DATA_DIR = Path(__file__).parent / "data"


def _copy_sample(name: str, tmp_path: Path) -> Path:
    target = tmp_path / name
    shutil.copy(DATA_DIR / name, target)
    return target


class TestConvertFile:
    """Tests for convert_file."""

    def test_writes_srt_next_to_input(self, tmp_path: Path) -> None:
        """Test that the SRT file lands beside the input with the same stem."""
        input_path = _copy_sample("sample.vtt", tmp_path)

        output_path = convert_file(input_path, overwrite=False)

        assert output_path == tmp_path / "sample.srt"
        content = output_path.read_text(encoding="utf-8")
        assert content.startswith("1\n00:00:00,000 --> 00:00:03,000\nHello, world!\n\n2\n")

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        """Test that an existing output is kept when overwrite is disabled."""
        input_path = _copy_sample("sample.ttml", tmp_path)
        existing = tmp_path / "sample.srt"
        existing.write_text("keep me", encoding="utf-8")

        with pytest.raises(OutputExistsError) as exc_info:
            convert_file(input_path, overwrite=False)

        assert exc_info.value.output_path == existing
        assert "already exists" in str(exc_info.value)
        assert existing.read_text(encoding="utf-8") == "keep me"

    def test_overwrites_when_enabled(self, tmp_path: Path) -> None:
        """Test that an existing output is replaced when overwrite is enabled."""
        input_path = _copy_sample("sample-transcript.xml", tmp_path)
        existing = tmp_path / "sample-transcript.srt"
        existing.write_text("old", encoding="utf-8")

        convert_file(input_path, overwrite=True)

        assert "Hello, world!" in existing.read_text(encoding="utf-8")

    def test_conversion_error_writes_nothing(self, tmp_path: Path) -> None:
        """Test that a failed conversion leaves no output behind."""
        input_path = tmp_path / "broken.xml"
        input_path.write_text("<tt><body>", encoding="utf-8")

        with pytest.raises(MalformedDocumentError):
            convert_file(input_path, overwrite=False)

        assert not (tmp_path / "broken.srt").exists()


class TestConvertFiles:
    """Tests for convert_files."""

    def test_collects_failures(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that one bad file does not stop the batch."""
        good = _copy_sample("sample.vtt", tmp_path)
        bad = tmp_path / "empty.vtt"
        bad.write_text("WEBVTT\n\nNOTE nothing here\n", encoding="utf-8")

        report = convert_files([bad, good], ConversionConfig())

        assert not report.success
        assert report.converted == [(good, tmp_path / "sample.srt")]
        assert len(report.failures) == 1
        name, message = report.failures[0]
        assert name == "empty.vtt"
        assert "no valid subtitle entries" in message

        out = capsys.readouterr().out
        assert "✓ sample.vtt -> sample.srt" in out
        assert "✗ empty.vtt" in out

    def test_overwrite_argument_overrides_config(self, tmp_path: Path) -> None:
        """Test that an explicit overwrite flag wins over the config value."""
        input_path = _copy_sample("sample.vtt", tmp_path)
        (tmp_path / "sample.srt").write_text("old", encoding="utf-8")

        refused = convert_files([input_path], ConversionConfig(overwrite_existing=False))
        forced = convert_files([input_path], ConversionConfig(overwrite_existing=False), overwrite=True)

        assert not refused.success
        assert forced.success

    def test_output_extension_from_config(self, tmp_path: Path) -> None:
        """Test that the configured output extension is used."""
        input_path = _copy_sample("sample.ttml", tmp_path)

        report = convert_files([input_path], ConversionConfig(output_extension=".en.srt"))

        assert report.converted == [(input_path, tmp_path / "sample.en.srt")]
