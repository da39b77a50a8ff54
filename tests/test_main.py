"""Tests for the command line entry point."""

import shutil
from pathlib import Path

import pytest
import yaml

from srtconvert.main import EXIT_FAILURES, EXIT_OK, EXIT_USAGE, collect_input_files, main

DATA_DIR = Path(__file__).parent / "data"


def _copy_samples(target: Path, names: tuple[str, ...] = ("sample.vtt", "sample.ttml", "sample-transcript.xml")) -> None:
    for name in names:
        shutil.copy(DATA_DIR / name, target / name)


def test_main_converts_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that every sample in a directory is converted."""
    monkeypatch.chdir(tmp_path)
    _copy_samples(tmp_path, ("sample.ttml", "sample-transcript.xml"))

    exit_code = main([str(tmp_path)])

    assert exit_code == EXIT_OK
    assert (tmp_path / "sample.srt").exists()
    assert (tmp_path / "sample-transcript.srt").exists()


def test_main_reports_failures(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that a failing file yields exit code 1 and its message."""
    monkeypatch.chdir(tmp_path)
    bad = tmp_path / "bad.xml"
    bad.write_text("<root><data/></root>", encoding="utf-8")

    exit_code = main([str(bad)])

    assert exit_code == EXIT_FAILURES
    out = capsys.readouterr().out
    assert "bad.xml: No recognizable subtitle content" in out


def test_main_respects_overwrite_setting(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that existing output is kept unless --overwrite is given."""
    monkeypatch.chdir(tmp_path)
    shutil.copy(DATA_DIR / "sample.vtt", tmp_path / "sample.vtt")
    existing = tmp_path / "sample.srt"
    existing.write_text("old", encoding="utf-8")

    assert main([str(tmp_path / "sample.vtt")]) == EXIT_FAILURES
    assert existing.read_text(encoding="utf-8") == "old"

    assert main(["--overwrite", str(tmp_path / "sample.vtt")]) == EXIT_OK
    assert existing.read_text(encoding="utf-8").startswith("1\n")


def test_main_uses_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the config file controls overwrite and extensions."""
    monkeypatch.chdir(tmp_path)
    _copy_samples(tmp_path)
    (tmp_path / "sample.srt").write_text("old", encoding="utf-8")
    config_path = tmp_path / "settings.yaml"
    config_path.write_text(
        yaml.safe_dump({"conversion": {"overwrite_existing": True, "input_extensions": [".vtt"]}}),
        encoding="utf-8",
    )

    exit_code = main(["--config", str(config_path), str(tmp_path)])

    assert exit_code == EXIT_OK
    assert (tmp_path / "sample.srt").read_text(encoding="utf-8").startswith("1\n")
    assert not (tmp_path / "sample-transcript.srt").exists()


def test_main_missing_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that an explicit but missing config file is a usage error."""
    monkeypatch.chdir(tmp_path)

    assert main(["--config", str(tmp_path / "nope.yaml"), str(tmp_path)]) == EXIT_USAGE


def test_main_missing_input(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a missing input path is a usage error."""
    monkeypatch.chdir(tmp_path)

    assert main([str(tmp_path / "missing.vtt")]) == EXIT_USAGE


def test_main_empty_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a directory without subtitle files is a usage error."""
    monkeypatch.chdir(tmp_path)

    assert main([str(tmp_path)]) == EXIT_USAGE


def test_collect_input_files_keeps_explicit_files(tmp_path: Path) -> None:
    """Test that explicitly named files are kept regardless of extension."""
    odd = tmp_path / "captions.dat"
    odd.write_text("WEBVTT", encoding="utf-8")
    (tmp_path / "dir").mkdir()
    (tmp_path / "dir" / "a.vtt").write_text("WEBVTT", encoding="utf-8")
    (tmp_path / "dir" / "b.mp4").write_text("", encoding="utf-8")

    files = collect_input_files([odd, tmp_path / "dir"], [".vtt"], recursive=False)

    assert files == [odd, tmp_path / "dir" / "a.vtt"]
