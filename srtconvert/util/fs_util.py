"""File system helpers for locating subtitle files and writing SRT output."""

from collections.abc import Iterable
from pathlib import Path


class FSUtil:
    """Utility class for file system operations."""

    @staticmethod
    def matches_extension(file_path: Path, extensions: Iterable[str]) -> bool:
        """Check a path's suffix against a set of extensions, ignoring case.

        Args:
            file_path: Path to check.
            extensions: Extensions with a leading dot, e.g. ".vtt".

        Returns:
            True if the suffix is one of the extensions.
        """
        return file_path.suffix.lower() in {ext.lower() for ext in extensions}

    @staticmethod
    def filter_by_extensions(paths: Iterable[Path], extensions: Iterable[str]) -> list[Path]:
        """Keep only paths whose suffix is one of the given extensions.

        Args:
            paths: Candidate paths, in caller order.
            extensions: Extensions with a leading dot.

        Returns:
            Matching paths, order preserved.
        """
        allowed = list(extensions)
        return [p for p in paths if FSUtil.matches_extension(p, allowed)]

    @staticmethod
    def find_files_by_extensions(
        directory: Path,
        extensions: Iterable[str],
        recursive: bool,
    ) -> list[Path]:
        """Find files with any of the given extensions in a directory.

        Args:
            directory: Directory to search in.
            extensions: Extensions with a leading dot, matched case-insensitively.
            recursive: If True, search subdirectories as well.

        Returns:
            Sorted list of matching files.

        Raises:
            FileNotFoundError: If the directory does not exist.
            NotADirectoryError: If the path is not a directory.
        """
        if not directory.exists():
            raise FileNotFoundError(f"Directory not found: {directory}")
        if not directory.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {directory}")

        candidates = directory.rglob("*") if recursive else directory.glob("*")
        files = [f for f in candidates if f.is_file()]
        return sorted(FSUtil.filter_by_extensions(files, extensions))

    @staticmethod
    def read_text_file(file_path: Path) -> str:
        """Read UTF-8 encoded text file.

        A leading byte order mark is dropped so the WebVTT header check sees
        the first real character.

        Args:
            file_path: Path to the text file.

        Returns:
            File contents as a string.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the path is not a file.
            UnicodeDecodeError: If the file cannot be decoded as UTF-8.
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        if not file_path.is_file():
            raise ValueError(f"Path is not a file: {file_path}")

        return file_path.read_text(encoding="utf-8-sig")

    @staticmethod
    def write_text_file(file_path: Path, content: str, create_parents: bool) -> None:
        """Write UTF-8 encoded text file.

        Args:
            file_path: Path where the file should be written.
            content: Content to write to the file.
            create_parents: If True, create parent directories if they don't exist.

        Raises:
            OSError: If the file cannot be written.
        """
        if create_parents:
            file_path.parent.mkdir(parents=True, exist_ok=True)

        file_path.write_text(content, encoding="utf-8")

    @staticmethod
    def srt_output_path(input_path: Path, output_extension: str = ".srt") -> Path:
        """Derive the output path: same directory and base name, new extension.

        Args:
            input_path: Path of the subtitle file being converted.
            output_extension: Extension of the output file.

        Returns:
            Output path next to the input.
        """
        return input_path.with_suffix(output_extension)
