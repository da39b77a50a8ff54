"""Command line entry point: convert WebVTT, TTML and transcript XML files to SRT."""

import argparse
import logging
import sys
from pathlib import Path

from srtconvert.config import Config
from srtconvert.processing.file_converter import convert_files
from srtconvert.util import FSUtil

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/config.yaml")

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_USAGE = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="srtconvert",
        description="Convert WebVTT, TTML and transcript XML subtitle files to SRT.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Subtitle files or directories containing them")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=f"Path to config YAML (default: {DEFAULT_CONFIG_PATH} if present)",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        default=None,
        help="Replace existing .srt files (overrides overwrite_existing)",
    )
    parser.add_argument("-r", "--recursive", action="store_true", help="Search directories recursively")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def load_config(config_path: Path | None) -> Config:
    """Load the configuration file, or defaults when none is available.

    Raises:
        FileNotFoundError: If an explicitly given config file does not exist.
    """
    if config_path is not None:
        return Config(config_path)
    if DEFAULT_CONFIG_PATH.exists():
        return Config(DEFAULT_CONFIG_PATH)
    return Config.default()


def collect_input_files(paths: list[Path], extensions: list[str], recursive: bool) -> list[Path]:
    """Expand directories into subtitle files; explicit files are kept as given.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            found = FSUtil.find_files_by_extensions(path, extensions, recursive=recursive)
            logger.info("Found %d subtitle file(s) in %s", len(found), path)
            files.extend(found)
        elif path.exists():
            files.append(path)
        else:
            raise FileNotFoundError(f"File not found: {path}")
    return files


def main(argv: list[str] | None = None) -> int:
    """Run the converter and return the process exit code."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except Exception as exc:
        print(f"Failed to load configuration: {exc}", file=sys.stderr)
        return EXIT_USAGE

    level = logging.DEBUG if args.verbose else config.get_logging_config().level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    conversion_config = config.get_conversion_config()
    try:
        files = collect_input_files(args.paths, conversion_config.input_extensions, args.recursive)
    except (FileNotFoundError, NotADirectoryError) as exc:
        logger.error("%s", exc)
        return EXIT_USAGE

    if not files:
        print("No subtitle files found.")
        return EXIT_USAGE

    print(f"Converting {len(files)} file(s)")
    report = convert_files(files, conversion_config, overwrite=args.overwrite)

    print(f"\nDone: {len(report.converted)} converted, {len(report.failures)} failed")
    for name, error in report.failures:
        print(f"  - {name}: {error}")

    return EXIT_OK if report.success else EXIT_FAILURES


if __name__ == "__main__":
    sys.exit(main())
