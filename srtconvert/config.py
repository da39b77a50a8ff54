"""Configuration loader for the subtitle converter."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_INPUT_EXTENSIONS = (".ttml", ".xml", ".vtt", ".srt", ".txt")


def _normalize_extension(extension: str) -> str:
    extension = extension.strip().lower()
    if not extension.startswith("."):
        extension = f".{extension}"
    return extension


class ConversionConfig(BaseModel):
    """Configuration for file selection and SRT output."""

    overwrite_existing: bool = Field(False, description="Replace an existing .srt file next to the input")
    output_extension: str = Field(".srt", description="Extension of the written file", min_length=1)
    input_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_INPUT_EXTENSIONS),
        description="Extensions picked up when a directory is given",
        min_length=1,
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("output_extension")
    @classmethod
    def _check_output_extension(cls, value: str) -> str:
        return _normalize_extension(value)

    @field_validator("input_extensions")
    @classmethod
    def _check_input_extensions(cls, value: list[str]) -> list[str]:
        return [_normalize_extension(ext) for ext in value]


class LoggingConfig(BaseModel):
    """Configuration for console logging."""

    level: str = Field("INFO", description="Root log level name (DEBUG, INFO, WARNING, ...)")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def _format_validation_error(e: ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors())


class Config:
    """Configuration class that loads and provides access to config.yaml."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        """Initialize the Config by loading the YAML file.

        Args:
            config_path: Path to the config.yaml file, or None for the
                built-in defaults.

        Raises:
            FileNotFoundError: If the config file doesn't exist.
            yaml.YAMLError: If the YAML file is invalid.
            KeyError: If the 'conversion' section is missing.
            ValueError: If a section fails validation.
        """
        self.config_path = Path(config_path) if config_path is not None else None
        self._data: dict[str, Any] = self._load(self.config_path) if self.config_path is not None else {"conversion": {}}
        self._conversion = self._validate_conversion()
        self._logging = self._validate_logging()

    @classmethod
    def default(cls) -> "Config":
        """Build a Config with built-in defaults, without reading a file."""
        return cls(None)

    @staticmethod
    def _load(config_path: Path) -> dict[str, Any]:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        # Handle empty YAML files
        if data is None:
            raise KeyError("Missing required key 'conversion' in config file")
        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the top level")
        if "conversion" not in data:
            raise KeyError("Missing required key 'conversion' in config file")
        return data

    def _validate_conversion(self) -> ConversionConfig:
        try:
            return ConversionConfig.model_validate(self._data["conversion"] or {})
        except ValidationError as e:
            raise ValueError(f"Conversion configuration validation failed: {_format_validation_error(e)}") from e

    def _validate_logging(self) -> LoggingConfig:
        try:
            return LoggingConfig.model_validate(self._data.get("logging") or {})
        except ValidationError as e:
            raise ValueError(f"Logging configuration validation failed: {_format_validation_error(e)}") from e

    def get_conversion_config(self) -> ConversionConfig:
        """Get conversion configuration.

        Returns:
            ConversionConfig instance.
        """
        return self._conversion

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration.

        Returns:
            LoggingConfig instance.
        """
        return self._logging
