"""
Pydantic-based configuration system for the Label Track Converter.

Configuration is read from a TOML or JSON file, overlaid with environment
variables and command-line arguments, and validated by the models below.
"""

import codecs
import os
import sys
from pathlib import Path
from typing import Dict, Literal, Optional
from pydantic import (
    BaseModel,
    Field,
    field_validator,
    ValidationError,
)
import json
import toml

from ..core.data_models import DEFAULT_ARCHIVE_NAME, DEFAULT_ENTRY_SUFFIX
from ..utils.error_handler import ConfigurationError

ENV_ENCODING = "LABELTRACK_ENCODING"
ENV_LOG_LEVEL = "LABELTRACK_LOG_LEVEL"


class InputConfig(BaseModel):
    """Settings for reading bookmark exports."""

    encoding: str = Field(
        default="utf-8",
        description="Text encoding of the bookmark export",
        json_schema_extra={
            "error_msg": "Encoding must be a codec name known to Python, "
            "for example 'utf-8' or 'latin-1'."
        },
    )
    max_file_size_mb: int = Field(
        default=256,
        ge=1,
        le=2048,
        description="Largest accepted input file in megabytes",
        json_schema_extra={
            "error_msg": "Maximum file size must be between 1 and 2048 MB."
        },
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v):
        """Reject codec names Python does not know."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {v}")
        return v

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


class OutputConfig(BaseModel):
    """Archive naming and compression settings."""

    archive_name: str = Field(
        default=DEFAULT_ARCHIVE_NAME,
        min_length=5,
        description="File name of the generated archive",
        json_schema_extra={
            "error_msg": "Archive name must end in '.zip'."
        },
    )
    entry_suffix: str = Field(
        default=DEFAULT_ENTRY_SUFFIX,
        min_length=5,
        description="Suffix appended to each media file name",
        json_schema_extra={
            "error_msg": "Entry suffix must end in '.txt'."
        },
    )
    compression: Literal["deflated", "stored"] = Field(
        default="deflated",
        description="Zip compression method",
        json_schema_extra={
            "error_msg": "Compression must be 'deflated' or 'stored'."
        },
    )

    @field_validator("archive_name")
    @classmethod
    def validate_archive_name(cls, v):
        if not v.lower().endswith(".zip"):
            raise ValueError("Archive name must end in '.zip'")
        if "/" in v or "\\" in v:
            raise ValueError("Archive name must not contain a directory")
        return v

    @field_validator("entry_suffix")
    @classmethod
    def validate_entry_suffix(cls, v):
        if not v.lower().endswith(".txt"):
            raise ValueError("Entry suffix must end in '.txt'")
        return v


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level",
    )
    log_dir: Path = Field(
        default=Path("logs"),
        description="Directory for log files",
    )
    file_logging: bool = Field(
        default=True,
        description="Write a timestamped log file in addition to console output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("log_dir", mode="before")
    @classmethod
    def validate_log_dir(cls, v):
        """Ensure log directory is a Path object."""
        if isinstance(v, str):
            return Path(v)
        return v


class ConverterConfig(BaseModel):
    """Main configuration model."""

    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    show_progress: bool = Field(
        default=True,
        description="Show a progress bar while reading the input",
    )


class ConfigurationManager:
    """Manages loading and validation of configuration from multiple sources."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)
        """
        self._config: Optional[ConverterConfig] = None
        self._load_configuration(config_path)

    def _get_default_config_paths(self) -> list[Path]:
        """Get list of default configuration file paths to try."""
        if getattr(sys, "frozen", False):
            app_dir = Path(sys.executable).parent
            return [
                app_dir / "labeltrack_config.toml",
                app_dir / "labeltrack_config.json",
            ]

        config_dir = Path(__file__).parent
        project_root = config_dir.parent.parent
        return [
            config_dir / "labeltrack_config.toml",
            config_dir / "labeltrack_config.json",
            project_root / "labeltrack_config.toml",
            project_root / "labeltrack_config.json",
        ]

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data: Dict = {}

        if config_path:
            config_data = self._load_config_file(Path(config_path))
        else:
            for path in self._get_default_config_paths():
                if path.exists():
                    config_data = self._load_config_file(path)
                    break

        self._load_from_env(config_data)

        try:
            self._config = ConverterConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e)) from e

    def _load_config_file(self, config_path: Path) -> Dict:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise ConfigurationError(
                format_config_error(
                    FileNotFoundError(2, "No such file", str(config_path))
                )
            )

        suffix = config_path.suffix.lower()
        if suffix not in (".toml", ".json"):
            raise ConfigurationError(
                f"Unsupported configuration file format: {config_path.suffix}"
            )

        try:
            if suffix == ".toml":
                return toml.load(config_path)
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (toml.TomlDecodeError, json.JSONDecodeError, OSError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {e}"
            ) from e

    def _load_from_env(self, config_data: Dict) -> None:
        """Fill unset values from environment variables."""
        encoding = os.getenv(ENV_ENCODING)
        log_level = os.getenv(ENV_LOG_LEVEL)

        if encoding:
            section = config_data.setdefault("input", {})
            section.setdefault("encoding", encoding)

        if log_level:
            section = config_data.setdefault("logging", {})
            section.setdefault("level", log_level)

    def update_from_cli_args(self, args: Dict) -> None:
        """Update configuration from command-line arguments."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")

        config_dict = self._config.model_dump()

        if args.get("encoding"):
            config_dict["input"]["encoding"] = args["encoding"]

        if args.get("no_progress"):
            config_dict["show_progress"] = False

        if args.get("verbose"):
            config_dict["logging"]["level"] = "DEBUG"
        elif args.get("quiet"):
            config_dict["logging"]["level"] = "WARNING"

        try:
            self._config = ConverterConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e)) from e

    @property
    def config(self) -> ConverterConfig:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config

    @staticmethod
    def create_sample_config(output_path: Path, format: str = "toml") -> None:
        """Create a sample configuration file."""
        sample_config = {
            "show_progress": True,
            "input": {"encoding": "utf-8", "max_file_size_mb": 256},
            "output": {
                "archive_name": DEFAULT_ARCHIVE_NAME,
                "entry_suffix": DEFAULT_ENTRY_SUFFIX,
                "compression": "deflated",
            },
            "logging": {"level": "INFO", "log_dir": "logs", "file_logging": True},
        }

        if format.lower() == "toml":
            with open(output_path, "w", encoding="utf-8") as f:
                toml.dump(sample_config, f)
        elif format.lower() == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(sample_config, f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")


class ConfigurationErrorFormatter:
    """Formats Pydantic validation errors into user-friendly messages."""

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        """
        Convert Pydantic ValidationError into a user-friendly error message.

        Args:
            error: Pydantic ValidationError instance

        Returns:
            Formatted error message with helpful guidance
        """
        error_messages = []

        for error_detail in error.errors():
            location = ConfigurationErrorFormatter._format_error_location(
                error_detail["loc"]
            )
            error_messages.append(
                ConfigurationErrorFormatter._format_by_error_type(
                    location,
                    error_detail["type"],
                    error_detail,
                    error_detail.get("input", "N/A"),
                )
            )

        header = "Configuration Validation Failed:\n"
        separator = "-" * 60 + "\n"
        footer = (
            "\n\nTips:\n"
            "  * Check the configuration file format (TOML or JSON)\n"
            "  * Ensure numeric values are within the allowed ranges\n"
            "  * Use 'labeltrack-converter --create-config FILE' to generate a sample"
        )

        return header + separator + "\n".join(error_messages) + footer

    @staticmethod
    def _format_error_location(location: tuple) -> str:
        """Format the error location path."""
        if not location:
            return "Configuration"

        path_parts = []
        for part in location:
            if isinstance(part, str):
                path_parts.append(part)
            else:
                path_parts.append(f"[{part}]")

        return " -> ".join(path_parts)

    @staticmethod
    def _format_by_error_type(
        location: str, error_type: str, error_detail: dict, input_value
    ) -> str:
        """Format error message based on Pydantic error type."""

        if error_type == "missing":
            return f"  {location}: Required field is missing"

        elif error_type in [
            "greater_than_equal",
            "less_than_equal",
            "greater_than",
            "less_than",
        ]:
            ctx = error_detail.get("ctx", {})
            limit = next(iter(ctx.values()), "limit")
            operator = {
                "greater_than_equal": ">=",
                "less_than_equal": "<=",
                "greater_than": ">",
                "less_than": "<",
            }[error_type]
            return f"  {location}: Value must be {operator} {limit} (got: {input_value})"

        elif error_type == "literal_error":
            expected = error_detail.get("ctx", {}).get("expected", "valid option")
            return f"  {location}: Must be one of {expected} (got: {input_value})"

        elif error_type == "string_too_short":
            min_length = error_detail.get("ctx", {}).get("min_length", "minimum")
            return (
                f"  {location}: String too short, minimum {min_length} "
                f"characters (got: {len(str(input_value))})"
            )

        else:
            msg = error_detail.get("msg", "Invalid configuration value")
            return f"  {location}: {msg} (got: {input_value})"


def format_config_error(error: Exception) -> str:
    """
    Format any configuration-related error into a user-friendly message.

    Args:
        error: Exception that occurred during configuration

    Returns:
        Formatted error message
    """
    if isinstance(error, ValidationError):
        return ConfigurationErrorFormatter.format_validation_error(error)

    elif isinstance(error, FileNotFoundError):
        return (
            f"Configuration File Not Found:\n"
            f"  Could not find configuration file: {error.filename}\n\n"
            f"Solutions:\n"
            f"  * Create a configuration file using: labeltrack-converter --create-config FILE\n"
            f"  * Use default configuration by omitting the --config parameter"
        )

    else:
        return f"Unexpected Configuration Error:\n  {str(error)}"
