"""
Configuration management for the Label Track Converter.

This module wraps the Pydantic-based configuration system with the small
interface used by the command-line front end.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from .pydantic_config import ConverterConfig, ConfigurationManager


class Configuration:
    """
    Configuration manager that wraps the Pydantic-based system.

    Provides flat accessors for the values the CLI and logging setup need,
    while the converter itself works with the underlying ConverterConfig.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to user configuration file (TOML/JSON)

        Raises:
            ConfigurationError: If the file cannot be loaded or is invalid
        """
        self._manager = ConfigurationManager(config_path)
        self._config = self._manager.config

    @property
    def config(self) -> ConverterConfig:
        """Get the underlying Pydantic configuration."""
        return self._config

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Update configuration from command-line arguments.

        Args:
            args: Dictionary of validated arguments
        """
        self._manager.update_from_cli_args(args)
        self._config = self._manager.config

    @property
    def log_level(self) -> str:
        return self._config.logging.level

    @property
    def log_dir(self) -> Path:
        return self._config.logging.log_dir

    @property
    def file_logging(self) -> bool:
        return self._config.logging.file_logging

    @property
    def show_progress(self) -> bool:
        return self._config.show_progress

    @property
    def archive_name(self) -> str:
        return self._config.output.archive_name

    @property
    def max_file_size_bytes(self) -> int:
        return self._config.input.max_file_size_bytes

    def to_dict(self) -> Dict[str, Any]:
        """Return the effective configuration as plain data."""
        return self._config.model_dump(mode="json")

    def __repr__(self) -> str:
        return f"Configuration({self.to_dict()})"
