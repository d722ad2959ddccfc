"""
Tests for the Pydantic-based configuration system.

This module tests the pydantic_config module including:
- InputConfig, OutputConfig and LoggingConfig validation
- ConfigurationManager loading from TOML, JSON and the environment
- CLI overrides
- ConfigurationErrorFormatter error formatting
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
import toml
from pydantic import ValidationError

from labeltrack_converter.config.configuration import Configuration
from labeltrack_converter.config.pydantic_config import (
    ENV_ENCODING,
    ENV_LOG_LEVEL,
    ConfigurationErrorFormatter,
    ConfigurationManager,
    ConverterConfig,
    InputConfig,
    LoggingConfig,
    OutputConfig,
    format_config_error,
)
from labeltrack_converter.utils.error_handler import ConfigurationError


@pytest.fixture
def no_default_files():
    """Ignore any labeltrack_config file lying around the project."""
    with patch.object(
        ConfigurationManager, "_get_default_config_paths", return_value=[]
    ):
        yield


# ============================================================================
# Model Tests
# ============================================================================


class TestInputConfig:
    """Tests for InputConfig model."""

    def test_default_values(self):
        config = InputConfig()
        assert config.encoding == "utf-8"
        assert config.max_file_size_mb == 256
        assert config.max_file_size_bytes == 256 * 1024 * 1024

    def test_unknown_encoding_rejected(self):
        with pytest.raises(ValidationError, match="Unknown text encoding"):
            InputConfig(encoding="not-a-codec")

    @pytest.mark.parametrize("size", [0, 4096])
    def test_size_bounds(self, size):
        with pytest.raises(ValidationError):
            InputConfig(max_file_size_mb=size)


class TestOutputConfig:
    """Tests for OutputConfig model."""

    def test_default_values(self):
        config = OutputConfig()
        assert config.archive_name == "converted-bookmarks.zip"
        assert config.entry_suffix == "_labelTrack.txt"
        assert config.compression == "deflated"

    @pytest.mark.parametrize("name", ["bookmarks.tar", "dir/out.zip"])
    def test_invalid_archive_name(self, name):
        with pytest.raises(ValidationError):
            OutputConfig(archive_name=name)

    def test_entry_suffix_must_be_txt(self):
        with pytest.raises(ValidationError, match=".txt"):
            OutputConfig(entry_suffix="_labelTrack.csv")

    def test_invalid_compression(self):
        with pytest.raises(ValidationError):
            OutputConfig(compression="lzma")


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_level_is_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_log_dir_becomes_path(self):
        assert LoggingConfig(log_dir="var/log").log_dir == Path("var/log")

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="TRACE")


# ============================================================================
# ConfigurationManager Tests
# ============================================================================


class TestConfigurationManager:
    """Tests for loading configuration."""

    def test_defaults_without_file(self, no_default_files):
        manager = ConfigurationManager()
        assert manager.config == ConverterConfig()

    def test_load_toml(self, tmp_path, no_default_files):
        path = tmp_path / "config.toml"
        path.write_text(
            toml.dumps({"input": {"encoding": "latin-1"}, "show_progress": False})
        )
        config = ConfigurationManager(path).config
        assert config.input.encoding == "latin-1"
        assert config.show_progress is False

    def test_load_json(self, tmp_path, no_default_files):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"output": {"compression": "stored"}}))
        assert ConfigurationManager(path).config.output.compression == "stored"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Not Found"):
            ConfigurationManager(tmp_path / "missing.toml")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[input]\n")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            ConfigurationManager(path)

    def test_broken_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("input = [unclosed")
        with pytest.raises(ConfigurationError, match="Failed to load"):
            ConfigurationManager(path)

    def test_invalid_values_are_formatted(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"input": {"max_file_size_mb": 0}}))
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(path)
        assert "input -> max_file_size_mb" in str(exc_info.value)

    def test_environment_fills_unset_values(self, monkeypatch, no_default_files):
        monkeypatch.setenv(ENV_ENCODING, "utf-16")
        monkeypatch.setenv(ENV_LOG_LEVEL, "warning")
        config = ConfigurationManager().config
        assert config.input.encoding == "utf-16"
        assert config.logging.level == "WARNING"

    def test_file_beats_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv(ENV_ENCODING, "utf-16")
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"input": {"encoding": "latin-1"}}))
        assert ConfigurationManager(path).config.input.encoding == "latin-1"

    def test_cli_overrides(self, no_default_files):
        manager = ConfigurationManager()
        manager.update_from_cli_args(
            {"encoding": "cp1252", "no_progress": True, "verbose": True}
        )
        assert manager.config.input.encoding == "cp1252"
        assert manager.config.show_progress is False
        assert manager.config.logging.level == "DEBUG"

    def test_quiet_override(self, no_default_files):
        manager = ConfigurationManager()
        manager.update_from_cli_args({"quiet": True})
        assert manager.config.logging.level == "WARNING"

    def test_invalid_cli_override(self, no_default_files):
        manager = ConfigurationManager()
        with pytest.raises(ConfigurationError):
            manager.update_from_cli_args({"encoding": "no-such-codec"})

    @pytest.mark.parametrize("fmt,suffix", [("toml", ".toml"), ("json", ".json")])
    def test_sample_config_round_trips(self, tmp_path, fmt, suffix, no_default_files):
        path = tmp_path / f"sample{suffix}"
        ConfigurationManager.create_sample_config(path, fmt)
        assert ConfigurationManager(path).config == ConverterConfig()

    def test_sample_config_unknown_format(self, tmp_path):
        with pytest.raises(ValueError):
            ConfigurationManager.create_sample_config(tmp_path / "x.yaml", "yaml")


class TestConfiguration:
    """Tests for the Configuration wrapper."""

    def test_accessors(self, no_default_files):
        config = Configuration()
        assert config.log_level == "INFO"
        assert config.show_progress is True
        assert config.archive_name == "converted-bookmarks.zip"
        assert config.max_file_size_bytes == 256 * 1024 * 1024

    def test_update_from_args(self, no_default_files):
        config = Configuration()
        config.update_from_args({"verbose": True})
        assert config.log_level == "DEBUG"
        assert config.config.logging.level == "DEBUG"

    def test_to_dict_is_plain_data(self, no_default_files):
        data = Configuration().to_dict()
        assert data["logging"]["log_dir"] == "logs"
        json.dumps(data)


# ============================================================================
# Error Formatting Tests
# ============================================================================


class TestConfigurationErrorFormatter:
    """Tests for error formatting."""

    def test_literal_error(self):
        with pytest.raises(ValidationError) as exc_info:
            ConverterConfig(output={"compression": "lzma"})
        text = ConfigurationErrorFormatter.format_validation_error(exc_info.value)
        assert "Configuration Validation Failed" in text
        assert "output -> compression" in text

    def test_range_error(self):
        with pytest.raises(ValidationError) as exc_info:
            ConverterConfig(input={"max_file_size_mb": 0})
        text = format_config_error(exc_info.value)
        assert ">= 1" in text

    def test_file_not_found(self):
        text = format_config_error(FileNotFoundError(2, "No such file", "x.toml"))
        assert "x.toml" in text

    def test_generic_error(self):
        assert "boom" in format_config_error(RuntimeError("boom"))
