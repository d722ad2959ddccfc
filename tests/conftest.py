"""
Pytest configuration and shared fixtures for label track converter tests.

This module provides common fixtures and test utilities that are shared
across multiple test modules.
"""

import io
import zipfile
from pathlib import Path
from typing import Dict

import pytest

from labeltrack_converter.config.pydantic_config import (
    ENV_ENCODING,
    ENV_LOG_LEVEL,
    ConverterConfig,
)
from labeltrack_converter.core.converter import BookmarkConverter
from tests.fixtures.test_data import (
    EMPTY_EXPORT_XML,
    INCOMPLETE_EXPORT_XML,
    MALFORMED_EXPORT_XML,
    SAMPLE_EXPORT_XML,
)

# ============================================================================
# Environment
# ============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep converter environment variables out of every test."""
    monkeypatch.delenv(ENV_ENCODING, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)


# ============================================================================
# File Fixtures
# ============================================================================


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def sample_export_file(tmp_path: Path) -> Path:
    """Well-formed export referencing two media files."""
    return _write(tmp_path / "bookmarks.xml", SAMPLE_EXPORT_XML)


@pytest.fixture
def incomplete_export_file(tmp_path: Path) -> Path:
    """Export with bookmarks missing file names or positions."""
    return _write(tmp_path / "incomplete.xml", INCOMPLETE_EXPORT_XML)


@pytest.fixture
def empty_export_file(tmp_path: Path) -> Path:
    """Well-formed export without any bookmarks."""
    return _write(tmp_path / "empty.xml", EMPTY_EXPORT_XML)


@pytest.fixture
def malformed_export_file(tmp_path: Path) -> Path:
    """Export with an unclosed root element."""
    return _write(tmp_path / "malformed.xml", MALFORMED_EXPORT_XML)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Directory for generated archives."""
    directory = tmp_path / "out"
    directory.mkdir()
    return directory


# ============================================================================
# Converter Fixtures
# ============================================================================


@pytest.fixture
def converter_config() -> ConverterConfig:
    """Configuration with file logging disabled."""
    return ConverterConfig(logging={"file_logging": False})


@pytest.fixture
def converter(converter_config: ConverterConfig) -> BookmarkConverter:
    return BookmarkConverter(converter_config)


# ============================================================================
# Helpers
# ============================================================================


def read_zip_entries(data: bytes) -> Dict[str, str]:
    """Return archive entries as {name: text}, preserving archive order."""
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        return {
            info.filename: archive.read(info.filename).decode("utf-8")
            for info in archive.infolist()
        }


@pytest.fixture
def zip_reader():
    """Expose read_zip_entries to tests."""
    return read_zip_entries
