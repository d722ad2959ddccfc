"""
Input validation utilities for the Label Track Converter.

This module provides validation functions for command-line arguments
and file paths.
"""

import os
from pathlib import Path
from typing import Optional, Union

from .error_handler import ValidationError


def validate_input_file(
    file_path: Union[str, Path, None], max_bytes: Optional[int] = None
) -> Path:
    """
    Validate that the bookmark export exists and is readable.

    Args:
        file_path: Path to the input file
        max_bytes: Optional size limit in bytes

    Returns:
        Validated absolute Path

    Raises:
        ValidationError: If no file was given, or it is missing, unreadable
            or too large
    """
    if file_path is None or str(file_path) == "":
        raise ValidationError("Input file is required (use --input/-i)")

    path = Path(file_path)

    if not path.exists():
        raise ValidationError(f"Input file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Input path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Input file is not readable: {file_path}")

    if max_bytes is not None and path.stat().st_size > max_bytes:
        raise ValidationError(
            f"Input file is too large: {file_path} "
            f"({path.stat().st_size} bytes, limit {max_bytes})"
        )

    return path.absolute()


def validate_output_file(
    file_path: Union[str, Path, None], default_name: str = "converted-bookmarks.zip"
) -> Path:
    """
    Validate the archive destination.

    An existing directory is accepted and resolved to ``default_name``
    inside it. Otherwise the path must end in ``.zip`` and its parent must
    be creatable and writable.

    Args:
        file_path: Archive path, directory, or None for the current directory
        default_name: Archive name used for directories

    Returns:
        Validated absolute Path of the archive

    Raises:
        ValidationError: If the path isn't usable
    """
    if file_path is None or str(file_path) == "":
        path = Path.cwd() / default_name
    else:
        path = Path(file_path)

    if path.is_dir():
        path = path / default_name

    if path.suffix.lower() != ".zip":
        raise ValidationError(f"Output file must be a ZIP file, got: {path.suffix or path.name}")

    # Missing directories are created when the archive is written
    parent = path.parent
    while not parent.exists() and parent != parent.parent:
        parent = parent.parent

    if not parent.is_dir():
        raise ValidationError(f"Output location is not a directory: {parent}")

    if not os.access(parent, os.W_OK):
        raise ValidationError(f"Output directory is not writable: {parent}")

    if path.exists() and not os.access(path, os.W_OK):
        raise ValidationError(f"Output file exists and is not writable: {path}")

    return path.absolute()


def validate_config_file(file_path: Union[str, Path, None]) -> Union[Path, None]:
    """
    Validate configuration file if provided.

    Args:
        file_path: Path to the config file or None

    Returns:
        Validated Path object or None

    Raises:
        ValidationError: If file doesn't exist or isn't readable
    """
    if file_path is None:
        return None

    path = Path(file_path)

    if not path.exists():
        raise ValidationError(f"Configuration file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Configuration path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Configuration file is not readable: {file_path}")

    if path.suffix.lower() not in [".toml", ".json"]:
        raise ValidationError(
            f"Configuration file must be .toml or .json, got: {path.suffix}"
        )

    return path.absolute()


def validate_conflicting_arguments(verbose: bool, quiet: bool) -> None:
    """
    Validate that conflicting arguments aren't both set.

    Raises:
        ValidationError: If conflicting arguments are set
    """
    if verbose and quiet:
        raise ValidationError(
            "Cannot use --verbose and --quiet together. Choose one or the other."
        )
