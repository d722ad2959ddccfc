"""
Utility modules for label track conversion.

This package contains error handling, logging setup, argument validation
and console progress reporting.
"""

from .error_handler import (
    ConfigurationError,
    InputFileError,
    LabelTrackConverterError,
    ParseError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "InputFileError",
    "LabelTrackConverterError",
    "ParseError",
    "ValidationError",
]
