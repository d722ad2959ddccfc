"""
Error handling for the Label Track Converter.

This module defines the exception hierarchy used throughout the conversion
pipeline and a small helper for turning exceptions into user-facing
messages.
"""

import logging
from typing import Optional


# ============================================================================
# Unified Exception Hierarchy for Label Track Converter
# ============================================================================
# All custom exceptions for the converter are defined here.
# Import these exceptions from labeltrack_converter.utils.error_handler
# ============================================================================


class LabelTrackConverterError(Exception):
    """Base exception for all label track converter errors."""

    pass


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationError(LabelTrackConverterError):
    """Invalid command-line arguments or file paths."""

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(LabelTrackConverterError):
    """Configuration-related errors."""

    pass


# ============================================================================
# Input Errors
# ============================================================================


class InputFileError(LabelTrackConverterError):
    """The bookmark export could not be read or decoded."""

    pass


class ParseError(LabelTrackConverterError):
    """
    The bookmark export is not well-formed XML.

    Attributes:
        message: Error description
        line: Line reported by the XML parser, if known
        column: Column reported by the XML parser, if known
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.line is not None:
            return f"{self.message} (line {self.line}, column {self.column})"
        return self.message


# ============================================================================
# User-facing messages
# ============================================================================

PARSE_FAILURE_MESSAGE = "Could not parse file."


def get_user_message(error: Exception) -> str:
    """
    Convert an exception into a short message suitable for the console.

    Args:
        error: Exception raised during conversion

    Returns:
        Message text for the user
    """
    if isinstance(error, ParseError):
        return f"{PARSE_FAILURE_MESSAGE} {error}"
    if isinstance(error, LabelTrackConverterError):
        return str(error)

    logging.getLogger(__name__).debug(
        "Unexpected error type %s", type(error).__name__
    )
    return f"Unexpected error: {error}"
