"""
Bookmark export parser module.

This module turns the raw text of a bookmark export into an ElementTree
document. Parsing is strict: any well-formedness error rejects the whole
input and no partial tree is returned.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Optional

from ..utils.error_handler import ParseError
from .bookmark_extractor import iter_by_local_name

# Element injected by DOM parsers in place of the document on failure
PARSER_ERROR_TAG = "parsererror"


class BookmarkParser:
    """
    Strict XML parser for bookmark exports.

    Example:
        >>> root = BookmarkParser().parse("<bookmarks/>")
        >>> root.tag
        'bookmarks'
    """

    def __init__(self):
        """Initialize the bookmark parser."""
        self.logger = logging.getLogger(__name__)

    def parse(self, text: str) -> ET.Element:
        """
        Parse export text into an element tree.

        Args:
            text: Complete document text

        Returns:
            Root element of the document

        Raises:
            ParseError: If the text is not well-formed XML or contains a
                parser-error marker element
        """
        if text.startswith("\ufeff"):
            text = text[1:]

        try:
            root = ET.fromstring(text)
        except ET.ParseError as e:
            line, column = self._error_position(e)
            self.logger.error(f"Bookmark export is not well-formed XML: {e}")
            # expat appends ": line X, column Y" which ParseError re-adds
            reason = str(e).rsplit(": line", 1)[0]
            raise ParseError(
                f"Invalid XML: {reason}",
                line=line,
                column=column,
            ) from e

        if self.has_parser_error(root):
            self.logger.error("Bookmark export contains a parser error marker")
            raise ParseError("Document contains a parser error marker")

        return root

    @staticmethod
    def has_parser_error(root: ET.Element) -> bool:
        """Check the tree structurally for a ``parsererror`` element."""
        return next(iter_by_local_name(root, PARSER_ERROR_TAG), None) is not None

    @staticmethod
    def _error_position(error: ET.ParseError):
        position: Optional[tuple] = getattr(error, "position", None)
        if position:
            return position[0], position[1]
        return None, None


def parse_bookmark_document(text: str) -> ET.Element:
    """
    Convenience function to parse bookmark export text.

    Args:
        text: Complete document text

    Returns:
        Root element of the document
    """
    return BookmarkParser().parse(text)
