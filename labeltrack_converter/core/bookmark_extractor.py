"""
Namespace-agnostic element lookup for bookmark export documents.

Bookmark exports do not use namespaces consistently, so elements are
matched on their local name only. ElementTree stores namespaced tags in
Clark notation (``{uri}local``); everything up to the closing brace is
ignored.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Iterator, List, Optional

BOOKMARK_TAG = "bookmark"

logger = logging.getLogger(__name__)


def local_name(tag) -> str:
    """
    Return the local part of an element tag.

    Comments and processing instructions have non-string tags and yield an
    empty string so they never match.
    """
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[-1]
    # Prefixed names can survive when a prefix was never declared
    return tag.rsplit(":", 1)[-1]


def iter_by_local_name(element: ET.Element, name: str) -> Iterator[ET.Element]:
    """Yield the element and its descendants named ``name``, in document order."""
    for candidate in element.iter():
        if local_name(candidate.tag) == name:
            yield candidate


def find_first_descendant(element: ET.Element, name: str) -> Optional[ET.Element]:
    """Return the first descendant (not the element itself) named ``name``."""
    for candidate in iter_by_local_name(element, name):
        if candidate is not element:
            return candidate
    return None


def extract_bookmarks(root: ET.Element) -> List[ET.Element]:
    """
    Collect every bookmark element in the document.

    Args:
        root: Root element of the parsed export

    Returns:
        Bookmark elements in document order; empty if there are none
    """
    bookmarks = list(iter_by_local_name(root, BOOKMARK_TAG))
    logger.debug(f"Found {len(bookmarks)} bookmark elements")
    return bookmarks
