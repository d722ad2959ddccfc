"""
Field resolution for bookmark elements.

Reads the ``fileName`` and ``filePosition`` values out of a bookmark
element. The resolver only reports missing values as None; deciding what
to skip is left to the grouper and the label track encoder.
"""

import xml.etree.ElementTree as ET
from typing import Optional

from .bookmark_extractor import find_first_descendant
from .data_models import BookmarkRecord

FILE_NAME_TAG = "fileName"
FILE_POSITION_TAG = "filePosition"


def text_content(element: ET.Element) -> str:
    """Return all text inside an element, including nested elements, untrimmed."""
    return "".join(element.itertext())


def resolve_field(bookmark: ET.Element, name: str) -> Optional[str]:
    """
    Read the text of the first descendant named ``name``.

    Returns:
        The exact text content, or None if the element is missing or empty
    """
    element = find_first_descendant(bookmark, name)
    if element is None:
        return None
    return text_content(element) or None


def resolve_bookmark(bookmark: ET.Element) -> BookmarkRecord:
    """Build a BookmarkRecord from a bookmark element."""
    return BookmarkRecord(
        file_name=resolve_field(bookmark, FILE_NAME_TAG),
        file_position=resolve_field(bookmark, FILE_POSITION_TAG),
    )
