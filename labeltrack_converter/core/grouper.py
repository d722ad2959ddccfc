"""
Grouping of bookmark records by the media file they reference.
"""

import logging
from typing import Iterable, Optional

from .data_models import BookmarkRecord, GroupedBookmarks
from .diagnostics import ConversionDiagnostics

logger = logging.getLogger(__name__)


def group_bookmarks(
    records: Iterable[BookmarkRecord],
    diagnostics: Optional[ConversionDiagnostics] = None,
) -> GroupedBookmarks:
    """
    Partition records into groups keyed by file name.

    Groups appear in the order their file name is first seen, and records
    keep their document order within a group. Records without a file name
    are dropped and reported to ``diagnostics``.

    Args:
        records: Resolved bookmark records in document order
        diagnostics: Optional collector for skipped records

    Returns:
        Ordered mapping of file name to records
    """
    groups: GroupedBookmarks = {}

    for index, record in enumerate(records):
        if record.file_name is None:
            if diagnostics is not None:
                diagnostics.missing_file_name(index)
            continue
        groups.setdefault(record.file_name, []).append(record)

    logger.debug(f"Grouped bookmarks into {len(groups)} file groups")
    return groups
