"""
Label track encoding.

A label track is a tab-separated text file with three columns (start,
end, label). The first line names the media file; each following line
marks one bookmark position, labelled with its ordinal among the lines
actually written.

Example for file ``a`` with positions 10 and 30::

    0	0	a
    10	10	0
    30	30	1
"""

from typing import List, Optional, Sequence

from .data_models import BookmarkRecord
from .diagnostics import ConversionDiagnostics

FIELD_SEPARATOR = "\t"
LINE_SEPARATOR = "\n"


def format_line(start: str, end: str, label: str) -> str:
    return FIELD_SEPARATOR.join((start, end, label))


def header_line(file_name: str) -> str:
    return format_line("0", "0", file_name)


def encode_label_track(
    file_name: str,
    records: Sequence[BookmarkRecord],
    diagnostics: Optional[ConversionDiagnostics] = None,
) -> str:
    """
    Render one group of bookmarks as label track text.

    Records without a position are skipped and do not consume a label
    index. Identical positions are written as separate lines.

    Args:
        file_name: Media file the group refers to
        records: Bookmarks for that file, in document order
        diagnostics: Optional collector for skipped records

    Returns:
        Label track text without a trailing newline
    """
    lines: List[str] = [header_line(file_name)]
    label_index = 0

    for record_index, record in enumerate(records):
        position = record.file_position
        if position is None:
            if diagnostics is not None:
                diagnostics.missing_position(record_index, file_name)
            continue
        lines.append(format_line(position, position, str(label_index)))
        label_index += 1

    return LINE_SEPARATOR.join(lines)
