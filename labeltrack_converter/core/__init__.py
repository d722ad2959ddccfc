"""
Core label track conversion modules.

This package contains the conversion pipeline: bookmark XML parsing,
namespace-agnostic extraction, field resolution, grouping by media file,
label track encoding and archive packaging.
"""

from .bookmark_parser import BookmarkParser, parse_bookmark_document
from .bookmark_extractor import extract_bookmarks, local_name
from .field_resolver import resolve_bookmark
from .grouper import group_bookmarks
from .label_track import encode_label_track
from .data_models import ArchiveEntry, BookmarkRecord, OutputArchive
from .diagnostics import ConversionDiagnostics, ConversionWarning, WarningKind

__all__ = [
    'BookmarkParser',
    'parse_bookmark_document',
    'extract_bookmarks',
    'local_name',
    'resolve_bookmark',
    'group_bookmarks',
    'encode_label_track',
    'ArchiveEntry',
    'BookmarkRecord',
    'OutputArchive',
    'ConversionDiagnostics',
    'ConversionWarning',
    'WarningKind',
]
