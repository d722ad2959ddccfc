"""
Label track exporters.

This module provides the zip archive exporter used to package converted
label tracks.
"""

from .base import ExportError
from .archive_exporter import LabelTrackArchiveExporter

__all__ = [
    "ExportError",
    "LabelTrackArchiveExporter",
]
