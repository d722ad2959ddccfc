"""
Zip archive exporter for label tracks.

Encodes every bookmark group as a label track and bundles the results
into a single zip archive, one text entry per referenced media file.
"""

import io
import logging
import zipfile
from pathlib import Path
from typing import List, Optional, Union

from .base import ExportError
from ..data_models import (
    DEFAULT_ARCHIVE_NAME,
    DEFAULT_ENTRY_SUFFIX,
    ArchiveEntry,
    GroupedBookmarks,
    OutputArchive,
)
from ..diagnostics import ConversionDiagnostics
from ..label_track import encode_label_track

COMPRESSION_METHODS = {
    "deflated": zipfile.ZIP_DEFLATED,
    "stored": zipfile.ZIP_STORED,
}


class LabelTrackArchiveExporter:
    """
    Export label tracks as a zip archive.

    Example:
        >>> exporter = LabelTrackArchiveExporter()
        >>> entries = exporter.build_entries(groups)
        >>> data = exporter.package(entries)
    """

    format_name = "Label Track Archive"
    file_extension = "zip"

    def __init__(
        self,
        archive_name: str = DEFAULT_ARCHIVE_NAME,
        entry_suffix: str = DEFAULT_ENTRY_SUFFIX,
        compression: str = "deflated",
    ):
        """
        Initialize the archive exporter.

        Args:
            archive_name: File name used when exporting into a directory
            entry_suffix: Appended to each media file name to name its entry
            compression: "deflated" or "stored"
        """
        if compression not in COMPRESSION_METHODS:
            raise ValueError(
                f"Unsupported compression: {compression}. "
                f"Supported: {', '.join(COMPRESSION_METHODS)}"
            )
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.archive_name = archive_name
        self.entry_suffix = entry_suffix
        self.compression = compression

    def build_entries(
        self,
        groups: GroupedBookmarks,
        diagnostics: Optional[ConversionDiagnostics] = None,
    ) -> List[ArchiveEntry]:
        """
        Encode each group into a named archive entry.

        Args:
            groups: Bookmarks grouped by media file
            diagnostics: Optional collector for bookmarks without a position

        Returns:
            Entries in group order
        """
        return [
            ArchiveEntry.for_file(
                file_name,
                encode_label_track(file_name, records, diagnostics),
                self.entry_suffix,
            )
            for file_name, records in groups.items()
        ]

    def package(self, entries: List[ArchiveEntry]) -> bytes:
        """
        Bundle entries into zip bytes.

        Args:
            entries: Label track entries, written in the given order

        Returns:
            Contents of the zip file
        """
        buffer = io.BytesIO()
        with zipfile.ZipFile(
            buffer, "w", compression=COMPRESSION_METHODS[self.compression]
        ) as archive:
            for entry in entries:
                archive.writestr(entry.name, entry.content.encode("utf-8"))
        return buffer.getvalue()

    def resolve_output_path(self, output_path: Union[str, Path]) -> Path:
        """Exporting into an existing directory writes the default archive name there."""
        path = Path(output_path)
        if path.is_dir():
            return path / self.archive_name
        return path

    def prepare_output_path(self, output_path: Union[str, Path]) -> Path:
        """
        Create the parent directory of the archive if needed.

        Raises:
            ExportError: If the parent directory cannot be created
        """
        path = Path(output_path)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError as e:
            raise ExportError(
                f"Permission denied creating path: {path}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )
        except OSError as e:
            raise ExportError(
                f"Failed to prepare output path: {path}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )

        return path

    def write_archive(
        self, archive: OutputArchive, output_path: Union[str, Path]
    ) -> Path:
        """
        Write an already built archive to disk.

        Raises:
            ExportError: If the file cannot be written
        """
        path = self.prepare_output_path(self.resolve_output_path(output_path))

        try:
            path.write_bytes(archive.data)
        except OSError as e:
            raise ExportError(
                f"Failed to write archive: {e}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )

        self.logger.info(f"Wrote {len(archive)} label tracks to {path}")
        return path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format={self.format_name})"
