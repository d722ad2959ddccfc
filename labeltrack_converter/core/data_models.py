"""
Data models for the Label Track Converter.

This module defines the internal data structures that flow through the
conversion pipeline, from resolved bookmark records to the final archive.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

DEFAULT_ARCHIVE_NAME = "converted-bookmarks.zip"
DEFAULT_ENTRY_SUFFIX = "_labelTrack.txt"


@dataclass(frozen=True)
class BookmarkRecord:
    """
    A single bookmark as read from the export document.

    Either field is None when the corresponding element is missing or its
    text content is empty.
    """

    file_name: Optional[str] = None
    file_position: Optional[str] = None


# Ordered mapping of file name to the bookmarks referencing it
GroupedBookmarks = Dict[str, List[BookmarkRecord]]


@dataclass(frozen=True)
class ArchiveEntry:
    """One label track file inside the output archive."""

    name: str
    content: str

    @classmethod
    def for_file(
        cls, file_name: str, content: str, suffix: str = DEFAULT_ENTRY_SUFFIX
    ) -> "ArchiveEntry":
        """Build an entry named after the media file it describes."""
        return cls(name=f"{file_name}{suffix}", content=content)


@dataclass
class OutputArchive:
    """
    The packaged result of one conversion.

    Attributes:
        name: File name of the archive
        entries: Label track entries in archive order
        data: Zip file contents
    """

    name: str = DEFAULT_ARCHIVE_NAME
    entries: List[ArchiveEntry] = field(default_factory=list)
    data: bytes = b""

    @property
    def entry_names(self) -> List[str]:
        return [entry.name for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return (
            f"OutputArchive(name={self.name}, entries={len(self.entries)}, "
            f"size={len(self.data)} bytes)"
        )
