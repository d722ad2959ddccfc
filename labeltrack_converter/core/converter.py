"""
Bookmark to label track conversion pipeline.

Runs a single linear pass over one bookmark export:

    parse -> extract -> resolve fields -> group -> encode -> package

Parse failures abort the conversion. Bookmarks with missing fields are
skipped, recorded in the run's diagnostics, and summarized once at the end.
The converter keeps no state between runs, so independent conversions may
run concurrently.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from ..config.pydantic_config import ConverterConfig
from ..utils.error_handler import InputFileError, ParseError
from .bookmark_extractor import extract_bookmarks
from .bookmark_parser import BookmarkParser
from .data_models import ArchiveEntry, BookmarkRecord, GroupedBookmarks, OutputArchive
from .diagnostics import ConversionDiagnostics
from .exporters.archive_exporter import LabelTrackArchiveExporter
from .field_resolver import resolve_bookmark
from .grouper import group_bookmarks

ProgressCallback = Callable[[float], None]

READ_CHUNK_SIZE = 64 * 1024


class PipelineStage(Enum):
    """Stages of a single conversion."""

    IDLE = "idle"
    PARSING = "parsing"
    FAILED = "failed"
    EXTRACTED = "extracted"
    GROUPING = "grouping"
    ENCODING = "encoding"
    PACKAGING = "packaging"
    DONE = "done"


@dataclass
class ConversionResult:
    """Outcome of one conversion."""

    archive: OutputArchive
    groups: GroupedBookmarks = field(default_factory=dict)
    diagnostics: ConversionDiagnostics = field(default_factory=ConversionDiagnostics)
    bookmark_count: int = 0
    stages: List[PipelineStage] = field(default_factory=list)
    output_path: Optional[Path] = None

    @property
    def entries(self) -> List[ArchiveEntry]:
        return self.archive.entries

    @property
    def warning_message(self) -> Optional[str]:
        return self.diagnostics.summary_message()

    def get_statistics(self) -> Dict[str, int]:
        stats = {
            "bookmarks": self.bookmark_count,
            "label_tracks": len(self.archive),
            "archive_bytes": len(self.archive.data),
        }
        stats.update(self.diagnostics.counts())
        return stats


def _notify(callback: Optional[ProgressCallback], percent: float) -> None:
    """Send a progress update; callback failures never affect the conversion."""
    if callback is None:
        return
    try:
        callback(percent)
    except Exception as e:
        logging.getLogger(__name__).warning(f"Progress callback failed: {e}")


def read_bookmark_file(
    path: Union[str, Path],
    encoding: str = "utf-8",
    progress: Optional[ProgressCallback] = None,
    max_bytes: Optional[int] = None,
) -> str:
    """
    Read a bookmark export as text, reporting progress from 0 to 100.

    Args:
        path: File to read
        encoding: Text encoding; a UTF-8 byte order mark is always removed
        progress: Optional callback receiving percentages
        max_bytes: Reject files larger than this many bytes

    Returns:
        Decoded file contents

    Raises:
        InputFileError: If the file cannot be read or decoded
    """
    path = Path(path)
    try:
        total = path.stat().st_size
    except OSError as e:
        raise InputFileError(f"Cannot read input file {path}: {e}") from e

    if max_bytes is not None and total > max_bytes:
        raise InputFileError(
            f"Input file {path} is {total} bytes, larger than the "
            f"{max_bytes} byte limit"
        )

    _notify(progress, 0.0)
    chunks = []
    loaded = 0
    try:
        with open(path, "rb") as f:
            while True:
                chunk = f.read(READ_CHUNK_SIZE)
                if not chunk:
                    break
                chunks.append(chunk)
                loaded += len(chunk)
                if total:
                    _notify(progress, min(loaded / total, 1.0) * 100)
    except OSError as e:
        raise InputFileError(f"Cannot read input file {path}: {e}") from e

    data = b"".join(chunks)
    if encoding.lower().replace("_", "-") in ("utf-8", "utf8"):
        encoding = "utf-8-sig"
    try:
        text = data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise InputFileError(f"Cannot decode {path} as {encoding}: {e}") from e

    _notify(progress, 100.0)
    return text


class BookmarkConverter:
    """
    Converts bookmark exports into zipped label tracks.

    Example:
        >>> converter = BookmarkConverter()
        >>> result = converter.convert_file("bookmarks.xml", "out.zip")
        >>> result.entries[0].name
        'take1.wav_labelTrack.txt'
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        """
        Initialize the converter.

        Args:
            config: Converter configuration; defaults are used if omitted
        """
        self.config = config or ConverterConfig()
        self.logger = logging.getLogger(__name__)
        self.parser = BookmarkParser()
        self.exporter = LabelTrackArchiveExporter(
            archive_name=self.config.output.archive_name,
            entry_suffix=self.config.output.entry_suffix,
            compression=self.config.output.compression,
        )

    # ------------------------------------------------------------------ #
    # Pipeline
    # ------------------------------------------------------------------ #

    def collect_records(self, text: str, stages: List[PipelineStage]) -> List[BookmarkRecord]:
        """Parse text and resolve every bookmark element into a record."""
        stages.append(PipelineStage.PARSING)
        try:
            root = self.parser.parse(text)
        except ParseError:
            stages.append(PipelineStage.FAILED)
            raise
        elements = extract_bookmarks(root)
        stages.append(PipelineStage.EXTRACTED)
        return [resolve_bookmark(element) for element in elements]

    def convert_text(self, text: str) -> ConversionResult:
        """
        Convert export text into an in-memory archive.

        Args:
            text: Complete bookmark export document

        Returns:
            ConversionResult with the archive and diagnostics

        Raises:
            ParseError: If the document is not well-formed XML
        """
        stages = [PipelineStage.IDLE]
        diagnostics = ConversionDiagnostics()

        records = self.collect_records(text, stages)

        stages.append(PipelineStage.GROUPING)
        groups = group_bookmarks(records, diagnostics)

        stages.append(PipelineStage.ENCODING)
        entries = self.exporter.build_entries(groups, diagnostics)

        stages.append(PipelineStage.PACKAGING)
        archive = OutputArchive(
            name=self.exporter.archive_name,
            entries=entries,
            data=self.exporter.package(entries),
        )
        stages.append(PipelineStage.DONE)

        self.logger.info(
            f"Converted {len(records)} bookmarks into {len(entries)} label tracks"
        )
        if diagnostics.has_warnings:
            self.logger.warning(
                f"{diagnostics.summary_message()} "
                f"({len(diagnostics)} bookmark(s) skipped)"
            )

        return ConversionResult(
            archive=archive,
            groups=groups,
            diagnostics=diagnostics,
            bookmark_count=len(records),
            stages=stages,
        )

    def convert_file(
        self,
        input_path: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> ConversionResult:
        """
        Convert an export file and write the archive.

        Args:
            input_path: Bookmark export to read
            output_path: Archive path or directory; defaults to the
                configured archive name in the current directory
            progress: Optional callback receiving read progress percentages

        Returns:
            ConversionResult with ``output_path`` set

        Raises:
            InputFileError: If the input cannot be read
            ParseError: If the input is not well-formed XML
            ExportError: If the archive cannot be written
        """
        text = read_bookmark_file(
            input_path,
            encoding=self.config.input.encoding,
            progress=progress,
            max_bytes=self.config.input.max_file_size_bytes,
        )
        result = self.convert_text(text)
        result.output_path = self.exporter.write_archive(
            result.archive, self._output_path(output_path)
        )
        return result

    # ------------------------------------------------------------------ #
    # Async entry points
    # ------------------------------------------------------------------ #

    async def read_bookmark_file_async(
        self,
        input_path: Union[str, Path],
        progress: Optional[ProgressCallback] = None,
    ) -> str:
        """Read an export file without blocking the event loop."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(
            None,
            lambda: read_bookmark_file(
                input_path,
                encoding=self.config.input.encoding,
                progress=progress,
                max_bytes=self.config.input.max_file_size_bytes,
            ),
        )

    async def write_archive_async(
        self, archive: OutputArchive, output_path: Optional[Union[str, Path]] = None
    ) -> Path:
        """Write a built archive without blocking the event loop."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(
            None, self.exporter.write_archive, archive, self._output_path(output_path)
        )

    async def convert_file_async(
        self,
        input_path: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> ConversionResult:
        """
        Async variant of convert_file.

        Suspends only while reading the input and writing the archive; the
        transform itself runs inline. There is no cancellation point between
        stages.
        """
        text = await self.read_bookmark_file_async(input_path, progress)
        result = self.convert_text(text)
        result.output_path = await self.write_archive_async(result.archive, output_path)
        return result

    def _output_path(self, output_path: Optional[Union[str, Path]]) -> Path:
        if output_path is None:
            return Path.cwd() / self.exporter.archive_name
        return Path(output_path)


def convert_bookmarks(text: str, config: Optional[ConverterConfig] = None) -> ConversionResult:
    """
    Convenience function to convert export text in memory.

    Args:
        text: Complete bookmark export document
        config: Optional converter configuration

    Returns:
        ConversionResult with the archive and diagnostics
    """
    return BookmarkConverter(config).convert_text(text)
