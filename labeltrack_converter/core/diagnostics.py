"""
Conversion diagnostics.

Bookmarks with missing fields are skipped rather than aborting the run.
Each skip is recorded here so the caller can report a single aggregated
warning once the conversion has finished.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

INCOMPLETE_DATA_MESSAGE = (
    "Not all bookmarks could be processed some data may be missing."
)


class WarningKind(Enum):
    """Kinds of non-fatal problems found while converting."""

    MISSING_FILE_NAME = "missing_file_name"
    MISSING_POSITION = "missing_position"


@dataclass(frozen=True)
class ConversionWarning:
    """
    A skipped bookmark.

    Attributes:
        kind: What was missing
        index: Position of the bookmark within its input sequence
        file_name: File the bookmark referenced, when known
    """

    kind: WarningKind
    index: int
    file_name: Optional[str] = None

    def __str__(self) -> str:
        if self.kind is WarningKind.MISSING_FILE_NAME:
            return f"Bookmark #{self.index} has no file name and was skipped"
        return (
            f"Bookmark #{self.index} for '{self.file_name}' has no file "
            f"position and was skipped"
        )


@dataclass
class ConversionDiagnostics:
    """Collects warnings for a single conversion run."""

    warnings: List[ConversionWarning] = field(default_factory=list)

    def __post_init__(self):
        self.logger = logging.getLogger(__name__)

    def record(
        self, kind: WarningKind, index: int, file_name: Optional[str] = None
    ) -> None:
        warning = ConversionWarning(kind=kind, index=index, file_name=file_name)
        self.warnings.append(warning)
        self.logger.debug(str(warning))

    def missing_file_name(self, index: int) -> None:
        self.record(WarningKind.MISSING_FILE_NAME, index)

    def missing_position(self, index: int, file_name: str) -> None:
        self.record(WarningKind.MISSING_POSITION, index, file_name)

    def count(self, kind: WarningKind) -> int:
        return sum(1 for w in self.warnings if w.kind is kind)

    def counts(self) -> Dict[str, int]:
        """Warning counts keyed by kind value, including zero counts."""
        return {kind.value: self.count(kind) for kind in WarningKind}

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def summary_message(self) -> Optional[str]:
        """Return the aggregated user message, or None if nothing was skipped."""
        if not self.warnings:
            return None
        return INCOMPLETE_DATA_MESSAGE

    def __len__(self) -> int:
        return len(self.warnings)
