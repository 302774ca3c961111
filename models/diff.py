"""
Diff data models for the text comparison tool.

Line-level and character-level edit scripts, plus the aligned rows
produced for side-by-side display.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class DiffKind(str, Enum):
    """Classification of a line or character run in an edit script."""

    EQUAL = "eq"
    INSERTED = "ins"
    DELETED = "del"


class RowKind(str, Enum):
    """Classification of an aligned comparison row."""

    EQUAL = "eq"
    MODIFIED = "mod"
    DELETED = "del"
    INSERTED = "ins"


@dataclass(frozen=True)
class DiffLine:
    """
    A single line of a line-level edit script.

    Attributes:
        kind: Equal, inserted or deleted
        text: Line content without the line terminator
        line_number: 1-based number in the line's own source text
            (old text for EQUAL/DELETED, new text for INSERTED)
    """

    kind: DiffKind
    text: str
    line_number: int


@dataclass(frozen=True)
class CharDiffChunk:
    """A contiguous run of characters sharing the same classification."""

    kind: DiffKind
    text: str


@dataclass(frozen=True)
class AlignedRow:
    """
    One visual comparison unit pairing at most one line from each side.

    Attributes:
        kind: Row classification
        left: Line from the old text (EQUAL, MODIFIED, DELETED)
        right: Line from the new text (EQUAL, MODIFIED, INSERTED), numbered
            in the new text
        left_chunks: Old-side highlighting (EQUAL + DELETED chunks), MODIFIED only
        right_chunks: New-side highlighting (EQUAL + INSERTED chunks), MODIFIED only
    """

    kind: RowKind
    left: Optional[DiffLine] = None
    right: Optional[DiffLine] = None
    left_chunks: Tuple[CharDiffChunk, ...] = ()
    right_chunks: Tuple[CharDiffChunk, ...] = ()

    def __post_init__(self):
        """Enforce which sides each row kind carries."""
        needs_left = self.kind in (RowKind.EQUAL, RowKind.MODIFIED, RowKind.DELETED)
        needs_right = self.kind in (RowKind.EQUAL, RowKind.MODIFIED, RowKind.INSERTED)

        if needs_left != (self.left is not None):
            raise ValueError(f"{self.kind.name} row has invalid left side: {self.left!r}")
        if needs_right != (self.right is not None):
            raise ValueError(f"{self.kind.name} row has invalid right side: {self.right!r}")
        if self.kind is not RowKind.MODIFIED and (self.left_chunks or self.right_chunks):
            raise ValueError(f"Only MODIFIED rows carry character chunks, got {self.kind.name}")

    @property
    def is_change(self) -> bool:
        return self.kind is not RowKind.EQUAL


@dataclass(frozen=True)
class DiffStats:
    """Inserted/deleted line counts taken from the raw line diff."""

    inserted: int = 0
    deleted: int = 0

    @property
    def total_changes(self) -> int:
        return self.inserted + self.deleted


@dataclass(frozen=True)
class DiffResult:
    """Complete comparison of two texts."""

    rows: Tuple[AlignedRow, ...]
    stats: DiffStats
    line_diff: Tuple[DiffLine, ...] = ()

    @property
    def has_changes(self) -> bool:
        return self.stats.total_changes > 0
