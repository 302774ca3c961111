"""Data models for the developer text toolkit."""

from .diff import (
    AlignedRow,
    CharDiffChunk,
    DiffKind,
    DiffLine,
    DiffResult,
    DiffStats,
    RowKind,
)
from .parsed_value import ParsedValue
from .application_state import ApplicationState

__all__ = [
    "AlignedRow",
    "CharDiffChunk",
    "DiffKind",
    "DiffLine",
    "DiffResult",
    "DiffStats",
    "RowKind",
    "ParsedValue",
    "ApplicationState",
]
