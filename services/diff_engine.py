"""
DiffEngine for text comparison.

Runs the line diff, tallies inserted/deleted lines and aligns the result
into rows with intra-line highlighting for modified lines.
"""

import logging
from typing import Optional

from models import DiffKind, DiffResult, DiffStats
from utils.performance import monitor_performance
from .diff_aligner import DiffAligner
from .line_diff import LineDiffEngine

logger = logging.getLogger(__name__)


class DiffEngine:
    """
    Text difference engine for comparing original and modified text.

    Any two strings, including empty ones, produce a valid result; there are
    no error conditions. Input size is not limited, both LCS passes are
    quadratic in their input.
    """

    def __init__(self, line_engine: Optional[LineDiffEngine] = None,
                 aligner: Optional[DiffAligner] = None):
        self.line_engine = line_engine or LineDiffEngine()
        self.aligner = aligner or DiffAligner()

    @monitor_performance("compare_texts")
    def compare(self, old_text: str, new_text: str) -> DiffResult:
        """
        Compare two texts line by line.

        Algorithm:
        - Split both texts into lines (\\n or \\r\\n)
        - LCS line diff, ties resolved towards insertion
        - Count inserted/deleted lines from the raw line diff
        - Pair deletion/insertion runs into modified rows

        Args:
            old_text: Original text
            new_text: Modified text

        Returns:
            DiffResult with aligned rows and summary counts
        """
        old_lines = self.line_engine.split_lines(old_text)
        new_lines = self.line_engine.split_lines(new_text)

        line_diff = self.line_engine.compute(old_lines, new_lines)
        stats = self.count_changes(line_diff)
        rows = self.aligner.align(line_diff)

        logger.debug(
            f"Compared {len(old_lines)} vs {len(new_lines)} lines: "
            f"+{stats.inserted} -{stats.deleted}, {len(rows)} rows"
        )

        return DiffResult(rows=tuple(rows), stats=stats, line_diff=tuple(line_diff))

    @staticmethod
    def count_changes(line_diff) -> DiffStats:
        """
        Tally inserted and deleted lines.

        Args:
            line_diff: Raw line diff (before alignment)

        Returns:
            DiffStats with inserted/deleted counts
        """
        inserted = sum(1 for line in line_diff if line.kind is DiffKind.INSERTED)
        deleted = sum(1 for line in line_diff if line.kind is DiffKind.DELETED)
        return DiffStats(inserted=inserted, deleted=deleted)
