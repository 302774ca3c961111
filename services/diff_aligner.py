"""
DiffAligner: turns a line edit script into side-by-side rows.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from models import AlignedRow, DiffKind, DiffLine, RowKind
from .char_diff import CharDiffEngine, left_view, right_view

logger = logging.getLogger(__name__)


class DiffAligner:
    """
    Pairs deletion runs with the insertion runs that follow them.

    A run of consecutive deletions followed directly by a run of insertions
    is read as a block of edited lines. The k-th deleted line is paired with
    the k-th inserted line and the pair becomes a MODIFIED row with
    character highlighting. Leftover lines on the longer side become plain
    DELETED or INSERTED rows. Pairing is purely positional: lines are not
    matched by similarity.
    """

    def __init__(self, char_engine: Optional[CharDiffEngine] = None):
        self.char_engine = char_engine or CharDiffEngine()

    def align(self, line_diff: Sequence[DiffLine]) -> List[AlignedRow]:
        """
        Build aligned rows from a line diff.

        Args:
            line_diff: Output of LineDiffEngine.compute

        Returns:
            Rows in display order. The right side of an EQUAL row carries
            the line's number in the new text.
        """
        rows: List[AlignedRow] = []
        new_number = 0
        i = 0
        total = len(line_diff)

        while i < total:
            current = line_diff[i]

            if current.kind is DiffKind.EQUAL:
                new_number += 1
                rows.append(AlignedRow(
                    RowKind.EQUAL, left=current, right=replace(current, line_number=new_number)
                ))
                i += 1
            elif current.kind is DiffKind.DELETED:
                j = i
                while j < total and line_diff[j].kind is DiffKind.DELETED:
                    j += 1
                k = j
                while k < total and line_diff[k].kind is DiffKind.INSERTED:
                    k += 1

                new_number += k - j
                rows.extend(self._pair_runs(line_diff[i:j], line_diff[j:k]))
                i = k
            else:
                new_number += 1
                rows.append(AlignedRow(RowKind.INSERTED, right=current))
                i += 1

        return rows

    def _pair_runs(self, deleted: Sequence[DiffLine],
                   inserted: Sequence[DiffLine]) -> List[AlignedRow]:
        """Pair a deletion run with an insertion run by position."""
        if deleted and inserted and len(deleted) != len(inserted):
            logger.debug(
                f"Pairing {len(deleted)} deleted with {len(inserted)} inserted lines by position"
            )

        rows = []
        for index in range(max(len(deleted), len(inserted))):
            old_line = deleted[index] if index < len(deleted) else None
            new_line = inserted[index] if index < len(inserted) else None

            if old_line is not None and new_line is not None:
                chunks = self.char_engine.compute(old_line.text, new_line.text)
                rows.append(AlignedRow(
                    RowKind.MODIFIED,
                    left=old_line,
                    right=new_line,
                    left_chunks=tuple(left_view(chunks)),
                    right_chunks=tuple(right_view(chunks)),
                ))
            elif old_line is not None:
                rows.append(AlignedRow(RowKind.DELETED, left=old_line))
            else:
                rows.append(AlignedRow(RowKind.INSERTED, right=new_line))

        return rows
