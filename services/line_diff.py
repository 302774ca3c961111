"""
LineDiffEngine: line-level edit script via longest common subsequence.
"""

import re
from typing import List, Sequence

from models import DiffKind, DiffLine

_LINE_BREAK = re.compile(r"\r?\n")


def lcs_table(old: Sequence, new: Sequence) -> List[List[int]]:
    """
    Build the LCS length table for two sequences.

    dp[i][j] is the length of the longest common subsequence of old[:i]
    and new[:j].
    """
    n = len(new)
    dp = [[0] * (n + 1)]
    for i, old_item in enumerate(old, start=1):
        prev = dp[i - 1]
        row = [0] * (n + 1)
        for j in range(1, n + 1):
            if old_item == new[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = prev[j] if prev[j] >= row[j - 1] else row[j - 1]
        dp.append(row)
    return dp


class LineDiffEngine:
    """
    Computes a minimal line edit script between two line sequences.

    Uses an (m+1) x (n+1) LCS table and walks it backward from (m, n).
    When both directions keep the LCS length, the new line is emitted as
    inserted before the old line is emitted as deleted. That choice decides
    which of several minimal scripts comes out, so it must not change.

    Time and memory are O(m * n).
    """

    @staticmethod
    def split_lines(text: str) -> List[str]:
        """
        Split text on \\n, dropping an optional \\r before each break.

        An empty text is a single empty line.
        """
        return _LINE_BREAK.split(text)

    def compute(self, old_lines: Sequence[str], new_lines: Sequence[str]) -> List[DiffLine]:
        """
        Diff two line sequences.

        Args:
            old_lines: Lines of the original text
            new_lines: Lines of the modified text

        Returns:
            DiffLine entries in display order
        """
        dp = lcs_table(old_lines, new_lines)

        script = []
        i, j = len(old_lines), len(new_lines)
        while i > 0 or j > 0:
            if i > 0 and j > 0 and old_lines[i - 1] == new_lines[j - 1]:
                script.append(DiffLine(DiffKind.EQUAL, old_lines[i - 1], i))
                i -= 1
                j -= 1
            elif j > 0 and (i == 0 or dp[i][j - 1] >= dp[i - 1][j]):
                script.append(DiffLine(DiffKind.INSERTED, new_lines[j - 1], j))
                j -= 1
            else:
                script.append(DiffLine(DiffKind.DELETED, old_lines[i - 1], i))
                i -= 1

        script.reverse()
        return script
