"""
CharDiffEngine: character-level diff for a pair of modified lines.
"""

from typing import Iterable, List

from models import CharDiffChunk, DiffKind
from .line_diff import lcs_table


class CharDiffEngine:
    """
    Character-level diff with common prefix/suffix stripping.

    The shared prefix and suffix are cut off first and the LCS runs only on
    the changed middle. This keeps common affixes anchored as equal text
    (ABCXYZ vs ABCQYZ gives ABC | -X +Q | YZ) and keeps the quadratic
    table small for typical one-spot edits.
    """

    def compute(self, old_text: str, new_text: str) -> List[CharDiffChunk]:
        """
        Diff two strings character by character.

        Args:
            old_text: Original line
            new_text: Modified line

        Returns:
            Merged chunks; no two neighbours share a kind
        """
        prefix_len = 0
        limit = min(len(old_text), len(new_text))
        while prefix_len < limit and old_text[prefix_len] == new_text[prefix_len]:
            prefix_len += 1

        # Suffix must not overlap the prefix
        suffix_len = 0
        suffix_limit = limit - prefix_len
        while (suffix_len < suffix_limit
               and old_text[-1 - suffix_len] == new_text[-1 - suffix_len]):
            suffix_len += 1

        mid_old = old_text[prefix_len:len(old_text) - suffix_len]
        mid_new = new_text[prefix_len:len(new_text) - suffix_len]

        chunks = []
        if prefix_len:
            chunks.append(CharDiffChunk(DiffKind.EQUAL, old_text[:prefix_len]))
        chunks.extend(self._diff_middle(mid_old, mid_new))
        if suffix_len:
            chunks.append(CharDiffChunk(DiffKind.EQUAL, old_text[len(old_text) - suffix_len:]))

        return merge_chunks(chunks)

    @staticmethod
    def _diff_middle(old: str, new: str) -> List[CharDiffChunk]:
        """LCS backtrack over the middle segment, same tie-break as lines."""
        dp = lcs_table(old, new)

        script = []
        i, j = len(old), len(new)
        while i > 0 or j > 0:
            if i > 0 and j > 0 and old[i - 1] == new[j - 1]:
                script.append(CharDiffChunk(DiffKind.EQUAL, old[i - 1]))
                i -= 1
                j -= 1
            elif j > 0 and (i == 0 or dp[i][j - 1] >= dp[i - 1][j]):
                script.append(CharDiffChunk(DiffKind.INSERTED, new[j - 1]))
                j -= 1
            else:
                script.append(CharDiffChunk(DiffKind.DELETED, old[i - 1]))
                i -= 1

        script.reverse()
        return script


def merge_chunks(chunks: Iterable[CharDiffChunk]) -> List[CharDiffChunk]:
    """
    Merge adjacent chunks of the same kind and drop empty ones.

    Args:
        chunks: Chunks in display order

    Returns:
        New list satisfying the no-adjacent-same-kind invariant
    """
    merged: List[CharDiffChunk] = []
    for chunk in chunks:
        if not chunk.text:
            continue
        if merged and merged[-1].kind is chunk.kind:
            merged[-1] = CharDiffChunk(chunk.kind, merged[-1].text + chunk.text)
        else:
            merged.append(chunk)
    return merged


def left_view(chunks: Iterable[CharDiffChunk]) -> List[CharDiffChunk]:
    """Old-side view: equal and deleted chunks only."""
    return merge_chunks(c for c in chunks if c.kind is not DiffKind.INSERTED)


def right_view(chunks: Iterable[CharDiffChunk]) -> List[CharDiffChunk]:
    """New-side view: equal and inserted chunks only."""
    return merge_chunks(c for c in chunks if c.kind is not DiffKind.DELETED)
