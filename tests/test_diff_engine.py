"""
Unit tests for the diff engines.

Tests specific examples for line diff, character diff, alignment and the
DiffEngine facade.
"""

import pytest
from models import AlignedRow, CharDiffChunk, DiffKind, DiffLine, RowKind
from services import CharDiffEngine, DiffAligner, DiffEngine, LineDiffEngine
from services.char_diff import left_view, merge_chunks, right_view


EQ, INS, DEL = DiffKind.EQUAL, DiffKind.INSERTED, DiffKind.DELETED


def kinds_and_texts(items):
    return [(item.kind, item.text) for item in items]


class TestLineSplitting:
    """Test line splitting."""

    def test_split_lf(self):
        assert LineDiffEngine.split_lines("a\nb\nc") == ["a", "b", "c"]

    def test_split_crlf(self):
        """\\r before \\n is dropped."""
        assert LineDiffEngine.split_lines("a\r\nb\r\n") == ["a", "b", ""]

    def test_lone_cr_is_kept(self):
        assert LineDiffEngine.split_lines("a\rb") == ["a\rb"]

    def test_empty_text_is_one_empty_line(self):
        assert LineDiffEngine.split_lines("") == [""]


class TestLineDiff:
    """Test line-level LCS diff."""

    def test_identical_lines(self):
        engine = LineDiffEngine()
        result = engine.compute(["a", "b"], ["a", "b"])

        assert kinds_and_texts(result) == [(EQ, "a"), (EQ, "b")]
        assert [line.line_number for line in result] == [1, 2]

    def test_single_line_change(self):
        """A changed line shows as delete followed by insert."""
        engine = LineDiffEngine()
        result = engine.compute(["a", "b", "c"], ["a", "x", "c"])

        assert result == [
            DiffLine(EQ, "a", 1),
            DiffLine(DEL, "b", 2),
            DiffLine(INS, "x", 2),
            DiffLine(EQ, "c", 3),
        ]

    def test_tie_break_prefers_insertion(self):
        """With equal LCS both ways, the new line is taken as inserted first."""
        engine = LineDiffEngine()
        result = engine.compute(["x", "y"], ["y", "x"])

        assert result == [
            DiffLine(DEL, "x", 1),
            DiffLine(EQ, "y", 2),
            DiffLine(INS, "x", 2),
        ]

    def test_all_inserted(self):
        engine = LineDiffEngine()
        result = engine.compute([], ["a", "b"])

        assert result == [DiffLine(INS, "a", 1), DiffLine(INS, "b", 2)]

    def test_all_deleted(self):
        engine = LineDiffEngine()
        result = engine.compute(["a", "b"], [])

        assert result == [DiffLine(DEL, "a", 1), DiffLine(DEL, "b", 2)]

    def test_both_empty(self):
        assert LineDiffEngine().compute([], []) == []

    def test_line_numbers_follow_own_side(self):
        engine = LineDiffEngine()
        result = engine.compute(["keep", "old1", "old2"], ["new1", "keep"])

        old_numbers = [l.line_number for l in result if l.kind is not INS]
        new_numbers = [l.line_number for l in result if l.kind is INS]
        assert old_numbers == sorted(old_numbers)
        assert new_numbers == sorted(new_numbers)


class TestCharDiff:
    """Test character-level diff."""

    def test_affixes_stay_equal(self):
        """Shared prefix and suffix anchor the change in the middle."""
        engine = CharDiffEngine()
        result = engine.compute("ABCXYZ", "ABCQYZ")

        assert kinds_and_texts(result) == [
            (EQ, "ABC"),
            (DEL, "X"),
            (INS, "Q"),
            (EQ, "YZ"),
        ]

    def test_identical(self):
        engine = CharDiffEngine()
        assert kinds_and_texts(engine.compute("same", "same")) == [(EQ, "same")]

    def test_both_empty(self):
        assert CharDiffEngine().compute("", "") == []

    def test_pure_insertion(self):
        engine = CharDiffEngine()
        assert kinds_and_texts(engine.compute("", "new")) == [(INS, "new")]

    def test_pure_deletion(self):
        engine = CharDiffEngine()
        assert kinds_and_texts(engine.compute("old", "")) == [(DEL, "old")]

    def test_suffix_does_not_overlap_prefix(self):
        """'aaa' vs 'aa': prefix takes two chars, the third is deleted."""
        engine = CharDiffEngine()
        result = engine.compute("aaa", "aa")

        assert kinds_and_texts(result) == [(EQ, "aa"), (DEL, "a")]

    def test_middle_lcs(self):
        engine = CharDiffEngine()
        result = engine.compute("select id from t", "select name, id from t")

        assert "".join(c.text for c in result if c.kind is not INS) == "select id from t"
        assert "".join(c.text for c in result if c.kind is not DEL) == "select name, id from t"
        assert result[0] == CharDiffChunk(EQ, "select ")

    def test_chinese_text(self):
        engine = CharDiffEngine()
        result = engine.compute("这是原始文本", "这是修改后的文本")

        assert result[0] == CharDiffChunk(EQ, "这是")
        assert result[-1] == CharDiffChunk(EQ, "文本")

    def test_no_adjacent_same_kind(self):
        engine = CharDiffEngine()
        result = engine.compute("abcdef", "azcyef")

        for first, second in zip(result, result[1:]):
            assert first.kind is not second.kind


class TestChunkViews:
    """Test chunk merging and side views."""

    def test_merge_adjacent(self):
        chunks = [CharDiffChunk(EQ, "a"), CharDiffChunk(EQ, "b"), CharDiffChunk(DEL, "c")]
        assert merge_chunks(chunks) == [CharDiffChunk(EQ, "ab"), CharDiffChunk(DEL, "c")]

    def test_merge_drops_empty(self):
        chunks = [CharDiffChunk(EQ, "a"), CharDiffChunk(INS, ""), CharDiffChunk(EQ, "b")]
        assert merge_chunks(chunks) == [CharDiffChunk(EQ, "ab")]

    def test_left_view_remerges(self):
        """Removing the insertion between two equal runs joins them."""
        chunks = [CharDiffChunk(EQ, "a"), CharDiffChunk(INS, "x"), CharDiffChunk(EQ, "b")]

        assert left_view(chunks) == [CharDiffChunk(EQ, "ab")]
        assert right_view(chunks) == chunks


class TestDiffAligner:
    """Test pairing of deletion and insertion runs."""

    def test_pairing_with_excess_deletion(self):
        """[del a, del b, ins x] gives MODIFIED(a->x) then DELETED(b)."""
        aligner = DiffAligner()
        rows = aligner.align([
            DiffLine(DEL, "a", 1),
            DiffLine(DEL, "b", 2),
            DiffLine(INS, "x", 1),
        ])

        assert [row.kind for row in rows] == [RowKind.MODIFIED, RowKind.DELETED]
        assert rows[0].left.text == "a"
        assert rows[0].right.text == "x"
        assert rows[1].left.text == "b"
        assert rows[1].right is None

    def test_pairing_with_excess_insertion(self):
        aligner = DiffAligner()
        rows = aligner.align([
            DiffLine(DEL, "a", 1),
            DiffLine(INS, "x", 1),
            DiffLine(INS, "y", 2),
        ])

        assert [row.kind for row in rows] == [RowKind.MODIFIED, RowKind.INSERTED]
        assert rows[1].right.text == "y"
        assert rows[1].left is None

    def test_lone_insertion(self):
        aligner = DiffAligner()
        rows = aligner.align([DiffLine(EQ, "a", 1), DiffLine(INS, "b", 2)])

        assert [row.kind for row in rows] == [RowKind.EQUAL, RowKind.INSERTED]

    def test_insertion_before_deletion_is_not_paired(self):
        """Only insertions that follow a deletion run are paired."""
        aligner = DiffAligner()
        rows = aligner.align([DiffLine(INS, "x", 1), DiffLine(DEL, "a", 1)])

        assert [row.kind for row in rows] == [RowKind.INSERTED, RowKind.DELETED]

    def test_equal_row_shares_line(self):
        line = DiffLine(EQ, "same", 1)
        rows = DiffAligner().align([line])

        assert rows == [AlignedRow(RowKind.EQUAL, left=line, right=line)]

    def test_equal_rows_numbered_in_new_text(self):
        result = DiffEngine().compare("a\nb", "x\na\nb")

        assert [row.left.line_number if row.left else None for row in result.rows] == [None, 1, 2]
        assert [row.right.line_number for row in result.rows] == [1, 2, 3]

    def test_equal_rows_numbered_after_deletion(self):
        result = DiffEngine().compare("x\na\nb", "a\nb")
        equal_rows = [row for row in result.rows if row.kind is RowKind.EQUAL]

        assert [(row.left.line_number, row.right.line_number) for row in equal_rows] == [(2, 1), (3, 2)]

    def test_modified_row_chunks(self):
        aligner = DiffAligner()
        rows = aligner.align([DiffLine(DEL, "ABCXYZ", 1), DiffLine(INS, "ABCQYZ", 1)])

        row = rows[0]
        assert kinds_and_texts(row.left_chunks) == [(EQ, "ABC"), (DEL, "X"), (EQ, "YZ")]
        assert kinds_and_texts(row.right_chunks) == [(EQ, "ABC"), (INS, "Q"), (EQ, "YZ")]

    def test_empty_input(self):
        assert DiffAligner().align([]) == []


class TestDiffEngine:
    """Test the comparison facade."""

    def test_identical_text(self):
        engine = DiffEngine()
        result = engine.compare("Hello\nworld", "Hello\nworld")

        assert not result.has_changes
        assert result.stats.inserted == 0
        assert result.stats.deleted == 0
        assert all(row.kind is RowKind.EQUAL for row in result.rows)

    def test_stats_come_from_raw_line_diff(self):
        """A modified row still counts one insertion and one deletion."""
        engine = DiffEngine()
        result = engine.compare("a\nb\nc", "a\nx\nc\nd")

        assert result.stats.inserted == 2
        assert result.stats.deleted == 1
        assert result.stats.total_changes == 3
        assert [row.kind for row in result.rows] == [
            RowKind.EQUAL, RowKind.MODIFIED, RowKind.EQUAL, RowKind.INSERTED
        ]

    def test_empty_strings(self):
        """Two empty texts are one equal empty line."""
        result = DiffEngine().compare("", "")

        assert len(result.rows) == 1
        assert result.rows[0].kind is RowKind.EQUAL
        assert not result.has_changes

    def test_empty_against_text(self):
        result = DiffEngine().compare("", "new line")

        assert result.stats.inserted == 1
        assert result.stats.deleted == 1
        assert result.rows[0].kind is RowKind.MODIFIED

    def test_crlf_matches_lf(self):
        result = DiffEngine().compare("a\r\nb", "a\nb")

        assert not result.has_changes

    def test_count_changes(self):
        stats = DiffEngine.count_changes([
            DiffLine(INS, "a", 1), DiffLine(DEL, "b", 1), DiffLine(INS, "c", 2)
        ])

        assert stats.inserted == 2
        assert stats.deleted == 1

    def test_line_diff_kept_on_result(self):
        result = DiffEngine().compare("a", "b")

        assert [line.kind for line in result.line_diff] == [DEL, INS]

    @pytest.mark.parametrize("old,new", [
        ("SELECT *\nFROM users", "SELECT id\nFROM users\nWHERE id = 1"),
        ("x", ""),
        ("\n\n", "\n"),
    ])
    def test_never_raises(self, old, new):
        result = DiffEngine().compare(old, new)
        assert result.rows
