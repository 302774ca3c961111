"""
RenderEngine for diff display.

Turns aligned diff rows into HTML for the side-by-side and inline views,
and renders the inserted/deleted summary.
"""

import html
from typing import Iterable, Optional, Sequence

from models import AlignedRow, CharDiffChunk, DiffKind, DiffLine, DiffResult, DiffStats, RowKind

# Inline styles so the HTML renders the same inside any gr.HTML block
CHUNK_STYLES = {
    DiffKind.DELETED: "background: #ffcdd2; color: #b71c1c; border-radius: 2px;",
    DiffKind.INSERTED: "background: #c8e6c9; color: #1b5e20; border-radius: 2px;",
}

LEFT_CELL_STYLES = {
    RowKind.EQUAL: "",
    RowKind.MODIFIED: "background: #fff5f5;",
    RowKind.DELETED: "background: #ffebee; color: #b71c1c;",
    RowKind.INSERTED: "background: #f5f5f5;",
}

RIGHT_CELL_STYLES = {
    RowKind.EQUAL: "",
    RowKind.MODIFIED: "background: #f4fbf4;",
    RowKind.DELETED: "background: #f5f5f5;",
    RowKind.INSERTED: "background: #e8f5e9; color: #1b5e20;",
}

CELL_STYLE = "white-space: pre-wrap; word-break: break-all; padding: 2px 8px; vertical-align: top;"
NUMBER_STYLE = ("text-align: right; color: #9e9e9e; padding: 2px 6px; user-select: none; "
                "vertical-align: top; font-size: 11px; width: 40px; background: #fafafa;")


class RenderEngine:
    """
    HTML renderer for diff results.

    Provides methods to:
    - Highlight character chunks of modified lines
    - Render rows side by side with line numbers
    - Render rows inline (unified, one column with -/+ markers)
    - Render the +N / -M summary
    """

    def render_chunks(self, chunks: Iterable[CharDiffChunk]) -> str:
        """
        Render character chunks, highlighting deleted and inserted runs.

        Args:
            chunks: One side's view of a modified line

        Returns:
            HTML fragment
        """
        parts = []
        for chunk in chunks:
            text = html.escape(chunk.text)
            style = CHUNK_STYLES.get(chunk.kind)
            if style:
                parts.append(f'<span class="diff-{chunk.kind.value}" style="{style}">{text}</span>')
            else:
                parts.append(text)
        return "".join(parts)

    def _line_content(self, line: Optional[DiffLine], chunks: Sequence[CharDiffChunk],
                      kind: RowKind) -> str:
        if line is None:
            return ""
        if kind is RowKind.MODIFIED:
            return self.render_chunks(chunks)
        return html.escape(line.text)

    def render_side_by_side(self, rows: Sequence[AlignedRow]) -> str:
        """
        Render rows as a four-column table: old number, old text, new number, new text.

        One-sided rows leave the other side as an empty filler cell.
        """
        body = []
        for row in rows:
            left_number = row.left.line_number if row.left else ""
            right_number = row.right.line_number if row.right else ""
            left = self._line_content(row.left, row.left_chunks, row.kind)
            right = self._line_content(row.right, row.right_chunks, row.kind)

            body.append(
                f'<tr class="diff-row diff-row-{row.kind.value}" style="border-bottom: 1px solid #f0f0f0;">'
                f'<td style="{NUMBER_STYLE}">{left_number}</td>'
                f'<td style="{CELL_STYLE} {LEFT_CELL_STYLES[row.kind]}">{left}</td>'
                f'<td style="{NUMBER_STYLE} border-left: 1px solid #e0e0e0;">{right_number}</td>'
                f'<td style="{CELL_STYLE} {RIGHT_CELL_STYLES[row.kind]}">{right}</td>'
                '</tr>'
            )

        return (
            '<div class="diff-container">'
            '<table class="diff-table" style="width: 100%; border-collapse: collapse; table-layout: fixed;">'
            '<colgroup><col style="width: 40px;"><col style="width: 50%;">'
            '<col style="width: 40px;"><col style="width: 50%;"></colgroup>'
            f'<tbody>{"".join(body)}</tbody></table></div>'
        )

    def render_inline(self, rows: Sequence[AlignedRow]) -> str:
        """
        Render rows in one column with old/new line numbers and -/+ markers.

        A modified row becomes a '-' line followed by a '+' line, each with
        its own character highlighting.
        """
        body = []

        def add_line(old_number, new_number, marker, content, style):
            body.append(
                f'<tr class="diff-line" style="border-bottom: 1px solid #f0f0f0;">'
                f'<td style="{NUMBER_STYLE}">{old_number}</td>'
                f'<td style="{NUMBER_STYLE}">{new_number}</td>'
                f'<td style="{CELL_STYLE} {style} width: 16px;">{marker}</td>'
                f'<td style="{CELL_STYLE} {style}">{content}</td>'
                '</tr>'
            )

        for row in rows:
            if row.kind is RowKind.EQUAL:
                add_line(row.left.line_number, row.right.line_number, " ",
                         html.escape(row.left.text), "")
            elif row.kind is RowKind.DELETED:
                add_line(row.left.line_number, "", "-",
                         html.escape(row.left.text), LEFT_CELL_STYLES[RowKind.DELETED])
            elif row.kind is RowKind.INSERTED:
                add_line("", row.right.line_number, "+",
                         html.escape(row.right.text), RIGHT_CELL_STYLES[RowKind.INSERTED])
            else:
                add_line(row.left.line_number, "", "-",
                         self.render_chunks(row.left_chunks), LEFT_CELL_STYLES[RowKind.MODIFIED])
                add_line("", row.right.line_number, "+",
                         self.render_chunks(row.right_chunks), RIGHT_CELL_STYLES[RowKind.MODIFIED])

        return (
            '<div class="diff-container">'
            '<table class="diff-table diff-inline" style="width: 100%; border-collapse: collapse; table-layout: fixed;">'
            '<colgroup><col style="width: 40px;"><col style="width: 40px;">'
            '<col style="width: 16px;"><col></colgroup>'
            f'<tbody>{"".join(body)}</tbody></table></div>'
        )

    def render_stats(self, stats: DiffStats) -> str:
        """Render the +N 新增 / -M 删除 summary badge."""
        return (
            '<div class="diff-stats">'
            f'<span style="color: #2e7d32;">+{stats.inserted} 新增</span>'
            '<span style="color: #bdbdbd; margin: 0 8px;">|</span>'
            f'<span style="color: #c62828;">-{stats.deleted} 删除</span>'
            '</div>'
        )

    def render_diff(self, result: DiffResult, view_mode: str = "side-by-side") -> str:
        """
        Render a full comparison result.

        Args:
            result: Output of DiffEngine.compare
            view_mode: side-by-side or inline

        Returns:
            HTML for the results area
        """
        if view_mode == "inline":
            table = self.render_inline(result.rows)
        else:
            table = self.render_side_by_side(result.rows)

        if not result.has_changes:
            note = '<div class="diff-note">✅ 两段文本完全相同</div>'
            return note + table
        return table

    def render_message(self, message: str, is_error: bool = False) -> str:
        """Render a status or error message block."""
        color = "#c62828" if is_error else "#616161"
        return f'<div class="load-status" style="color: {color};">{html.escape(message)}</div>'
