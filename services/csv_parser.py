"""
CsvParser for pasted CSV text.

Quoted-field aware, "" escapes a quote inside a quoted field, and a header
row is detected heuristically. Malformed input is read as well as possible;
the parser never raises.
"""

import logging
from typing import List, Tuple

from models import ParsedValue
from .literals import coerce_literal

logger = logging.getLogger(__name__)

# (cell text, was quoted)
Cell = Tuple[str, bool]


class CsvParser:
    """
    Tolerant CSV parser.

    Output shape:
    - with a header row: list of dicts keyed by header names
    - without: list of lists

    Unquoted cells are typed with the shared literal rules (numbers,
    booleans, null). Quoted cells are always strings.
    """

    def __init__(self, delimiter: str = ","):
        self.delimiter = delimiter

    def parse(self, text: str) -> List[ParsedValue]:
        """
        Parse CSV text.

        Args:
            text: Raw CSV text

        Returns:
            List of records (dicts) or rows (lists); empty list for blank input
        """
        rows = self.tokenize(text)
        if not rows:
            return []

        typed_rows = [[self._type_cell(cell) for cell in row] for row in rows]

        if self.detect_header(rows, typed_rows):
            header = [cell.strip() for cell, _ in rows[0]]
            logger.debug(f"CSV header detected: {header}")
            return [self._to_record(header, row) for row in typed_rows[1:]]

        return typed_rows

    def tokenize(self, text: str) -> List[List[Cell]]:
        """
        Split CSV text into rows of cells.

        Newlines inside quoted fields are kept, \\r\\n and \\r end rows, blank
        lines are skipped, and an unterminated quote closes at end of input.
        """
        rows: List[List[Cell]] = []
        row: List[Cell] = []
        field: List[str] = []
        in_quotes = False
        quoted = False
        i = 0
        n = len(text)

        def end_field():
            nonlocal field, quoted
            row.append(("".join(field), quoted))
            field = []
            quoted = False

        def end_row():
            nonlocal row
            end_field()
            if not (len(row) == 1 and not row[0][1] and not row[0][0].strip()):
                rows.append(row)
            row = []

        while i < n:
            char = text[i]
            if in_quotes:
                if char == '"':
                    if i + 1 < n and text[i + 1] == '"':
                        field.append('"')
                        i += 1
                    else:
                        in_quotes = False
                else:
                    field.append(char)
            elif char == '"' and not "".join(field).strip():
                field = []
                in_quotes = True
                quoted = True
            elif char == self.delimiter:
                end_field()
            elif char == "\r":
                if i + 1 < n and text[i + 1] == "\n":
                    i += 1
                end_row()
            elif char == "\n":
                end_row()
            else:
                field.append(char)
            i += 1

        if in_quotes:
            logger.debug("Unterminated quoted field closed at end of input")
        if field or row or quoted:
            end_row()

        return rows

    @staticmethod
    def detect_header(rows: List[List[Cell]], typed_rows: List[List[ParsedValue]]) -> bool:
        """
        Decide whether the first row names the columns.

        It does when there is at least one data row and every first-row
        cell is a distinct, non-empty text value (not a number, boolean
        or null).
        """
        if len(rows) < 2:
            return False

        names = [cell.strip() for cell, _ in rows[0]]
        if len(set(names)) != len(names):
            return False

        return all(
            isinstance(value, str) and value.strip()
            for value in typed_rows[0]
        )

    @staticmethod
    def _type_cell(cell: Cell) -> ParsedValue:
        text, quoted = cell
        if quoted:
            return text
        return coerce_literal(text)

    @staticmethod
    def _to_record(header: List[str], row: List[ParsedValue]) -> dict:
        """Map a row onto the header; short rows get None, extra cells get column_N keys."""
        record = {}
        for index, name in enumerate(header):
            record[name] = row[index] if index < len(row) else None

        for index in range(len(header), len(row)):
            key = f"column_{index + 1}"
            while key in record:
                key += "_"
            record[key] = row[index]

        return record
