"""
StructuredTextParser for Java Map.toString() style text.

Parses text such as {id=7, tags=[a, b], owner={name=Ann, code=0113}} into
plain Python maps, lists and typed scalars. The parser is tolerant: it
infers missing commas, skips stray characters and closes unterminated
structures at end of input instead of failing.
"""

import logging
from typing import Dict, List

from models import ParsedValue
from .errors import ParseError
from .literals import coerce_literal, strip_quotes

logger = logging.getLogger(__name__)

OPENERS = "{[("
CLOSERS = "}])"
MATCHING_OPENER = {"}": "{", "]": "[", ")": "("}
MAX_DEPTH = 100
KEY_TERMINATORS = "=,}"


class _Cursor:
    """Single forward cursor over the input text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self):
        return self.text[self.pos] if self.pos < len(self.text) else None

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_whitespace(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1


class StructuredTextParser:
    """
    Recursive-descent parser for Java-style map/list text.

    Grammar, loosely:
        value   := list | map | 'null' | literal
        list    := '[' (value (',' value)*)? ','? ']'
        map     := '{' (entry (',' entry)*)? ','? '}'
        entry   := key '='? value

    Recovery rules:
    - a missing comma is assumed when the next element clearly starts
      (a nested '{' or '[' in lists, an identifier character in maps)
    - any other unexpected character is skipped
    - end of input closes every open structure
    - structures nested deeper than MAX_DEPTH are kept as raw text

    Every loop iteration moves the cursor forward, so parsing terminates
    on any finite input. A fresh cursor is created per call.
    """

    def parse(self, text: str) -> ParsedValue:
        """
        Parse Java-map style text.

        Args:
            text: Raw text, e.g. the output of Map.toString()

        Returns:
            Parsed value tree

        Raises:
            ParseError: If the text is empty or whitespace-only
        """
        if not text or not text.strip():
            raise ParseError("输入内容为空，没有可解析的数据")

        cursor = _Cursor(text.strip())
        value = self._parse_value(cursor, 0)

        cursor.skip_whitespace()
        if not cursor.at_end():
            logger.debug(f"Ignoring trailing text at offset {cursor.pos}: {cursor.text[cursor.pos:][:40]!r}")

        return value

    def _parse_value(self, cursor: _Cursor, depth: int) -> ParsedValue:
        cursor.skip_whitespace()
        char = cursor.peek()

        if char in ("[", "{") and depth >= MAX_DEPTH:
            return self._read_raw(cursor)

        if char == "[":
            return self._parse_list(cursor, depth)
        if char == "{":
            return self._parse_map(cursor, depth)

        if cursor.text.startswith("null", cursor.pos):
            end = cursor.pos + 4
            if end >= len(cursor.text) or cursor.text[end].isspace() or cursor.text[end] in ",}]":
                cursor.pos = end
                return None

        return self._parse_literal(cursor)

    def _parse_list(self, cursor: _Cursor, depth: int) -> List[ParsedValue]:
        cursor.pos += 1  # '['
        items = []
        cursor.skip_whitespace()

        if cursor.peek() == "]":
            cursor.pos += 1
            return items

        while not cursor.at_end():
            items.append(self._parse_value(cursor, depth + 1))
            cursor.skip_whitespace()
            char = cursor.peek()

            if char == ",":
                cursor.pos += 1
                cursor.skip_whitespace()
                if cursor.peek() == "]":
                    cursor.pos += 1
                    return items
                continue

            if char == "]":
                cursor.pos += 1
                return items

            # Missing comma before a nested structure
            if char in ("{", "["):
                continue

            self._skip_unexpected(cursor)

        return items

    def _parse_map(self, cursor: _Cursor, depth: int) -> Dict[str, ParsedValue]:
        cursor.pos += 1  # '{'
        entries = {}
        cursor.skip_whitespace()

        if cursor.peek() == "}":
            cursor.pos += 1
            return entries

        while not cursor.at_end():
            key = self._parse_key(cursor)
            cursor.skip_whitespace()
            if cursor.peek() == "=":
                cursor.pos += 1

            entries[key] = self._parse_value(cursor, depth + 1)
            cursor.skip_whitespace()
            char = cursor.peek()

            if char == ",":
                cursor.pos += 1
                cursor.skip_whitespace()
                if cursor.peek() == "}":
                    cursor.pos += 1
                    return entries
                continue

            if char == "}":
                cursor.pos += 1
                return entries

            # Missing comma before the next key
            if char is not None and (char.isalnum() or char == "_"):
                continue

            self._skip_unexpected(cursor)

        return entries

    @staticmethod
    def _parse_key(cursor: _Cursor) -> str:
        """Read a map key up to '=', ',', '}' or whitespace."""
        cursor.skip_whitespace()
        start = cursor.pos
        text = cursor.text
        while cursor.pos < len(text):
            char = text[cursor.pos]
            if char in KEY_TERMINATORS or char.isspace():
                break
            cursor.pos += 1
        return strip_quotes(text[start:cursor.pos])

    def _parse_literal(self, cursor: _Cursor) -> ParsedValue:
        """
        Scan a scalar up to a top-level ',', '}' or ']' and type it.

        Brackets and quotes inside the literal are tracked so that
        "f(a, b)" or 'x, y' stay one value. A '}' or ']' that does not match
        the innermost open bracket belongs to the enclosing structure and
        ends the literal. If the scan runs off the end with a quote or
        bracket still open, the tracking was wrong (an apostrophe, an
        unbalanced paren) and the literal is rescanned without it, also
        stopping before a '{' or '[' that starts the next element.
        """
        cursor.skip_whitespace()
        start = cursor.pos

        end, balanced = self._scan_literal(cursor.text, start, track_nesting=True)
        if not balanced:
            logger.debug(f"Unbalanced literal at offset {start}, rescanning without nesting")
            end, _ = self._scan_literal(cursor.text, start, track_nesting=False)

        cursor.pos = end
        return coerce_literal(cursor.text[start:end])

    @staticmethod
    def _scan_literal(text: str, start: int, track_nesting: bool):
        """
        Find where a literal starting at `start` ends.

        Returns:
            Tuple of (end offset, True if no quote/bracket was left open)
        """
        open_brackets = []
        quote = None
        pos = start

        while pos < len(text):
            char = text[pos]
            if quote is not None:
                if char == quote and text[pos - 1] != "\\":
                    quote = None
            elif track_nesting and char in ("'", '"'):
                quote = char
            elif char in OPENERS:
                if track_nesting:
                    open_brackets.append(char)
                elif char != "(":
                    break
            elif char in CLOSERS:
                if open_brackets and open_brackets[-1] == MATCHING_OPENER[char]:
                    open_brackets.pop()
                elif char != ")":
                    if open_brackets:
                        logger.debug(f"Closer {char!r} at offset {pos} ends literal with {open_brackets[-1]!r} open")
                    return pos, True
            elif char == "," and not open_brackets:
                break
            pos += 1

        return pos, quote is None and not open_brackets

    @staticmethod
    def _read_raw(cursor: _Cursor) -> str:
        """
        Consume a nested structure as raw text, up to its matching closer
        or the end of input.
        """
        start = cursor.pos
        text = cursor.text
        depth = 0

        while cursor.pos < len(text):
            char = text[cursor.pos]
            cursor.pos += 1
            if char in "{[":
                depth += 1
            elif char in "}]":
                depth -= 1
                if depth == 0:
                    break

        logger.warning(f"Nesting deeper than {MAX_DEPTH} levels at offset {start}, kept as text")
        return text[start:cursor.pos]

    @staticmethod
    def _skip_unexpected(cursor: _Cursor):
        if not cursor.at_end():
            logger.debug(f"Skipping unexpected {cursor.peek()!r} at offset {cursor.pos}")
            cursor.pos += 1
