"""
Property-based tests for the structured text parsers.

Tests termination on arbitrary input and round trips through the text
forms the parsers read.
"""

import json
import string

from hypothesis import given, strategies as st, settings
from services import CsvParser, FormatterService, ParseError, StructuredTextParser
from services.table_projector import to_table


KEYWORDS = ("null", "true", "false")

words = st.text(alphabet=string.ascii_letters, min_size=1, max_size=8).filter(
    lambda s: s not in KEYWORDS
)
keys = st.text(alphabet=string.ascii_letters + "_", min_size=1, max_size=6)
scalars = st.one_of(st.none(), st.booleans(), st.integers(-10**6, 10**6), words)
java_values = st.recursive(
    scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(keys, children, max_size=4),
    ),
    max_leaves=12,
)


def to_java_string(value):
    """Render a value the way Java's Map/List toString() does."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict):
        return "{" + ", ".join(f"{k}={to_java_string(v)}" for k, v in value.items()) + "}"
    if isinstance(value, list):
        return "[" + ", ".join(to_java_string(v) for v in value) + "]"
    return str(value)


# Feature: devtext-toolkit, Property 9: Java map parsing terminates on any input
@given(st.text(max_size=200))
@settings(max_examples=100, deadline=None)
def test_java_map_parser_terminates(text):
    """
    Any text either parses to a value tree or, when blank, raises ParseError.
    """
    parser = StructuredTextParser()

    if not text.strip():
        try:
            parser.parse(text)
        except ParseError:
            return
        raise AssertionError("Blank input should raise ParseError")

    result = parser.parse(text)
    json.dumps(result)


# Feature: devtext-toolkit, Property 10: Java toString() output parses back
@given(java_values)
@settings(max_examples=100, deadline=None)
def test_java_to_string_round_trip(value):
    parser = StructuredTextParser()
    assert parser.parse(to_java_string(value)) == value


# Feature: devtext-toolkit, Property 11: Bracket-heavy input terminates
@given(st.text(alphabet="{}[]=,'\" ab1", min_size=1, max_size=60))
@settings(max_examples=100, deadline=None)
def test_bracket_soup_terminates(text):
    if text.strip():
        StructuredTextParser().parse(text)


# Feature: devtext-toolkit, Property 12: CSV parsing never raises
@given(st.text(max_size=200))
@settings(max_examples=100, deadline=None)
def test_csv_parser_never_raises(text):
    result = CsvParser().parse(text)
    assert isinstance(result, list)


# Feature: devtext-toolkit, Property 13: CSV with a header yields one record per data row
@given(
    st.lists(words, min_size=1, max_size=5, unique=True),
    st.lists(st.lists(st.integers(-1000, 1000), min_size=1, max_size=5), min_size=1, max_size=5),
)
@settings(max_examples=100, deadline=None)
def test_csv_records_round_trip(header, raw_rows):
    rows = [(row * len(header))[:len(header)] for row in raw_rows]
    text = "\n".join([",".join(header)] + [",".join(str(c) for c in row) for row in rows])

    result = CsvParser().parse(text)

    assert result == [dict(zip(header, row)) for row in rows]


# Feature: devtext-toolkit, Property 14: Quoted CSV fields keep their text
@given(st.lists(st.text(alphabet=string.ascii_letters + ', "\n', max_size=10), min_size=1, max_size=4))
@settings(max_examples=100, deadline=None)
def test_csv_quoted_fields(cells):
    text = ",".join('"' + cell.replace('"', '""') + '"' for cell in cells)

    assert CsvParser().parse(text) == [cells]


# Feature: devtext-toolkit, Property 15: Formatter output is valid JSON of the value
@given(java_values)
@settings(max_examples=100, deadline=None)
def test_formatter_json_output(value):
    result = FormatterService().format(to_java_string(value), "java-map")

    assert result.ok
    assert json.loads(result.json_text) == value


# Feature: devtext-toolkit, Property 16: Table projection of containers never fails
@given(st.one_of(st.lists(java_values, max_size=5), st.dictionaries(keys, java_values, max_size=5)))
@settings(max_examples=100, deadline=None)
def test_table_projection_of_containers(value):
    assert len(to_table(value)) == len(value)
