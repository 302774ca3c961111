"""
Parsed value model for the structured text formatter.

A parsed document is a tree of plain Python values. Scalars are typed once,
at parse time, so consumers never re-interpret strings.
"""

from typing import Dict, List, Union

ParsedValue = Union[
    None,
    bool,
    int,
    float,
    str,
    List["ParsedValue"],
    Dict[str, "ParsedValue"],
]


def is_container(value: ParsedValue) -> bool:
    """Return True for list and map values."""
    return isinstance(value, (list, dict))


def type_name(value: ParsedValue) -> str:
    """
    Human-readable type of a parsed value.

    Args:
        value: Any parsed value

    Returns:
        One of null/boolean/number/string/list/map
    """
    if value is None:
        return "null"
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "list"
    if isinstance(value, dict):
        return "map"
    raise TypeError(f"Not a parsed value: {type(value).__name__}")
