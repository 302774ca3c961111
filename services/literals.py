"""
Scalar typing rules shared by the Java-map and CSV parsers.
"""

import math
import re

from models import ParsedValue

_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER = re.compile(r"[+-]?\d+")

KEYWORDS = {"null": None, "true": True, "false": False}


def has_leading_zero(text: str) -> bool:
    """
    True for integer-looking text with a non-decimal leading zero.

    "0113" and "-007" qualify; "0", "0.5" and "0e3" do not.
    """
    digits = text.lstrip("+-")
    if len(digits) <= 1 or not digits.startswith("0"):
        return False
    return "." not in digits and "e" not in digits.lower()


def parse_number(text: str):
    """
    Parse text as an int or float, or return None when it is not numeric.

    Codes with a leading zero are not numbers. Values overflowing to
    infinity are not numbers either, since JSON cannot represent them.
    """
    if not _NUMBER.fullmatch(text) or has_leading_zero(text):
        return None
    if _INTEGER.fullmatch(text):
        return int(text)
    value = float(text)
    if math.isinf(value):
        return None
    return value


def strip_quotes(text: str) -> str:
    """Remove one matching pair of surrounding single or double quotes."""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"'):
        return text[1:-1]
    return text


def coerce_literal(raw: str) -> ParsedValue:
    """
    Type a scanned literal.

    Order: null/true/false keywords, then numbers, then quoted strings
    (quotes removed), then the plain trimmed text.

    Args:
        raw: Literal text as scanned

    Returns:
        None, bool, int, float or str
    """
    text = raw.strip()

    if text in KEYWORDS:
        return KEYWORDS[text]

    number = parse_number(text)
    if number is not None:
        return number

    return strip_quotes(text)
