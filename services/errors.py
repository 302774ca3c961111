"""
Exception hierarchy for the toolkit services.

Only the formatter has hard failures; the diff engines never raise on text
input.
"""


class ToolkitError(Exception):
    """Base exception for all toolkit errors."""


class ParseError(ToolkitError, ValueError):
    """Raised when structured text has nothing that can be parsed."""


class TableProjectionError(ToolkitError, ValueError):
    """Raised when a parsed value has no tabular form."""
