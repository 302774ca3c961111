"""Business logic services for the developer text toolkit."""

from .errors import ToolkitError, ParseError, TableProjectionError
from .line_diff import LineDiffEngine
from .char_diff import CharDiffEngine
from .diff_aligner import DiffAligner
from .diff_engine import DiffEngine
from .structured_parser import StructuredTextParser
from .csv_parser import CsvParser
from .formatter import FormatterService, FormatResult
from .table_projector import to_table
from .render_engine import RenderEngine

__all__ = [
    "ToolkitError",
    "ParseError",
    "TableProjectionError",
    "LineDiffEngine",
    "CharDiffEngine",
    "DiffAligner",
    "DiffEngine",
    "StructuredTextParser",
    "CsvParser",
    "FormatterService",
    "FormatResult",
    "to_table",
    "RenderEngine",
]
