"""
Application state model for the developer text toolkit.

Holds the last computed result of each tool for one browser session.
Nothing here is persisted.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from services.formatter import FormatResult

from .diff import DiffResult


@dataclass
class ApplicationState:
    """
    Per-session state container.

    Attributes:
        diff_result: Last comparison result (None until "compare" is clicked)
        view_mode: Diff view mode (side-by-side/inline)
        format_result: Last formatter result (None until "parse" is clicked)
        formatter_mode: Selected formatter mode (auto/json/java-map/csv)
    """

    diff_result: Optional[DiffResult] = None
    view_mode: str = "side-by-side"
    format_result: Optional["FormatResult"] = None
    formatter_mode: str = "auto"

    def clear_diff(self):
        """Forget the last comparison."""
        self.diff_result = None

    def clear_format(self):
        """Forget the last formatter result."""
        self.format_result = None

    def has_diff(self) -> bool:
        return self.diff_result is not None

    def has_parsed_value(self) -> bool:
        """True when the last formatter run produced a value."""
        return self.format_result is not None and self.format_result.ok
