"""
FormatterService: JSON / Java-map / CSV parsing and JSON output.

Detects the input format (in auto mode), parses it into a ParsedValue and
serializes it as indented JSON. Parse failures are returned as values in
FormatResult.error, never raised to the UI.
"""

import json
import logging
import math
from dataclasses import dataclass
from typing import Optional

from models import ParsedValue
from utils.performance import monitor_performance
from utils.validation import FORMATTER_MODES
from .csv_parser import CsvParser
from .errors import ParseError
from .structured_parser import StructuredTextParser

logger = logging.getLogger(__name__)

MODE_LABELS = {
    "json": "JSON",
    "java-map": "Java Map",
    "csv": "CSV",
}


@dataclass(frozen=True)
class FormatResult:
    """
    Outcome of one formatter run.

    Attributes:
        value: Parsed value (None on error or empty input)
        json_text: Indented JSON rendering of value
        mode_used: Mode the text was parsed with
        detected_mode: Mode picked by auto-detection (None unless mode was auto)
        error: Descriptive error message, None on success
    """

    value: ParsedValue = None
    json_text: str = ""
    mode_used: Optional[str] = None
    detected_mode: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.mode_used is not None

    @property
    def is_empty(self) -> bool:
        return self.error is None and self.mode_used is None


def _reject_constant(name: str):
    raise ParseError(f"JSON 不支持常量 {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ParseError(f"JSON 数值超出范围: {text}")
    return value


class FormatterService:
    """
    Parses structured text in one of several modes.

    Modes:
    - json: strict json.loads, the only non-tolerant path
    - java-map: StructuredTextParser (Map.toString() text)
    - csv: CsvParser
    - auto: pick one of the above from surface syntax
    """

    def __init__(self):
        self.map_parser = StructuredTextParser()
        self.csv_parser = CsvParser()

    @staticmethod
    def detect_mode(text: str) -> str:
        """
        Guess the format of the input.

        Heuristic, in order:
        - contains '=' but no '":'  -> java-map
        - starts with '{' or '['     -> json
        - contains ','               -> csv
        - otherwise                  -> json

        A CSV cell containing '=' is read as a Java map; the heuristic does
        not try to resolve that.
        """
        trimmed = text.strip()

        if "=" in trimmed and '":' not in trimmed:
            return "java-map"
        if trimmed.startswith(("{", "[")):
            return "json"
        if "," in trimmed:
            return "csv"
        return "json"

    @monitor_performance("format_text")
    def format(self, text: str, mode: str = "auto") -> FormatResult:
        """
        Parse text and render it as JSON.

        Args:
            text: Raw input
            mode: auto/json/java-map/csv

        Returns:
            FormatResult; error is set when the input cannot be parsed

        Raises:
            ValueError: If mode is not a known mode
        """
        if mode not in FORMATTER_MODES:
            raise ValueError(f"Invalid mode: {mode}. Must be one of {list(FORMATTER_MODES)}")

        if not text or not text.strip():
            return FormatResult()

        detected = None
        used = mode
        if mode == "auto":
            detected = used = self.detect_mode(text)
            logger.debug(f"Auto-detected input mode: {detected}")

        try:
            value = self.parse(text, used)
        except json.JSONDecodeError as e:
            return FormatResult(
                mode_used=used,
                detected_mode=detected,
                error=f"JSON 解析失败: {e.msg} (第 {e.lineno} 行, 第 {e.colno} 列)",
            )
        except ParseError as e:
            return FormatResult(mode_used=used, detected_mode=detected, error=f"解析失败: {e}")
        except RecursionError:
            logger.warning(f"Input nested too deeply to parse in {used} mode")
            return FormatResult(mode_used=used, detected_mode=detected, error="解析失败: 嵌套层级过深")

        try:
            json_text = self.to_json(value)
        except RecursionError:
            logger.warning("Parsed value nested too deeply to serialize")
            return FormatResult(mode_used=used, detected_mode=detected, error="解析失败: 嵌套层级过深")

        return FormatResult(
            value=value,
            json_text=json_text,
            mode_used=used,
            detected_mode=detected,
        )

    def parse(self, text: str, mode: str) -> ParsedValue:
        """
        Parse text with an explicit mode.

        Raises:
            json.JSONDecodeError: Invalid JSON in json mode
            ParseError: Nothing to parse, an unsupported JSON constant or a
                number that overflows to infinity
        """
        if mode == "java-map":
            return self.map_parser.parse(text)
        if mode == "csv":
            return self.csv_parser.parse(text)
        if mode == "json":
            return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_finite_float)
        raise ValueError(f"Cannot parse with mode: {mode}")

    @staticmethod
    def to_json(value: ParsedValue) -> str:
        """Indented JSON, non-ASCII kept as-is."""
        return json.dumps(value, indent=2, ensure_ascii=False)
