"""
Event handlers for UI components.

Handles user interactions and state updates. Handlers return plain values
(strings, DataFrames, state objects) and never raise into Gradio: failures
are logged and shown as messages.
"""

import html
import logging
from typing import Optional, Tuple

import pandas as pd

from models import ApplicationState
from services import DiffEngine, FormatterService, RenderEngine, TableProjectionError, to_table
from services.formatter import FormatResult, MODE_LABELS
from utils.performance import measure_time
from utils.validation import (
    validate_compare_inputs,
    validate_formatter_mode,
    validate_view_mode,
)

logger = logging.getLogger(__name__)


def _ensure_state(state: Optional[ApplicationState]) -> ApplicationState:
    return state if state is not None else ApplicationState()


def generate_mode_badge(result: FormatResult) -> str:
    """
    Generate the status line shown above the formatter output.

    Args:
        result: Formatter result

    Returns:
        HTML with the detected/used mode and, on failure, the error
    """
    if result.is_empty:
        return ""

    label = MODE_LABELS.get(result.mode_used, result.mode_used)
    if result.detected_mode:
        badge = f'<span class="mode-badge">已检测: {label}</span>'
    else:
        badge = f'<span class="mode-badge">模式: {label}</span>'

    if result.error:
        return f'<div class="load-status" style="color: #c62828;">{badge} ❌ {html.escape(result.error)}</div>'
    return f'<div class="load-status">{badge} ✅ 解析成功</div>'


def toggle_output_view(output_view: str) -> Tuple[bool, bool]:
    """
    Decide which formatter output component is visible.

    Args:
        output_view: "text" or "table"

    Returns:
        Tuple of (json text visible, table visible)
    """
    show_table = output_view == "table"
    return not show_table, show_table


def handle_compare(old_text: str, new_text: str, view_mode: str,
                   state: Optional[ApplicationState]) -> Tuple[ApplicationState, str, str]:
    """
    Handle the "compare" button.

    Args:
        old_text: Original text
        new_text: Modified text
        view_mode: side-by-side or inline
        state: Session state

    Returns:
        Tuple of (state, stats HTML, diff HTML)
    """
    state = _ensure_state(state)
    render_engine = RenderEngine()
    old_text = old_text or ""
    new_text = new_text or ""

    is_valid, error_msg = validate_view_mode(view_mode)
    if not is_valid:
        return state, "", render_engine.render_message(f"⚠️ {error_msg}", is_error=True)

    is_valid, error_msg = validate_compare_inputs(old_text, new_text)
    if not is_valid:
        state.clear_diff()
        return state, "", render_engine.render_message(f"⚠️ {error_msg}")

    try:
        result = DiffEngine().compare(old_text, new_text)
    except Exception as e:
        logger.exception("Text comparison failed")
        return state, "", render_engine.render_message(f"比对失败: {str(e)}", is_error=True)

    state.diff_result = result
    state.view_mode = view_mode

    with measure_time("render_diff"):
        diff_html = render_engine.render_diff(result, view_mode)

    return state, render_engine.render_stats(result.stats), diff_html


def handle_view_change(view_mode: str, state: Optional[ApplicationState]) -> Tuple[ApplicationState, str]:
    """
    Re-render the last comparison in another view mode without recomputing it.

    Returns:
        Tuple of (state, diff HTML)
    """
    state = _ensure_state(state)

    is_valid, _ = validate_view_mode(view_mode)
    if not is_valid:
        view_mode = state.view_mode
    state.view_mode = view_mode

    if not state.has_diff():
        return state, ""

    with measure_time("render_diff"):
        diff_html = RenderEngine().render_diff(state.diff_result, view_mode)

    return state, diff_html


def handle_clear_diff(state: Optional[ApplicationState]) -> Tuple[ApplicationState, str, str, str, str]:
    """
    Handle the diff "clear" button.

    Returns:
        Tuple of (state, old text, new text, stats HTML, diff HTML), all emptied
    """
    state = _ensure_state(state)
    state.clear_diff()
    return state, "", "", "", ""


def build_table(result: FormatResult) -> Tuple[pd.DataFrame, str]:
    """
    Build the table view for a formatter result.

    Args:
        result: Formatter result

    Returns:
        Tuple of (DataFrame, message); the message is empty when a table exists
    """
    if not result.ok:
        return pd.DataFrame(), ""

    try:
        table = to_table(result.value)
    except TableProjectionError as e:
        return pd.DataFrame(), str(e)

    if table.empty:
        return table, "无数据可显示"
    return table, ""


def handle_format(text: str, mode: str,
                  state: Optional[ApplicationState]) -> Tuple[ApplicationState, str, str, pd.DataFrame]:
    """
    Handle the "format / parse" button.

    Args:
        text: Raw input
        mode: auto/json/java-map/csv
        state: Session state

    Returns:
        Tuple of (state, output text, status HTML, table DataFrame)
    """
    state = _ensure_state(state)
    render_engine = RenderEngine()

    is_valid, error_msg = validate_formatter_mode(mode)
    if not is_valid:
        return state, "", render_engine.render_message(f"⚠️ {error_msg}", is_error=True), pd.DataFrame()

    try:
        result = FormatterService().format(text or "", mode)
    except Exception as e:
        logger.exception("Formatting failed")
        return state, "", render_engine.render_message(f"解析失败: {str(e)}", is_error=True), pd.DataFrame()

    state.format_result = result
    state.formatter_mode = mode

    if result.is_empty:
        return state, "", "", pd.DataFrame()

    if not state.has_parsed_value():
        output = f"{result.error}\n\n请检查所选格式是否正确，或数据是否包含特殊字符。"
        return state, output, generate_mode_badge(result), pd.DataFrame()

    table, table_msg = build_table(result)
    status = generate_mode_badge(result)
    if table_msg:
        status += render_engine.render_message(f"表格视图: {table_msg}")

    return state, result.json_text, status, table


def handle_clear_format(state: Optional[ApplicationState]) -> Tuple[ApplicationState, str, str, str, pd.DataFrame]:
    """
    Handle the formatter "clear" button.

    Returns:
        Tuple of (state, input text, output text, status HTML, empty table)
    """
    state = _ensure_state(state)
    state.clear_format()
    return state, "", "", "", pd.DataFrame()
