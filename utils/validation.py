"""
Validation utilities for user input.

Validators return (is_valid, error_message) tuples so event handlers can
show the message instead of raising.
"""

from typing import Tuple

from utils.config import VIEW_MODES

FORMATTER_MODES = ("auto", "json", "java-map", "csv")


def validate_formatter_mode(mode: str) -> Tuple[bool, str]:
    """
    Validate the formatter mode selector.

    Args:
        mode: Selected mode

    Returns:
        Tuple of (is_valid, error_message)
    """
    if mode not in FORMATTER_MODES:
        return False, f"不支持的解析模式: {mode}. 可选: {list(FORMATTER_MODES)}"

    return True, ""


def validate_view_mode(view_mode: str) -> Tuple[bool, str]:
    """Validate the diff view mode selector."""
    if view_mode not in VIEW_MODES:
        return False, f"不支持的显示模式: {view_mode}. 可选: {list(VIEW_MODES)}"

    return True, ""


def validate_compare_inputs(old_text: str, new_text: str) -> Tuple[bool, str]:
    """
    Validate that there is something to compare.

    Args:
        old_text: Original text
        new_text: Modified text

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not old_text and not new_text:
        return False, "请至少输入一段文本再比对"

    return True, ""

