"""
Unit tests for validation utilities.

Tests validation functions for modes and inputs.
"""

import pytest
from utils.validation import (
    FORMATTER_MODES,
    validate_compare_inputs,
    validate_formatter_mode,
    validate_view_mode
)


@pytest.mark.parametrize("mode", FORMATTER_MODES)
def test_validate_formatter_mode_valid(mode):
    is_valid, error_msg = validate_formatter_mode(mode)
    assert is_valid == True
    assert error_msg == ""


def test_validate_formatter_mode_invalid():
    is_valid, error_msg = validate_formatter_mode("yaml")
    assert is_valid == False
    assert "不支持的解析模式" in error_msg
    assert "yaml" in error_msg


@pytest.mark.parametrize("view_mode", ["side-by-side", "inline"])
def test_validate_view_mode_valid(view_mode):
    assert validate_view_mode(view_mode) == (True, "")


def test_validate_view_mode_invalid():
    is_valid, error_msg = validate_view_mode("unified")
    assert is_valid == False
    assert "不支持的显示模式" in error_msg


def test_validate_compare_inputs_both_empty():
    is_valid, error_msg = validate_compare_inputs("", "")
    assert is_valid == False
    assert error_msg == "请至少输入一段文本再比对"


@pytest.mark.parametrize("old_text,new_text", [
    ("a", ""),
    ("", "b"),
    ("a", "b"),
    (" ", ""),
])
def test_validate_compare_inputs_valid(old_text, new_text):
    """Whitespace-only text is still something to compare."""
    assert validate_compare_inputs(old_text, new_text) == (True, "")

