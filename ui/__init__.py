"""UI components for the developer text toolkit."""

from .layout import (
    create_layout,
    create_diff_tab,
    create_formatter_tab,
    get_global_css
)
from .event_handlers import (
    generate_mode_badge,
    toggle_output_view,
    handle_compare,
    handle_view_change,
    handle_clear_diff,
    build_table,
    handle_format,
    handle_clear_format
)

__all__ = [
    "create_layout",
    "create_diff_tab",
    "create_formatter_tab",
    "get_global_css",
    "generate_mode_badge",
    "toggle_output_view",
    "handle_compare",
    "handle_view_change",
    "handle_clear_diff",
    "build_table",
    "handle_format",
    "handle_clear_format"
]
