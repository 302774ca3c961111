"""
Developer Text Toolkit
开发者文本工具箱

Main entry point for the Gradio application.
"""

import logging

import gradio as gr

from models import ApplicationState
from ui.layout import create_layout
from ui.event_handlers import (
    handle_compare,
    handle_view_change,
    handle_clear_diff,
    handle_format,
    handle_clear_format,
    toggle_output_view
)
from utils.config import AppConfig, load_config
from utils.performance import get_monitor

logger = logging.getLogger(__name__)


def main(config: AppConfig = None):
    """Build the application."""
    config = config or load_config()
    get_monitor().slow_threshold = config.slow_operation_threshold

    with gr.Blocks(title="开发者文本工具箱") as app:

        # Per-session state
        app_state = gr.State(ApplicationState(view_mode=config.default_view_mode))

        components = create_layout(config.default_view_mode)

        # ========== Diff Viewer ==========

        components['compare_btn'].click(
            fn=handle_compare,
            inputs=[
                components['diff_old_input'],
                components['diff_new_input'],
                components['view_mode_radio'],
                app_state
            ],
            outputs=[app_state, components['diff_stats'], components['diff_output']]
        )

        components['view_mode_radio'].change(
            fn=handle_view_change,
            inputs=[components['view_mode_radio'], app_state],
            outputs=[app_state, components['diff_output']]
        )

        components['diff_clear_btn'].click(
            fn=handle_clear_diff,
            inputs=[app_state],
            outputs=[
                app_state,
                components['diff_old_input'],
                components['diff_new_input'],
                components['diff_stats'],
                components['diff_output']
            ]
        )

        # ========== Formatter ==========

        components['format_btn'].click(
            fn=handle_format,
            inputs=[components['formatter_input'], components['formatter_mode_radio'], app_state],
            outputs=[
                app_state,
                components['formatter_output'],
                components['formatter_status'],
                components['formatter_table']
            ]
        )

        components['formatter_clear_btn'].click(
            fn=handle_clear_format,
            inputs=[app_state],
            outputs=[
                app_state,
                components['formatter_input'],
                components['formatter_output'],
                components['formatter_status'],
                components['formatter_table']
            ]
        )

        def on_output_view_change(output_view):
            text_visible, table_visible = toggle_output_view(output_view)
            return gr.update(visible=text_visible), gr.update(visible=table_visible)

        components['output_view_radio'].change(
            fn=on_output_view_change,
            inputs=[components['output_view_radio']],
            outputs=[components['formatter_output'], components['formatter_table']]
        )

        # Footer
        gr.HTML('<hr style="border: 1px solid #e0e0e0; margin: 20px 0;">')
        gr.Markdown("✅ 所有处理均在本机完成，数据不会被保存")

    return app


def run():
    """Console entry point: load configuration and launch the server."""
    config = load_config()
    logger.info(f"Starting toolkit on {config.server_name}:{config.server_port}")
    app = main(config)
    try:
        app.launch(
            server_name=config.server_name,
            server_port=config.server_port,
            show_error=config.show_error,
            quiet=False
        )
    finally:
        get_monitor().log_stats()


if __name__ == "__main__":
    run()
