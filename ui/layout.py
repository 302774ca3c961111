"""
UI layout components for the developer text toolkit.

Defines the Gradio layout: a header and two tool tabs (text diff and
structured-text formatter).
"""

import gradio as gr
import pandas as pd
from typing import Dict, Any


VIEW_MODE_CHOICES = [("并排显示", "side-by-side"), ("行内显示", "inline")]

FORMATTER_MODE_CHOICES = [
    ("⚡ 自动检测", "auto"),
    ("JSON", "json"),
    ("Java Map", "java-map"),
    ("CSV", "csv"),
]

OUTPUT_VIEW_CHOICES = [("JSON 文本", "text"), ("表格", "table")]


GLOBAL_CSS = """
<style>
/* 等宽字体：输入框和比对结果 */
.mono textarea, .diff-container, .diff-table {
    font-family: "JetBrains Mono", "Consolas", "Menlo", monospace !important;
    font-size: 13px !important;
}

/* 比对结果区域 - 带滚动条 */
.diff-container {
    max-height: 640px;
    overflow: auto;
    border: 1px solid #d0d7de;
    border-radius: 6px;
    background: #ffffff;
}

.diff-stats {
    display: inline-block;
    padding: 6px 16px;
    border-radius: 16px;
    border: 1px solid #e0e0e0;
    background: #f5f5f5;
    font-weight: bold;
}

.diff-note {
    padding: 6px 12px;
    color: #2e7d32;
}

/* 状态信息样式 */
.load-status {
    padding: 8px 12px;
    border-radius: 6px;
    background: #fafafa;
    border: 1px solid #90caf9;
}

.mode-badge {
    display: inline-block;
    padding: 2px 8px;
    font-size: 12px;
    border-radius: 4px;
    color: #1565c0;
    background: #e3f2fd;
    border: 1px solid #90caf9;
}

.tool-title {
    background: #e3f2fd;
    padding: 8px 12px;
    border-radius: 6px;
    border-left: 4px solid #1976d2;
    font-weight: bold;
    margin-bottom: 8px;
}
</style>
"""


def get_global_css() -> str:
    """Get global CSS styles."""
    return GLOBAL_CSS


def create_header() -> None:
    """Create the page header."""
    gr.Markdown("# 🛠️ 开发者文本工具箱")
    gr.Markdown("文本比对（支持行内字符级高亮）与 JSON / Java Map / CSV 格式化解析。")


def create_diff_tab(components: Dict[str, Any], default_view_mode: str = "side-by-side") -> None:
    """
    Create the text diff tab.

    Args:
        components: Dictionary receiving the created components
        default_view_mode: Initially selected view mode
    """
    gr.HTML('<div class="tool-title">⚖️ 文本比对</div>')

    with gr.Row():
        components['diff_old_input'] = gr.Textbox(
            label="📄 原始文本 (Original)",
            placeholder="粘贴原始文本...",
            lines=12,
            max_lines=30,
            elem_classes=["mono"]
        )
        components['diff_new_input'] = gr.Textbox(
            label="📝 修改后文本 (Modified)",
            placeholder="粘贴修改后的文本...",
            lines=12,
            max_lines=30,
            elem_classes=["mono"]
        )

    with gr.Row():
        components['compare_btn'] = gr.Button("🔍 开始比对", variant="primary", scale=1)
        components['diff_clear_btn'] = gr.Button("🗑️ 清空", variant="secondary", scale=1)
        components['view_mode_radio'] = gr.Radio(
            choices=VIEW_MODE_CHOICES,
            value=default_view_mode,
            label="显示模式",
            scale=2
        )

    components['diff_stats'] = gr.HTML("")
    components['diff_output'] = gr.HTML("")


def create_formatter_tab(components: Dict[str, Any]) -> None:
    """
    Create the structured-text formatter tab.

    Args:
        components: Dictionary receiving the created components
    """
    gr.HTML('<div class="tool-title">{ } JSON / Java Map / CSV 格式化</div>')

    with gr.Row():
        components['formatter_mode_radio'] = gr.Radio(
            choices=FORMATTER_MODE_CHOICES,
            value="auto",
            label="解析模式"
        )
        components['output_view_radio'] = gr.Radio(
            choices=OUTPUT_VIEW_CHOICES,
            value="text",
            label="结果视图"
        )

    with gr.Row():
        with gr.Column(scale=1):
            components['formatter_input'] = gr.Textbox(
                label="📥 输入",
                placeholder="粘贴 JSON、Map.toString() 输出 (如 {key=val}) 或 CSV...",
                lines=20,
                max_lines=40,
                elem_classes=["mono"]
            )
        with gr.Column(scale=1):
            components['formatter_status'] = gr.HTML("")
            components['formatter_output'] = gr.Textbox(
                label="解析结果 (JSON)",
                lines=20,
                max_lines=40,
                interactive=True,
                elem_classes=["mono"]
            )
            components['formatter_table'] = gr.Dataframe(
                value=pd.DataFrame(),
                label="表格视图",
                interactive=False,
                wrap=True,
                visible=False
            )

    with gr.Row():
        components['format_btn'] = gr.Button("🚀 格式化 / 解析", variant="primary")
        components['formatter_clear_btn'] = gr.Button("🗑️ 清空", variant="secondary")


def create_layout(default_view_mode: str = "side-by-side") -> Dict[str, Any]:
    """
    Create the complete application layout.

    Must be called inside a gr.Blocks context.

    Args:
        default_view_mode: Initial diff view mode

    Returns:
        Dictionary of all UI components
    """
    components = {}

    gr.HTML(get_global_css())
    create_header()

    with gr.Tabs():
        with gr.Tab("⚖️ 文本比对"):
            create_diff_tab(components, default_view_mode)
        with gr.Tab("{ } 格式化 / 解析"):
            create_formatter_tab(components)

    return components
