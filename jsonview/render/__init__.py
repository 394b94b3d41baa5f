"""Row composition, status bar, help overlay and the redraw engine."""

from __future__ import annotations

from .engine import RedrawStrategy, RenderState, content_rows, render_frame, scroll_into_view
from .help import help_lines, render_help
from .rows import compose_row, label_budget, row_plain_text
from .screen import Screen
from .status import ClickHint, StatusLine, build_status_line, compose_status, hint_at, selection_path

__all__ = [
    "RedrawStrategy",
    "RenderState",
    "content_rows",
    "render_frame",
    "scroll_into_view",
    "help_lines",
    "render_help",
    "compose_row",
    "label_budget",
    "row_plain_text",
    "Screen",
    "ClickHint",
    "StatusLine",
    "build_status_line",
    "compose_status",
    "hint_at",
    "selection_path",
]
