"""Key-binding help overlay.

The overlay is a centred box drawn over a cleared screen; any key or click
closes it and the next frame is a full redraw.
"""

from __future__ import annotations

from ..ansi import clip_to_width, compute_display_width
from .screen import Screen

_COPY_LINE = "  y                Copy selected JSON to clipboard"


def help_lines(clipboard_supported: bool, in_tmux: bool = False, ascii_glyphs: bool = False) -> list[str]:
    """Help box body; the copy line gains a dimmed reason when unsupported."""
    copy_line = _COPY_LINE
    if not clipboard_supported:
        copy_line += " (tmux: requires OSC 52 config)" if in_tmux else " (no terminal support)"
    up_down = "Up/Down" if ascii_glyphs else "↑/↓"
    left = "Left" if ascii_glyphs else "←"
    right = "Right" if ascii_glyphs else "→"
    return [
        "JSON Viewer Key Bindings:",
        "",
        f"  {up_down:<17}Move selection up or down",
        "  PgUp/PgDn        Move one page up or down",
        "  Home/End         Jump to first or last item",
        f"  {left:<17}Collapse the current item or go to its parent",
        f"  {right:<17}Expand the current item",
        "  Enter/Space      Toggle the current item",
        "  +                Expand all items",
        "  -                Collapse all items",
        "  0-9              Expand to nesting level (0=collapse all, 1=first level, etc.)",
        "  s or /           Search keys",
        "  S                Search values",
        "  n / N            Next / previous search match",
        "  c                Clear search results",
        "  t                Cycle color scheme",
        copy_line,
        "  ?                Show this help screen",
        "  q                Quit the program",
        "",
        "Press any key to return...",
    ]


def render_help(
    screen: Screen,
    rows: int,
    cols: int,
    lines: list[str],
    ascii_glyphs: bool = False,
) -> None:
    """Queue the help box on ``screen``; the caller flushes."""
    if ascii_glyphs:
        top_left, top_right, bottom_left, bottom_right, horizontal, vertical = "+", "+", "+", "+", "-", "|"
    else:
        top_left, top_right, bottom_left, bottom_right, horizontal, vertical = "┌", "┐", "└", "┘", "─", "│"

    max_width = max(compute_display_width(line) for line in lines)
    box_width = min(max_width + 4, max(4, cols))
    inner_width = box_width - 4
    box_height = len(lines) + 2
    start_row = max(0, (rows - box_height) // 2)
    start_col = max(0, (cols - box_width) // 2)

    screen.clear()
    screen.write_raw(f"\033[{start_row + 1};{start_col + 1}H{top_left}{horizontal * (box_width - 2)}{top_right}")
    for idx, line in enumerate(lines):
        row = start_row + 1 + idx
        if row >= rows - 1:
            break
        text = clip_to_width(line, inner_width)
        suffix_at = text.find(" (") if "Copy selected JSON" in text else -1
        if suffix_at >= 0:
            body = f"{text[:suffix_at]}\033[2m{text[suffix_at:]}\033[0m"
        else:
            body = text
        padding = " " * max(0, inner_width - compute_display_width(text))
        screen.write_raw(f"\033[{row + 1};{start_col + 1}H{vertical}  {body}{padding}{vertical}")
    bottom = min(start_row + box_height - 1, max(0, rows - 1))
    screen.write_raw(f"\033[{bottom + 1};{start_col + 1}H{bottom_left}{horizontal * (box_width - 2)}{bottom_right}")
