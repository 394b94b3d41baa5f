"""Single-line text prompt drawn on the status row."""

from __future__ import annotations

from collections.abc import Callable

from ..ansi import compute_display_width
from ..render.screen import Screen

MAX_PROMPT_LENGTH = 511


def _visible_tail(prompt: str, buffer: str, cols: int) -> str:
    """Prompt plus as much of the end of ``buffer`` as fits in ``cols - 1``."""
    room = max(0, cols - 1 - compute_display_width(prompt))
    tail = buffer
    while tail and compute_display_width(tail) > room:
        tail = tail[1:]
    return prompt + tail


def prompt_line(
    prompt: str,
    read_key: Callable[[], str],
    screen: Screen,
    row: int,
    cols: int,
) -> str | None:
    """Edit a line of text; Enter returns it, Esc or Ctrl-C returns ``None``."""
    buffer = ""
    screen.write_raw("\033[?25h")
    try:
        while True:
            screen.draw_row(row, _visible_tail(prompt, buffer, cols))
            screen.flush()
            key = read_key()
            if key == "ENTER":
                return buffer
            if key in ("ESC", "CTRL_C"):
                return None
            if key == "BACKSPACE":
                buffer = buffer[:-1]
            elif key == "CTRL_U":
                buffer = ""
            elif len(key) == 1 and key.isprintable() and len(buffer) < MAX_PROMPT_LENGTH:
                buffer += key
    finally:
        screen.write_raw("\033[?25l")
        screen.flush()
