"""Main interactive event loop.

Each iteration draws one frame, waits for one input event and dispatches it.
The loop is wiring only; state changes live in ``actions`` and redraw
decisions in the render engine.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input.keys import NormalKeyContext, handle_normal_key
from ..input.prompt import prompt_line
from ..render.engine import RedrawStrategy, content_rows, render_frame, scroll_into_view
from ..render.help import help_lines, render_help
from ..render.rows import compose_row
from ..render.screen import Screen
from ..render.status import build_status_line, compose_status
from ..search.matching import matches_in_root
from .state import ViewerState


@dataclass(frozen=True)
class LoopIO:
    """Injected terminal operations used by ``run_main_loop``."""

    read_key: Callable[[int | None], str]
    viewport: Callable[[], tuple[int, int]]
    clipboard_supported: bool = True
    in_tmux: bool = False
    clock: Callable[[], float] = time.monotonic


def draw_frame(state: ViewerState, screen: Screen, rows: int, cols: int, now: float) -> RedrawStrategy:
    """Recompute visible rows, keep the selection in view and redraw."""
    state.refresh_visible()
    total = len(state.visible)
    state.scroll_offset = scroll_into_view(state.selected, state.scroll_offset, content_rows(rows), total)
    search = state.search
    match_ids = {id(node) for node in search.matches}

    def paint_row(idx: int) -> str:
        node = state.visible[idx]
        match_count = matches_in_root(search, node) if node.is_root and search.active else 0
        return compose_row(
            node,
            cols,
            state.scheme,
            selected=idx == state.selected,
            matched=id(node) in match_ids,
            ascii_glyphs=state.ascii_glyphs,
            match_count=match_count,
        )

    status = build_status_line(state.selected_node, search, cols, state.transient_message(now))
    state.status_hints = status.hints
    return render_frame(
        screen,
        state.render,
        total,
        state.selected,
        state.scroll_offset,
        rows,
        cols,
        paint_row,
        compose_status(status, state.scheme),
    )


def run_main_loop(state: ViewerState, screen: Screen, io: LoopIO) -> None:
    """Run the viewer until a quit action occurs."""
    while state.running:
        rows, cols = io.viewport()
        if state.show_help:
            lines = help_lines(io.clipboard_supported, io.in_tmux, state.ascii_glyphs)
            render_help(screen, rows, cols, lines, state.ascii_glyphs)
            screen.flush()
        else:
            draw_frame(state, screen, rows, cols, io.clock())

        try:
            key = io.read_key(state.status_timeout_ms(io.clock()))
        except KeyboardInterrupt:
            continue
        if not key:
            continue
        if key == "RESIZE":
            state.render.request_full()
            continue
        if state.show_help:
            state.show_help = False
            state.render.request_full()
            continue

        context = NormalKeyContext(
            state=state,
            viewport_rows=lambda: io.viewport()[0],
            prompt_search=lambda prompt: prompt_line(
                prompt,
                lambda: io.read_key(None),
                screen,
                io.viewport()[0] - 1,
                io.viewport()[1],
            ),
            clock=io.clock,
        )
        handle_normal_key(key, context)
