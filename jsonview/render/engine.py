"""Incremental redraw engine.

Each frame picks the cheapest strategy that leaves every changed row
rewritten: a full repaint, a repaint from the selected row down, a terminal
region scroll plus the newly exposed rows, or just the two selection rows.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass

from .screen import Screen

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No data to display"


class RedrawStrategy(enum.Enum):
    FULL = "full"
    PARTIAL = "partial"
    SCROLL_SHIFT = "scroll_shift"
    LARGE_SCROLL = "large_scroll"
    SELECTION_ONLY = "selection_only"
    EMPTY = "empty"


@dataclass
class RenderState:
    """What the terminal currently shows, as of the last completed frame."""

    previous_selected_index: int = 0
    previous_scroll_offset: int | None = None
    need_full_redraw: bool = True
    need_partial_redraw: bool = False
    previous_viewport: tuple[int, int] | None = None

    def request_full(self) -> None:
        self.need_full_redraw = True

    def request_partial(self) -> None:
        self.need_partial_redraw = True


def content_rows(rows: int) -> int:
    """Tree rows in a terminal of ``rows`` lines; the last line is the status bar."""
    return max(1, rows - 1)


def scroll_into_view(selected: int, scroll_offset: int, view_rows: int, total: int) -> int:
    """Smallest scroll move that puts ``selected`` inside the viewport."""
    if selected < scroll_offset:
        scroll_offset = selected
    elif selected >= scroll_offset + view_rows:
        scroll_offset = selected - view_rows + 1
    max_offset = max(0, total - view_rows)
    return max(0, min(scroll_offset, max_offset))


def choose_strategy(
    state: RenderState,
    total: int,
    selected: int,
    scroll_offset: int,
    rows: int,
    cols: int,
) -> RedrawStrategy:
    if total <= 0:
        return RedrawStrategy.EMPTY
    view_rows = content_rows(rows)
    if (
        state.need_full_redraw
        or state.previous_scroll_offset is None
        or state.previous_viewport != (rows, cols)
    ):
        return RedrawStrategy.FULL
    delta = scroll_offset - state.previous_scroll_offset
    if state.need_partial_redraw:
        start_row = selected - scroll_offset
        if delta == 0 and 0 <= start_row < view_rows:
            return RedrawStrategy.PARTIAL
        return RedrawStrategy.FULL
    if delta != 0:
        if abs(delta) >= view_rows:
            return RedrawStrategy.LARGE_SCROLL
        return RedrawStrategy.SCROLL_SHIFT
    return RedrawStrategy.SELECTION_ONLY


def render_frame(
    screen: Screen,
    state: RenderState,
    total: int,
    selected: int,
    scroll_offset: int,
    rows: int,
    cols: int,
    paint_row: Callable[[int], str],
    status_text: str,
) -> RedrawStrategy:
    """Draw one frame and record it in ``state``.

    ``paint_row(idx)`` returns the styled text of visible row ``idx``;
    ``status_text`` is the styled status bar. The caller has already clamped
    ``selected`` and scrolled it into view.
    """
    view_rows = content_rows(rows)
    status_row = rows - 1
    strategy = choose_strategy(state, total, selected, scroll_offset, rows, cols)
    logger.debug("redraw strategy=%s selected=%d scroll=%d", strategy.value, selected, scroll_offset)

    def draw(row: int) -> None:
        idx = scroll_offset + row
        if 0 <= row < view_rows and idx < total:
            screen.draw_row(row, paint_row(idx))
        elif 0 <= row < view_rows:
            screen.clear_row(row)

    if strategy is RedrawStrategy.EMPTY:
        screen.clear()
        screen.draw_row(0, EMPTY_MESSAGE)
    elif strategy in (RedrawStrategy.FULL, RedrawStrategy.LARGE_SCROLL):
        screen.clear()
        for row in range(view_rows):
            if scroll_offset + row >= total:
                break
            screen.draw_row(row, paint_row(scroll_offset + row))
    elif strategy is RedrawStrategy.PARTIAL:
        start_row = selected - scroll_offset
        previous_row = state.previous_selected_index - scroll_offset
        if 0 <= previous_row < start_row:
            draw(previous_row)
        for row in range(start_row, view_rows):
            draw(row)
    elif strategy is RedrawStrategy.SCROLL_SHIFT:
        delta = scroll_offset - (state.previous_scroll_offset or 0)
        screen.shift_rows(0, view_rows - 1, delta)
        if delta > 0:
            exposed = list(range(view_rows - delta, view_rows))
        else:
            exposed = list(range(0, -delta))
        redraw = exposed + [state.previous_selected_index - scroll_offset, selected - scroll_offset]
        for row in dict.fromkeys(redraw):
            draw(row)
    else:
        for row in dict.fromkeys((state.previous_selected_index - scroll_offset, selected - scroll_offset)):
            draw(row)

    if strategy is not RedrawStrategy.EMPTY:
        screen.draw_row(status_row, status_text)
    screen.flush()

    state.previous_selected_index = selected
    state.previous_scroll_offset = scroll_offset
    state.previous_viewport = (rows, cols)
    state.need_full_redraw = strategy is RedrawStrategy.EMPTY
    state.need_partial_redraw = False
    return strategy
