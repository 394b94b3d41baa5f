"""Mouse click and wheel handling for tree rows and status-bar hints."""

from __future__ import annotations

from ..render.engine import content_rows
from ..render.status import hint_at
from ..runtime import actions
from ..runtime.state import ViewerState
from ..tree_model.labels import toggle_hit_width

DOUBLE_CLICK_SECONDS = 0.35
WHEEL_STEP = 3


def parse_mouse_token(key: str) -> tuple[str, int, int] | None:
    """Split ``KIND:col:row`` into kind and 0-based column/row."""
    parts = key.split(":")
    if len(parts) != 3:
        return None
    try:
        col = int(parts[1]) - 1
        row = int(parts[2]) - 1
    except ValueError:
        return None
    return parts[0], col, row


def handle_mouse_event(key: str, state: ViewerState, rows: int, now: float) -> str | None:
    """Apply a mouse token; returns a key token to dispatch for hint clicks."""
    parsed = parse_mouse_token(key)
    if parsed is None:
        return None
    kind, col, row = parsed

    if kind == "MOUSE_WHEEL_UP":
        actions.move_selection(state, -WHEEL_STEP)
        return None
    if kind == "MOUSE_WHEEL_DOWN":
        actions.move_selection(state, WHEEL_STEP)
        return None
    if kind != "MOUSE_LEFT_DOWN":
        return None

    if row == rows - 1:
        return hint_at(state.status_hints, col)
    if row < 0 or row >= content_rows(rows):
        return None

    idx = state.scroll_offset + row
    if idx >= len(state.visible):
        return None
    is_double = state.last_click_row == idx and (now - state.last_click_at) <= DOUBLE_CLICK_SECONDS
    state.selected = idx
    node = state.visible[idx]
    if is_double:
        state.last_click_row = None
        actions.toggle_selected(state)
        return None
    state.last_click_row = idx
    state.last_click_at = now
    if col < toggle_hit_width(node, state.ascii_glyphs) and node.has_children:
        actions.toggle_selected(state)
    return None
