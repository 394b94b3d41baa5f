"""State transitions behind every key and mouse command.

Actions mutate ``ViewerState`` and mark how much of the screen must be
redrawn: single-node expand/collapse asks for a partial redraw, whole-tree
changes ask for a full one, and plain selection moves ask for nothing.
"""

from __future__ import annotations

from dataclasses import replace

from ..clipboard import copy_to_clipboard
from ..config import save_color_scheme
from ..document.serialize import format_json
from ..search.matching import EMPTY_SEARCH, advance, new_search
from ..tree_model.visibility import (
    collapse_all,
    expand_all,
    expand_path,
    expand_to_level,
    node_depth,
)
from ..ui_theme import next_scheme, scheme_status_message
from .state import ViewerState


def move_selection(state: ViewerState, delta: int) -> None:
    if not state.visible:
        return
    state.selected = max(0, min(len(state.visible) - 1, state.selected + delta))


def page_size(rows: int) -> int:
    """Rows moved by PgUp/PgDn for a terminal of ``rows`` lines."""
    return max(1, rows - 2)


def select_first(state: ViewerState) -> None:
    state.selected = 0


def select_last(state: ViewerState) -> None:
    state.selected = max(0, len(state.visible) - 1)


def toggle_selected(state: ViewerState) -> None:
    node = state.selected_node
    if node is None or not node.children:
        return
    node.expanded = not node.expanded
    state.refresh_visible()
    state.render.request_partial()


def expand_selected(state: ViewerState) -> None:
    node = state.selected_node
    if node is None or not node.children or node.expanded:
        return
    node.expanded = True
    state.refresh_visible()
    state.render.request_partial()


def collapse_or_parent(state: ViewerState) -> None:
    """Collapse the selected node, or move to its parent when already closed."""
    node = state.selected_node
    if node is None:
        return
    if node.expanded and node.children:
        node.expanded = False
        state.refresh_visible()
        state.render.request_partial()
    elif node.parent is not None:
        state.select_node(node.parent)


def expand_everything(state: ViewerState) -> None:
    node = state.selected_node
    for root in state.roots:
        expand_all(root)
    state.refresh_visible()
    if node is not None:
        state.select_node(node)
    state.render.request_full()


def collapse_everything(state: ViewerState) -> None:
    """Collapse all documents to their top level, keeping the selection visible."""
    node = state.selected_node
    for root in state.roots:
        collapse_all(root, keep_root_expanded=True)
    if node is not None:
        expand_path(node)
    state.refresh_visible()
    if node is not None:
        state.select_node(node)
    state.render.request_full()


def expand_level(state: ViewerState, level: int) -> None:
    """Expand every document to ``level``.

    The selected node stays visible when it sits at or above ``level``, and
    always for level 0; otherwise the selection moves to the first row.
    """
    node = state.selected_node
    for root in state.roots:
        expand_to_level(root, level)
    if node is not None and (level == 0 or node_depth(node) <= level):
        expand_path(node)
    state.refresh_visible()
    if node is not None:
        state.select_node(node, fallback=0)
    state.render.request_full()


def submit_search(state: ViewerState, term: str, search_keys: bool, search_values: bool) -> None:
    """Replace the search and jump to its first match."""
    state.search = new_search(state.roots, term.strip(), search_keys, search_values)
    if state.search.matches:
        first = state.search.matches[0]
        expand_path(first)
        state.refresh_visible()
        state.select_node(first)
    state.render.request_full()


def jump_to_match(state: ViewerState, direction: int) -> None:
    """Select the next (``+1``) or previous (``-1``) match, revealing it."""
    search = state.search
    if not search.active or not search.matches:
        return
    idx = advance(search.matches, state.selected_node, direction, search.current_index)
    state.search = replace(search, current_index=idx)
    match = search.matches[idx]
    expand_path(match)
    state.refresh_visible()
    state.select_node(match)
    state.render.request_full()


def clear_search(state: ViewerState) -> None:
    state.search = EMPTY_SEARCH
    state.render.request_full()


def cycle_color_scheme(state: ViewerState, now: float) -> None:
    state.scheme = next_scheme(state.scheme)
    save_color_scheme(state.scheme.name)
    state.set_status(scheme_status_message(state.scheme), now)
    state.render.request_full()


def copy_selection(state: ViewerState, now: float) -> None:
    node = state.selected_node
    if node is None:
        return
    message = copy_to_clipboard(format_json(node.value, indent=2))
    state.set_status(message, now)
    state.render.request_full()


def toggle_help(state: ViewerState) -> None:
    state.show_help = not state.show_help
    state.render.request_full()


def quit_viewer(state: ViewerState) -> None:
    state.running = False
