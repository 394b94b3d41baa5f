"""Keyboard dispatch for the tree view."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..runtime import actions
from ..runtime.state import ViewerState
from .key_registry import KeyComboBinding, KeyComboRegistry
from .mouse import handle_mouse_event


@dataclass(frozen=True)
class NormalKeyContext:
    """State and bound operations required for key handling."""

    state: ViewerState
    viewport_rows: Callable[[], int]
    prompt_search: Callable[[str], str | None]
    clock: Callable[[], float]


def handle_normal_key(key: str, context: NormalKeyContext) -> bool:
    """Handle one key token and return ``True`` when the viewer should quit."""
    state = context.state

    if key.startswith("MOUSE"):
        follow_up = handle_mouse_event(key, state, context.viewport_rows(), context.clock())
        if follow_up:
            return handle_normal_key(follow_up, context)
        return False

    def search_action(prompt: str, search_keys: bool, search_values: bool) -> Callable[[], bool]:
        def run() -> bool:
            term = context.prompt_search(prompt)
            state.render.request_full()
            if term is not None:
                actions.submit_search(state, term, search_keys, search_values)
            return False

        return run

    def step(fn: Callable[[], None]) -> Callable[[], bool]:
        def run() -> bool:
            fn()
            return False

        return run

    def quit_action() -> bool:
        actions.quit_viewer(state)
        return True

    registry = KeyComboRegistry().register_bindings(
        KeyComboBinding(("UP", "k"), step(lambda: actions.move_selection(state, -1))),
        KeyComboBinding(("DOWN", "j"), step(lambda: actions.move_selection(state, 1))),
        KeyComboBinding(
            ("PAGE_UP",),
            step(lambda: actions.move_selection(state, -actions.page_size(context.viewport_rows()))),
        ),
        KeyComboBinding(
            ("PAGE_DOWN",),
            step(lambda: actions.move_selection(state, actions.page_size(context.viewport_rows()))),
        ),
        KeyComboBinding(("HOME",), step(lambda: actions.select_first(state))),
        KeyComboBinding(("END",), step(lambda: actions.select_last(state))),
        KeyComboBinding(("LEFT", "h"), step(lambda: actions.collapse_or_parent(state))),
        KeyComboBinding(("RIGHT", "l"), step(lambda: actions.expand_selected(state))),
        KeyComboBinding(("ENTER", " "), step(lambda: actions.toggle_selected(state))),
        KeyComboBinding(("+", "="), step(lambda: actions.expand_everything(state))),
        KeyComboBinding(("-", "_"), step(lambda: actions.collapse_everything(state))),
        KeyComboBinding(("s", "/"), search_action("Search key: ", True, False)),
        KeyComboBinding(("S",), search_action("Search value: ", False, True)),
        KeyComboBinding(("n",), step(lambda: actions.jump_to_match(state, 1))),
        KeyComboBinding(("N",), step(lambda: actions.jump_to_match(state, -1))),
        KeyComboBinding(("c",), step(lambda: actions.clear_search(state))),
        KeyComboBinding(("t",), step(lambda: actions.cycle_color_scheme(state, context.clock()))),
        KeyComboBinding(("y",), step(lambda: actions.copy_selection(state, context.clock()))),
        KeyComboBinding(("?",), step(lambda: actions.toggle_help(state))),
        KeyComboBinding(("q", "Q", "CTRL_C"), quit_action),
    )
    handled = registry.dispatch(key)
    if handled is not None:
        return handled

    if len(key) == 1 and key in "0123456789":
        actions.expand_level(state, int(key))
    return False
