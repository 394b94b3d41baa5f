"""Status bar text and its clickable key hints."""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import clip_to_width, compute_display_width
from ..search.matching import SearchState
from ..tree_model.labels import escape_key
from ..tree_model.types import Node
from ..ui_theme import RESET, ColorScheme


@dataclass(frozen=True)
class ClickHint:
    """Status-bar token that acts as ``key`` when clicked in ``[start, end)``."""

    key: str
    start: int
    end: int


@dataclass(frozen=True)
class StatusLine:
    text: str
    hints: tuple[ClickHint, ...] = ()


def selection_path(node: Node | None) -> str:
    """``file.json/key/[0]`` style path; the root shows its base name only."""
    if node is None:
        return "/"
    parts: list[str] = []
    current: Node | None = node
    while current is not None:
        parts.append(escape_key(current.key))
        current = current.parent
    parts.reverse()
    root_name = parts[0].rsplit("/", 1)[-1]
    path = "/".join([root_name, *parts[1:]])
    return path or "/"


def build_status_line(
    selected: Node | None,
    search: SearchState,
    cols: int,
    transient_message: str | None = None,
) -> StatusLine:
    """Status text for the selection, search progress and key hints.

    A transient message replaces the whole line and carries no hints.
    """
    if transient_message:
        return StatusLine(clip_to_width(transient_message, cols))

    text = selection_path(selected)
    hints: list[ClickHint] = []

    def add_hint(key: str, label: str, comma: bool) -> None:
        nonlocal text
        if comma:
            text += ", "
        start = compute_display_width(text)
        text += f"{key}:{label}"
        hints.append(ClickHint(key, start, compute_display_width(text)))

    if search.active:
        total = len(search.matches)
        position = search.current_index + 1 if total else 0
        text += f"   [search '{search.term}' {position}/{total}]"
        text += "   ("
        add_hint("n", "next", False)
        add_hint("N", "prev", True)
        add_hint("c", "clear", True)
        text += ")"
    else:
        text += "   ("
        add_hint("?", "help", False)
        add_hint("q", "quit", True)
        text += ")"

    clipped = clip_to_width(text, cols)
    width = compute_display_width(clipped)
    visible_hints = tuple(hint for hint in hints if hint.end <= width)
    return StatusLine(clipped, visible_hints)


def compose_status(status: StatusLine, scheme: ColorScheme) -> str:
    return f"{scheme.status_bar}{status.text}{RESET}"


def hint_at(hints: tuple[ClickHint, ...], col: int) -> str | None:
    """Key of the hint covering 0-based column ``col``, if any."""
    for hint in hints:
        if hint.start <= col < hint.end:
            return hint.key
    return None
