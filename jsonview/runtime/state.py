"""Mutable viewer session state threaded through actions and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..render.engine import RenderState
from ..render.status import ClickHint
from ..search.matching import EMPTY_SEARCH, SearchState
from ..tree_model.types import Node
from ..tree_model.visibility import collect_visible_forest, index_of
from ..ui_theme import DEFAULT_SCHEME, ColorScheme

STATUS_MESSAGE_SECONDS = 3.0


@dataclass
class ViewerState:
    roots: list[Node]
    visible: list[Node] = field(default_factory=list)
    selected: int = 0
    scroll_offset: int = 0
    search: SearchState = EMPTY_SEARCH
    render: RenderState = field(default_factory=RenderState)
    scheme: ColorScheme = DEFAULT_SCHEME
    ascii_glyphs: bool = False
    mouse_enabled: bool = True
    status_message: str = ""
    status_expires_at: float = 0.0
    status_hints: tuple[ClickHint, ...] = ()
    show_help: bool = False
    running: bool = True
    last_click_row: int | None = None
    last_click_at: float = 0.0

    def __post_init__(self) -> None:
        if not self.visible:
            self.refresh_visible()

    def refresh_visible(self) -> None:
        """Re-flatten the forest and clamp the selection into range."""
        self.visible = collect_visible_forest(self.roots)
        if not self.visible:
            self.selected = 0
            return
        self.selected = max(0, min(self.selected, len(self.visible) - 1))

    @property
    def selected_node(self) -> Node | None:
        if 0 <= self.selected < len(self.visible):
            return self.visible[self.selected]
        return None

    def select_node(self, node: Node, fallback: int | None = None) -> bool:
        """Move the selection onto ``node`` if it is visible."""
        idx = index_of(self.visible, node)
        if idx is None:
            if fallback is not None:
                self.selected = fallback
            return False
        self.selected = idx
        return True

    def set_status(self, message: str, now: float, seconds: float = STATUS_MESSAGE_SECONDS) -> None:
        self.status_message = message
        self.status_expires_at = now + seconds

    def transient_message(self, now: float) -> str | None:
        if self.status_message and now < self.status_expires_at:
            return self.status_message
        return None

    def status_timeout_ms(self, now: float) -> int | None:
        """Read timeout that lets a transient message expire on time."""
        if not self.transient_message(now):
            return None
        return max(1, int((self.status_expires_at - now) * 1000))
