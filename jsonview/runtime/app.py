"""Interactive session bootstrap: build the forest, enter raw mode, run the loop."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

from ..clipboard import osc52_likely
from ..config import ViewerConfig
from ..document.loader import Document
from ..input.reader import ResizeWakeup, read_key
from ..render.screen import Screen
from ..terminal import TerminalController, open_input_fd, viewport_size
from ..tree_model.build import build_forest
from ..ui_theme import resolve_scheme
from .loop import LoopIO, run_main_loop
from .state import ViewerState

logger = logging.getLogger(__name__)


def create_state(documents: Sequence[Document], config: ViewerConfig) -> ViewerState:
    return ViewerState(
        roots=build_forest(documents),
        scheme=resolve_scheme(config.color_scheme),
        ascii_glyphs=config.ascii_glyphs,
        mouse_enabled=config.mouse_enabled,
    )


def run_viewer(documents: Sequence[Document], config: ViewerConfig) -> None:
    """Browse ``documents`` until the user quits; the terminal is always restored."""
    state = create_state(documents, config)
    logger.debug("starting viewer with %d document(s), %d visible rows", len(state.roots), len(state.visible))
    stdout_fd = sys.stdout.fileno()
    input_fd, owns_input_fd = open_input_fd(sys.stdin.fileno())
    try:
        terminal = TerminalController(input_fd, stdout_fd, mouse_enabled=config.mouse_enabled)
        screen = Screen(stdout_fd)
        with ResizeWakeup() as wakeup, terminal.raw_mode():
            io = LoopIO(
                read_key=lambda timeout_ms: read_key(input_fd, timeout_ms, wakeup.read_fd),
                viewport=viewport_size,
                clipboard_supported=osc52_likely(),
                in_tmux=bool(os.environ.get("TMUX")),
            )
            run_main_loop(state, screen, io)
    finally:
        if owns_input_fd:
            os.close(input_fd)
