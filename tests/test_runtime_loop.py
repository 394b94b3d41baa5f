"""Tests for the interactive loop driven by scripted key tokens."""

from __future__ import annotations

import random
import unittest

from jsonview.config import ViewerConfig
from jsonview.document import Document
from jsonview.input.keys import NormalKeyContext, handle_normal_key
from jsonview.render import RedrawStrategy, RenderState, Screen
from jsonview.runtime.app import create_state
from jsonview.runtime.loop import LoopIO, draw_frame, run_main_loop
from jsonview.ui_theme import NONE_SCHEME


class CapturingScreen(Screen):
    def __init__(self) -> None:
        super().__init__(fd=-1)
        self.frames: list[str] = []
        self.clears = 0

    def clear(self) -> None:
        self.clears += 1
        super().clear()

    def flush(self) -> None:
        if self._out:
            self.frames.append(self.pending())
            self._out.clear()


class ScriptedKeys:
    def __init__(self, *keys: str | BaseException) -> None:
        self._keys = list(keys)
        self.timeouts: list[int | None] = []

    def __call__(self, timeout_ms: int | None) -> str:
        self.timeouts.append(timeout_ms)
        if not self._keys:
            return "q"
        key = self._keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key


class GridScreen(Screen):
    """Screen that applies drawing calls to an in-memory grid of rows."""

    def __init__(self, rows: int) -> None:
        super().__init__(fd=-1)
        self.grid = [""] * rows

    def draw_row(self, row: int, text: str) -> None:
        self.grid[row] = text

    def clear_row(self, row: int) -> None:
        self.grid[row] = ""

    def clear(self) -> None:
        self.grid = [""] * len(self.grid)

    def shift_rows(self, top: int, bottom: int, delta: int) -> None:
        region = self.grid[top : bottom + 1]
        if delta > 0:
            region = region[delta:] + [""] * min(delta, len(region))
        elif delta < 0:
            region = [""] * min(-delta, len(region)) + region[:delta]
        self.grid[top : bottom + 1] = region[: bottom - top + 1]

    def flush(self) -> None:
        self._out.clear()


def _state():
    documents = [Document("config.json", {"name": "demo", "meta": {"tags": ["a", "b"]}}, 40)]
    return create_state(documents, ViewerConfig(color_scheme="none"))


def _run(state, *keys, now: float = 50.0) -> tuple[CapturingScreen, ScriptedKeys]:
    screen = CapturingScreen()
    scripted = ScriptedKeys(*keys)
    io = LoopIO(read_key=scripted, viewport=lambda: (24, 80), clock=lambda: now)
    run_main_loop(state, screen, io)
    return screen, scripted


class MainLoopTests(unittest.TestCase):
    def test_create_state_applies_config(self) -> None:
        state = _state()
        self.assertIs(state.scheme, NONE_SCHEME)
        self.assertEqual([node.key for node in state.visible], ["config.json", "name", "meta"])

    def test_keys_drive_selection_until_quit(self) -> None:
        state = _state()
        _run(state, "j", "j", "q")
        self.assertEqual(state.selected, 2)
        self.assertFalse(state.running)

    def test_timeouts_and_interrupts_are_ignored(self) -> None:
        state = _state()
        _run(state, "", KeyboardInterrupt(), "j", "q")
        self.assertEqual(state.selected, 1)

    def test_help_overlay_swallows_next_key(self) -> None:
        state = _state()
        screen, _keys = _run(state, "?", "j", "q")
        self.assertEqual(state.selected, 0)
        self.assertFalse(state.show_help)
        self.assertTrue(any("JSON Viewer Key Bindings:" in frame for frame in screen.frames))

    def test_resize_forces_full_redraw(self) -> None:
        state = _state()
        screen, _keys = _run(state, "j", "RESIZE", "q")
        self.assertEqual(screen.clears, 2)

    def test_search_prompt_reads_keys_from_same_source(self) -> None:
        state = _state()
        screen, _keys = _run(state, "s", "T", "a", "g", "ENTER", "q")
        self.assertEqual(state.search.term, "tag")
        self.assertEqual(state.selected_node.key, "tags")
        self.assertTrue(any("Search key: Tag" in frame for frame in screen.frames))
        self.assertIn("[search 'tag' 1/1]", screen.frames[-1])

    def test_escape_cancels_search_prompt(self) -> None:
        state = _state()
        _run(state, "s", "x", "ESC", "q")
        self.assertFalse(state.search.active)

    def test_transient_message_sets_read_timeout(self) -> None:
        state = _state()
        state.set_status("hello", 50.0, seconds=2.0)
        screen, keys = _run(state, "q")
        self.assertEqual(keys.timeouts, [2000])
        self.assertIn("hello", screen.frames[0])


class DrawFrameTests(unittest.TestCase):
    def test_first_frame_is_full_then_selection_only(self) -> None:
        state = _state()
        screen = CapturingScreen()
        self.assertIs(draw_frame(state, screen, 24, 80, 0.0), RedrawStrategy.FULL)
        state.selected = 1
        self.assertIs(draw_frame(state, screen, 24, 80, 0.0), RedrawStrategy.SELECTION_ONLY)
        self.assertEqual(len(state.status_hints), 2)

    def test_root_row_shows_match_count(self) -> None:
        state = _state()
        _run(state, "s", "a", "ENTER")
        screen = CapturingScreen()
        state.render.request_full()
        draw_frame(state, screen, 24, 80, 0.0)
        self.assertIn("🔍 3 matches", screen.frames[0])

    def test_selection_scrolls_into_view(self) -> None:
        documents = [Document("big.json", list(range(100)), 300)]
        state = create_state(documents, ViewerConfig())
        screen = CapturingScreen()
        state.selected = 60
        draw_frame(state, screen, 24, 80, 0.0)
        self.assertEqual(state.scroll_offset, 38)


class IncrementalRedrawTests(unittest.TestCase):
    ROWS = 12
    COLS = 60
    KEYS = (
        "j", "k", "j", "k", "PAGE_UP", "PAGE_DOWN", "HOME", "END", "ENTER", "LEFT", "RIGHT",
        "+", "-", "0", "1", "2", "n", "N", "s", "S", "c", "t",
    )

    def _documents(self) -> list[Document]:
        users = [
            {"name": f"user{i}", "tags": ["a", "b", "c"][: i % 4], "active": i % 2 == 0, "meta": {"id": i}}
            for i in range(8)
        ]
        return [
            Document("users.json", {"users": users, "count": 8, "nothing": None}, 900),
            Document("list.json", [[1, 2], {"name": "inner"}, "tail"], 40),
        ]

    def _full_repaint(self, state) -> list[str]:
        incremental = state.render
        state.render = RenderState()
        screen = GridScreen(self.ROWS)
        try:
            draw_frame(state, screen, self.ROWS, self.COLS, 0.0)
        finally:
            state.render = incremental
        return screen.grid

    def test_incremental_frames_match_full_repaint(self) -> None:
        rng = random.Random(1234)
        state = create_state(self._documents(), ViewerConfig())
        screen = GridScreen(self.ROWS)
        context = NormalKeyContext(
            state=state,
            viewport_rows=lambda: self.ROWS,
            prompt_search=lambda _prompt: rng.choice(["name", "user1", "a", "zzz", None]),
            clock=lambda: 0.0,
        )
        strategies = set()
        for step in range(1500):
            strategies.add(draw_frame(state, screen, self.ROWS, self.COLS, 0.0))
            self.assertEqual(screen.grid, self._full_repaint(state), f"frame {step}")
            if rng.random() < 0.25:
                row = rng.randrange(self.ROWS)
                key = f"MOUSE_LEFT_DOWN:{rng.randrange(1, 12)}:{row + 1}"
            else:
                key = rng.choice(self.KEYS)
            handle_normal_key(key, context)
        self.assertTrue(
            {RedrawStrategy.PARTIAL, RedrawStrategy.SCROLL_SHIFT, RedrawStrategy.SELECTION_ONLY} <= strategies
        )


if __name__ == "__main__":
    unittest.main()
