"""Tests for redraw strategy selection and incremental frame output."""

from __future__ import annotations

import os
import unittest

from jsonview.render import RedrawStrategy, RenderState, Screen, render_frame, scroll_into_view
from jsonview.render.engine import choose_strategy, content_rows


class RecordingScreen(Screen):
    """Screen that records drawing calls instead of writing to a terminal."""

    def __init__(self) -> None:
        super().__init__(fd=-1)
        self.drawn: list[int] = []
        self.blanked: list[int] = []
        self.cleared = 0
        self.shifts: list[tuple[int, int, int]] = []
        self.flushes = 0

    def draw_row(self, row: int, text: str) -> None:
        self.drawn.append(row)
        super().draw_row(row, text)

    def clear_row(self, row: int) -> None:
        self.blanked.append(row)
        super().clear_row(row)

    def clear(self) -> None:
        self.cleared += 1
        super().clear()

    def shift_rows(self, top: int, bottom: int, delta: int) -> None:
        self.shifts.append((top, bottom, delta))
        super().shift_rows(top, bottom, delta)

    def flush(self) -> None:
        self.flushes += 1
        self._out.clear()

    def reset(self) -> None:
        self.drawn.clear()
        self.blanked.clear()
        self.cleared = 0
        self.shifts.clear()


def _frame(screen, state, selected, scroll, rows=11, cols=80, total=1000):
    return render_frame(
        screen,
        state,
        total,
        selected,
        scroll,
        rows,
        cols,
        lambda idx: f"row {idx}",
        "status",
    )


class ScrollIntoViewTests(unittest.TestCase):
    def test_minimal_moves(self) -> None:
        self.assertEqual(scroll_into_view(5, 0, 10, 100), 0)
        self.assertEqual(scroll_into_view(12, 0, 10, 100), 3)
        self.assertEqual(scroll_into_view(2, 8, 10, 100), 2)

    def test_offset_clamped_to_content(self) -> None:
        self.assertEqual(scroll_into_view(3, 50, 10, 12), 2)
        self.assertEqual(scroll_into_view(0, 0, 10, 3), 0)

    def test_content_rows_reserves_status_line(self) -> None:
        self.assertEqual(content_rows(24), 23)
        self.assertEqual(content_rows(1), 1)


class ChooseStrategyTests(unittest.TestCase):
    def _drawn_state(self) -> RenderState:
        return RenderState(
            previous_selected_index=4,
            previous_scroll_offset=0,
            need_full_redraw=False,
            previous_viewport=(11, 80),
        )

    def test_first_frame_is_full(self) -> None:
        self.assertIs(choose_strategy(RenderState(), 10, 0, 0, 11, 80), RedrawStrategy.FULL)

    def test_empty_content(self) -> None:
        self.assertIs(choose_strategy(self._drawn_state(), 0, 0, 0, 11, 80), RedrawStrategy.EMPTY)

    def test_viewport_change_forces_full(self) -> None:
        self.assertIs(choose_strategy(self._drawn_state(), 100, 5, 0, 12, 80), RedrawStrategy.FULL)

    def test_selection_only(self) -> None:
        self.assertIs(choose_strategy(self._drawn_state(), 100, 5, 0, 11, 80), RedrawStrategy.SELECTION_ONLY)

    def test_partial_needs_stable_scroll(self) -> None:
        state = self._drawn_state()
        state.request_partial()
        self.assertIs(choose_strategy(state, 100, 4, 0, 11, 80), RedrawStrategy.PARTIAL)
        self.assertIs(choose_strategy(state, 100, 14, 5, 11, 80), RedrawStrategy.FULL)

    def test_large_scroll(self) -> None:
        self.assertIs(choose_strategy(self._drawn_state(), 100, 50, 41, 11, 80), RedrawStrategy.LARGE_SCROLL)


class RenderFrameTests(unittest.TestCase):
    def setUp(self) -> None:
        self.screen = RecordingScreen()
        self.state = RenderState()

    def test_full_frame_draws_every_row_and_status(self) -> None:
        strategy = _frame(self.screen, self.state, 0, 0)
        self.assertIs(strategy, RedrawStrategy.FULL)
        self.assertEqual(self.screen.cleared, 1)
        self.assertEqual(self.screen.drawn, list(range(10)) + [10])
        self.assertEqual(self.screen.flushes, 1)
        self.assertFalse(self.state.need_full_redraw)

    def test_scroll_by_three_shifts_region_and_redraws_exposed_rows(self) -> None:
        _frame(self.screen, self.state, 9, 0)
        self.screen.reset()
        scroll = scroll_into_view(12, 0, content_rows(11), 1000)
        self.assertEqual(scroll, 3)
        strategy = _frame(self.screen, self.state, 12, scroll)
        self.assertIs(strategy, RedrawStrategy.SCROLL_SHIFT)
        self.assertEqual(self.screen.shifts, [(0, 9, 3)])
        self.assertEqual(self.screen.cleared, 0)
        self.assertEqual(set(self.screen.drawn) - {10}, {6, 7, 8, 9})

    def test_scroll_up_exposes_top_rows(self) -> None:
        _frame(self.screen, self.state, 20, 20)
        self.screen.reset()
        strategy = _frame(self.screen, self.state, 18, 18)
        self.assertIs(strategy, RedrawStrategy.SCROLL_SHIFT)
        self.assertEqual(self.screen.shifts, [(0, 9, -2)])
        self.assertEqual(set(self.screen.drawn) - {10}, {0, 1, 2})

    def test_selection_move_redraws_two_rows(self) -> None:
        _frame(self.screen, self.state, 2, 0)
        self.screen.reset()
        strategy = _frame(self.screen, self.state, 3, 0)
        self.assertIs(strategy, RedrawStrategy.SELECTION_ONLY)
        self.assertEqual(self.screen.drawn, [2, 3, 10])

    def test_partial_redraws_from_selection_down(self) -> None:
        _frame(self.screen, self.state, 4, 0)
        self.screen.reset()
        self.state.request_partial()
        strategy = _frame(self.screen, self.state, 4, 0)
        self.assertIs(strategy, RedrawStrategy.PARTIAL)
        self.assertEqual(self.screen.drawn, [4, 5, 6, 7, 8, 9, 10])
        self.assertFalse(self.state.need_partial_redraw)

    def test_rows_past_content_are_cleared_on_partial(self) -> None:
        _frame(self.screen, self.state, 1, 0, total=3)
        self.screen.reset()
        self.state.request_partial()
        _frame(self.screen, self.state, 1, 0, total=3)
        self.assertEqual(self.screen.drawn, [1, 2, 10])
        self.assertEqual(self.screen.blanked, list(range(3, 10)))

    def test_empty_content_shows_message_and_forces_full_next(self) -> None:
        strategy = _frame(self.screen, self.state, 0, 0, total=0)
        self.assertIs(strategy, RedrawStrategy.EMPTY)
        self.assertEqual(self.screen.drawn, [0])
        self.assertTrue(self.state.need_full_redraw)
        self.assertIs(_frame(self.screen, self.state, 0, 0, total=5), RedrawStrategy.FULL)


class ScreenTests(unittest.TestCase):
    def test_frame_is_emitted_with_one_write(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            screen = Screen(fd=write_fd)
            screen.draw_row(0, "hello")
            screen.shift_rows(0, 9, -2)
            screen.flush()
            self.assertEqual(screen.pending(), "")
            data = os.read(read_fd, 4096).decode("utf-8")
        finally:
            os.close(read_fd)
            os.close(write_fd)
        self.assertEqual(data, "\033[1;1H\033[2Khello\033[0m\033[1;10r\033[2T\033[r")


if __name__ == "__main__":
    unittest.main()
