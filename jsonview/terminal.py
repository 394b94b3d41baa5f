"""Terminal control helpers for the viewer session.

Owns raw-mode lifecycle, alternate-screen switching, mouse toggles and
viewport measurement.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

MOUSE_ON = b"\x1b[?1000h\x1b[?1006h"
MOUSE_OFF = b"\x1b[?1000l\x1b[?1006l"


def open_input_fd(stdin_fd: int) -> tuple[int, bool]:
    """Return a readable terminal fd and whether the caller must close it.

    When stdin carried the document it is no longer a terminal, so keys are
    read from the controlling terminal instead.
    """
    if os.isatty(stdin_fd):
        return stdin_fd, False
    return os.open("/dev/tty", os.O_RDONLY), True


def viewport_size() -> tuple[int, int]:
    """Current ``(rows, cols)`` of the output terminal."""
    size = shutil.get_terminal_size((80, 24))
    return max(2, size.lines), max(1, size.columns)


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int, mouse_enabled: bool = True) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.mouse_enabled = mouse_enabled
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._mouse_reporting_enabled = False

    def enable_tui_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Enter alternate screen and hide cursor.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")
        self.set_mouse_reporting(self.mouse_enabled)

    def disable_tui_mode(self) -> None:
        self.set_mouse_reporting(False)
        # Reset scroll region and attributes, show cursor, restore the main screen.
        os.write(self.stdout_fd, b"\x1b[r\x1b[0m\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def set_mouse_reporting(self, enabled: bool) -> None:
        desired = bool(enabled)
        if desired == self._mouse_reporting_enabled:
            return
        os.write(self.stdout_fd, MOUSE_ON if desired else MOUSE_OFF)
        self._mouse_reporting_enabled = desired

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
