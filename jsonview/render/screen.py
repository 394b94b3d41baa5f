"""Buffered ANSI screen writer.

Every drawing primitive appends escape sequences to a buffer; ``flush`` emits
the whole frame with a single ``os.write`` so partial frames never reach a
slow link.
"""

from __future__ import annotations

import os
import sys


class Screen:
    def __init__(self, fd: int | None = None) -> None:
        self.fd = sys.stdout.fileno() if fd is None else fd
        self._out: list[str] = []

    def draw_row(self, row: int, text: str) -> None:
        """Replace the contents of 0-based ``row`` with ``text``."""
        self._out.append(f"\033[{row + 1};1H\033[2K{text}\033[0m")

    def clear_row(self, row: int) -> None:
        self._out.append(f"\033[{row + 1};1H\033[2K")

    def clear(self) -> None:
        self._out.append("\033[0m\033[H\033[2J")

    def shift_rows(self, top: int, bottom: int, delta: int) -> None:
        """Scroll rows ``top..bottom`` (inclusive) by ``delta`` lines.

        Positive ``delta`` moves content up (new rows exposed at the bottom),
        negative moves it down. The scroll region is reset afterwards.
        """
        if delta == 0:
            return
        self._out.append(f"\033[{top + 1};{bottom + 1}r")
        if delta > 0:
            self._out.append(f"\033[{delta}S")
        else:
            self._out.append(f"\033[{-delta}T")
        self._out.append("\033[r")

    def write_raw(self, text: str) -> None:
        self._out.append(text)

    def pending(self) -> str:
        return "".join(self._out)

    def flush(self) -> None:
        if not self._out:
            return
        payload = "".join(self._out)
        self._out.clear()
        os.write(self.fd, payload.encode("utf-8", errors="replace"))
