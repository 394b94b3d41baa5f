"""Low-level terminal input decoding.

Reads raw bytes from the terminal and translates them into normalized key
tokens. Handles ESC-sequence timing, navigation keys, SGR mouse events and
resize wake-ups delivered through a self-pipe.
"""

from __future__ import annotations

import os
import select
import signal

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS = {
    b"\x03": "CTRL_C",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\x15": "CTRL_U",
    b"\r": "ENTER",
    b"\n": "ENTER",
}

_CSI_FINAL_KEYS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}

_CSI_TILDE_KEYS = {
    "1": "HOME",
    "7": "HOME",
    "4": "END",
    "8": "END",
    "5": "PAGE_UP",
    "6": "PAGE_DOWN",
    "3": "DELETE",
}


class ResizeWakeup:
    """Route ``SIGWINCH`` into a pipe so ``read_key`` can report ``RESIZE``.

    The handler itself does nothing; ``signal.set_wakeup_fd`` writes one byte
    per signal into the pipe, which wakes the same ``select`` that waits for
    keys.
    """

    def __init__(self) -> None:
        self.read_fd, self.write_fd = os.pipe()
        os.set_blocking(self.read_fd, False)
        os.set_blocking(self.write_fd, False)
        self._previous_wakeup_fd: int | None = None
        self._previous_handler = None

    def install(self) -> ResizeWakeup:
        self._previous_handler = signal.signal(signal.SIGWINCH, lambda _signum, _frame: None)
        self._previous_wakeup_fd = signal.set_wakeup_fd(self.write_fd)
        return self

    def close(self) -> None:
        if self._previous_handler is not None:
            signal.set_wakeup_fd(self._previous_wakeup_fd if self._previous_wakeup_fd is not None else -1)
            signal.signal(signal.SIGWINCH, self._previous_handler)
            self._previous_handler = None
        os.close(self.read_fd)
        os.close(self.write_fd)

    def __enter__(self) -> ResizeWakeup:
        return self.install()

    def __exit__(self, *exc_info) -> None:
        self.close()


def _drain(fd: int) -> None:
    # One read clears any burst of queued wake-up bytes.
    try:
        os.read(fd, 512)
    except BlockingIOError:
        pass


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_mouse(fd: int) -> str:
    # SGR mouse: ESC [ < btn ; col ; row (M/m)
    payload: list[bytes] = []
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return "ESC"
        if part in {b"M", b"m"}:
            break
        payload.append(part)
        if len(payload) > 64:
            return "ESC"
    try:
        btn_s, col_s, row_s = b"".join(payload).decode("ascii").split(";")
        btn = int(btn_s)
        col = int(col_s)
        row = int(row_s)
    except ValueError:
        return "ESC"
    button = btn & 0b11
    if btn & 0b0100_0000:
        if button == 0:
            return f"MOUSE_WHEEL_UP:{col}:{row}"
        if button == 1:
            return f"MOUSE_WHEEL_DOWN:{col}:{row}"
        return "MOUSE"
    if btn & 0b0010_0000:
        # Motion while a button is held.
        return "MOUSE"
    if button == 0:
        suffix = "DOWN" if part == b"M" else "UP"
        return f"MOUSE_LEFT_{suffix}:{col}:{row}"
    return "MOUSE"


def read_key(fd: int, timeout_ms: int | None = None, wake_fd: int | None = None) -> str:
    """Block for one input event and return its key token.

    Returns ``""`` when ``timeout_ms`` elapses without input and ``"RESIZE"``
    when ``wake_fd`` becomes readable.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        watched = [fd] if wake_fd is None else [fd, wake_fd]
        if timeout_ms is not None or wake_fd is not None:
            timeout = None if timeout_ms is None else max(0.0, timeout_ms / 1000.0)
            ready, _, _ = select.select(watched, [], [], timeout)
            if not ready:
                return ""
            if wake_fd is not None and wake_fd in ready:
                _drain(wake_fd)
                return "RESIZE"

        ch = os.read(fd, 1)
        if not ch:
            return ""

    control = _CONTROL_KEYS.get(ch)
    if control is not None:
        return control

    if ch != b"\x1b":
        needed = _utf8_length(ch[0]) - 1
        while needed > 0:
            more = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if more is None:
                break
            ch += more
            needed -= 1
        return ch.decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"O":
        # SS3 form sent by some terminals in application cursor mode.
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ESC"
        return _CSI_FINAL_KEYS.get(final, "ESC")
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[seq]
    if seq == b"<":
        return _decode_mouse(fd)
    if seq.isdigit():
        digits = seq.decode("ascii")
        while True:
            part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if part is None:
                return "ESC"
            if part == b"~":
                return _CSI_TILDE_KEYS.get(digits, "ESC")
            if not part.isdigit() and part != b";":
                # Modified cursor keys such as ESC [ 1 ; 5 A.
                return _CSI_FINAL_KEYS.get(part, "ESC")
            digits += part.decode("ascii")
            if len(digits) > 16:
                return "ESC"
    return "ESC"
