"""OSC 52 clipboard transport.

Terminals that honour OSC 52 put the base64 payload on the system clipboard,
which also works over SSH. Support is guessed from ``TERM``; when it looks
unsupported nothing is written and callers show a status message instead.
"""

from __future__ import annotations

import base64
import logging
import os
import sys
from collections.abc import Mapping

logger = logging.getLogger(__name__)

OSC52_MAX_PAYLOAD = 100_000
TOO_LARGE_MESSAGE = "Selection too large for the clipboard"

_OSC52_TERMS = ("xterm", "tmux", "screen", "rxvt", "alacritty", "foot", "kitty", "wezterm")


def _environ(env: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if env is None else env


def osc52_likely(env: Mapping[str, str] | None = None) -> bool:
    """Guess whether the terminal accepts OSC 52 clipboard writes."""
    environ = _environ(env)
    if environ.get("NO_OSC52"):
        return False
    term = environ.get("TERM")
    if not term or term in ("dumb", "linux"):
        return False
    return any(name in term for name in _OSC52_TERMS)


def clipboard_status_message(env: Mapping[str, str] | None = None) -> str:
    environ = _environ(env)
    if osc52_likely(environ):
        return "JSON copied to clipboard!"
    if environ.get("TMUX"):
        return "Clipboard not supported - tmux needs OSC 52 configuration"
    return "Clipboard not supported by this terminal"


def osc52_sequence(text: str) -> str | None:
    """OSC 52 escape for ``text``, or ``None`` when the payload is over the cap."""
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    if len(encoded) > OSC52_MAX_PAYLOAD:
        return None
    return f"\033]52;c;{encoded}\a"


def _write_sequence(sequence: str) -> bool:
    payload = sequence.encode("ascii")
    try:
        with open("/dev/tty", "wb", buffering=0) as tty_out:
            tty_out.write(payload)
        return True
    except OSError:
        logger.info("cannot open /dev/tty for clipboard write; trying stdout")
    if sys.stdout.isatty():
        os.write(sys.stdout.fileno(), payload)
        return True
    return False


def copy_to_clipboard(text: str, env: Mapping[str, str] | None = None) -> str:
    """Send ``text`` to the clipboard and return the status message to show."""
    if not osc52_likely(env):
        logger.info("clipboard copy skipped: terminal does not look OSC 52 capable")
        return clipboard_status_message(env)
    sequence = osc52_sequence(text)
    if sequence is None:
        logger.info("clipboard copy skipped: %d characters exceed the OSC 52 cap", len(text))
        return TOO_LARGE_MESSAGE
    if not _write_sequence(sequence):
        logger.info("clipboard copy skipped: no terminal to write to")
        return clipboard_status_message({"TERM": "dumb"})
    return clipboard_status_message(env)
