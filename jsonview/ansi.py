"""Terminal cell-width measurement and width-bounded text shaping.

Widths come from ``wcwidth`` so East Asian wide characters take two cells and
combining or zero-width code points take none. These helpers keep row layout
aligned with what the terminal actually paints.
"""

from __future__ import annotations

import re

from wcwidth import wcwidth

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
ELLIPSIS = "..."


def char_display_width(ch: str) -> int:
    """Return terminal column width for one code point.

    Code points without a defined width (control characters) count as their
    UTF-8 byte length, mirroring the whole-string fallback.
    """
    width = wcwidth(ch)
    if width < 0:
        return len(ch.encode("utf-8", errors="surrogatepass"))
    return width


def compute_display_width(text: str | bytes) -> int:
    """Terminal column width of ``text``.

    ``bytes`` input is decoded as UTF-8; undecodable input falls back to its
    raw byte length.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError:
            return len(text)
    return sum(char_display_width(ch) for ch in text)


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def clip_to_width(text: str, max_cols: int) -> str:
    """Trim plain text to at most ``max_cols`` display columns.

    A wide character that would straddle the boundary is dropped whole.
    """
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def truncate_with_ellipsis(text: str, max_cols: int) -> str:
    """Clip ``text`` to ``max_cols`` columns, ending in ``...`` when cut."""
    if compute_display_width(text) <= max_cols:
        return text
    if max_cols <= len(ELLIPSIS):
        return clip_to_width(ELLIPSIS, max_cols)
    return clip_to_width(text, max_cols - len(ELLIPSIS)) + ELLIPSIS
