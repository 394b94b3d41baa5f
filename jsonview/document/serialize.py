"""JSON serialization for clipboard payloads and ``--parse-only`` output.

``json.dumps`` writes non-finite floats as ``NaN``/``Infinity``/``-Infinity``,
which is exactly the literal the loader accepted.
"""

from __future__ import annotations

import json

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer

_LEXER = JsonLexer()
_FORMATTER = TerminalFormatter()


def format_json(value: object, indent: int = 2) -> str:
    """Pretty-print ``value`` keeping key order and non-ASCII text."""
    return json.dumps(value, indent=indent, ensure_ascii=False)


def colorize_json(text: str) -> str:
    """Syntax-highlight JSON text for a colour terminal."""
    return highlight(text, _LEXER, _FORMATTER)
