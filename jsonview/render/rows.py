"""Compose one tree row as an ANSI string.

Row layout is ``prefix + indicator + icon + label``. Selected and matched
rows are painted as plain text under one highlight style; other rows colour
the branch glyphs, indicators, keys and values separately.
"""

from __future__ import annotations

from ..ansi import clip_to_width, compute_display_width
from ..tree_model.labels import build_tree_prefix, clip_segments, expand_indicator, label_segments, type_icon
from ..tree_model.types import Node
from ..ui_theme import RESET, ColorScheme


def label_budget(prefix: str, cols: int) -> int:
    """Columns available to the label after prefix, indicator and margin."""
    return max(0, cols - (compute_display_width(prefix) + 4) - 5)


def row_plain_text(node: Node, cols: int, ascii_glyphs: bool = False, match_count: int = 0) -> str:
    prefix = build_tree_prefix(node, ascii_glyphs)
    budget = label_budget(prefix, cols)
    label = "".join(text for text, _role in label_segments(node, budget, match_count, ascii_glyphs))
    head = prefix + expand_indicator(node, ascii_glyphs) + type_icon(node, ascii_glyphs)
    return clip_to_width(head + label, cols)


def compose_row(
    node: Node,
    cols: int,
    scheme: ColorScheme,
    *,
    selected: bool = False,
    matched: bool = False,
    ascii_glyphs: bool = False,
    match_count: int = 0,
) -> str:
    """Return the styled row text for ``node`` clipped to ``cols`` columns."""
    if selected or matched:
        if selected and matched:
            style = scheme.selection_match
        elif selected:
            style = scheme.selection
        else:
            style = scheme.search_match
        plain = row_plain_text(node, cols, ascii_glyphs, match_count)
        return f"{style}{plain}{RESET}"

    prefix = build_tree_prefix(node, ascii_glyphs)
    indicator = expand_indicator(node, ascii_glyphs)
    icon = type_icon(node, ascii_glyphs)
    budget = label_budget(prefix, cols)

    out: list[str] = []
    used = 0
    for text, style in ((prefix, scheme.tree_structure), (indicator + icon, scheme.expand_indicator)):
        if not text:
            continue
        clipped = clip_to_width(text, cols - used)
        if not clipped:
            break
        out.append(f"{style}{clipped}{RESET}" if style else clipped)
        used += compute_display_width(clipped)

    segments = clip_segments(label_segments(node, budget, match_count, ascii_glyphs), max(0, cols - used))
    for text, role in segments:
        style = scheme.role_style(role)
        out.append(f"{style}{text}{RESET}" if style else text)
    return "".join(out)
