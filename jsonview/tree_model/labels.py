"""Row text for tree nodes: branch prefixes, icons and width-bounded labels.

Labels are produced as ``(text, role)`` segments so the renderer can colour
keys and values separately; ``format_label`` joins them for plain use.
"""

from __future__ import annotations

from ..ansi import ELLIPSIS, clip_to_width, compute_display_width, truncate_with_ellipsis
from ..document.values import JsonKind, kind_of, number_text
from .types import Node

ROLE_NORMAL = "normal"
ROLE_KEY = "key"
ROLE_STRING = "string"
ROLE_NUMBER = "number"
ROLE_BOOLEAN = "boolean"
ROLE_NULL = "null"

_VALUE_ROLES = {
    JsonKind.STRING: ROLE_STRING,
    JsonKind.NUMBER: ROLE_NUMBER,
    JsonKind.BOOL: ROLE_BOOLEAN,
    JsonKind.NULL: ROLE_NULL,
}

_UNICODE_GLYPHS = {
    "continue": "│   ",
    "blank": "    ",
    "branch": "├── ",
    "last": "└── ",
    "expanded": "▼ ",
    "collapsed": "▶ ",
}
_ASCII_GLYPHS = {
    "continue": "|   ",
    "blank": "    ",
    "branch": "|-- ",
    "last": "`-- ",
    "expanded": "v ",
    "collapsed": "> ",
}

_FILE_SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")

Segment = tuple[str, str]


def _glyphs(ascii_glyphs: bool) -> dict[str, str]:
    return _ASCII_GLYPHS if ascii_glyphs else _UNICODE_GLYPHS


def build_tree_prefix(node: Node, ascii_glyphs: bool = False) -> str:
    """Branch-drawing prefix for ``node``.

    Each ancestor below the document root contributes a continuation bar when
    it has later siblings, blank space otherwise; the node itself ends with a
    branch or last-branch glyph. Document roots have no prefix.
    """
    if node.parent is None:
        return ""
    glyphs = _glyphs(ascii_glyphs)
    parts: list[str] = []
    current = node.parent
    while current.parent is not None:
        parts.append(glyphs["blank"] if current.is_last_sibling else glyphs["continue"])
        current = current.parent
    parts.reverse()
    parts.append(glyphs["last"] if node.is_last_sibling else glyphs["branch"])
    return "".join(parts)


def expand_indicator(node: Node, ascii_glyphs: bool = False) -> str:
    """Open/closed marker for expandable rows, padding or nothing for leaves."""
    if node.has_children:
        glyphs = _glyphs(ascii_glyphs)
        return glyphs["expanded"] if node.expanded else glyphs["collapsed"]
    if type_icon(node, ascii_glyphs):
        return ""
    return "  "


def type_icon(node: Node, ascii_glyphs: bool = False) -> str:
    """Leaf type icon; roots, non-empty containers and ASCII mode get none."""
    if node.is_root or ascii_glyphs:
        return ""
    value = node.value
    kind = kind_of(value)
    if kind is JsonKind.STRING:
        return "℀ "
    if kind is JsonKind.BOOL:
        return "☒ " if value else "☐ "
    if kind is JsonKind.NUMBER:
        return "⅑ "
    if kind is JsonKind.NULL:
        return "⊘ "
    if kind is JsonKind.OBJECT and not value:
        return "⁞ "
    return ""


def toggle_hit_width(node: Node, ascii_glyphs: bool = False) -> int:
    """Columns left of the label where a click toggles expansion."""
    return compute_display_width(build_tree_prefix(node, ascii_glyphs)) + 2


def format_file_size(size: int) -> str:
    """Human-readable byte count: exact bytes, one decimal below 10 units."""
    amount = float(size)
    unit_idx = 0
    while amount >= 1024.0 and unit_idx < len(_FILE_SIZE_UNITS) - 1:
        amount /= 1024.0
        unit_idx += 1
    unit = _FILE_SIZE_UNITS[unit_idx]
    if unit_idx == 0:
        return f"{int(amount)} {unit}"
    if amount < 10.0:
        return f"{amount:.1f} {unit}"
    return f"{int(amount + 0.5)} {unit}"


def shorten_path(path: str, max_width: int) -> str:
    """Fit an origin path into ``max_width`` columns.

    The file name is kept whole where possible; the middle of the directory
    part is replaced by ``...``.
    """
    if compute_display_width(path) <= max_width:
        return path
    slash = path.rfind("/")
    if slash < 0:
        return truncate_with_ellipsis(path, max_width)
    filename = path[slash + 1 :]
    directory = path[:slash]
    if compute_display_width(filename) > max_width - 4:
        return ".../" + filename[: max(0, max_width - 7)] + ELLIPSIS
    remaining = max_width - compute_display_width(filename) - 1
    directory_width = compute_display_width(directory)
    if directory_width <= remaining:
        return path
    prefix_len = max(1, remaining // 3)
    suffix_len = max(1, remaining - prefix_len - 3)
    if prefix_len + suffix_len + 3 >= directory_width:
        return path
    return f"{directory[:prefix_len]}...{directory[-suffix_len:]}/{filename}"


_CONTROL_ESCAPES = {"\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _is_control(ch: str) -> bool:
    code = ord(ch)
    return code < 0x20 or 0x7F <= code < 0xA0


def _escape_control(ch: str) -> str:
    return _CONTROL_ESCAPES.get(ch) or f"\\u{ord(ch):04x}"


def escape_string(text: str) -> str:
    """Escape backslash, quote and control characters for one-line display."""
    out: list[str] = []
    for ch in text:
        if ch == "\\":
            out.append("\\\\")
        elif ch == '"':
            out.append('\\"')
        elif _is_control(ch):
            out.append(_escape_control(ch))
        else:
            out.append(ch)
    return "".join(out)


def escape_key(text: str) -> str:
    """Escape only the control characters (C0, DEL and C1) of an object key.

    Keys are shown unquoted, so backslashes and quotes stay as they are.
    """
    if not any(_is_control(ch) for ch in text):
        return text
    return "".join(_escape_control(ch) if _is_control(ch) else ch for ch in text)


def scalar_text(value: object) -> str:
    """Display text of a scalar value (strings quoted and escaped)."""
    kind = kind_of(value)
    if kind is JsonKind.STRING:
        return f'"{escape_string(value)}"'  # type: ignore[arg-type]
    if kind is JsonKind.BOOL:
        return "true" if value else "false"
    if kind is JsonKind.NUMBER:
        return number_text(value)  # type: ignore[arg-type]
    if kind is JsonKind.NULL:
        return "null"
    return "{...}" if kind is JsonKind.OBJECT else "[...]"


def value_role(value: object) -> str:
    return _VALUE_ROLES.get(kind_of(value), ROLE_NORMAL)


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def container_summary(value: object) -> str:
    """``dictionary, N keys`` / ``list, N items`` for containers."""
    kind = kind_of(value)
    if kind is JsonKind.OBJECT:
        return f"dictionary, {_plural(len(value), 'key', 'keys')}"  # type: ignore[arg-type]
    if kind is JsonKind.ARRAY:
        return f"list, {_plural(len(value), 'item', 'items')}"  # type: ignore[arg-type]
    return kind.value


def _root_summary(node: Node, match_count: int, ascii_glyphs: bool) -> str:
    kind = kind_of(node.value)
    icons = {
        JsonKind.OBJECT: "📦 ",
        JsonKind.ARRAY: "🗂️ ",
        JsonKind.STRING: "℀ ",
        JsonKind.NUMBER: "⅑ ",
        JsonKind.BOOL: "☒ ",
        JsonKind.NULL: "⊘ ",
    }
    icon = "" if ascii_glyphs else icons[kind]
    summary = f"{icon}{container_summary(node.value)}"
    if node.byte_size is not None:
        summary += f", {format_file_size(node.byte_size)}"
    if match_count > 0:
        marker = "" if ascii_glyphs else "🔍 "
        summary += f", {marker}{_plural(match_count, 'match', 'matches')}"
    return summary


def _array_preview(value: list, budget: int) -> list[Segment]:
    segments: list[Segment] = [(": ", ROLE_NORMAL)]
    printed = 2
    first = True
    for item in value:
        token = scalar_text(item)
        sep = 0 if first else 2
        token_width = compute_display_width(token)
        if printed + sep + token_width > budget - len(ELLIPSIS):
            if printed < budget:
                segments.append((ELLIPSIS, ROLE_NORMAL))
            break
        if not first:
            segments.append((", ", ROLE_NORMAL))
            printed += 2
        segments.append((token, value_role(item)))
        printed += token_width
        first = False
    return segments


def label_segments(
    node: Node,
    max_width: int = 80,
    match_count: int = 0,
    ascii_glyphs: bool = False,
) -> list[Segment]:
    """Label for ``node`` as coloured segments, bounded by ``max_width``.

    Roots show the shortened origin name with kind, size and match count.
    Containers show their summary; a collapsed non-empty array adds an inline
    preview of its leading elements. Scalars show ``key: value``.
    """
    value = node.value
    kind = kind_of(value)
    if node.is_root:
        summary = _root_summary(node, match_count, ascii_glyphs)
        short_key = shorten_path(escape_key(node.key), max_width - compute_display_width(summary) - 4)
        return [(f"{short_key} ({summary})", ROLE_NORMAL)]
    key = escape_key(node.key)
    if kind.is_container:
        base = f"{key} ({container_summary(value)})"
        segments: list[Segment] = [(base, ROLE_NORMAL)]
        if kind is JsonKind.ARRAY and value and not node.expanded:
            budget = max(0, max_width - compute_display_width(base))
            segments.extend(_array_preview(value, budget))  # type: ignore[arg-type]
        return segments
    return [(key, ROLE_KEY), (": ", ROLE_NORMAL), (scalar_text(value), value_role(value))]


def format_label(
    node: Node,
    max_width: int = 80,
    match_count: int = 0,
    ascii_glyphs: bool = False,
) -> str:
    """Plain-text label for ``node``; see ``label_segments``."""
    return "".join(text for text, _role in label_segments(node, max_width, match_count, ascii_glyphs))


def clip_segments(segments: list[Segment], max_cols: int) -> list[Segment]:
    """Trim segments so their combined width fits ``max_cols`` columns."""
    out: list[Segment] = []
    remaining = max_cols
    for text, role in segments:
        if remaining <= 0:
            break
        width = compute_display_width(text)
        if width <= remaining:
            out.append((text, role))
            remaining -= width
            continue
        clipped = clip_to_width(text, remaining)
        if clipped:
            out.append((clipped, role))
        break
    return out
