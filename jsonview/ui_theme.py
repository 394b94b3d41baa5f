"""Colour scheme definitions and selection helpers.

Schemes are ANSI SGR palettes for tree rows, highlights and the status bar.
The ``none`` scheme emits no colour codes and falls back to reverse/bold
attributes for selection and matches.
"""

from __future__ import annotations

from dataclasses import dataclass

BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)

RESET = "\033[0m"
REVERSE = "\033[7m"
BOLD = "\033[1m"


def _fg(color: int) -> str:
    return f"\033[{30 + color}m"


def _pair(fg: int, bg: int) -> str:
    return f"\033[{30 + fg};{40 + bg}m"


@dataclass(frozen=True)
class ColorScheme:
    """Semantic ANSI palette used by the row and status renderers."""

    name: str
    description: str
    normal: str
    selection: str
    search_match: str
    selection_match: str
    tree_structure: str
    expand_indicator: str
    string_value: str
    number_value: str
    boolean_value: str
    null_value: str
    key_name: str
    colors: bool = True

    @property
    def status_bar(self) -> str:
        return self.selection

    def role_style(self, role: str) -> str:
        """SGR prefix for a label segment role."""
        return {
            "key": self.key_name,
            "string": self.string_value,
            "number": self.number_value,
            "boolean": self.boolean_value,
            "null": self.null_value,
        }.get(role, self.normal)


DEFAULT_SCHEME = ColorScheme(
    name="default",
    description="Balanced palette with distinct types",
    normal=_fg(WHITE),
    selection=REVERSE + _pair(BLACK, CYAN),
    search_match=BOLD + _fg(YELLOW),
    selection_match=REVERSE + BOLD + _pair(BLACK, GREEN),
    tree_structure=_fg(BLUE),
    expand_indicator=_fg(MAGENTA),
    string_value=_fg(GREEN),
    number_value=_fg(GREEN),
    boolean_value=_fg(YELLOW),
    null_value=_fg(RED),
    key_name=_fg(CYAN),
)

COLORBLIND_SCHEME = ColorScheme(
    name="colorblind",
    description="High-contrast, colorblind-friendly palette",
    normal=_fg(WHITE),
    selection=REVERSE + _pair(BLACK, YELLOW),
    search_match=BOLD + _fg(BLACK),
    selection_match=REVERSE + BOLD + _pair(BLACK, GREEN),
    tree_structure=_fg(WHITE),
    expand_indicator=_fg(WHITE),
    string_value=_fg(BLUE),
    number_value=_fg(MAGENTA),
    boolean_value=_fg(CYAN),
    null_value=_fg(RED),
    key_name=_fg(WHITE),
)

NONE_SCHEME = ColorScheme(
    name="none",
    description="Colors disabled; using terminal defaults",
    normal="",
    selection=REVERSE,
    search_match=BOLD,
    selection_match=REVERSE + BOLD,
    tree_structure="",
    expand_indicator="",
    string_value="",
    number_value="",
    boolean_value="",
    null_value="",
    key_name="",
    colors=False,
)

_SCHEMES: dict[str, ColorScheme] = {
    DEFAULT_SCHEME.name: DEFAULT_SCHEME,
    COLORBLIND_SCHEME.name: COLORBLIND_SCHEME,
    NONE_SCHEME.name: NONE_SCHEME,
}
_SCHEME_ORDER: tuple[str, ...] = (DEFAULT_SCHEME.name, COLORBLIND_SCHEME.name, NONE_SCHEME.name)
_ALIASES = {"mono": NONE_SCHEME.name, "monochrome": NONE_SCHEME.name}


def available_scheme_names() -> tuple[str, ...]:
    return _SCHEME_ORDER


def normalize_scheme_name(name: str | None) -> str:
    """Return a valid scheme name, falling back to default."""
    if not name:
        return DEFAULT_SCHEME.name
    candidate = str(name).strip().lower()
    candidate = _ALIASES.get(candidate, candidate)
    if candidate in _SCHEMES:
        return candidate
    return DEFAULT_SCHEME.name


def resolve_scheme(name: str | None) -> ColorScheme:
    """Return concrete scheme for a requested name or alias."""
    return _SCHEMES[normalize_scheme_name(name)]


def next_scheme(current: ColorScheme) -> ColorScheme:
    """Scheme after ``current`` in cycle order (default, colorblind, none)."""
    idx = _SCHEME_ORDER.index(current.name)
    return _SCHEMES[_SCHEME_ORDER[(idx + 1) % len(_SCHEME_ORDER)]]


def scheme_status_message(scheme: ColorScheme) -> str:
    if not scheme.colors:
        return "Color scheme: none - Colors disabled"
    return f"Color scheme: {scheme.name} - {scheme.description}"


__all__ = [
    "ColorScheme",
    "DEFAULT_SCHEME",
    "COLORBLIND_SCHEME",
    "NONE_SCHEME",
    "RESET",
    "REVERSE",
    "BOLD",
    "available_scheme_names",
    "normalize_scheme_name",
    "resolve_scheme",
    "next_scheme",
    "scheme_status_message",
]
