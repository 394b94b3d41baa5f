"""Key/value substring search over the whole forest.

Matches are collected in pre-order regardless of expansion, so results are
stable across expand/collapse. Navigation wraps around the match list.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..document.values import canonical_text
from ..tree_model.types import Node
from ..tree_model.visibility import iter_preorder


@dataclass(frozen=True)
class SearchState:
    """One submitted search; replaced, never mutated, on new submissions."""

    term: str = ""
    search_keys: bool = True
    search_values: bool = False
    matches: tuple[Node, ...] = field(default_factory=tuple)
    current_index: int = 0

    @property
    def active(self) -> bool:
        return bool(self.term)

    @property
    def current(self) -> Node | None:
        if not self.matches:
            return None
        return self.matches[self.current_index % len(self.matches)]


EMPTY_SEARCH = SearchState()


def _as_roots(roots: Node | Iterable[Node]) -> list[Node]:
    if isinstance(roots, Node):
        return [roots]
    return list(roots)


def build_matches(
    roots: Node | Iterable[Node],
    term: str,
    search_keys: bool,
    search_values: bool,
) -> list[Node]:
    """Return nodes whose key or canonical value contains ``term``.

    Comparison is case-insensitive. Roots are searched by key too (their key
    is the origin name). An empty term matches nothing.
    """
    needle = term.lower()
    if not needle:
        return []
    matches: list[Node] = []
    for root in _as_roots(roots):
        for node in iter_preorder(root):
            if search_keys and needle in node.key.lower():
                matches.append(node)
            elif search_values and needle in canonical_text(node.value).lower():
                matches.append(node)
    return matches


def advance(
    matches: list[Node] | tuple[Node, ...],
    focused_node: Node | None,
    direction: int,
    current_index: int,
) -> int:
    """Index of the next (``+1``) or previous (``-1``) match with wraparound.

    Steps from the focused node when it is itself a match, otherwise from the
    stored index. Returns ``current_index`` unchanged for an empty list.
    """
    count = len(matches)
    if count == 0:
        return current_index
    idx = current_index
    if focused_node is not None:
        for pos, candidate in enumerate(matches):
            if candidate is focused_node:
                idx = pos
                break
    return (idx + direction + count) % count


def new_search(
    roots: Node | Iterable[Node],
    term: str,
    search_keys: bool,
    search_values: bool,
) -> SearchState:
    lowered = term.lower()
    matches = build_matches(roots, lowered, search_keys, search_values)
    return SearchState(
        term=lowered,
        search_keys=search_keys,
        search_values=search_values,
        matches=tuple(matches),
        current_index=0,
    )


def matches_in_root(state: SearchState, root: Node) -> int:
    """Number of matches that belong to the document rooted at ``root``."""
    count = 0
    for node in state.matches:
        current = node
        while current.parent is not None:
            current = current.parent
        if current is root:
            count += 1
    return count
