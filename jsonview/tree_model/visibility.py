"""Expand/collapse operations and visible-row flattening.

All functions here are total over trees produced by ``build_tree`` and run in
time proportional to the number of nodes they touch.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .types import Node


def iter_preorder(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all descendants in pre-order, ignoring expansion."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def collect_visible(root: Node, out: list[Node]) -> list[Node]:
    """Append ``root`` and every node reachable through expanded ancestors.

    Pre-order, depth first; this order defines the terminal rows.
    """
    stack = [root]
    while stack:
        current = stack.pop()
        out.append(current)
        if current.expanded:
            stack.extend(reversed(current.children))
    return out


def collect_visible_forest(roots: Iterable[Node]) -> list[Node]:
    visible: list[Node] = []
    for root in roots:
        collect_visible(root, visible)
    return visible


def expand_all(node: Node) -> None:
    for current in iter_preorder(node):
        current.expanded = True


def collapse_all(node: Node, keep_root_expanded: bool = False) -> None:
    """Collapse ``node`` and its subtree.

    With ``keep_root_expanded`` a document root stays open so its top-level
    entries remain visible.
    """
    for current in iter_preorder(node):
        if current is node and current.is_root and keep_root_expanded:
            continue
        current.expanded = False


def expand_to_level(node: Node, target_level: int, current_level: int = 0) -> None:
    """Expand nodes shallower than ``target_level`` and collapse the rest.

    Level 0 collapses the whole subtree, roots included. For higher levels
    roots are always expanded and their direct children sit at depth 1.
    """
    if target_level <= 0:
        collapse_all(node)
        return
    if node.is_root:
        node.expanded = True
        for child in node.children:
            expand_to_level(child, target_level, 1)
        return
    if current_level < target_level:
        node.expanded = True
        for child in node.children:
            expand_to_level(child, target_level, current_level + 1)
    else:
        collapse_all(node)


def expand_path(node: Node) -> None:
    """Expand every ancestor of ``node`` (not ``node`` itself)."""
    current = node.parent
    while current is not None:
        current.expanded = True
        current = current.parent


def node_depth(node: Node) -> int:
    """Depth below the document root (root children are at depth 1)."""
    depth = 0
    current = node
    while current.parent is not None:
        depth += 1
        current = current.parent
    return depth


def root_of(node: Node) -> Node:
    current = node
    while current.parent is not None:
        current = current.parent
    return current


def index_of(visible: list[Node], node: Node) -> int | None:
    """Identity lookup of ``node`` in a flattened visible list."""
    for idx, candidate in enumerate(visible):
        if candidate is node:
            return idx
    return None
