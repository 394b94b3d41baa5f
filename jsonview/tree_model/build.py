"""Tree construction from parsed JSON values."""

from __future__ import annotations

from collections.abc import Iterable

from ..document.loader import Document
from .types import Node


def _mark_last_sibling(children: list[Node]) -> None:
    last = len(children) - 1
    for idx, child in enumerate(children):
        child.is_last_sibling = idx == last


def build_tree(
    value: object,
    key: str,
    parent: Node | None = None,
    is_root: bool = False,
    byte_size: int | None = None,
) -> Node:
    """Mirror ``value`` as a ``Node`` tree.

    Object children keep source key order, array children get ``[i]`` keys.
    Roots start expanded, every other node starts collapsed. Built with an
    explicit stack so nesting depth is bounded only by the parser.
    """
    node = Node(value=value, key=key, parent=parent, expanded=is_root, is_root=is_root, byte_size=byte_size)
    stack = [node]
    while stack:
        current = stack.pop()
        current_value = current.value
        if isinstance(current_value, dict):
            items = current_value.items()
        elif isinstance(current_value, list):
            items = ((f"[{idx}]", item) for idx, item in enumerate(current_value))
        else:
            continue
        current.children = [Node(value=child_value, key=str(child_key), parent=current) for child_key, child_value in items]
        _mark_last_sibling(current.children)
        stack.extend(current.children)
    return node


def build_forest(documents: Iterable[Document]) -> list[Node]:
    """Build one root node per document, in load order."""
    roots = [
        build_tree(document.value, document.name, None, is_root=True, byte_size=document.byte_size)
        for document in documents
    ]
    _mark_last_sibling(roots)
    return roots
