"""Tree node datatype shared by the model, search and render modules."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """One JSON value plus its UI state.

    ``children`` own the subtree; ``parent`` is a plain back-reference and is
    ``None`` for document roots. Nodes compare by identity.
    """

    value: object
    key: str
    parent: Node | None = field(default=None, repr=False)
    children: list[Node] = field(default_factory=list, repr=False)
    expanded: bool = False
    is_root: bool = False
    is_last_sibling: bool = False
    byte_size: int | None = None

    @property
    def has_children(self) -> bool:
        return bool(self.children)
