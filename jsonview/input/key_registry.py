"""Key-token dispatch table shared by the viewer's key handlers.

Tokens are the strings produced by ``read_key`` (``"j"``, ``"PAGE_DOWN"``,
``"CTRL_C"``...). A handler returns ``True`` to stop the viewer, ``False``
when it consumed the key and ``None`` is reserved for unbound keys.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyComboBinding:
    """One action reachable through any of several key tokens."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Maps key tokens to handlers, optionally normalizing tokens first."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        """Start empty; ``normalize`` is applied to tokens on register and dispatch."""
        self._normalize = normalize if normalize is not None else self._identity
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    @staticmethod
    def _identity(key: str) -> str:
        """Exact-match normalizer used when none is given."""
        return key

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Bind every token of ``binding``; a later binding wins over an earlier one."""
        for combo in binding.combos:
            self._handlers[self._normalize(combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Bind several bindings in order and return ``self`` for chaining."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool | None:
        """Run the handler bound to ``key``; ``None`` when nothing is bound."""
        handler = self._handlers.get(self._normalize(key))
        if handler is None:
            return None
        return handler()
