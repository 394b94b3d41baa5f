"""Terminal input decoding and key/mouse dispatch."""

from __future__ import annotations

from .reader import ResizeWakeup, read_key

__all__ = ["ResizeWakeup", "read_key"]
