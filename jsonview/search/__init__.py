"""Search package exports."""

from __future__ import annotations

from .matching import EMPTY_SEARCH, SearchState, advance, build_matches, matches_in_root, new_search

__all__ = [
    "EMPTY_SEARCH",
    "SearchState",
    "advance",
    "build_matches",
    "matches_in_root",
    "new_search",
]
