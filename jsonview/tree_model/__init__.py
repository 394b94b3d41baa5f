"""Tree-model creation, visibility and row labels.

Defines ``Node`` and the expand/collapse operations that decide which nodes
are visible rows. Also formats branch prefixes and width-bounded labels.
"""

from __future__ import annotations

from .build import build_forest, build_tree
from .labels import (
    build_tree_prefix,
    clip_segments,
    container_summary,
    escape_key,
    escape_string,
    expand_indicator,
    format_file_size,
    format_label,
    label_segments,
    scalar_text,
    shorten_path,
    toggle_hit_width,
    type_icon,
)
from .types import Node
from .visibility import (
    collapse_all,
    collect_visible,
    collect_visible_forest,
    expand_all,
    expand_path,
    expand_to_level,
    index_of,
    iter_preorder,
    node_depth,
    root_of,
)

__all__ = [
    "Node",
    "build_tree",
    "build_forest",
    "iter_preorder",
    "collect_visible",
    "collect_visible_forest",
    "expand_all",
    "collapse_all",
    "expand_to_level",
    "expand_path",
    "node_depth",
    "root_of",
    "index_of",
    "build_tree_prefix",
    "clip_segments",
    "container_summary",
    "escape_key",
    "escape_string",
    "expand_indicator",
    "format_file_size",
    "format_label",
    "label_segments",
    "scalar_text",
    "shorten_path",
    "toggle_hit_width",
    "type_icon",
]
