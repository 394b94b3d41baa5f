"""Tests for tree construction and the expand/collapse visibility model."""

from __future__ import annotations

import unittest

from jsonview.document import Document
from jsonview.tree_model import (
    build_forest,
    build_tree,
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


def _keys(nodes) -> list[str]:
    return [node.key for node in nodes]


def _sample():
    return build_tree({"a": {"b": {"c": 1}}, "d": [1, {"e": None}]}, "sample.json", is_root=True)


class BuildTreeTests(unittest.TestCase):
    def test_children_mirror_value_in_source_order(self) -> None:
        root = build_tree({"z": 1, "a": [True, "x"]}, "doc.json", is_root=True, byte_size=12)
        self.assertTrue(root.is_root)
        self.assertTrue(root.expanded)
        self.assertEqual(root.byte_size, 12)
        self.assertEqual(_keys(root.children), ["z", "a"])
        self.assertEqual(_keys(root.children[1].children), ["[0]", "[1]"])
        self.assertFalse(root.children[1].expanded)
        self.assertIs(root.children[1].children[0].parent, root.children[1])

    def test_last_sibling_flags(self) -> None:
        root = build_tree([1, 2, 3], "doc.json", is_root=True)
        self.assertEqual([child.is_last_sibling for child in root.children], [False, False, True])

    def test_scalar_root_has_no_children(self) -> None:
        root = build_tree("text", "doc.json", is_root=True)
        self.assertEqual(root.children, [])
        self.assertFalse(root.has_children)

    def test_deep_nesting_builds_without_recursion(self) -> None:
        value: object = 0
        for _ in range(5000):
            value = [value]
        root = build_tree(value, "deep.json", is_root=True)
        expand_all(root)
        self.assertEqual(len(collect_visible(root, [])), 5001)

    def test_forest_marks_last_root(self) -> None:
        roots = build_forest(
            [Document("one.json", {"a": 1}, 8), Document("two.json", [1], 3)]
        )
        self.assertEqual(_keys(roots), ["one.json", "two.json"])
        self.assertEqual([root.is_last_sibling for root in roots], [False, True])
        self.assertEqual(roots[1].byte_size, 3)


class VisibilityTests(unittest.TestCase):
    def test_collect_visible_only_descends_into_expanded_nodes(self) -> None:
        root = _sample()
        self.assertEqual(_keys(collect_visible(root, [])), ["sample.json", "a", "d"])
        root.children[0].expanded = True
        self.assertEqual(_keys(collect_visible(root, [])), ["sample.json", "a", "b", "d"])

    def test_node_visible_iff_all_ancestors_expanded(self) -> None:
        root = _sample()
        expand_all(root)
        root.children[0].children[0].expanded = False
        root.children[1].expanded = False
        visible_ids = {id(node) for node in collect_visible(root, [])}
        for node in iter_preorder(root):
            ancestor = node.parent
            all_open = True
            while ancestor is not None:
                all_open = all_open and ancestor.expanded
                ancestor = ancestor.parent
            self.assertEqual(id(node) in visible_ids, all_open, node.key)

    def test_collapse_all_can_keep_root_open(self) -> None:
        root = _sample()
        expand_all(root)
        collapse_all(root, keep_root_expanded=True)
        self.assertTrue(root.expanded)
        self.assertEqual(_keys(collect_visible(root, [])), ["sample.json", "a", "d"])
        collapse_all(root)
        self.assertEqual(_keys(collect_visible(root, [])), ["sample.json"])

    def test_expand_to_level_zero_leaves_only_root(self) -> None:
        root = _sample()
        expand_all(root)
        expand_to_level(root, 0)
        self.assertEqual(_keys(collect_visible(root, [])), ["sample.json"])

    def test_expand_to_level_counts_root_children_as_depth_one(self) -> None:
        root = _sample()
        expand_to_level(root, 1)
        self.assertEqual(_keys(collect_visible(root, [])), ["sample.json", "a", "d"])
        expand_to_level(root, 2)
        self.assertEqual(_keys(collect_visible(root, [])), ["sample.json", "a", "b", "d", "[0]", "[1]"])
        self.assertFalse(root.children[0].children[0].expanded)

    def test_expand_path_opens_ancestors_only(self) -> None:
        root = _sample()
        collapse_all(root)
        target = root.children[1].children[1].children[0]
        expand_path(target)
        self.assertTrue(root.expanded)
        self.assertTrue(root.children[1].expanded)
        self.assertTrue(root.children[1].children[1].expanded)
        self.assertIn(target, collect_visible(root, []))

    def test_depth_root_and_index_helpers(self) -> None:
        root = _sample()
        leaf = root.children[0].children[0].children[0]
        self.assertEqual(node_depth(root), 0)
        self.assertEqual(node_depth(leaf), 3)
        self.assertIs(root_of(leaf), root)
        visible = collect_visible_forest([root])
        self.assertEqual(index_of(visible, root.children[1]), 2)
        self.assertIsNone(index_of(visible, leaf))


if __name__ == "__main__":
    unittest.main()
