from __future__ import annotations

import unittest

from jsonview.search import EMPTY_SEARCH, advance, build_matches, matches_in_root, new_search
from jsonview.tree_model import build_tree


def _forest():
    first = build_tree(
        {"Name": "Alice", "age": 30, "nested": {"name": "Bob", "flag": True}},
        "people.json",
        is_root=True,
    )
    second = build_tree([{"username": "carol"}, None], "more.json", is_root=True)
    return [first, second]


class BuildMatchesTests(unittest.TestCase):
    def test_key_search_is_case_insensitive_and_preorder(self) -> None:
        roots = _forest()
        matches = build_matches(roots, "NAME", search_keys=True, search_values=False)
        self.assertEqual([node.key for node in matches], ["Name", "name", "username"])

    def test_collapsed_nodes_are_still_searched(self) -> None:
        roots = _forest()
        self.assertFalse(roots[0].children[2].expanded)
        matches = build_matches(roots, "bob", search_keys=False, search_values=True)
        self.assertEqual([node.key for node in matches], ["name"])
        self.assertIs(matches[0].parent, roots[0].children[2])

    def test_value_search_uses_canonical_text(self) -> None:
        roots = _forest()
        self.assertEqual([n.key for n in build_matches(roots, "true", False, True)], ["flag"])
        self.assertEqual([n.key for n in build_matches(roots, "30", False, True)], ["age"])
        self.assertEqual([n.key for n in build_matches(roots, "null", False, True)], ["[1]"])
        self.assertEqual(
            [n.key for n in build_matches(roots, "dictionary", False, True)],
            ["people.json", "nested", "[0]"],
        )

    def test_node_matching_key_and_value_is_listed_once(self) -> None:
        root = build_tree({"alpha": "alpha"}, "doc.json", is_root=True)
        self.assertEqual(len(build_matches(root, "alp", True, True)), 1)

    def test_root_names_are_searchable(self) -> None:
        roots = _forest()
        matches = build_matches(roots, "more", True, False)
        self.assertEqual(matches, [roots[1]])

    def test_empty_term_matches_nothing(self) -> None:
        self.assertEqual(build_matches(_forest(), "", True, True), [])


class AdvanceTests(unittest.TestCase):
    def test_wraps_in_both_directions(self) -> None:
        matches = build_matches(_forest(), "name", True, False)
        self.assertEqual(advance(matches, None, 1, 2), 0)
        self.assertEqual(advance(matches, None, -1, 0), 2)

    def test_steps_from_focused_match(self) -> None:
        matches = build_matches(_forest(), "name", True, False)
        self.assertEqual(advance(matches, matches[1], 1, 0), 2)

    def test_unmatched_focus_uses_stored_index(self) -> None:
        roots = _forest()
        matches = build_matches(roots, "name", True, False)
        self.assertEqual(advance(matches, roots[0], 1, 1), 2)

    def test_empty_match_list_keeps_index(self) -> None:
        self.assertEqual(advance([], None, 1, 4), 4)

    def test_forward_then_back_returns_to_start(self) -> None:
        matches = build_matches(_forest(), "name", True, False)
        for start in range(len(matches)):
            forward = advance(matches, None, 1, start)
            self.assertEqual(advance(matches, None, -1, forward), start)


class SearchStateTests(unittest.TestCase):
    def test_new_search_lowercases_term_and_freezes_matches(self) -> None:
        roots = _forest()
        state = new_search(roots, "NaMe", True, False)
        self.assertEqual(state.term, "name")
        self.assertIsInstance(state.matches, tuple)
        self.assertTrue(state.active)
        self.assertIs(state.current, state.matches[0])

    def test_empty_search_is_inactive(self) -> None:
        self.assertFalse(EMPTY_SEARCH.active)
        self.assertIsNone(EMPTY_SEARCH.current)

    def test_matches_in_root_counts_per_document(self) -> None:
        roots = _forest()
        state = new_search(roots, "name", True, False)
        self.assertEqual(matches_in_root(state, roots[0]), 2)
        self.assertEqual(matches_in_root(state, roots[1]), 1)


if __name__ == "__main__":
    unittest.main()
