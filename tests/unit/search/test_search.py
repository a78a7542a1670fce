"""Tests for name search over the raw tree."""

from __future__ import annotations

import unittest

from folderlens.file_tree_model import FileNode, FolderNode
from folderlens.search import search_tree


def _sample_tree() -> FolderNode:
    app = FileNode(id="app-tsx", name="App.tsx", path="/p/src/App.tsx")
    header = FileNode(id="header-tsx", name="Header.tsx", path="/p/src/components/Header.tsx")
    components = FolderNode(id="components", name="components", path="/p/src/components", children=(header,))
    src = FolderNode(id="src", name="src", path="/p/src", children=(app, components))
    hidden = FileNode(id="env", name=".env.tsx", path="/p/.env.tsx")
    node_modules = FolderNode(
        id="node-modules",
        name="node_modules",
        path="/p/node_modules",
        children=(FileNode(id="lib", name="lib.tsx", path="/p/node_modules/lib.tsx"),),
    )
    return FolderNode(id="root", name="tsx-root", path="/p", children=(src, hidden, node_modules), is_expanded=True)


class SearchTreeTests(unittest.TestCase):
    def test_blank_query_yields_nothing(self) -> None:
        tree = _sample_tree()

        self.assertEqual(search_tree(tree, ""), [])
        self.assertEqual(search_tree(tree, "   "), [])

    def test_results_are_pre_order_and_case_insensitive(self) -> None:
        tree = _sample_tree()

        results = search_tree(tree, "TSX")

        self.assertEqual(
            [result.item.id for result in results],
            ["app-tsx", "header-tsx", "env", "lib"],
        )
        self.assertEqual(results[0].matched_labels, ("App.tsx",))

    def test_root_is_not_matched(self) -> None:
        tree = _sample_tree()

        results = search_tree(tree, "tsx-root")

        self.assertEqual(results, [])

    def test_folders_match_too(self) -> None:
        tree = _sample_tree()

        results = search_tree(tree, "comp")

        self.assertEqual([result.item.id for result in results], ["components"])

    def test_query_is_not_trimmed_for_matching(self) -> None:
        tree = _sample_tree()

        self.assertEqual(search_tree(tree, " app"), [])


if __name__ == "__main__":
    unittest.main()
