"""Tests for the ignore-rule/visibility tree projection.

Covers rule order, folder retention, purity and idempotence.
"""

from __future__ import annotations

import unittest

from folderlens.file_tree_model import DisplaySettings, FileNode, FolderNode, IgnoreRule
from folderlens.tree_model import filter_tree


def _sample_tree() -> FolderNode:
    app = FileNode(id="app-tsx", name="App.tsx", path="/p/src/App.tsx", size=2048)
    src = FolderNode(id="src", name="src", path="/p/src", children=(app,), is_expanded=True)
    react = FileNode(id="react", name="react.js", path="/p/node_modules/react.js")
    node_modules = FolderNode(id="node-modules", name="node_modules", path="/p/node_modules", children=(react,))
    dotenv = FileNode(id="env", name=".env", path="/p/.env")
    dot_folder = FolderNode(id="vscode", name=".vscode", path="/p/.vscode", children=())
    readme = FileNode(id="readme", name="README.md", path="/p/README.md")
    return FolderNode(
        id="root",
        name="p",
        path="/p",
        children=(src, node_modules, dotenv, dot_folder, readme),
        is_expanded=True,
    )


def _ids(node: FolderNode) -> list[str]:
    out = [node.id]
    for child in node.children or ():
        if isinstance(child, FolderNode):
            out.extend(_ids(child))
        else:
            out.append(child.id)
    return out


NODE_MODULES_RULE = IgnoreRule("node_modules", "node_modules", True)


class FilterTreeTests(unittest.TestCase):
    def test_enabled_ignore_rule_drops_matching_folder_and_subtree(self) -> None:
        tree = _sample_tree()

        filtered = filter_tree(tree, [NODE_MODULES_RULE], DisplaySettings())

        ids = _ids(filtered)
        self.assertNotIn("node-modules", ids)
        self.assertNotIn("react", ids)
        self.assertIn("src", ids)
        self.assertIn("app-tsx", ids)

    def test_disabled_rule_is_ignored(self) -> None:
        tree = _sample_tree()

        filtered = filter_tree(tree, [IgnoreRule("node_modules", "node_modules", False)], DisplaySettings())

        self.assertIn("node-modules", _ids(filtered))

    def test_rule_pattern_is_case_sensitive_substring_of_name(self) -> None:
        tree = _sample_tree()

        filtered = filter_tree(tree, [IgnoreRule("readme", "readme", True)], DisplaySettings())
        self.assertIn("readme", _ids(filtered))

        filtered = filter_tree(tree, [IgnoreRule("md", ".md", True)], DisplaySettings())
        self.assertNotIn("readme", _ids(filtered))

    def test_rule_matches_name_not_path(self) -> None:
        tree = _sample_tree()

        filtered = filter_tree(tree, [IgnoreRule("p", "/p/", True)], DisplaySettings())

        self.assertEqual(_ids(filtered), _ids(filter_tree(tree, [], DisplaySettings())))

    def test_hidden_entries_follow_show_hidden_setting(self) -> None:
        tree = _sample_tree()

        hidden_off = _ids(filter_tree(tree, [], DisplaySettings(show_hidden_files=False)))
        hidden_on = _ids(filter_tree(tree, [], DisplaySettings(show_hidden_files=True)))

        self.assertNotIn("env", hidden_off)
        self.assertNotIn("vscode", hidden_off)
        self.assertIn("env", hidden_on)
        self.assertIn("vscode", hidden_on)

    def test_show_files_false_keeps_folders_even_when_emptied(self) -> None:
        tree = _sample_tree()

        filtered = filter_tree(tree, [], DisplaySettings(show_files=False))

        ids = _ids(filtered)
        self.assertIn("src", ids)
        self.assertNotIn("app-tsx", ids)
        self.assertNotIn("readme", ids)
        src = next(child for child in filtered.children if child.id == "src")
        self.assertEqual(src.children, ())

    def test_root_is_never_filtered(self) -> None:
        root = FolderNode(id="root", name="node_modules", path="/node_modules", children=())

        filtered = filter_tree(root, [NODE_MODULES_RULE], DisplaySettings())

        self.assertEqual(filtered.id, "root")

    def test_unloaded_children_stay_unloaded(self) -> None:
        pending = FolderNode(id="pending", name="pending", path="/p/pending", children=None)
        root = FolderNode(id="root", name="p", path="/p", children=(pending,))

        filtered = filter_tree(root, [], DisplaySettings())

        self.assertIsNone(filtered.children[0].children)

    def test_filter_does_not_mutate_input_and_preserves_ids_and_kinds(self) -> None:
        tree = _sample_tree()
        snapshot = _sample_tree()

        filtered = filter_tree(tree, [NODE_MODULES_RULE], DisplaySettings(show_hidden_files=False))

        self.assertEqual(_ids(tree), _ids(snapshot))
        original_ids = set(_ids(tree))
        self.assertTrue(set(_ids(filtered)) <= original_ids)
        self.assertIsInstance(filtered.children[0], FolderNode)

    def test_filter_is_idempotent(self) -> None:
        tree = _sample_tree()
        rules = [NODE_MODULES_RULE, IgnoreRule("md", ".md", True)]
        settings = DisplaySettings(show_files=True, show_hidden_files=False)

        once = filter_tree(tree, rules, settings)
        twice = filter_tree(once, rules, settings)

        self.assertEqual(once, twice)

    def test_unchanged_subtrees_are_shared(self) -> None:
        tree = _sample_tree()

        filtered = filter_tree(tree, [NODE_MODULES_RULE], DisplaySettings())

        self.assertIs(filtered.children[0], tree.children[0])


if __name__ == "__main__":
    unittest.main()
