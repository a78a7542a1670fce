"""Tests for bookmark snapshots and tag summaries."""

from __future__ import annotations

import unittest

from folderlens.file_tree_model import FileNode, FolderNode
from folderlens.registry import BookmarkRegistry, collect_tags, nodes_with_tag


class BookmarkRegistryTests(unittest.TestCase):
    def test_adding_same_node_twice_creates_distinct_entries(self) -> None:
        registry = BookmarkRegistry(clock=lambda: 1_700_000_000.0)
        node = FolderNode(id="/p/src", name="src", path="/p/src")

        first = registry.add(node)
        second = registry.add(node)

        self.assertEqual(len(registry), 2)
        self.assertNotEqual(first.id, second.id)
        self.assertEqual([b.id for b in registry.bookmarks], [first.id, second.id])
        self.assertTrue(first.id.startswith("bookmark-1700000000000-"))

    def test_bookmark_is_a_snapshot(self) -> None:
        registry = BookmarkRegistry()
        node = FileNode(id="/p/a.txt", name="a.txt", path="/p/a.txt")

        bookmark = registry.add(node)

        self.assertEqual((bookmark.name, bookmark.path), ("a.txt", "/p/a.txt"))
        self.assertFalse(hasattr(bookmark, "item"))

    def test_remove_by_id_and_unknown_id(self) -> None:
        registry = BookmarkRegistry()
        node = FileNode(id="/p/a.txt", name="a.txt", path="/p/a.txt")
        first = registry.add(node)
        second = registry.add(node)

        self.assertFalse(registry.remove("bookmark-unknown"))
        self.assertEqual(len(registry), 2)

        self.assertTrue(registry.remove(first.id))
        self.assertEqual(registry.bookmarks, (second,))
        self.assertIs(registry.get(second.id), second)
        self.assertIsNone(registry.get(first.id))


class TagSummaryTests(unittest.TestCase):
    def test_collect_tags_counts_in_first_seen_order(self) -> None:
        header = FileNode(id="h", name="Header.tsx", path="/p/Header.tsx", tags=("component", "ui"))
        app = FileNode(id="a", name="App.tsx", path="/p/App.tsx", tags=("component",))
        src = FolderNode(id="src", name="src", path="/p/src", children=(header, app), tags=("code",))
        root = FolderNode(id="root", name="p", path="/p", children=(src,), tags=("project",))

        self.assertEqual(collect_tags(root), {"project": 1, "code": 1, "component": 2, "ui": 1})
        self.assertEqual(list(collect_tags(root)), ["project", "code", "component", "ui"])
        self.assertEqual([node.id for node in nodes_with_tag(root, "component")], ["h", "a"])


if __name__ == "__main__":
    unittest.main()
