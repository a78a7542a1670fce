"""Tests for tree row formatting and size labels."""

from __future__ import annotations

import unittest

from folderlens.file_tree_model import FileNode, FolderNode, SearchResult
from folderlens.tree_model import (
    format_file_size,
    format_tree_row,
    highlight_substring,
    render_search_results,
    render_tree_lines,
)
from folderlens.ui_theme import DARK_THEME, PLAIN_THEME


class FileSizeTests(unittest.TestCase):
    def test_format_file_size(self) -> None:
        self.assertEqual(format_file_size(0), "0 B")
        self.assertEqual(format_file_size(512), "512 B")
        self.assertEqual(format_file_size(1024), "1 KB")
        self.assertEqual(format_file_size(1536), "1.5 KB")
        self.assertEqual(format_file_size(5 * 1024 * 1024), "5 MB")
        self.assertEqual(format_file_size(3 * 1024**4), "3072 GB")


class TreeRowTests(unittest.TestCase):
    def test_plain_rows_show_markers_sizes_tags_and_branch(self) -> None:
        folder = FolderNode(id="a", name="repo", path="/repo", is_expanded=True, git_branch="main", is_git_repo=True)
        file = FileNode(id="b", name="App.tsx", path="/repo/App.tsx", size=2048, tags=("component", "ui"))

        self.assertEqual(format_tree_row(folder, 0, theme=PLAIN_THEME), "▾ repo/ (main)")
        self.assertEqual(format_tree_row(file, 1, theme=PLAIN_THEME), "    App.tsx [2 KB] #component #ui")

    def test_render_tree_lines_stops_at_collapsed_folders(self) -> None:
        inner = FileNode(id="c", name="inner.py", path="/r/sub/inner.py")
        sub = FolderNode(id="sub", name="sub", path="/r/sub", children=(inner,), is_expanded=False)
        root = FolderNode(id="r", name="r", path="/r", children=(sub,), is_expanded=True)

        lines = render_tree_lines(root, theme=PLAIN_THEME)

        self.assertEqual(lines, ["▾ r/", "  ▸ sub/"])

    def test_search_query_is_highlighted_with_color_theme(self) -> None:
        file = FileNode(id="b", name="Header.tsx", path="/r/Header.tsx")

        row = format_tree_row(file, 0, search_query="head", theme=DARK_THEME)

        self.assertIn(f"{DARK_THEME.search_hit}Head{DARK_THEME.reset}", row)

    def test_highlight_spans_original_characters_when_folding_changes_length(self) -> None:
        hit, reset = DARK_THEME.search_hit, DARK_THEME.reset

        self.assertEqual(highlight_substring("Straße.txt", "e.", DARK_THEME), f"Straß{hit}e.{reset}txt")
        self.assertEqual(highlight_substring("Straße.txt", "SS", DARK_THEME), f"Stra{hit}ß{reset}e.txt")
        self.assertEqual(highlight_substring("Straße.txt", "zz", DARK_THEME), "Straße.txt")

    def test_render_search_results(self) -> None:
        folder = FolderNode(id="s", name="src", path="/r/src")
        file = FileNode(id="f", name="source.py", path="/r/source.py", size=10)
        results = [
            SearchResult(item=folder, matched_labels=("src",)),
            SearchResult(item=file, matched_labels=("source.py",)),
        ]

        rows = render_search_results(results, "src", theme=PLAIN_THEME)

        self.assertEqual(rows, ["src/  /r/src", "source.py [10 B]  /r/source.py"])


if __name__ == "__main__":
    unittest.main()
