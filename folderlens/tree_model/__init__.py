"""Tree filtering, copy-on-write mutation, and row formatting.

All functions take and return immutable ``FolderNode`` roots; none of them
touch the filesystem.
"""

from __future__ import annotations

from .filtering import filter_tree, is_hidden_name, is_ignored, is_visible
from .mutation import (
    add_tag,
    collapse_all,
    expand_all,
    find_node,
    remove_tag,
    toggle_expansion,
    update_node,
)
from .rendering import (
    format_file_size,
    format_tree_row,
    highlight_substring,
    render_search_results,
    render_tree_lines,
)

__all__ = [
    "filter_tree",
    "is_hidden_name",
    "is_ignored",
    "is_visible",
    "find_node",
    "update_node",
    "toggle_expansion",
    "expand_all",
    "collapse_all",
    "add_tag",
    "remove_tag",
    "format_file_size",
    "format_tree_row",
    "highlight_substring",
    "render_search_results",
    "render_tree_lines",
]
