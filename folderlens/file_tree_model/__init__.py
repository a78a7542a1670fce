"""Domain model for folder trees.

This package contains non-UI tree primitives:
- file/folder node datatypes with nested children
- ignore rules, display settings, bookmarks and search results
- host directory listing and snapshot construction
"""

from __future__ import annotations

from .types import (
    DEFAULT_IGNORE_RULES,
    Bookmark,
    DisplaySettings,
    FileNode,
    FolderNode,
    IgnoreRule,
    SearchResult,
    TreeNode,
)
from .fs import DirectoryListing, ListDirectory, build_folder_tree, list_directory, read_git_branch

__all__ = [
    "FileNode",
    "FolderNode",
    "TreeNode",
    "IgnoreRule",
    "DisplaySettings",
    "Bookmark",
    "SearchResult",
    "DEFAULT_IGNORE_RULES",
    "DirectoryListing",
    "ListDirectory",
    "list_directory",
    "read_git_branch",
    "build_folder_tree",
]
