"""Filtered tree projection driven by ignore rules and display settings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from ..file_tree_model.types import DisplaySettings, FileNode, FolderNode, IgnoreRule, TreeNode
from .traversal import rebuild_folders


def is_hidden_name(name: str) -> bool:
    """Return whether ``name`` is a dot-file/dot-folder."""
    return name.startswith(".")


def is_ignored(node: TreeNode, ignore_rules: Iterable[IgnoreRule]) -> bool:
    """Return whether any enabled rule's pattern occurs in ``node.name``."""
    return any(rule.matches(node.name) for rule in ignore_rules)


def is_visible(node: TreeNode, ignore_rules: Iterable[IgnoreRule], settings: DisplaySettings) -> bool:
    """Apply the per-node drop rules in order: ignore, hidden, files."""
    if is_ignored(node, ignore_rules):
        return False
    if not settings.show_hidden_files and is_hidden_name(node.name):
        return False
    if not settings.show_files and isinstance(node, FileNode):
        return False
    return True


def filter_tree(
    tree: FolderNode,
    ignore_rules: Iterable[IgnoreRule],
    settings: DisplaySettings,
) -> FolderNode:
    """Return the view of ``tree`` after ignore rules and visibility settings.

    The root is never dropped. Folders survive even when every child is
    filtered away, and a folder whose children were never loaded keeps
    ``children=None``. Inputs are not modified.
    """
    rules = tuple(ignore_rules)
    return rebuild_folders(tree, lambda node: is_visible(node, rules, settings), _with_children)


def _with_children(folder: FolderNode, children: tuple[TreeNode, ...] | None) -> FolderNode:
    """Return ``folder`` itself when ``children`` is the same tuple, else a copy."""
    if children is folder.children:
        return folder
    return replace(folder, children=children)


__all__ = [
    "is_hidden_name",
    "is_ignored",
    "is_visible",
    "filter_tree",
]
