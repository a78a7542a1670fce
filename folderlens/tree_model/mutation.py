"""Copy-on-write transforms over the raw tree.

Every function returns a new root that shares all untouched subtrees with
the input; when nothing changes the input object itself is returned. Ids
that cannot be resolved are ignored, because the interface layer may still
reference nodes from a tree that has since been reloaded.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from ..file_tree_model.types import FolderNode, TreeNode
from .traversal import rebuild_folders

NodeUpdate = Callable[[TreeNode], TreeNode]

# (parent, index of the child within parent.children, parent's own link)
_ParentLink = tuple[FolderNode, int, "_ParentLink | None"]


def _locate(tree: TreeNode, node_id: str) -> tuple[TreeNode, _ParentLink | None] | None:
    """Find ``node_id`` in pre-order and return it with its chain of parents."""
    stack: list[tuple[TreeNode, _ParentLink | None]] = [(tree, None)]
    while stack:
        node, link = stack.pop()
        if node.id == node_id:
            return node, link
        if isinstance(node, FolderNode) and node.children:
            for index in range(len(node.children) - 1, -1, -1):
                stack.append((node.children[index], (node, index, link)))
    return None


def find_node(tree: TreeNode, node_id: str) -> TreeNode | None:
    """Return the node with ``node_id`` in pre-order, or ``None``."""
    found = _locate(tree, node_id)
    return None if found is None else found[0]


def update_node(tree: TreeNode, node_id: str, update: NodeUpdate) -> TreeNode:
    """Apply ``update`` to the node with ``node_id`` and rebuild its ancestors.

    Ids are unique, so the walk stops at the first hit. Siblings and
    unrelated subtrees are reused as-is.
    """
    found = _locate(tree, node_id)
    if found is None:
        return tree
    node, link = found
    updated = update(node)
    if updated is node:
        return tree
    while link is not None:
        parent, index, link = link
        children = parent.children[:index] + (updated,) + parent.children[index + 1:]
        updated = replace(parent, children=children)
    return updated


def _set_all_expanded(tree: FolderNode, expanded: bool) -> FolderNode:
    """Set ``is_expanded`` on every folder, reusing already-matching subtrees."""

    def finish(folder: FolderNode, children: tuple[TreeNode, ...] | None) -> FolderNode:
        if children is folder.children and folder.is_expanded == expanded:
            return folder
        return replace(folder, children=children, is_expanded=expanded)

    return rebuild_folders(tree, lambda node: True, finish)


def toggle_expansion(tree: FolderNode, node_id: str) -> FolderNode:
    """Flip ``is_expanded`` on the folder ``node_id``; files are left alone."""

    def flip(node: TreeNode) -> TreeNode:
        if not isinstance(node, FolderNode):
            return node
        return replace(node, is_expanded=not node.is_expanded)

    return update_node(tree, node_id, flip)


def expand_all(tree: FolderNode) -> FolderNode:
    """Expand every folder including the root."""
    return _set_all_expanded(tree, True)


def collapse_all(tree: FolderNode) -> FolderNode:
    """Collapse every folder including the root."""
    return _set_all_expanded(tree, False)


def add_tag(tree: FolderNode, node_id: str, tag: str) -> FolderNode:
    """Append ``tag`` to the node's tags. Existing equal tags are kept."""

    def append(node: TreeNode) -> TreeNode:
        return replace(node, tags=node.tags + (tag,))

    return update_node(tree, node_id, append)


def remove_tag(tree: FolderNode, node_id: str, tag: str) -> FolderNode:
    """Remove every occurrence of ``tag`` from the node's tags."""

    def discard(node: TreeNode) -> TreeNode:
        if tag not in node.tags:
            return node
        return replace(node, tags=tuple(existing for existing in node.tags if existing != tag))

    return update_node(tree, node_id, discard)


__all__ = [
    "find_node",
    "update_node",
    "toggle_expansion",
    "expand_all",
    "collapse_all",
    "add_tag",
    "remove_tag",
]
