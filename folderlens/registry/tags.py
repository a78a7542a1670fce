"""Tag summaries computed by traversing a tree; tags live on the nodes."""

from __future__ import annotations

from ..file_tree_model.types import FolderNode, TreeNode
from ..search.matching import iter_descendants


def _walk(tree: FolderNode):
    yield tree
    yield from iter_descendants(tree)


def collect_tags(tree: FolderNode) -> dict[str, int]:
    """Count every tag in the tree, root included, in first-seen order."""
    counts: dict[str, int] = {}
    for node in _walk(tree):
        for tag in node.tags:
            counts[tag] = counts.get(tag, 0) + 1
    return counts


def nodes_with_tag(tree: FolderNode, tag: str) -> list[TreeNode]:
    """Return nodes carrying ``tag`` in pre-order."""
    return [node for node in _walk(tree) if tag in node.tags]


__all__ = [
    "collect_tags",
    "nodes_with_tag",
]
