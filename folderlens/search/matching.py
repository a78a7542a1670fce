"""Name search over the raw (unfiltered) tree."""

from __future__ import annotations

from collections.abc import Iterator

from ..file_tree_model.types import FolderNode, SearchResult, TreeNode


def iter_descendants(tree: FolderNode) -> Iterator[TreeNode]:
    """Yield every node below ``tree`` in pre-order, excluding ``tree`` itself."""
    stack: list[TreeNode] = list(reversed(tree.children or ()))
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, FolderNode) and node.children:
            stack.extend(reversed(node.children))


def search_tree(tree: FolderNode, query: str) -> list[SearchResult]:
    """Return nodes whose name contains ``query``, case-insensitively.

    A blank query means search is inactive and yields no results. Ignore
    rules and display settings are not applied; the caller
    passes the raw tree.
    """
    if not query.strip():
        return []
    needle = query.casefold()
    return [
        SearchResult(item=node, matched_labels=(node.name,))
        for node in iter_descendants(tree)
        if needle in node.name.casefold()
    ]


__all__ = [
    "iter_descendants",
    "search_tree",
]
