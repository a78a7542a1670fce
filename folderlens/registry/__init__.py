"""Auxiliary stores kept alongside the tree: bookmarks and tag summaries."""

from .bookmarks import BookmarkRegistry
from .tags import collect_tags, nodes_with_tag

__all__ = [
    "BookmarkRegistry",
    "collect_tags",
    "nodes_with_tag",
]
