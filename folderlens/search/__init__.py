"""Search package: case-insensitive substring matching on node names."""

from .matching import iter_descendants, search_tree

__all__ = [
    "iter_descendants",
    "search_tree",
]
