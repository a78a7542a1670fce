"""Ordered bookmark store with snapshot semantics."""

from __future__ import annotations

import itertools
import time
from collections.abc import Callable
from datetime import datetime

from ..file_tree_model.types import Bookmark, TreeNode


class BookmarkRegistry:
    """Insertion-ordered bookmarks keyed by generated ids.

    Bookmarks copy ``name``/``path`` from the node at creation time and never
    look at the tree again.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._counter = itertools.count(1)
        self._bookmarks: list[Bookmark] = []

    @property
    def bookmarks(self) -> tuple[Bookmark, ...]:
        return tuple(self._bookmarks)

    def __len__(self) -> int:
        return len(self._bookmarks)

    def _next_id(self) -> str:
        """Build ``bookmark-<millis>-<n>``; the counter keeps same-millisecond ids distinct."""
        millis = int(self._clock() * 1000)
        return f"bookmark-{millis}-{next(self._counter)}"

    def add(self, node: TreeNode) -> Bookmark:
        """Snapshot ``node`` into a new bookmark and append it."""
        bookmark = Bookmark(
            id=self._next_id(),
            name=node.name,
            path=node.path,
            added_at=datetime.fromtimestamp(self._clock()),
        )
        self._bookmarks.append(bookmark)
        return bookmark

    def remove(self, bookmark_id: str) -> bool:
        """Drop the bookmark with ``bookmark_id``; unknown ids are ignored."""
        remaining = [bookmark for bookmark in self._bookmarks if bookmark.id != bookmark_id]
        removed = len(remaining) != len(self._bookmarks)
        self._bookmarks = remaining
        return removed

    def get(self, bookmark_id: str) -> Bookmark | None:
        for bookmark in self._bookmarks:
            if bookmark.id == bookmark_id:
                return bookmark
        return None

    def clear(self) -> None:
        self._bookmarks.clear()


__all__ = ["BookmarkRegistry"]
