"""Process-wide tree state container.

``TreeStateEngine`` owns the raw tree, ignore rules, display settings, the
search query and the bookmark registry. The interface layer reads derived
views (``filtered_tree``, ``search_results``) and submits changes through
the methods below; it never mutates nodes itself.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace

from ..export.clipboard import copy_to_clipboard
from ..export.ignore_rules import IgnoreRulesImportError, export_ignore_rules, import_ignore_rules
from ..export.serializer import to_structured, to_text
from ..file_tree_model.fs import ListDirectory, build_folder_tree, list_directory
from ..file_tree_model.types import (
    DEFAULT_IGNORE_RULES,
    Bookmark,
    DisplaySettings,
    FolderNode,
    IgnoreRule,
    SearchResult,
    TreeNode,
)
from ..input.key_registry import KeyComboRegistry
from ..input.keymap import KeymapActions, build_default_registry
from ..registry.bookmarks import BookmarkRegistry
from ..registry.tags import collect_tags
from ..search.matching import search_tree
from ..tree_model import filtering, mutation
from ..ui_theme import next_theme_name
from . import host

logger = logging.getLogger(__name__)

Notify = Callable[[str, str], None]

EMPTY_ROOT_ID = "empty-root"


def empty_root() -> FolderNode:
    """Placeholder tree shown before any folder has been loaded."""
    return FolderNode(id=EMPTY_ROOT_ID, name="Root", path="", children=(), is_expanded=False)


def log_notification(level: str, message: str) -> None:
    """Default ``notify`` collaborator: route notifications to the log."""
    log_level = logging.ERROR if level == "error" else logging.INFO
    logger.log(log_level, "%s", message)


class TreeStateEngine:
    """Single owner of tree, rules, settings, search and bookmarks.

    Collaborators are injected so tests and alternative front ends can
    replace the filesystem, prompt, OS actions and notification sink.
    """

    def __init__(
        self,
        *,
        list_directory: ListDirectory = list_directory,
        prompt_for_text: Callable[[str, str], str | None] = host.prompt_for_text,
        open_entry: Callable[[str], str | None] = host.open_entry,
        reveal_entry: Callable[[str], str | None] = host.reveal_entry,
        notify: Notify = log_notification,
        ignore_rules: Iterable[IgnoreRule] | None = None,
        settings: DisplaySettings | None = None,
        max_depth: int | None = None,
        bookmarks: BookmarkRegistry | None = None,
    ) -> None:
        self._list_directory = list_directory
        self._prompt_for_text = prompt_for_text
        self._open_entry = open_entry
        self._reveal_entry = reveal_entry
        self._notify = notify
        self._max_depth = max_depth
        self._raw_tree = empty_root()
        self._current_path = ""
        self._ignore_rules: tuple[IgnoreRule, ...] = tuple(
            DEFAULT_IGNORE_RULES if ignore_rules is None else ignore_rules
        )
        self._settings = settings or DisplaySettings()
        self._search_query = ""
        self._search_results: list[SearchResult] = []
        self._bookmarks = bookmarks if bookmarks is not None else BookmarkRegistry()
        self._closed = False

    def __enter__(self) -> TreeStateEngine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # Read-only views.

    @property
    def raw_tree(self) -> FolderNode:
        return self._raw_tree

    @property
    def filtered_tree(self) -> FolderNode:
        """Recompute the view from the raw tree, current rules and settings."""
        return filtering.filter_tree(self._raw_tree, self._ignore_rules, self._settings)

    @property
    def current_path(self) -> str:
        return self._current_path

    @property
    def ignore_rules(self) -> tuple[IgnoreRule, ...]:
        return self._ignore_rules

    @property
    def settings(self) -> DisplaySettings:
        return self._settings

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def search_results(self) -> list[SearchResult]:
        return list(self._search_results)

    @property
    def bookmarks(self) -> tuple[Bookmark, ...]:
        return self._bookmarks.bookmarks

    @property
    def closed(self) -> bool:
        return self._closed

    def tag_summary(self) -> dict[str, int]:
        return collect_tags(self._raw_tree)

    def find_node(self, node_id: str) -> TreeNode | None:
        return mutation.find_node(self._raw_tree, node_id)

    # Tree lifecycle.

    def _set_tree(self, tree: FolderNode) -> None:
        """Swap in a new raw tree and re-derive search results."""
        self._raw_tree = tree
        self._search_results = search_tree(tree, self._search_query)

    def load(self, path: str) -> bool:
        """Read ``path`` through the listing collaborator and replace the tree.

        On failure the previous tree and path stay in place and the error is
        surfaced through ``notify``.
        """
        try:
            tree = build_folder_tree(path, self._list_directory, max_depth=self._max_depth)
        except OSError as exc:
            logger.warning("Failed to load folder %s: %s", path, exc)
            self._notify("error", f"Failed to load folder: {path}")
            return False
        self._current_path = path
        self._set_tree(tree)
        self._notify("success", f"Loaded folder: {path}")
        return True

    def load_snapshot(self, tree: FolderNode) -> None:
        """Adopt an already-materialized tree, e.g. one read from an export."""
        self._current_path = tree.path
        self._set_tree(tree)

    def refresh(self) -> bool:
        """Reload the current folder; a no-op before the first load."""
        if not self._current_path:
            return False
        return self.load(self._current_path)

    # Mutations.

    def toggle_expansion(self, node_id: str) -> None:
        self._set_tree(mutation.toggle_expansion(self._raw_tree, node_id))

    def expand_all(self) -> None:
        self._set_tree(mutation.expand_all(self._raw_tree))

    def collapse_all(self) -> None:
        self._set_tree(mutation.collapse_all(self._raw_tree))

    def add_tag(self, node_id: str, tag: str) -> None:
        tree = mutation.add_tag(self._raw_tree, node_id, tag)
        if tree is self._raw_tree:
            logger.debug("add_tag: %s not in tree", node_id)
            return
        self._set_tree(tree)
        self._notify("success", f'Tag "{tag}" added')

    def remove_tag(self, node_id: str, tag: str) -> None:
        tree = mutation.remove_tag(self._raw_tree, node_id, tag)
        if tree is self._raw_tree:
            return
        self._set_tree(tree)
        self._notify("info", f'Tag "{tag}" removed')

    def prompt_and_add_tag(self, node_id: str) -> str | None:
        """Ask the user for a tag and add it; returns the tag or ``None`` on cancel."""
        answer = self._prompt_for_text("Add tag", "")
        tag = answer.strip() if answer else ""
        if not tag:
            return None
        self.add_tag(node_id, tag)
        return tag

    # Bookmarks.

    def add_bookmark(self, node: TreeNode) -> Bookmark:
        bookmark = self._bookmarks.add(node)
        self._notify("success", f"Bookmarked: {node.name}")
        return bookmark

    def remove_bookmark(self, bookmark_id: str) -> None:
        if self._bookmarks.remove(bookmark_id):
            self._notify("success", "Bookmark removed")

    def open_bookmark(self, bookmark_id: str) -> bool:
        """Load the folder a bookmark points at.

        Unknown ids do nothing. A bookmark whose path can no longer be
        listed fails like any other load and stays in the registry.
        """
        bookmark = self._bookmarks.get(bookmark_id)
        if bookmark is None:
            return False
        if not self.load(bookmark.path):
            return False
        self._notify("info", f"Navigated to: {bookmark.name}")
        return True

    # Rules, settings, search.

    def set_ignore_rules(self, rules: Iterable[IgnoreRule]) -> None:
        self._ignore_rules = tuple(rules)

    def set_settings(self, settings: DisplaySettings) -> None:
        self._settings = settings

    def toggle_theme(self) -> str:
        theme = next_theme_name(self._settings.theme)
        self._settings = replace(self._settings, theme=theme)
        self._notify("info", f"Switched to {theme} theme")
        return theme

    def set_search_query(self, text: str) -> list[SearchResult]:
        self._search_query = text
        self._search_results = search_tree(self._raw_tree, text)
        return self.search_results

    # Exports.

    def export_structured(self) -> bytes:
        return to_structured(self.filtered_tree)

    def export_text(self) -> bytes:
        return to_text(self.filtered_tree)

    def export_ignore_rules(self) -> bytes:
        return export_ignore_rules(self._ignore_rules)

    def import_ignore_rules(self, data: bytes | str) -> bool:
        """Replace ignore rules from exported JSON; malformed content changes nothing."""
        try:
            rules = import_ignore_rules(data)
        except IgnoreRulesImportError as exc:
            logger.warning("Rejected ignore rules import: %s", exc)
            self._notify("error", "Error loading ignore list file")
            return False
        self.set_ignore_rules(rules)
        return True

    def copy_export_to_clipboard(self, *, structured: bool = False) -> bool:
        payload = self.export_structured() if structured else self.export_text()
        return copy_to_clipboard(payload.decode("utf-8"))

    def copy_path(self, node_id: str) -> bool:
        node = self.find_node(node_id)
        if node is None:
            return False
        return copy_to_clipboard(node.path)

    # OS actions.

    def open_node(self, node_id: str) -> None:
        """Open folders directly and reveal files in the file manager."""
        node = self.find_node(node_id)
        if node is None:
            return
        if isinstance(node, FolderNode):
            error = self._open_entry(node.path)
        else:
            error = self._reveal_entry(node.path)
        if error:
            self._notify("error", error)

    # Keyboard.

    def build_keymap(self) -> KeyComboRegistry:
        """Bind the default shortcuts to this engine's operations."""
        return build_default_registry(
            KeymapActions(
                refresh=self.refresh,
                expand_all=self.expand_all,
                collapse_all=self.collapse_all,
                toggle_theme=self.toggle_theme,
            )
        )

    def close(self) -> None:
        """Tear down state at shutdown: bookmarks, tree and search are cleared."""
        if self._closed:
            return
        self._bookmarks.clear()
        self._raw_tree = empty_root()
        self._current_path = ""
        self._search_query = ""
        self._search_results = []
        self._closed = True
