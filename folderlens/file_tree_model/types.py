"""Domain datatypes for folder tree snapshots and their companion records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


def _now() -> datetime:
    """Return the current local time used when a timestamp is unknown."""
    return datetime.now()


@dataclass(frozen=True)
class FileNode:
    """Leaf entry of a loaded tree."""

    id: str
    name: str
    path: str
    modified_at: datetime = field(default_factory=_now)
    size: int | None = None
    tags: tuple[str, ...] = ()
    git_branch: str | None = None
    is_git_repo: bool = False

    @property
    def kind(self) -> str:
        return "file"


@dataclass(frozen=True)
class FolderNode:
    """Folder entry with nested children.

    ``children`` is ``None`` while the folder has not been read (listing
    failure or depth limit) and an empty tuple once it is known to be empty.
    """

    id: str
    name: str
    path: str
    modified_at: datetime = field(default_factory=_now)
    children: tuple["TreeNode", ...] | None = ()
    is_expanded: bool = False
    tags: tuple[str, ...] = ()
    git_branch: str | None = None
    is_git_repo: bool = False

    @property
    def kind(self) -> str:
        return "folder"


TreeNode = FolderNode | FileNode


@dataclass(frozen=True)
class IgnoreRule:
    """Named, toggleable substring pattern matched against node names."""

    name: str
    pattern: str
    enabled: bool = True

    def matches(self, name: str) -> bool:
        """Return whether this rule is active and ``pattern`` occurs in ``name``."""
        return self.enabled and self.pattern in name


@dataclass(frozen=True)
class DisplaySettings:
    """View preferences; only the two visibility flags affect filtering."""

    show_files: bool = True
    show_hidden_files: bool = False
    theme: str = "light"
    accent_color: str = "#06C755"
    auto_refresh: bool = True
    tree_columns: tuple[int, int, int] = (60, 20, 20)


@dataclass(frozen=True)
class Bookmark:
    """Snapshot of a node's name and path taken when it was bookmarked."""

    id: str
    name: str
    path: str
    added_at: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class SearchResult:
    """One search hit: the matched node plus the labels that matched."""

    item: TreeNode
    matched_labels: tuple[str, ...]


DEFAULT_IGNORE_RULES: tuple[IgnoreRule, ...] = (
    IgnoreRule("node_modules", "node_modules", True),
    IgnoreRule("git", ".git", False),
    IgnoreRule("pycache", "__pycache__", True),
    IgnoreRule("dist", "dist", True),
    IgnoreRule("build", "build", True),
)


__all__ = [
    "FileNode",
    "FolderNode",
    "TreeNode",
    "IgnoreRule",
    "DisplaySettings",
    "Bookmark",
    "SearchResult",
    "DEFAULT_IGNORE_RULES",
]
