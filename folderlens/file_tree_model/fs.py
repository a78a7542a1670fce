"""Filesystem listing and snapshot construction for folder trees.

``list_directory`` is the default host collaborator; ``build_folder_tree``
accepts any callable with the same shape so the engine never has to touch
the real filesystem in tests.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .types import FileNode, FolderNode, TreeNode

logger = logging.getLogger(__name__)

GIT_DIR_NAME = ".git"


@dataclass(frozen=True)
class DirectoryListing:
    """One child record returned by a directory listing."""

    name: str
    is_directory: bool
    size: int | None = None
    modified_at: datetime | None = None


ListDirectory = Callable[[str], list[DirectoryListing]]


def list_directory(path: str) -> list[DirectoryListing]:
    """List direct children of ``path`` with size and mtime metadata.

    Raises ``OSError`` when the directory itself cannot be scanned. Stat
    failures on individual children only drop that child's metadata.
    """
    children: list[DirectoryListing] = []
    with os.scandir(path) as entries:
        for child in entries:
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False

            size: int | None = None
            modified_at: datetime | None = None
            try:
                stat = child.stat(follow_symlinks=False)
                modified_at = datetime.fromtimestamp(stat.st_mtime)
                if not is_dir:
                    size = int(stat.st_size)
            except OSError:
                pass

            children.append(
                DirectoryListing(
                    name=child.name,
                    is_directory=is_dir,
                    size=size,
                    modified_at=modified_at,
                )
            )
    children.sort(key=lambda item: (not item.is_directory, item.name.lower()))
    return children


def read_git_branch(folder_path: str) -> str | None:
    """Return the branch named by ``<folder>/.git/HEAD``, or ``None``.

    Detached heads and unreadable HEAD files yield ``None``.
    """
    head_path = Path(folder_path) / GIT_DIR_NAME / "HEAD"
    try:
        head = head_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None
    prefix = "ref: refs/heads/"
    if not head.startswith(prefix):
        return None
    branch = head[len(prefix):].strip()
    return branch or None


def _root_name(path: str) -> str:
    """Return the last path segment, or the path itself for filesystem roots."""
    stripped = path.rstrip("/\\")
    name = os.path.basename(stripped) if stripped else ""
    return name or path


@dataclass
class _PendingFolder:
    """A folder whose listing is being turned into child nodes."""

    path: str
    entry: DirectoryListing | None
    listing: Iterator[DirectoryListing]
    listed: bool
    nodes: list[TreeNode] = field(default_factory=list)
    is_git_repo: bool = False


def build_folder_tree(
    path: str,
    list_directory: ListDirectory = list_directory,
    *,
    max_depth: int | None = None,
    git_branch_for: Callable[[str], str | None] = read_git_branch,
) -> FolderNode:
    """Materialize a tree snapshot rooted at ``path``.

    The root starts expanded and every other folder collapsed. A failure to
    list the root propagates; a failure deeper down leaves that folder with
    ``children=None``. Folders below ``max_depth`` are not read. The walk
    uses an explicit stack, so nesting depth is bounded only by memory.
    """

    def read(folder_path: str, depth: int) -> list[DirectoryListing] | None:
        """List one folder, or ``None`` when it is past the limit or unreadable."""
        if max_depth is not None and depth > max_depth:
            return None
        try:
            return list_directory(folder_path)
        except OSError as exc:
            if depth == 1:
                raise
            logger.warning("Failed to read folder %s: %s", folder_path, exc)
            return None

    def pending(folder_path: str, entry: DirectoryListing | None, depth: int) -> _PendingFolder:
        listing = read(folder_path, depth)
        return _PendingFolder(
            path=folder_path,
            entry=entry,
            listing=iter(listing or ()),
            listed=listing is not None,
        )

    def finish(folder: _PendingFolder) -> FolderNode:
        children = tuple(folder.nodes) if folder.listed else None
        git_branch = git_branch_for(folder.path) if folder.is_git_repo else None
        if folder.entry is None:
            return FolderNode(
                id=folder.path,
                name=_root_name(folder.path),
                path=folder.path,
                children=children,
                is_expanded=True,
                is_git_repo=folder.is_git_repo,
                git_branch=git_branch,
            )
        return FolderNode(
            id=folder.path,
            name=folder.entry.name,
            path=folder.path,
            modified_at=folder.entry.modified_at or datetime.now(),
            children=children,
            is_expanded=False,
            is_git_repo=folder.is_git_repo,
            git_branch=git_branch,
        )

    stack = [pending(path, None, 1)]
    while True:
        current = stack[-1]
        entry = next(current.listing, None)
        if entry is None:
            stack.pop()
            node = finish(current)
            if not stack:
                return node
            stack[-1].nodes.append(node)
            continue

        child_path = os.path.join(current.path, entry.name)
        if entry.is_directory:
            if entry.name == GIT_DIR_NAME:
                current.is_git_repo = True
            stack.append(pending(child_path, entry, len(stack) + 1))
        else:
            current.nodes.append(
                FileNode(
                    id=child_path,
                    name=entry.name,
                    path=child_path,
                    modified_at=entry.modified_at or datetime.now(),
                    size=entry.size,
                )
            )


__all__ = [
    "DirectoryListing",
    "ListDirectory",
    "list_directory",
    "read_git_branch",
    "build_folder_tree",
]
