"""Structured (JSON) and plain-text exports of a filtered tree.

The JSON shape keeps the field names used by earlier ``file-tree.json``
exports so that files written by either side can be read back. Every walk
here uses an explicit stack; trees may nest deeper than the recursion limit.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from ..file_tree_model.types import FileNode, FolderNode, TreeNode

logger = logging.getLogger(__name__)

STRUCTURED_EXPORT_FILENAME = "file-tree.json"
TEXT_EXPORT_FILENAME = "file-tree.txt"
FOLDER_MARKER = "📁"
FILE_MARKER = "📄"
JSON_INDENT = "  "


class SnapshotFormatError(ValueError):
    """Raised when structured tree data cannot be turned back into nodes."""


def _node_fields(node: TreeNode) -> dict[str, object]:
    """Serialize one node without descending; folders get ``children: None``."""
    data: dict[str, object] = {
        "id": node.id,
        "name": node.name,
        "type": node.kind,
        "path": node.path,
        "modified": node.modified_at.isoformat(),
        "tags": list(node.tags),
        "isGitRepo": node.is_git_repo,
    }
    if node.git_branch is not None:
        data["gitBranch"] = node.git_branch
    if isinstance(node, FolderNode):
        data["isExpanded"] = node.is_expanded
        data["children"] = None
    else:
        data["size"] = node.size
    return data


def node_to_dict(node: TreeNode) -> dict[str, object]:
    """Serialize ``node`` and its whole subtree to plain JSON types."""
    root = _node_fields(node)
    stack: list[tuple[TreeNode, dict[str, object]]] = [(node, root)]
    while stack:
        current, data = stack.pop()
        if isinstance(current, FolderNode) and current.children is not None:
            child_dicts = [_node_fields(child) for child in current.children]
            data["children"] = child_dicts
            stack.extend(zip(current.children, child_dicts))
    return root


def dumps_json(value: object) -> str:
    """Format ``value`` like ``json.dumps(value, indent=2, ensure_ascii=False)``.

    Containers are expanded from a work stack instead of recursively, so
    arbitrarily nested payloads can be written.
    """
    parts: list[str] = []
    # Work items are either literal text or a (value, level) pair to expand.
    work: list[str | tuple[object, int]] = [(value, 0)]
    while work:
        item = work.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        current, level = item
        if isinstance(current, dict) and current:
            work.append(f"\n{JSON_INDENT * level}}}")
            entries = list(current.items())
            for index in range(len(entries) - 1, -1, -1):
                key, child = entries[index]
                opener = "{" if index == 0 else ","
                work.append((child, level + 1))
                work.append(f"{opener}\n{JSON_INDENT * (level + 1)}{json.dumps(str(key), ensure_ascii=False)}: ")
        elif isinstance(current, list) and current:
            work.append(f"\n{JSON_INDENT * level}]")
            for index in range(len(current) - 1, -1, -1):
                opener = "[" if index == 0 else ","
                work.append((current[index], level + 1))
                work.append(f"{opener}\n{JSON_INDENT * (level + 1)}")
        else:
            parts.append(json.dumps(current, ensure_ascii=False))
    return "".join(parts)


def to_structured(filtered_tree: FolderNode) -> bytes:
    """Serialize every node of the view, collapsed folders included."""
    return (dumps_json(node_to_dict(filtered_tree)) + "\n").encode("utf-8")


def to_text(filtered_tree: FolderNode) -> bytes:
    """Render the view as an indented outline of the root's children.

    A folder's children appear only when that folder is expanded; collapsed
    folders end their branch at their own line.
    """
    lines: list[str] = []
    stack: list[tuple[TreeNode, int]] = [(child, 0) for child in reversed(filtered_tree.children or ())]
    while stack:
        node, depth = stack.pop()
        marker = FOLDER_MARKER if isinstance(node, FolderNode) else FILE_MARKER
        lines.append(f"{'  ' * depth}{marker} {node.name}\n")
        if isinstance(node, FolderNode) and node.is_expanded and node.children:
            stack.extend((child, depth + 1) for child in reversed(node.children))
    return "".join(lines).encode("utf-8")


def _parse_modified(value: object) -> datetime:
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
    return datetime.now()


def _parse_tags(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(tag for tag in value if isinstance(tag, str))


@dataclass
class _PendingFolder:
    """A parsed folder whose children are still being built."""

    fields: dict[str, object]
    is_expanded: bool
    pending: Iterator[object]
    children: list[TreeNode] = field(default_factory=list)

    def finish(self) -> FolderNode:
        return FolderNode(children=tuple(self.children), is_expanded=self.is_expanded, **self.fields)


_DONE = object()


def _start_node(data: object, seen_ids: set[str]) -> TreeNode | _PendingFolder:
    """Validate one JSON object; folders with a child list come back pending."""
    if not isinstance(data, dict):
        raise SnapshotFormatError("tree node must be a JSON object")
    node_id = data.get("id")
    name = data.get("name")
    kind = data.get("type")
    if not isinstance(node_id, str) or not isinstance(name, str):
        raise SnapshotFormatError("tree node needs string 'id' and 'name'")
    if node_id in seen_ids:
        raise SnapshotFormatError(f"duplicate node id {node_id!r}")
    seen_ids.add(node_id)
    path = data.get("path")
    git_branch = data.get("gitBranch")
    fields: dict[str, object] = {
        "id": node_id,
        "name": name,
        "path": path if isinstance(path, str) else node_id,
        "modified_at": _parse_modified(data.get("modified")),
        "tags": _parse_tags(data.get("tags")),
        "git_branch": git_branch if isinstance(git_branch, str) else None,
        "is_git_repo": data.get("isGitRepo") is True,
    }
    if kind == "folder":
        is_expanded = data.get("isExpanded") is True
        raw_children = data.get("children", [])
        if raw_children is None:
            return FolderNode(children=None, is_expanded=is_expanded, **fields)
        if not isinstance(raw_children, list):
            raise SnapshotFormatError(f"children of {node_id!r} must be a list")
        return _PendingFolder(fields=fields, is_expanded=is_expanded, pending=iter(raw_children))
    if kind == "file":
        size = data.get("size")
        if isinstance(size, bool) or not isinstance(size, int):
            size = None
        return FileNode(size=size, **fields)
    raise SnapshotFormatError(f"unknown node type {kind!r} for {node_id!r}")


def node_from_dict(data: object) -> TreeNode:
    """Rebuild one node (and its subtree) from ``node_to_dict`` output.

    Raises ``SnapshotFormatError`` for malformed nodes and for ids that
    occur more than once.
    """
    seen_ids: set[str] = set()
    started = _start_node(data, seen_ids)
    if not isinstance(started, _PendingFolder):
        return started
    stack = [started]
    while True:
        current = stack[-1]
        raw_child = next(current.pending, _DONE)
        if raw_child is _DONE:
            stack.pop()
            folder = current.finish()
            if not stack:
                return folder
            stack[-1].children.append(folder)
            continue
        child = _start_node(raw_child, seen_ids)
        if isinstance(child, _PendingFolder):
            stack.append(child)
        else:
            current.children.append(child)


def tree_from_structured(data: bytes | str) -> FolderNode:
    """Parse a structured export back into a tree rooted at a folder."""
    try:
        payload = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SnapshotFormatError(f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise SnapshotFormatError("snapshot is nested too deeply to decode") from exc
    root = node_from_dict(payload)
    if not isinstance(root, FolderNode):
        raise SnapshotFormatError("snapshot root must be a folder")
    return root


def write_export(data: bytes, directory: Path, filename: str) -> Path:
    """Write an export payload to ``directory / filename`` and return the path."""
    target = directory / filename
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)
    logger.info("Wrote %d bytes to %s", len(data), target)
    return target


__all__ = [
    "STRUCTURED_EXPORT_FILENAME",
    "TEXT_EXPORT_FILENAME",
    "FOLDER_MARKER",
    "FILE_MARKER",
    "SnapshotFormatError",
    "dumps_json",
    "node_to_dict",
    "node_from_dict",
    "to_structured",
    "to_text",
    "tree_from_structured",
    "write_export",
]
