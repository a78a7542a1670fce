"""Stack-based post-order rebuild shared by tree transforms.

Trees can be nested deeper than the interpreter's recursion limit, so
transforms that rebuild folders bottom-up walk with an explicit stack.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from ..file_tree_model.types import FolderNode, TreeNode

KeepChild = Callable[[TreeNode], bool]
FinishFolder = Callable[[FolderNode, "tuple[TreeNode, ...] | None"], FolderNode]


@dataclass
class _Frame:
    folder: FolderNode
    pending: Iterator[TreeNode]
    kept: list[TreeNode] = field(default_factory=list)
    changed: bool = False


def _open(folder: FolderNode) -> _Frame:
    return _Frame(folder=folder, pending=iter(folder.children or ()))


def rebuild_folders(tree: FolderNode, keep_child: KeepChild, finish_folder: FinishFolder) -> FolderNode:
    """Rebuild every folder bottom-up.

    ``keep_child`` decides whether a child survives; dropped children are
    not visited. ``finish_folder`` receives each folder with its new
    children, which is the folder's own ``children`` object when nothing
    below it changed, and returns the folder to use in its parent.
    """
    stack = [_open(tree)]
    while True:
        frame = stack[-1]
        child = next(frame.pending, None)
        if child is not None:
            if not keep_child(child):
                frame.changed = True
            elif isinstance(child, FolderNode):
                stack.append(_open(child))
            else:
                frame.kept.append(child)
            continue

        stack.pop()
        folder = frame.folder
        children = tuple(frame.kept) if frame.changed else folder.children
        rebuilt = finish_folder(folder, children)
        if not stack:
            return rebuilt
        parent = stack[-1]
        parent.kept.append(rebuilt)
        if rebuilt is not folder:
            parent.changed = True


__all__ = ["rebuild_folders"]
