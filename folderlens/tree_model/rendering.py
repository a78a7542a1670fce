"""Formatting helpers for tree rows and search hits in a terminal."""

from __future__ import annotations

from ..file_tree_model.types import FileNode, FolderNode, SearchResult, TreeNode
from ..ui_theme import LIGHT_THEME, UITheme

SIZE_UNITS = ("B", "KB", "MB", "GB")


def format_file_size(size: int) -> str:
    """Render a byte count with one decimal in the largest fitting unit."""
    if size <= 0:
        return "0 B"
    unit_index = 0
    value = float(size)
    while value >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1
    text = f"{value:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text} {SIZE_UNITS[unit_index]}"


def _find_folded(text: str, folded_query: str) -> tuple[int, int] | None:
    """Return the span of ``text`` whose casefolded form equals ``folded_query``.

    Casefolding can change length (``ß`` folds to ``ss``), so the span is
    located in ``text`` itself rather than in its folded copy.
    """
    for start in range(len(text)):
        for end in range(start + 1, len(text) + 1):
            folded = text[start:end].casefold()
            if folded == folded_query:
                return start, end
            if not folded_query.startswith(folded):
                break
    return None


def highlight_substring(text: str, query: str, theme: UITheme | None = None) -> str:
    """Highlight first case-insensitive substring match in ``text``."""
    active_theme = theme or LIGHT_THEME
    if not query or not active_theme.search_hit:
        return text
    span = _find_folded(text, query.casefold())
    if span is None:
        return text
    start, end = span
    return text[:start] + active_theme.search_hit + text[start:end] + active_theme.reset + text[end:]


def format_tree_row(
    node: TreeNode,
    depth: int,
    *,
    search_query: str = "",
    theme: UITheme | None = None,
) -> str:
    """Render one node as a themed tree row."""
    active_theme = theme or LIGHT_THEME
    reset = active_theme.reset
    indent = "  " * depth
    name = highlight_substring(node.name, search_query.strip(), active_theme)
    tags = "".join(f" {active_theme.tree_tag}#{tag}{reset}" for tag in node.tags)
    branch = ""
    if node.git_branch:
        branch = f" {active_theme.tree_git_branch}({node.git_branch}){reset}"

    if isinstance(node, FolderNode):
        marker = "▾ " if node.is_expanded else "▸ "
        return (
            f"{indent}{active_theme.tree_marker}{marker}{reset}"
            f"{active_theme.tree_dir}{name}/{reset}{branch}{tags}"
        )

    size_label = ""
    if node.size is not None:
        size_label = f" {active_theme.tree_size}[{format_file_size(node.size)}]{reset}"
    return f"{indent}  {active_theme.tree_file_default}{name}{reset}{size_label}{tags}"


def render_tree_lines(
    tree: FolderNode,
    *,
    search_query: str = "",
    theme: UITheme | None = None,
) -> list[str]:
    """Render the root and every row reachable through expanded folders."""
    lines: list[str] = []
    stack: list[tuple[TreeNode, int]] = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        lines.append(format_tree_row(node, depth, search_query=search_query, theme=theme))
        if isinstance(node, FolderNode) and node.is_expanded and node.children:
            stack.extend((child, depth + 1) for child in reversed(node.children))
    return lines


def render_search_results(
    results: list[SearchResult],
    query: str,
    *,
    theme: UITheme | None = None,
) -> list[str]:
    """Render one row per hit as ``<kind marker> <highlighted name>  <path>``."""
    active_theme = theme or LIGHT_THEME
    rows: list[str] = []
    for result in results:
        item = result.item
        marker = "/" if isinstance(item, FolderNode) else ""
        name = highlight_substring(item.name, query.strip(), active_theme)
        size_label = ""
        if isinstance(item, FileNode) and item.size is not None:
            size_label = f" {active_theme.tree_size}[{format_file_size(item.size)}]{active_theme.reset}"
        rows.append(f"{name}{marker}{size_label}  {active_theme.help_dim}{item.path}{active_theme.reset}")
    return rows


__all__ = [
    "format_file_size",
    "highlight_substring",
    "format_tree_row",
    "render_tree_lines",
    "render_search_results",
]
