"""UI theme definitions and selection helpers.

Themes are ANSI palettes for tree rows and the keybinding help sheet. The
``light``/``dark`` names mirror ``DisplaySettings.theme``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    tree_marker: str
    tree_dir: str
    tree_file_default: str
    tree_size: str
    tree_tag: str
    tree_git_branch: str
    search_hit: str
    help_heading: str
    help_key: str
    help_dim: str


LIGHT_THEME = UITheme(
    name="light",
    reset="\033[0m",
    tree_marker="\033[38;5;30m",
    tree_dir="\033[1;34m",
    tree_file_default="\033[38;5;236m",
    tree_size="\033[38;5;66m",
    tree_tag="\033[38;5;28m",
    tree_git_branch="\033[38;5;130m",
    search_hit="\033[7;1m",
    help_heading="\033[1;38;5;25m",
    help_key="\033[38;5;94m",
    help_dim="\033[2;38;5;240m",
)

DARK_THEME = UITheme(
    name="dark",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;38;5;81m",
    tree_file_default="\033[38;5;252m",
    tree_size="\033[38;5;109m",
    tree_tag="\033[38;5;42m",
    tree_git_branch="\033[38;5;214m",
    search_hit="\033[7;1m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_marker="",
    tree_dir="",
    tree_file_default="",
    tree_size="",
    tree_tag="",
    tree_git_branch="",
    search_hit="",
    help_heading="",
    help_key="",
    help_dim="",
)

_THEMES: dict[str, UITheme] = {
    LIGHT_THEME.name: LIGHT_THEME,
    DARK_THEME.name: DARK_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to light."""
    if not name:
        return LIGHT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return LIGHT_THEME.name


def next_theme_name(name: str | None) -> str:
    """Return the theme that a theme toggle switches to."""
    return DARK_THEME.name if normalize_theme_name(name) == LIGHT_THEME.name else LIGHT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "LIGHT_THEME",
    "DARK_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "next_theme_name",
    "resolve_theme",
]
