"""Keybinding cheat sheet rendering.

Presentation-only and side-effect free.
"""

from __future__ import annotations

from ..input.key_registry import KeyComboRegistry, format_combo_display
from ..ui_theme import LIGHT_THEME, UITheme


def render_keybinding_help(registry: KeyComboRegistry, theme: UITheme | None = None) -> list[str]:
    """Return one heading per category followed by its bindings."""
    active_theme = theme or LIGHT_THEME
    reset = active_theme.reset
    groups = registry.grouped_bindings()
    key_width = max(
        (len(format_combo_display(binding.combo)) for bindings in groups.values() for binding in bindings),
        default=0,
    )
    lines: list[str] = []
    for category, bindings in groups.items():
        if lines:
            lines.append("")
        lines.append(f"{active_theme.help_heading}{category.upper()}{reset}")
        for binding in bindings:
            display = format_combo_display(binding.combo).ljust(key_width)
            lines.append(f"  {active_theme.help_key}{display}{reset}  {binding.description}")
    return lines


__all__ = ["render_keybinding_help"]
