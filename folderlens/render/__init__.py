"""Presentation helpers that are not tied to the tree itself."""

from .help import render_keybinding_help
from .highlight import highlight_json

__all__ = [
    "render_keybinding_help",
    "highlight_json",
]
