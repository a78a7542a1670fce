"""Pygments highlighting for exports printed to a terminal."""

from __future__ import annotations

from functools import lru_cache

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=None)
def _formatter_for_style(style: str) -> TerminalFormatter:
    """Return cached terminal formatter for a validated style name."""
    return TerminalFormatter(style=style)


def highlight_json(source: str, style: str = DEFAULT_STYLE) -> str:
    """Colorize JSON text with ANSI escapes."""
    return highlight(source, JsonLexer(), _formatter_for_style(normalize_style(style)))


__all__ = [
    "DEFAULT_STYLE",
    "normalize_style",
    "highlight_json",
]
