"""Default application keymap and terminal key-token translation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .key_registry import KeyComboRegistry, KeyEvent

_NAMED_TOKENS = {
    "ESC": "escape",
    "ENTER": "enter",
    "TAB": "tab",
    "BACKSPACE": "backspace",
    "DELETE": "delete",
    "SPACE": "space",
    "UP": "arrowup",
    "DOWN": "arrowdown",
    "LEFT": "arrowleft",
    "RIGHT": "arrowright",
}


@dataclass(frozen=True)
class KeymapActions:
    """Callbacks the default keymap binds to."""

    refresh: Callable[[], object]
    expand_all: Callable[[], object]
    collapse_all: Callable[[], object]
    toggle_theme: Callable[[], object]


def build_default_registry(actions: KeymapActions) -> KeyComboRegistry:
    """Return a registry with the application's default shortcuts."""
    return (
        KeyComboRegistry()
        .register("ctrl+r", actions.refresh, "Refresh current folder", "Navigation")
        .register("f5", actions.refresh, "Refresh current folder", "Navigation")
        .register("ctrl+e", actions.expand_all, "Expand all folders", "View")
        .register("ctrl+shift+e", actions.collapse_all, "Collapse all folders", "View")
        .register("ctrl+t", actions.toggle_theme, "Toggle theme", "View")
    )


def key_event_from_token(token: str, *, target: str = "document") -> KeyEvent:
    """Translate a terminal key token (``CTRL_E``, ``ESC``, ``F5``, ``a``) into an event.

    Single uppercase letters are reported with ``shift`` pressed.
    """
    ctrl = alt = shift = False
    name = token
    while True:
        if name.startswith("CTRL_") and len(name) > len("CTRL_"):
            ctrl = True
            name = name[len("CTRL_"):]
        elif name.startswith("ALT_") and len(name) > len("ALT_"):
            alt = True
            name = name[len("ALT_"):]
        elif name.startswith("SHIFT_") and len(name) > len("SHIFT_"):
            shift = True
            name = name[len("SHIFT_"):]
        else:
            break

    if name in _NAMED_TOKENS:
        key = _NAMED_TOKENS[name]
    elif len(name) == 1:
        if name.isalpha() and name.isupper():
            shift = True
        key = name.lower()
    else:
        key = name.lower()
    return KeyEvent(key=key, ctrl=ctrl, shift=shift, alt=alt, target=target)


__all__ = [
    "KeymapActions",
    "build_default_registry",
    "key_event_from_token",
]
