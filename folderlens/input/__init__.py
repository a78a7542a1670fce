"""Input-layer public API: key-combo dispatch and the default keymap."""

from .key_registry import (
    CATEGORY_ORDER,
    NOT_HANDLED,
    TEXT_INPUT_ALLOWED_COMBOS,
    DispatchResult,
    KeyCombo,
    KeyComboBinding,
    KeyComboRegistry,
    KeyEvent,
    combo_matches,
    format_combo_display,
    normalize_key,
    parse_combo,
)
from .keymap import KeymapActions, build_default_registry, key_event_from_token

__all__ = [
    "CATEGORY_ORDER",
    "NOT_HANDLED",
    "TEXT_INPUT_ALLOWED_COMBOS",
    "DispatchResult",
    "KeyCombo",
    "KeyComboBinding",
    "KeyComboRegistry",
    "KeyEvent",
    "combo_matches",
    "format_combo_display",
    "normalize_key",
    "parse_combo",
    "KeymapActions",
    "build_default_registry",
    "key_event_from_token",
]
