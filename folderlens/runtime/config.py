"""Persistent JSON preference helpers.

Stores display settings, the ignore-rule list, and the load depth limit.
Malformed or missing config falls back to defaults on load.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from platformdirs import user_config_dir

from ..export.ignore_rules import IgnoreRulesImportError, rule_from_dict, rule_to_dict
from ..file_tree_model.types import DEFAULT_IGNORE_RULES, DisplaySettings, IgnoreRule
from ..ui_theme import normalize_theme_name

APP_NAME = "folderlens"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so that an unwritable config directory
    never breaks the caller.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _bool_or(value: object, default: bool) -> bool:
    """Accept only real JSON booleans."""
    return value if isinstance(value, bool) else default


def _columns_or(value: object, default: tuple[int, int, int]) -> tuple[int, int, int]:
    """Accept a list of three positive integers."""
    if not isinstance(value, list) or len(value) != 3:
        return default
    if any(isinstance(item, bool) or not isinstance(item, int) or item <= 0 for item in value):
        return default
    return (value[0], value[1], value[2])


def load_display_settings() -> DisplaySettings:
    """Load display settings, defaulting every invalid field independently."""
    defaults = DisplaySettings()
    raw = load_config().get("settings")
    if not isinstance(raw, dict):
        return defaults
    accent = raw.get("accent_color")
    return DisplaySettings(
        show_files=_bool_or(raw.get("show_files"), defaults.show_files),
        show_hidden_files=_bool_or(raw.get("show_hidden_files"), defaults.show_hidden_files),
        theme=normalize_theme_name(raw.get("theme") if isinstance(raw.get("theme"), str) else None),
        accent_color=accent if isinstance(accent, str) and accent.strip() else defaults.accent_color,
        auto_refresh=_bool_or(raw.get("auto_refresh"), defaults.auto_refresh),
        tree_columns=_columns_or(raw.get("tree_columns"), defaults.tree_columns),
    )


def save_display_settings(settings: DisplaySettings) -> None:
    """Persist display settings under the ``settings`` key."""
    config = load_config()
    config["settings"] = {
        "show_files": settings.show_files,
        "show_hidden_files": settings.show_hidden_files,
        "theme": settings.theme,
        "accent_color": settings.accent_color,
        "auto_refresh": settings.auto_refresh,
        "tree_columns": list(settings.tree_columns),
    }
    save_config(config)


def load_ignore_rules() -> list[IgnoreRule]:
    """Load ignore rules; any malformed entry falls back to the built-in defaults."""
    raw = load_config().get("ignore_rules")
    if not isinstance(raw, list):
        return list(DEFAULT_IGNORE_RULES)
    try:
        return [rule_from_dict(item) for item in raw]
    except IgnoreRulesImportError:
        return list(DEFAULT_IGNORE_RULES)


def save_ignore_rules(rules: Iterable[IgnoreRule]) -> None:
    """Persist ignore rules in the same shape as ``ignore-rules.json``."""
    config = load_config()
    config["ignore_rules"] = [rule_to_dict(rule) for rule in rules]
    save_config(config)


def load_max_depth() -> int | None:
    """Return the configured folder depth limit, or ``None`` for unlimited.

    Booleans, non-integers and negative values count as unset.
    """
    value = load_config().get("max_depth")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value
