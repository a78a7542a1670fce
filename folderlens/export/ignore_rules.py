"""Import/export of ignore rules as a JSON array."""

from __future__ import annotations

import json
from collections.abc import Iterable

from ..file_tree_model.types import IgnoreRule

IGNORE_RULES_FILENAME = "ignore-rules.json"


class IgnoreRulesImportError(ValueError):
    """Raised when ignore-rule content is not a JSON array of rules."""


def rule_to_dict(rule: IgnoreRule) -> dict[str, object]:
    return {"name": rule.name, "pattern": rule.pattern, "enabled": rule.enabled}


def rule_from_dict(data: object) -> IgnoreRule:
    """Build one rule; ``name`` defaults to the pattern and ``enabled`` to true."""
    if not isinstance(data, dict):
        raise IgnoreRulesImportError("each ignore rule must be a JSON object")
    pattern = data.get("pattern")
    if not isinstance(pattern, str) or not pattern:
        raise IgnoreRulesImportError("each ignore rule needs a non-empty string 'pattern'")
    name = data.get("name")
    enabled = data.get("enabled", True)
    return IgnoreRule(
        name=name if isinstance(name, str) and name else pattern,
        pattern=pattern,
        enabled=enabled if isinstance(enabled, bool) else True,
    )


def export_ignore_rules(rules: Iterable[IgnoreRule]) -> bytes:
    """Serialize rules as pretty-printed JSON."""
    payload = [rule_to_dict(rule) for rule in rules]
    return (json.dumps(payload, indent=2) + "\n").encode("utf-8")


def import_ignore_rules(data: bytes | str) -> list[IgnoreRule]:
    """Parse exported rules; the whole import fails on any malformed entry."""
    try:
        payload = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise IgnoreRulesImportError(f"invalid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise IgnoreRulesImportError("ignore rules file must contain a JSON array")
    return [rule_from_dict(item) for item in payload]


__all__ = [
    "IGNORE_RULES_FILENAME",
    "IgnoreRulesImportError",
    "rule_to_dict",
    "rule_from_dict",
    "export_ignore_rules",
    "import_ignore_rules",
]
