"""Ordered key-combo dispatch table.

A registry holds bindings in registration order. Each key-down event is
matched against that list and the first binding whose modifiers match
exactly and whose base key matches wins. Events aimed at text-input
elements are suppressed unless they are one of a few editing-safe combos.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

MODIFIER_NAMES = ("ctrl", "shift", "alt", "meta")
KEY_ALIASES = {
    "esc": "escape",
    "return": "enter",
    "del": "delete",
    "cmd": "meta",
}
TEXT_INPUT_TARGETS = frozenset({"input", "textarea", "contenteditable"})
CATEGORY_ORDER = ("Navigation", "View", "Search", "Bookmarks", "General")
DEFAULT_CATEGORY = "General"


def normalize_key(key: str) -> str:
    """Lowercase a key identifier and fold known aliases."""
    if key == " ":
        return "space"
    lowered = key.strip().lower()
    return KEY_ALIASES.get(lowered, lowered)


@dataclass(frozen=True)
class KeyCombo:
    """Exact modifier state plus one base key."""

    key: str
    ctrl: bool = False
    shift: bool = False
    alt: bool = False
    meta: bool = False

    def __str__(self) -> str:
        parts = [name for name in MODIFIER_NAMES if getattr(self, name)]
        parts.append(self.key)
        return "+".join(parts)


@dataclass(frozen=True)
class KeyEvent:
    """One physical key-down event.

    ``target`` names the element that had focus; ``input``, ``textarea`` and
    ``contenteditable`` count as text entry.
    """

    key: str
    ctrl: bool = False
    shift: bool = False
    alt: bool = False
    meta: bool = False
    target: str = "document"

    @property
    def in_text_input(self) -> bool:
        return self.target.lower() in TEXT_INPUT_TARGETS


def parse_combo(text: str) -> KeyCombo:
    """Parse ``"ctrl+shift+e"``-style text; ``cmd`` is an alias of ``meta``.

    Raises ``ValueError`` unless exactly one non-modifier key is present.
    """
    parts = [part.strip().lower() for part in text.split("+")]
    modifiers = {name: False for name in MODIFIER_NAMES}
    keys: list[str] = []
    for part in parts:
        if not part:
            continue
        normalized = normalize_key(part)
        if normalized in modifiers:
            modifiers[normalized] = True
        else:
            keys.append(normalized)
    if len(keys) != 1:
        raise ValueError(f"key combo needs exactly one base key: {text!r}")
    return KeyCombo(key=keys[0], **modifiers)


def combo_matches(combo: KeyCombo, event: KeyEvent) -> bool:
    """Return whether all four modifiers and the base key match ``event``."""
    if (combo.ctrl, combo.shift, combo.alt, combo.meta) != (event.ctrl, event.shift, event.alt, event.meta):
        return False
    return combo.key == normalize_key(event.key)


TEXT_INPUT_ALLOWED_COMBOS: tuple[KeyCombo, ...] = tuple(
    parse_combo(text) for text in ("escape", "ctrl+a", "ctrl+f")
)


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one key combo to a single action callback."""

    combo: KeyCombo
    handler: Callable[[], object]
    description: str = ""
    category: str = DEFAULT_CATEGORY
    prevent_default: bool = True


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one dispatch: the binding invoked (if any) and default handling."""

    binding: KeyComboBinding | None = None
    prevent_default: bool = False

    @property
    def handled(self) -> bool:
        return self.binding is not None


NOT_HANDLED = DispatchResult()


class KeyComboRegistry:
    """Registration-ordered key-dispatch table."""

    def __init__(self, *, enabled: bool = True) -> None:
        """Initialize an empty registry."""
        self.enabled = enabled
        self._bindings: list[KeyComboBinding] = []

    @property
    def bindings(self) -> tuple[KeyComboBinding, ...]:
        return tuple(self._bindings)

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Append one binding; earlier registrations take precedence."""
        self._bindings.append(binding)
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def register(
        self,
        combo: str | KeyCombo,
        handler: Callable[[], object],
        description: str = "",
        category: str = DEFAULT_CATEGORY,
        *,
        prevent_default: bool = True,
    ) -> KeyComboRegistry:
        """Register ``handler`` under ``combo`` (text or parsed)."""
        parsed = parse_combo(combo) if isinstance(combo, str) else combo
        return self.register_binding(
            KeyComboBinding(
                combo=parsed,
                handler=handler,
                description=description,
                category=category,
                prevent_default=prevent_default,
            )
        )

    def match(self, event: KeyEvent) -> KeyComboBinding | None:
        """Return the binding ``event`` would trigger without invoking it."""
        if not self.enabled:
            return None
        if event.in_text_input and not any(combo_matches(combo, event) for combo in TEXT_INPUT_ALLOWED_COMBOS):
            return None
        for binding in self._bindings:
            if combo_matches(binding.combo, event):
                return binding
        return None

    def dispatch(self, event: KeyEvent) -> DispatchResult:
        """Invoke the first matching binding for ``event``."""
        binding = self.match(event)
        if binding is None:
            return NOT_HANDLED
        binding.handler()
        return DispatchResult(binding=binding, prevent_default=binding.prevent_default)

    def grouped_bindings(self) -> dict[str, list[KeyComboBinding]]:
        """Group bindings by category in display order, unknown categories last."""
        groups: dict[str, list[KeyComboBinding]] = {}
        for binding in self._bindings:
            groups.setdefault(binding.category or DEFAULT_CATEGORY, []).append(binding)
        ordered = {name: groups[name] for name in CATEGORY_ORDER if name in groups}
        for name, bindings in groups.items():
            ordered.setdefault(name, bindings)
        return ordered


_DISPLAY_GLYPHS = {
    "ctrl": "⌃",
    "shift": "⇧",
    "alt": "⌥",
    "meta": "⌘",
    "enter": "↵",
    "escape": "Esc",
    "delete": "Del",
    "backspace": "⌫",
    "space": "Space",
    "tab": "⇥",
}


def format_combo_display(combo: str | KeyCombo) -> str:
    """Render a combo with modifier glyphs, e.g. ``ctrl+shift+e`` -> ``⌃⇧E``."""
    parsed = parse_combo(combo) if isinstance(combo, str) else combo
    parts = [name for name in MODIFIER_NAMES if getattr(parsed, name)]
    parts.append(parsed.key)
    return "".join(_DISPLAY_GLYPHS.get(part, part.upper()) for part in parts)


__all__ = [
    "KeyCombo",
    "KeyEvent",
    "KeyComboBinding",
    "KeyComboRegistry",
    "DispatchResult",
    "NOT_HANDLED",
    "TEXT_INPUT_ALLOWED_COMBOS",
    "CATEGORY_ORDER",
    "normalize_key",
    "parse_combo",
    "combo_matches",
    "format_combo_display",
]
