"""Default keymap and terminal token translation tests."""

from __future__ import annotations

import unittest

from folderlens.input import KeyEvent, KeymapActions, build_default_registry, key_event_from_token


class KeyEventFromTokenTests(unittest.TestCase):
    def test_modifier_prefixes(self) -> None:
        self.assertEqual(key_event_from_token("CTRL_E"), KeyEvent(key="e", ctrl=True))
        self.assertEqual(key_event_from_token("CTRL_SHIFT_E"), KeyEvent(key="e", ctrl=True, shift=True))
        self.assertEqual(key_event_from_token("ALT_x"), KeyEvent(key="x", alt=True))

    def test_named_and_plain_tokens(self) -> None:
        self.assertEqual(key_event_from_token("ESC").key, "escape")
        self.assertEqual(key_event_from_token("UP").key, "arrowup")
        self.assertEqual(key_event_from_token("F5"), KeyEvent(key="f5"))
        self.assertEqual(key_event_from_token("G"), KeyEvent(key="g", shift=True))
        self.assertEqual(key_event_from_token("a", target="input").target, "input")


class DefaultKeymapTests(unittest.TestCase):
    def setUp(self) -> None:
        self.calls: list[str] = []
        self.registry = build_default_registry(
            KeymapActions(
                refresh=lambda: self.calls.append("refresh"),
                expand_all=lambda: self.calls.append("expand"),
                collapse_all=lambda: self.calls.append("collapse"),
                toggle_theme=lambda: self.calls.append("theme"),
            )
        )

    def test_default_shortcuts_dispatch_their_actions(self) -> None:
        for token in ("CTRL_R", "F5", "CTRL_E", "CTRL_SHIFT_E", "CTRL_T"):
            self.registry.dispatch(key_event_from_token(token))

        self.assertEqual(self.calls, ["refresh", "refresh", "expand", "collapse", "theme"])

    def test_expand_is_registered_before_collapse(self) -> None:
        combos = [str(binding.combo) for binding in self.registry.bindings]

        self.assertLess(combos.index("ctrl+e"), combos.index("ctrl+shift+e"))

    def test_shortcuts_are_inactive_in_text_input(self) -> None:
        result = self.registry.dispatch(key_event_from_token("CTRL_R", target="input"))

        self.assertFalse(result.handled)
        self.assertEqual(self.calls, [])


if __name__ == "__main__":
    unittest.main()
