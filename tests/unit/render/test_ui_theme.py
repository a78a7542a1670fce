"""Theme selection helper tests."""

from __future__ import annotations

import unittest

from folderlens.ui_theme import (
    DARK_THEME,
    LIGHT_THEME,
    PLAIN_THEME,
    available_theme_names,
    next_theme_name,
    normalize_theme_name,
    resolve_theme,
)


class ThemeSelectionTests(unittest.TestCase):
    def test_names_and_normalization(self) -> None:
        self.assertEqual(available_theme_names(), ("dark", "light"))
        self.assertEqual(normalize_theme_name(" Dark "), "dark")
        self.assertEqual(normalize_theme_name("neon"), "light")
        self.assertEqual(normalize_theme_name(None), "light")

    def test_toggle_alternates(self) -> None:
        self.assertEqual(next_theme_name("light"), "dark")
        self.assertEqual(next_theme_name("dark"), "light")
        self.assertEqual(next_theme_name("unknown"), "dark")

    def test_resolve_honors_no_color(self) -> None:
        self.assertIs(resolve_theme("dark"), DARK_THEME)
        self.assertIs(resolve_theme("bogus"), LIGHT_THEME)
        self.assertIs(resolve_theme("dark", no_color=True), PLAIN_THEME)


if __name__ == "__main__":
    unittest.main()
