"""Tests for clipboard copy fallbacks."""

from __future__ import annotations

import subprocess
import unittest
from unittest import mock

import pyperclip

from folderlens.export import clipboard


class ClipboardTests(unittest.TestCase):
    def test_pyperclip_success_short_circuits(self) -> None:
        with mock.patch("folderlens.export.clipboard.pyperclip.copy") as copy, mock.patch(
            "folderlens.export.clipboard.subprocess.run"
        ) as run:
            self.assertTrue(clipboard.copy_to_clipboard("hello"))

        copy.assert_called_once_with("hello")
        run.assert_not_called()

    def test_falls_back_to_first_available_command(self) -> None:
        def which(name: str) -> str | None:
            return "/usr/bin/xclip" if name == "xclip" else None

        completed = subprocess.CompletedProcess(args=["xclip"], returncode=0)
        with mock.patch(
            "folderlens.export.clipboard.pyperclip.copy",
            side_effect=pyperclip.PyperclipException("no backend"),
        ), mock.patch("folderlens.export.clipboard.shutil.which", side_effect=which), mock.patch(
            "folderlens.export.clipboard.subprocess.run", return_value=completed
        ) as run:
            self.assertTrue(clipboard.copy_to_clipboard("hello"))

        self.assertEqual(run.call_args.args[0], ["xclip", "-selection", "clipboard"])
        self.assertEqual(run.call_args.kwargs["input"], b"hello")

    def test_gives_up_quietly_when_nothing_works(self) -> None:
        failed = subprocess.CompletedProcess(args=["pbcopy"], returncode=1)
        with mock.patch(
            "folderlens.export.clipboard.pyperclip.copy",
            side_effect=pyperclip.PyperclipException("no backend"),
        ), mock.patch("folderlens.export.clipboard.shutil.which", return_value="/usr/bin/tool"), mock.patch(
            "folderlens.export.clipboard.subprocess.run", return_value=failed
        ) as run:
            self.assertFalse(clipboard.copy_to_clipboard("hello"))

        self.assertEqual(run.call_count, len(clipboard.CLIPBOARD_COMMANDS))


if __name__ == "__main__":
    unittest.main()
