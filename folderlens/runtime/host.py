"""Host-side collaborators: text prompts and OS open/reveal actions.

Open/reveal are fire-and-forget; they return an error message string
instead of raising so callers can surface it as a notification.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path


def prompt_for_text(message: str, default_value: str = "") -> str | None:
    """Ask for one line on the terminal; ``None`` on EOF or Ctrl+C."""
    suffix = f" [{default_value}]" if default_value else ""
    try:
        answer = input(f"{message}{suffix}: ")
    except (EOFError, KeyboardInterrupt):
        return None
    return answer if answer else default_value


def _open_command(target: str) -> list[str]:
    """Return the platform command that opens ``target`` with its default app."""
    if sys.platform == "darwin":
        return ["open", target]
    return ["xdg-open", target]


def _launch(cmd: list[str]) -> str | None:
    try:
        subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except OSError as exc:
        return f"Failed to run {cmd[0]}: {exc}"
    return None


def open_entry(path: str) -> str | None:
    """Open ``path`` with the desktop's default handler."""
    if sys.platform == "win32":
        try:
            os.startfile(path)  # type: ignore[attr-defined]
        except OSError as exc:
            return f"Failed to open {path}: {exc}"
        return None
    return _launch(_open_command(path))


def reveal_entry(path: str) -> str | None:
    """Show ``path`` selected in the platform file manager.

    Where no file manager supports selection the parent folder is opened.
    """
    if sys.platform == "darwin":
        return _launch(["open", "-R", path])
    if sys.platform == "win32":
        return _launch(["explorer", f"/select,{path}"])
    return _launch(_open_command(str(Path(path).parent)))
