"""Clipboard copy with command-line fallbacks.

``pyperclip`` is tried first; when it has no backend the platform tools are
run directly. Failure is reported as ``False``, never raised.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

import pyperclip

logger = logging.getLogger(__name__)

CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


def _copy_with_command(command: tuple[str, ...], text: str) -> bool:
    """Pipe ``text`` into ``command`` and report whether it exited cleanly."""
    try:
        proc = subprocess.run(
            list(command),
            input=text.encode("utf-8"),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
            timeout=5,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("Clipboard command %s failed: %s", command[0], exc)
        return False
    return proc.returncode == 0


def copy_to_clipboard(text: str) -> bool:
    """Copy ``text`` to the system clipboard using the first working mechanism."""
    try:
        pyperclip.copy(text)
        return True
    except pyperclip.PyperclipException as exc:
        logger.debug("pyperclip unavailable: %s", exc)

    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]) is None:
            continue
        if _copy_with_command(command, text):
            return True

    logger.info("No clipboard mechanism available")
    return False


__all__ = [
    "CLIPBOARD_COMMANDS",
    "copy_to_clipboard",
]
