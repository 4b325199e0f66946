"""
Clipboard export through whatever OS clipboard utility is installed.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Sequence

from .errors import ClipboardError

logger = logging.getLogger(__name__)

# Tried in order; the first one found on PATH is used.
CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("termux-clipboard-set",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("wl-copy",),
    ("pbcopy",),
    ("clip",),
)


def find_clipboard_command(
    commands: Sequence[Sequence[str]] | None = None,
) -> list[str] | None:
    if commands is None:
        commands = CLIPBOARD_COMMANDS
    for command in commands:
        path = shutil.which(command[0])
        if path:
            return [path, *command[1:]]
    return None


def copy_to_clipboard(text: str) -> None:
    """
    Pipe `text`, unmodified, into the first clipboard tool available.

    Raises ClipboardError when no tool is installed or the tool fails.
    """
    command = find_clipboard_command()
    if command is None:
        names = "/".join(cmd[0] for cmd in CLIPBOARD_COMMANDS)
        raise ClipboardError(f"No clipboard tool found ({names}).")

    logger.debug("Copying to clipboard with %s", command[0])
    try:
        # Only stdin is a pipe: xclip and friends fork a child that keeps
        # owning the selection, and it must not hold any of our pipes open.
        subprocess.run(
            command,
            input=text.encode("utf-8"),
            check=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except subprocess.CalledProcessError as exc:
        raise ClipboardError(
            f"{command[0]} exited with status {exc.returncode}"
        ) from exc
    except OSError as exc:
        raise ClipboardError(f"Could not run {command[0]}: {exc}") from exc
