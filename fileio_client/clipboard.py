#!/usr/bin/env python3
"""
Clipboard support.

Copying is an optional capability: detect_clipboard() returns a working
clipboard only when a utility is installed, and a no-op one otherwise.
"""

import shutil
import subprocess
from typing import List, Optional, Sequence

from .logging_utils import get_logger

logger = get_logger(__name__)

# Probed in order, first one found on PATH wins
CLIPBOARD_COMMANDS = [
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["wl-copy"],
    ["pbcopy"],
]


class Clipboard:
    """Interface for copying text to the system clipboard."""

    available = False

    def copy(self, text: str) -> bool:
        """
        Copy text to the clipboard.

        Returns:
            bool: True if the text was copied
        """
        raise NotImplementedError


class NullClipboard(Clipboard):
    """Fallback used when no clipboard utility is installed."""

    def copy(self, text: str) -> bool:
        return False


class CommandClipboard(Clipboard):
    """Clipboard backed by an external utility reading from stdin."""

    available = True

    def __init__(self, command: Sequence[str]):
        self.command = list(command)

    def copy(self, text: str) -> bool:
        try:
            subprocess.run(
                self.command,
                input=text,
                text=True,
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
            logger.debug(f"Copied {text} with {self.command[0]}")
            return True
        except (OSError, subprocess.CalledProcessError) as e:
            logger.warning(f"-- could not copy link to clipboard: {e}")
            return False

    def __repr__(self):
        return f"CommandClipboard({self.command!r})"


def detect_clipboard(commands: Optional[List[List[str]]] = None) -> Clipboard:
    """
    Find the first installed clipboard utility.

    Args:
        commands: Candidate command lines (default: CLIPBOARD_COMMANDS)

    Returns:
        A CommandClipboard, or a NullClipboard when nothing is installed
    """
    for command in commands if commands is not None else CLIPBOARD_COMMANDS:
        if shutil.which(command[0]):
            logger.debug(f"Using clipboard utility: {command[0]}")
            return CommandClipboard(command)
    return NullClipboard()
