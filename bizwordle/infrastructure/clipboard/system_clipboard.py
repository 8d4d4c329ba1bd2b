# bizwordle/infrastructure/clipboard/system_clipboard.py
from __future__ import annotations
import logging
import shutil
import subprocess
import sys
from typing import List, Optional, Sequence

from bizwordle.application.ports import Clipboard, ClipboardError

_log = logging.getLogger("bizwordle.clipboard")

# First command found on PATH wins.
_CANDIDATES: Sequence[List[str]] = (
    ["pbcopy"],
    ["clip"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
)


def _detect_command() -> Optional[List[str]]:
    for cmd in _CANDIDATES:
        if shutil.which(cmd[0]):
            return list(cmd)
    return None


class SystemClipboard(Clipboard):
    """Pipes text into the platform clipboard tool."""

    def __init__(self, command: Optional[Sequence[str]] = None, timeout: float = 5.0) -> None:
        self.command = list(command) if command else _detect_command()
        self.timeout = timeout

    def copy(self, text: str) -> None:
        if not self.command:
            raise ClipboardError(f"no clipboard tool found on PATH (platform: {sys.platform})")
        # clip.exe reads the console code page; utf-16 keeps the emoji intact
        encoding = "utf-16" if self.command[0] == "clip" else "utf-8"
        try:
            subprocess.run(
                self.command,
                input=text.encode(encoding),
                check=True,
                timeout=self.timeout,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ClipboardError(f"{self.command[0]} failed: {e}") from e
        _log.debug("Copied %d chars via %s", len(text), self.command[0])


class NullClipboard(Clipboard):
    """Clipboard that is never available (headless runs, --no-clipboard)."""

    def copy(self, text: str) -> None:
        raise ClipboardError("clipboard disabled")
