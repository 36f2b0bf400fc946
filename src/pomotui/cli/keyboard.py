"""Non-blocking keyboard input for the session loop (POSIX terminals)."""

from __future__ import annotations

import os
import select
import sys
import termios
import tty
from typing import TextIO

_CONTROL_KEYS = {"\x03": "ctrl+c"}


class TerminalError(Exception):
    """Raised when stdin cannot be used as an interactive keyboard."""


class KeyboardHandler:
    """Puts the terminal in cbreak mode and reads single keypresses.

    Use as a context manager so the original terminal settings are always
    restored.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self.fd: int | None = None
        self.old_settings: list | None = None

    def __enter__(self) -> KeyboardHandler:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def start(self) -> None:
        """Save the terminal settings and switch to cbreak mode."""
        if not self.stream.isatty():
            raise TerminalError("stdin is not an interactive terminal")
        try:
            self.fd = self.stream.fileno()
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"cannot configure terminal: {exc}") from exc

    def get_key(self) -> str | None:
        """Return the pending keypress, or ``None`` when nothing was typed.

        Letters are lower-cased and control characters are named
        (``"ctrl+c"``).
        """
        fd = self.fd if self.fd is not None else self.stream.fileno()
        ready, _, _ = select.select([fd], [], [], 0)
        if not ready:
            return None
        # unbuffered: select() only sees bytes still waiting on the fd
        char = os.read(fd, 1).decode("utf-8", errors="ignore")
        if not char:
            return None
        return _CONTROL_KEYS.get(char, char.lower())

    def stop(self) -> None:
        """Restore the saved terminal settings."""
        if self.fd is not None and self.old_settings is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None
