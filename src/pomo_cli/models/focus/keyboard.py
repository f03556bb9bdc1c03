"""Raw-mode keyboard input for timer controls."""

import os
import select
import sys
import termios
import tty
from typing import Protocol


class InputSource(Protocol):
    """Anything that can be polled for the next input byte."""

    def read_byte(self) -> bytes | None: ...


class KeyboardHandler:
    """Non-blocking single-byte reader over a raw-mode terminal."""

    def __init__(self, fd: int | None = None):
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.old_settings = None
        self._setup()

    def _setup(self):
        """Put the terminal into raw mode, remembering the old settings."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
        except termios.error:
            # Not a TTY (piped input), nothing to switch or restore
            return
        tty.setraw(self.fd)

    def read_byte(self) -> bytes | None:
        """
        Read one byte without blocking.

        Returns None when no input is pending. I/O errors propagate.
        """
        ready, _, _ = select.select([self.fd], [], [], 0)
        if not ready:
            return None
        data = os.read(self.fd, 1)
        return data or None

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None

    def __enter__(self) -> "KeyboardHandler":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
