"""Terminal control helpers for the checklist session.

Owns raw-mode lifecycle, alternate-screen switching, and cursor visibility.
Restoration always runs every step, even when an earlier one fails.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

logger = logging.getLogger(__name__)

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
LEAVE_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"


class TerminalError(RuntimeError):
    """Raised when the terminal could not be returned to its normal state."""


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalError(f"could not read terminal attributes: {exc}") from exc

    def enable_tui_mode(self) -> None:
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise TerminalError(f"could not enter raw mode: {exc}") from exc
        # Enter alternate screen and hide cursor.
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen, and restore tty attributes."""
        failures: list[BaseException] = []
        try:
            os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        except OSError as exc:
            logger.error("could not leave alternate screen: %s", exc)
            failures.append(exc)
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        except (OSError, termios.error) as exc:
            logger.error("could not restore tty attributes: %s", exc)
            failures.append(exc)
        if failures:
            raise TerminalError("terminal state was not fully restored") from failures[0]

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
