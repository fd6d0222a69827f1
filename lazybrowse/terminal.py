"""Terminal control helpers for the browser session.

Owns raw-mode lifecycle, alternate-screen switching, and cursor visibility.
The editor handoff suspends the session and re-enters it afterwards.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
LEAVE_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"
CLEAR_SCREEN_SEQUENCE = b"\x1b[H\x1b[2J"


class TerminalController:
    """Manage terminal mode transitions for one browser session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self.needs_full_redraw = True

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)
        self.needs_full_redraw = True

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen and restore the tty."""
        os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def clear(self) -> None:
        """Wipe the screen and mark the next frame as a full repaint."""
        os.write(self.stdout_fd, CLEAR_SCREEN_SEQUENCE)
        self.needs_full_redraw = False

    @contextlib.contextmanager
    def session(self):
        """Context manager that brackets the whole browser run with TUI mode."""
        try:
            self.enable_tui_mode()
            yield self
        finally:
            self.disable_tui_mode()

    @contextlib.contextmanager
    def suspended(self):
        """Hand the terminal to another process, then take it back.

        TUI mode is re-entered even when the body raises, so the browser never
        continues with a cooked terminal.
        """
        self.disable_tui_mode()
        try:
            yield
        finally:
            self.enable_tui_mode()
