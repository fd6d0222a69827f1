"""Application wiring: build state, pick interactive or plain output, run.

Fatal listing errors are turned into ``SystemExit`` here, after the terminal
session has already been released by the loop.
"""

from __future__ import annotations

import sys

from .config import BrowserConfig
from .listing import DirectoryUnavailableError
from .loop import RuntimeLoopOptions, run_main_loop
from .render import build_listing_lines
from .state import NavigationState
from .terminal import TerminalController
from .ui_theme import resolve_theme


def _stdio_is_tty() -> bool:
    return sys.stdout.isatty() and sys.stdin.isatty()


def run_browser(config: BrowserConfig) -> None:
    """Open ``config.start_path`` and browse it until the user quits.

    Falls back to printing the listing when ``list_only`` is set or stdio is
    not attached to a terminal.
    """
    try:
        state = NavigationState.open(config.start_path, config.show_hidden)
        if config.list_only or not _stdio_is_tty():
            sys.stdout.write("\n".join(build_listing_lines(state)) + "\n")
            return
        stdin_fd = sys.stdin.fileno()
        terminal = TerminalController(stdin_fd, sys.stdout.fileno())
        options = RuntimeLoopOptions(
            theme=resolve_theme(config.theme, no_color=config.no_color),
            editor=config.editor,
        )
        run_main_loop(state, terminal, stdin_fd, options)
    except DirectoryUnavailableError as exc:
        raise SystemExit(str(exc)) from exc
