"""Main interactive event loop for the browser.

One iteration draws a frame, blocks for one key and dispatches it. Drawing is
unconditional; there are no timers and no background work.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from .editor import DEFAULT_EDITOR, launch_editor
from .input import EOF_KEY, read_key
from .keys import BrowserKeyContext, build_key_registry, handle_browser_key
from .render import build_frame, write_frame
from .state import NavigationState
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme


@dataclass(frozen=True)
class RuntimeLoopOptions:
    """Presentation and editor settings used by ``run_main_loop``."""

    theme: UITheme = DEFAULT_THEME
    editor: str = DEFAULT_EDITOR


def run_main_loop(
    state: NavigationState,
    terminal: TerminalController,
    stdin_fd: int,
    options: RuntimeLoopOptions,
) -> None:
    """Run the browser until a quit key or end of input.

    The terminal session is entered here and released on every exit path.
    A status message from the editor handoff is shown for one frame.
    """
    status_message = ""

    def open_file(path: Path) -> None:
        nonlocal status_message
        status_message = launch_editor(path, options.editor, terminal) or ""

    registry = build_key_registry(BrowserKeyContext(state=state, open_file=open_file))

    with terminal.session():
        while True:
            if terminal.needs_full_redraw:
                terminal.clear()
            term = shutil.get_terminal_size((80, 24))
            frame = build_frame(state, term.columns, term.lines, options.theme, status_message)
            write_frame(frame, terminal.stdout_fd)

            key = read_key(stdin_fd)
            if key == EOF_KEY:
                return
            status_message = ""
            if handle_browser_key(key, registry):
                return
