"""Editor launch helper for opening the selected file.

Runs the configured editor while temporarily leaving raw/alternate-screen TUI
mode. Returns an error message string instead of raising for UI-friendly
handling.
"""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path

from .terminal import TerminalController

DEFAULT_EDITOR = "nvim"


def editor_argv(editor: str, target: Path) -> list[str]:
    """Split ``editor`` like a shell would and append ``target``.

    Raises ``ValueError`` for unbalanced quoting or an empty command.
    """
    cmd = shlex.split(editor)
    if not cmd:
        raise ValueError("editor command is empty")
    return [*cmd, str(target)]


def launch_editor(target: Path, editor: str, terminal: TerminalController) -> str | None:
    try:
        argv = editor_argv(editor, target)
    except ValueError as exc:
        return f"Cannot edit: {exc}"

    with terminal.suspended():
        try:
            completed = subprocess.run(argv, check=False)
        except OSError as exc:
            return f"Failed to launch editor: {exc}"
    if completed.returncode != 0:
        return f"Editor exited with status {completed.returncode}"
    return None
