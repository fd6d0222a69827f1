"""Startup configuration assembled from command-line flags.

Nothing is read from disk or the environment and nothing is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .editor import DEFAULT_EDITOR


@dataclass(frozen=True)
class BrowserConfig:
    start_path: Path
    show_hidden: bool = False
    editor: str = DEFAULT_EDITOR
    theme: str | None = None
    no_color: bool = False
    list_only: bool = False


def start_directory_for(path: Path) -> Path:
    """Return ``path`` for directories, or the containing directory for files."""
    if path.is_dir():
        return path
    return path.parent
