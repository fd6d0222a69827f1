"""Filesystem scanning for one directory level.

Children are read with ``os.scandir`` and metadata follows symlinks, so a
link to a directory lists as a directory. Children whose metadata cannot be
read are left out instead of failing the whole listing.
"""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from .types import UNKNOWN_MODIFIED, Entry

HIDDEN_PREFIX = "."
MODIFIED_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_modified_time(mtime: float | None) -> str:
    """Format a POSIX timestamp in local time, or ``"Unknown"``."""
    if mtime is None:
        return UNKNOWN_MODIFIED
    try:
        return datetime.fromtimestamp(mtime).strftime(MODIFIED_TIME_FORMAT)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN_MODIFIED


def is_hidden_name(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def entry_sort_key(entry: Entry) -> tuple[bool, str, str]:
    """Directories first, then case-insensitive name, then exact name."""
    return (not entry.is_dir, entry.name.lower(), entry.name)


def list_directory_entries(directory: Path, show_hidden: bool) -> list[Entry]:
    """List visible children of ``directory`` in display order.

    Raises ``OSError`` when ``directory`` itself cannot be scanned.
    """
    entries: list[Entry] = []
    with os.scandir(directory) as children:
        for child in children:
            name = child.name
            if not show_hidden and is_hidden_name(name):
                continue
            try:
                stat = child.stat()
                is_dir = child.is_dir()
            except OSError:
                continue
            entries.append(
                Entry(
                    name=name,
                    path=Path(child.path),
                    is_dir=is_dir,
                    size=0 if is_dir else int(stat.st_size),
                    modified=format_modified_time(stat.st_mtime),
                )
            )

    entries.sort(key=entry_sort_key)
    return entries


__all__ = [
    "HIDDEN_PREFIX",
    "MODIFIED_TIME_FORMAT",
    "format_modified_time",
    "is_hidden_name",
    "entry_sort_key",
    "list_directory_entries",
]
