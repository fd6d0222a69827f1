"""Snapshot loading with ancestor fallback for unreadable directories.

Loading is a two-step protocol: pick the directory that can actually be
listed, then hand back the directory and its entries together. Callers commit
the snapshot in one assignment, so a failed fallback leaves their state as it
was.
"""

from __future__ import annotations

from pathlib import Path

from .fs import list_directory_entries
from .types import PARENT_ENTRY_NAME, DirectorySnapshot, DirectoryUnavailableError, Entry


def has_parent(directory: Path) -> bool:
    return directory.parent != directory


def parent_entry(directory: Path) -> Entry:
    """Synthetic ``..`` row pointing one level up."""
    return Entry(name=PARENT_ENTRY_NAME, path=directory.parent, is_dir=True, size=0, modified="")


def _candidate_directories(directory: Path):
    """Yield ``directory`` and then each ancestor up to the filesystem root."""
    yield directory
    yield from directory.parents


def load_snapshot(directory: Path, show_hidden: bool) -> DirectorySnapshot:
    """Load ``directory``, or its nearest readable ancestor.

    Raises ``DirectoryUnavailableError`` when nothing on the way to the root
    can be listed.
    """
    directory = directory.absolute()
    last_error: OSError | None = None
    for candidate in _candidate_directories(directory):
        try:
            children = list_directory_entries(candidate, show_hidden)
        except OSError as exc:
            last_error = exc
            continue
        rows: list[Entry] = []
        if has_parent(candidate):
            rows.append(parent_entry(candidate))
        rows.extend(children)
        return DirectorySnapshot(directory=candidate, entries=tuple(rows))
    raise DirectoryUnavailableError(directory, last_error)


__all__ = [
    "has_parent",
    "parent_entry",
    "load_snapshot",
]
