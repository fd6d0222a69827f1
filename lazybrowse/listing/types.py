"""Domain datatypes for one directory listing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

PARENT_ENTRY_NAME = ".."
UNKNOWN_MODIFIED = "Unknown"


@dataclass(frozen=True)
class Entry:
    """One visible directory child with display metadata."""

    name: str
    path: Path
    is_dir: bool
    size: int = 0
    modified: str = UNKNOWN_MODIFIED


@dataclass(frozen=True)
class DirectorySnapshot:
    """Directory that was actually loaded plus its ordered entries."""

    directory: Path
    entries: tuple[Entry, ...]


class DirectoryUnavailableError(OSError):
    """Raised when neither a directory nor any of its ancestors can be listed."""

    def __init__(self, directory: Path, reason: BaseException | None = None) -> None:
        self.directory = directory
        self.reason = reason
        detail = f": {reason}" if reason is not None else ""
        super().__init__(f"Cannot read directory: {directory}{detail}")


__all__ = [
    "PARENT_ENTRY_NAME",
    "UNKNOWN_MODIFIED",
    "Entry",
    "DirectorySnapshot",
    "DirectoryUnavailableError",
]
