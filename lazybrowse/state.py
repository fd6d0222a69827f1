"""Navigation state: current directory, listing, cursor and hidden flag.

The transitions on ``NavigationState`` are the only code that changes the
listing or the cursor. Each directory change goes through ``load_snapshot``
first and commits the result in one step.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .listing import DirectorySnapshot, Entry, has_parent, load_snapshot


def canonical_directory(path: Path) -> Path:
    """Resolve symlinks and ``.``/``..``; fall back to the path as given."""
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return path.absolute()


@dataclass
class NavigationState:
    current_dir: Path
    entries: tuple[Entry, ...] = ()
    selected: int = 0
    show_hidden: bool = False

    @classmethod
    def open(cls, path: Path, show_hidden: bool = False) -> NavigationState:
        """Build state for ``path``, loading its listing immediately."""
        state = cls(current_dir=canonical_directory(path), show_hidden=show_hidden)
        state.refresh()
        return state

    def _commit(self, snapshot: DirectorySnapshot) -> None:
        self.current_dir = snapshot.directory
        self.entries = snapshot.entries
        self.selected = 0

    def _load(self, directory: Path) -> None:
        self._commit(load_snapshot(directory, self.show_hidden))

    def refresh(self) -> None:
        """Reload the current directory with the current hidden flag."""
        self._load(self.current_dir)

    def descend(self, path: Path) -> bool:
        """Enter ``path`` when it is a directory; return whether state changed."""
        if not path.is_dir():
            return False
        self._load(canonical_directory(path))
        return True

    def ascend(self) -> bool:
        """Enter the parent directory; no-op at the filesystem root."""
        if not has_parent(self.current_dir):
            return False
        self._load(canonical_directory(self.current_dir.parent))
        return True

    def toggle_hidden(self) -> None:
        show_hidden = not self.show_hidden
        snapshot = load_snapshot(self.current_dir, show_hidden)
        self.show_hidden = show_hidden
        self._commit(snapshot)

    def move_cursor(self, delta: int) -> None:
        """Move the cursor by ``delta`` rows, clamped to the listing."""
        if not self.entries:
            self.selected = 0
            return
        self.selected = max(0, min(self.selected + delta, len(self.entries) - 1))

    def selected_entry(self) -> Entry | None:
        if not self.entries:
            return None
        return self.entries[self.selected]
