"""Domain model for one directory listing.

This package contains non-UI listing primitives:
- immutable entry and snapshot datatypes
- single-level filesystem scanning with hidden-name filtering and ordering
- snapshot loading with nearest-readable-ancestor fallback
"""

from __future__ import annotations

from .types import (
    PARENT_ENTRY_NAME,
    UNKNOWN_MODIFIED,
    DirectorySnapshot,
    DirectoryUnavailableError,
    Entry,
)
from .fs import (
    HIDDEN_PREFIX,
    MODIFIED_TIME_FORMAT,
    entry_sort_key,
    format_modified_time,
    is_hidden_name,
    list_directory_entries,
)
from .snapshot import has_parent, load_snapshot, parent_entry

__all__ = [
    "PARENT_ENTRY_NAME",
    "UNKNOWN_MODIFIED",
    "DirectorySnapshot",
    "DirectoryUnavailableError",
    "Entry",
    "HIDDEN_PREFIX",
    "MODIFIED_TIME_FORMAT",
    "entry_sort_key",
    "format_modified_time",
    "is_hidden_name",
    "list_directory_entries",
    "has_parent",
    "load_snapshot",
    "parent_entry",
]
