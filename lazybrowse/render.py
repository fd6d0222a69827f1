"""Render projection from navigation state to a terminal frame.

``build_frame`` is pure: the same state, viewport and message always give the
same ``Frame``. ``write_frame`` is the only function here that touches the
terminal.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .ansi import fit_ansi_line, pad_to_width, sanitize_terminal_text
from .listing import Entry
from .state import NavigationState
from .ui_theme import DEFAULT_THEME, UITheme

HELP_TEXT = "↑/↓: Navigate  Enter: Open dir/file  Backspace: Up  h: Toggle hidden  q: Quit"
FILES_TITLE = "Files"
HELP_TITLE = "Help"
DIR_ICON = "📁"
FILE_ICON = "📄"
NAME_COLUMN_WIDTH = 40
SIZE_COLUMN_WIDTH = 12
DIR_SIZE_LABEL = "DIR"
STATUS_ROWS = 1
HELP_BOX_ROWS = 3
BOX_BORDER_ROWS = 2

_SIZE_UNITS: tuple[str, ...] = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


@dataclass(frozen=True)
class Frame:
    """Fully composed screen rows, top to bottom."""

    lines: tuple[str, ...]

    def text(self) -> str:
        return "\r\n".join(self.lines)


def format_size(num_bytes: int) -> str:
    """Format a byte count with binary prefixes, e.g. ``5 B`` or ``1.50 KiB``."""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    value = float(num_bytes)
    for unit in _SIZE_UNITS[1:]:
        value /= 1024.0
        if round(value, 2) < 1024.0:
            break
    return f"{value:.2f} {unit}"


def format_entry_label(entry: Entry) -> str:
    name = sanitize_terminal_text(entry.name)
    if entry.is_dir:
        return f"{DIR_ICON} {name}/"
    return f"{FILE_ICON} {name}"


def format_entry_row(entry: Entry) -> str:
    """Plain row text: label, size (or ``DIR``) and modified time."""
    size = DIR_SIZE_LABEL if entry.is_dir else format_size(entry.size)
    return f"{pad_to_width(format_entry_label(entry), NAME_COLUMN_WIDTH)} {size:<{SIZE_COLUMN_WIDTH}} {entry.modified}"


def list_viewport_rows(height: int) -> int:
    """Number of entry rows that fit inside the files box."""
    return max(0, height - STATUS_ROWS - HELP_BOX_ROWS - BOX_BORDER_ROWS)


def list_scroll_start(selected: int, total: int, rows: int) -> int:
    """First visible entry index keeping ``selected`` on screen."""
    if rows <= 0 or total <= rows:
        return 0
    start = max(0, selected - rows + 1)
    return min(start, total - rows)


def _styled(style: str, text: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def _box_top(title: str, inner_width: int, theme: UITheme) -> str:
    label = title[:inner_width]
    fill = "─" * max(0, inner_width - len(label))
    return (
        _styled(theme.border, "┌", theme)
        + _styled(theme.title, label, theme)
        + _styled(theme.border, f"{fill}┐", theme)
    )


def _box_bottom(inner_width: int, theme: UITheme) -> str:
    return _styled(theme.border, f"└{'─' * inner_width}┘", theme)


def _box_row(content: str, theme: UITheme) -> str:
    side = _styled(theme.border, "│", theme)
    return f"{side}{content}{side}"


def _status_line(state: NavigationState, width: int, message: str, theme: UITheme) -> str:
    text = f" Current directory: {sanitize_terminal_text(str(state.current_dir))} "
    if message:
        text += f"{theme.status_message}│ {sanitize_terminal_text(message)} {theme.reset}{theme.status_bar}"
    return _styled(theme.status_bar, fit_ansi_line(text, width), theme)


def _entry_line(entry: Entry, is_selected: bool, inner_width: int, theme: UITheme) -> str:
    row = fit_ansi_line(format_entry_row(entry), inner_width)
    if is_selected:
        return _styled(theme.selected, row, theme)
    if entry.is_dir:
        return _styled(theme.dir_row, row, theme)
    return _styled(theme.file_row, row, theme)


def build_frame(
    state: NavigationState,
    width: int,
    height: int,
    theme: UITheme = DEFAULT_THEME,
    message: str = "",
) -> Frame:
    """Project ``state`` onto a ``width`` x ``height`` frame."""
    width = max(2, width)
    inner_width = width - 2
    rows = list_viewport_rows(height)
    start = list_scroll_start(state.selected, len(state.entries), rows)

    lines: list[str] = [_status_line(state, width, message, theme)]

    lines.append(_box_top(FILES_TITLE, inner_width, theme))
    visible = state.entries[start : start + rows]
    for offset, entry in enumerate(visible):
        is_selected = start + offset == state.selected
        lines.append(_box_row(_entry_line(entry, is_selected, inner_width, theme), theme))
    for _ in range(rows - len(visible)):
        lines.append(_box_row(" " * inner_width, theme))
    lines.append(_box_bottom(inner_width, theme))

    lines.append(_box_top(HELP_TITLE, inner_width, theme))
    help_row = _styled(theme.help_text, fit_ansi_line(HELP_TEXT, inner_width), theme)
    lines.append(_box_row(help_row, theme))
    lines.append(_box_bottom(inner_width, theme))

    return Frame(lines=tuple(lines[: max(1, height)]))


def build_listing_lines(state: NavigationState) -> list[str]:
    """Unstyled listing used for non-interactive output."""
    lines = [sanitize_terminal_text(str(state.current_dir))]
    lines.extend(format_entry_row(entry).rstrip() for entry in state.entries)
    return lines


def write_frame(frame: Frame, stdout_fd: int) -> None:
    """Home the cursor, clear, and draw ``frame`` in one write."""
    out = "\033[H\033[J" + frame.text()
    os.write(stdout_fd, out.encode("utf-8", errors="replace"))
