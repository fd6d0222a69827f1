"""Tests for the pure frame projection and size formatting.

Frames are compared as plain data, so rendering can be checked without a
terminal.
"""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from lazybrowse.ansi import display_width, strip_ansi
from lazybrowse.listing import Entry
from lazybrowse.render import (
    HELP_TEXT,
    Frame,
    build_frame,
    build_listing_lines,
    format_entry_row,
    format_size,
    list_scroll_start,
    list_viewport_rows,
    write_frame,
)
from lazybrowse.state import NavigationState
from lazybrowse.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _state(selected: int = 0, file_count: int = 2) -> NavigationState:
    root = Path("/tmp/x")
    entries = [
        Entry(name="..", path=Path("/tmp"), is_dir=True, modified=""),
        Entry(name="sub", path=root / "sub", is_dir=True, modified="2024-01-02 03:04:05"),
    ]
    for idx in range(file_count):
        entries.append(
            Entry(
                name=f"file{idx:02d}.txt",
                path=root / f"file{idx:02d}.txt",
                is_dir=False,
                size=5,
                modified="2024-01-02 03:04:05",
            )
        )
    return NavigationState(current_dir=root, entries=tuple(entries), selected=selected)


class FormatSizeTests(unittest.TestCase):
    def test_bytes_are_whole_numbers(self) -> None:
        self.assertEqual(format_size(0), "0 B")
        self.assertEqual(format_size(5), "5 B")
        self.assertEqual(format_size(1023), "1023 B")

    def test_larger_sizes_use_binary_prefixes(self) -> None:
        self.assertEqual(format_size(1024), "1.00 KiB")
        self.assertEqual(format_size(1536), "1.50 KiB")
        self.assertEqual(format_size(5 * 1024 * 1024), "5.00 MiB")
        self.assertEqual(format_size(3 * 1024**3), "3.00 GiB")
        self.assertEqual(format_size(1023 * 1024), "1023.00 KiB")
        self.assertEqual(format_size(1024 * 1024 - 1), "1.00 MiB")


class EntryRowTests(unittest.TestCase):
    def test_directory_row_has_icon_suffix_and_dir_label(self) -> None:
        row = format_entry_row(Entry(name="sub", path=Path("/tmp/x/sub"), is_dir=True, modified="2024-01-02 03:04:05"))
        self.assertTrue(row.startswith("📁 sub/"))
        self.assertIn(" DIR ", row)
        self.assertTrue(row.endswith("2024-01-02 03:04:05"))

    def test_file_row_has_size_and_modified_columns(self) -> None:
        row = format_entry_row(Entry(name="a.txt", path=Path("/tmp/x/a.txt"), is_dir=False, size=5, modified="Unknown"))
        self.assertTrue(row.startswith("📄 a.txt"))
        # Name column is 40 cells, then one space, then a 12-wide size column.
        self.assertEqual(display_width(row), 40 + 1 + 12 + 1 + len("Unknown"))
        self.assertIn("5 B", row)

    def test_control_characters_in_names_are_escaped(self) -> None:
        row = format_entry_row(Entry(name="bad\x1b[2Jname", path=Path("/tmp/bad"), is_dir=False))
        self.assertNotIn("\x1b", row)
        self.assertIn("bad\\x1b[2Jname", row)

    def test_undecodable_name_bytes_become_replacement_characters(self) -> None:
        row = format_entry_row(Entry(name="bad\udcff.txt", path=Path("/tmp/bad"), is_dir=False))
        self.assertTrue(row.startswith("📄 bad�.txt"))
        self.assertIsInstance(row.encode("utf-8"), bytes)


class BuildFrameTests(unittest.TestCase):
    def test_frame_has_status_list_and_help_regions(self) -> None:
        frame = build_frame(_state(), width=100, height=12, theme=PLAIN_THEME)
        plain = [strip_ansi(line) for line in frame.lines]

        self.assertEqual(len(frame.lines), 12)
        self.assertTrue(plain[0].startswith(" Current directory: /tmp/x "))
        self.assertTrue(plain[1].startswith("┌Files"))
        self.assertIn("📁 ../", plain[2])
        self.assertIn("📁 sub/", plain[3])
        self.assertIn("📄 file00.txt", plain[4])
        self.assertTrue(plain[-3].startswith("┌Help"))
        self.assertIn(HELP_TEXT, plain[-2])
        self.assertTrue(plain[-1].startswith("└"))

    def test_every_row_fills_the_width(self) -> None:
        frame = build_frame(_state(file_count=3), width=100, height=14, theme=DEFAULT_THEME)
        for line in frame.lines:
            self.assertEqual(display_width(line), 100)

    def test_selected_row_is_inverted_and_directories_are_colored(self) -> None:
        frame = build_frame(_state(selected=2), width=100, height=12, theme=DEFAULT_THEME)
        self.assertIn(DEFAULT_THEME.selected, frame.lines[4])
        self.assertIn(DEFAULT_THEME.dir_row, frame.lines[3])
        self.assertNotIn(DEFAULT_THEME.selected, frame.lines[3])

    def test_same_state_yields_identical_frames(self) -> None:
        state = _state(selected=1)
        first = build_frame(state, width=80, height=20, theme=DEFAULT_THEME, message="hi")
        second = build_frame(state, width=80, height=20, theme=DEFAULT_THEME, message="hi")
        self.assertEqual(first, second)

    def test_list_scrolls_to_keep_selection_visible(self) -> None:
        state = _state(selected=20, file_count=29)
        frame = build_frame(state, width=100, height=10, theme=PLAIN_THEME)
        rows = list_viewport_rows(10)
        self.assertEqual(rows, 4)
        list_rows = [strip_ansi(line) for line in frame.lines[2 : 2 + rows]]
        self.assertIn(state.entries[20].name, list_rows[-1])
        self.assertIn(PLAIN_THEME.selected, frame.lines[2 + rows - 1])

    def test_status_message_is_shown_on_status_line(self) -> None:
        frame = build_frame(_state(), width=120, height=12, theme=PLAIN_THEME, message="Editor exited with status 1")
        self.assertIn("Editor exited with status 1", strip_ansi(frame.lines[0]))

    def test_short_terminals_are_clipped_to_height(self) -> None:
        frame = build_frame(_state(), width=60, height=3, theme=PLAIN_THEME)
        self.assertEqual(len(frame.lines), 3)


class ScrollStartTests(unittest.TestCase):
    def test_scroll_start_bounds(self) -> None:
        self.assertEqual(list_scroll_start(0, 3, 10), 0)
        self.assertEqual(list_scroll_start(3, 31, 4), 0)
        self.assertEqual(list_scroll_start(20, 31, 4), 17)
        self.assertEqual(list_scroll_start(30, 31, 4), 27)
        self.assertEqual(list_scroll_start(5, 10, 0), 0)


class OutputTests(unittest.TestCase):
    def test_write_frame_homes_clears_and_joins_with_crlf(self) -> None:
        with mock.patch("lazybrowse.render.os.write") as write_mock:
            write_frame(Frame(lines=("one", "two")), 1)

        write_mock.assert_called_once_with(1, b"\x1b[H\x1b[Jone\r\ntwo")

    def test_listing_lines_are_plain_text(self) -> None:
        lines = build_listing_lines(_state(file_count=1))
        self.assertEqual(lines[0], "/tmp/x")
        self.assertTrue(lines[1].startswith("📁 ../"))
        self.assertTrue(lines[3].startswith("📄 file00.txt"))
        for line in lines:
            self.assertNotIn("\x1b", line)


if __name__ == "__main__":
    unittest.main()
