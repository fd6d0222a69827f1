"""Command-line front door for lazybrowse.

Parses CLI options, resolves the starting directory, and hands a
``BrowserConfig`` to the runtime.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .app import run_browser
from .config import BrowserConfig, start_directory_for
from .editor import DEFAULT_EDITOR
from .ui_theme import available_theme_names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazybrowse",
        description="Browse directories in the terminal and open files in an editor.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Starting directory. Defaults to the current directory.",
    )
    parser.add_argument("-a", "--all", action="store_true", help="Show hidden files.")
    parser.add_argument(
        "--editor",
        default=DEFAULT_EDITOR,
        help=f"Editor command used to open files (default: {DEFAULT_EDITOR}).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the directory listing and exit without the interactive view.",
    )
    return parser


def parse_config(argv: list[str] | None = None, default_path: Path | None = None) -> BrowserConfig:
    """Parse ``argv`` into a ``BrowserConfig``.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    return BrowserConfig(
        start_path=start_directory_for(path),
        show_hidden=args.all,
        editor=args.editor,
        theme=args.theme,
        no_color=args.no_color,
        list_only=args.list,
    )


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch the browser."""
    run_browser(parse_config(argv, default_path))


if __name__ == "__main__":
    main()
