"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the status bar, box chrome and listing rows.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    selected: str
    status_bar: str
    status_message: str
    border: str
    title: str
    dir_row: str
    file_row: str
    help_text: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    selected="\033[30;47m",
    status_bar="\033[37;44m",
    status_message="\033[1;33;44m",
    border="\033[38;5;245m",
    title="\033[1m",
    dir_row="\033[34m",
    file_row="",
    help_text="\033[38;5;252m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    selected="\033[30;48;5;153m",
    status_bar="\033[38;5;231;48;5;24m",
    status_message="\033[1;38;5;215;48;5;24m",
    border="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    dir_row="\033[1;38;5;45m",
    file_row="\033[38;5;252m",
    help_text="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    selected="\033[7m",
    status_bar="",
    status_message="",
    border="",
    title="",
    dir_row="",
    file_row="",
    help_text="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
