"""Key dispatch for the browser.

A small registry maps key tokens to handlers. Handlers return ``True`` to
end the session; unbound keys are ignored.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .state import NavigationState

QUIT_KEYS: tuple[str, ...] = ("q",)
TOGGLE_HIDDEN_KEYS: tuple[str, ...] = ("h",)
CURSOR_UP_KEYS: tuple[str, ...] = ("UP",)
CURSOR_DOWN_KEYS: tuple[str, ...] = ("DOWN",)
ACTIVATE_KEYS: tuple[str, ...] = ("ENTER_CR", "ENTER_LF")
ASCEND_KEYS: tuple[str, ...] = ("BACKSPACE",)


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Exact-match key dispatch table."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key`` and return its result."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


@dataclass(frozen=True)
class BrowserKeyContext:
    """State and bound operations required for browser key handling."""

    state: NavigationState
    open_file: Callable[[Path], None]


def activate_selection(state: NavigationState, open_file: Callable[[Path], None]) -> None:
    """Descend into the selected directory or hand the selected file to ``open_file``."""
    entry = state.selected_entry()
    if entry is None:
        return
    if entry.is_dir:
        state.descend(entry.path)
    else:
        open_file(entry.path)


def build_key_registry(context: BrowserKeyContext) -> KeyComboRegistry:
    state = context.state

    def quit_action() -> bool:
        return True

    def toggle_hidden_action() -> bool:
        state.toggle_hidden()
        return False

    def cursor_up_action() -> bool:
        state.move_cursor(-1)
        return False

    def cursor_down_action() -> bool:
        state.move_cursor(1)
        return False

    def activate_action() -> bool:
        activate_selection(state, context.open_file)
        return False

    def ascend_action() -> bool:
        state.ascend()
        return False

    return KeyComboRegistry().register_bindings(
        KeyComboBinding(QUIT_KEYS, quit_action),
        KeyComboBinding(TOGGLE_HIDDEN_KEYS, toggle_hidden_action),
        KeyComboBinding(CURSOR_UP_KEYS, cursor_up_action),
        KeyComboBinding(CURSOR_DOWN_KEYS, cursor_down_action),
        KeyComboBinding(ACTIVATE_KEYS, activate_action),
        KeyComboBinding(ASCEND_KEYS, ascend_action),
    )


def handle_browser_key(key: str, registry: KeyComboRegistry) -> bool:
    """Handle one key and return ``True`` when the browser should quit."""
    return bool(registry.dispatch(key))
