"""Key dispatch table for every pane and composer mode.

Each ``(Pane, ComposerMode | None)`` pair owns one ``KeyComboRegistry``.
Handlers mutate the ``AppState`` they are given and return ``True`` only when
the key ends the session.
"""

from __future__ import annotations

from .key_registry import KeyComboBinding, KeyComboRegistry
from ..state import AppState, ComposerAction, ComposerMode, MenuAction, Pane

QUIT_KEYS: tuple[str, ...] = ("q",)


def _quit(state: AppState) -> bool:
    state.request_quit()
    return True


def _menu_activate(state: AppState) -> bool:
    action = state.menu.selected_item()
    if action is MenuAction.NEW_NOTE:
        state.open_composer()
    elif action is MenuAction.QUIT:
        return _quit(state)
    return False


def _composer_activate(state: AppState) -> bool:
    action = state.composer.selected_item()
    if action is ComposerAction.START_WRITING:
        state.start_writing()
    elif action is ComposerAction.CANCEL:
        state.cancel_composer()
    elif action is ComposerAction.SAVE:
        state.save_composer()
    return False


def _newline(state: AppState) -> bool:
    state.type_text("\n")
    return False


def _type_character(state: AppState, key: str) -> bool | None:
    if len(key) != 1 or not key.isprintable():
        return None
    state.type_text(key)
    return False


def _step(select_list_name: str, forward: bool):
    def handler(state: AppState) -> bool:
        items = getattr(state, select_list_name)
        if forward:
            items.next()
        else:
            items.previous()
        return False

    return handler


def _effect(method_name: str):
    def handler(state: AppState) -> bool:
        getattr(state, method_name)()
        return False

    return handler


def build_key_table() -> dict[tuple[Pane, ComposerMode | None], KeyComboRegistry]:
    """Build the per-state key registries."""
    menu = KeyComboRegistry().register_bindings(
        KeyComboBinding(QUIT_KEYS + ("ESC",), _quit),
        KeyComboBinding(("DOWN",), _step("menu", True)),
        KeyComboBinding(("UP",), _step("menu", False)),
        KeyComboBinding(("RIGHT",), _effect("enter_notes")),
        KeyComboBinding(("ENTER",), _menu_activate),
    )
    notes = KeyComboRegistry().register_bindings(
        KeyComboBinding(QUIT_KEYS, _quit),
        KeyComboBinding(("DOWN",), _step("notes", True)),
        KeyComboBinding(("UP",), _step("notes", False)),
        KeyComboBinding(("LEFT",), _effect("leave_notes")),
    )
    composer_navigation = KeyComboRegistry().register_bindings(
        KeyComboBinding(QUIT_KEYS, _quit),
        KeyComboBinding(("DOWN",), _step("composer", True)),
        KeyComboBinding(("UP",), _step("composer", False)),
        KeyComboBinding(("ESC",), _effect("leave_composer")),
        KeyComboBinding(("ENTER",), _composer_activate),
    )
    composer_editing = KeyComboRegistry(fallback=_type_character).register_bindings(
        KeyComboBinding(("ESC",), _effect("stop_writing")),
        KeyComboBinding(("ENTER",), _newline),
        KeyComboBinding(("BACKSPACE",), _effect("backspace")),
    )
    return {
        (Pane.MENU, None): menu,
        (Pane.NOTES, None): notes,
        (Pane.COMPOSER, ComposerMode.NAVIGATION): composer_navigation,
        (Pane.COMPOSER, ComposerMode.EDITING): composer_editing,
    }


KEY_TABLE = build_key_table()


def dispatch_key(state: AppState, key: str) -> bool:
    """Apply ``key`` to ``state`` and return whether the session should end.

    Keys with no binding in the current pane/mode are ignored. Once a quit has
    been requested every further key reports quit again without side effects.
    """
    if state.quit_requested:
        return True
    registry = KEY_TABLE[state.state_key()]
    return bool(registry.dispatch(key, state))


__all__ = ["KEY_TABLE", "QUIT_KEYS", "build_key_table", "dispatch_key"]
