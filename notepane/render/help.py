"""Info panel text and per-pane key hints.

Presentation-only constants; rendering code decides where they go.
"""

from __future__ import annotations

from ..state import AppState, ComposerMode, Pane

INFO_TITLE = "Info"

# (is_heading, text) pairs shown in the Info panel while the menu is active.
INFO_LINES: tuple[tuple[bool, str], ...] = (
    (True, "How to navigate the app:"),
    (False, ""),
    (False, "Use the up and down arrow keys to scroll the lists"),
    (False, "Use the left and right arrow keys to switch from the Action and Notes screen"),
    (False, "Press enter to press a button"),
    (False, ""),
    (True, "Press 'q' to quit the app or use the quit button"),
)

STATUS_HINTS: dict[tuple[Pane, ComposerMode | None], str] = {
    (Pane.MENU, None): "Up/Down move  Enter select  Right notes  q/Esc quit",
    (Pane.NOTES, None): "Up/Down move  Left menu  q quit",
    (Pane.COMPOSER, ComposerMode.NAVIGATION): "Up/Down move  Enter select  Esc menu  q quit",
    (Pane.COMPOSER, ComposerMode.EDITING): "Type to write  Enter newline  Backspace delete  Esc done",
}


def status_hint(state: AppState) -> str:
    return STATUS_HINTS.get(state.state_key(), "")
