"""Application state and pane transitions.

``AppState`` is the single mutable aggregate for a session. The transition
methods below are the only code that changes ``pane`` or ``composer_mode``;
the input dispatcher decides which one to call for a given key.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .notes import Note, NoteStore, note_from_buffer
from .selectable import SelectableList

logger = logging.getLogger(__name__)


class Pane(Enum):
    MENU = "menu"
    NOTES = "notes"
    COMPOSER = "composer"


class ComposerMode(Enum):
    NAVIGATION = "navigation"
    EDITING = "editing"


class MenuAction(Enum):
    NEW_NOTE = "New note"
    QUIT = "Quit"


class ComposerAction(Enum):
    START_WRITING = "Start writing"
    CANCEL = "Cancel"
    SAVE = "Save"


def _menu_actions() -> SelectableList[MenuAction]:
    actions = SelectableList.with_items(MenuAction)
    actions.select_first()
    return actions


def _composer_actions() -> SelectableList[ComposerAction]:
    return SelectableList.with_items(ComposerAction)


@dataclass
class AppState:
    store: NoteStore
    menu: SelectableList[MenuAction] = field(default_factory=_menu_actions)
    composer: SelectableList[ComposerAction] = field(default_factory=_composer_actions)
    pane: Pane = Pane.MENU
    composer_mode: ComposerMode = ComposerMode.NAVIGATION
    buffer: str = ""
    quit_requested: bool = False
    persisted: bool = False

    @property
    def notes(self) -> SelectableList[Note]:
        return self.store.notes

    @property
    def editing(self) -> bool:
        return self.pane is Pane.COMPOSER and self.composer_mode is ComposerMode.EDITING

    def state_key(self) -> tuple[Pane, ComposerMode | None]:
        """Return the ``(pane, sub-mode)`` pair used to pick key bindings."""
        if self.pane is Pane.COMPOSER:
            return self.pane, self.composer_mode
        return self.pane, None

    def _switch(self, pane: Pane, mode: ComposerMode = ComposerMode.NAVIGATION) -> None:
        logger.debug("pane %s/%s -> %s/%s", self.pane.value, self.composer_mode.value, pane.value, mode.value)
        self.pane = pane
        self.composer_mode = mode

    def enter_notes(self) -> bool:
        """Focus the Notes pane; refused while there are no notes."""
        if self.store.is_empty():
            return False
        self.notes.select_first()
        self.menu.unselect()
        self._switch(Pane.NOTES)
        return True

    def leave_notes(self) -> None:
        self.menu.select_first()
        self.notes.unselect()
        self._switch(Pane.MENU)

    def open_composer(self) -> None:
        self.composer.select_first()
        self._switch(Pane.COMPOSER)

    def start_writing(self) -> None:
        self._switch(Pane.COMPOSER, ComposerMode.EDITING)

    def stop_writing(self) -> None:
        self._switch(Pane.COMPOSER, ComposerMode.NAVIGATION)

    def cancel_composer(self) -> None:
        """Discard the draft and return to the menu."""
        self.buffer = ""
        self.composer.unselect()
        self._switch(Pane.MENU)

    def leave_composer(self) -> None:
        """Return to the menu, keeping the draft for the next visit."""
        self.composer.unselect()
        self._switch(Pane.MENU)

    def save_composer(self, now: datetime | None = None) -> Note:
        """Turn the draft into a note, append it to the store, and go back to the menu."""
        note = note_from_buffer(self.buffer, now)
        self.store.add(note)
        logger.info("added note %r", note.title)
        self.buffer = ""
        self.composer.unselect()
        self._switch(Pane.MENU)
        return note

    def type_text(self, text: str) -> None:
        self.buffer += text

    def backspace(self) -> None:
        self.buffer = self.buffer[:-1]

    def request_quit(self) -> None:
        self.quit_requested = True

    def finish(self) -> None:
        """Persist the store exactly once for this session."""
        if self.persisted:
            return
        self.store.persist()
        self.persisted = True

    def composer_cursor(self) -> tuple[int, int]:
        """Return ``(column, line)`` of the caret after the last buffered character.

        ``column`` is the length of the last buffer line and ``line`` is the
        number of lines, both counted from the panel origin.
        """
        lines = self.buffer.split("\n")
        return len(lines[-1]), len(lines)


__all__ = ["AppState", "ComposerAction", "ComposerMode", "MenuAction", "Pane"]
