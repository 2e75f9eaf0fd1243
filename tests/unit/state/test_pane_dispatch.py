"""Tests for pane transitions driven through the key dispatch table.

Each test feeds key tokens to ``dispatch_key`` and checks the resulting pane,
composer mode, list selections, buffer, and store contents.
"""

from __future__ import annotations

import os
import re
import unittest
from pathlib import Path
from unittest import mock

from notepane.input import KEY_TABLE, dispatch_key, read_key
from notepane.notes import FALLBACK_TITLE, Note, NoteStore
from notepane.state import AppState, ComposerAction, ComposerMode, MenuAction, Pane


def _make_state(notes: list[Note] | None = None) -> AppState:
    return AppState(store=NoteStore(Path("/tmp/notepane-test-unused.bin"), notes or []))


def _sample_note(title: str = "a") -> Note:
    return Note(title=title, text="", timestamp="2024-01-01 00:00:00")


def _feed(state: AppState, *keys: str) -> list[bool]:
    return [dispatch_key(state, key) for key in keys]


class InitialStateTests(unittest.TestCase):
    def test_starts_in_menu_with_first_action_selected(self) -> None:
        state = _make_state()
        self.assertIs(state.pane, Pane.MENU)
        self.assertIs(state.composer_mode, ComposerMode.NAVIGATION)
        self.assertEqual(state.menu.selected(), 0)
        self.assertIs(state.menu.selected_item(), MenuAction.NEW_NOTE)
        self.assertIsNone(state.composer.selected())
        self.assertEqual(state.buffer, "")

    def test_every_pane_and_mode_has_a_key_table(self) -> None:
        self.assertEqual(
            set(KEY_TABLE),
            {
                (Pane.MENU, None),
                (Pane.NOTES, None),
                (Pane.COMPOSER, ComposerMode.NAVIGATION),
                (Pane.COMPOSER, ComposerMode.EDITING),
            },
        )


class MenuAndNotesTransitionTests(unittest.TestCase):
    def test_right_is_refused_when_store_is_empty(self) -> None:
        state = _make_state()
        self.assertEqual(_feed(state, "RIGHT"), [False])
        self.assertIs(state.pane, Pane.MENU)
        self.assertEqual(state.menu.selected(), 0)

    def test_right_enters_notes_and_moves_selection(self) -> None:
        state = _make_state([_sample_note("a"), _sample_note("b")])
        _feed(state, "RIGHT")
        self.assertIs(state.pane, Pane.NOTES)
        self.assertEqual(state.notes.selected(), 0)
        self.assertIsNone(state.menu.selected())

    def test_up_down_move_notes_cursor_with_wraparound(self) -> None:
        state = _make_state([_sample_note("a"), _sample_note("b"), _sample_note("c")])
        _feed(state, "RIGHT", "UP")
        self.assertEqual(state.notes.selected(), 2)
        _feed(state, "DOWN", "DOWN")
        self.assertEqual(state.notes.selected(), 1)

    def test_left_returns_to_menu_and_resets_selections(self) -> None:
        state = _make_state([_sample_note()])
        _feed(state, "DOWN", "RIGHT", "LEFT")
        self.assertIs(state.pane, Pane.MENU)
        self.assertEqual(state.menu.selected(), 0)
        self.assertIsNone(state.notes.selected())

    def test_menu_up_down_wrap_between_actions(self) -> None:
        state = _make_state()
        _feed(state, "UP")
        self.assertIs(state.menu.selected_item(), MenuAction.QUIT)
        _feed(state, "DOWN")
        self.assertIs(state.menu.selected_item(), MenuAction.NEW_NOTE)

    def test_enter_on_new_note_opens_composer_navigation(self) -> None:
        state = _make_state()
        _feed(state, "ENTER")
        self.assertIs(state.pane, Pane.COMPOSER)
        self.assertIs(state.composer_mode, ComposerMode.NAVIGATION)
        self.assertIs(state.composer.selected_item(), ComposerAction.START_WRITING)

    def test_unbound_keys_are_ignored(self) -> None:
        state = _make_state()
        self.assertEqual(_feed(state, "x", "LEFT", "TAB", "UNKNOWN", "BACKSPACE"), [False] * 5)
        self.assertIs(state.pane, Pane.MENU)
        self.assertEqual(state.buffer, "")


class QuitTransitionTests(unittest.TestCase):
    def test_quit_keys_per_pane(self) -> None:
        cases = [
            ((), "q"),
            ((), "ESC"),
            (("UP",), "ENTER"),
            (("RIGHT",), "q"),
            (("ENTER",), "q"),
        ]
        for prefix, quit_key in cases:
            state = _make_state([_sample_note()])
            self.assertFalse(any(_feed(state, *prefix)), msg=f"prefix={prefix}")
            self.assertTrue(dispatch_key(state, quit_key), msg=f"prefix={prefix} key={quit_key}")
            self.assertTrue(state.quit_requested)

    def test_escape_in_notes_pane_does_not_quit(self) -> None:
        state = _make_state([_sample_note()])
        _feed(state, "RIGHT")
        self.assertFalse(dispatch_key(state, "ESC"))
        self.assertIs(state.pane, Pane.NOTES)

    def test_alt_modified_key_neither_quits_nor_leaves_editing(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1bx\x1bx")
            menu_key = read_key(read_fd, timeout_ms=20)
            editing_key = read_key(read_fd, timeout_ms=20)
        finally:
            os.close(read_fd)
            os.close(write_fd)

        state = _make_state()
        self.assertFalse(dispatch_key(state, menu_key))
        self.assertFalse(state.quit_requested)
        self.assertIs(state.pane, Pane.MENU)

        _feed(state, "ENTER", "ENTER")
        self.assertFalse(dispatch_key(state, editing_key))
        self.assertTrue(state.editing)
        self.assertEqual(state.buffer, "")

    def test_q_while_editing_is_typed_text(self) -> None:
        state = _make_state()
        _feed(state, "ENTER", "ENTER")
        self.assertFalse(dispatch_key(state, "q"))
        self.assertEqual(state.buffer, "q")

    def test_repeated_quit_is_idempotent_and_persists_once(self) -> None:
        state = _make_state()
        with mock.patch.object(state.store, "persist") as persist:
            self.assertEqual(_feed(state, "q", "q", "ENTER", "DOWN"), [True] * 4)
            state.finish()
            state.finish()
        persist.assert_called_once_with()
        self.assertIs(state.pane, Pane.MENU)
        self.assertEqual(state.menu.selected(), 0)


class ComposerTransitionTests(unittest.TestCase):
    def _compose(self, text: str) -> AppState:
        state = _make_state()
        _feed(state, "ENTER", "ENTER")
        self.assertIs(state.composer_mode, ComposerMode.EDITING)
        for ch in text:
            dispatch_key(state, "ENTER" if ch == "\n" else ch)
        dispatch_key(state, "ESC")
        self.assertIs(state.composer_mode, ComposerMode.NAVIGATION)
        return state

    def test_typing_enter_and_backspace_edit_buffer(self) -> None:
        state = _make_state()
        _feed(state, "ENTER", "ENTER", "h", "i", "ENTER", "x", "BACKSPACE", "BACKSPACE", "BACKSPACE", "BACKSPACE")
        self.assertEqual(state.buffer, "")
        self.assertFalse(dispatch_key(state, "BACKSPACE"))
        self.assertEqual(state.buffer, "")

    def test_editing_ignores_non_printable_tokens(self) -> None:
        state = _make_state()
        _feed(state, "ENTER", "ENTER", "UP", "TAB", "\x03", "a")
        self.assertEqual(state.buffer, "a")

    def test_save_parses_buffer_into_note_and_returns_to_menu(self) -> None:
        state = self._compose("My Title\nline one\nline two")
        _feed(state, "DOWN", "DOWN", "ENTER")
        self.assertIs(state.pane, Pane.MENU)
        self.assertEqual(state.buffer, "")
        self.assertIsNone(state.composer.selected())
        self.assertEqual(len(state.store), 1)
        note = state.notes.items[0]
        self.assertEqual(note.title, "My Title")
        self.assertEqual(note.text, "line oneline two")
        self.assertRegex(note.timestamp, re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$"))

    def test_save_with_empty_buffer_uses_fallback_title(self) -> None:
        state = _make_state()
        _feed(state, "ENTER", "UP", "ENTER")
        self.assertIs(state.pane, Pane.MENU)
        self.assertEqual(len(state.store), 1)
        self.assertEqual(state.notes.items[0].title, FALLBACK_TITLE)
        self.assertEqual(state.notes.items[0].text, "")

    def test_cancel_discards_buffer(self) -> None:
        state = self._compose("draft")
        _feed(state, "DOWN", "ENTER")
        self.assertIs(state.pane, Pane.MENU)
        self.assertEqual(state.buffer, "")
        self.assertIsNone(state.composer.selected())
        self.assertTrue(state.store.is_empty())

    def test_escape_from_navigation_keeps_buffer(self) -> None:
        state = self._compose("draft")
        _feed(state, "ESC")
        self.assertIs(state.pane, Pane.MENU)
        self.assertEqual(state.buffer, "draft")
        self.assertIsNone(state.composer.selected())
        _feed(state, "ENTER")
        self.assertIs(state.pane, Pane.COMPOSER)
        self.assertEqual(state.buffer, "draft")

    def test_composer_cursor_tracks_last_line(self) -> None:
        state = self._compose("ab\ncde")
        self.assertEqual(state.composer_cursor(), (3, 2))
        state.buffer = ""
        self.assertEqual(state.composer_cursor(), (0, 1))


if __name__ == "__main__":
    unittest.main()
