"""Tests for the tick-driven main loop.

Keys come from a scripted reader and rendering is captured, so the loop can
run to completion without a terminal.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
import unittest
from unittest import mock

from notepane.input import dispatch_key
from notepane.notes import NoteStore
from notepane.runtime import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from notepane.runtime.loop import normalize_enter
from notepane.state import AppState, Pane


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0

    @contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


class _ScriptedKeys:
    """Return scripted keys, then fail loudly if the loop keeps reading."""

    def __init__(self, keys: list[str]) -> None:
        self.keys = list(keys)
        self.timeouts: list[int] = []

    def __call__(self, _fd: int, timeout_ms: int) -> str:
        self.timeouts.append(timeout_ms)
        if not self.keys:
            raise AssertionError("loop kept reading after script ended")
        return self.keys.pop(0)


def _make_state() -> AppState:
    return AppState(store=NoteStore(Path("/tmp/notepane-loop-unused.bin")))


def _run(state: AppState, keys: list[str], *, dispatch=dispatch_key, tick_seconds: float = 0.25):
    terminal = _FakeTerminal()
    reader = _ScriptedKeys(keys)
    renders: list[tuple[Pane, str]] = []

    def render(current: AppState, _columns: int, _lines: int) -> None:
        renders.append((current.pane, current.buffer))

    with mock.patch.object(state.store, "persist") as persist:
        run_main_loop(
            state,
            terminal,
            0,
            RuntimeLoopTiming(tick_seconds=tick_seconds),
            RuntimeLoopCallbacks(render=render, read_key=reader, dispatch_key=dispatch),
        )
    return terminal, reader, renders, persist


class NormalizeEnterTests(unittest.TestCase):
    def test_crlf_collapses_to_single_enter(self) -> None:
        key, skip = normalize_enter("ENTER_CR", False)
        self.assertEqual((key, skip), ("ENTER", True))
        self.assertEqual(normalize_enter("ENTER_LF", skip), (None, False))

    def test_lone_lf_and_other_keys_pass_through(self) -> None:
        self.assertEqual(normalize_enter("ENTER_LF", False), ("ENTER", False))
        self.assertEqual(normalize_enter("a", True), ("a", False))

    def test_timeout_clears_pending_crlf_pairing(self) -> None:
        _key, skip = normalize_enter("ENTER_CR", False)
        self.assertEqual(normalize_enter("", skip), ("", False))
        self.assertEqual(normalize_enter("ENTER_LF", False), ("ENTER", False))


class RunMainLoopTests(unittest.TestCase):
    def test_quit_persists_once_and_restores_terminal(self) -> None:
        state = _make_state()
        terminal, reader, renders, persist = _run(state, ["", "DOWN", "", "q"])
        persist.assert_called_once_with()
        self.assertTrue(state.persisted)
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))
        self.assertEqual(reader.keys, [])
        self.assertGreaterEqual(len(renders), 2)

    def test_timeouts_never_exceed_tick(self) -> None:
        state = _make_state()
        _terminal, reader, _renders, _persist = _run(state, ["", "", "q"], tick_seconds=0.05)
        self.assertTrue(all(0 <= timeout <= 50 for timeout in reader.timeouts))

    def test_every_iteration_renders_even_when_idle(self) -> None:
        state = _make_state()
        _terminal, _reader, renders, _persist = _run(state, ["", "", "", "q"], tick_seconds=0.001)
        self.assertEqual(len(renders), 4)

    def test_renders_reflect_state_after_each_key(self) -> None:
        state = _make_state()
        _terminal, _reader, renders, _persist = _run(state, ["", "ENTER", "", "q"])
        self.assertEqual(
            renders,
            [(Pane.MENU, ""), (Pane.MENU, ""), (Pane.COMPOSER, ""), (Pane.COMPOSER, "")],
        )

    def test_crlf_enter_is_dispatched_once(self) -> None:
        state = _make_state()
        _run(state, ["ENTER_CR", "ENTER_LF", "q"])
        self.assertIs(state.pane, Pane.COMPOSER)
        self.assertTrue(state.quit_requested)

    def test_lf_after_a_timeout_is_its_own_enter(self) -> None:
        state = _make_state()
        _run(state, ["ENTER", "ENTER", "ENTER_CR", "", "ENTER_LF", "ESC", "q"])
        self.assertEqual(state.buffer, "\n\n")
        self.assertTrue(state.quit_requested)

    def test_keyboard_interrupt_while_waiting_is_ignored(self) -> None:
        state = _make_state()
        keys = iter([KeyboardInterrupt(), "q"])

        def reader(_fd: int, _timeout_ms: int) -> str:
            item = next(keys)
            if isinstance(item, BaseException):
                raise item
            return item

        with mock.patch.object(state.store, "persist") as persist:
            run_main_loop(
                state,
                _FakeTerminal(),
                0,
                RuntimeLoopTiming(tick_seconds=0.01),
                RuntimeLoopCallbacks(render=lambda *_args: None, read_key=reader, dispatch_key=dispatch_key),
            )
        persist.assert_called_once_with()

    def test_dispatch_error_propagates_without_persisting(self) -> None:
        state = _make_state()

        def broken_dispatch(_state: AppState, _key: str) -> bool:
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            _run(state, ["a"], dispatch=broken_dispatch)
        self.assertFalse(state.persisted)


if __name__ == "__main__":
    unittest.main()
