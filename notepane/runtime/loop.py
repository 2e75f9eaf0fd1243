"""Main interactive event loop for the terminal UI.

Coordinates tick timing, rendering, and key dispatch.
Feature logic lives in the injected callbacks; this module is wiring only.
"""

from __future__ import annotations

import logging
import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..state import AppState
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    tick_seconds: float


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``.

    Keeping the loop callback-driven isolates feature logic outside the core
    event loop and makes behavior easier to unit test.
    """

    render: Callable[[AppState, int, int], None]
    read_key: Callable[[int, int], str]
    dispatch_key: Callable[[AppState, str], bool]


def normalize_enter(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Collapse CR, LF, and CRLF into one ``ENTER`` token.

    Returns ``(key_or_None, skip_next_lf)``; ``None`` means the byte was the LF
    half of a CRLF pair and should be dropped. A timeout (``""``) closes the
    pairing window, so a later lone LF counts as its own ``ENTER``.
    """
    if skip_next_lf and key == "ENTER_LF":
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the interactive loop until a quit transition, then persist notes.

    Each iteration renders the current state, waits at most the rest of the
    current tick for one key, and dispatches it. The note store is written before this
    function returns; a persistence error propagates to the caller.
    """
    ops = callbacks
    skip_next_lf = False
    last_tick = time.monotonic()

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            ops.render(state, term.columns, term.lines)

            elapsed = time.monotonic() - last_tick
            timeout_ms = int(max(0.0, timing.tick_seconds - elapsed) * 1000)
            try:
                key = ops.read_key(stdin_fd, timeout_ms)
            except KeyboardInterrupt:
                # Ignore SIGINT-style interrupts; only a quit transition ends the session.
                continue

            normalized, skip_next_lf = normalize_enter(key, skip_next_lf)
            if normalized and ops.dispatch_key(state, normalized):
                break

            if time.monotonic() - last_tick >= timing.tick_seconds:
                last_tick = time.monotonic()

    state.finish()
    logger.info("session ended")
