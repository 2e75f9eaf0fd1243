"""Session bootstrap: load notes, build state, and run the loop."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from ..input import dispatch_key, read_key
from ..notes import Note, NoteStore
from ..render import FrameRenderer
from ..state import AppState
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_state(notes_path: Path) -> AppState:
    """Load the note store and return the initial menu-focused state."""
    return AppState(store=NoteStore.load(notes_path))


def write_note_listing(notes: Iterable[Note], out: TextIO) -> None:
    """Print notes as ``timestamp  title`` followed by an indented body line."""
    for note in notes:
        out.write(f"{note.timestamp}  {note.title}\n")
        if note.text:
            out.write(f"    {note.text}\n")


def run_app(notes_path: Path, theme_name: str | None, no_color: bool, tick_ms: int, list_only: bool = False) -> None:
    """Run one interactive session against ``notes_path``.

    Falls back to printing the saved notes when ``list_only`` is set or stdin
    is not a terminal.
    """
    if list_only or not os.isatty(sys.stdin.fileno()):
        write_note_listing(NoteStore.load(notes_path), sys.stdout)
        return

    state = build_state(notes_path)
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    renderer = FrameRenderer(resolve_theme(theme_name, no_color=no_color), stdout_fd)
    logger.info("starting session with %d notes from %s", len(state.store), notes_path)
    run_main_loop(
        state,
        terminal,
        stdin_fd,
        RuntimeLoopTiming(tick_seconds=tick_ms / 1000.0),
        RuntimeLoopCallbacks(
            render=renderer,
            read_key=read_key,
            dispatch_key=dispatch_key,
        ),
    )
