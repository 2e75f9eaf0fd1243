"""In-memory note collection with one-shot load and persist.

The file is read once at startup and written once at quit. Load is
best-effort: any failure yields an empty store. Persist is strict: failures
raise ``NoteStoreError`` so callers can report them.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from ..selectable import SelectableList
from .codec import NoteFormatError, decode_notes, encode_notes
from .model import Note

logger = logging.getLogger(__name__)

NOTES_FILENAME = "saved-notes.bin"


class NoteStoreError(RuntimeError):
    """Raised when the notes file cannot be written."""


def load_notes(path: Path) -> list[Note]:
    """Read notes from ``path``, returning ``[]`` when missing or unreadable."""
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        logger.debug("no notes file at %s", path)
        return []
    except OSError as exc:
        logger.warning("could not read notes file %s: %s", path, exc)
        return []
    try:
        notes = decode_notes(data)
    except NoteFormatError as exc:
        logger.warning("ignoring unreadable notes file %s: %s", path, exc)
        return []
    logger.info("loaded %d notes from %s", len(notes), path)
    return notes


def write_notes(path: Path, notes: Iterable[Note]) -> None:
    """Atomically replace ``path`` with the encoded ``notes``."""
    payload = encode_notes(notes)
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "wb",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(payload)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as exc:
        raise NoteStoreError(f"could not save notes to {path}: {exc}") from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass


class NoteStore:
    """Ordered notes for one session, backed by a single save file.

    ``notes`` doubles as the Notes pane list so the pane cursor always walks
    the live collection.
    """

    def __init__(self, path: Path, notes: Iterable[Note] = ()) -> None:
        self.path = path
        self.notes: SelectableList[Note] = SelectableList.with_items(notes)

    @classmethod
    def load(cls, path: Path) -> NoteStore:
        return cls(path, load_notes(path))

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self):
        return iter(self.notes)

    def is_empty(self) -> bool:
        return len(self.notes) == 0

    def add(self, note: Note) -> None:
        self.notes.append(note)

    def remove(self, index: int) -> Note:
        """Remove the note at ``index``; raises ``IndexError`` when out of range."""
        if not 0 <= index < len(self.notes):
            raise IndexError(f"note index out of range: {index}")
        return self.notes.pop(index)

    def persist(self) -> None:
        """Write every note to ``path``, replacing whatever was there."""
        notes = list(self.notes)
        write_notes(self.path, notes)
        logger.info("saved %d notes to %s", len(notes), self.path)


__all__ = ["NOTES_FILENAME", "NoteStore", "NoteStoreError", "load_notes", "write_notes"]
