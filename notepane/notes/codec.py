"""Versioned binary encoding for the saved-notes file.

Layout, big-endian::

    b"NPAD"  u16 version  u32 count
    count * (u32 len + utf-8 title, u32 len + utf-8 text, u32 len + utf-8 timestamp)

Decoding is strict: unknown versions, short reads, and trailing bytes all
raise ``NoteFormatError``.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable

from .model import Note

MAGIC = b"NPAD"
FORMAT_VERSION = 0

_HEADER = struct.Struct(">4sHI")
_LENGTH = struct.Struct(">I")


class NoteFormatError(ValueError):
    """Raised when saved-notes bytes cannot be decoded."""


def _pack_str(value: str) -> bytes:
    raw = value.encode("utf-8")
    return _LENGTH.pack(len(raw)) + raw


def encode_notes(notes: Iterable[Note]) -> bytes:
    """Serialize ``notes`` in order into the versioned binary format."""
    items = list(notes)
    out: list[bytes] = [_HEADER.pack(MAGIC, FORMAT_VERSION, len(items))]
    for note in items:
        out.append(_pack_str(note.title))
        out.append(_pack_str(note.text))
        out.append(_pack_str(note.timestamp))
    return b"".join(out)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.offset = 0

    def take(self, size: int) -> bytes:
        end = self.offset + size
        if end > len(self.data):
            raise NoteFormatError(f"truncated data at offset {self.offset}")
        chunk = self.data[self.offset:end]
        self.offset = end
        return chunk

    def string(self) -> str:
        (length,) = _LENGTH.unpack(self.take(_LENGTH.size))
        try:
            return self.take(length).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise NoteFormatError(f"invalid utf-8 near offset {self.offset}") from exc


def decode_notes(data: bytes) -> list[Note]:
    """Parse bytes produced by ``encode_notes`` back into notes."""
    reader = _Reader(data)
    magic, version, count = _HEADER.unpack(reader.take(_HEADER.size))
    if magic != MAGIC:
        raise NoteFormatError(f"bad magic {magic!r}")
    if version != FORMAT_VERSION:
        raise NoteFormatError(f"unsupported format version {version}")
    notes: list[Note] = []
    for _ in range(count):
        title = reader.string()
        text = reader.string()
        timestamp = reader.string()
        notes.append(Note(title=title, text=text, timestamp=timestamp))
    if reader.offset != len(data):
        raise NoteFormatError(f"{len(data) - reader.offset} trailing bytes")
    return notes


__all__ = ["FORMAT_VERSION", "MAGIC", "NoteFormatError", "decode_notes", "encode_notes"]
