"""Note records, the saved-notes codec, and the session note store."""

from .codec import FORMAT_VERSION, NoteFormatError, decode_notes, encode_notes
from .model import FALLBACK_TITLE, Note, note_from_buffer, utc_timestamp
from .store import NOTES_FILENAME, NoteStore, NoteStoreError, load_notes, write_notes

__all__ = [
    "FALLBACK_TITLE",
    "FORMAT_VERSION",
    "NOTES_FILENAME",
    "Note",
    "NoteFormatError",
    "NoteStore",
    "NoteStoreError",
    "decode_notes",
    "encode_notes",
    "load_notes",
    "note_from_buffer",
    "utc_timestamp",
    "write_notes",
]
