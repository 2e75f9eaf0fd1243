"""Note record and composer-buffer parsing."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

FALLBACK_TITLE = "New note"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Note:
    """One saved note. Notes are never edited after creation."""

    title: str
    text: str
    timestamp: str


def utc_timestamp(now: datetime | None = None) -> str:
    """Format ``now`` (default: current time) as a UTC ``YYYY-MM-DD HH:MM:SS`` string."""
    moment = now if now is not None else datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)


def note_from_buffer(buffer: str, now: datetime | None = None) -> Note:
    """Split a composer buffer into a note.

    The first line becomes the title. Remaining lines are joined with no
    separator, so ``"T\\nab\\ncd"`` yields text ``"abcd"``. An empty first line
    falls back to ``FALLBACK_TITLE``.
    """
    lines = buffer.split("\n")
    title = lines[0] if lines and lines[0] else FALLBACK_TITLE
    text = "".join(lines[1:])
    return Note(title=title, text=text, timestamp=utc_timestamp(now))


__all__ = ["FALLBACK_TITLE", "TIMESTAMP_FORMAT", "Note", "note_from_buffer", "utc_timestamp"]
