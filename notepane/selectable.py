"""Cursor-over-sequence helper shared by every navigable list.

Menu actions, saved notes, and composer actions all use ``SelectableList``.
Navigation wraps around both ends; an empty list never holds a selection.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """Ordered items plus an optional selected index."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._selected: int | None = None

    @classmethod
    def with_items(cls, items: Iterable[T]) -> SelectableList[T]:
        """Build a list over ``items`` with nothing selected."""
        return cls(items)

    @property
    def items(self) -> list[T]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def selected(self) -> int | None:
        return self._selected

    def selected_item(self) -> T | None:
        """Return the item under the cursor, or ``None`` when unselected."""
        if self._selected is None:
            return None
        return self._items[self._selected]

    def select(self, index: int | None) -> None:
        """Select ``index`` directly; ``None`` clears the selection.

        Raises ``IndexError`` for positions outside the current items.
        """
        if index is None:
            self._selected = None
            return
        if not 0 <= index < len(self._items):
            raise IndexError(f"selection index out of range: {index}")
        self._selected = index

    def select_first(self) -> None:
        if not self._items:
            return
        self._selected = 0

    def unselect(self) -> None:
        self._selected = None

    def next(self) -> None:
        """Move the cursor down one row, wrapping from last to first."""
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
            return
        self._selected = (self._selected + 1) % len(self._items)

    def previous(self) -> None:
        """Move the cursor up one row, wrapping from first to last."""
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
            return
        self._selected = (self._selected - 1) % len(self._items)

    def append(self, item: T) -> None:
        self._items.append(item)

    def pop(self, index: int) -> T:
        """Remove and return the item at ``index``.

        The selection is pulled back so it still points at a valid row, and is
        cleared once the list becomes empty.
        """
        item = self._items.pop(index)
        if not self._items:
            self._selected = None
        elif self._selected is not None:
            if self._selected > index or self._selected >= len(self._items):
                self._selected -= 1
        return item

    def __repr__(self) -> str:
        return f"SelectableList(items={self._items!r}, selected={self._selected!r})"


__all__ = ["SelectableList"]
