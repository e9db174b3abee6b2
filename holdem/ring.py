"""A circular sequence with a movable cursor, used to seat players around a table."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Ring(Generic[T]):
    """Items arranged in a circle, with a cursor that can walk in either direction.

    The cursor methods (``first``, ``last``, ``next``, ``prev``, ``current``)
    return ``None`` when the ring is empty or the cursor is unset.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._cursor: int | None = None

    def push_front(self, item: T) -> None:
        """Insert an item at the head of the ring."""
        self._items.insert(0, item)
        if self._cursor is not None:
            self._cursor += 1

    def push_back(self, item: T) -> None:
        """Insert an item at the tail of the ring."""
        self._items.append(item)

    def pop_front(self) -> T:
        """Remove and return the head item."""
        if not self._items:
            raise IndexError("pop from an empty ring")
        if self._cursor is not None:
            self._cursor = None if self._cursor == 0 else self._cursor - 1
        return self._items.pop(0)

    def pop_back(self) -> T:
        """Remove and return the tail item."""
        if not self._items:
            raise IndexError("pop from an empty ring")
        if self._cursor == len(self._items) - 1:
            self._cursor = None
        return self._items.pop()

    def first(self) -> T | None:
        """Move the cursor to the head and return its item."""
        if not self._items:
            return None
        self._cursor = 0
        return self._items[0]

    def last(self) -> T | None:
        """Move the cursor to the tail and return its item."""
        if not self._items:
            return None
        self._cursor = len(self._items) - 1
        return self._items[-1]

    def next(self) -> T | None:
        """Advance the cursor one step, wrapping from tail to head."""
        if self._cursor is None:
            return None
        self._cursor = (self._cursor + 1) % len(self._items)
        return self._items[self._cursor]

    def prev(self) -> T | None:
        """Move the cursor back one step, wrapping from head to tail."""
        if self._cursor is None:
            return None
        self._cursor = (self._cursor - 1) % len(self._items)
        return self._items[self._cursor]

    def current(self) -> T | None:
        """Return the item under the cursor without moving it."""
        if self._cursor is None:
            return None
        return self._items[self._cursor]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()
        self._cursor = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate once around the ring from the head; the cursor is untouched."""
        return iter(list(self._items))