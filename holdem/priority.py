"""A max-priority queue."""

from __future__ import annotations

import heapq
import itertools
from typing import Any


class MaxHeap:
    """Priority queue returning the item with the highest priority first."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int, Any]] = []
        self._counter = itertools.count()

    def push(self, data: Any, priority: int) -> None:
        """Add ``data`` with the given integer priority."""
        heapq.heappush(self._entries, (-priority, next(self._counter), data))

    def top(self) -> Any:
        """Return the highest-priority item, or ``None`` if the heap is empty."""
        if not self._entries:
            return None
        return self._entries[0][2]

    def pop(self) -> Any:
        """Remove and return the highest-priority item."""
        if not self._entries:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._entries)[2]

    def __len__(self) -> int:
        return len(self._entries)