"""Frontier containers holding arena indices of nodes awaiting expansion."""

from __future__ import annotations

import heapq
import itertools
from collections import deque


class FifoQueue:
    """First-in first-out frontier (breadth-first)."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def push(self, index: int, priority: int = 0) -> None:
        self._items.append(index)

    def pop(self) -> int:
        return self._items.popleft()

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class FiloStack:
    """First-in last-out frontier (depth-first family)."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, index: int, priority: int = 0) -> None:
        self._items.append(index)

    def pop(self) -> int:
        return self._items.pop()

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class PriorityFrontier:
    """Min-priority frontier (A*).

    Pops the entry with the smallest priority; among equal priorities the
    one pushed first wins.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int]] = []
        self._counter = itertools.count()

    def push(self, index: int, priority: int = 0) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), index))

    def pop(self) -> int:
        return heapq.heappop(self._heap)[2]

    def clear(self) -> None:
        self._heap.clear()
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)
