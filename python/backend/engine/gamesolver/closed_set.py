"""Closed set: canonical board states already discovered, with their best cost.

Keys are strings built from the interior of the board (the outer ring is
assumed to be permanent wall/boundary and is left out).  Each interior
cell ``v`` becomes ``chr(ord('A') + v)``, so ``-1 -> '@'``, ``0 -> 'A'``,
``1 -> 'B'`` and so on.  Entries are spread over a fixed number of buckets
by a position-weighted character sum and chained within a bucket.
"""

from __future__ import annotations

from backend.models.board import Board
from backend.models.settings import DEFAULT_BUCKET_COUNT

ABSENT = -1


class ClosedSet:
    """Chained hash table of state key -> best known path cost."""

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be positive, got {bucket_count}")
        self.bucket_count = bucket_count
        self._buckets: list[list[list]] = [[] for _ in range(bucket_count)]
        self._count = 0

    # -- keys -----------------------------------------------------------------

    @staticmethod
    def state_key(board: Board) -> str:
        w = board.width
        cells = board.cells
        return "".join(
            chr(ord("A") + cells[r * w + c])
            for r in range(1, board.height - 1)
            for c in range(1, w - 1)
        )

    def bucket_index(self, key: str) -> int:
        total = 0
        for i, ch in enumerate(key):
            total += ord(ch) * (i + 1)
        return total % self.bucket_count

    # -- table operations -----------------------------------------------------

    def insert(self, key: str, value: int) -> None:
        """Append a new entry; the caller guarantees *key* is not present."""
        self._buckets[self.bucket_index(key)].append([key, value])
        self._count += 1

    def get(self, key: str) -> int:
        """Return the stored cost for *key*, or ``ABSENT``."""
        entry = self._find(key)
        return ABSENT if entry is None else entry[1]

    def update(self, key: str, value: int) -> None:
        """Overwrite the cost of an existing entry; missing keys are ignored."""
        entry = self._find(key)
        if entry is not None:
            entry[1] = value

    def reset(self) -> None:
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: str) -> bool:
        return self._find(key) is not None

    # -- revisit policies -----------------------------------------------------

    def admit_once(self, key: str, cost: int) -> bool:
        """Insert-once policy: admit only states never seen before."""
        if self.get(key) != ABSENT:
            return False
        self.insert(key, cost)
        return True

    def admit_if_cheaper(self, key: str, cost: int) -> bool:
        """Reopening policy: admit new states and strictly cheaper revisits."""
        entry = self._find(key)
        if entry is None:
            self.insert(key, cost)
            return True
        if entry[1] > cost:
            entry[1] = cost
            return True
        return False

    # -- helpers --------------------------------------------------------------

    def _find(self, key: str) -> list | None:
        for entry in self._buckets[self.bucket_index(key)]:
            if entry[0] == key:
                return entry
        return None
