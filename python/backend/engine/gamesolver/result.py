"""Outcome of a single search call."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from backend.models.board import Board, Move

NO_SOLUTION = -1


class SearchStatus(StrEnum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"  # state space exhausted, proven no solution
    EXHAUSTED = "exhausted"  # depth or node budget ran out, inconclusive


@dataclass
class SearchResult:
    """Moves, final board and statistics of one search.

    ``path_cost`` is ``-1`` unless the status is SOLVED.
    """

    algorithm: str
    status: SearchStatus
    path_cost: int = NO_SOLUTION
    moves: list[Move] = field(default_factory=list)
    final_board: Board | None = None
    closed_set_size: int = 0
    nodes_expanded: int = 0
    depth_reached: int | None = None
    reason: str = ""

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def move_count(self) -> int:
        return len(self.moves)
