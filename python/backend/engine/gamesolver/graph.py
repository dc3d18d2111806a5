"""Search-node graph stored in an index-addressed arena."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Board, Move


@dataclass(frozen=True)
class SearchNode:
    board: Board
    path_cost: int
    move: Move | None = None
    parent: int | None = None


class NodeArena:
    """Owns every node created during one search.

    Parents are referenced by index, and the arena is dropped as a whole
    when the search returns.
    """

    def __init__(self) -> None:
        self._nodes: list[SearchNode] = []

    def add(self, board: Board, move: Move | None = None, parent: int | None = None) -> int:
        path_cost = 0 if parent is None else self._nodes[parent].path_cost + 1
        self._nodes.append(SearchNode(board, path_cost, move, parent))
        return len(self._nodes) - 1

    def path_to(self, index: int) -> list[Move]:
        """Moves from the root down to the node at *index*."""
        moves: list[Move] = []
        node = self._nodes[index]
        while node.parent is not None:
            moves.append(node.move)
            node = self._nodes[node.parent]
        moves.reverse()
        return moves

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)
