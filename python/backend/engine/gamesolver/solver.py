"""Sliding brick puzzle solver."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from backend.engine.gamesolver.result import SearchResult, SearchStatus
from backend.engine.gamesolver.strategies import (
    AStarSearch,
    BreadthFirstSearch,
    DepthFirstSearch,
    DepthLimitedSearch,
    IterativeDeepeningSearch,
    SearchStrategy,
)
from backend.models.board import Board, Move


class Algorithm(StrEnum):
    bfs = "bfs"
    dfs = "dfs"
    dls = "dls"
    ids = "ids"
    astar = "astar"


_STRATEGIES: dict[Algorithm, type[SearchStrategy]] = {
    Algorithm.bfs: BreadthFirstSearch,
    Algorithm.dfs: DepthFirstSearch,
    Algorithm.dls: DepthLimitedSearch,
    Algorithm.ids: IterativeDeepeningSearch,
    Algorithm.astar: AStarSearch,
}

# Strategies that take a ``max_depth`` option.
DEPTH_BOUNDED = {Algorithm.dls, Algorithm.ids}


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def create(algorithm: str, **options: Any) -> SearchStrategy:
        """Instantiate the strategy registered under *algorithm*.

        Raises:
            ValueError: If no strategy has that name
        """
        try:
            key = Algorithm(algorithm)
        except ValueError:
            available = ", ".join(a.value for a in Algorithm)
            raise ValueError(
                f"Unknown algorithm: {algorithm}. Available: {available}"
            ) from None
        return _STRATEGIES[key](**options)

    @staticmethod
    def solve(board: Board, algorithm: str = Algorithm.bfs, **options: Any) -> SearchResult:
        """Search *board* with *algorithm*; ``path_cost`` is -1 if unsolved."""
        return Solver.create(algorithm, **options).search(board)

    @staticmethod
    def hint(board: Board) -> Move | None:
        """Return the first move of an optimal solution, or ``None``."""
        result = Solver.solve(board, Algorithm.bfs)
        return result.moves[0] if result.moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach a completed state."""
        return Solver.solve(board, Algorithm.bfs).status is SearchStatus.SOLVED

    @staticmethod
    def strategy_info() -> list[dict[str, str]]:
        return [
            {"name": cls.name, "description": cls.description}
            for cls in _STRATEGIES.values()
        ]
