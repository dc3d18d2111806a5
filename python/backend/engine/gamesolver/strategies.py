"""Search strategies over the sliding brick state space.

Every strategy shares one expansion loop.  They differ in three ways: the
frontier that picks the next node (FIFO, FILO or lowest f(n)), the closed
set's revisit policy, and an optional depth bound.

- Breadth-first and A* use insert-once: a state already in the closed set is
  never admitted again.
- The depth-first family reopens a state when it is reached by a strictly
  cheaper path.

Each call to ``search`` builds its own closed set, frontier and node arena,
so strategy instances can be reused and carry no state between calls.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

from backend.engine.gamesolver.closed_set import ClosedSet
from backend.engine.gamesolver.frontier import FifoQueue, FiloStack, PriorityFrontier
from backend.engine.gamesolver.graph import NodeArena, SearchNode
from backend.engine.gamesolver.heuristic import manhattan_distance
from backend.engine.gamesolver.result import SearchResult, SearchStatus
from backend.models.board import Board
from backend.models.settings import DEFAULT_BUCKET_COUNT, DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

Frontier = FifoQueue | FiloStack | PriorityFrontier
AdmitPolicy = Callable[[str, int], bool]


class SearchStrategy(ABC):
    """Base class for all search strategies.

    Attributes:
        name: Short identifier used by the solver registry
        description: Human-readable description for the CLI
        node_budget: Maximum closed-set size before the search gives up
        bucket_count: Number of buckets in the closed set
    """

    name: str = "base"
    description: str = "Base strategy"

    def __init__(
        self,
        node_budget: int | None = None,
        bucket_count: int = DEFAULT_BUCKET_COUNT,
    ) -> None:
        if node_budget is not None and node_budget < 1:
            raise ValueError(f"node_budget must be positive, got {node_budget}")
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be positive, got {bucket_count}")
        self.node_budget = node_budget
        self.bucket_count = bucket_count

    def search(self, board: Board) -> SearchResult:
        """Search from *board* until a completed state is reached.

        Returns a result whose ``path_cost`` is ``-1`` unless solved.
        """
        closed_set = ClosedSet(self.bucket_count)
        logger.debug(
            f"[{self.name}] Searching {board.height}x{board.width} board, "
            f"max brick {board.max_brick}"
        )
        result = self._search(board, closed_set)
        logger.info(
            f"[{self.name}] {result.status.value}: cost {result.path_cost}, "
            f"{result.closed_set_size} states, {result.nodes_expanded} expanded"
        )
        return result

    @abstractmethod
    def _search(self, board: Board, closed_set: ClosedSet) -> SearchResult:
        pass

    def _priority(self, node: SearchNode) -> int:
        return 0

    def _explore(
        self,
        board: Board,
        closed_set: ClosedSet,
        frontier: Frontier,
        admit: AdmitPolicy,
        max_depth: int | None = None,
    ) -> tuple[SearchResult, bool]:
        """Run the shared expansion loop.

        Returns the result and whether the search ended only because nodes
        were left unexpanded at *max_depth*.
        """
        if board.is_complete():
            return self._result(SearchStatus.SOLVED, closed_set, 0,
                                path_cost=0, final_board=board), False

        arena = NodeArena()
        root = arena.add(board)
        frontier.push(root, self._priority(arena[root]))
        closed_set.insert(closed_set.state_key(board.normalized()), 0)

        expanded = 0
        cutoff = False
        try:
            while frontier:
                index = frontier.pop()
                node = arena[index]

                if max_depth is not None and node.path_cost >= max_depth:
                    cutoff = True
                    continue

                expanded += 1
                child_cost = node.path_cost + 1
                for move in node.board.all_available_moves():
                    child = node.board.apply_move(move).normalized()

                    if child.is_complete():
                        return self._result(
                            SearchStatus.SOLVED, closed_set, expanded,
                            path_cost=child_cost,
                            moves=arena.path_to(index) + [move],
                            final_board=child,
                        ), False

                    if not admit(closed_set.state_key(child), child_cost):
                        continue
                    child_index = arena.add(child, move, index)
                    frontier.push(child_index, self._priority(arena[child_index]))

                if self.node_budget is not None and len(closed_set) > self.node_budget:
                    logger.warning(
                        f"[{self.name}] Node budget of {self.node_budget} exceeded "
                        f"after {expanded} expansions"
                    )
                    return self._result(
                        SearchStatus.EXHAUSTED, closed_set, expanded,
                        reason=f"node budget of {self.node_budget} exceeded",
                    ), False
        except MemoryError:
            frontier.clear()
            del arena
            logger.error(
                f"[{self.name}] Out of memory with {len(closed_set)} states "
                f"in the closed set"
            )
            return self._result(
                SearchStatus.EXHAUSTED, closed_set, expanded,
                reason="out of memory",
            ), False

        if cutoff:
            return self._result(
                SearchStatus.EXHAUSTED, closed_set, expanded,
                reason=f"depth limit {max_depth} reached",
            ), True
        return self._result(SearchStatus.UNSOLVABLE, closed_set, expanded), False

    def _result(
        self,
        status: SearchStatus,
        closed_set: ClosedSet,
        expanded: int,
        **kwargs,
    ) -> SearchResult:
        return SearchResult(
            algorithm=self.name,
            status=status,
            closed_set_size=len(closed_set),
            nodes_expanded=expanded,
            **kwargs,
        )


class BreadthFirstSearch(SearchStrategy):
    """FIFO expansion with insert-once dedup.

    The first discovery of any state is at its minimal depth, so the
    returned path cost is optimal for unit-cost moves.
    """

    name = "bfs"
    description = "Breadth-first search (optimal)"

    def _search(self, board: Board, closed_set: ClosedSet) -> SearchResult:
        result, _ = self._explore(board, closed_set, FifoQueue(), closed_set.admit_once)
        return result


class DepthFirstSearch(SearchStrategy):
    """FILO expansion that reopens states reached by a cheaper path.

    Not optimal.
    """

    name = "dfs"
    description = "Depth-first search (unbounded, not optimal)"

    def _search(self, board: Board, closed_set: ClosedSet) -> SearchResult:
        result, _ = self._explore(board, closed_set, FiloStack(), closed_set.admit_if_cheaper)
        return result


class DepthLimitedSearch(SearchStrategy):
    """Depth-first search that only expands nodes with ``g < max_depth``."""

    name = "dls"
    description = "Depth-limited depth-first search"

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH, **kwargs) -> None:
        super().__init__(**kwargs)
        if max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {max_depth}")
        self.max_depth = max_depth

    def _search(self, board: Board, closed_set: ClosedSet) -> SearchResult:
        result, _ = self._explore(
            board, closed_set, FiloStack(), closed_set.admit_if_cheaper,
            max_depth=self.max_depth,
        )
        result.depth_reached = self.max_depth
        return result


class IterativeDeepeningSearch(SearchStrategy):
    """Depth-limited searches with limits 1, 2, ... up to ``max_depth``.

    The closed set is reset before every attempt.  An attempt that finishes
    without cutting off any node has explored the whole reachable space,
    which proves the board unsolvable.  Running out of depth is reported as
    EXHAUSTED instead.
    """

    name = "ids"
    description = "Iterative deepening depth-first search"

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH, **kwargs) -> None:
        super().__init__(**kwargs)
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.max_depth = max_depth

    def _search(self, board: Board, closed_set: ClosedSet) -> SearchResult:
        total_expanded = 0
        result: SearchResult | None = None
        for depth in range(1, self.max_depth + 1):
            closed_set.reset()
            result, depth_limited = self._explore(
                board, closed_set, FiloStack(), closed_set.admit_if_cheaper,
                max_depth=depth,
            )
            total_expanded += result.nodes_expanded
            result.nodes_expanded = total_expanded
            result.depth_reached = depth
            logger.debug(
                f"[{self.name}] Depth {depth}: {result.status.value}, "
                f"{result.closed_set_size} states"
            )
            if not depth_limited:
                return result

        result.reason = f"no solution within depth {self.max_depth}"
        return result


class AStarSearch(SearchStrategy):
    """Lowest f(n) = g(n) + h(n) first, with insert-once dedup.

    A state is never reopened when a cheaper path to it turns up later.
    """

    name = "astar"
    description = "A* search (Manhattan distance)"

    def _priority(self, node: SearchNode) -> int:
        return node.path_cost + manhattan_distance(node.board)

    def _search(self, board: Board, closed_set: ClosedSet) -> SearchResult:
        result, _ = self._explore(board, closed_set, PriorityFrontier(), closed_set.admit_once)
        return result
