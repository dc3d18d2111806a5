from backend.engine.gamesolver.closed_set import ABSENT, ClosedSet
from backend.engine.gamesolver.result import NO_SOLUTION, SearchResult, SearchStatus
from backend.engine.gamesolver.solver import DEPTH_BOUNDED, Algorithm, Solver

__all__ = [
    "ABSENT",
    "Algorithm",
    "ClosedSet",
    "DEPTH_BOUNDED",
    "NO_SOLUTION",
    "SearchResult",
    "SearchStatus",
    "Solver",
]
