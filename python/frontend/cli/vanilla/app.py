"""Vanilla terminal frontend, no third-party dependencies.

Prints boards, moves and run statistics in the plain comma-separated text
format puzzles are stored in, so a printed state can be fed back to the
loader.
"""

from __future__ import annotations

from backend.engine.gamesolver import SearchResult
from backend.engine.gamestate import RunTimer
from backend.models.board import Board, Move


# -- formatting ---------------------------------------------------------------


def format_board(board: Board) -> str:
    """Return *board* as ``w,h,`` followed by one ``v,`` row per line."""
    lines = [f"{board.width},{board.height},"]
    for row in board.rows:
        lines.append("".join(f"{v}," for v in row))
    return "\n".join(lines) + "\n"


def format_move(move: Move) -> str:
    return str(move)


def format_summary(result: SearchResult, timer: RunTimer) -> str:
    """``<closed-set size> (<elapsed>) <path cost>``."""
    return f"{result.closed_set_size} ({timer.format()}) {result.path_cost}"


# -- public entry points ------------------------------------------------------


def show_solution(initial: Board, result: SearchResult, timer: RunTimer) -> None:
    """Print the solution path, the final board and the run statistics."""
    print(f"[{result.algorithm}]")
    for move in result.moves:
        print(format_move(move))
    if result.final_board is not None:
        print(format_board(result.final_board))
    if not result.solved:
        detail = f": {result.reason}" if result.reason else ""
        print(f"No solution found ({result.status.value}{detail})")
    print(format_summary(result, timer))
    print()


def show_walk(initial: Board, walk: list[tuple[Move, Board]]) -> None:
    """Print a random walk: the start state, then each move and its result."""
    print(format_board(initial.normalized()))
    for move, board in walk:
        print(format_move(move))
        print()
        print(format_board(board))
