"""Core gameplay logic: applies moves, checks completion, random walks."""

from __future__ import annotations

import random

from backend.models.board import Board, Move


class GamePlay:
    """Tracks one puzzle as moves are applied to it."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        return cls(board)

    # -- movement -------------------------------------------------------------

    def move(self, move: Move) -> bool:
        """Slide ``move.brick`` one step in ``move.direction``.

        The resulting board is normalized, so brick ids in later moves refer
        to the renumbered board.  Returns True if the move was legal and
        applied.
        """
        if move not in self.board.available_moves(move.brick):
            return False
        self.board = self.board.apply_move(move).normalized()
        self.moves += 1
        return True

    def random_walk(
        self, steps: int, rng: random.Random | None = None
    ) -> list[tuple[Move, Board]]:
        """Apply up to *steps* uniformly random legal moves.

        The walk stops early when the puzzle is complete or no move is
        available.  Returns each move with the board it produced.
        """
        rng = rng or random.Random()
        self.board = self.board.normalized()
        walk: list[tuple[Move, Board]] = []

        while len(walk) < steps and not self.is_won:
            available = self.board.all_available_moves()
            if not available:
                break
            chosen = rng.choice(available)
            self.move(chosen)
            walk.append((chosen, self.board))

        return walk

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_complete()
