"""Distance estimate used to order the A* frontier."""

from __future__ import annotations

from backend.models.board import GOAL, MASTER, Board


def manhattan_distance(board: Board) -> int:
    """Manhattan distance between the master's and the goal's anchor cells.

    The anchor of a region is (highest row, highest column), each taken
    independently over the region's cells.  This is a cheap approximation
    of the distance left to travel, not a minimum over all cell pairs, so
    it is not admissible for every multi-cell layout.  Returns 0 when the
    master or the goal is missing.
    """
    w = board.width
    master_row = master_col = goal_row = goal_col = -1
    for i, v in enumerate(board.cells):
        if v == MASTER:
            r, c = divmod(i, w)
            master_row = max(master_row, r)
            master_col = max(master_col, c)
        elif v == GOAL:
            r, c = divmod(i, w)
            goal_row = max(goal_row, r)
            goal_col = max(goal_col, c)

    if master_row < 0 or goal_row < 0:
        return 0
    return abs(goal_row - master_row) + abs(goal_col - master_col)
