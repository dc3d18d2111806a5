"""Board model: move legality, transitions, normalization, equality."""

from __future__ import annotations

import pytest

from backend.models.board import EMPTY, GOAL, MASTER, Board, Direction, Move

# Single-cell master at (1,1) next to a goal at (1,2).
SCENARIO_A = [
    [1, 1, 1],
    [1, 2, -1],
    [1, 1, 1],
]

# Two-cell brick walled in above and on the left, free below and to the right.
SCENARIO_C = [
    [1, 1, 1, 1, 1],
    [1, 3, 3, 0, -1],
    [1, 0, 0, 0, 1],
    [1, 2, 1, 1, 1],
]

MIXED = [
    [1, 1, 1, 1, 1],
    [1, 4, 0, 3, 1],
    [1, 0, 2, 0, 1],
    [1, 1, -1, 1, 1],
]


# -- construction -------------------------------------------------------------


def test_from_rows_round_trips_rows() -> None:
    board = Board.from_rows(MIXED)
    assert board.height == 4
    assert board.width == 5
    assert board.rows == MIXED
    assert board.max_brick == 4
    assert board.get_cell(2, 2) == MASTER


def test_from_flat_rejects_wrong_cell_count() -> None:
    with pytest.raises(ValueError, match="Expected 9 cells"):
        Board.from_flat(3, 3, [1, 1, 1])


def test_from_rows_rejects_ragged_rows() -> None:
    with pytest.raises(ValueError, match="Row 1"):
        Board.from_rows([[1, 1], [1]])


def test_brick_cells() -> None:
    board = Board.from_rows(SCENARIO_C)
    assert board.brick_cells(3) == [(1, 1), (1, 2)]
    assert board.brick_cells(9) == []


# -- move generation ----------------------------------------------------------


def test_master_can_move_onto_goal() -> None:
    board = Board.from_rows(SCENARIO_A)
    assert board.available_moves(MASTER) == [Move(MASTER, Direction.RIGHT)]


def test_wide_brick_blocked_on_one_long_side() -> None:
    board = Board.from_rows(SCENARIO_C)
    moves = board.available_moves(3)
    directions = [m.direction for m in moves]
    assert Direction.UP not in directions
    assert Direction.DOWN in directions
    assert directions == [Direction.DOWN, Direction.RIGHT]


def test_other_bricks_never_enter_goal() -> None:
    board = Board.from_rows([
        [1, 1, 1],
        [1, 3, 1],
        [1, -1, 1],
        [1, 2, 1],
    ])
    assert board.available_moves(3) == []


def test_absent_brick_has_no_moves() -> None:
    board = Board.from_rows(SCENARIO_A)
    assert board.available_moves(7) == []


@pytest.mark.parametrize("label", [GOAL, EMPTY, 1])
def test_non_brick_labels_have_no_moves(label: int) -> None:
    board = Board.from_rows([
        [1, 1, 1, 1],
        [1, -1, 2, 1],
        [1, 0, 0, 1],
        [1, 1, 1, 1],
    ])
    assert board.available_moves(label) == []


def test_all_moves_master_first_then_ascending_ids() -> None:
    board = Board.from_rows(MIXED)
    assert board.all_available_moves() == [
        Move(2, Direction.UP),
        Move(2, Direction.DOWN),
        Move(2, Direction.LEFT),
        Move(2, Direction.RIGHT),
        Move(3, Direction.DOWN),
        Move(3, Direction.LEFT),
        Move(4, Direction.DOWN),
        Move(4, Direction.RIGHT),
    ]


def test_brick_at_edge_cannot_leave_grid() -> None:
    board = Board.from_rows([[2, 0], [0, -1]])
    assert board.available_moves(MASTER) == [
        Move(MASTER, Direction.DOWN),
        Move(MASTER, Direction.RIGHT),
    ]


# -- transitions --------------------------------------------------------------


def test_apply_move_completes_scenario_a() -> None:
    board = Board.from_rows(SCENARIO_A)
    assert not board.is_complete()
    after = board.apply_move(Move(MASTER, Direction.RIGHT))
    assert after.is_complete()
    assert after.rows == [[1, 1, 1], [1, 0, 2], [1, 1, 1]]


def test_apply_move_never_mutates_input() -> None:
    board = Board.from_rows(SCENARIO_C)
    before = board.cells
    after = board.apply_move(Move(3, Direction.DOWN))
    assert board.cells == before
    assert board.rows == SCENARIO_C
    assert after is not board
    assert after.rows[2] == [1, 3, 3, 0, 1]
    assert after.rows[1] == [1, 0, 0, 0, -1]


def test_multi_cell_brick_moves_rigidly() -> None:
    board = Board.from_rows(SCENARIO_C)
    after = board.apply_move(Move(3, Direction.RIGHT))
    assert after.rows[1] == [1, 0, 3, 3, -1]


def test_apply_move_keeps_max_brick() -> None:
    board = Board.from_rows(MIXED)
    assert board.apply_move(Move(3, Direction.DOWN)).max_brick == 4


def test_goal_cell_is_consumed_once_covered() -> None:
    board = Board.from_rows([
        [1, 1, 1, 1, 1],
        [1, 2, -1, 0, 1],
        [1, 1, 1, -1, 1],
        [1, 1, 1, 1, 1],
    ])
    board = board.apply_move(Move(MASTER, Direction.RIGHT))
    assert not board.is_complete()
    board = board.apply_move(Move(MASTER, Direction.RIGHT))
    assert board.get_cell(1, 2) == EMPTY
    board = board.apply_move(Move(MASTER, Direction.DOWN))
    assert board.is_complete()


# -- equality and normalization -----------------------------------------------


def test_equality_is_reflexive_and_symmetric() -> None:
    a = Board.from_rows(MIXED)
    b = Board.from_rows(MIXED)
    c = a.apply_move(Move(3, Direction.DOWN))
    assert a == a
    assert a == b and b == a
    assert a != c and c != a


def test_copy_is_equal_and_independent() -> None:
    board = Board.from_rows(MIXED)
    clone = board.copy()
    assert clone == board
    assert clone is not board
    assert clone.max_brick == board.max_brick


def test_normalize_renumbers_in_scan_order() -> None:
    board = Board.from_rows(MIXED)
    normalized = board.normalized()
    assert normalized.rows == [
        [1, 1, 1, 1, 1],
        [1, 3, 0, 4, 1],
        [1, 0, 2, 0, 1],
        [1, 1, -1, 1, 1],
    ]
    assert normalized.max_brick == board.max_brick


def test_normalize_is_idempotent() -> None:
    once = Board.from_rows(MIXED).normalized()
    assert once.normalized() == once


def test_normalize_leaves_reserved_values_alone() -> None:
    board = Board.from_rows(SCENARIO_A)
    assert board.normalized() == board


def test_relabelled_boards_normalize_identically() -> None:
    a = Board.from_rows([
        [1, 1, 1, 1, 1],
        [1, 5, 3, 3, 1],
        [1, 2, 0, -1, 1],
    ])
    b = Board.from_rows([
        [1, 1, 1, 1, 1],
        [1, 7, 4, 4, 1],
        [1, 2, 0, -1, 1],
    ])
    assert a != b
    assert a.normalized() == b.normalized()


def test_move_renders_like_original_output() -> None:
    assert str(Move(3, Direction.LEFT)) == "(3,left)"
