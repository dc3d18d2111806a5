"""Closed set: state keys, bucket hashing, revisit policies."""

from __future__ import annotations

import pytest

from backend.engine.gamesolver.closed_set import ABSENT, ClosedSet
from backend.models.board import Board


LEVEL0 = [
    [1, -1, -1, 1, 1],
    [1, 0, 3, 4, 1],
    [1, 0, 2, 2, 1],
    [1, 1, 1, 1, 1],
]


def test_key_covers_interior_only() -> None:
    board = Board.from_rows(LEVEL0)
    assert ClosedSet.state_key(board) == "ADEACC"


def test_key_ignores_border_changes() -> None:
    a = Board.from_rows(LEVEL0)
    rows = [row[:] for row in LEVEL0]
    rows[0][1] = 2
    b = Board.from_rows(rows)
    assert ClosedSet.state_key(a) == ClosedSet.state_key(b)


def test_goal_cells_encode_below_a() -> None:
    board = Board.from_rows([[1, 1, 1], [1, -1, 1], [1, 1, 1]])
    assert ClosedSet.state_key(board) == "@"


def test_relabelled_boards_share_a_key_after_normalization() -> None:
    a = Board.from_rows([[1, 1, 1, 1], [1, 5, 3, 1], [1, 2, -1, 1], [1, 1, 1, 1]])
    b = Board.from_rows([[1, 1, 1, 1], [1, 8, 6, 1], [1, 2, -1, 1], [1, 1, 1, 1]])
    assert ClosedSet.state_key(a) != ClosedSet.state_key(b)
    assert ClosedSet.state_key(a.normalized()) == ClosedSet.state_key(b.normalized())


def test_bucket_index_is_position_weighted_sum() -> None:
    table = ClosedSet()
    assert table.bucket_index("AB") == (65 * 1 + 66 * 2) % 1000
    assert table.bucket_index("AB") != table.bucket_index("BA")
    assert ClosedSet(bucket_count=7).bucket_index("AB") == 197 % 7


def test_missing_key_is_absent() -> None:
    table = ClosedSet()
    assert table.get("never-inserted") == ABSENT
    assert "never-inserted" not in table
    assert len(table) == 0


def test_insert_get_update() -> None:
    table = ClosedSet()
    table.insert("AAC", 4)
    assert table.get("AAC") == 4
    assert "AAC" in table
    table.update("AAC", 2)
    assert table.get("AAC") == 2
    assert len(table) == 1


def test_update_of_missing_key_does_nothing() -> None:
    table = ClosedSet()
    table.update("AAC", 2)
    assert table.get("AAC") == ABSENT
    assert len(table) == 0


def test_collisions_are_chained() -> None:
    table = ClosedSet(bucket_count=1)
    for i, key in enumerate(["AB", "BA", "AAB", "C"]):
        table.insert(key, i)
    assert [table.get(k) for k in ["AB", "BA", "AAB", "C"]] == [0, 1, 2, 3]
    assert len(table) == 4


def test_reset_empties_the_table() -> None:
    table = ClosedSet()
    table.insert("AB", 0)
    table.insert("BA", 1)
    table.reset()
    assert len(table) == 0
    assert table.get("AB") == ABSENT


def test_admit_once_never_readmits() -> None:
    table = ClosedSet()
    assert table.admit_once("AB", 5)
    assert not table.admit_once("AB", 1)
    assert table.get("AB") == 5
    assert len(table) == 1


def test_admit_if_cheaper_reopens_on_strictly_lower_cost() -> None:
    table = ClosedSet()
    assert table.admit_if_cheaper("AB", 5)
    assert table.admit_if_cheaper("AB", 3)
    assert table.get("AB") == 3
    assert not table.admit_if_cheaper("AB", 3)
    assert not table.admit_if_cheaper("AB", 4)
    assert table.get("AB") == 3
    assert len(table) == 1


def test_bucket_count_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ClosedSet(bucket_count=0)
