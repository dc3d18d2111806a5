"""Board model for the sliding brick puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

GOAL = -1
EMPTY = 0
WALL = 1
MASTER = 2


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        """(row, col) step taken by every cell of a brick moving this way."""
        return _OFFSETS[self]


_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Move:
    """A single one-step slide of a whole brick."""

    brick: int
    direction: Direction

    def __str__(self) -> str:
        return f"({self.brick},{self.direction.value})"


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of the puzzle grid.

    Cells are stored row-major in one flat tuple.  ``-1`` is a goal cell,
    ``0`` empty, ``1`` wall, ``2`` the master brick and anything ``>= 3``
    another brick.  ``max_brick`` is the highest brick id the puzzle was
    loaded with; it bounds move generation and is carried through every
    transition, but takes no part in equality.
    """

    height: int
    width: int
    cells: tuple[int, ...]
    max_brick: int = field(default=MASTER, compare=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(
        cls,
        height: int,
        width: int,
        flat: list[int] | tuple[int, ...],
        max_brick: int | None = None,
    ) -> Board:
        """Create a board from a flat row-major cell list.

        Example::

            Board.from_flat(3, 3, [1, 1, 1, 1, 2, -1, 1, 1, 1])
        """
        if len(flat) != height * width:
            raise ValueError(
                f"Expected {height * width} cells for a {height}×{width} board, "
                f"got {len(flat)}."
            )
        cells = tuple(int(v) for v in flat)
        if max_brick is None:
            max_brick = max(cells, default=MASTER)
        return cls(height=height, width=width, cells=cells, max_brick=max_brick)

    @classmethod
    def from_rows(cls, rows: list[list[int]], max_brick: int | None = None) -> Board:
        """Create a board from a list of equally sized rows."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {r} has {len(row)} cells, expected {width}."
                )
        flat = [v for row in rows for v in row]
        return cls.from_flat(height, width, flat, max_brick=max_brick)

    # -- queries --------------------------------------------------------------

    def get_cell(self, row: int, col: int) -> int:
        return self.cells[row * self.width + col]

    @property
    def rows(self) -> list[list[int]]:
        w = self.width
        return [list(self.cells[r * w : (r + 1) * w]) for r in range(self.height)]

    def brick_cells(self, brick: int) -> list[tuple[int, int]]:
        """Return the (row, col) of every cell occupied by *brick*."""
        w = self.width
        return [divmod(i, w) for i, v in enumerate(self.cells) if v == brick]

    def is_complete(self) -> bool:
        """True once no goal cell is left uncovered."""
        return GOAL not in self.cells

    def copy(self) -> Board:
        return Board(
            height=self.height,
            width=self.width,
            cells=self.cells,
            max_brick=self.max_brick,
        )

    # -- moves ----------------------------------------------------------------

    def available_moves(self, brick: int) -> list[Move]:
        """Legal one-step moves for *brick*, in up/down/left/right order.

        A move is legal when every cell of the brick lands in bounds on an
        empty cell or on a cell of the same brick.  Only the master may
        also land on a goal cell.  Labels below the master are not bricks and
        never move.
        """
        if brick < MASTER:
            return []
        occupied = [i for i, v in enumerate(self.cells) if v == brick]
        if not occupied:
            return []

        moves: list[Move] = []
        for direction in Direction:
            if self._can_shift(brick, occupied, direction):
                moves.append(Move(brick, direction))
        return moves

    def all_available_moves(self) -> list[Move]:
        """Moves for the master first, then bricks 3..max_brick ascending."""
        moves = self.available_moves(MASTER)
        for brick in range(MASTER + 1, self.max_brick + 1):
            moves.extend(self.available_moves(brick))
        return moves

    def apply_move(self, move: Move) -> Board:
        """Return a new board with *move* applied; this board is untouched.

        Legality is not checked here.
        """
        w = self.width
        dr, dc = move.direction.offset
        step = dr * w + dc
        cells = list(self.cells)
        occupied = [i for i, v in enumerate(self.cells) if v == move.brick]
        for i in occupied:
            cells[i] = EMPTY
        for i in occupied:
            cells[i + step] = move.brick
        return Board(
            height=self.height,
            width=self.width,
            cells=tuple(cells),
            max_brick=self.max_brick,
        )

    def normalized(self) -> Board:
        """Renumber bricks above the master in row-major order of appearance.

        The first unseen id ``> 2`` becomes 3, the next 4, and so on, so
        boards that differ only in how interchangeable bricks are numbered
        collapse to one canonical form.  Goal, empty, wall and master cells
        keep their values.
        """
        remap: dict[int, int] = {}
        cells: list[int] = []
        for v in self.cells:
            if v > MASTER:
                if v not in remap:
                    remap[v] = MASTER + 1 + len(remap)
                v = remap[v]
            cells.append(v)
        return Board(
            height=self.height,
            width=self.width,
            cells=tuple(cells),
            max_brick=self.max_brick,
        )

    # -- helpers --------------------------------------------------------------

    def _can_shift(self, brick: int, occupied: list[int], direction: Direction) -> bool:
        dr, dc = direction.offset
        for i in occupied:
            r, c = divmod(i, self.width)
            nr, nc = r + dr, c + dc
            if not (0 <= nr < self.height and 0 <= nc < self.width):
                return False
            target = self.cells[nr * self.width + nc]
            if target == EMPTY or target == brick:
                continue
            if brick == MASTER and target == GOAL:
                continue
            return False
        return True
