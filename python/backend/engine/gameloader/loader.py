"""Reads puzzle definitions from the comma-separated text format.

The first two values are the board width and height; the remaining
``width * height`` values are the cells in row-major order.  Every value is
terminated by a comma and line breaks carry no meaning::

    5,4,
    1,-1,-1,1,1,
    1,0,3,4,1,
    1,0,2,2,1,
    1,1,1,1,1,
"""

from __future__ import annotations

import logging
from pathlib import Path

from backend.errors import ConfigurationError
from backend.models.board import GOAL, MASTER, Board

logger = logging.getLogger(__name__)


def load_board(path: Path) -> Board:
    """Read and validate the puzzle stored at *path*."""
    try:
        text = path.read_text()
    except OSError as e:
        raise ConfigurationError(f"cannot read puzzle: {e.strerror}", str(path)) from e
    board = parse_board(text, source=str(path))
    logger.info(
        f"Loaded {path.name}: {board.width}x{board.height}, max brick {board.max_brick}"
    )
    return board


def parse_board(text: str, source: str | None = None) -> Board:
    """Parse puzzle *text* into a board.

    Raises:
        ConfigurationError: If the text is not a well-formed puzzle
    """
    tokens = [t.strip() for t in text.split(",")]
    if tokens and tokens[-1] == "":
        tokens.pop()

    values: list[int] = []
    for position, token in enumerate(tokens):
        try:
            values.append(int(token))
        except ValueError:
            raise ConfigurationError(
                f"value {position + 1} is not an integer: {token!r}", source
            ) from None

    if len(values) < 2:
        raise ConfigurationError("missing board dimensions", source)

    width, height, cells = values[0], values[1], values[2:]
    if width < 1 or height < 1:
        raise ConfigurationError(f"invalid dimensions {width}x{height}", source)
    if len(cells) != width * height:
        raise ConfigurationError(
            f"expected {width * height} cells for a {width}x{height} board, "
            f"got {len(cells)}",
            source,
        )

    board = Board.from_flat(height, width, cells)
    validate_board(board, source)
    return board


def parse_rows(rows: list[list[int]], source: str | None = None) -> Board:
    """Build and validate a board from in-memory rows."""
    if not rows or not rows[0]:
        raise ConfigurationError("board is empty", source)
    try:
        board = Board.from_rows(rows)
    except ValueError as e:
        raise ConfigurationError(f"board is not rectangular: {e}", source) from None
    validate_board(board, source)
    return board


def validate_board(board: Board, source: str | None = None) -> None:
    """Check the invariants every searchable puzzle must satisfy."""
    if MASTER not in board.cells:
        raise ConfigurationError("puzzle has no master brick (2)", source)
    if GOAL not in board.cells:
        raise ConfigurationError("puzzle has no goal cell (-1)", source)
    invalid = sorted({v for v in board.cells if v < GOAL})
    if invalid:
        raise ConfigurationError(f"invalid cell values: {invalid}", source)
