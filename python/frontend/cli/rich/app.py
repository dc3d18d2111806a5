"""Rich terminal frontend: styled tables and panels.

Renders the same information as the vanilla frontend: the starting
board, the solution moves, the final board and the run statistics.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import SearchResult, SearchStatus
from backend.engine.gamestate import RunTimer
from backend.models.board import EMPTY, GOAL, MASTER, WALL, Board, Move

console = Console()

_BRICK_STYLES = ["cyan", "magenta", "yellow", "blue", "bright_green", "bright_magenta"]

_STATUS_STYLES = {
    SearchStatus.SOLVED: "bold green",
    SearchStatus.UNSOLVABLE: "bold red",
    SearchStatus.EXHAUSTED: "bold yellow",
}


# -- board rendering ----------------------------------------------------------


def _cell(value: int, width: int) -> str:
    if value == EMPTY:
        return f"[dim]{'·':>{width}}[/dim]"
    if value == WALL:
        return f"[grey37]{'█' * width}[/grey37]"
    if value == GOAL:
        return f"[bold green]{'*':>{width}}[/bold green]"
    if value == MASTER:
        return f"[bold red]{value:>{width}}[/bold red]"
    style = _BRICK_STYLES[(value - MASTER - 1) % len(_BRICK_STYLES)]
    return f"[bold {style}]{value:>{width}}[/bold {style}]"


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = max(len(str(board.max_brick)), 1)
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=width, justify="center")

    for row in board.rows:
        table.add_row(*(_cell(v, width) for v in row))

    return table


def render_moves(moves: list[Move]) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        title="Moves",
        title_style="bold cyan",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Brick", justify="right", style="yellow")
    table.add_column("Direction", style="cyan")
    for i, move in enumerate(moves, 1):
        table.add_row(str(i), str(move.brick), move.direction.value)
    return table


def _stats(result: SearchResult, timer: RunTimer) -> Text:
    stats = Text()
    stats.append("  Status: ", style="dim")
    stats.append(result.status.value, style=_STATUS_STYLES[result.status])
    stats.append("    Cost: ", style="dim")
    stats.append(str(result.path_cost), style="bold yellow")
    stats.append("    States: ", style="dim")
    stats.append(str(result.closed_set_size), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(result.nodes_expanded), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(f"{timer.elapsed:.3f}s", style="bold yellow")
    if result.depth_reached is not None:
        stats.append("    Depth: ", style="dim")
        stats.append(str(result.depth_reached), style="bold yellow")
    return stats


# -- public entry points ------------------------------------------------------


def show_solution(initial: Board, result: SearchResult, timer: RunTimer) -> None:
    """Print the start board, the moves, the final board and statistics."""
    boards = Table.grid(padding=(0, 4))
    boards.add_column(justify="center")
    boards.add_column(justify="center")
    final = result.final_board if result.final_board is not None else initial
    boards.add_row(Text("Start", style="bold"), Text("Final", style="bold"))
    boards.add_row(render_board(initial), render_board(final))

    parts = [Align.center(boards)]
    if result.moves:
        parts.append(Align.center(render_moves(result.moves)))
    if result.reason:
        parts.append(Align.center(Text(result.reason, style="yellow")))
    parts.append(Align.center(_stats(result, timer)))

    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]{result.algorithm.upper()}[/bold cyan]",
        border_style=_STATUS_STYLES[result.status].split()[-1],
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def show_walk(initial: Board, walk: list[tuple[Move, Board]]) -> None:
    """Print each step of a random walk as a titled board."""
    console.print(Align.center(Panel(
        Align.center(render_board(initial.normalized())),
        title="[bold]Start[/bold]",
        border_style="bright_blue",
    )))
    for i, (move, board) in enumerate(walk, 1):
        console.print(Align.center(Panel(
            Align.center(render_board(board)),
            title=f"[bold cyan]{i}. {move}[/bold cyan]",
            border_style="green" if board.is_complete() else "bright_blue",
        )))
