#!/usr/bin/env python3
"""Sliding Brick Puzzle Solver.

Usage::

    python main.py fixtures/SBP-level0.txt                 # breadth-first
    python main.py fixtures/SBP-level0.txt -a astar -f rich
    python main.py fixtures/SBP-level0.txt -a ids --max-depth 30
    python main.py fixtures/SBP-level0.txt --walk 5        # random walk
"""

import importlib
import logging
import sys
from datetime import datetime
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_CONFIG = PROJECT_ROOT / "solver.json"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gameloader import load_board  # noqa: E402
from backend.engine.gameplay import GamePlay  # noqa: E402
from backend.engine.gamesolver import DEPTH_BOUNDED, Algorithm, SearchResult, Solver  # noqa: E402
from backend.engine.gamestate import RunTimer  # noqa: E402
from backend.errors import ConfigurationError  # noqa: E402
from backend.models.runrecord import RunRecord, RunRecordManager  # noqa: E402
from backend.models.settings import load_settings  # noqa: E402

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _record(puzzle: Path, algorithm: str, result: SearchResult, timer: RunTimer) -> None:
    manager = RunRecordManager(DATA_DIR / "runs.json")
    manager.add_record(
        puzzle.name,
        RunRecord(
            algorithm=algorithm,
            path_cost=result.path_cost,
            nodes=result.closed_set_size,
            time=round(timer.elapsed, 4),
            date=datetime.now().strftime("%Y-%m-%d %H:%M"),
        ),
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle: Path = typer.Argument(
        ..., help="Puzzle file (comma-separated text format).",
    ),
    algorithm: Optional[Algorithm] = typer.Option(
        None, "-a", "--algorithm",
        help="Search algorithm. Defaults to the configured one (bfs).",
    ),
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Output renderer. Defaults to the configured one (vanilla).",
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", min=0,
        help="Depth bound for dls / ids.",
    ),
    node_budget: Optional[int] = typer.Option(
        None, "--node-budget", min=1,
        help="Give up once this many states have been discovered.",
    ),
    walk: Optional[int] = typer.Option(
        None, "--walk", min=0,
        help="Perform a random walk of N moves instead of searching.",
    ),
    config: Path = typer.Option(
        DEFAULT_CONFIG, "--config",
        help="JSON settings file.",
    ),
    record: bool = typer.Option(
        False, "--record",
        help="Append the run statistics to data/runs.json.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Sliding Brick Puzzle Solver."""
    _configure_logging(verbose)
    try:
        settings = load_settings(config)
        board = load_board(puzzle)
        chosen = Algorithm(algorithm or settings.algorithm)
        renderer = Frontend(frontend or settings.frontend)
    except (ConfigurationError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    mod = importlib.import_module(_RUNNERS[renderer])

    if walk is not None:
        game = GamePlay.from_board(board)
        mod.show_walk(board, game.random_walk(walk))
        return

    options: dict = {
        "node_budget": node_budget if node_budget is not None else settings.node_budget,
        "bucket_count": settings.bucket_count,
    }
    if chosen in DEPTH_BOUNDED:
        options["max_depth"] = max_depth if max_depth is not None else settings.max_depth

    try:
        strategy = Solver.create(chosen, **options)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    with RunTimer() as timer:
        result = strategy.search(board)

    mod.show_solution(board, result, timer)

    if record or settings.record_runs:
        _record(puzzle, chosen.value, result, timer)

    if not result.solved:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
