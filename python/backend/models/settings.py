"""Solver settings with JSON persistence.

Settings are read from a JSON object and merged over the defaults, so a
partial file only overrides the keys it names.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from backend.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BUCKET_COUNT = 1000
DEFAULT_MAX_DEPTH = 64


@dataclass
class SolverSettings:
    algorithm: str = "bfs"
    max_depth: int = DEFAULT_MAX_DEPTH
    node_budget: int | None = None
    bucket_count: int = DEFAULT_BUCKET_COUNT
    frontend: str = "vanilla"
    record_runs: bool = False


def load_settings(path: Path) -> SolverSettings:
    """Load settings from *path*, falling back to defaults.

    A missing, unreadable or malformed file yields the defaults.  Values of
    the wrong type or out of range raise ConfigurationError.
    """
    if not path.exists():
        logger.debug(f"Settings file {path} not found, using defaults")
        return SolverSettings()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to load settings from {path}: {e}, using defaults")
        return SolverSettings()

    if not isinstance(data, dict):
        logger.warning(f"Settings in {path} are not a JSON object, using defaults")
        return SolverSettings()

    known = {f.name for f in fields(SolverSettings)}
    for key in data.keys() - known:
        logger.warning(f"Ignoring unknown setting {key!r} in {path}")

    settings = SolverSettings(**{k: v for k, v in data.items() if k in known})
    problems = _invalid_fields(settings)
    if problems:
        raise ConfigurationError("; ".join(problems), source=str(path))
    logger.debug(f"Settings loaded: {settings}")
    return settings


def save_settings(settings: SolverSettings, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(settings), indent=2) + "\n", encoding="utf-8")
    logger.debug(f"Settings saved to {path}")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _invalid_fields(settings: SolverSettings) -> list[str]:
    problems = []
    for name in ("algorithm", "frontend"):
        if not isinstance(getattr(settings, name), str):
            problems.append(f"{name} must be a string")
    if not _is_int(settings.max_depth) or settings.max_depth < 0:
        problems.append("max_depth must be a non-negative integer")
    if settings.node_budget is not None and (
        not _is_int(settings.node_budget) or settings.node_budget < 1
    ):
        problems.append("node_budget must be a positive integer or null")
    if not _is_int(settings.bucket_count) or settings.bucket_count < 1:
        problems.append("bucket_count must be a positive integer")
    if not isinstance(settings.record_runs, bool):
        problems.append("record_runs must be true or false")
    return problems
