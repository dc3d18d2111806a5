"""Run record persistence: per-puzzle search statistics in a JSON file."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path


@dataclass
class RunRecord:
    algorithm: str
    path_cost: int
    nodes: int
    time: float
    date: str

    @property
    def solved(self) -> bool:
        return self.path_cost >= 0


class RunRecordManager:
    """Loads, saves, and queries search runs from a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._records: dict[str, list[RunRecord]] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if self.filepath.exists():
            data = json.loads(self.filepath.read_text())
            for puzzle, entries in data.items():
                self._records[puzzle] = [RunRecord(**e) for e in entries]

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {
            puzzle: [asdict(e) for e in entries]
            for puzzle, entries in self._records.items()
        }
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    # -- queries --------------------------------------------------------------

    def add_record(self, puzzle: str, record: RunRecord) -> None:
        entries = self._records.setdefault(puzzle, [])
        entries.append(record)
        entries.sort(key=lambda e: (not e.solved, e.path_cost, e.time))
        self.save()

    def get_records(self, puzzle: str) -> list[RunRecord]:
        return self._records.get(puzzle, [])

    def best(self, puzzle: str) -> RunRecord | None:
        """The cheapest solved run for *puzzle*, if any."""
        for record in self.get_records(puzzle):
            if record.solved:
                return record
        return None

    def get_all_puzzles(self) -> list[str]:
        return sorted(self._records)
