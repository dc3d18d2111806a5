from backend.models.board import Board, Direction, Move
from backend.models.runrecord import RunRecord, RunRecordManager
from backend.models.settings import SolverSettings, load_settings, save_settings

__all__ = [
    "Board",
    "Direction",
    "Move",
    "RunRecord",
    "RunRecordManager",
    "SolverSettings",
    "load_settings",
    "save_settings",
]
