from .grid import Cell, Direction, Grid, translate
from .interfaces import CellCode, Phase, Snapshot, game_over_message
from .engine import SnakeEngine

__all__ = [
    "Cell", "Direction", "Grid", "translate",
    "CellCode", "Phase", "Snapshot", "game_over_message",
    "SnakeEngine",
]
