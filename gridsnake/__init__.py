"""Turn-based grid Snake: a pure simulation engine plus pygame and headless drivers."""

from gridsnake.core import Cell, Direction, Grid, Phase, Snapshot, SnakeEngine

__version__ = "0.1.0"

__all__ = ["Cell", "Direction", "Grid", "Phase", "Snapshot", "SnakeEngine", "__version__"]
