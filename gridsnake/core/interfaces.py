# gridsnake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple
import numpy as np
from .grid import Cell, Direction


class Phase(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    ENDED = "ended"


class CellCode(IntEnum):
    EMPTY = 0
    BODY = 1
    HEAD = 2
    FOOD = 3


@dataclass(frozen=True)
class Snapshot:
    body: Tuple[Cell, ...]   # tail first, head last
    food: Optional[Cell]     # None only when the snake fills the board
    direction: Direction
    pending_direction: Direction
    score: int
    phase: Phase
    tick_count: int
    reason: str | None       # "wall" / "self" once ended
    grid_size: int

    @property
    def head(self) -> Cell:
        return self.body[-1]

    @property
    def length(self) -> int:
        return len(self.body)

    def to_grid(self) -> np.ndarray:
        """Occupancy array indexed [y, x] with CellCode values."""
        n = self.grid_size
        grid = np.zeros((n, n), dtype=np.int8)
        if self.food is not None:
            fx, fy = self.food
            grid[fy, fx] = CellCode.FOOD
        for (x, y) in self.body[:-1]:
            grid[y, x] = CellCode.BODY
        hx, hy = self.head
        grid[hy, hx] = CellCode.HEAD
        return grid

    def print_board(self) -> str:
        """
        Text board, one row per line, top row is y=0:
        . = empty, o = body, H = head, * = food
        """
        glyphs = {
            CellCode.EMPTY: ".",
            CellCode.BODY: "o",
            CellCode.HEAD: "H",
            CellCode.FOOD: "*",
        }
        return "\n".join(
            "".join(glyphs[CellCode(v)] for v in row) for row in self.to_grid().tolist()
        )


def game_over_message(snap: Snapshot) -> str:
    noun = "food" if snap.score == 1 else "foods"
    return f"Game Over! You ate {snap.score} {noun}!"

