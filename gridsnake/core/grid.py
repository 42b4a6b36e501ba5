# gridsnake/core/grid.py  (coordinate space, no game state)
from __future__ import annotations
from enum import Enum
import random
from typing import Iterable, Iterator, List, NamedTuple


class Cell(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    # screen coordinates: y grows downward
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, raw: str) -> "Direction":
        name = str(raw).strip().upper()
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"invalid direction: {raw!r}") from None


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def translate(cell: Cell, direction: Direction) -> Cell:
    return Cell(cell[0] + direction.dx, cell[1] + direction.dy)


class Grid:
    """Square playable area of ``size`` x ``size`` cells.

    Pure: holds only its size. Randomness comes from the caller's ``rng`` so
    games can be replayed from a seed.
    """

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"grid size must be a positive integer, got {size!r}")
        self.size = size

    @property
    def area(self) -> int:
        return self.size * self.size

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def random_cell(self, rng: random.Random) -> Cell:
        return Cell(rng.randrange(self.size), rng.randrange(self.size))

    def cells(self) -> Iterator[Cell]:
        for y in range(self.size):
            for x in range(self.size):
                yield Cell(x, y)

    def free_cells(self, occupied: Iterable[Cell]) -> List[Cell]:
        occ = set(occupied)
        return [c for c in self.cells() if c not in occ]

    def __repr__(self) -> str:
        return f"Grid(size={self.size})"
