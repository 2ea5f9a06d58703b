from __future__ import annotations

from collections import namedtuple
from enum import Enum

from . import config

Cell = tuple[int, int]


class Direction(Enum):
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def delta(self) -> Cell:
        return self.value


def add_vectors(a: Cell, b: Cell) -> Cell:
    return (a[0] + b[0], a[1] + b[1])


class Grid(namedtuple("Grid", ["width", "height"])):
    """Playfield bounds in cells. Columns are x, rows are y."""

    __slots__ = ()

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self):
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)


GRID = Grid(config.GRID_WIDTH, config.GRID_HEIGHT)
