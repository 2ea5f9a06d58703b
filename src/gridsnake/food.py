from __future__ import annotations

import logging
import random
from collections import namedtuple

import numpy as np

from . import config
from .grid import GRID, Cell, Grid

logger = logging.getLogger(__name__)

Food = namedtuple("Food", ["position"])


class GridFullError(RuntimeError):
    """Raised when every cell of the grid is occupied."""


def free_cells(avoid, grid: Grid = GRID) -> list[Cell]:
    free = np.ones((grid.height, grid.width), dtype=bool)
    for x, y in avoid:
        if grid.contains((x, y)):
            free[y, x] = False
    # argwhere yields (row, col) pairs in row-major order.
    return [(int(x), int(y)) for y, x in np.argwhere(free)]


def spawn(
    avoid,
    rng: random.Random,
    grid: Grid = GRID,
    attempts: int = config.SPAWN_ATTEMPTS,
) -> Food:
    """Place food on a uniformly random cell not occupied by ``avoid``.

    Plain rejection sampling is tried ``attempts`` times. When the board is
    crowded enough for that to keep missing, the free cells are enumerated
    and one is picked with the same generator, so the draw stays uniform.
    """
    occupied = set(avoid)
    for _ in range(attempts):
        cell = (rng.randrange(grid.width), rng.randrange(grid.height))
        if cell not in occupied:
            logger.debug("food spawned at %s", cell)
            return Food(cell)

    logger.debug("no free cell after %d draws, scanning %d occupied cells", attempts, len(occupied))
    candidates = free_cells(occupied, grid)
    if not candidates:
        raise GridFullError(f"no free cell on a {grid.width}x{grid.height} grid")
    cell = rng.choice(candidates)
    logger.debug("food spawned at %s", cell)
    return Food(cell)
