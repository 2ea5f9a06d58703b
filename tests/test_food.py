from __future__ import annotations

import random

import pytest

from gridsnake.food import Food, GridFullError, free_cells, spawn
from gridsnake.grid import GRID, Grid


def _random_body(rng: random.Random, grid: Grid, free: int) -> list[tuple[int, int]]:
    cells = list(grid.cells())
    rng.shuffle(cells)
    return cells[: len(cells) - free]


@pytest.mark.parametrize("seed", range(20))
@pytest.mark.parametrize("free", [1, 2, 7, 100, 850])
def test_spawn_never_lands_on_the_body(seed, free):
    rng = random.Random(seed)
    body = _random_body(rng, GRID, free)
    food = spawn(body, rng)
    assert food.position not in body
    assert GRID.contains(food.position)


def test_spawn_finds_the_only_free_cell():
    grid = Grid(6, 5)
    hole = (4, 2)
    body = [cell for cell in grid.cells() if cell != hole]
    assert spawn(body, random.Random(3), grid).position == hole


def test_spawn_on_full_grid_raises():
    grid = Grid(3, 3)
    with pytest.raises(GridFullError):
        spawn(list(grid.cells()), random.Random(0), grid)


def test_spawn_is_reproducible_for_a_seed():
    body = [(20, 20), (19, 20)]

    def draws(seed):
        rng = random.Random(seed)
        return [spawn(body, rng).position for _ in range(5)]

    assert draws(99) == draws(99)


def test_spawn_returns_food():
    food = spawn([], random.Random(1), Grid(1, 1))
    assert food == Food((0, 0))


def test_free_cells_excludes_body_and_ignores_off_grid():
    grid = Grid(3, 2)
    cells = free_cells([(0, 0), (2, 1), (-1, 0), (5, 5)], grid)
    assert cells == [(1, 0), (2, 0), (0, 1), (1, 1)]
