from __future__ import annotations

from collections import deque
from itertools import islice

from . import config
from .grid import GRID, Cell, Direction, Grid, add_vectors


class Snake:
    """Player snake. ``body`` runs head first; index 0 is the head."""

    def __init__(
        self,
        body=config.START_BODY,
        heading: Direction = Direction.UP,
        grid: Grid = GRID,
    ):
        if not body:
            raise ValueError("snake body must have at least one cell")
        self.body: deque[Cell] = deque(tuple(cell) for cell in body)
        self.heading = heading
        self.pending_growth = False
        self.grid = grid

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def score(self) -> int:
        return len(self.body)

    def advance(self) -> None:
        self.body.appendleft(add_vectors(self.head, self.heading.delta))
        if not self.pending_growth:
            self.body.pop()
        self.pending_growth = False

    def mark_growth(self) -> None:
        self.pending_growth = True

    def is_dead(self) -> bool:
        head = self.head
        if not self.grid.contains(head):
            return True
        return any(cell == head for cell in islice(self.body, 1, None))

    def __repr__(self) -> str:
        return f"Snake(body={list(self.body)!r}, heading={self.heading.name}, pending_growth={self.pending_growth})"
