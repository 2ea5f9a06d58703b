from __future__ import annotations

import logging
import random
from enum import Enum

from . import config
from .controls import FrameInput, heading_for
from .food import Food, spawn
from .grid import GRID, Grid
from .render import draw_frame
from .snake import Snake

logger = logging.getLogger(__name__)


class Phase(Enum):
    RUNNING = "running"
    DEAD = "dead"


class TickTimer:
    """Counts rendered frames and fires once every ``period`` of them."""

    def __init__(self, period: int = config.MOVE_EVERY):
        if period < 1:
            raise ValueError(f"period must be positive, got {period}")
        self.period = period
        self.frames = 0

    def tick(self) -> bool:
        self.frames += 1
        if self.frames < self.period:
            return False
        self.frames = 0
        return True


class Game:
    """Owns the snake and the food and runs one frame at a time.

    Per frame: steer from the held keys, advance the snake when the tick
    timer fires (unless dead), eat food if the head is on it, draw, and
    finally rebuild the snake if restart is held. Movement is suspended
    while dead but drawing and input carry on so the restart prompt shows.
    """

    def __init__(self, rng: random.Random, grid: Grid = GRID, timer: TickTimer | None = None):
        self.rng = rng
        self.grid = grid
        self.timer = timer or TickTimer()
        self.snake = Snake(grid=grid)
        self.food: Food = spawn(self.snake.body, rng, grid)
        self._phase = Phase.RUNNING

    @property
    def phase(self) -> Phase:
        return Phase.DEAD if self.snake.is_dead() else Phase.RUNNING

    def update(self, frame_input: FrameInput) -> None:
        heading = heading_for(frame_input)
        if heading is not None:
            self.snake.heading = heading

        if self.timer.tick() and not self.snake.is_dead():
            self.snake.advance()

        if self.food.position == self.snake.head:
            self.food = spawn(self.snake.body, self.rng, self.grid)
            self.snake.mark_growth()

        self._note_phase()

    def draw(self, prims) -> None:
        draw_frame(prims, self)

    def handle_restart(self, frame_input: FrameInput) -> None:
        # Level-triggered: the snake is rebuilt on every frame the key is held.
        if not frame_input.restart:
            return
        logger.debug("restart")
        self.snake = Snake(grid=self.grid)
        self._note_phase()

    def frame(self, frame_input: FrameInput, prims) -> None:
        self.update(frame_input)
        self.draw(prims)
        self.handle_restart(frame_input)

    def _note_phase(self) -> None:
        phase = self.phase
        if phase is self._phase:
            return
        if phase is Phase.DEAD:
            logger.info("snake died at %s, score %d", self.snake.head, self.snake.score)
        self._phase = phase
