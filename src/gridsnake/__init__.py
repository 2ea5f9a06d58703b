from .food import Food, GridFullError, spawn
from .game import Game, Phase, TickTimer
from .grid import GRID, Direction, Grid
from .snake import Snake

__all__ = [
    "Direction",
    "Food",
    "Game",
    "GRID",
    "Grid",
    "GridFullError",
    "Phase",
    "Snake",
    "TickTimer",
    "spawn",
]
