from __future__ import annotations

from . import config


def draw_cell(prims, cell, color) -> None:
    x, y = cell
    prims.rect(x * config.BLOCK_SIZE, y * config.BLOCK_SIZE, config.BLOCK_SIZE, config.BLOCK_SIZE, color)


def draw_text_center_x(prims, s: str, y: float, size: int, color) -> None:
    x = config.SCREEN_WIDTH / 2 - prims.text_width(s, size) / 2
    prims.text(s, x, y, size, color)


def draw_frame(prims, game) -> None:
    draw_cell(prims, game.food.position, config.RED)

    dead = game.snake.is_dead()
    snake_color = config.RED if dead else config.GREEN
    for cell in game.snake.body:
        draw_cell(prims, cell, snake_color)

    sx, sy = config.SCORE_POS
    prims.text(f"Score: {game.snake.score}", sx, sy, config.SCORE_SIZE, config.WHITE)

    if dead:
        draw_text_center_x(prims, "You died!", config.DIED_Y, config.PROMPT_SIZE, config.RED)
        draw_text_center_x(prims, "Press spacebar to restart", config.RESTART_Y, config.PROMPT_SIZE, config.WHITE)
