from __future__ import annotations

SCREEN_WIDTH, SCREEN_HEIGHT = 600, 600
BLOCK_SIZE = 20
GRID_WIDTH = SCREEN_WIDTH // BLOCK_SIZE
GRID_HEIGHT = SCREEN_HEIGHT // BLOCK_SIZE
CAPTION = "Snake"

FPS = 60
MOVE_EVERY = 12  # frames per movement tick

START_BODY = ((20, 20), (19, 20))

# Random draws before falling back to scanning the free cells.
SPAWN_ATTEMPTS = 64

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 228, 48)
RED = (230, 41, 55)

SCORE_POS = (20, 20)
SCORE_SIZE = 24
PROMPT_SIZE = 35
DIED_Y = 315
RESTART_Y = 350
