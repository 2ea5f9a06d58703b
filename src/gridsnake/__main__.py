from __future__ import annotations

import argparse
import logging
import random
import time

import pygame

from . import config
from .controls import sample_keys
from .game import Game
from .primitives import SoftPrimitives

logger = logging.getLogger("gridsnake")


def time_seed() -> int:
    """Wall-clock time in milliseconds. Failing to read the clock is fatal."""
    try:
        return time.time_ns() // 1_000_000
    except (OSError, OverflowError) as e:
        logger.critical("can't get time: %s", e)
        raise SystemExit(f"error: can't get time: {e}") from e


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="gridsnake", add_help=True)
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement (default: current time in ms).")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging verbosity.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    seed = args.seed if args.seed is not None else time_seed()
    logger.info("seed %d", seed)
    game = Game(random.Random(seed))

    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
    pygame.display.set_caption(config.CAPTION)
    prims = SoftPrimitives(screen)
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                running = False

        prims.clear(config.BLACK)
        game.frame(sample_keys(pygame.key.get_pressed()), prims)
        pygame.display.flip()
        clock.tick(config.FPS)

    pygame.quit()
    print("Game Over! Score:", game.snake.score)


if __name__ == "__main__":
    main()
