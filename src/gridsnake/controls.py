from __future__ import annotations

from collections import namedtuple

import pygame

from .grid import Direction


class FrameInput(namedtuple("FrameInput", ["up", "left", "right", "down", "restart"])):
    """Which logical keys are held during one frame."""

    __slots__ = ()

    @classmethod
    def idle(cls) -> FrameInput:
        return cls(False, False, False, False, False)


# Checked in order; the first held key wins.
_PRIORITY = (
    ("up", Direction.UP),
    ("left", Direction.LEFT),
    ("right", Direction.RIGHT),
    ("down", Direction.DOWN),
)

_KEYS = {
    "up": pygame.K_UP,
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
    "down": pygame.K_DOWN,
    "restart": pygame.K_SPACE,
}


def heading_for(frame_input: FrameInput) -> Direction | None:
    for field, direction in _PRIORITY:
        if getattr(frame_input, field):
            return direction
    return None


def sample_keys(pressed) -> FrameInput:
    """Build a snapshot from ``pygame.key.get_pressed()``."""
    return FrameInput(**{field: bool(pressed[key]) for field, key in _KEYS.items()})
