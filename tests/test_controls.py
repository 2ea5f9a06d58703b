from __future__ import annotations

from collections import defaultdict

import pygame
import pytest

from gridsnake.controls import FrameInput, heading_for, sample_keys
from gridsnake.grid import Direction


def _held(**keys) -> FrameInput:
    return FrameInput.idle()._replace(**keys)


def test_idle_keeps_heading():
    assert heading_for(FrameInput.idle()) is None


@pytest.mark.parametrize(
    "held, expected",
    [
        ({"up": True}, Direction.UP),
        ({"left": True}, Direction.LEFT),
        ({"right": True}, Direction.RIGHT),
        ({"down": True}, Direction.DOWN),
        ({"up": True, "down": True}, Direction.UP),
        ({"left": True, "right": True, "down": True}, Direction.LEFT),
        ({"right": True, "down": True}, Direction.RIGHT),
        ({"up": True, "left": True, "right": True, "down": True}, Direction.UP),
    ],
)
def test_heading_priority(held, expected):
    assert heading_for(_held(**held)) is expected


def test_restart_does_not_steer():
    assert heading_for(_held(restart=True)) is None


def test_sample_keys_maps_arrows_and_space():
    pressed = defaultdict(bool, {pygame.K_LEFT: True, pygame.K_SPACE: True})
    assert sample_keys(pressed) == FrameInput(up=False, left=True, right=False, down=False, restart=True)


def test_sample_keys_ignores_other_keys():
    pressed = defaultdict(bool, {pygame.K_a: True, pygame.K_w: True})
    assert sample_keys(pressed) == FrameInput.idle()
