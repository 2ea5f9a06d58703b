from __future__ import annotations

import os

import pytest

# Headless pygame for the drawing and key-sampling tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class RecordingPrimitives:
    """Stands in for SoftPrimitives and records draw calls in order."""

    def __init__(self):
        self.calls = []

    def rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def text_width(self, s, size):
        return len(s) * 10

    def text(self, s, x, y, size, color):
        self.calls.append(("text", s, x, y, size, color))


@pytest.fixture
def prims():
    return RecordingPrimitives()
