from __future__ import annotations

import pygame


class SoftPrimitives:
    """Draw calls onto a pygame surface.

    ``text`` takes the baseline as ``y`` so callers can place strings the
    same way regardless of font size.
    """

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._font_cache: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        font = self._font_cache.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            self._font_cache[size] = font
        return font

    def clear(self, color: tuple[int, int, int]) -> None:
        self.surface.fill(color)

    def rect(self, x: float, y: float, w: int, h: int, color: tuple[int, int, int]) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(int(x), int(y), w, h))

    def text_width(self, s: str, size: int) -> int:
        return self._font(size).size(s)[0]

    def text(self, s: str, x: float, y: float, size: int, color: tuple[int, int, int]) -> None:
        font = self._font(size)
        img = font.render(s, True, color)
        self.surface.blit(img, (int(x), int(y) - font.get_ascent()))
