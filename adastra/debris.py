"""Short-lived sparks thrown out by an explosion."""

from __future__ import annotations

import random

import pygame

from adastra.constants import RASTER
from adastra.pixelart import draw_pixel_art
from adastra.scene import Item, RectF

_DIRECTIONS = (
    (1, 0), (-1, 0), (0, 1), (0, -1),
    (1, -1), (-1, -1), (1, 1), (-1, 1),
    (2, 0), (-2, 0), (0, 2), (0, -2),
)

_COLORS = (
    (255, 240, 160),
    (255, 210, 110),
    (255, 170, 80),
)


class Debris(Item):
    """A single raster cell that flies in a fixed direction and fades out."""

    def __init__(self, rng: random.Random | None = None):
        super().__init__()
        self.z = 7
        rng = rng if rng is not None else random.Random()
        self.step_x, self.step_y = rng.choice(_DIRECTIONS)
        self.life = 8 + rng.randrange(5)
        self.max_life = self.life

    def bounding_rect(self) -> RectF:
        s = float(RASTER)
        return RectF(-s / 2.0, -s / 2.0, s, s)

    def color(self) -> tuple[int, int, int, int]:
        """Current RGBA colour; alpha follows the remaining life."""
        t = self.life / self.max_life if self.max_life > 0 else 0.0
        alpha = max(0, min(255, int(255 * t)))
        return (*_COLORS[self.life % 3], alpha)

    def paint(self, surface: pygame.Surface) -> None:
        draw_pixel_art(surface, ["#"], {"#": self.color()}, (self.x, self.y), True)

    def advance(self) -> None:
        self.x += self.step_x * RASTER
        self.y += self.step_y * RASTER
        self.life -= 1
        if self.life <= 0:
            self.delete_later()