"""Scrolling background stars in two parallax layers."""

from __future__ import annotations

import enum
import random

import pygame

from adastra.constants import RASTER, SCENE_H, SCENE_W
from adastra.pixelart import draw_pixel_art
from adastra.scene import Item, RectF


class StarLayer(enum.Enum):
    BACK = "back"
    FRONT = "front"


class Star(Item):
    """A one-cell star that scrolls down in raster steps and wraps to the top."""

    def __init__(self, layer: StarLayer, rng: random.Random | None = None):
        super().__init__()
        self.layer = StarLayer(layer)
        self.z = 0
        rng = rng if rng is not None else random.Random()
        self.set_pos(rng.randrange(SCENE_W), rng.randrange(SCENE_H))
        self.speed = (0.5 if self.layer is StarLayer.BACK else 1.0) * RASTER
        self.accum = 0.0

    def bounding_rect(self) -> RectF:
        return RectF(-RASTER / 2.0, -RASTER / 2.0, float(RASTER), float(RASTER))

    def paint(self, surface: pygame.Surface) -> None:
        color = (255, 255, 255) if self.layer is StarLayer.FRONT else (200, 200, 200)
        draw_pixel_art(surface, ["#"], {"#": color}, (self.x, self.y), True)

    def advance(self) -> None:
        self.accum += self.speed
        while self.accum >= RASTER:
            self.y += RASTER
            self.accum -= RASTER
        if self.y > SCENE_H:
            self.y = 0.0