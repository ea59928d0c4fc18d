"""A brief blocky blast that scatters debris."""

from __future__ import annotations

import math
import random

import pygame

from adastra.constants import EXP_DEBRIS, EXP_FRAMES, RASTER
from adastra.debris import Debris
from adastra.scene import Item, RectF


def _blend_rect(surface: pygame.Surface, x: float, y: float, w: float, h: float, color) -> None:
    if color[3] <= 0:
        return
    patch = pygame.Surface((int(w), int(h)), pygame.SRCALPHA)
    patch.fill(color)
    surface.blit(patch, (int(round(x)), int(round(y))))


class Explosion(Item):
    """Core flash, expanding chunks and random sparks over a fixed frame count."""

    def __init__(self):
        super().__init__()
        self.z = 8
        self.frame = 0
        self.debris_spawned = False

    def bounding_rect(self) -> RectF:
        r = float(RASTER * 6)
        return RectF(-r, -r, 2 * r, 2 * r)

    def paint(self, surface: pygame.Surface) -> None:
        t = self.frame / EXP_FRAMES
        t2 = t * t

        core_r = RASTER * 2
        _blend_rect(
            surface, self.x - core_r, self.y - core_r, core_r * 2, core_r * 2,
            (255, 240, 180, int(255 * (1.0 - t))),
        )

        max_r = RASTER * 5
        r = RASTER * 1.5 + t * (max_r - RASTER * 1.5)
        chunk = RASTER * 2
        chunk_color = (255, 180, 70, int(220 * (1.0 - t2)))
        for i in range(8):
            ang = (math.pi / 4.0) * i
            cx = math.cos(ang) * r
            cy = math.sin(ang) * r
            _blend_rect(
                surface, self.x + cx - chunk / 2.0, self.y + cy - chunk / 2.0,
                chunk, chunk, chunk_color,
            )

        rng = self.scene.rng if self.scene is not None else random
        spark_color = (255, 255, 210, int(160 * (1.0 - t)))
        grid_radius = 5
        for _ in range(6):
            gx = rng.randint(-grid_radius, grid_radius) * RASTER
            gy = rng.randint(-grid_radius, grid_radius) * RASTER
            _blend_rect(surface, self.x + gx, self.y + gy, RASTER, RASTER, spark_color)

    def advance(self) -> None:
        if not self.debris_spawned and self.frame >= 2:
            self.debris_spawned = True
            if self.scene is not None:
                for _ in range(EXP_DEBRIS):
                    d = Debris(self.scene.rng)
                    d.set_pos(self.x, self.y)
                    self.scene.add_item(d)
        self.frame += 1
        if self.frame >= EXP_FRAMES:
            self.delete_later()