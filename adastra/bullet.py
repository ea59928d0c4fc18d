"""Shots fired upwards by the ship."""

from __future__ import annotations

import pygame

from adastra.asteroid import Asteroid
from adastra.constants import (
    BULLET_SPEED,
    PLAYER_MAX_HP,
    RASTER,
    SHAKE_INTENSITY,
    SHAKE_MS,
)
from adastra.mine import Mine
from adastra.pixelart import draw_pixel_art
from adastra.scene import Item, RectF

_SPRITE = (
    "..yy..",
    ".yyyy.",
    ".yyyy.",
    "..yy..",
)

_PALETTE = {"y": (250, 240, 180)}


class Bullet(Item):
    """Climbs in whole raster steps and hits the first rock or mine it touches."""

    def __init__(self):
        super().__init__()
        self.z = 4
        self.accum = 0.0

    def bounding_rect(self) -> RectF:
        w = len(_SPRITE[0]) * RASTER
        h = len(_SPRITE) * RASTER
        return RectF(-w / 2.0, -h / 2.0, float(w), float(h))

    def paint(self, surface: pygame.Surface) -> None:
        draw_pixel_art(surface, _SPRITE, _PALETTE, (self.x, self.y), True)

    def advance(self) -> None:
        self.accum += BULLET_SPEED
        while self.accum >= RASTER:
            self.move_by(0, -RASTER)
            self.accum -= RASTER

        if self.y + self.bounding_rect().bottom < 0:
            self.delete_later()
            return

        g = self.game
        for item in self.colliding_items():
            if isinstance(item, Asteroid):
                item.hit()
                self.delete_later()
                return
            if isinstance(item, Mine):
                if g is not None:
                    g.player_hit(PLAYER_MAX_HP)
                    g.shake_scene(int(SHAKE_MS * 2.0), SHAKE_INTENSITY * 1.6)
                    hud = getattr(g, "hud", None)
                    if hud is not None:
                        hud.trigger_flash()
                item.explode_vigorously()
                self.delete_later()
                return