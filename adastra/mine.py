"""Weaving space mines that end the game when they touch the ship."""

from __future__ import annotations

import math
import random

import pygame

from adastra.constants import (
    MINE_SINE_AMPL,
    MINE_SINE_FREQ,
    MINE_SPEED,
    RASTER,
    SCENE_H,
    SHAKE_INTENSITY,
    SHAKE_MS,
)
from adastra.explosion import Explosion
from adastra.pixelart import draw_pixel_art
from adastra.player import Player
from adastra.scene import Item, RectF, monotonic_ms

_SPRITE = (
    "....x....",
    ".........",
    "..x.g.x..",
    "...ggg...",
    "x.ggrgg.x",
    "...ggg...",
    "..x.g.x..",
    ".........",
    "....x....",
)

_PALETTE = {
    "g": (80, 80, 90),
    "r": (255, 20, 20),
    "x": (180, 180, 190),
}

_BLINK_ON = (255, 100, 100)
_BLINK_OFF = (150, 0, 0)

_BLAST_OFFSETS = ((0, 0), (10, 10), (-10, -5))


class Mine(Item):
    """Sinks slowly while swaying sideways; its core light blinks."""

    def __init__(self, rng: random.Random | None = None):
        super().__init__()
        self.z = 3
        rng = rng if rng is not None else random.Random()
        self.sine_phase = rng.random() * (math.pi * 2.0)

    def bounding_rect(self) -> RectF:
        w = len(_SPRITE[0]) * RASTER
        h = len(_SPRITE) * RASTER
        return RectF(-w / 2.0, -h / 2.0, float(w), float(h))

    def paint(self, surface: pygame.Surface) -> None:
        now = self.scene.clock() if self.scene is not None else monotonic_ms()
        palette = dict(_PALETTE)
        palette["r"] = _BLINK_ON if (now // 100) % 2 == 0 else _BLINK_OFF
        draw_pixel_art(surface, _SPRITE, palette, (self.x, self.y), True)

    def advance(self) -> None:
        g = self.game
        if g is None:
            return

        self.sine_phase += MINE_SINE_FREQ
        dx = math.sin(self.sine_phase) * MINE_SINE_AMPL / 60.0
        dy = MINE_SPEED * g.difficulty_speed_mul()
        self.move_by(dx, dy)

        if self.y > SCENE_H + 50:
            self.delete_later()
            return

        if any(isinstance(item, Player) for item in self.colliding_items()):
            shielded = g.is_shield_active()
            self.explode_vigorously()
            if not shielded:
                g.game_over()

    def explode_vigorously(self) -> None:
        """Blow up with a screen shake, a flash and three overlapping blasts."""
        g = self.game
        sc = self.scene

        if g is not None and sc is not None:
            g.shake_scene(int(SHAKE_MS * 2.0), SHAKE_INTENSITY * 1.6)
            hud = getattr(g, "hud", None)
            if hud is not None:
                hud.trigger_flash()

        if sc is not None:
            for ox, oy in _BLAST_OFFSETS:
                blast = Explosion()
                blast.set_pos(self.x + ox, self.y + oy)
                sc.add_item(blast)

        self.delete_later()