"""Falling rocks that split when shot and hurt the ship on contact."""

from __future__ import annotations

import enum
import random

import pygame

from adastra.constants import (
    AST_MAX_SPEED,
    AST_MIN_SPEED,
    AST_SCORE_LARGE,
    AST_SCORE_MED,
    AST_SCORE_SMALL,
    RASTER,
    SCENE_H,
    Z_ENTITIES,
)
from adastra.explosion import Explosion
from adastra.pixelart import draw_pixel_art
from adastra.player import Player
from adastra.scene import Item, RectF


class AsteroidSize(enum.IntEnum):
    SMALL = 0
    MEDIUM = 1
    LARGE = 2


_SPRITES = {
    AsteroidSize.LARGE: (
        (".....###.....", "...##ooo##...", "..#ooooooo#..", ".#ooo***ooo#.", ".#oo*****oo#.",
         "#ooo*****ooo#", "#ooooooooooo#", ".#ooooooooo#.", " .#ooooooooo#.",
         "..#ooooooo#..", "...#######...", ".....###....."),
        ("....###......", "..##ooo##....", ".#ooooooo#...", "#oo****ooo#..", "#oo*****oo#..",
         "#oooooooooo#.", ".#oooooooooo#", "..#oooooooo#.", "...#######...", ".....###....."),
    ),
    AsteroidSize.MEDIUM: (
        ("...##..", ".##oo#.", "#oo**o#", "#ooooo#", ".#ooo#.", "..###.."),
        ("..###..", ".#oo*#.", "#ooooo#", ".#ooo#.", "..###.."),
    ),
    AsteroidSize.SMALL: (
        (".#.", "#o#", ".#."),
        (".#.", "#*#", "###"),
    ),
}

_PALETTE = {
    "#": (100, 90, 80),
    "o": (140, 130, 120),
    "*": (80, 70, 60),
}

_DIM_CELLS = {
    AsteroidSize.LARGE: 12,
    AsteroidSize.MEDIUM: 6,
    AsteroidSize.SMALL: 3,
}

_SCORES = {
    AsteroidSize.LARGE: AST_SCORE_LARGE,
    AsteroidSize.MEDIUM: AST_SCORE_MED,
    AsteroidSize.SMALL: AST_SCORE_SMALL,
}

_PLAYER_CONTACT_DAMAGE = 30
_SPLIT_OFFSET = 20
_POWER_UP_CHANCE = 10


class Asteroid(Item):
    """A rock drifting down; large ones split in two and may drop a power-up."""

    def __init__(self, size: AsteroidSize = AsteroidSize.LARGE, rng: random.Random | None = None):
        super().__init__()
        self.size = AsteroidSize(size)
        self.z = Z_ENTITIES
        rng = rng if rng is not None else random.Random()
        if self.size is AsteroidSize.LARGE:
            self.speed = AST_MIN_SPEED + rng.random() * 0.5
        elif self.size is AsteroidSize.MEDIUM:
            self.speed = AST_MIN_SPEED + 0.5 + rng.random() * 0.5
        else:
            self.speed = AST_MAX_SPEED + rng.random() * 0.5
        self.variant = rng.randrange(len(_SPRITES[self.size]))

    def bounding_rect(self) -> RectF:
        dim = _DIM_CELLS[self.size] * RASTER
        return RectF(float(-(dim // 2)), float(-(dim // 2)), float(dim), float(dim))

    def paint(self, surface: pygame.Surface) -> None:
        sprite = _SPRITES[self.size][self.variant]
        draw_pixel_art(surface, sprite, _PALETTE, (self.x, self.y), True)

    def advance(self) -> None:
        g = self.game
        if g is None:
            return
        self.move_by(0, self.speed * g.difficulty_speed_mul())

        if self.y > SCENE_H + 50:
            g.asteroid_leaked()
            self.delete_later()
            return

        if any(isinstance(item, Player) for item in self.colliding_items()):
            g.player_hit(_PLAYER_CONTACT_DAMAGE)
            self.destroy(True)

    def hit(self) -> None:
        """React to a bullet: blow up and split."""
        self.destroy(True)

    def destroy(self, split: bool) -> None:
        """Explode, award points and, for large rocks, split and maybe drop a power-up."""
        sc = self.scene
        g = self.game
        if sc is None:
            self.delete_later()
            return

        blast = Explosion()
        blast.set_pos(self.x, self.y)
        sc.add_item(blast)

        if g is not None:
            g.add_score(self.score_value())

        if split and self.size is AsteroidSize.LARGE:
            for offset in (-_SPLIT_OFFSET, _SPLIT_OFFSET):
                child = Asteroid(AsteroidSize.MEDIUM, sc.rng)
                child.set_pos(self.x + offset, self.y)
                sc.add_item(child)

        if g is not None and self.size is AsteroidSize.LARGE:
            if sc.rng.randrange(100) < _POWER_UP_CHANCE:
                g.spawn_power_up(self.x, self.y)

        self.delete_later()

    def score_value(self) -> int:
        return _SCORES[self.size]