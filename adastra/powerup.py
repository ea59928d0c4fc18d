"""Collectable boxes that grant a shield, a triple shot or health."""

from __future__ import annotations

import colorsys
import enum

import pygame

from adastra.constants import POWERUP_SPEED, SCENE_H, Z_POWERUPS
from adastra.pixelart import draw_pixel_art
from adastra.player import Player
from adastra.scene import Item, RectF


class PowerUpType(enum.IntEnum):
    SHIELD = 0
    TRI_SHOT = 1
    HEALTH_PACK = 2


_LETTERS = {
    PowerUpType.SHIELD: (
        ".#####.",
        "#.....#",
        "#..____",
        ".#####.",
        "____..#",
        "#.....#",
        ".#####.",
    ),
    PowerUpType.TRI_SHOT: (
        "#######",
        "...#...",
        "...#...",
        "...#...",
        "...#...",
        "...#...",
        "...#...",
    ),
    PowerUpType.HEALTH_PACK: (
        "#.....#",
        "#.....#",
        "#######",
        "#######",
        "#.....#",
        "#.....#",
        "#.....#",
    ),
}

_COLORS = {
    PowerUpType.SHIELD: (80, 180, 255),
    PowerUpType.TRI_SHOT: (255, 200, 0),
    PowerUpType.HEALTH_PACK: (50, 220, 50),
}

_WHITE = (255, 255, 255)
_LETTER_PALETTE = {"#": _WHITE, "_": _WHITE}
_BOX = 28


def _darker(color, factor: int) -> tuple[int, int, int]:
    h, s, v = colorsys.rgb_to_hsv(*(c / 255 for c in color))
    r, g, b = colorsys.hsv_to_rgb(h, s, v * 100 / factor)
    return (round(r * 255), round(g * 255), round(b * 255))


class PowerUp(Item):
    """A lettered box falling at a steady pace until the ship picks it up."""

    def __init__(self, kind: PowerUpType):
        super().__init__()
        self.kind = PowerUpType(kind)
        self.z = Z_POWERUPS
        self.sine_phase = 0.0

    def bounding_rect(self) -> RectF:
        return RectF(-16.0, -16.0, 32.0, 32.0)

    def paint(self, surface: pygame.Surface) -> None:
        color = _COLORS[self.kind]
        box = pygame.Rect(int(self.x) - _BOX // 2, int(self.y) - _BOX // 2, _BOX, _BOX)
        pygame.draw.rect(surface, _darker(color, 200), box)
        pygame.draw.rect(surface, _WHITE, box, 2)
        pygame.draw.rect(surface, color, box.inflate(-4, -4), 1)
        draw_pixel_art(surface, _LETTERS[self.kind], _LETTER_PALETTE, (self.x, self.y), True)

    def advance(self) -> None:
        self.y += POWERUP_SPEED
        self.sine_phase += 0.1

        g = self.game
        if g is not None and any(isinstance(item, Player) for item in self.colliding_items()):
            g.activate_power_up(self.kind)
            self.delete_later()
            return

        if self.y > SCENE_H + 50:
            self.delete_later()