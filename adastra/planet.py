"""Procedurally drawn planets that drift past in the far background."""

from __future__ import annotations

import colorsys
import enum
import random

import pygame

from adastra.constants import PLANET_SPEED_MIN, RASTER, SCENE_H, SCENE_W, Z_PLANETS
from adastra.scene import Item, RectF


class BiomeType(enum.IntEnum):
    FROST = 0
    FIRE = 1
    JUNGLE = 2
    DUST = 3
    OCEAN = 4
    CYBER = 5


_PALETTES = {
    BiomeType.FROST: ((140, 190, 220), (70, 110, 170), (210, 230, 250)),
    BiomeType.FIRE: ((170, 70, 50), (90, 30, 20), (210, 130, 40)),
    BiomeType.JUNGLE: ((50, 130, 70), (25, 65, 35), (90, 170, 190)),
    BiomeType.DUST: ((150, 130, 100), (90, 80, 60), (180, 170, 160)),
    BiomeType.OCEAN: ((35, 70, 150), (15, 30, 90), (70, 130, 190)),
    BiomeType.CYBER: ((90, 30, 130), (40, 15, 70), (0, 210, 210)),
}


def planet_palette(biome: BiomeType) -> tuple[tuple, tuple, tuple]:
    """Base, dark and detail colours of a biome."""
    return _PALETTES[BiomeType(biome)]


def _from_hsv(h: float, s: float, v: float) -> tuple[int, int, int]:
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return (round(r * 255), round(g * 255), round(b * 255))


def _darker(color, factor: int) -> tuple[int, int, int]:
    h, s, v = colorsys.rgb_to_hsv(*(c / 255 for c in color))
    return _from_hsv(h, s, v * 100 / factor)


def _lighter(color, factor: int) -> tuple[int, int, int]:
    h, s, v = colorsys.rgb_to_hsv(*(c / 255 for c in color))
    v = v * factor / 100
    if v > 1.0:
        s = max(0.0, s - (v - 1.0))
        v = 1.0
    return _from_hsv(h, s, v)


def _canvas_cells(cells: int, has_rings: bool) -> int:
    return int(cells * 1.6) if has_rings else cells


def planet_pixels(biome: BiomeType, cells: int, has_rings: bool) -> dict[tuple[int, int], tuple]:
    """Colour of every filled cell of a planet, keyed by (x, y) cell position."""
    base, dark, detail = planet_palette(biome)
    canvas = _canvas_cells(cells, has_rings)
    radius = cells / 2.0
    center = canvas / 2.0
    r_sq = radius * radius
    pixels: dict[tuple[int, int], tuple] = {}

    for y in range(canvas):
        for x in range(canvas):
            dx = (x + 0.5) - center
            dy = (y + 0.5) - center
            if dx * dx + dy * dy > r_sq:
                continue
            pattern = (x * 53 + y * 97) % 100
            color = detail if pattern > 75 else dark if pattern < 25 else base
            shaded = x > center + radius * 0.3 or y > center + radius * 0.3
            if shaded and (x + y) % 2 == 0:
                color = _darker(color, 140)
            pixels[(x, y)] = color

    if has_rings:
        ring = _lighter(detail, 115)
        inner = (radius + 2) ** 2
        outer = (radius + 6) ** 2
        for y in range(canvas):
            for x in range(canvas):
                dx = (x + 0.5) - center
                dy = (y + 0.5) - center
                dr = dx * dx + (dy * 3.0) ** 2
                if not inner < dr < outer:
                    continue
                if y < center and dx * dx + dy * dy < r_sq:
                    continue
                if (x + y) % 2 != 0:
                    pixels[(x, y)] = ring
    return pixels


class Planet(Item):
    """A slowly falling planet, optionally ringed, coloured by its biome."""

    def __init__(self, biome: BiomeType, rng: random.Random | None = None):
        super().__init__()
        self.biome = BiomeType(biome)
        self.z = Z_PLANETS
        self.exiting = False
        rng = rng if rng is not None else random.Random()
        self.speed = PLANET_SPEED_MIN + rng.random() * 0.3

        cells = rng.randint(24, 49)
        if cells % 2:
            cells += 1
        self.cells = cells
        self.has_rings = rng.randrange(4) == 0
        self.sprite = self._render_sprite()

        raw_x = rng.randrange(0, SCENE_W)
        self.set_pos((raw_x // RASTER) * RASTER, -self.bounding_rect().height)

    def _render_sprite(self) -> pygame.Surface:
        size = _canvas_cells(self.cells, self.has_rings) * RASTER
        sprite = pygame.Surface((size, size), pygame.SRCALPHA)
        sprite.fill((0, 0, 0, 0))
        for (x, y), color in planet_pixels(self.biome, self.cells, self.has_rings).items():
            sprite.fill(color, pygame.Rect(x * RASTER, y * RASTER, RASTER, RASTER))
        return sprite

    def bounding_rect(self) -> RectF:
        w, h = self.sprite.get_size()
        return RectF(0.0, 0.0, float(w), float(h))

    def paint(self, surface: pygame.Surface) -> None:
        surface.blit(self.sprite, (int(self.x), int(self.y)))

    def advance(self) -> None:
        self.y += 8.0 if self.exiting else self.speed
        if self.y > SCENE_H + 200:
            self.delete_later()

    def accelerate_exit(self) -> None:
        """Make the planet leave the screen quickly."""
        self.exiting = True