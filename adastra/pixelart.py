"""Drawing of character-grid sprites and the blocky bitmap font."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

import pygame

from adastra.constants import RASTER

Color = tuple


def _fill(surface: pygame.Surface, x: float, y: float, w: float, h: float, color) -> None:
    """Fill a rectangle, blending when the colour is translucent."""
    c = pygame.Color(color)
    if c.a == 0:
        return
    rect = pygame.Rect(int(round(x)), int(round(y)), int(round(w)), int(round(h)))
    if rect.width <= 0 or rect.height <= 0:
        return
    if c.a < 255:
        patch = pygame.Surface(rect.size, pygame.SRCALPHA)
        patch.fill(c)
        surface.blit(patch, rect.topleft)
    else:
        surface.fill(c, rect)


def sprite_size(rows: Sequence[str]) -> tuple[int, int]:
    """Pixel size (width, height) of a sprite drawn at raster scale."""
    if not rows:
        return (0, 0)
    return (len(rows[0]) * RASTER, len(rows) * RASTER)


def draw_pixel_art(
    surface: pygame.Surface,
    rows: Sequence[str],
    palette: Mapping[str, object],
    pos: tuple[float, float] = (0, 0),
    centered: bool = True,
) -> None:
    """Draw a sprite whose rows are strings of palette keys; '.' is empty."""
    if not rows:
        return
    h = len(rows)
    w = len(rows[0])
    ox = -w / 2.0 if centered else 0.0
    oy = -h / 2.0 if centered else 0.0
    px, py = pos
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch == "." or ch not in palette:
                continue
            _fill(
                surface,
                px + (ox + x) * RASTER,
                py + (oy + y) * RASTER,
                RASTER,
                RASTER,
                palette[ch],
            )


def snap_raster(v: float) -> float:
    """Round a coordinate to the nearest raster multiple, halves away from zero."""
    q = v / RASTER
    rounded = math.copysign(math.floor(abs(q) + 0.5), q)
    return float(rounded * RASTER)


_GLYPHS: dict[str, tuple[str, ...]] = {
    "A": ("..#..", ".#.#.", "#####", "#...#", "#...#"),
    "B": ("####.", "#...#", "####.", "#...#", "####."),
    "C": (".####", "#....", "#....", "#....", ".####"),
    "E": ("#####", "#....", "#####", "#....", "#####"),
    "R": ("####.", "#...#", "####.", "#..#.", "#...#"),
    "O": (".###.", "#...#", "#...#", "#...#", ".###."),
    "U": ("#...#", "#...#", "#...#", "#...#", ".###."),
    "N": ("#...#", "##..#", "#.#.#", "#..##", "#...#"),
    "D": ("####.", "#...#", "#...#", "#...#", "####."),
    "1": ("..#..", ".##..", "..#..", "..#..", ".###."),
    "2": (".###.", "#...#", "...#.", "..#..", "#####"),
    "3": ("#####", "...#.", ".###.", "...#.", "#####"),
    " ": (".....", ".....", ".....", ".....", "....."),
}

_GLYPH_ADVANCE = 6


class PixelFont:
    """A tiny 5x5 block font drawn with a drop shadow."""

    def __init__(self, color=(255, 255, 255), shadow=(40, 40, 40, 180)):
        self.color = color
        self.shadow = shadow

    def glyph(self, char: str) -> list[str]:
        """Rows of the glyph for a character; unknown characters are blank."""
        return list(_GLYPHS.get(char, _GLYPHS[" "]))

    def draw(self, surface: pygame.Surface, text: str, top_left=(0, 0), scale: int = 1) -> None:
        """Draw text in upper case with its top-left corner at top_left."""
        left, top = top_left
        cell = RASTER * scale
        shift = RASTER // 4
        for index, ch in enumerate(text):
            rows = self.glyph(ch.upper())
            xoff = index * _GLYPH_ADVANCE
            for y, row in enumerate(rows):
                for x, mark in enumerate(row):
                    if mark != "#":
                        continue
                    rx = left + (xoff + x) * cell
                    ry = top + y * cell
                    _fill(surface, rx + shift, ry + shift, cell, cell, self.shadow)
                    _fill(surface, rx, ry, cell, cell, self.color)