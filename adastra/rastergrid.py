"""An overlay of the raster grid, drawn once and cached."""

from __future__ import annotations

import pygame

from adastra.constants import RASTER, SCENE_H, SCENE_W, Z_GRID
from adastra.scene import Item, RectF


class RasterGrid(Item):
    """Faint lines on every raster cell border plus a frame around the scene."""

    def __init__(self):
        super().__init__()
        self.z = Z_GRID
        self.cache: pygame.Surface | None = None

    def bounding_rect(self) -> RectF:
        return RectF(0.0, 0.0, float(SCENE_W), float(SCENE_H))

    def _ensure_cache(self) -> pygame.Surface:
        if self.cache is not None and self.cache.get_size() == (SCENE_W, SCENE_H):
            return self.cache
        cache = pygame.Surface((SCENE_W, SCENE_H), pygame.SRCALPHA)
        cache.fill((0, 0, 0, 0))
        line = (200, 200, 200, 100)
        for x in range(0, SCENE_W + 1, RASTER):
            pygame.draw.line(cache, line, (x, 0), (x, SCENE_H))
        for y in range(0, SCENE_H + 1, RASTER):
            pygame.draw.line(cache, line, (0, y), (SCENE_W, y))
        pygame.draw.rect(cache, (120, 120, 120, 150), pygame.Rect(0, 0, SCENE_W, SCENE_H), 1)
        self.cache = cache
        return cache

    def paint(self, surface: pygame.Surface) -> None:
        surface.blit(self._ensure_cache(), (int(self.x), int(self.y)))