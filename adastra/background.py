"""The sky colour behind everything, which shifts with the round."""

from __future__ import annotations

import pygame

from adastra.constants import PLANET_SPAWN_CHANCE, SCENE_H, SCENE_W, Z_BG_COLOR
from adastra.planet import BiomeType, Planet
from adastra.scene import Item, RectF

_SKY = {
    BiomeType.FROST: (10, 15, 35),
    BiomeType.FIRE: (30, 10, 10),
    BiomeType.JUNGLE: (10, 25, 15),
    BiomeType.DUST: (25, 20, 15),
    BiomeType.OCEAN: (5, 10, 40),
    BiomeType.CYBER: (20, 5, 30),
}


def biome_for_round(round_number: int) -> BiomeType:
    """Biome of a round; the six biomes repeat from round 1 onwards."""
    if round_number < 1:
        raise ValueError(f"round must be at least 1, got {round_number}")
    return BiomeType((round_number - 1) % 6)


def sky_color(biome: BiomeType) -> tuple[int, int, int]:
    return _SKY.get(BiomeType(biome), (0, 0, 0))


class Background(Item):
    """Fills the scene with a sky colour and now and then launches a planet."""

    def __init__(self):
        super().__init__()
        self.z = Z_BG_COLOR
        self.current_round = 1
        self.current_biome = BiomeType.FROST
        self.target_biome = BiomeType.FROST
        self.current_color = sky_color(self.current_biome)
        self.target_color = self.current_color
        self.color_progress = 1.0

    def bounding_rect(self) -> RectF:
        return RectF(0.0, 0.0, float(SCENE_W), float(SCENE_H))

    def paint(self, surface: pygame.Surface) -> None:
        surface.fill(self.current_color, pygame.Rect(0, 0, SCENE_W, SCENE_H))

    def advance(self) -> None:
        if self.color_progress < 1.0:
            self.color_progress = min(1.0, self.color_progress + 0.005)
            self.current_color = tuple(
                int(cur + (target - cur) * 0.02)
                for cur, target in zip(self.current_color, self.target_color)
            )
        if self.scene is not None and self.scene.rng.randrange(PLANET_SPAWN_CHANCE) == 0:
            self._spawn_planet()

    def set_round(self, round_number: int) -> None:
        """Start fading towards the sky of the given round's biome."""
        if self.current_round == round_number:
            return
        self.current_round = round_number
        nxt = biome_for_round(round_number)
        if nxt != self.target_biome:
            self.target_biome = nxt
            self.target_color = sky_color(nxt)
            self.color_progress = 0.0

    def _spawn_planet(self) -> None:
        if self.scene is None:
            return
        biome = self.target_biome if self.color_progress > 0.5 else self.current_biome
        self.scene.add_item(Planet(biome, self.scene.rng))