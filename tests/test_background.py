import random

import pygame
import pytest

from adastra.background import Background, biome_for_round, sky_color
from adastra.constants import SCENE_H, SCENE_W, Z_BG_COLOR
from adastra.planet import BiomeType, Planet
from adastra.scene import Scene


class _LowestRandom(random.Random):
    def randrange(self, start, stop=None, step=1):
        return 0 if stop is None else start

    def random(self):
        return 0.0


class _HighestRandom(random.Random):
    def randrange(self, start, stop=None, step=1):
        return (start if stop is None else stop) - 1


def test_biomes_cycle_every_six_rounds():
    assert biome_for_round(1) is BiomeType.FROST
    assert biome_for_round(2) is BiomeType.FIRE
    assert biome_for_round(6) is BiomeType.CYBER
    assert biome_for_round(7) is BiomeType.FROST


def test_invalid_round_rejected():
    with pytest.raises(ValueError):
        biome_for_round(0)


def test_sky_colors_from_source():
    assert sky_color(BiomeType.FROST) == (10, 15, 35)
    assert sky_color(BiomeType.OCEAN) == (5, 10, 40)


def test_initial_state():
    bg = Background()
    assert bg.current_color == sky_color(BiomeType.FROST)
    assert bg.color_progress == 1.0
    assert bg.z == Z_BG_COLOR


def test_same_round_keeps_progress():
    bg = Background()
    bg.set_round(1)
    assert bg.color_progress == 1.0
    bg.set_round(7)
    assert bg.color_progress == 1.0
    assert bg.target_biome is BiomeType.FROST


def test_color_fades_toward_target():
    bg = Background()
    bg.set_round(2)
    assert bg.target_color == sky_color(BiomeType.FIRE)
    assert bg.color_progress == 0.0
    start = bg.current_color
    target = bg.target_color
    for _ in range(50):
        bg.advance()
    for s, c, t in zip(start, bg.current_color, target):
        assert abs(t - c) <= abs(t - s)
    assert bg.current_color != start


def test_fade_stops_when_complete():
    bg = Background()
    bg.set_round(3)
    for _ in range(250):
        bg.advance()
    assert bg.color_progress == 1.0
    settled = bg.current_color
    bg.advance()
    assert bg.current_color == settled


def test_planets_spawn_with_current_then_target_biome():
    scene = Scene(SCENE_W, SCENE_H, rng=_LowestRandom())
    bg = Background()
    scene.add_item(bg)
    bg.advance()
    planets = scene.items_of_type(Planet)
    assert [p.biome for p in planets] == [BiomeType.FROST]
    bg.set_round(2)
    for _ in range(110):
        bg.advance()
    planets = scene.items_of_type(Planet)
    assert planets[-1].biome is BiomeType.FIRE
    assert planets[1].biome is BiomeType.FROST


def test_no_planet_when_roll_misses():
    scene = Scene(SCENE_W, SCENE_H, rng=_HighestRandom())
    bg = Background()
    scene.add_item(bg)
    for _ in range(20):
        bg.advance()
    assert scene.items_of_type(Planet) == []


def test_paint_fills_sky():
    bg = Background()
    surface = pygame.Surface((SCENE_W, SCENE_H))
    bg.paint(surface)
    assert tuple(surface.get_at((5, 5)))[:3] == sky_color(BiomeType.FROST)