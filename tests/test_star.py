import random

import pygame

from adastra.constants import RASTER, SCENE_H, SCENE_W
from adastra.star import Star, StarLayer


def test_position_within_scene():
    rng = random.Random(9)
    for _ in range(50):
        s = Star(StarLayer.BACK, rng)
        assert 0 <= s.x < SCENE_W
        assert 0 <= s.y < SCENE_H


def test_front_star_moves_every_frame():
    s = Star(StarLayer.FRONT, random.Random(1))
    s.set_pos(10, 10)
    s.advance()
    assert s.y == 10 + RASTER


def test_back_star_moves_every_other_frame():
    s = Star(StarLayer.BACK, random.Random(1))
    s.set_pos(10, 10)
    s.advance()
    assert s.y == 10
    s.advance()
    assert s.y == 10 + RASTER


def test_wraps_to_top():
    s = Star(StarLayer.FRONT, random.Random(1))
    s.set_pos(10, SCENE_H)
    s.advance()
    assert s.y == 0


def test_layer_colors_differ():
    front = Star(StarLayer.FRONT, random.Random(2))
    back = Star(StarLayer.BACK, random.Random(2))
    surfaces = []
    for star in (front, back):
        star.set_pos(8, 8)
        surface = pygame.Surface((16, 16))
        surface.fill((0, 0, 0))
        star.paint(surface)
        surfaces.append(tuple(surface.get_at((8, 8))))
    assert surfaces[0][:3] == (255, 255, 255)
    assert surfaces[0] != surfaces[1]


def test_bounding_rect_is_one_cell():
    rect = Star(StarLayer.BACK, random.Random(0)).bounding_rect()
    assert rect.width == rect.height == RASTER