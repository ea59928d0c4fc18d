import random

import pygame

from adastra.constants import EXP_DEBRIS, EXP_FRAMES, RASTER, SCENE_H, SCENE_W
from adastra.debris import Debris
from adastra.explosion import Explosion
from adastra.scene import Scene


def _scene():
    return Scene(SCENE_W, SCENE_H, rng=random.Random(4))


def test_debris_spawned_once_on_third_frame():
    scene = _scene()
    e = Explosion()
    e.set_pos(200, 150)
    scene.add_item(e)
    scene.advance()
    scene.advance()
    assert scene.items_of_type(Debris) == []
    scene.advance()
    debris = scene.items_of_type(Debris)
    assert len(debris) == EXP_DEBRIS
    assert all((d.x, d.y) == (200, 150) for d in debris)
    e.advance()
    assert e.debris_spawned


def test_removed_after_all_frames():
    scene = _scene()
    e = Explosion()
    scene.add_item(e)
    for _ in range(EXP_FRAMES - 1):
        scene.advance()
    assert e in scene.items()
    scene.advance()
    assert e not in scene.items()


def test_advance_without_scene_counts_frames():
    e = Explosion()
    for _ in range(EXP_FRAMES):
        e.advance()
    assert e.frame == EXP_FRAMES
    assert e.deleted


def test_bounding_rect_is_square_and_centered():
    rect = Explosion().bounding_rect()
    assert rect.width == rect.height == RASTER * 12
    assert rect.left == -rect.right


def test_paint_draws_core():
    scene = _scene()
    e = Explosion()
    e.set_pos(50, 50)
    scene.add_item(e)
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    e.paint(surface)
    assert surface.get_at((50, 50)).r == 255
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)