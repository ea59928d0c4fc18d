import random

import pygame

from adastra.constants import RASTER
from adastra.debris import Debris


def _debris(seed=3):
    return Debris(random.Random(seed))


def test_life_range_and_direction():
    for seed in range(30):
        d = _debris(seed)
        assert 8 <= d.life <= 12
        assert d.max_life == d.life
        assert (d.step_x, d.step_y) != (0, 0)
        assert abs(d.step_x) + abs(d.step_y) in (1, 2)


def test_advance_moves_by_step():
    d = _debris()
    d.set_pos(100, 100)
    d.advance()
    assert d.x == 100 + d.step_x * RASTER
    assert d.y == 100 + d.step_y * RASTER


def test_deleted_when_life_runs_out():
    d = _debris(7)
    life = d.life
    for _ in range(life - 1):
        d.advance()
    assert not d.deleted
    d.advance()
    assert d.deleted


def test_alpha_fades():
    d = _debris(1)
    assert d.color()[3] == 255
    previous = d.color()[3]
    for _ in range(d.life - 1):
        d.advance()
        alpha = d.color()[3]
        assert alpha < previous
        previous = alpha


def test_bounding_rect_is_one_cell():
    rect = _debris().bounding_rect()
    assert rect.width == RASTER
    assert rect.height == RASTER
    assert rect.left == -RASTER / 2


def test_paint_draws_own_color():
    d = _debris(2)
    d.set_pos(10, 10)
    surface = pygame.Surface((20, 20))
    surface.fill((0, 0, 0))
    d.paint(surface)
    assert tuple(surface.get_at((10, 10)))[:3] == d.color()[:3]
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)