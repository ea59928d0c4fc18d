import random

import pygame
import pytest

from adastra.constants import POWERUP_SPEED, SCENE_H, SCENE_W
from adastra.player import Player
from adastra.powerup import PowerUp, PowerUpType
from adastra.scene import Scene


class FakeGame:
    def __init__(self):
        self.activated = []

    def activate_power_up(self, kind):
        self.activated.append(kind)


def make_scene(game=None):
    scene = Scene(SCENE_W, SCENE_H, random.Random(0))
    scene.game = game
    return scene


def test_bounding_rect_centred_square():
    r = PowerUp(PowerUpType.SHIELD).bounding_rect()
    assert r.width == r.height
    assert r.left == -r.width / 2


def test_falls_at_constant_speed():
    scene = make_scene(FakeGame())
    p = PowerUp(PowerUpType.TRI_SHOT)
    p.set_pos(100, 100)
    scene.add_item(p)
    p.advance()
    p.advance()
    assert p.y == pytest.approx(100 + 2 * POWERUP_SPEED)
    assert p.x == 100
    assert not p.deleted


@pytest.mark.parametrize("kind", list(PowerUpType))
def test_pickup_activates_and_disappears(kind):
    game = FakeGame()
    scene = make_scene(game)
    player = Player()
    player.set_pos(200, 300)
    scene.add_item(player)
    p = PowerUp(kind)
    p.set_pos(200, 290)
    scene.add_item(p)
    p.advance()
    assert game.activated == [kind]
    assert p.deleted


def test_no_pickup_without_game():
    scene = make_scene(None)
    player = Player()
    player.set_pos(200, 300)
    scene.add_item(player)
    p = PowerUp(PowerUpType.HEALTH_PACK)
    p.set_pos(200, 290)
    scene.add_item(p)
    p.advance()
    assert not p.deleted


def test_falls_off_screen():
    scene = make_scene(FakeGame())
    p = PowerUp(PowerUpType.SHIELD)
    p.set_pos(100, SCENE_H + 50)
    scene.add_item(p)
    p.advance()
    assert p.deleted


def test_paint_draws_white_border_and_letter():
    surface = pygame.Surface((100, 100))
    p = PowerUp(PowerUpType.SHIELD)
    p.set_pos(50, 50)
    p.paint(surface)
    assert tuple(surface.get_at((36, 36)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((50, 50)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((10, 10)))[:3] == (0, 0, 0)