import random

import pygame

from adastra.bullet import Bullet
from adastra.constants import PLAYER_COOLDOWN_MS, RASTER, SCENE_H, SCENE_W
from adastra.player import Player
from adastra.scene import Scene


class FakeGame:
    def __init__(self, shield=False, rapid=False):
        self.shield = shield
        self.rapid = rapid

    def is_shield_active(self):
        return self.shield

    def is_rapid_fire_active(self):
        return self.rapid


def make_scene(game=None):
    now = [1000]
    scene = Scene(SCENE_W, SCENE_H, random.Random(0), lambda: now[0])
    scene.game = game if game is not None else FakeGame()
    return scene, now


def placed_player(scene, x=400, y=500):
    p = Player()
    p.set_pos(x, y)
    scene.add_item(p)
    return p


def test_bounding_rect_centred():
    r = Player().bounding_rect()
    assert r.left == -r.width / 2
    assert r.top == -r.height / 2


def test_left_key_moves_two_cells_left():
    scene, _ = make_scene()
    p = placed_player(scene)
    assert p.key_press(pygame.K_LEFT)
    p.advance()
    assert p.x == 400 - 2 * RASTER
    p.key_release(pygame.K_LEFT)
    p.key_press(pygame.K_d)
    p.advance()
    p.advance()
    assert p.x == 400 + 2 * RASTER


def test_both_directions_cancel_out():
    scene, _ = make_scene()
    p = placed_player(scene)
    p.key_press(pygame.K_a)
    p.key_press(pygame.K_RIGHT)
    p.advance()
    assert p.x == 400


def test_movement_is_clamped_to_scene_edges():
    scene, _ = make_scene()
    p = placed_player(scene, x=32)
    p.key_press(pygame.K_LEFT)
    p.advance()
    assert p.x == 30
    q = placed_player(scene, x=SCENE_W - 32)
    q.key_press(pygame.K_RIGHT)
    q.advance()
    assert q.x == SCENE_W - 30


def test_unknown_key_is_not_handled():
    p = Player()
    assert p.key_press(pygame.K_q) is False
    assert p.key_release(pygame.K_q) is False
    assert (p.left_held, p.right_held, p.shoot_held) == (False, False, False)


def test_shooting_respects_cooldown():
    scene, now = make_scene()
    p = placed_player(scene)
    p.key_press(pygame.K_SPACE)
    p.advance()
    assert scene.items_of_type(Bullet) == []
    now[0] += PLAYER_COOLDOWN_MS
    p.advance()
    bullets = scene.items_of_type(Bullet)
    assert [(b.x, b.y) for b in bullets] == [(400, 500 - 36)]
    p.advance()
    assert len(scene.items_of_type(Bullet)) == 1


def test_tri_shot_fires_three_bullets():
    scene, now = make_scene(FakeGame(rapid=True))
    p = placed_player(scene)
    p.key_press(pygame.K_SPACE)
    p.advance()
    now[0] += PLAYER_COOLDOWN_MS
    p.advance()
    positions = sorted((b.x, b.y) for b in scene.items_of_type(Bullet))
    assert positions == sorted([(400, 464), (390, 480), (410, 480)])


def test_advance_mirrors_game_power_ups():
    scene, _ = make_scene(FakeGame(shield=True, rapid=True))
    p = placed_player(scene)
    p.advance()
    assert p.has_shield and p.has_tri_shot


def test_invulnerability_expires():
    scene, now = make_scene()
    p = placed_player(scene)
    p.set_invuln(500)
    p.advance()
    assert p.invuln
    now[0] += 501
    p.advance()
    assert not p.invuln


def test_shield_consumed():
    p = Player()
    p.activate_shield()
    assert p.has_shield
    p.consume_shield()
    assert not p.has_shield


def test_shield_draws_corner_brackets():
    scene, _ = make_scene()
    p = placed_player(scene, x=100, y=100)
    surface = pygame.Surface((200, 200))
    p.paint(surface)
    assert tuple(surface.get_at((66, 60)))[:3] == (0, 0, 0)
    p.activate_shield()
    surface.fill((0, 0, 0))
    p.paint(surface)
    assert tuple(surface.get_at((66, 60)))[:3] == (0, 200, 255)