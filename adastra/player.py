"""The player's ship: steering, shooting, shield and invulnerability."""

from __future__ import annotations

import pygame

from adastra.constants import (
    PLAYER_COOLDOWN_MS,
    POWERUP_RAPID_FIRE_DURATION_MS,
    RASTER,
    SCENE_W,
    Z_PLAYER,
)
from adastra.pixelart import draw_pixel_art
from adastra.scene import Item, RectF, monotonic_ms

_SPRITE = (
    ".......H.......",
    ".......H.......",
    ".......W.......",
    "......WGW......",
    "......WGW......",
    ".....WWGWW.....",
    ".....WGDGW.....",
    "....WWGDGWW....",
    "....WGGDGGW....",
    "...WGGGDGGGW...",
    "...WGGGDGGGW...",
    "..WWGGGDGGGWW..",
    ".WWGGGGGGGGGWW.",
    "WWRGGGGGGGGGRWW",
    "WWRGGGGGGGGGRWW",
    "WWRGGGGGGGGGRWW",
    "WWRR.......RRWW",
    "FFFF.......FFFF",
)

_PALETTE = {
    "H": (200, 200, 200),
    "W": (160, 170, 180),
    "G": (80, 90, 100),
    "D": (40, 40, 50),
    "R": (200, 50, 50),
    "F": (255, 180, 0),
}

_SHIELD = (0, 200, 255)
_SHIELD_GLOW = (0, 200, 255, 40)
_EDGE = 30

_LEFT_KEYS = frozenset({pygame.K_LEFT, pygame.K_a})
_RIGHT_KEYS = frozenset({pygame.K_RIGHT, pygame.K_d})
_SHOOT_KEYS = frozenset({pygame.K_SPACE})


def _blend(surface: pygame.Surface, rect: pygame.Rect, color) -> None:
    patch = pygame.Surface(rect.size, pygame.SRCALPHA)
    patch.fill(color)
    surface.blit(patch, rect.topleft)


class Player(Item):
    """The ship at the bottom of the screen, driven by held keys."""

    def __init__(self):
        super().__init__()
        self.z = Z_PLAYER
        self.left_held = False
        self.right_held = False
        self.shoot_held = False
        self.fire_timer_start: int | None = None
        self.invuln = False
        self.invuln_end_ms = 0
        self.has_shield = False
        self.has_tri_shot = False
        self.tri_shot_end_ms = 0

    def _now(self) -> int:
        return self.scene.clock() if self.scene is not None else monotonic_ms()

    def _fire_elapsed(self) -> int:
        now = self._now()
        start = self.fire_timer_start if self.fire_timer_start is not None else now
        return now - start

    def bounding_rect(self) -> RectF:
        return RectF(-30.0, -36.0, 60.0, 72.0)

    def paint(self, surface: pygame.Surface) -> None:
        if self.invuln and (self._fire_elapsed() // 100) % 2 == 0:
            return

        draw_pixel_art(surface, _SPRITE, _PALETTE, (self.x, self.y), True)

        if self.has_shield:
            corner = 3 * RASTER
            thick = RASTER
            r = self.bounding_rect()
            left = int(self.x + r.left) - thick
            top = int(self.y + r.top) - thick
            right = int(self.x + r.right) + thick
            bottom = int(self.y + r.bottom) + thick
            bars = (
                (left, top, corner, thick),
                (left, top, thick, corner),
                (right - corner, top, corner, thick),
                (right - thick, top, thick, corner),
                (left, bottom - thick, corner, thick),
                (left, bottom - corner, thick, corner),
                (right - corner, bottom - thick, corner, thick),
                (right - thick, bottom - corner, thick, corner),
            )
            for bar in bars:
                surface.fill(_SHIELD, pygame.Rect(bar))
            _blend(surface, pygame.Rect(left, top, right - left, bottom - top), _SHIELD_GLOW)

    def advance(self) -> None:
        if self.invuln and self._now() > self.invuln_end_ms:
            self.invuln = False

        g = self.game
        if g is not None:
            self.has_tri_shot = g.is_rapid_fire_active()
            self.has_shield = g.is_shield_active()

        self._step_move()
        if self.shoot_held:
            self._shoot_if_ready()

    def key_press(self, key: int) -> bool:
        """Register a pressed key; returns whether the ship uses it."""
        return self._set_key(key, True)

    def key_release(self, key: int) -> bool:
        """Register a released key; returns whether the ship uses it."""
        return self._set_key(key, False)

    def _set_key(self, key: int, held: bool) -> bool:
        if key in _LEFT_KEYS:
            self.left_held = held
        elif key in _RIGHT_KEYS:
            self.right_held = held
        elif key in _SHOOT_KEYS:
            self.shoot_held = held
        else:
            return False
        return True

    def _shoot_if_ready(self) -> None:
        from adastra.bullet import Bullet

        now = self._now()
        if self.fire_timer_start is None:
            self.fire_timer_start = now
        if now - self.fire_timer_start < PLAYER_COOLDOWN_MS:
            return
        self.fire_timer_start = now

        sc = self.scene
        if sc is None:
            return
        shots = [(self.x, self.y - 36)]
        if self.has_tri_shot:
            shots += [(self.x - 10, self.y - 20), (self.x + 10, self.y - 20)]
        for bx, by in shots:
            bullet = Bullet()
            bullet.set_pos(bx, by)
            sc.add_item(bullet)

    def _step_move(self) -> None:
        if self.left_held == self.right_held:
            return
        direction = -1.0 if self.left_held else 1.0
        next_x = self.x + direction * RASTER * 2.0
        self.x = min(max(next_x, float(_EDGE)), float(SCENE_W - _EDGE))

    def set_invuln(self, ms: int) -> None:
        """Make the ship blink and count as invulnerable for ms milliseconds."""
        self.invuln = True
        self.invuln_end_ms = self._now() + ms

    def activate_shield(self) -> None:
        self.has_shield = True

    def activate_tri_shot(self) -> None:
        self.has_tri_shot = True
        self.tri_shot_end_ms = self._fire_elapsed() + POWERUP_RAPID_FIRE_DURATION_MS

    def consume_shield(self) -> None:
        self.has_shield = False