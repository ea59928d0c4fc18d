"""Game flow: menu, rounds, spawning, damage, power-ups and high scores."""

from __future__ import annotations

import enum
import random
from collections.abc import Callable

import pygame

from adastra.asteroid import Asteroid
from adastra.background import Background
from adastra.constants import (
    DIFF_STEP_PERIOD_MS,
    INIT_AST_SPAWN_MS,
    INIT_MINE_SPAWN_MS,
    PLAYER_INVULN_MS,
    PLAYER_LIVES,
    PLAYER_MAX_HP,
    PLAYER_Y,
    POWERUP_RAPID_FIRE_DURATION_MS,
    POWERUP_SHIELD_DURATION_MS,
    POWERUP_SPAWN_MS,
    SCENE_H,
    SCENE_W,
    TICK_MS,
)
from adastra.explosion import Explosion
from adastra.hud import HUD
from adastra.mine import Mine
from adastra.player import Player
from adastra.powerup import PowerUp, PowerUpType
from adastra.rastergrid import RasterGrid
from adastra.scene import Scene
from adastra.scores import DEFAULT_PATH, HighScoreEntry, HighScoreTable
from adastra.star import Star, StarLayer

ROUND_QUOTES = (
    "FROSTY FRONTIER",
    "INTO THE FIRE",
    "JUNGLE ORBIT",
    "DUST & SHADOWS",
    "ABYSSAL GAZE",
    "CYBERNETIC HORIZON",
    "BEYOND THE STARS",
)

ROUND_SCORES = (0, 2000, 4500, 7500, 11000, 15000, 20000, 30000)

ENDLESS_QUOTE = "INFINITE VOID"

_START_KEYS = frozenset({pygame.K_SPACE, pygame.K_KP_ENTER, pygame.K_RETURN})
_RESTART_KEYS = frozenset({pygame.K_SPACE, pygame.K_KP_ENTER})


class GameState(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    LEADERBOARD = "leaderboard"
    INSTRUCTIONS = "instructions"


class _Timer:
    """A repeating timer that calls back when the clock passes its due time."""

    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self.interval = 0
        self.next_due: int | None = None

    @property
    def active(self) -> bool:
        return self.next_due is not None

    def start(self, now: int, interval: int | None = None) -> None:
        if interval is not None:
            self.interval = interval
        self.next_due = now + self.interval

    def stop(self) -> None:
        self.next_due = None

    def set_interval(self, interval: int, now: int) -> None:
        """Change the interval; a running timer restarts from now."""
        self.interval = interval
        if self.active:
            self.next_due = now + interval

    def run_due(self, now: int) -> None:
        while self.next_due is not None and self.interval > 0 and self.next_due <= now:
            self.next_due += self.interval
            self.callback()


class Game:
    """Owns the scene and drives menus, play, rounds and scoring."""

    def __init__(
        self,
        score_path=DEFAULT_PATH,
        rng: random.Random | None = None,
        clock: Callable[[], int] | None = None,
    ):
        self.scene = Scene(SCENE_W, SCENE_H, rng, clock)
        self.scene.game = self
        self.rng = self.scene.rng
        self.clock = self.scene.clock

        self.state = GameState.MENU
        self.player_name = "PILOT"
        self.show_grid = True

        self.score = 0
        self.hp = PLAYER_MAX_HP
        self.lives = PLAYER_LIVES
        self.round_number = 1

        self.player: Player | None = None
        self.hud: HUD | None = None
        self.background: Background | None = None

        self._timer_start = self.clock()
        self.rapid_fire_end_ms = 0
        self.shield_end_ms = 0

        self.ast_spawn_ms = 0
        self.mine_spawn_ms = 0
        self.power_up_spawn_ms = 0
        self.diff_accum_ms = 0

        self.max_asteroids = 5
        self.max_mines = 2

        self.shake_remain_ms = 0
        self.shake_intensity = 0.0
        self._shake = (0.0, 0.0)

        self._ast_timer = _Timer(self.spawn_asteroid)
        self._mine_timer = _Timer(self.spawn_mine)
        self._power_up_timer = _Timer(self.spawn_power_up_timer)

        self.high_scores = HighScoreTable(score_path)
        self.high_scores.load()

        self.to_menu()

    def _elapsed(self) -> int:
        return self.clock() - self._timer_start

    def _spawn_timers(self) -> tuple[_Timer, ...]:
        return (self._ast_timer, self._mine_timer, self._power_up_timer)

    def _refresh_hud(self) -> None:
        if self.hud is not None:
            self.hud.on_hud_changed(self.score, self.hp, self.lives)

    def set_player_name(self, name: str) -> None:
        """Set the pilot's name in upper case; a blank name becomes UNKNOWN."""
        self.player_name = name.strip().upper() or "UNKNOWN"
        if self.state is GameState.MENU and self.hud is not None:
            self.hud.show_menu_overlay(self.player_name)

    def handle_input(self, key: int) -> None:
        """React to a pressed key according to the current state."""
        if key == pygame.K_g:
            self.toggle_grid()

        state = self.state
        if state is GameState.MENU:
            if key in _START_KEYS:
                self.start()
            elif key == pygame.K_l:
                self.show_leaderboard()
            elif key == pygame.K_i:
                self.show_instructions()
        elif state in (GameState.PLAYING, GameState.PAUSED):
            if key == pygame.K_p:
                self.toggle_pause()
        elif state is GameState.GAME_OVER:
            if key in _RESTART_KEYS:
                self.start()
            elif key == pygame.K_ESCAPE:
                self.to_menu()
        else:
            self.to_menu()

    def start(self) -> None:
        """Begin a fresh run from round one."""
        sc = self.scene
        sc.clear()
        self.score = 0
        self.hp = PLAYER_MAX_HP
        self.lives = PLAYER_LIVES
        self.round_number = 1
        self.state = GameState.PLAYING
        self.diff_accum_ms = 0
        self.rapid_fire_end_ms = 0
        self.shield_end_ms = 0
        self._timer_start = self.clock()

        self.ast_spawn_ms = INIT_AST_SPAWN_MS
        self.mine_spawn_ms = INIT_MINE_SPAWN_MS
        self.power_up_spawn_ms = POWERUP_SPAWN_MS

        self.background = Background()
        sc.add_item(self.background)
        for _ in range(40):
            sc.add_item(Star(StarLayer.BACK, sc.rng))
        for _ in range(20):
            sc.add_item(Star(StarLayer.FRONT, sc.rng))

        grid = RasterGrid()
        grid.visible = self.show_grid
        sc.add_item(grid)

        self.player = Player()
        self.player.set_pos(SCENE_W / 2, PLAYER_Y)
        sc.add_item(self.player)

        self.hud = HUD()
        sc.add_item(self.hud)
        self._refresh_hud()
        self.hud.show_round_banner(self.round_number, ROUND_QUOTES[0])

        now = self.clock()
        self._ast_timer.start(now, self.ast_spawn_ms)
        self._mine_timer.start(now, self.mine_spawn_ms)
        self._power_up_timer.start(now, self.power_up_spawn_ms)

    def to_menu(self) -> None:
        """Stop play and show the title menu."""
        self.state = GameState.MENU
        for timer in self._spawn_timers():
            timer.stop()

        sc = self.scene
        sc.clear()
        self.player = None
        self.background = Background()
        sc.add_item(self.background)
        for _ in range(40):
            sc.add_item(Star(StarLayer.BACK, sc.rng))

        self.hud = HUD()
        sc.add_item(self.hud)
        self.hud.show_menu_overlay(self.player_name)

    def show_leaderboard(self) -> None:
        self.state = GameState.LEADERBOARD
        if self.hud is not None:
            self.hud.show_leaderboard(self.high_scores.entries())

    def show_instructions(self) -> None:
        self.state = GameState.INSTRUCTIONS
        if self.hud is not None:
            self.hud.show_instructions()

    def tick(self) -> None:
        """Run one frame of play: spawn, move, ramp difficulty, advance rounds."""
        if self.state is not GameState.PLAYING:
            return

        now = self.clock()
        for timer in self._spawn_timers():
            timer.run_due(now)

        self.scene.advance()
        self._update_shake()

        self.diff_accum_ms += TICK_MS
        if self.diff_accum_ms > DIFF_STEP_PERIOD_MS:
            self.diff_accum_ms = 0
            self.ast_spawn_ms = max(300, int(self.ast_spawn_ms * 0.98))
            self.mine_spawn_ms = max(800, int(self.mine_spawn_ms * 0.98))
            self._ast_timer.set_interval(self.ast_spawn_ms, now)
            self._mine_timer.set_interval(self.mine_spawn_ms, now)

        if self.round_number < len(ROUND_SCORES) and self.score >= ROUND_SCORES[self.round_number]:
            self.round_number += 1
            if self.background is not None:
                self.background.set_round(self.round_number)
            if self.round_number <= len(ROUND_QUOTES):
                quote = ROUND_QUOTES[self.round_number - 1]
            else:
                quote = ENDLESS_QUOTE
            if self.hud is not None:
                self.hud.show_round_banner(self.round_number, quote)
            self.hp = min(PLAYER_MAX_HP, self.hp + 20)
            self._refresh_hud()

        elapsed = self._elapsed()
        shield_pct = 0.0
        rapid_pct = 0.0
        if self.shield_end_ms > elapsed:
            shield_pct = (self.shield_end_ms - elapsed) / POWERUP_SHIELD_DURATION_MS
        else:
            self.shield_end_ms = 0
        if self.rapid_fire_end_ms > elapsed:
            rapid_pct = (self.rapid_fire_end_ms - elapsed) / POWERUP_RAPID_FIRE_DURATION_MS
        else:
            self.rapid_fire_end_ms = 0

        if self.hud is not None:
            self.hud.update_power_up_timers(shield_pct, rapid_pct)

    def _spawn_x(self) -> int:
        return self.rng.randrange(SCENE_W - 40) + 20

    def spawn_asteroid(self) -> None:
        """Drop a large asteroid unless the field is already full."""
        if self.state is not GameState.PLAYING:
            return
        if len(self.scene.items_of_type(Asteroid)) >= self.max_asteroids + self.round_number:
            return
        rock = Asteroid(rng=self.rng)
        rock.set_pos(self._spawn_x(), -50)
        self.scene.add_item(rock)

    def spawn_mine(self) -> None:
        """Drop a mine from round two on, up to a cap that grows with the round."""
        if self.state is not GameState.PLAYING:
            return
        if self.round_number < 2:
            return
        if len(self.scene.items_of_type(Mine)) >= self.max_mines + self.round_number // 2:
            return
        mine = Mine(self.rng)
        mine.set_pos(self._spawn_x(), -50)
        self.scene.add_item(mine)

    def spawn_power_up(self, x: float, y: float) -> None:
        """Drop a power-up where a large asteroid broke apart."""
        r = self.rng.randrange(100)
        if r < 40:
            kind = PowerUpType.TRI_SHOT
        elif r < 70:
            kind = PowerUpType.HEALTH_PACK
        else:
            kind = PowerUpType.SHIELD
        box = PowerUp(kind)
        box.set_pos(x, y)
        self.scene.add_item(box)

    def spawn_power_up_timer(self) -> None:
        """Drop a random power-up from the top of the screen."""
        if self.state is not GameState.PLAYING:
            return
        r = self.rng.randrange(100)
        if r < 33:
            kind = PowerUpType.SHIELD
        elif r < 66:
            kind = PowerUpType.HEALTH_PACK
        else:
            kind = PowerUpType.TRI_SHOT
        box = PowerUp(kind)
        box.set_pos(self._spawn_x(), -50)
        self.scene.add_item(box)

    def activate_power_up(self, kind: PowerUpType) -> None:
        kind = PowerUpType(kind)
        now = self._elapsed()
        if kind is PowerUpType.SHIELD:
            self.shield_end_ms = now + POWERUP_SHIELD_DURATION_MS
            if self.player is not None:
                self.player.activate_shield()
        elif kind is PowerUpType.TRI_SHOT:
            self.rapid_fire_end_ms = now + POWERUP_RAPID_FIRE_DURATION_MS
            if self.player is not None:
                self.player.activate_tri_shot()
        else:
            self.hp = min(PLAYER_MAX_HP, self.hp + 30)
            self._refresh_hud()

    def is_rapid_fire_active(self) -> bool:
        return self.rapid_fire_end_ms > 0 and self._elapsed() < self.rapid_fire_end_ms

    def is_shield_active(self) -> bool:
        return self.shield_end_ms > 0 and self._elapsed() < self.shield_end_ms

    def add_score(self, points: int) -> None:
        self.score += points
        self._refresh_hud()

    def asteroid_leaked(self) -> None:
        self.player_hit(self.leak_damage())

    def player_hit(self, damage: int) -> None:
        """Apply damage to the ship unless the shield is up."""
        if self.state is not GameState.PLAYING:
            return
        if self.is_shield_active():
            return
        self.hp -= damage
        if self.hp <= 0:
            self.hp = 0
            self.lose_life()
        else:
            if self.player is not None:
                self.player.set_invuln(1000)
            self.shake_scene(200, 5.0)
        self._refresh_hud()

    def lose_life(self) -> None:
        self.lives -= 1
        self.hp = PLAYER_MAX_HP
        self._refresh_hud()
        if self.lives <= 0:
            self.game_over()
        else:
            if self.player is not None:
                self.player.set_pos(SCENE_W / 2, PLAYER_Y)
                self.player.set_invuln(PLAYER_INVULN_MS)
            self.shake_scene(500, 10.0)

    def game_over(self) -> None:
        """End the run, blow up the ship and record the score."""
        self.state = GameState.GAME_OVER
        for timer in self._spawn_timers():
            timer.stop()
        if self.player is not None:
            blast = Explosion()
            blast.set_pos(self.player.x, self.player.y)
            self.scene.add_item(blast)
            self.player.visible = False
        self.save_high_score(self.score)
        if self.hud is not None:
            self.hud.show_game_over_overlay(self.score)

    def difficulty_speed_mul(self) -> float:
        return 1.0 + self.round_number * 0.1

    def leak_damage(self) -> int:
        return 10

    def shake_scene(self, ms: int, intensity: float) -> None:
        self.shake_remain_ms = ms
        self.shake_intensity = intensity

    def _update_shake(self) -> None:
        if self.shake_remain_ms <= 0:
            self._shake = (0.0, 0.0)
            return
        self.shake_remain_ms -= TICK_MS
        dx = (self.rng.random() - 0.5) * self.shake_intensity
        dy = (self.rng.random() - 0.5) * self.shake_intensity
        self._shake = (dx, dy)

    def shake_offset(self) -> tuple[float, float]:
        """Current view offset caused by screen shake."""
        return self._shake

    def toggle_pause(self) -> None:
        now = self.clock()
        if self.state is GameState.PLAYING:
            self.state = GameState.PAUSED
            self._ast_timer.stop()
            self._mine_timer.stop()
            if self.hud is not None:
                self.hud.show_pause_overlay()
        elif self.state is GameState.PAUSED:
            self.state = GameState.PLAYING
            self._ast_timer.start(now)
            self._mine_timer.start(now)
            if self.hud is not None:
                self.hud.hide_overlays()

    def toggle_grid(self) -> None:
        self.show_grid = not self.show_grid
        for grid in self.scene.items_of_type(RasterGrid):
            grid.visible = self.show_grid

    def save_high_score(self, score: int) -> None:
        self.high_scores.add(self.player_name, score)

    def get_high_scores(self) -> list[HighScoreEntry]:
        return self.high_scores.entries()