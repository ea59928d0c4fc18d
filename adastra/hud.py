"""Heads-up display: score, health, power-up timers and full-screen overlays."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import pygame

from adastra.constants import PLAYER_MAX_HP, SCENE_H, SCENE_W, Z_HUD
from adastra.scene import Item, RectF, monotonic_ms
from adastra.scores import HighScoreEntry

_WHITE = (255, 255, 255)
_YELLOW = (255, 255, 0)
_CYAN = (0, 255, 255)
_GREEN = (0, 255, 0)
_RED = (255, 0, 0)
_GRAY = (160, 160, 164)

_FLASH_INTERVAL_MS = 20
_FADE_INTERVAL_MS = 30
_FADE_STEPS = 100


def _half(v: float) -> int:
    return int(v / 2)


@functools.lru_cache(maxsize=None)
def _font(point_size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.Font(None, max(1, round(point_size * 4 / 3)))
    font.set_bold(True)
    return font


def _blend(surface: pygame.Surface, rect: pygame.Rect, color) -> None:
    if rect.width <= 0 or rect.height <= 0 or color[3] <= 0:
        return
    patch = pygame.Surface(rect.size, pygame.SRCALPHA)
    patch.fill(color)
    surface.blit(patch, rect.topleft)


def format_leaderboard_line(rank: int, entry: HighScoreEntry) -> str:
    """A leaderboard row: rank, name padded to ten characters, score."""
    return f"{rank}. {entry.name:<10}   {entry.score}"


@dataclass
class Overlay:
    """An image placed relative to the HUD."""

    image: pygame.Surface | None = None
    pos: tuple[int, int] = (0, 0)
    z: int = 0
    visible: bool = False
    opacity: float = 1.0

    def paint(self, surface: pygame.Surface, origin: tuple[int, int]) -> None:
        if not self.visible or self.image is None:
            return
        image = self.image
        if self.opacity < 1.0:
            image = image.copy()
            image.set_alpha(int(255 * max(0.0, self.opacity)))
        surface.blit(image, (origin[0] + self.pos[0], origin[1] + self.pos[1]))


@dataclass
class Panel:
    """A translucent black box behind the round banner."""

    rect: pygame.Rect
    alpha: int = 220
    z: int = 1001
    visible: bool = False

    def paint(self, surface: pygame.Surface, origin: tuple[int, int]) -> None:
        if self.visible:
            _blend(surface, self.rect.move(origin), (0, 0, 0, self.alpha))


class _Ticker:
    """A repeating timer driven by an external millisecond clock."""

    def __init__(self, interval: int):
        self.interval = interval
        self.next_due: int | None = None

    @property
    def active(self) -> bool:
        return self.next_due is not None

    def start(self, now: int) -> None:
        self.next_due = now + self.interval

    def stop(self) -> None:
        self.next_due = None

    def fire(self, now: int) -> Iterator[None]:
        while self.next_due is not None and self.next_due <= now:
            self.next_due += self.interval
            yield


class HUD(Item):
    """Draws the status line and owns the menu, pause, game-over and banner overlays."""

    def __init__(self):
        super().__init__()
        self.z = Z_HUD
        self.score = 0
        self.hp = 0
        self.lives = 0
        self.shield_pct = 0.0
        self.rapid_pct = 0.0

        self.menu = Overlay()
        pause_img = self.render_pixel_text("PAUSED", 16, _YELLOW)
        self.pause = Overlay(pause_img, (_half(SCENE_W - pause_img.get_width()), _half(SCENE_H)))
        self.game_over = Overlay()
        self.info = Overlay(z=1006)

        self.round_back: Panel | None = None
        self.round_title: Overlay | None = None
        self.round_quote: Overlay | None = None
        self.round_fade_steps = 0
        self._round_fade = _Ticker(_FADE_INTERVAL_MS)

        self.flash_alpha = 0
        self._flash = _Ticker(_FLASH_INTERVAL_MS)

    def _now(self) -> int:
        return self.scene.clock() if self.scene is not None else monotonic_ms()

    def _update_timers(self, now: int) -> None:
        for _ in self._flash.fire(now):
            self.flash_alpha -= 20
            if self.flash_alpha <= 0:
                self.flash_alpha = 0
                self._flash.stop()
        for _ in self._round_fade.fire(now):
            self._round_fade_step()

    def _round_fade_step(self) -> None:
        if self.round_fade_steps <= 0:
            return
        self.round_fade_steps -= 1
        steps = self.round_fade_steps
        if self.round_back is not None:
            self.round_back.alpha = min(220, steps * 5)
            self.round_title.opacity = min(1.0, steps * 0.05)
            self.round_quote.opacity = min(1.0, steps * 0.05)
        if steps == 0:
            for part in self._round_parts():
                part.visible = False
            self._round_fade.stop()

    def _round_parts(self) -> Iterable:
        if self.round_back is None:
            return ()
        return (self.round_back, self.round_title, self.round_quote)

    def bounding_rect(self) -> RectF:
        return RectF(0.0, 0.0, float(SCENE_W), float(SCENE_H))

    def advance(self) -> None:
        self._update_timers(self._now())

    def render_pixel_text(self, text: str, font_size: int, color) -> pygame.Surface:
        """Render bold aliased text and double it in size for a chunky look."""
        font = _font(font_size)
        w = font.size(text)[0] + 4
        h = font.get_height() + 2
        image = pygame.Surface((w, h), pygame.SRCALPHA)
        image.fill((0, 0, 0, 0))
        if text:
            image.blit(font.render(text, False, color), (2, 0))
        return pygame.transform.scale(image, (w * 2, h * 2))

    def _text(self, surface, text, point_size, x, baseline, color=_WHITE) -> None:
        font = _font(point_size)
        surface.blit(font.render(text, False, color), (x, baseline - font.get_ascent()))

    def paint(self, surface: pygame.Surface) -> None:
        self._update_timers(self._now())
        ox, oy = int(self.x), int(self.y)

        self._text(surface, f"SCORE: {self.score:06d}", 14, ox + 20, oy + 30)

        bar_w, bar_h = 200, 16
        bar_x = ox + SCENE_W - bar_w - 20
        bar_y = oy + 15
        pygame.draw.rect(surface, _WHITE, pygame.Rect(bar_x, bar_y, bar_w, bar_h), 1)
        if self.hp > 0:
            hp_color = _RED if self.hp < 30 else _YELLOW if self.hp < 60 else _GREEN
            fill_w = int(bar_w * (self.hp / PLAYER_MAX_HP))
            if fill_w - 1 > 0:
                surface.fill(hp_color, pygame.Rect(bar_x + 1, bar_y + 1, fill_w - 1, bar_h - 1))

        self._text(surface, f"LIVES: {self.lives}", 14, bar_x, bar_y + 35)

        if self.shield_pct > 0:
            self._timer_bar(surface, ox, oy + 50, self.shield_pct, _CYAN, "SHIELD")
        if self.rapid_pct > 0:
            y_off = 70 if self.shield_pct > 0 else 50
            self._timer_bar(surface, ox, oy + y_off, self.rapid_pct, _YELLOW, "RAPID")

        if self.flash_alpha > 0:
            _blend(surface, pygame.Rect(ox, oy, SCENE_W, SCENE_H), (255, 255, 255, self.flash_alpha))

        children = [self.menu, self.pause, self.game_over, self.info, *self._round_parts()]
        for child in sorted(children, key=lambda c: c.z):
            child.paint(surface, (ox, oy))

    def _timer_bar(self, surface, ox: int, y: int, pct: float, color, label: str) -> None:
        pygame.draw.rect(surface, _WHITE, pygame.Rect(ox + 20, y, 100, 8), 1)
        fill = int(98 * pct)
        if fill > 0:
            surface.fill(color, pygame.Rect(ox + 21, y + 1, fill, 6))
        surface.blit(self.render_pixel_text(label, 8, _WHITE), (ox + 130, y - 5))

    def _hide_all(self) -> None:
        for overlay in (self.menu, self.pause, self.game_over, self.info):
            overlay.visible = False

    def show_menu_overlay(self, player_name: str) -> None:
        w, h = 600, 400
        image = pygame.Surface((w, h), pygame.SRCALPHA)
        image.fill((0, 0, 0, 0))
        lines = (
            ("AD ASTRA", 30, _CYAN, 50),
            ("PILOT: " + player_name, 12, _YELLOW, 150),
            ("PRESS SPACE TO LAUNCH", 14, _WHITE, 220),
            ("[L] LEADERBOARD   [I] INSTRUCTIONS", 10, _GRAY, 300),
        )
        for text, size, color, y in lines:
            line = self.render_pixel_text(text, size, color)
            image.blit(line, (_half(w - line.get_width()), y))
        self._hide_all()
        self.menu.image = image
        self.menu.pos = (_half(SCENE_W - w), 50)
        self.menu.visible = True

    def show_pause_overlay(self) -> None:
        self._hide_all()
        self.pause.visible = True

    def _framed_panel(self, w: int, h: int) -> pygame.Surface:
        image = pygame.Surface((w, h), pygame.SRCALPHA)
        image.fill((0, 0, 0, 220))
        pygame.draw.rect(image, _WHITE, pygame.Rect(0, 0, w, h), 1)
        return image

    def _show_info(self, image: pygame.Surface) -> None:
        w, h = image.get_size()
        self.info.image = image
        self.info.pos = (_half(SCENE_W - w), _half(SCENE_H - h))
        self.info.visible = True

    def show_leaderboard(self, scores: Iterable[HighScoreEntry]) -> None:
        self.menu.visible = False
        w, h = 500, 500
        image = self._framed_panel(w, h)
        title = self.render_pixel_text("HALL OF FAME", 20, _YELLOW)
        image.blit(title, (_half(w - title.get_width()), 20))
        y = 80
        for index, entry in enumerate(scores):
            color = _CYAN if index == 0 else _WHITE
            row = self.render_pixel_text(format_leaderboard_line(index + 1, entry), 12, color)
            image.blit(row, (_half(w - row.get_width()), y))
            y += 35
        footer = self.render_pixel_text("PRESS ANY KEY", 10, _GRAY)
        image.blit(footer, (_half(w - footer.get_width()), h - 40))
        self._show_info(image)

    def show_instructions(self) -> None:
        self.menu.visible = False
        w, h = 600, 400
        image = self._framed_panel(w, h)
        y = 30

        def line(text: str, size: int, color) -> None:
            nonlocal y
            rendered = self.render_pixel_text(text, size, color)
            image.blit(rendered, (_half(w - rendered.get_width()), y))
            y += rendered.get_height() + 15

        line("MISSION BRIEFING", 18, _GREEN)
        y += 10
        line("ARROWS / WASD : MOVE SHIP", 12, _WHITE)
        line("SPACE : SHOOT", 12, _WHITE)
        line("P : PAUSE GAME", 12, _WHITE)
        line("AVOID ASTEROIDS AND MINES", 12, _RED)
        line("COLLECT POWERUPS", 12, _YELLOW)
        y += 20
        line("PRESS ANY KEY TO RETURN", 10, _GRAY)
        self._show_info(image)

    def show_game_over_overlay(self, final_score: int) -> None:
        self.menu.visible = False
        self.pause.visible = False
        self.info.visible = False
        w, h = 400, 250
        image = pygame.Surface((w, h), pygame.SRCALPHA)
        image.fill((0, 0, 0, 0))
        parts = (
            (self.render_pixel_text("GAME OVER", 20, _RED), 20),
            (self.render_pixel_text(f"FINAL SCORE: {final_score}", 12, _WHITE), 30),
            (self.render_pixel_text("PRESS SPACE TO RESTART", 10, _WHITE), 10),
            (self.render_pixel_text("PRESS ESC FOR MENU", 10, _GRAY), 0),
        )
        y = 0
        for rendered, gap in parts:
            image.blit(rendered, (_half(w - rendered.get_width()), y))
            y += rendered.get_height() + gap
        self.game_over.image = image
        self.game_over.pos = (_half(SCENE_W - w), SCENE_H // 3)
        self.game_over.z = 1005
        self.game_over.visible = True

    def hide_overlays(self) -> None:
        self._hide_all()

    def on_hud_changed(self, score: int, hp: int, lives: int) -> None:
        self.score = score
        self.hp = hp
        self.lives = lives

    def update_power_up_timers(self, shield_pct: float, rapid_pct: float) -> None:
        self.shield_pct = shield_pct
        self.rapid_pct = rapid_pct

    def _ensure_round_items(self) -> None:
        if self.round_back is None:
            self.round_back = Panel(pygame.Rect(0, 0, 0, 0))
            self.round_title = Overlay(z=1002)
            self.round_quote = Overlay(z=1002)

    def _layout_round_items(self) -> None:
        title, quote = self.round_title.image, self.round_quote.image
        w = max(title.get_width(), quote.get_width()) + 60
        h = title.get_height() + quote.get_height() + 40
        x = _half(SCENE_W - w)
        y = SCENE_H // 3
        self.round_back.rect = pygame.Rect(x, y, w, h)
        ty = y + 20
        self.round_title.pos = (x + _half(w - title.get_width()), ty)
        ty += title.get_height() + 10
        self.round_quote.pos = (x + _half(w - quote.get_width()), ty)

    def show_round_banner(self, round_number: int, quote: str) -> None:
        """Show the round title and quote, then fade them out."""
        self._ensure_round_items()
        self.round_title.image = self.render_pixel_text(f"ROUND {round_number}", 16, _CYAN)
        self.round_quote.image = self.render_pixel_text(quote, 10, _WHITE)
        self._layout_round_items()
        for part in self._round_parts():
            part.visible = True
        self.round_back.alpha = 220
        self.round_title.opacity = 1.0
        self.round_quote.opacity = 1.0
        self.round_fade_steps = _FADE_STEPS
        self._round_fade.start(self._now())

    def trigger_flash(self) -> None:
        """Flash the whole screen white, fading quickly."""
        self.flash_alpha = 200
        self._flash.start(self._now())