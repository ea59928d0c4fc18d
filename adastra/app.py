"""Command-line entry point that opens the game window."""

from __future__ import annotations

import argparse
import random

import pygame

from adastra.constants import FPS, SCENE_H, SCENE_W
from adastra.game import Game
from adastra.scores import DEFAULT_PATH

WINDOW_TITLE = "Ad Astra - Retro Shooter"
DEFAULT_NAME = "PLAYER"
FALLBACK_NAME = "PILOT"


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number, got {text}")
    return value


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="adastra", description="A retro space shooter.")
    parser.add_argument("--name", default=DEFAULT_NAME, help="pilot name shown on the menu")
    parser.add_argument("--scores", default=DEFAULT_PATH, help="high-score file")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--frames", type=_positive_int, default=None, help="quit after this many frames"
    )
    return parser.parse_args(argv)


def _pump_events(game: Game) -> bool:
    """Feed window events to the game; returns False when the window closes."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        player = game.player
        if event.type == pygame.KEYDOWN:
            game.handle_input(event.key)
            player = game.player
            if player is not None and player.scene is game.scene:
                player.key_press(event.key)
        elif event.type == pygame.KEYUP:
            if player is not None and player.scene is game.scene:
                player.key_release(event.key)
    return True


def main(argv=None) -> int:
    args = parse_args(argv)
    name = args.name or FALLBACK_NAME
    rng = random.Random(args.seed) if args.seed is not None else None

    pygame.display.init()
    pygame.font.init()
    try:
        screen = pygame.display.set_mode((SCENE_W, SCENE_H))
        pygame.display.set_caption(WINDOW_TITLE)
        game = Game(args.scores, rng)
        game.set_player_name(name)
        frame = pygame.Surface((SCENE_W, SCENE_H))
        ticker = pygame.time.Clock()
        frames = 0
        while args.frames is None or frames < args.frames:
            if not _pump_events(game):
                break
            game.tick()
            game.scene.render(frame)
            dx, dy = game.shake_offset()
            screen.fill((0, 0, 0))
            screen.blit(frame, (int(dx), int(dy)))
            pygame.display.flip()
            ticker.tick(FPS)
            frames += 1
    finally:
        pygame.display.quit()
    return 0