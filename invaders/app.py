"""Keyboard handling, frame timing and the game's window."""

from __future__ import annotations

import argparse
import math
import random
import time

import pygame

from invaders.game import Game, GameState
from invaders.render import Renderer

WINDOW_SIZE = (800, 800)
TITLE = "Independece Day"
FRAMES_PER_SECOND = 30
SHOT_COOLDOWN = 0.3

LEFT_KEYS = frozenset({"a", "A"})
RIGHT_KEYS = frozenset({"d", "D"})
FIRE_KEY = " "


class Controller:
    """Turns held keys into game actions once per frame."""

    def __init__(self, game: Game, shot_cooldown: float = SHOT_COOLDOWN) -> None:
        self.game = game
        self.shot_cooldown = shot_cooldown
        self.pressed: set[str] = set()
        self._next_shot = -math.inf

    def key_down(self, key: str) -> None:
        """Record a pressed key; space restarts a finished game."""
        self.pressed.add(key)
        if key == FIRE_KEY and self.game.state is not GameState.PLAYING:
            self.game.restart()

    def key_up(self, key: str) -> None:
        """Record a released key."""
        self.pressed.discard(key)

    def tick(self, now: float) -> None:
        """Apply held keys at time ``now`` (seconds), then advance the game a frame."""
        if self.pressed & LEFT_KEYS:
            self.game.move_ship_left()
        if self.pressed & RIGHT_KEYS:
            self.game.move_ship_right()
        if FIRE_KEY in self.pressed and now >= self._next_shot:
            self.game.ship_shoot()
            self._next_shot = now + self.shot_cooldown
        self.game.update()


def _key_name(event: pygame.event.Event) -> str | None:
    if event.key == pygame.K_SPACE:
        return FIRE_KEY
    if 32 < event.key < 127:
        return chr(event.key)
    return None


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="invaders", description="Arcade shooter.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        game = Game(random.Random(args.seed))
        controller = Controller(game)
        renderer = Renderer(screen)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    key = _key_name(event)
                    if key is None:
                        continue
                    if event.type == pygame.KEYDOWN:
                        controller.key_down(key)
                    else:
                        controller.key_up(key)
            controller.tick(time.monotonic())
            renderer.draw(game)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()
    return 0