"""Regular invaders and the boss that appears on the second level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from invaders.shoot import Direction, Shot
from invaders.sprites import ALIEN_SPRITE, BOSS_SPRITE, Sprite


def _enemy_shot(x: float, y: float) -> Shot:
    return Shot(x, y - 0.05, -0.02, Direction.DOWN)


@dataclass
class Alien:
    """One invader in the formation."""

    x: float
    y: float

    SPRITE: ClassVar[Sprite] = ALIEN_SPRITE
    PIXEL_SIZE: ClassVar[float] = 0.012

    def move(self, dx: float, dy: float) -> None:
        """Shift the alien by the given offsets."""
        self.x += dx
        self.y += dy

    def shoot(self) -> Shot:
        """Return a new enemy shot just below the alien."""
        return _enemy_shot(self.x, self.y)


@dataclass
class AlienBoss:
    """The boss: a larger alien that takes several hits to destroy."""

    x: float
    y: float
    life: int = 33

    MAX_LIFE: ClassVar[int] = 33
    SPRITE: ClassVar[Sprite] = BOSS_SPRITE
    PIXEL_SIZE: ClassVar[float] = 0.03

    def move(self, dx: float, dy: float) -> None:
        """Shift the boss by the given offsets."""
        self.x += dx
        self.y += dy

    def shoot(self) -> Shot:
        """Return a new enemy shot just below the boss."""
        return _enemy_shot(self.x, self.y)

    def take_damage(self) -> None:
        """Lose one point of life, never going below zero."""
        if self.life > 0:
            self.life -= 1

    def is_alive(self) -> bool:
        return self.life > 0