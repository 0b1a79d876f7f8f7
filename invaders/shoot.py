"""Projectiles fired by the player and by the aliens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from invaders.sprites import RGB, Point


class Direction(IntEnum):
    """Vertical travel direction of a shot."""

    UP = 1
    DOWN = -1


@dataclass
class Shot:
    """A single projectile moving vertically until it leaves the screen."""

    x: float
    y: float
    speed: float
    direction: int
    active: bool = True

    HALF_WIDTH = 0.01
    HALF_HEIGHT = 0.03

    def update(self) -> None:
        """Advance one frame; deactivate once outside the [-1, 1] band."""
        if not self.active:
            return
        self.y += self.speed * self.direction
        if self.y > 1.0 or self.y < -1.0:
            self.active = False

    def color(self) -> RGB | None:
        """White for player shots, red for enemy shots, None otherwise."""
        if self.direction == Direction.UP:
            return (1.0, 1.0, 1.0)
        if self.direction == Direction.DOWN:
            return (1.0, 0.0, 0.0)
        return None

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        """The rectangle drawn for this shot, bottom-left first."""
        w, h = self.HALF_WIDTH, self.HALF_HEIGHT
        return (
            (self.x - w, self.y - h),
            (self.x + w, self.y - h),
            (self.x + w, self.y + h),
            (self.x - w, self.y + h),
        )