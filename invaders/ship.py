"""The player's ship, with its movement limits and hit spin animation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from invaders.sprites import SHIP_SPRITE, Quad, Sprite, color


@dataclass
class Ship:
    """The player's ship, positioned by its centre."""

    x: float
    y: float
    is_hit_animating: bool = False
    hit_rotation_angle: float = 0.0
    hit_animation_timer: float = 0.0

    HIT_ANIMATION_DURATION: ClassVar[float] = 30.0
    HIT_ROTATION_SPEED: ClassVar[float] = 24.0
    PIXEL_SIZE: ClassVar[float] = 0.013
    STEP: ClassVar[float] = 0.05
    LIMIT: ClassVar[float] = 0.95
    SPRITE: ClassVar[Sprite] = SHIP_SPRITE

    def move_left(self) -> None:
        """Step left unless spinning or already at the edge."""
        if self.is_hit_animating:
            return
        if self.x - self.STEP > -self.LIMIT:
            self.x -= self.STEP

    def move_right(self) -> None:
        """Step right unless spinning or already at the edge."""
        if self.is_hit_animating:
            return
        if self.x + self.STEP < self.LIMIT:
            self.x += self.STEP

    def start_hit_animation(self) -> None:
        """Begin (or restart) the spin; the current angle is kept."""
        self.is_hit_animating = True
        self.hit_animation_timer = self.HIT_ANIMATION_DURATION

    def update_hit_animation(self) -> None:
        """Advance the spin by one frame and stop it when the timer runs out."""
        if not self.is_hit_animating:
            return
        self.hit_rotation_angle += self.HIT_ROTATION_SPEED
        if self.hit_rotation_angle >= 360.0:
            self.hit_rotation_angle -= 360.0
        self.hit_animation_timer -= 1.0
        if self.hit_animation_timer <= 0.0:
            self.is_hit_animating = False
            self.hit_rotation_angle = 0.0

    def pixel_quads(self) -> list[Quad]:
        """The ship's pixels as world-space quads, rotated while spinning."""
        dim = self.PIXEL_SIZE * 0.5
        angle = math.radians(self.hit_rotation_angle) if self.is_hit_animating else 0.0
        cos_a, sin_a = math.cos(angle), math.sin(angle)

        def place(lx: float, ly: float) -> tuple[float, float]:
            return (
                self.x + lx * cos_a - ly * sin_a,
                self.y + lx * sin_a + ly * cos_a,
            )

        quads = []
        for row_index, row in enumerate(self.SPRITE):
            for col_index, value in enumerate(row):
                if value == 0:
                    continue
                lx = (col_index - 15.0) * dim
                ly = -(row_index - 15.0) * dim
                corners = (
                    place(lx, ly),
                    place(lx + dim, ly),
                    place(lx + dim, ly - dim),
                    place(lx, ly - dim),
                )
                quads.append(Quad(color(value), corners))
        return quads