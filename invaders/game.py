"""Game state and rules: formation, shots, collisions, levels and the boss."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum

from invaders.alien import Alien, AlienBoss
from invaders.shoot import Direction, Shot
from invaders.ship import Ship

SHIP_START = (0.0, -0.85)
BOSS_START = (0.0, 0.8)

ALIEN_START_X = -0.6
ALIEN_START_Y = 1.0
ALIEN_SPACING_X = 0.3
ALIEN_SPACING_Y = 0.25
ALIEN_ROWS = 3
ALIEN_COLUMNS = 5

LEVEL_ONE_SPEED = 0.02
LEVEL_TWO_SPEED = 0.025
STARTING_LIVES = 3
DEFAULT_STAR_COUNT = 200

SHIP_WIDTH = 0.2
SHIP_HEIGHT = 0.1
ALIEN_HIT_RADIUS = 0.09
DEAD_ALIEN_Y = -999.0


class GameState(Enum):
    """What the game is currently doing."""

    PLAYING = "playing"
    GAME_OVER = "game_over"
    VICTORY = "victory"


@dataclass
class Star:
    """One point of the scrolling background."""

    x: float
    y: float
    speed: float
    brightness: float


def random_float(rng: random.Random, low: float, high: float) -> float:
    """A uniform value between the two bounds, in whichever order they come."""
    if low > high:
        low, high = high, low
    return low + rng.random() * (high - low)


def hits_ship(shot: Shot, ship: Ship) -> bool:
    """Whether the shot lies inside the ship's bounding box (edges included)."""
    half_w = SHIP_WIDTH / 2
    half_h = SHIP_HEIGHT / 2
    return (
        ship.x - half_w <= shot.x <= ship.x + half_w
        and ship.y - half_h <= shot.y <= ship.y + half_h
    )


class Game:
    """All entities of a running game and the rules that advance it."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.aliens: list[Alien] = []
        self.shots: list[Shot] = []
        self.stars: list[Star] = []
        self.ship = Ship(*SHIP_START)
        self.boss: AlienBoss | None = None
        self.direction = LEVEL_ONE_SPEED
        self.state = GameState.PLAYING
        self.level = 1
        self.aliens_killed = 0
        self.lives = STARTING_LIVES
        # These persist across restarts, like the frame timers they model.
        self._zigzag_left = False
        self._boss_time = 0.0
        self.init_aliens()
        self.init_ship()
        self.init_stars()

    # -- set-up -----------------------------------------------------------

    def init_stars(self, count: int = DEFAULT_STAR_COUNT) -> None:
        """Scatter a fresh set of background stars over the screen."""
        self.stars = [
            Star(
                x=random_float(self.rng, -1.0, 1.0),
                y=random_float(self.rng, -1.0, 1.0),
                speed=random_float(self.rng, 0.0005, 0.003),
                brightness=random_float(self.rng, 0.1, 0.7),
            )
            for _ in range(count)
        ]

    def update_stars(self) -> None:
        """Let the stars fall, wrapping those that leave the bottom to the top."""
        for star in self.stars:
            star.y -= star.speed
            if star.y < -1.05:
                star.y = 1.05
                star.x = random_float(self.rng, -1.0, 1.0)

    def init_aliens(self) -> None:
        """Lay out a fresh formation of aliens, row by row."""
        self.aliens = [
            Alien(
                ALIEN_START_X + column * ALIEN_SPACING_X,
                ALIEN_START_Y - row * ALIEN_SPACING_Y,
            )
            for row in range(ALIEN_ROWS)
            for column in range(ALIEN_COLUMNS)
        ]

    def init_ship(self) -> None:
        """Place a fresh ship at its starting point."""
        self.ship = Ship(*SHIP_START)

    # -- player controls --------------------------------------------------

    def move_ship_left(self) -> None:
        self.ship.move_left()

    def move_ship_right(self) -> None:
        self.ship.move_right()

    def ship_shoot(self) -> None:
        """Fire upwards from the ship, unless it is spinning from a hit."""
        if self.ship.is_hit_animating:
            return
        self.shots.append(Shot(self.ship.x, self.ship.y + 0.1, 0.05, Direction.UP))

    # -- enemy fire -------------------------------------------------------

    def alien_shoot(self, index: int) -> None:
        """Fire downwards from the alien at ``index``; out-of-range indexes do nothing."""
        if 0 <= index < len(self.aliens):
            alien = self.aliens[index]
            self.shots.append(Shot(alien.x, alien.y - 0.1, 0.03, Direction.DOWN))

    def boss_shoot(self) -> None:
        """Fire downwards from the boss if it is present and alive."""
        if self.boss is not None and self.boss.life > 0:
            self.shots.append(
                Shot(self.boss.x, self.boss.y - 0.1, 0.04, Direction.DOWN)
            )

    # -- lifecycle --------------------------------------------------------

    def restart(self) -> None:
        """Start over from level one with full lives."""
        self.state = GameState.PLAYING
        self.shots.clear()
        self.init_aliens()
        self.init_ship()
        self.init_stars()
        self.direction = LEVEL_ONE_SPEED
        self.level = 1
        self.aliens_killed = 0
        self.lives = STARTING_LIVES
        self.boss = None

    def respawn_ship(self) -> None:
        """Put the ship back at its starting point."""
        self.ship.x, self.ship.y = SHIP_START

    def boss_health(self) -> float | None:
        """The boss's remaining life as a fraction of its maximum, or None."""
        if self.boss is None or not self.boss.is_alive():
            return None
        return self.boss.life / AlienBoss.MAX_LIFE

    # -- per-frame rules --------------------------------------------------

    def update_shots(self) -> None:
        """Move every shot and drop those no longer active."""
        for shot in self.shots:
            shot.update()
        self.shots = [shot for shot in self.shots if shot.active]

    def _hits_boss(self, shot: Shot) -> bool:
        boss = self.boss
        assert boss is not None
        half_w = len(boss.SPRITE[0]) * boss.PIXEL_SIZE / 2
        half_h = len(boss.SPRITE) * boss.PIXEL_SIZE / 2
        return (
            boss.x - half_w <= shot.x <= boss.x + half_w
            and boss.y - half_h <= shot.y <= boss.y + half_h
        )

    def _ship_hit(self, shot: Shot) -> None:
        shot.active = False
        if self.ship.is_hit_animating:
            return
        self.ship.start_hit_animation()
        self.lives -= 1
        if self.lives <= 0:
            self.state = GameState.GAME_OVER
        else:
            self.respawn_ship()

    def _player_shot(self, shot: Shot) -> bool:
        """Resolve a player shot; return True if it destroyed the boss."""
        for alien in self.aliens:
            if (
                abs(shot.x - alien.x) < ALIEN_HIT_RADIUS
                and abs(shot.y - alien.y) < ALIEN_HIT_RADIUS
            ):
                shot.active = False
                alien.y = DEAD_ALIEN_Y
                self.aliens_killed += 1
                if self.level == 1 and self.aliens_killed >= ALIEN_ROWS * ALIEN_COLUMNS:
                    self.level = 2
                    self.aliens_killed = 0
                    self.init_aliens()
                    self.direction = LEVEL_TWO_SPEED
                break

        if self.boss is not None and self.boss.is_alive() and self._hits_boss(shot):
            shot.active = False
            self.boss.take_damage()
            if not self.boss.is_alive():
                self.boss = None
                return True
        return False

    def check_collisions(self) -> None:
        """Apply every hit of this frame, then spawn the boss when its time comes."""
        boss_destroyed = False
        for shot in self.shots:
            if shot.direction == Direction.DOWN and hits_ship(shot, self.ship):
                self._ship_hit(shot)
                break
            if shot.direction == Direction.UP and self._player_shot(shot):
                boss_destroyed = True

        self.aliens = [alien for alien in self.aliens if alien.y >= -900]

        if (
            self.level == 2
            and not self.aliens
            and self.boss is None
            and not boss_destroyed
        ):
            self.boss = AlienBoss(*BOSS_START)

    def _move_formation(self) -> bool:
        """March the aliens sideways; return False if one reached the bottom."""
        change_direction = False
        for alien in self.aliens:
            alien.move(self.direction, 0.0)
            if alien.x > 0.9 or alien.x < -0.9:
                change_direction = True
            if alien.y < -0.8:
                self.state = GameState.GAME_OVER
                return False
        if change_direction:
            self.direction = -self.direction
            for alien in self.aliens:
                alien.move(0.0, -0.01)
        return True

    def _move_boss(self) -> None:
        boss = self.boss
        assert boss is not None
        self._boss_time += 0.016
        boss.x = 0.7 * math.sin(self._boss_time)
        boss.y = 0.7 + 0.1 * math.sin(self._boss_time * 0.5)
        if self.rng.randrange(1000) < 40:
            self.boss_shoot()

    def update(self) -> None:
        """Advance the whole game by one frame."""
        if self.state is not GameState.PLAYING:
            return
        self.update_stars()
        if self.level == 2 and not self.aliens and self.boss is None:
            self.state = GameState.VICTORY
            return

        self.ship.update_hit_animation()

        if not self._move_formation():
            return

        chance = 5 if self.level == 1 else 15
        if self.aliens and self.rng.randrange(1000) < chance:
            self.alien_shoot(self.rng.randrange(len(self.aliens)))

        if self.level == 2:
            step = -0.01 if self._zigzag_left else 0.01
            for alien in self.aliens:
                alien.move(step, -0.005)
            self._zigzag_left = not self._zigzag_left

        self.update_shots()
        self.check_collisions()
        if self.state is not GameState.PLAYING:
            return

        if self.boss is not None and self.boss.life > 0:
            self._move_boss()