"""Drawing of a game onto a pygame surface."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import pygame

from invaders.alien import Alien
from invaders.game import Game, GameState, Star
from invaders.shoot import Shot
from invaders.sprites import RGB, Point, Quad, sprite_pixels

BLACK = (0, 0, 0)
WHITE_RGB: RGB = (1.0, 1.0, 1.0)
GREY_RGB: RGB = (0.5, 0.5, 0.5)
RED_RGB: RGB = (1.0, 0.0, 0.0)
GREEN_RGB: RGB = (0.0, 1.0, 0.0)

BAR_X = -0.2
BAR_Y = 0.9
BAR_WIDTH = 0.4
BAR_HEIGHT = 0.02

STAR_RADIUS = 1.25
RESTART_MESSAGE = "Para reiniciar pressione espaco"


def to_screen(x: float, y: float, width: int, height: int) -> tuple[float, float]:
    """Map world coordinates in [-1, 1] to pixel coordinates, y pointing down."""
    return ((x + 1.0) / 2.0 * width, (1.0 - y) / 2.0 * height)


def _rgb(color: RGB) -> tuple[int, int, int]:
    r, g, b = (max(0, min(255, round(c * 255))) for c in color)
    return (r, g, b)


def _rect_corners(x: float, y: float, w: float, h: float) -> tuple[Point, ...]:
    return ((x, y), (x + w, y), (x + w, y - h), (x, y - h))


class Renderer:
    """Draws every visible element of a game on one surface."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font | None = None):
        self.surface = surface
        if font is None:
            pygame.font.init()
            font = pygame.font.Font(None, 24)
        self.font = font

    # -- primitives -------------------------------------------------------

    def _screen(self, point: Point) -> tuple[float, float]:
        width, height = self.surface.get_size()
        return to_screen(point[0], point[1], width, height)

    def _polygon(self, color: RGB, corners: Sequence[Point]) -> None:
        pygame.draw.polygon(self.surface, _rgb(color), [self._screen(p) for p in corners])

    def _outline(self, color: RGB, corners: Sequence[Point]) -> None:
        pygame.draw.lines(
            self.surface, _rgb(color), True, [self._screen(p) for p in corners], 1
        )

    def _quads(self, quads: Iterable[Quad]) -> None:
        for quad in quads:
            self._polygon(quad.rgb, quad.corners)

    def _text(self, message: str, color: RGB, x: float, y: float) -> None:
        image = self.font.render(message, False, _rgb(color))
        rect = image.get_rect()
        rect.bottomleft = tuple(round(v) for v in self._screen((x, y)))
        self.surface.blit(image, rect)

    # -- elements ---------------------------------------------------------

    def _draw_stars(self, stars: Iterable[Star]) -> None:
        for star in stars:
            b = star.brightness
            pygame.draw.circle(
                self.surface,
                _rgb((b, b, b * 0.9 + 0.1)),
                self._screen((star.x, star.y)),
                STAR_RADIUS,
            )

    def _draw_health_bar(self, fraction: float | None) -> None:
        if fraction is None:
            return
        frame = _rect_corners(BAR_X, BAR_Y, BAR_WIDTH, BAR_HEIGHT)
        self._polygon(GREY_RGB, frame)
        if fraction > 0:
            self._polygon(
                (1.0 - fraction, fraction, 0.0),
                _rect_corners(BAR_X, BAR_Y, BAR_WIDTH * fraction, BAR_HEIGHT),
            )
        self._outline(WHITE_RGB, frame)

    def _draw_end_message(self, state: GameState) -> None:
        if state is GameState.GAME_OVER:
            self._text("GAME OVER", RED_RGB, -0.15, 0.0)
        elif state is GameState.VICTORY:
            self._text("VITORIA!", GREEN_RGB, -0.15, 0.0)
        else:
            return
        self._text(RESTART_MESSAGE, WHITE_RGB, -0.35, -0.1)

    def _draw_alien(self, alien: Alien) -> None:
        self._quads(sprite_pixels(alien.SPRITE, alien.x, alien.y, alien.PIXEL_SIZE))

    def _draw_shot(self, shot: Shot) -> None:
        if not shot.active:
            return
        color = shot.color()
        if color is None:
            color = WHITE_RGB
        self._polygon(color, shot.corners)

    # -- public -----------------------------------------------------------

    def draw(self, game: Game) -> None:
        """Clear the surface and draw the whole game on it."""
        self.surface.fill(BLACK)
        self._draw_stars(game.stars)
        self._draw_health_bar(game.boss_health())
        self._draw_end_message(game.state)
        self._text(f"Vidas: {game.lives}", WHITE_RGB, -0.95, 0.9)
        for alien in game.aliens:
            self._draw_alien(alien)
        for shot in game.shots:
            self._draw_shot(shot)
        self._quads(game.ship.pixel_quads())
        boss = game.boss
        if boss is not None and boss.life > 0:
            self._quads(sprite_pixels(boss.SPRITE, boss.x, boss.y, boss.PIXEL_SIZE))