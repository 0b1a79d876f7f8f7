"""Colour palette and pixel-art sprites, plus helpers to turn sprites into quads."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import NamedTuple

RGB = tuple[float, float, float]
Point = tuple[float, float]

PALETTE: tuple[RGB, ...] = (
    (0.0, 0.0, 0.0),  # background black
    (1.0, 1.0, 1.0),  # white outline
    (0.1, 0.3, 0.8),  # blue body
    (0.5, 0.5, 0.5),  # grey wings
    (1.0, 1.0, 0.0),  # yellow flame core
    (1.0, 0.5, 0.0),  # orange flames
    (0.6, 0.9, 1.0),  # light blue glass
    (1.0, 0.0, 1.0),  # magenta
    (0.0, 1.0, 0.0),  # green
    (0.02, 0.02, 0.02),  # near black
)

Sprite = tuple[tuple[int, ...], ...]


def _parse(rows: Sequence[str]) -> Sprite:
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("sprite rows must all have the same width")
    return tuple(tuple(int(ch) for ch in row) for row in rows)


_ALIEN_ROWS = (
    "000000050000000",
    "000000545000000",
    "000005444500000",
    "000054444450000",
    "000054444450000",
    "000035555530000",
    "000003353300000",
    "000002222200000",
    "000222333222000",
    "002333333333200",
    "023366666663320",
    "233668888866332",
    "236680080086632",
    "236668888866632",
    "233666888666332",
    "023366686663320",
    "002333333333200",
    "000222222222000",
)

ALIEN_SPRITE: Sprite = _parse(_ALIEN_ROWS)

BOSS_SPRITE: Sprite = _parse(
    _ALIEN_ROWS[:12] + ("236689989986632",) + _ALIEN_ROWS[13:]
)

SHIP_SPRITE: Sprite = _parse(
    (
        "000000000000001000000000000000",
        "000000000000011100000000000000",
        "000000000000111110000000000000",
        "000000000001116111000000000000",
        "000000000011166611100000000000",
        "000000000011666661100000000000",
        "000000000011666661100000000000",
        "000000000011666661100000000000",
        "000000000011666661100000000000",
        "000000000011666661100000000000",
        "000000000011666661100000000000",
        "000000000011111111100000000000",
        "000000000011111111100000000000",
        "000000000277777777720000000000",
        "000000002277777777722000000000",
        "000000022211111111122200000000",
        "000000222211111111122220000000",
        "002002222211112111122222002000",
        "002022222211122211122222202000",
        "002222222211122211122222222000",
        "002222222211122211122222222000",
        "000000000022222222200000000000",
        "000000000002222222000000000000",
        "000000000000222220000000000000",
        "000000000055444445500000000000",
        "000000000054444444500000000000",
        "000000000005444445000000000000",
        "000000000000544450000000000000",
        "000000000000054500000000000000",
        "000000000000005000000000000000",
    )
)


class Quad(NamedTuple):
    """A filled four-cornered shape in world coordinates."""

    rgb: RGB
    corners: tuple[Point, Point, Point, Point]


def color(index: int) -> RGB:
    """Return the RGB triple of a palette entry."""
    if not 0 <= index < len(PALETTE):
        raise IndexError(f"palette index {index} out of range 0..{len(PALETTE) - 1}")
    return PALETTE[index]


def sprite_pixels(
    sprite: Sprite, origin_x: float, origin_y: float, size: float
) -> Iterator[Quad]:
    """Yield one square per opaque pixel, laid out right and down from the origin."""
    for row_index, row in enumerate(sprite):
        for col_index, value in enumerate(row):
            if value == 0:
                continue
            x = origin_x + col_index * size
            y = origin_y - row_index * size
            yield Quad(
                color(value),
                ((x, y), (x + size, y), (x + size, y - size), (x, y - size)),
            )