import pytest

from invaders.shoot import Direction, Shot


def test_upward_shot_moves_up():
    shot = Shot(0.0, 0.0, 0.05, Direction.UP)
    shot.update()
    assert shot.y == pytest.approx(0.05)
    assert shot.active


def test_downward_shot_moves_down():
    shot = Shot(0.2, 0.0, 0.03, Direction.DOWN)
    shot.update()
    assert shot.y == pytest.approx(-0.03)
    assert shot.x == 0.2


def test_shot_leaving_top_is_deactivated():
    shot = Shot(0.0, 0.99, 0.05, Direction.UP)
    shot.update()
    assert shot.active is False


def test_shot_leaving_bottom_is_deactivated():
    shot = Shot(0.0, -0.99, 0.05, Direction.DOWN)
    shot.update()
    assert shot.active is False


def test_inactive_shot_does_not_move():
    shot = Shot(0.0, 0.5, 0.05, Direction.UP, active=False)
    shot.update()
    assert shot.y == 0.5


def test_shot_eventually_leaves_screen():
    shot = Shot(0.0, -0.85, 0.05, Direction.UP)
    for _ in range(100):
        shot.update()
    assert shot.active is False
    assert shot.y > 1.0


def test_colours_by_direction():
    assert Shot(0, 0, 0.05, Direction.UP).color() == (1.0, 1.0, 1.0)
    assert Shot(0, 0, 0.05, Direction.DOWN).color() == (1.0, 0.0, 0.0)
    assert Shot(0, 0, 0.05, 0).color() is None


def test_corners_span_rectangle():
    shot = Shot(0.3, 0.4, 0.05, Direction.UP)
    (x0, y0), (x1, _), (_, y2), _ = shot.corners
    assert x1 - x0 == pytest.approx(2 * Shot.HALF_WIDTH)
    assert y2 - y0 == pytest.approx(2 * Shot.HALF_HEIGHT)