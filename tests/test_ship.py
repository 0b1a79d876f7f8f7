import math

import pytest

from invaders.ship import Ship


def test_move_left_and_right():
    ship = Ship(0.0, -0.85)
    ship.move_left()
    assert ship.x == pytest.approx(-0.05)
    ship.move_right()
    ship.move_right()
    assert ship.x == pytest.approx(0.05)


def test_left_edge_is_respected():
    ship = Ship(0.0, -0.85)
    for _ in range(100):
        ship.move_left()
    assert ship.x > -Ship.LIMIT
    assert ship.x - Ship.STEP <= -Ship.LIMIT


def test_right_edge_is_respected():
    ship = Ship(0.0, -0.85)
    for _ in range(100):
        ship.move_right()
    assert ship.x < Ship.LIMIT
    assert ship.x + Ship.STEP >= Ship.LIMIT


def test_no_movement_while_spinning():
    ship = Ship(0.0, -0.85)
    ship.start_hit_animation()
    ship.move_left()
    ship.move_right()
    assert ship.x == 0.0


def test_start_hit_animation_sets_timer():
    ship = Ship(0.0, -0.85)
    ship.start_hit_animation()
    assert ship.is_hit_animating
    assert ship.hit_animation_timer == Ship.HIT_ANIMATION_DURATION
    assert ship.hit_rotation_angle == 0.0


def test_one_update_rotates_by_speed():
    ship = Ship(0.0, -0.85)
    ship.start_hit_animation()
    ship.update_hit_animation()
    assert ship.hit_rotation_angle == Ship.HIT_ROTATION_SPEED
    assert ship.hit_animation_timer == Ship.HIT_ANIMATION_DURATION - 1


def test_animation_ends_after_duration():
    ship = Ship(0.0, -0.85)
    ship.start_hit_animation()
    for _ in range(int(Ship.HIT_ANIMATION_DURATION) - 1):
        ship.update_hit_animation()
        assert 0.0 <= ship.hit_rotation_angle < 360.0
    assert ship.is_hit_animating
    ship.update_hit_animation()
    assert not ship.is_hit_animating
    assert ship.hit_rotation_angle == 0.0


def test_update_without_animation_is_noop():
    ship = Ship(0.0, -0.85)
    ship.update_hit_animation()
    assert ship.hit_rotation_angle == 0.0
    assert not ship.is_hit_animating


def test_restarting_animation_keeps_angle():
    ship = Ship(0.0, -0.85)
    ship.start_hit_animation()
    for _ in range(3):
        ship.update_hit_animation()
    ship.start_hit_animation()
    assert ship.hit_rotation_angle == pytest.approx(3 * Ship.HIT_ROTATION_SPEED)
    assert ship.hit_animation_timer == Ship.HIT_ANIMATION_DURATION


def test_pixel_quads_cover_opaque_pixels():
    ship = Ship(0.0, -0.85)
    opaque = sum(1 for row in Ship.SPRITE for value in row if value)
    assert len(ship.pixel_quads()) == opaque


def test_rotation_preserves_distance_from_centre():
    still = Ship(0.2, -0.5)
    spinning = Ship(0.2, -0.5)
    spinning.start_hit_animation()
    for _ in range(4):
        spinning.update_hit_animation()
    for a, b in zip(still.pixel_quads(), spinning.pixel_quads()):
        assert a.rgb == b.rgb
        for (ax, ay), (bx, by) in zip(a.corners, b.corners):
            da = math.hypot(ax - 0.2, ay + 0.5)
            db = math.hypot(bx - 0.2, by + 0.5)
            assert da == pytest.approx(db)


def test_quads_follow_ship_position():
    origin = Ship(0.0, 0.0).pixel_quads()
    moved = Ship(0.4, -0.3).pixel_quads()
    for a, b in zip(origin, moved):
        for (ax, ay), (bx, by) in zip(a.corners, b.corners):
            assert bx - ax == pytest.approx(0.4)
            assert by - ay == pytest.approx(-0.3)