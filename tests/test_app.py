import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from invaders.app import Controller
from invaders.game import Game, GameState
from invaders.shoot import Direction


@pytest.fixture
def controller():
    return Controller(Game(random.Random(0)))


def _player_shots(game):
    return [s for s in game.shots if s.direction == Direction.UP]


def test_d_moves_ship_right(controller):
    controller.key_down("d")
    controller.tick(0.0)
    assert controller.game.ship.x == pytest.approx(0.05)


@pytest.mark.parametrize("key", ["a", "A"])
def test_a_moves_ship_left(controller, key):
    controller.key_down(key)
    controller.tick(0.0)
    assert controller.game.ship.x == pytest.approx(-0.05)


def test_released_key_stops_movement(controller):
    controller.key_down("D")
    controller.tick(0.0)
    controller.key_up("D")
    controller.tick(0.1)
    assert controller.game.ship.x == pytest.approx(0.05)
    assert "D" not in controller.pressed


def test_opposite_keys_cancel(controller):
    controller.key_down("a")
    controller.key_down("d")
    controller.tick(0.0)
    assert controller.game.ship.x == pytest.approx(0.0)


def test_fire_is_rate_limited(controller):
    controller.key_down(" ")
    controller.tick(0.0)
    assert len(_player_shots(controller.game)) == 1
    controller.tick(0.1)
    assert len(_player_shots(controller.game)) == 1
    controller.tick(0.35)
    assert len(_player_shots(controller.game)) == 2


def test_tick_advances_the_game(controller):
    before = [alien.x for alien in controller.game.aliens]
    controller.tick(0.0)
    after = [alien.x for alien in controller.game.aliens]
    assert after != before
    assert len(after) == len(before)


def test_space_restarts_finished_game(controller):
    game = controller.game
    game.state = GameState.GAME_OVER
    game.lives = 0
    controller.key_down(" ")
    assert game.state is GameState.PLAYING
    assert game.lives == 3


def test_space_restarts_after_victory(controller):
    game = controller.game
    game.state = GameState.VICTORY
    game.level = 2
    controller.key_down(" ")
    assert game.state is GameState.PLAYING
    assert game.level == 1


def test_other_key_does_not_restart(controller):
    controller.game.state = GameState.GAME_OVER
    controller.key_down("x")
    assert controller.game.state is GameState.GAME_OVER


def test_space_while_playing_does_not_restart(controller):
    controller.game.lives = 2
    controller.key_down(" ")
    assert controller.game.lives == 2
    assert controller.game.state is GameState.PLAYING