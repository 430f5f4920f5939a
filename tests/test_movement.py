import math

import pytest

from raycube.config import Direction, Keys, Player
from raycube.movement import advance, strafe, turn, update

GRID = [
    "11111\n",
    "10001\n",
    "10001\n",
    "10001\n",
    "11111\n",
]


def make_player(direction=Direction.NORTH, x=2.5, y=2.5):
    player = Player(x=x, y=y)
    player.face(direction)
    return player


def test_no_keys_changes_nothing():
    player = make_player()
    before = (player.x, player.y, player.dir_x, player.dir_y)
    update(player, GRID, Keys())
    assert (player.x, player.y, player.dir_x, player.dir_y) == before


def test_forward_moves_along_direction():
    player = make_player()
    advance(player, GRID, Keys(w=True))
    assert player.x == 2.5
    assert player.y < 2.5


def test_forward_then_back_returns():
    player = make_player(Direction.EAST)
    advance(player, GRID, Keys(w=True))
    advance(player, GRID, Keys(s=True))
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(2.5)


def test_walls_stop_forward_motion():
    player = make_player(Direction.NORTH, y=1.2)
    for _ in range(20):
        advance(player, GRID, Keys(w=True))
    assert player.y >= 1.0


def test_strafe_right_follows_plane():
    player = make_player()
    strafe(player, GRID, Keys(d=True))
    assert player.x > 2.5
    assert player.y == 2.5


def test_strafe_left_and_right_cancel():
    player = make_player(Direction.SOUTH)
    strafe(player, GRID, Keys(a=True))
    strafe(player, GRID, Keys(d=True))
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(2.5)


def test_turn_keeps_lengths_and_perpendicular():
    player = make_player()
    for _ in range(10):
        turn(player, Keys(right=True))
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1.0)
    assert player.dir_x * player.plane_x + player.dir_y * player.plane_y == pytest.approx(0.0, abs=1e-12)


def test_turn_right_then_left_restores():
    player = make_player(Direction.WEST)
    turn(player, Keys(right=True))
    assert player.dir_y != pytest.approx(0.0)
    turn(player, Keys(left=True))
    assert player.dir_x == pytest.approx(-1.0)
    assert player.dir_y == pytest.approx(0.0, abs=1e-12)


def test_turn_by_turn_radian():
    player = make_player(Direction.EAST)
    turn(player, Keys(right=True))
    assert math.atan2(player.dir_y, player.dir_x) == pytest.approx(player.turn_radian)