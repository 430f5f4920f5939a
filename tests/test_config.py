import math

import pytest

from raycube.config import Color, Direction, Keys, Player


@pytest.mark.parametrize("r,g,b", [(0, 0, 0), (255, 255, 255), (12, 200, 7), (1, 2, 3)])
def test_color_packed_round_trip(r, g, b):
    value = Color(r, g, b).packed()
    assert (value >> 16) & 0xFF == r
    assert (value >> 8) & 0xFF == g
    assert value & 0xFF == b
    assert value <= 0xFFFFFF


def test_color_packed_red_channel_is_high_byte():
    assert Color(255, 0, 0).packed() == 0xFF0000


def test_color_defaults_undefined():
    color = Color()
    assert color.defined is False
    assert color.packed() == 0


def test_player_defaults_match_initialisation():
    player = Player()
    assert player.x == -1
    assert player.y == -1
    assert player.dir_y == -1
    assert player.plane_x == 0.66
    assert player.move_speed == 0.1
    assert player.turn_radian == 0.04
    assert player.direction is Direction.NORTH


@pytest.mark.parametrize("direction", list(Direction))
def test_face_gives_unit_direction_perpendicular_plane(direction):
    player = Player()
    player.face(direction)
    assert player.direction is direction
    assert math.isclose(math.hypot(player.dir_x, player.dir_y), 1.0)
    assert math.isclose(math.hypot(player.plane_x, player.plane_y), 0.66)
    assert math.isclose(player.dir_x * player.plane_x + player.dir_y * player.plane_y, 0.0, abs_tol=1e-12)


def test_face_east_and_west_are_opposite():
    east, west = Player(), Player()
    east.face(Direction.EAST)
    west.face(Direction.WEST)
    assert east.dir_x == -west.dir_x
    assert east.plane_y == -west.plane_y
    assert east.dir_x == 1


def test_face_south_plane_points_negative_x():
    player = Player()
    player.face(Direction.SOUTH)
    assert player.dir_y == 1
    assert player.plane_x == -0.66


def test_direction_from_map_letter():
    assert Direction("N") is Direction.NORTH
    assert Direction("E") is Direction.EAST
    with pytest.raises(ValueError):
        Direction("X")


def test_keys_start_released_and_are_independent():
    first = Keys()
    first.w = True
    second = Keys()
    assert second.w is False
    assert first.w is True
    assert [first.a, first.s, first.d, first.left, first.right] == [False] * 5