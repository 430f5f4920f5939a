"""Game constants and the plain state records shared by the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

WIDTH = 1920
HEIGHT = 1080

KEY_W = 13
KEY_A = 0
KEY_S = 1
KEY_D = 2
KEY_LEFT = 123
KEY_RIGHT = 124
KEY_ESC = 53

PLANE_LENGTH = 0.66
TURN_RADIAN = 0.04
MOVE_SPEED = 0.1


class Direction(Enum):
    """The direction a player starts out facing, keyed by its map letter."""

    NORTH = "N"
    SOUTH = "S"
    WEST = "W"
    EAST = "E"


# (dir_x, dir_y, plane_x, plane_y) for each starting direction.
_ORIENTATION = {
    Direction.NORTH: (0.0, -1.0, PLANE_LENGTH, 0.0),
    Direction.SOUTH: (0.0, 1.0, -PLANE_LENGTH, 0.0),
    Direction.WEST: (-1.0, 0.0, 0.0, -PLANE_LENGTH),
    Direction.EAST: (1.0, 0.0, 0.0, PLANE_LENGTH),
}


@dataclass
class Color:
    """An RGB colour as read from a scene file."""

    r: int = 0
    g: int = 0
    b: int = 0
    defined: bool = False

    def packed(self) -> int:
        """Return the colour as a single 0xRRGGBB integer."""
        return self.r << 16 | self.g << 8 | self.b


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    x: float = -1.0
    y: float = -1.0
    dir_x: float = 0.0
    dir_y: float = -1.0
    plane_x: float = PLANE_LENGTH
    plane_y: float = 0.0
    direction: Direction = Direction.NORTH
    move_speed: float = MOVE_SPEED
    turn_radian: float = TURN_RADIAN

    def face(self, direction: Direction) -> None:
        """Point the view and camera plane towards ``direction``."""
        self.direction = direction
        self.dir_x, self.dir_y, self.plane_x, self.plane_y = _ORIENTATION[direction]


@dataclass
class Keys:
    """Which movement and turning keys are currently held down."""

    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    left: bool = False
    right: bool = False