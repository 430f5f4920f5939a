"""Player movement and turning driven by the held keys."""

from __future__ import annotations

import math
from collections.abc import Sequence

from raycube.config import Keys, Player


def _is_wall(grid: Sequence[str], row: int, column: int) -> bool:
    """True for a wall cell; anything outside the grid counts as wall."""
    if row < 0 or column < 0 or row >= len(grid) or column >= len(grid[row]):
        return True
    return grid[row][column] == "1"


def _try_move(player: Player, grid: Sequence[str], dx: float, dy: float) -> None:
    """Move along each axis separately, refusing a step into a wall."""
    if not _is_wall(grid, int(player.y), int(player.x + dx)):
        player.x += dx
    if not _is_wall(grid, int(player.y + dy), int(player.x)):
        player.y += dy


def strafe(player: Player, grid: Sequence[str], keys: Keys) -> None:
    """Move sideways along the camera plane for the A and D keys."""
    dx = player.plane_x * player.move_speed
    dy = player.plane_y * player.move_speed
    if keys.a:
        _try_move(player, grid, -dx, -dy)
    if keys.d:
        _try_move(player, grid, dx, dy)


def advance(player: Player, grid: Sequence[str], keys: Keys) -> None:
    """Move forwards or backwards along the view direction for W and S."""
    dx = player.dir_x * player.move_speed
    dy = player.dir_y * player.move_speed
    if keys.w:
        _try_move(player, grid, dx, dy)
    if keys.s:
        _try_move(player, grid, -dx, -dy)


def _rotate(player: Player, angle: float) -> None:
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    player.dir_x, player.dir_y = (
        player.dir_x * cos_a - player.dir_y * sin_a,
        player.dir_x * sin_a + player.dir_y * cos_a,
    )
    player.plane_x, player.plane_y = (
        player.plane_x * cos_a - player.plane_y * sin_a,
        player.plane_x * sin_a + player.plane_y * cos_a,
    )


def turn(player: Player, keys: Keys) -> None:
    """Rotate the view and camera plane for the left and right arrow keys."""
    if keys.right:
        _rotate(player, player.turn_radian)
    if keys.left:
        _rotate(player, -player.turn_radian)


def update(player: Player, grid: Sequence[str], keys: Keys) -> None:
    """Apply one frame of movement followed by turning."""
    strafe(player, grid, keys)
    advance(player, grid, keys)
    turn(player, keys)