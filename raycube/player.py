"""The player: position, facing, camera plane and movement."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from .constants import FOV, MOVE, ROTATE, TWO_PI

if TYPE_CHECKING:
    from .parser import Scene

_FOV_RAD = FOV * math.pi / 180
_END = "\0"
_BLOCKING = frozenset("1DT")


def _cell(grid: Sequence[Sequence[str]], x: int, y: int) -> str:
    if y < 0 or y >= len(grid):
        return _END
    row = grid[y]
    if x < 0 or x >= len(row):
        return _END
    return row[x]


@dataclass
class Player:
    """Player state in map units; angles are in radians.

    Movement and rotation do not know about door animations: callers skip
    them while a door is moving.
    """

    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_rad: float = 0.0
    start_x: float = 0.0
    start_y: float = 0.0
    fov: float = _FOV_RAD
    plane_length: float = math.tan(_FOV_RAD * 0.5)
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0

    @property
    def cell(self) -> tuple[int, int]:
        """Map cell the player stands in, as (x, y)."""
        return int(self.pos_x), int(self.pos_y)

    def update_camera(self) -> None:
        """Recompute the facing vector and camera plane from the angle."""
        self.dir_x = math.cos(self.dir_rad)
        self.dir_y = math.sin(self.dir_rad)
        self.plane_x = -self.dir_y * self.plane_length
        self.plane_y = self.dir_x * self.plane_length

    def rotate_clockwise(self) -> None:
        """Turn right by one rotation step."""
        self.dir_rad += ROTATE
        if self.dir_rad >= TWO_PI:
            self.dir_rad = 0.0

    def rotate_counterclockwise(self) -> None:
        """Turn left by one rotation step."""
        self.dir_rad -= ROTATE
        if self.dir_rad < 0:
            self.dir_rad = TWO_PI - ROTATE

    def step(
        self,
        dest_x: float,
        dest_y: float,
        grid: Sequence[Sequence[str]],
        map_len_y: int,
        bonus: bool = True,
    ) -> None:
        """Move towards a destination, one axis at a time.

        With ``bonus`` walls, doors and the treasure block the way. Without
        it only spaces and the map edges stop the player, and an axis that
        is stopped snaps back to the starting position.
        """
        if not bonus:
            cell = _cell(grid, int(dest_x), int(self.pos_y))
            if cell != _END and dest_x > 0.1 and cell != " ":
                self.pos_x = dest_x
            else:
                self.pos_x = self.start_x
            cell = _cell(grid, int(self.pos_x), int(dest_y))
            if (
                cell != _END
                and 0.1 < dest_y < map_len_y - 1
                and cell != " "
                and _cell(grid, 0, int(dest_y)) != _END
            ):
                self.pos_y = dest_y
            else:
                self.pos_y = self.start_y
            return
        if _cell(grid, int(dest_x), int(self.pos_y)) not in _BLOCKING:
            self.pos_x = dest_x
        if _cell(grid, int(self.pos_x), int(dest_y)) not in _BLOCKING:
            self.pos_y = dest_y

    def move_forward(self, grid, map_len_y: int, bonus: bool = True) -> None:
        """Step along the facing direction."""
        self.step(
            self.pos_x + self.dir_x * MOVE,
            self.pos_y + self.dir_y * MOVE,
            grid,
            map_len_y,
            bonus,
        )

    def move_backward(self, grid, map_len_y: int, bonus: bool = True) -> None:
        """Step against the facing direction."""
        self.step(
            self.pos_x - self.dir_x * MOVE,
            self.pos_y - self.dir_y * MOVE,
            grid,
            map_len_y,
            bonus,
        )

    def move_left(self, grid, map_len_y: int, bonus: bool = True) -> None:
        """Strafe to the left of the facing direction."""
        self.step(
            self.pos_x + self.dir_y * MOVE,
            self.pos_y - self.dir_x * MOVE,
            grid,
            map_len_y,
            bonus,
        )

    def move_right(self, grid, map_len_y: int, bonus: bool = True) -> None:
        """Strafe to the right of the facing direction."""
        self.step(
            self.pos_x - self.dir_y * MOVE,
            self.pos_y + self.dir_x * MOVE,
            grid,
            map_len_y,
            bonus,
        )


def player_from_scene(scene: "Scene") -> Player:
    """Place a player in the middle of the scene's start cell."""
    pos_x = scene.pos_x + 0.5
    pos_y = scene.pos_y + 0.5
    player = Player(
        pos_x=pos_x,
        pos_y=pos_y,
        dir_rad=scene.direction.radians(),
        start_x=pos_x,
        start_y=pos_y,
    )
    player.update_camera()
    return player