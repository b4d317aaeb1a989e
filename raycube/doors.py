"""Opening and closing doors, one animation frame at a time."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import MutableSequence

from .constants import Side
from .player import Player

LAST_FRAME = Side.DR_O - Side.DR_C


def _round(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def door_target(player: Player) -> tuple[int, int]:
    """Return the (x, y) cell right in front of the player."""
    return (
        int(player.pos_x) + _round(player.dir_x),
        int(player.pos_y) + _round(player.dir_y),
    )


def _get(grid, x: int, y: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return ""


def _set(grid: MutableSequence, x: int, y: int, char: str) -> None:
    row = grid[y]
    if isinstance(row, str):
        grid[y] = row[:x] + char + row[x + 1 :]
    else:
        row[x] = char


@dataclass
class DoorState:
    """Progress of the door animation.

    ``animation`` is the frame index counted from the closed-door texture.
    Map rows may be strings or lists of characters.
    """

    anim_open: bool = False
    anim_close: bool = False
    animation: int = 0
    frame_delay: float = 0.0

    def busy(self) -> bool:
        """Tell whether a door is moving."""
        return self.anim_open or self.anim_close

    def open(self, grid: MutableSequence, player: Player) -> bool:
        """Start opening the closed door in front of the player, if any."""
        x, y = door_target(player)
        if _get(grid, x, y) != "D" or self.anim_close:
            return False
        _set(grid, x, y, "d")
        self.anim_open = True
        self.animation = 0
        return True

    def close(self, grid: MutableSequence, player: Player) -> bool:
        """Start closing the open door in front of the player, if any."""
        x, y = door_target(player)
        if _get(grid, x, y) != "O" or self.anim_open:
            return False
        _set(grid, x, y, "o")
        self.anim_close = True
        self.animation = LAST_FRAME
        return True

    def step(self, grid: MutableSequence, player: Player) -> None:
        """Advance a moving door by one frame, settling it at the last one."""
        if self.anim_open == self.anim_close:
            return
        if self.frame_delay > 0:
            time.sleep(self.frame_delay)
        x, y = door_target(player)
        if self.anim_open:
            if self.animation == LAST_FRAME:
                self.animation = 0
                self.anim_open = False
                _set(grid, x, y, "O")
            else:
                self.animation += 1
        elif self.animation == 0:
            self.anim_close = False
            _set(grid, x, y, "D")
        else:
            self.animation -= 1