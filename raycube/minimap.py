"""The minimap: a small top-down view of the cells around the player."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .canvas import Canvas
from .constants import (
    MMAP_BORDER,
    MMAP_DOOR,
    MMAP_EMPTY,
    MMAP_FLOOR,
    MMAP_P,
    MMAP_SCALE,
    MMAP_SIZE,
    MMAP_WALL,
)

_TOTAL_SIZE = MMAP_SCALE * MMAP_SIZE + MMAP_BORDER * MMAP_SIZE
_CELL_STEP = MMAP_SCALE + MMAP_BORDER
_REACH = MMAP_SIZE // 2
_PLAYER_RADIUS = 5


def cell_color(cell: str) -> Optional[int]:
    """Return the minimap colour of a map cell, or None if it is left undrawn."""
    if cell == "1":
        return MMAP_WALL
    if cell in ("0", "T", "P"):
        return MMAP_FLOOR
    if cell in ("O", "D", "d", "o"):
        return MMAP_DOOR
    return None


def _grid_color(grid: Sequence[Sequence[str]], x: int, y: int) -> Optional[int]:
    if x < 0 or y < 0 or y >= len(grid) or x >= len(grid[y]):
        return MMAP_EMPTY
    return cell_color(grid[y][x])


@dataclass
class Minimap:
    """The minimap image and the cursor used while drawing its cells."""

    totalsize: int = _TOTAL_SIZE
    canvas: Optional[Canvas] = field(default=None, repr=False)
    minimap_x: int = 1
    minimap_y: int = 1

    def __post_init__(self) -> None:
        if self.canvas is None:
            self.canvas = Canvas(self.totalsize + 1, self.totalsize + 1)

    def _fill(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        x0, y0 = max(x0, 0), max(y0, 0)
        x1, y1 = min(x1, self.canvas.width), min(y1, self.canvas.height)
        if x0 < x1 and y0 < y1:
            self.canvas.pixels[y0:y1, x0:x1] = color

    def draw_zone(self) -> None:
        """Clear the minimap and draw its frame."""
        size = self.totalsize
        self._fill(0, 0, size, size, MMAP_EMPTY)
        self._fill(0, 0, size + 1, 1, MMAP_WALL)
        self._fill(size, 0, size + 1, size + 1, MMAP_WALL)
        self._fill(0, size, size + 1, size + 1, MMAP_WALL)
        self._fill(0, 0, 1, size + 1, MMAP_WALL)

    def draw_cells(self, grid: Sequence[Sequence[str]], pos_x: int, pos_y: int) -> None:
        """Draw the cells around a map cell, then the player marker in the centre."""
        self.minimap_y = 1
        for cam_y in range(pos_y - _REACH, pos_y + _REACH + 1):
            self.minimap_x = 1
            for cam_x in range(pos_x - _REACH, pos_x + _REACH + 1):
                color = _grid_color(grid, cam_x, cam_y)
                if color is not None:
                    self._fill(
                        self.minimap_x,
                        self.minimap_y,
                        self.minimap_x + MMAP_SCALE,
                        self.minimap_y + MMAP_SCALE,
                        color,
                    )
                self.minimap_x += _CELL_STEP
            self.minimap_y += _CELL_STEP
        self.minimap_x = 1
        centre = int(self.totalsize * 0.5)
        self.draw_player(centre, centre, _PLAYER_RADIUS)

    def draw_player(self, xc: int, yc: int, r: int) -> None:
        """Draw a filled disc of radius ``r`` centred on (xc, yc)."""
        for x in range(r + 1):
            reach = int(math.sqrt(r * r - x * x))
            for i in range(-reach, reach + 1):
                self.canvas.put_pixel(xc + x, yc + i, MMAP_P)
                self.canvas.put_pixel(xc - x, yc + i, MMAP_P)

    def draw_direction(
        self,
        grid: Sequence[Sequence[str]],
        pos_x: float,
        pos_y: float,
        dir_x: float,
        dir_y: float,
        color: int,
    ) -> None:
        """Draw a line from the centre along a direction until a wall, a gap or the frame."""
        if dir_x == 0 and dir_y == 0:
            return
        screen_x = screen_y = self.totalsize * 0.5
        map_x = int(pos_x) + 0.5
        map_y = int(pos_y) + 0.5
        step = MMAP_BORDER + MMAP_SCALE
        while (
            0 < int(screen_x) < self.totalsize
            and 0 < int(screen_y) < self.totalsize
        ):
            map_x += dir_x / step
            map_y += dir_y / step
            row_index = math.floor(map_y)
            if row_index < 0 or row_index >= len(grid):
                break
            row = grid[row_index]
            col_index = math.floor(map_x)
            if col_index < 0 or col_index >= len(row) or row[col_index] in (" ", "1"):
                break
            self.canvas.put_pixel(int(screen_x), int(screen_y), color)
            screen_x += dir_x
            screen_y += dir_y