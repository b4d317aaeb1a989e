"""Flood fill over the map to prove it closed and the treasure reachable.

A depth-first fill marks reachable cells as walls until a call budget runs
out; cells met after that are marked ``P`` and finished by a second,
step-by-step fill.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .errors import ParseError

Grid = list[list[str]]

_CALL_LIMIT = 100_000
_END = "\0"


@dataclass
class FillState:
    """Progress and findings of a flood fill."""

    limit_recursive: int = 0
    invalid_map: bool = False
    catch_treasure: bool = False
    x: int = 0
    y: int = 0


def _cell(grid: Grid, x: int, y: int) -> str:
    row = grid[y]
    return row[x] if x < len(row) else _END


def flood_fill_recursive(
    state: FillState,
    grid: Grid,
    pos_x: int,
    pos_y: int,
    map_len_y: int,
    bonus: bool = True,
) -> None:
    """Fill from a cell in depth-first order, turning reached cells into walls."""
    pending: list[tuple[int, int]] = [(pos_x, pos_y)]
    while pending:
        x, y = pending.pop()
        state.limit_recursive += 1
        row = grid[y]
        char = _cell(grid, x, y)
        if state.limit_recursive > _CALL_LIMIT:
            if char != "1" and x < len(row):
                row[x] = "P"
            continue
        if char == "1":
            continue
        if char in ("0", "P") or (bonus and char in ("D", "T")):
            if bonus and char == "T":
                state.catch_treasure = True
            row[x] = "1"
        else:
            state.invalid_map = True
            continue
        children: list[tuple[int, int]] = []
        if x + 1 < len(row):
            children.append((x + 1, y))
        else:
            state.invalid_map = True
        if x - 1 >= 0:
            children.append((x - 1, y))
        else:
            state.invalid_map = True
        if y + 1 < map_len_y and y + 1 < len(grid) and len(grid[y + 1]) >= x:
            children.append((x, y + 1))
        else:
            state.invalid_map = True
        if y - 1 >= 0 and len(grid[y - 1]) >= x:
            children.append((x, y - 1))
        else:
            state.invalid_map = True
        pending.extend(reversed(children))


def _find_pos(grid: Grid, first_row: int) -> tuple[int, int]:
    for y, row in enumerate(grid[first_row:], first_row):
        if "P" in row:
            return row.index("P"), y
    return 0, 0


def _treasure_near(grid: Grid, x: int, y: int, map_len_y: int) -> bool:
    if y - 1 >= 0 and len(grid[y - 1]) >= x and _cell(grid, x, y - 1) == "T":
        return True
    if (
        y + 1 < map_len_y
        and y + 1 < len(grid)
        and len(grid[y + 1]) >= x
        and _cell(grid, x, y + 1) == "T"
    ):
        return True
    if x - 1 >= 0 and grid[y][x - 1] == "T":
        return True
    return x + 1 < len(grid[y]) and grid[y][x + 1] == "T"


def _spread_to(grid: Grid, x: int, y: int) -> bool:
    char = _cell(grid, x, y)
    if char == "0":
        grid[y][x] = "P"
        return True
    return char in ("1", "T", "P")


def _spread_cross(grid: Grid, x: int, y: int, map_len_y: int) -> bool:
    grid[y][x] = "1"
    if y - 1 < 0 or len(grid[y - 1]) < x or not _spread_to(grid, x, y - 1):
        return False
    if (
        y + 1 > map_len_y
        or y + 1 >= len(grid)
        or len(grid[y + 1]) < x
        or not _spread_to(grid, x, y + 1)
    ):
        return False
    if x - 1 < 0 or not _spread_to(grid, x - 1, y):
        return False
    return x + 1 < len(grid[y]) and _spread_to(grid, x + 1, y)


def flood_fill_iterative(
    state: FillState, grid: Grid, map_len_y: int, bonus: bool = True
) -> None:
    """Finish the fill from every cell marked ``P``, one cell at a time."""
    state.x, state.y = _find_pos(grid, 0)
    while state.x != 0 or state.y != 0:
        x, y = state.x, state.y
        if bonus and _treasure_near(grid, x, y, map_len_y):
            state.catch_treasure = True
        if not _spread_cross(grid, x, y, map_len_y):
            state.invalid_map = True
            return
        # Rows above y - 1 cannot have gained a P, so the scan resumes there.
        state.x, state.y = _find_pos(grid, max(0, y - 1))


def apply_flood_fill(
    grid: Sequence[str], pos_x: int, pos_y: int, map_len_y: Optional[int] = None
) -> FillState:
    """Fill a copy of the map from the player.

    Raises ParseError if the map is open or the treasure cannot be reached.
    """
    cells = [list(row) for row in grid]
    height = len(cells) if map_len_y is None else map_len_y
    state = FillState()
    flood_fill_recursive(state, cells, pos_x, pos_y, height, True)
    flood_fill_iterative(state, cells, height, True)
    if state.invalid_map:
        raise ParseError("map not close")
    if not state.catch_treasure:
        raise ParseError("treasure not reachable")
    return state