"""Locating the map in a scene and checking its cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .constants import Direction
from .errors import ParseError
from .floodfill import apply_flood_fill

_MAP_START = (" ", "1", "0")
_PLAYER_CHARS = frozenset("NSEW")


@dataclass
class MapInfo:
    """A checked map: rows with the player marked ``P``, and where things are."""

    grid: list[str]
    pos_x: int
    pos_y: int
    direction: Direction
    treasure: Optional[tuple[float, float]] = None


def extract_map(lines: Sequence[str]) -> list[str]:
    """Return the map rows: the lines from the first one that starts a map."""
    for index, line in enumerate(lines):
        if line[:1] in _MAP_START and ("1" in line or "0" in line):
            return list(lines[index:])
    raise ParseError("map not found")


def map_dimensions(grid: Sequence[str]) -> tuple[int, int]:
    """Return the map width (longest row plus one) and its height."""
    widest = max((len(row) for row in grid), default=0)
    if widest == 0 or not grid:
        raise ParseError("issue with the map")
    return widest + 1, len(grid)


def _alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _closed(rows: list[list[str]], x: int, y: int) -> bool:
    if y - 1 < 0 or x >= len(rows[y - 1]) or not _alnum(rows[y - 1][x]):
        return False
    if y + 1 >= len(rows) or x >= len(rows[y + 1]) or not _alnum(rows[y + 1][x]):
        return False
    row = rows[y]
    if x + 1 >= len(row) or not _alnum(row[x + 1]):
        return False
    return x - 1 >= 0 and _alnum(row[x - 1])


def check_map(grid: Sequence[str], bonus: bool = True) -> MapInfo:
    """Check every map cell and find the player and, with ``bonus``, the treasure.

    Raises ParseError when a cell is unknown, the map is open, the player is
    missing or repeated, or (with ``bonus``) the treasure is missing,
    repeated or out of reach.
    """
    rows = [list(row) for row in grid]
    map_len_y = len(rows)
    players = 0
    treasures = 0
    pos_x = pos_y = 0
    direction: Optional[Direction] = None
    treasure: Optional[tuple[float, float]] = None
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in _PLAYER_CHARS or char == "0":
                if char in _PLAYER_CHARS:
                    direction = Direction.from_char(char)
                    row[x] = "P"
                    pos_x, pos_y = x, y
                    players += 1
                if not _closed(rows, x, y):
                    raise ParseError("map not close")
            elif char in ("1", " "):
                continue
            elif bonus and char in ("D", "T"):
                if char == "T":
                    treasures += 1
                    treasure = (x + 0.5, y + 0.5)
            else:
                raise ParseError("bad char in map detected")
    if players != 1 or direction is None:
        raise ParseError("invalid number of player")
    if pos_x == 0 or pos_y == 0 or pos_y == map_len_y - 1:
        raise ParseError("invalid player")
    marked = ["".join(row) for row in rows]
    if bonus:
        if treasures != 1:
            raise ParseError("invalid number of treasure")
        apply_flood_fill(marked, pos_x, pos_y, map_len_y)
    return MapInfo(marked, pos_x, pos_y, direction, treasure)