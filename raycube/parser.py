"""Reading a whole scene file into a checked scene."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import Direction
from .errors import ParseError
from .mapgrid import check_map, extract_map, map_dimensions
from .scanfile import check_file, read_scene_lines
from .scene import Rgb, get_data


@dataclass
class Scene:
    """Everything a valid scene file defines.

    ``grid`` holds the map rows with the player's cell marked ``P``;
    ``textures`` holds the texture paths in Side order.
    """

    textures: tuple[str, ...]
    floor: Rgb
    ceiling: Rgb
    grid: list[str]
    map_len_x: int
    map_len_y: int
    pos_x: int
    pos_y: int
    direction: Direction
    treasure: Optional[tuple[float, float]] = None


def parse(path: str | Path, bonus: bool = True) -> Scene:
    """Read and check a scene file.

    Raises ParseError when the file cannot be read or any part of it is
    invalid.
    """
    try:
        lines = read_scene_lines(path, bonus)
    except OSError as exc:
        raise ParseError(f"file: {exc.strerror or exc}") from exc
    check_file(lines, bonus)
    data = get_data(lines, bonus)
    grid = extract_map(lines)
    map_len_x, map_len_y = map_dimensions(grid)
    info = check_map(grid, bonus)
    return Scene(
        textures=data.textures,
        floor=data.floor,
        ceiling=data.ceiling,
        grid=info.grid,
        map_len_x=map_len_x,
        map_len_y=map_len_y,
        pos_x=info.pos_x,
        pos_y=info.pos_y,
        direction=info.direction,
        treasure=info.treasure,
    )