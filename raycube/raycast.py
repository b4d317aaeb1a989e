"""Casting one ray per screen column through the map grid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from .constants import WIN_H, WIN_W, Side
from .player import Player

_MIN_DIST = 0.00001


@dataclass
class Hit:
    """Where a ray met one kind of cell: distance, wall height and side."""

    hit: bool = False
    dist: float = 0.0
    h: int = 0
    side: Side = Side.NO
    tex: Side = Side.NO


@dataclass
class Ray:
    """A ray through the grid and what it met."""

    camera_x: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    step_x: int = 0
    step_y: int = 0
    sidedist_x: float = 0.0
    sidedist_y: float = 0.0
    delta_x: float = 0.0
    delta_y: float = 0.0
    wall: Hit = field(default_factory=Hit)
    closed_d: Hit = field(default_factory=Hit)
    open_d: Hit = field(default_factory=Hit)
    anim_d: Hit = field(default_factory=Hit)
    nearest_sprite_dist: float = 0.0


def camera_x(column: int) -> float:
    """Position of a screen column on the camera plane, from -1 to 1."""
    return 2 * column / WIN_W - 1


def _inverse_abs(value: float) -> float:
    return math.inf if value == 0 else abs(1 / value)


def _cell(grid: Sequence[Sequence[str]], x: int, y: int) -> str:
    # Anything outside the grid stops the ray like a wall.
    if y < 0 or y >= len(grid):
        return "1"
    row = grid[y]
    if x < 0 or x >= len(row):
        return "1"
    return row[x]


def _set_hit(ray: Ray, player: Player, target: Hit, y_axis: bool) -> None:
    target.hit = True
    if y_axis:
        target.dist = ray.sidedist_y - ray.delta_y
    else:
        target.dist = ray.sidedist_x - ray.delta_x
    if target.dist < _MIN_DIST:
        target.dist = _MIN_DIST
    if y_axis and ray.map_y < player.pos_y:
        target.side = Side.SO
    elif y_axis:
        target.side = Side.NO
    elif ray.map_x < player.pos_x:
        target.side = Side.EA
    else:
        target.side = Side.WE
    height = WIN_H / target.dist
    target.h = int(height) if math.isfinite(height) else 0


def _check_doors(ray: Ray, player: Player, cell: str, y_axis: bool) -> None:
    if cell == "D" and not ray.closed_d.hit:
        _set_hit(ray, player, ray.closed_d, y_axis)
        if ray.nearest_sprite_dist == 0:
            ray.nearest_sprite_dist = ray.closed_d.dist
    if cell == "O" and not ray.open_d.hit:
        _set_hit(ray, player, ray.open_d, y_axis)
    if cell in ("d", "o"):
        _set_hit(ray, player, ray.anim_d, y_axis)


def _trace(ray: Ray, player: Player, grid, bonus: bool) -> None:
    y_axis = False
    while not ray.wall.hit and not ray.closed_d.hit:
        cell = _cell(grid, ray.map_x, ray.map_y)
        if cell == "1":
            _set_hit(ray, player, ray.wall, y_axis)
            if ray.nearest_sprite_dist == 0:
                ray.nearest_sprite_dist = ray.wall.dist
        if bonus:
            _check_doors(ray, player, cell, y_axis)
        if ray.sidedist_x < ray.sidedist_y:
            ray.sidedist_x += ray.delta_x
            ray.map_x += ray.step_x
            y_axis = False
        else:
            ray.sidedist_y += ray.delta_y
            ray.map_y += ray.step_y
            y_axis = True


def cast_ray(
    player: Player, grid: Sequence[Sequence[str]], column: int, bonus: bool = True
) -> Ray:
    """Cast the ray of a screen column until it meets a wall or a closed door.

    The player's camera must be up to date. With ``bonus`` open and moving
    doors passed on the way are recorded too.
    """
    cam = camera_x(column)
    ray = Ray(
        camera_x=cam,
        dir_x=player.dir_x + player.plane_x * cam,
        dir_y=player.dir_y + player.plane_y * cam,
        map_x=int(player.pos_x),
        map_y=int(player.pos_y),
    )
    ray.closed_d.tex = Side.DR_C
    ray.open_d.tex = Side.DR_O
    ray.delta_x = _inverse_abs(ray.dir_x)
    ray.delta_y = _inverse_abs(ray.dir_y)
    if ray.dir_x < 0:
        ray.step_x = -1
        ray.sidedist_x = (player.pos_x - ray.map_x) * ray.delta_x
    else:
        ray.step_x = 1
        ray.sidedist_x = (ray.map_x + 1.0 - player.pos_x) * ray.delta_x
    if ray.dir_y < 0:
        ray.step_y = -1
        ray.sidedist_y = (player.pos_y - ray.map_y) * ray.delta_y
    else:
        ray.step_y = 1
        ray.sidedist_y = (ray.map_y + 1.0 - player.pos_y) * ray.delta_y
    _trace(ray, player, grid, bonus)
    return ray