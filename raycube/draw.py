"""Drawing screen columns: ceiling, floor, textured walls, doors and the treasure."""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from .canvas import Canvas, Texture
from .constants import WIN_H, Side
from .player import Player
from .raycast import Hit, Ray
from .treasure import TreasureView

_HALF_H = int(WIN_H * 0.5)


def draw_ceiling_and_floor(canvas: Canvas, x: int, ceiling: int, floor: int) -> None:
    """Paint the upper half of a column with the ceiling and the rest with the floor."""
    if not 0 <= x < canvas.width:
        return
    half = int(canvas.height * 0.5)
    canvas.pixels[:half, x] = ceiling
    canvas.pixels[half:, x] = floor


def wall_x(player: Player, ray: Ray, hit: Hit, we_width: int, so_width: int) -> float:
    """Return where along its cell face a ray hit, from 0 up to 1."""
    if hit.side == Side.WE:
        value = player.pos_y + hit.dist * ray.dir_y
    elif hit.side == Side.EA:
        value = we_width - (player.pos_y + hit.dist * ray.dir_y)
    elif hit.side == Side.SO:
        value = player.pos_x + hit.dist * ray.dir_x
    else:
        value = so_width - (player.pos_x + hit.dist * ray.dir_x)
    return value - math.floor(value)


def _sample(texture: Texture, xs, ys) -> np.ndarray:
    xs = np.clip(xs, 0, texture.width - 1)
    ys = np.clip(ys, 0, texture.height - 1)
    return texture.pixels[ys, xs]


def draw_column(
    canvas: Canvas,
    x: int,
    player: Player,
    ray: Ray,
    hit: Hit,
    textures: Sequence[Texture],
    source: Optional[Texture] = None,
    skip_black: bool = False,
) -> None:
    """Draw the textured slice of a hit in one screen column.

    The slice is sized from the texture of the hit's side; its texels come
    from ``source`` when given. With ``skip_black`` black texels are left
    undrawn, so what lies behind shows through.
    """
    if not 0 <= x < canvas.width:
        return
    sized = textures[hit.side]
    texture = sized if source is None else source
    y_start = max(0, int(_HALF_H - hit.h * 0.5))
    y_end = int(_HALF_H + hit.h * 0.5)
    if y_end > WIN_H:
        y_end = WIN_H - 1
    span = sized.height / hit.h if hit.h != 0 else 0.0
    offset = wall_x(player, ray, hit, textures[Side.WE].width, textures[Side.SO].width)
    tx_x = int(offset * sized.width)
    tx_start_y = (hit.h - WIN_H) * 0.5 if hit.h > WIN_H else 0.0
    ys = np.arange(y_start + 1, min(y_end, canvas.height))
    if ys.size == 0:
        return
    tx_y = ((ys - y_start + tx_start_y) * span).astype(np.int64)
    colors = _sample(texture, np.full(ys.shape, tx_x), tx_y)
    if skip_black:
        keep = colors != 0
        ys, colors = ys[keep], colors[keep]
    canvas.pixels[ys, x] = colors


def draw_treasure(
    canvas: Canvas,
    view: TreasureView,
    texture: Texture,
    zbuffer: Sequence[float],
    x: int,
) -> None:
    """Draw the treasure's slice in one column where no wall stands in front."""
    if not view.visible:
        return
    if not 0 <= view.screen_x < len(zbuffer):
        return
    if view.camera_y >= zbuffer[view.screen_x]:
        return
    if not view.start_x <= x < view.end_x:
        return
    if not (0 <= x < len(zbuffer) and 0 <= x < canvas.width):
        return
    offset = x - (view.screen_x - view.draw_width // 2)
    tex_x = offset * texture.width // view.draw_width
    if view.camera_y >= zbuffer[x] or tex_x < 0:
        return
    ys = np.arange(max(view.start_y, 0), min(view.end_y, canvas.height))
    if ys.size == 0:
        return
    top = _HALF_H - view.draw_height // 2
    tex_y = (ys - top) * texture.height // view.draw_height
    colors = _sample(texture, np.full(ys.shape, tex_x), tex_y)
    keep = colors != 0
    canvas.pixels[ys[keep], x] = colors[keep]