"""The game state and the drawing of one frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from .canvas import Canvas, Texture, convert_color
from .constants import (
    BONUS_TEXTURE_COUNT,
    MMAP_DIR,
    MMAP_RAY,
    WALL_TEXTURE_COUNT,
    WIN_W,
    Side,
)
from .doors import DoorState
from .draw import draw_ceiling_and_floor, draw_column, draw_treasure
from .minimap import Minimap
from .parser import Scene
from .player import Player, player_from_scene
from .raycast import cast_ray
from .treasure import TreasureView, project_treasure


@dataclass
class Keys:
    """Keys held down, plus the toggled ray view of the minimap."""

    left: bool = False
    right: bool = False
    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    m: bool = False
    x: bool = False


@dataclass
class Game:
    """Everything one running game needs between frames.

    ``grid`` holds mutable map rows; ``pos_x`` and ``pos_y`` are the map
    cell the player stands in, as shown by the minimap.
    """

    player: Player
    grid: list[list[str]]
    map_len_y: int
    textures: list[Texture]
    ceiling_color: int
    floor_color: int
    pos_x: int
    pos_y: int
    bonus: bool = True
    treasure: Optional[tuple[float, float]] = None
    canvas: Canvas = field(default_factory=Canvas)
    minimap: Minimap = field(default_factory=Minimap)
    keys: Keys = field(default_factory=Keys)
    doors: DoorState = field(default_factory=DoorState)
    zbuffer: np.ndarray = field(default_factory=lambda: np.zeros(WIN_W))
    view: Optional[TreasureView] = None
    previous_mouse_x: int = 0

    def render(self) -> Canvas:
        """Draw one frame into the canvas (and the minimap with ``bonus``)."""
        player = self.player
        player.update_camera()
        if self.bonus:
            if self.treasure is not None:
                self.view = project_treasure(player, *self.treasure)
            self.minimap.draw_zone()
            self.minimap.draw_cells(self.grid, self.pos_x, self.pos_y)
            self.doors.step(self.grid, player)
        for x in range(self.canvas.width):
            self._draw_column(x)
        if self.bonus:
            self.minimap.draw_direction(
                self.grid, player.pos_x, player.pos_y, player.dir_x, player.dir_y, MMAP_DIR
            )
        return self.canvas

    def _draw_column(self, x: int) -> None:
        player = self.player
        textures = self.textures
        draw_ceiling_and_floor(self.canvas, x, self.ceiling_color, self.floor_color)
        ray = cast_ray(player, self.grid, x, self.bonus)
        self.zbuffer[x] = ray.nearest_sprite_dist
        if ray.wall.hit:
            draw_column(self.canvas, x, player, ray, ray.wall, textures)
        if not self.bonus:
            return
        if ray.closed_d.hit:
            draw_column(
                self.canvas, x, player, ray, ray.closed_d, textures,
                textures[ray.closed_d.tex], True,
            )
        if self.view is not None:
            draw_treasure(self.canvas, self.view, textures[Side.TR], self.zbuffer, x)
        if ray.open_d.hit:
            draw_column(
                self.canvas, x, player, ray, ray.open_d, textures,
                textures[ray.open_d.tex], True,
            )
        if ray.anim_d.hit:
            frame = textures[Side.DR_C + self.doors.animation]
            draw_column(self.canvas, x, player, ray, ray.anim_d, textures, frame, True)
        if self.keys.x:
            self.minimap.draw_direction(
                self.grid, player.pos_x, player.pos_y, ray.dir_x, ray.dir_y, MMAP_RAY
            )

    def tick(self) -> Canvas:
        """Draw a frame, then turn and move the player by the held keys."""
        canvas = self.render()
        if self.doors.busy():
            return canvas
        player = self.player
        keys = self.keys
        if keys.right:
            player.rotate_clockwise()
        if keys.left:
            player.rotate_counterclockwise()
        moves = (
            (keys.w, player.move_forward),
            (keys.a, player.move_left),
            (keys.s, player.move_backward),
            (keys.d, player.move_right),
        )
        for held, move in moves:
            if held:
                move(self.grid, self.map_len_y, self.bonus)
                self.pos_x, self.pos_y = player.cell
        return canvas


def build_game(scene: Scene, textures: Sequence[Texture], bonus: bool = True) -> Game:
    """Set up a game from a parsed scene and its loaded textures.

    Raises ValueError when fewer textures are given than the mode needs.
    """
    textures = list(textures)
    needed = BONUS_TEXTURE_COUNT if bonus else WALL_TEXTURE_COUNT
    if len(textures) < needed:
        raise ValueError(f"{needed} textures are needed, {len(textures)} given")
    return Game(
        player=player_from_scene(scene),
        grid=[list(row) for row in scene.grid],
        map_len_y=scene.map_len_y,
        textures=textures,
        ceiling_color=convert_color(scene.ceiling),
        floor_color=convert_color(scene.floor),
        pos_x=scene.pos_x,
        pos_y=scene.pos_y,
        bonus=bonus,
        treasure=scene.treasure if bonus else None,
    )