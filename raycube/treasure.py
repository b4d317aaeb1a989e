"""Projecting the treasure sprite onto the screen."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import WIN_H, WIN_W
from .player import Player

_HALF_W = int(WIN_W * 0.5)
_HALF_H = int(WIN_H * 0.5)


@dataclass
class TreasureView:
    """Where the treasure lands on screen, when it is in the field of view."""

    rel_x: float = 0.0
    rel_y: float = 0.0
    camera_x: float = 0.0
    camera_y: float = 0.0
    screen_x: int = 0
    draw_height: int = 0
    draw_width: int = 0
    start_x: int = 0
    end_x: int = 0
    start_y: int = 0
    end_y: int = 0
    visible: bool = False


def _draw_range(view: TreasureView) -> None:
    view.screen_x = int(_HALF_W * (1 + view.camera_x / view.camera_y))
    view.draw_height = abs(int(WIN_H / view.camera_y))
    view.start_y = max(0, -(view.draw_height // 2) + _HALF_H)
    view.end_y = view.draw_height // 2 + _HALF_H
    if view.end_y >= WIN_H:
        view.end_y = WIN_H - 1
    view.draw_width = view.draw_height
    view.start_x = max(0, -(view.draw_width // 2) + view.screen_x)
    view.end_x = view.draw_width // 2 + view.screen_x
    if view.end_x >= WIN_W:
        view.end_x = WIN_W - 1


def project_treasure(player: Player, treasure_x: float, treasure_y: float) -> TreasureView:
    """Project the treasure at a map position through the player's camera.

    ``camera_y`` is the depth in front of the player; the screen range is
    filled in only when the treasure is visible.
    """
    view = TreasureView(
        rel_x=treasure_x - player.pos_x,
        rel_y=treasure_y - player.pos_y,
    )
    inverse = 1.0 / (player.plane_x * player.dir_y - player.dir_x * player.plane_y)
    view.camera_x = inverse * (player.dir_y * view.rel_x - player.dir_x * view.rel_y)
    view.camera_y = inverse * (
        -player.plane_y * view.rel_x + player.plane_x * view.rel_y
    )
    if view.camera_y > 0 and abs(view.camera_x / view.camera_y) < player.plane_length:
        _draw_range(view)
        view.visible = True
    return view