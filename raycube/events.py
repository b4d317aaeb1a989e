"""Keyboard and mouse handling."""

from __future__ import annotations

from .doors import door_target
from .errors import Cub3DError
from .renderer import Game

_HELD_KEYS = ("right", "left", "w", "a", "s", "d")


class GameFinished(Cub3DError):
    """The player reached the treasure."""


def key_press(game: Game, key: str) -> bool:
    """Handle a key going down; return False when the player asks to quit.

    Keys are named ``escape``, ``left``, ``right`` or by their letter.
    Raises GameFinished when ``e`` is pressed in front of the treasure.
    """
    if key == "escape":
        return False
    if key in _HELD_KEYS:
        setattr(game.keys, key, True)
    if game.bonus:
        if key == "e":
            action_event(game)
        if key == "x":
            game.keys.x = not game.keys.x
    return True


def key_release(game: Game, key: str) -> None:
    """Handle a key going up."""
    if key in _HELD_KEYS:
        setattr(game.keys, key, False)


def mouse_move(game: Game, x: int) -> None:
    """Turn the player with the horizontal movement of the mouse."""
    previous = game.previous_mouse_x
    if previous >= 0 and not game.doors.busy():
        if previous > x:
            game.player.rotate_counterclockwise()
        elif previous < x:
            game.player.rotate_clockwise()
    game.previous_mouse_x = x


def action_event(game: Game) -> None:
    """Use what stands in front of the player: a door or the treasure."""
    x, y = door_target(game.player)
    grid = game.grid
    cell = grid[y][x] if 0 <= y < len(grid) and 0 <= x < len(grid[y]) else ""
    if cell == "D":
        game.doors.open(grid, game.player)
    elif cell == "O":
        game.doors.close(grid, game.player)
    elif cell == "T" and game.bonus:
        raise GameFinished("CONGRATULATION ! You won !")