"""Fixed settings of the game: window, textures, colours and enumerations."""

from __future__ import annotations

import math
from enum import Enum, IntEnum

SPRITE_NO = "./textures/walls/stone00.xpm"
SPRITE_SO = "./textures/walls/stone01.xpm"
SPRITE_WE = "./textures/walls/stone02.xpm"
SPRITE_EA = "./textures/walls/stone03.xpm"

RGB_F = "169,169,169"
RGB_C = "52,52,52"

TWO_PI = 6.28318530717958647692

WINNAME = "cub3D"
WIN_W = 960
WIN_H = 720

FOV = 90
MOVE = 0.1
ROTATE = 0.03

MINI_MAP_W = 100
MINI_MAP_H = 100

MOUSE_DOWN = 4
MOUSE_UP = 5

MMAP_SCALE = 20
MMAP_SIZE = 9
MMAP_BORDER = 1
MMAP_EMPTY = 0
MMAP_WALL = 4868682
MMAP_FLOOR = 13816530
MMAP_P = 12915042
MMAP_DIR = 13959168
MMAP_RAY = 16776623
MMAP_SPACE = 11977418
MMAP_DOOR = 9868950

DOOR_TEX_CLOSE = "./textures/door/door.xpm"
DOOR_TEX1 = "./textures/door/door1.xpm"
DOOR_TEX2 = "./textures/door/door2.xpm"
DOOR_TEX3 = "./textures/door/door3.xpm"
DOOR_TEX4 = "./textures/door/door4.xpm"
DOOR_TEX5 = "./textures/door/door5.xpm"
DOOR_TEX_OPEN = "./textures/door/door6.xpm"

TREASURE_TEX = "./textures/treasure/treasure.xpm"

WALL_TEXTURE_COUNT = 4
BONUS_TEXTURE_COUNT = 12


class Direction(Enum):
    """Facing of the player at start, in degrees (y axis points south)."""

    N = 270
    E = 0
    S = 90
    W = 180

    def radians(self) -> float:
        """Return the facing angle in radians."""
        return self.value * math.pi / 180

    @staticmethod
    def from_char(char: str) -> "Direction":
        """Return the direction named by a map character (N, S, E or W)."""
        try:
            return Direction[char]
        except KeyError:
            raise ValueError(f"not a direction: {char!r}") from None


class Side(IntEnum):
    """Index of a texture slot; wall sides come first, then doors and treasure."""

    NO = 0
    SO = 1
    WE = 2
    EA = 3
    DR_C = 4
    DR1 = 5
    DR2 = 6
    DR3 = 7
    DR4 = 8
    DR5 = 9
    DR_O = 10
    TR = 11