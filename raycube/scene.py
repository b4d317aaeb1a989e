"""Texture paths and floor and ceiling colours from the scene header."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .constants import (
    DOOR_TEX1,
    DOOR_TEX2,
    DOOR_TEX3,
    DOOR_TEX4,
    DOOR_TEX5,
    DOOR_TEX_CLOSE,
    DOOR_TEX_OPEN,
    TREASURE_TEX,
    Side,
)
from .errors import ParseError

Rgb = tuple[int, int, int]

_WALL_PREFIXES = (
    ("NO ", Side.NO),
    ("SO ", Side.SO),
    ("WE ", Side.WE),
    ("EA ", Side.EA),
)
_COLOR_KEYS = ("F", "C")
_DIGITS = frozenset("0123456789")
_INVALID = (None, None, None)


@dataclass(frozen=True)
class SceneData:
    """Texture paths, indexed by Side, and the floor and ceiling colours."""

    textures: tuple[str, ...]
    floor: Rgb
    ceiling: Rgb


def _words(text: str, sep: str) -> list[str]:
    return [part for part in text.split(sep) if part]


def _component(text: str) -> Optional[int]:
    if not text or not set(text) <= _DIGITS:
        return None
    value = int(text)
    return value if value <= 255 else None


def parse_color(line: str) -> tuple[Optional[int], Optional[int], Optional[int]]:
    """Read the three components of an ``F`` or ``C`` line.

    Each component that is not a number from 0 to 255 comes back as None.
    """
    words = _words(line, " ")
    if len(words) != 2 or words[1].count(",") != 2:
        return _INVALID
    parts = _words(words[1], ",")
    if len(parts) != 3:
        return _INVALID
    first, second, third = (_component(part) for part in parts)
    return first, second, third


def get_colors(lines: Iterable[str]) -> tuple[Rgb, Rgb]:
    """Return the floor and ceiling colours defined in the lines."""
    found: dict[str, tuple[Optional[int], ...]] = {key: _INVALID for key in _COLOR_KEYS}
    for line in lines:
        key = next((k for k in _COLOR_KEYS if line.startswith(k + " ")), None)
        if key is None:
            continue
        if any(value is not None for value in found[key]):
            raise ParseError(f"multiple definition of {key}")
        found[key] = parse_color(line)
    if any(value is None for values in found.values() for value in values):
        raise ParseError("invalid RGB")
    floor = tuple(int(v) for v in found["F"] if v is not None)
    ceiling = tuple(int(v) for v in found["C"] if v is not None)
    return (floor[0], floor[1], floor[2]), (ceiling[0], ceiling[1], ceiling[2])


def _texture_path(line: str) -> Optional[str]:
    words = _words(line, " ")
    return words[1] if len(words) == 2 else None


def door_and_treasure_paths() -> list[str]:
    """Return the fixed paths of the door frames and the treasure."""
    return [
        DOOR_TEX_CLOSE,
        DOOR_TEX1,
        DOOR_TEX2,
        DOOR_TEX3,
        DOOR_TEX4,
        DOOR_TEX5,
        DOOR_TEX_OPEN,
        TREASURE_TEX,
    ]


def get_texture_paths(lines: Iterable[str], bonus: bool = True) -> list[str]:
    """Return the texture paths in Side order.

    The four wall paths come from the lines; with ``bonus`` the door and
    treasure paths follow them.
    """
    paths: dict[Side, Optional[str]] = {}
    for line in lines:
        for prefix, side in _WALL_PREFIXES:
            if line.startswith(prefix):
                if paths.get(side) is not None:
                    raise ParseError(f"{side.name} texture already set")
                paths[side] = _texture_path(line)
                break
    walls = [paths.get(side) for _, side in _WALL_PREFIXES]
    result = [path for path in walls if path is not None]
    if len(result) != len(walls):
        raise ParseError("invalid sprite")
    if bonus:
        result.extend(door_and_treasure_paths())
    return result


def get_data(lines: list[str], bonus: bool = True) -> SceneData:
    """Read the texture paths, then the colours, of a scene."""
    textures = get_texture_paths(lines, bonus)
    floor, ceiling = get_colors(lines)
    return SceneData(tuple(textures), floor, ceiling)