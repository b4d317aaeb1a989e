"""Reading a scene file and checking its header section."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .constants import (
    RGB_C,
    RGB_F,
    SPRITE_EA,
    SPRITE_NO,
    SPRITE_SO,
    SPRITE_WE,
)
from .errors import ParseError, error_exit

_MAP_CHARS = frozenset(" 10SNEW")
_BONUS_MAP_CHARS = _MAP_CHARS | {"D", "T"}
_DATA_PREFIXES = ("F ", "C ", "NO ", "SO ", "WE ", "EA ")
_REQUIRED_DATA = 6


def line_is_map(line: str, extra: str | None = None, bonus: bool = True) -> bool:
    """Tell whether every character of the line may appear in a map row."""
    allowed = _BONUS_MAP_CHARS if bonus else _MAP_CHARS
    if extra:
        allowed = allowed | {extra}
    return all(char in allowed for char in line)


def line_is_space(line: str) -> bool:
    """Tell whether the line holds nothing but spaces."""
    return all(char == " " for char in line)


def line_is_data(line: str) -> bool:
    """Tell whether the line is a texture or colour definition."""
    return line.startswith(_DATA_PREFIXES)


def check_file(lines: list[str], bonus: bool = True) -> int:
    """Check the header of a scene and return the index of its first map row.

    Raises ParseError when a line is neither data nor map, or when the six
    definitions are missing or repeated.
    """
    count = 0
    start = len(lines)
    for index, line in enumerate(lines):
        is_map = line_is_map(line, None, bonus)
        if is_map and not line_is_space(line):
            start = index
            break
        if not is_map:
            if not line_is_data(line):
                raise ParseError("bad data detected")
            count += 1
        elif count < _REQUIRED_DATA:
            raise ParseError("line with space detected")
    if count < _REQUIRED_DATA:
        raise ParseError("missing data")
    if count > _REQUIRED_DATA:
        raise ParseError("duplicate data detected")
    return start


def default_header() -> str:
    """Return the header written in front of a scene typed on standard input."""
    return (
        f"NO {SPRITE_NO}\n"
        f"SO {SPRITE_SO}\n"
        f"WE {SPRITE_WE}\n"
        f"EA {SPRITE_EA}\n"
        "\n"
        f"F {RGB_F}\n"
        f"C {RGB_C}\n"
        "\n"
    )


@dataclass
class _NewlineTracker:
    """Follows the raw lines to spot an empty line inside the map."""

    bonus: bool
    in_map: bool = False
    data_count: int = 0
    seen: frozenset[str] = frozenset()

    def feed(self, line: str) -> bool:
        """Take one raw line; return False if it is an empty line in the map."""
        if line.startswith("\n") and self.in_map:
            return False
        is_map = line_is_map(line, "\n", self.bonus)
        if (
            not line.startswith("\n")
            and is_map
            and len(self.seen) == len(_DATA_PREFIXES)
            and self.data_count == _REQUIRED_DATA
        ):
            self.in_map = True
        else:
            prefix = next((p for p in _DATA_PREFIXES if line.startswith(p)), None)
            if prefix is not None:
                self.seen = self.seen | {prefix}
        if not is_map:
            self.data_count += 1
        return True


def _raw_lines(content: str) -> list[str]:
    pieces = content.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def _create_scene(path: Path, stdin: TextIO) -> None:
    with path.open("w", encoding="utf-8", newline="") as out:
        out.write(default_header())
        for line in stdin:
            out.write(line)


def read_scene_lines(
    path: str | Path, bonus: bool = True, stdin: TextIO | None = None
) -> list[str]:
    """Read a scene file and return its non-empty lines.

    In bonus mode a missing file is created from the default header followed
    by whatever standard input holds. An empty line inside the map ends the
    program with exit code 1; an unreadable file raises OSError.
    """
    path = Path(path)
    if not path.exists():
        if not bonus:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        _create_scene(path, sys.stdin if stdin is None else stdin)
    with path.open(encoding="utf-8", newline="") as handle:
        content = handle.read()
    tracker = _NewlineTracker(bonus)
    for line in _raw_lines(content):
        if not tracker.feed(line):
            error_exit("nl in map", 1)
    return [part for part in content.split("\n") if part]