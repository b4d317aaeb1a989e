import io

import pytest

from raycube.errors import ParseError
from raycube.scanfile import (
    check_file,
    default_header,
    line_is_data,
    line_is_map,
    line_is_space,
    read_scene_lines,
)

HEADER = [
    "NO ./north.xpm",
    "SO ./south.xpm",
    "WE ./west.xpm",
    "EA ./east.xpm",
    "F 1,2,3",
    "C 4,5,6",
]
MAP = ["111", "1N1", "111"]


def test_line_is_map_plain():
    assert line_is_map("  1 0 N", None, False) is True
    assert line_is_map("1X1", None, True) is False


def test_line_is_map_bonus_chars():
    assert line_is_map("1D1T", None, False) is False
    assert line_is_map("1D1T", None, True) is True


def test_line_is_map_extra_char():
    assert line_is_map("101\n", None, True) is False
    assert line_is_map("101\n", "\n", True) is True


def test_line_is_map_empty_line():
    assert line_is_map("", None, True) is True


def test_line_is_space():
    assert line_is_space("   ") is True
    assert line_is_space("") is True
    assert line_is_space(" 1") is False


@pytest.mark.parametrize(
    "line, expected",
    [
        ("NO ./a.xpm", True),
        ("F 1,2,3", True),
        ("C 1,2,3", True),
        ("NO", False),
        ("FF 1", False),
        ("EA", False),
    ],
)
def test_line_is_data(line, expected):
    assert line_is_data(line) is expected


def test_check_file_returns_map_start():
    assert check_file(HEADER + MAP, True) == len(HEADER)


def test_check_file_allows_space_line_after_data():
    lines = HEADER + ["   "] + MAP
    assert check_file(lines, True) == len(HEADER) + 1


def test_check_file_missing_data():
    with pytest.raises(ParseError, match="missing data"):
        check_file(HEADER[:5] + MAP, True)


def test_check_file_duplicate_data():
    with pytest.raises(ParseError, match="duplicate data detected"):
        check_file(HEADER + ["F 1,2,3"] + MAP, True)


def test_check_file_bad_data():
    with pytest.raises(ParseError, match="bad data detected"):
        check_file(HEADER[:2] + ["hello"] + HEADER[2:] + MAP, True)


def test_check_file_space_line_before_data():
    with pytest.raises(ParseError, match="line with space detected"):
        check_file(HEADER[:3] + ["  "] + HEADER[3:] + MAP, True)


def test_check_file_door_row_needs_bonus():
    lines = HEADER + ["1D1"]
    assert check_file(lines, True) == len(HEADER)
    with pytest.raises(ParseError, match="bad data detected"):
        check_file(lines, False)


def test_default_header_content():
    header = default_header()
    assert header.startswith("NO ./textures/walls/stone00.xpm\n")
    assert "F 169,169,169\n" in header
    assert "C 52,52,52\n" in header
    lines = [line for line in header.split("\n") if line]
    assert check_file(lines + MAP, True) == 6


def test_read_scene_lines_skips_empty_lines(tmp_path):
    scene = tmp_path / "scene.cub"
    scene.write_text("\n".join(HEADER[:4]) + "\n\n" + "\n".join(HEADER[4:]) + "\n\n"
                     + "\n".join(MAP) + "\n")
    assert read_scene_lines(scene, False) == HEADER + MAP


def test_read_scene_lines_empty_line_in_map_exits(tmp_path):
    scene = tmp_path / "scene.cub"
    scene.write_text("\n".join(HEADER) + "\n111\n101\n\n111\n")
    with pytest.raises(SystemExit) as info:
        read_scene_lines(scene, True)
    assert info.value.code == 1


def test_read_scene_lines_missing_file_without_bonus(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_scene_lines(tmp_path / "absent.cub", False)


def test_read_scene_lines_creates_file_from_stdin(tmp_path):
    scene = tmp_path / "typed.cub"
    typed = io.StringIO("111\n1N1\n111\n")
    lines = read_scene_lines(scene, True, typed)
    assert scene.read_text() == default_header() + "111\n1N1\n111\n"
    header_lines = [line for line in default_header().split("\n") if line]
    assert lines == header_lines + MAP