import pytest

from raycube.constants import (
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
from raycube.errors import ParseError
from raycube.scene import (
    SceneData,
    door_and_treasure_paths,
    get_colors,
    get_data,
    get_texture_paths,
    parse_color,
)

HEADER = [
    "NO ./n.xpm",
    "SO ./s.xpm",
    "WE ./w.xpm",
    "EA ./e.xpm",
    "F 10,20,30",
    "C 40,50,60",
    "1111",
    "1N01",
    "1111",
]


def test_parse_color_valid():
    assert parse_color("F 10,20,30") == (10, 20, 30)


def test_parse_color_bad_component_only():
    assert parse_color("F 1,a,3") == (1, None, 3)


def test_parse_color_out_of_range():
    assert parse_color("C 0,256,255") == (0, None, 255)


@pytest.mark.parametrize(
    "line",
    ["F 1,2", "F 1,2,3,4", "F 1,2,3 extra", "F 1,,2", "F"],
)
def test_parse_color_malformed(line):
    assert parse_color(line) == (None, None, None)


def test_get_colors():
    assert get_colors(HEADER) == ((10, 20, 30), (40, 50, 60))


def test_get_colors_duplicate_floor():
    with pytest.raises(ParseError, match="multiple definition of F"):
        get_colors(HEADER + ["F 1,2,3"])


def test_get_colors_duplicate_ceiling():
    with pytest.raises(ParseError, match="multiple definition of C"):
        get_colors(HEADER + ["C 1,2,3"])


def test_get_colors_invalid_first_definition_is_replaced():
    lines = ["F 1,2", "F 7,8,9", "C 4,5,6"]
    assert get_colors(lines) == ((7, 8, 9), (4, 5, 6))


def test_get_colors_missing():
    with pytest.raises(ParseError, match="invalid RGB"):
        get_colors(["F 1,2,3"])


def test_get_colors_partial_invalid():
    with pytest.raises(ParseError, match="invalid RGB"):
        get_colors(["F 1,x,3", "C 1,2,3"])


def test_texture_paths_plain():
    assert get_texture_paths(HEADER, bonus=False) == [
        "./n.xpm",
        "./s.xpm",
        "./w.xpm",
        "./e.xpm",
    ]


def test_texture_paths_bonus_appends_fixed_paths():
    paths = get_texture_paths(HEADER, bonus=True)
    assert len(paths) == len(Side)
    assert paths[Side.NO] == "./n.xpm"
    assert paths[Side.EA] == "./e.xpm"
    assert paths[Side.DR_C:] == door_and_treasure_paths()


def test_texture_paths_duplicate():
    with pytest.raises(ParseError, match="NO texture already set"):
        get_texture_paths(HEADER + ["NO ./other.xpm"])


def test_texture_paths_missing():
    with pytest.raises(ParseError, match="invalid sprite"):
        get_texture_paths([line for line in HEADER if not line.startswith("WE ")])


def test_texture_paths_malformed_then_valid():
    lines = ["NO a b", "NO ./n.xpm", "SO s", "WE w", "EA e"]
    assert get_texture_paths(lines, bonus=False)[0] == "./n.xpm"


def test_door_and_treasure_paths():
    assert door_and_treasure_paths() == [
        DOOR_TEX_CLOSE,
        DOOR_TEX1,
        DOOR_TEX2,
        DOOR_TEX3,
        DOOR_TEX4,
        DOOR_TEX5,
        DOOR_TEX_OPEN,
        TREASURE_TEX,
    ]


def test_get_data():
    data = get_data(HEADER, bonus=False)
    assert data == SceneData(
        ("./n.xpm", "./s.xpm", "./w.xpm", "./e.xpm"), (10, 20, 30), (40, 50, 60)
    )


def test_get_data_reports_sprites_before_colors():
    lines = ["SO s", "WE w", "EA e", "F bad"]
    with pytest.raises(ParseError, match="invalid sprite"):
        get_data(lines)