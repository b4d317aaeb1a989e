import numpy as np
import pytest

from raycube.canvas import Texture, convert_color
from raycube.constants import MMAP_P, MMAP_WALL, ROTATE, WIN_H, Direction, Side
from raycube.doors import LAST_FRAME
from raycube.parser import Scene
from raycube.renderer import Keys, build_game

COLORS = [0x111111 * (i + 1) for i in range(12)]


def _textures(count):
    return [Texture(np.full((8, 8), COLORS[i], dtype=np.uint32)) for i in range(count)]


def _scene(grid, pos, direction=Direction.N, treasure=None, bonus=False):
    textures = tuple(f"t{i}.xpm" for i in range(12 if bonus else 4))
    return Scene(
        textures=textures,
        floor=(10, 20, 30),
        ceiling=(40, 50, 60),
        grid=list(grid),
        map_len_x=max(len(r) for r in grid) + 1,
        map_len_y=len(grid),
        pos_x=pos[0],
        pos_y=pos[1],
        direction=direction,
        treasure=treasure,
    )


ROOM = ["111111", "100001", "10P001", "100001", "111111"]


def _classic_game():
    return build_game(_scene(ROOM, (2, 2)), _textures(4), bonus=False)


def _bonus_game(grid=None, direction=Direction.N):
    grid = grid or ["111111", "100001", "10P001", "10T001", "111111"]
    scene = _scene(grid, (2, 2), direction, treasure=(2.5, 3.5), bonus=True)
    return build_game(scene, _textures(12), bonus=True)


def test_render_draws_ceiling_wall_and_floor():
    game = _classic_game()
    canvas = game.render()
    assert canvas.get_pixel(480, 0) == convert_color((40, 50, 60))
    assert canvas.get_pixel(480, WIN_H - 1) == convert_color((10, 20, 30))
    assert canvas.get_pixel(480, WIN_H // 2) == COLORS[Side.SO]


def test_render_fills_depth_buffer_in_closed_room():
    game = _classic_game()
    game.render()
    assert float(game.zbuffer[480]) == pytest.approx(1.5)
    assert float(game.zbuffer.min()) > 0.0


def test_tick_moves_forward():
    game = _classic_game()
    start_x, start_y = game.player.pos_x, game.player.pos_y
    game.keys.w = True
    game.tick()
    assert game.player.pos_y < start_y
    assert game.player.pos_x == pytest.approx(start_x)
    assert (game.pos_x, game.pos_y) == game.player.cell


def test_tick_rotates_clockwise():
    game = _classic_game()
    start = game.player.dir_rad
    game.keys.right = True
    game.tick()
    assert game.player.dir_rad == pytest.approx(start + ROTATE)


def test_tick_without_keys_keeps_player():
    game = _classic_game()
    before = (game.player.pos_x, game.player.pos_y, game.player.dir_rad)
    game.tick()
    assert (game.player.pos_x, game.player.pos_y, game.player.dir_rad) == before


def test_bonus_render_draws_minimap():
    game = _bonus_game()
    game.render()
    assert game.minimap.canvas.get_pixel(0, 0) == MMAP_WALL
    assert game.minimap.canvas.get_pixel(96, 96) == MMAP_P


def test_moving_door_blocks_turning():
    game = _bonus_game()
    game.doors.anim_open = True
    start = game.player.dir_rad
    game.keys.right = True
    game.tick()
    assert game.player.dir_rad == start


def test_door_animation_settles_open():
    grid = ["111111", "10D001", "10P001", "10T001", "111111"]
    game = _bonus_game(grid)
    assert game.doors.open(game.grid, game.player)
    for _ in range(LAST_FRAME + 1):
        game.render()
    assert game.grid[1][2] == "O"
    assert not game.doors.busy()


def test_build_game_needs_all_textures():
    scene = _scene(ROOM, (2, 2), bonus=True)
    with pytest.raises(ValueError):
        build_game(scene, _textures(4), bonus=True)


def test_keys_start_released():
    keys = Keys()
    states = (keys.left, keys.right, keys.w, keys.a, keys.s, keys.d, keys.x)
    assert [bool(state) for state in states] == [False] * 7