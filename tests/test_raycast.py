import math

import pytest

from raycube.constants import WIN_H, WIN_W, Direction, Side
from raycube.player import Player
from raycube.raycast import camera_x, cast_ray

ROOM = ["11111", "10001", "10P01", "10001", "11111"]
CENTRE = WIN_W // 2


def make_player(x, y, direction):
    player = Player(pos_x=x, pos_y=y, dir_rad=direction.radians(), start_x=x, start_y=y)
    player.update_camera()
    return player


def test_camera_x_range():
    assert camera_x(0) == -1.0
    assert camera_x(CENTRE) == 0.0
    assert camera_x(10) < camera_x(11)


def test_centre_ray_east_hits_wall():
    ray = cast_ray(make_player(2.5, 2.5, Direction.E), ROOM, CENTRE)
    assert ray.wall.hit
    assert ray.wall.side is Side.WE
    assert math.isclose(ray.wall.dist, 1.5)
    assert ray.wall.h == int(WIN_H / ray.wall.dist)
    assert ray.nearest_sprite_dist == ray.wall.dist


@pytest.mark.parametrize(
    "direction, side",
    [
        (Direction.N, Side.SO),
        (Direction.S, Side.NO),
        (Direction.W, Side.EA),
        (Direction.E, Side.WE),
    ],
)
def test_side_depends_on_facing(direction, side):
    ray = cast_ray(make_player(2.5, 2.5, direction), ROOM, CENTRE)
    assert ray.wall.side is side


def test_every_column_hits_a_wall():
    player = make_player(2.5, 2.5, Direction.N)
    for column in range(0, WIN_W, 37):
        ray = cast_ray(player, ROOM, column)
        assert ray.wall.hit
        assert ray.wall.dist > 0


def test_closed_door_stops_ray():
    grid = ["11111", "1P0D1", "11111"]
    ray = cast_ray(make_player(1.5, 1.5, Direction.E), grid, CENTRE, bonus=True)
    assert ray.closed_d.hit
    assert not ray.wall.hit
    assert ray.closed_d.tex is Side.DR_C
    assert ray.nearest_sprite_dist == ray.closed_d.dist


def test_door_ignored_without_bonus():
    grid = ["11111", "1P0D1", "11111"]
    ray = cast_ray(make_player(1.5, 1.5, Direction.E), grid, CENTRE, bonus=False)
    assert ray.wall.hit
    assert not ray.closed_d.hit


def test_open_door_is_seen_through():
    grid = ["11111", "1PO01", "11111"]
    ray = cast_ray(make_player(1.5, 1.5, Direction.E), grid, CENTRE)
    assert ray.open_d.hit
    assert ray.wall.hit
    assert ray.open_d.tex is Side.DR_O
    assert ray.open_d.dist < ray.wall.dist
    assert ray.nearest_sprite_dist == ray.wall.dist


def test_moving_door_recorded():
    grid = ["11111", "1Pd01", "11111"]
    ray = cast_ray(make_player(1.5, 1.5, Direction.E), grid, CENTRE)
    assert ray.anim_d.hit
    assert ray.anim_d.dist < ray.wall.dist


def test_outside_grid_counts_as_wall():
    ray = cast_ray(make_player(0.5, 0.5, Direction.E), ["P0"], CENTRE)
    assert ray.wall.hit
    assert ray.map_x == len("P0") + 1