from raycube.constants import Side
from raycube.doors import DoorState, door_target
from raycube.player import Player

FRAMES = Side.DR_O - Side.DR_C


def _player(dir_x=1.0, dir_y=0.0):
    return Player(pos_x=1.5, pos_y=1.5, dir_x=dir_x, dir_y=dir_y)


def _grid():
    return [list("11111"), list("1PD01"), list("11111")]


def test_door_target_east():
    assert door_target(_player()) == (2, 1)


def test_door_target_west_and_south():
    assert door_target(_player(-1.0, 0.0)) == (0, 1)
    assert door_target(_player(0.0, 1.0)) == (1, 2)


def test_door_target_rounds_half_away_from_zero():
    assert door_target(_player(0.5, -0.5)) == (2, 0)


def test_open_animation_runs_to_open_door():
    grid = _grid()
    player = _player()
    state = DoorState()
    assert state.open(grid, player)
    assert grid[1][2] == "d"
    assert state.busy()
    assert state.animation == 0
    for _ in range(FRAMES):
        state.step(grid, player)
    assert state.animation == FRAMES
    assert grid[1][2] == "d"
    state.step(grid, player)
    assert grid[1][2] == "O"
    assert not state.busy()
    assert state.animation == 0


def test_close_animation_runs_to_closed_door():
    grid = _grid()
    grid[1][2] = "O"
    player = _player()
    state = DoorState()
    assert state.close(grid, player)
    assert grid[1][2] == "o"
    assert state.animation == FRAMES
    for _ in range(FRAMES):
        state.step(grid, player)
    assert state.animation == 0
    assert state.busy()
    state.step(grid, player)
    assert grid[1][2] == "D"
    assert not state.busy()


def test_open_refused_while_closing():
    grid = _grid()
    state = DoorState(anim_close=True)
    assert not state.open(grid, _player())
    assert grid[1][2] == "D"


def test_close_refused_while_opening():
    grid = _grid()
    grid[1][2] = "O"
    state = DoorState(anim_open=True)
    assert not state.close(grid, _player())
    assert grid[1][2] == "O"


def test_open_without_door_in_front():
    grid = _grid()
    state = DoorState()
    assert not state.open(grid, _player(-1.0, 0.0))
    assert grid == _grid()
    assert not state.busy()


def test_string_rows_are_updated():
    grid = ["11111", "1PD01", "11111"]
    state = DoorState()
    assert state.open(grid, _player())
    assert grid[1] == "1Pd01"


def test_step_when_idle_changes_nothing():
    grid = _grid()
    state = DoorState()
    state.step(grid, _player())
    assert grid == _grid()
    assert state.animation == 0