# raycube

A small first-person maze explorer rendered with grid raycasting.
Worlds are described by `.cub` scene files: four wall textures, a floor
and a ceiling colour, and a character map of walls, floor, doors, a
treasure and the player's starting point. The window is drawn with
pygame; textures are loaded with Pillow.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
raycube path/to/world.cub
```

Exactly one argument is accepted, and it must end in `.cub` (a bare
`.cub` is refused). Otherwise the usage line is printed on standard error
and the program exits with status 1.

The command always plays in bonus mode: doors, the treasure, the minimap
and mouse turning are enabled. When the named file does not exist it is
created with a default header (the stone wall textures under
`./textures/walls/`, floor `169,169,169`, ceiling `52,52,52`) followed by
whatever is read from standard input until end of file, and that file is
then played.

## Scene files

```
NO ./textures/walls/stone00.xpm
SO ./textures/walls/stone01.xpm
WE ./textures/walls/stone02.xpm
EA ./textures/walls/stone03.xpm

F 169,169,169
C 52,52,52

111111
1N0T01
10D001
111111
```

* `NO`, `SO`, `WE`, `EA` name the wall textures; each must appear exactly once.
* `F` and `C` give the floor and ceiling colours as `R,G,B`, each 0–255.
* The six definitions come before the map; a line that is neither a
  definition nor a map row is rejected.
* The map uses `1` for walls, `0` for floor, space for void and one of
  `N`, `S`, `E`, `W` for the player's start and facing. In bonus mode
  the map may also hold doors (`D`) and must hold exactly one treasure
  (`T`), which has to be reachable from the start.
* The map must be closed by walls; an empty line inside it is rejected.

In bonus mode the door and treasure textures are always read from fixed
paths relative to the working directory: `./textures/door/door.xpm`,
`door1.xpm` … `door6.xpm`, and `./textures/treasure/treasure.xpm`.
Every texture is loaded with Pillow, so any image it can read will do;
fully transparent pixels become black, and black texels of doors and the
treasure are drawn as see-through.

## Errors and exit status

* A scene problem prints `Error`, then `Cub3D: ` and a description, on
  standard error, and the program exits with status 2.
* An empty line inside the map prints `Error` and `nl in map` and exits
  with status 1.
* A texture that cannot be loaded, or a window that cannot be opened,
  exits with status 1.

## Controls

| Key             | Action                                                        |
|-----------------|---------------------------------------------------------------|
| `W` `A` `S` `D` | move forward, left, backward, right                           |
| `←` `→`         | turn                                                          |
| mouse           | turn                                                          |
| `E`             | open or close the door ahead, or take the treasure ahead      |
| `X`             | toggle the display of every cast ray on the minimap           |
| `Esc`           | quit                                                          |

While a door is opening or closing the player cannot move or turn.
Taking the treasure prints a congratulation, tries to play
`../sound/congrat.wav` with `afplay` (silently skipped where that
command is missing), waits two seconds and closes the window.

## Using it as a library

The parsing and rendering pieces work without a window:

```python
from raycube.parser import parse
from raycube.player import player_from_scene
from raycube.raycast import cast_ray

scene = parse("world.cub", bonus=True)
player = player_from_scene(scene)
ray = cast_ray(player, scene.grid, 480, True)
print(ray.wall.dist, ray.wall.side)
```

* `raycube.parser.parse(path, bonus)` returns a `Scene`; problems raise
  `raycube.errors.ParseError`.
* `raycube.renderer.build_game(scene, textures, bonus)` builds a `Game`
  from a scene and textures loaded with `raycube.app.load_textures` or
  `raycube.canvas.load_texture`; `Game.render()` and `Game.tick()` draw
  a frame into `Game.canvas`, a `Canvas` of packed `0xRRGGBB` pixels.
* `raycube.events` feeds key presses, key releases and mouse movement
  into a `Game`; `key_press` raises `GameFinished` at the treasure.
* `raycube.app.run(path, bonus)` opens the window; with `bonus=False`
  it plays a plain scene with four wall textures and no doors, treasure,
  minimap or mouse turning.

## What it does not do

There is no enemy, weapon, score or save of any kind: the game ends only
by quitting or by taking the treasure. The command offers no options,
and the plain (non-bonus) mode is reached only through `run`.