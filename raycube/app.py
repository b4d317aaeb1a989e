"""Command line entry point and the window loop."""

from __future__ import annotations

import subprocess
import sys
import time
from pathlib import Path
from typing import Iterable, Optional, Sequence

import numpy as np
import pygame

from .canvas import Canvas, Texture, load_texture
from .constants import WIN_H, WIN_W, WINNAME
from .errors import ParseError, error_exit, format_error, perror_exit
from .events import GameFinished, key_press, key_release, mouse_move
from .parser import parse
from .renderer import build_game

USAGE = "Usage: ./cub3D <path/map_name.cub>"
_SUFFIX = ".cub"
_WIN_MESSAGE = "\033[1m\033[32mCONGRATULATION ! You won !\033[0m"
_WIN_SOUND = ["afplay", "../sound/congrat.wav"]

_KEY_NAMES = {
    pygame.K_ESCAPE: "escape",
    pygame.K_RIGHT: "right",
    pygame.K_LEFT: "left",
    pygame.K_w: "w",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_d: "d",
    pygame.K_e: "e",
    pygame.K_x: "x",
}


def validate_argument(argv: Sequence[str]) -> str:
    """Return the scene path given on the command line.

    Exits with code 1 unless exactly one argument naming a ``.cub`` file
    is given.
    """
    args = list(argv)
    if len(args) != 1 or not args[0].endswith(_SUFFIX) or args[0] == _SUFFIX:
        error_exit(USAGE, 1)
    return args[0]


def load_textures(paths: Iterable[str]) -> list[Texture]:
    """Load every texture; exits with code 1 if one cannot be read."""
    try:
        return [load_texture(path) for path in paths]
    except OSError:
        perror_exit("MLX", 1)


def _surface(canvas: Canvas) -> pygame.Surface:
    pixels = canvas.pixels
    rgb = np.stack(
        ((pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF), axis=-1
    ).astype(np.uint8)
    return pygame.surfarray.make_surface(rgb.transpose(1, 0, 2))


def _celebrate() -> None:
    try:
        subprocess.run(_WIN_SOUND, stderr=subprocess.DEVNULL, check=False)
    except OSError:
        pass
    print(_WIN_MESSAGE)
    time.sleep(2)


def run(path: str | Path, bonus: bool = True) -> int:
    """Parse a scene and play it in a window; return the exit code."""
    try:
        scene = parse(path, bonus)
    except ParseError as exc:
        print(format_error(str(exc)), file=sys.stderr)
        return 2
    textures = load_textures(scene.textures)
    game = build_game(scene, textures, bonus)
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WIN_W, WIN_H))
        except pygame.error as exc:
            error_exit(f"MLX: {exc}", 1)
        pygame.display.set_caption(WINNAME)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    name = _KEY_NAMES.get(event.key)
                    if name is not None and not key_press(game, name):
                        return 0
                elif event.type == pygame.KEYUP:
                    name = _KEY_NAMES.get(event.key)
                    if name is not None:
                        key_release(game, name)
                elif event.type == pygame.MOUSEMOTION and bonus:
                    mouse_move(game, event.pos[0])
            game.tick()
            screen.blit(_surface(game.canvas), (0, 0))
            if bonus:
                screen.blit(_surface(game.minimap.canvas), (0, 0))
            pygame.display.flip()
    except GameFinished:
        _celebrate()
        return 0
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the scene named on the command line."""
    args = sys.argv[1:] if argv is None else argv
    return run(validate_argument(args), bonus=True)


if __name__ == "__main__":
    raise SystemExit(main())