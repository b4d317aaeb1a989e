"""Pixel buffers: the images drawn into and the textures sampled from."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
from PIL import Image

from .constants import WIN_H, WIN_W

_MASK = 0xFFFFFFFF


def convert_color(rgb: Sequence[int]) -> int:
    """Pack red, green and blue components into one 0xRRGGBB value."""
    red, green, blue = rgb
    return (red << 16) + (green << 8) + blue


@dataclass
class Canvas:
    """An image of packed 0xRRGGBB pixels, indexed as ``pixels[y, x]``."""

    width: int = WIN_W
    height: int = WIN_H
    pixels: Optional[np.ndarray] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.pixels is None:
            self.pixels = np.zeros((self.height, self.width), dtype=np.uint32)
        elif self.pixels.shape != (self.height, self.width):
            raise ValueError("pixel array does not match the canvas size")

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; positions outside the canvas are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color & _MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return one pixel; raises IndexError outside the canvas."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return int(self.pixels[y, x])


@dataclass
class Texture:
    """A texture of packed 0xRRGGBB pixels, indexed as ``pixels[y, x]``."""

    pixels: np.ndarray = field(repr=False)
    path: str = ""

    def __post_init__(self) -> None:
        self.pixels = np.asarray(self.pixels, dtype=np.uint32)
        if self.pixels.ndim != 2 or self.pixels.size == 0:
            raise ValueError("a texture needs a non-empty two-dimensional array")

    @property
    def width(self) -> int:
        """Number of pixel columns."""
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        """Number of pixel rows."""
        return int(self.pixels.shape[0])

    def color_at(self, x: int, y: int) -> int:
        """Return the texel at a position, clamped to the texture's edges."""
        x = min(max(x, 0), self.width - 1)
        y = min(max(y, 0), self.height - 1)
        return int(self.pixels[y, x])


def load_texture(path: str | Path) -> Texture:
    """Load an image file as a texture; transparent pixels become black.

    Raises OSError when the file cannot be read as an image.
    """
    with Image.open(path) as image:
        rgba = np.asarray(image.convert("RGBA"), dtype=np.uint32)
    red, green, blue, alpha = (rgba[:, :, channel] for channel in range(4))
    packed = (red << 16) | (green << 8) | blue
    packed[alpha == 0] = 0
    return Texture(packed, str(path))