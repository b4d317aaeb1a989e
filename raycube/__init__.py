"""Grid raycasting explorer for .cub scene files: parsing, rendering and a pygame window."""

__version__ = "0.1.0"

__all__ = ["__version__"]