"""Error types and the error reporting used on the way out."""

from __future__ import annotations

import sys
from typing import NoReturn


class Cub3DError(Exception):
    """Base of every error the game reports."""


class ParseError(Cub3DError):
    """The scene file is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def format_error(message: str) -> str:
    """Return the text reported for a scene error."""
    return f"Error\nCub3D: {message}"


def error_exit(message: str, code: int) -> NoReturn:
    """Report an error on stderr and leave with the given exit code."""
    sys.stderr.write(f"Error\n{message}\n")
    sys.stderr.flush()
    raise SystemExit(code)


def perror_exit(message: str, code: int) -> NoReturn:
    """Report an error with the cause of the current OS error and leave."""
    exc = sys.exc_info()[1]
    detail = None
    if isinstance(exc, OSError):
        detail = exc.strerror or str(exc)
    elif exc is not None:
        detail = str(exc) or None
    line = f"{message}: {detail}" if detail else message
    sys.stderr.write(f"Error\n{line}\n")
    sys.stderr.flush()
    raise SystemExit(code)