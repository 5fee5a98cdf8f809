"""ANSI terminal colors."""

from __future__ import annotations

import enum

ESCAPE = "\x1b"


class Color(enum.IntEnum):
    """Foreground colors, valued by their SGR code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37


def apply(val: str, color: Color) -> str:
    """Wrap ``val`` in the escape sequences for ``color``."""
    return f"{ESCAPE}[{int(color)}m{val}{ESCAPE}[0m"