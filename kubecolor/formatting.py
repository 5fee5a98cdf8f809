"""Shared colors, helpers and the printer interface."""

from __future__ import annotations

import abc
import re
from typing import IO, Iterable, Iterator

from kubecolor.color import Color

ANY_SPACES = re.compile(r"\s{1,}")
SPACES = re.compile(r"\s{2,}")

# preset colors for arbitrary use
COLORS_FOR_DARK_BACKGROUND = (Color.CYAN, Color.GREEN, Color.MAGENTA, Color.WHITE, Color.YELLOW)
COLORS_FOR_LIGHT_BACKGROUND = (
    Color.CYAN,
    Color.GREEN,
    Color.MAGENTA,
    Color.BLACK,
    Color.YELLOW,
    Color.BLUE,
)

KEY_COLOR_FOR_DARK = Color.WHITE
STRING_COLOR_FOR_DARK = Color.CYAN
BOOL_COLOR_FOR_DARK = Color.GREEN
NUMBER_COLOR_FOR_DARK = Color.MAGENTA
NULL_COLOR_FOR_DARK = Color.YELLOW
HEADER_COLOR_FOR_DARK = Color.WHITE

KEY_COLOR_FOR_LIGHT = Color.BLACK
STRING_COLOR_FOR_LIGHT = Color.BLUE
BOOL_COLOR_FOR_LIGHT = Color.GREEN
NUMBER_COLOR_FOR_LIGHT = Color.MAGENTA
NULL_COLOR_FOR_LIGHT = Color.YELLOW
HEADER_COLOR_FOR_LIGHT = Color.BLACK

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class Printer(abc.ABC):
    """Reads text from a stream and writes it, colorized, to another."""

    @abc.abstractmethod
    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Colorize the lines of ``stream`` onto ``out``."""

    @staticmethod
    def _lines(stream: Iterable[str]) -> Iterator[str]:
        for raw in stream:
            yield raw.removesuffix("\n").removesuffix("\r")


def to_spaces(n: int) -> str:
    """Return ``n`` spaces."""
    return " " * n


def color_by_key_indent(indent: int, basic_indent_width: int, dark: bool) -> Color:
    """Alternate key colors by nesting depth."""
    if indent // basic_indent_width % 2 == 1:
        return Color.WHITE if dark else Color.BLACK
    return Color.YELLOW


def _is_integer(val: str) -> bool:
    return _INTEGER.fullmatch(val) is not None and _INT64_MIN <= int(val) <= _INT64_MAX


def color_by_value_type(val: str, dark: bool) -> Color:
    """Choose a color for a structured-data value by what it looks like."""
    if val in ("null", "<none>", "<unknown>"):
        return NULL_COLOR_FOR_DARK if dark else NULL_COLOR_FOR_LIGHT
    if val in ("true", "false"):
        return BOOL_COLOR_FOR_DARK if dark else BOOL_COLOR_FOR_LIGHT
    if _is_integer(val):
        return NUMBER_COLOR_FOR_DARK if dark else NUMBER_COLOR_FOR_LIGHT
    return STRING_COLOR_FOR_DARK if dark else STRING_COLOR_FOR_LIGHT


def colors_by_background(dark: bool) -> tuple[Color, ...]:
    """Return the preset colors for the background."""
    return COLORS_FOR_DARK_BACKGROUND if dark else COLORS_FOR_LIGHT_BACKGROUND


def header_color_by_background(dark: bool) -> Color:
    """Return the table header color for the background."""
    return HEADER_COLOR_FOR_DARK if dark else HEADER_COLOR_FOR_LIGHT


def find_indent(line: str) -> int:
    """Count the spaces at the start of ``line``."""
    return len(line) - len(line.lstrip(" "))