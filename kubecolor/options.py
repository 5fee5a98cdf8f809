"""Printer for the output of kubectl options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterable

from kubecolor.color import Color, apply
from kubecolor.formatting import (
    STRING_COLOR_FOR_DARK,
    STRING_COLOR_FOR_LIGHT,
    Printer,
    color_by_key_indent,
    color_by_value_type,
    find_indent,
    to_spaces,
)


@dataclass
class OptionsPrinter(Printer):
    """Colors the global option list printed by kubectl options."""

    dark_background: bool = True

    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Write the options read from ``stream`` to ``out``, colored."""
        is_first_line = True
        for line in self._lines(stream):
            if line == "":
                out.write("\n")
                continue
            if is_first_line:
                out.write(apply(line, self._first_line_color()) + "\n")
                is_first_line = False
                continue
            out.write(self._colorize_option(line) + "\n")

    def _first_line_color(self) -> Color:
        return STRING_COLOR_FOR_DARK if self.dark_background else STRING_COLOR_FOR_LIGHT

    def _colorize_option(self, line: str) -> str:
        dark = self.dark_background
        indent = to_spaces(find_indent(line))
        key, sep, val = line.lstrip(" ").partition(": ")
        if not sep:
            raise ValueError(f"expected an option and its description: {line!r}")
        return (
            f"{indent}{apply(key, color_by_key_indent(0, 2, dark))}: "
            f"{apply(val, color_by_value_type(val, dark))}"
        )