"""Printer for kubectl's column-aligned table output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, Callable, Iterable, Optional, Sequence

from kubecolor.color import Color, apply
from kubecolor.formatting import (
    SPACES,
    Printer,
    colors_by_background,
    header_color_by_background,
    to_spaces,
)

# Given a column's position and text, returns a color to force, or None.
ColorDecider = Callable[[int, str], Optional[Color]]


@dataclass
class TablePrinter(Printer):
    """Colors each table column, keeping a column's color stable across rows."""

    with_header: bool
    dark_background: bool
    color_decider_fn: Optional[ColorDecider] = None
    _is_first_line: bool = field(default=True, init=False, repr=False)
    _index_colors: dict = field(default_factory=dict, init=False, repr=False)
    _pending_colors: list = field(default_factory=list, init=False, repr=False)

    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Write the table read from ``stream`` to ``out``, colored."""
        self._is_first_line = True
        for line in self._lines(stream):
            if self._is_header(line):
                out.write(f"{apply(line, header_color_by_background(self.dark_background))}\n")
                self._is_first_line = False
                continue
            self.print_line(out, line, colors_by_background(self.dark_background))

    def _is_header(self, line: str) -> bool:
        # a line in which every character is upper case is probably a header
        return (self.with_header and self._is_first_line) or line.upper() == line

    def print_line(self, out: IO[str], line: str, colors_preset: Sequence[Color]) -> None:
        """Write one table row to ``out``, coloring each column."""
        columns = SPACES.split(line)
        gaps = [match.span() for match in SPACES.finditer(line)]
        if len(columns) == len(gaps) - 1:
            raise RuntimeError("unexpected format as table")

        starts = [0, *(end + 1 for _, end in gaps)]
        parts = []
        for i, (column, start) in enumerate(zip(columns, starts)):
            color = self._color_for(start, colors_preset)
            if self.color_decider_fn is not None:
                forced = self.color_decider_fn(i, column)
                if forced is not None:
                    color = forced
            parts.append(apply(column, color))
            if i < len(gaps):
                gap_start, gap_end = gaps[i]
                parts.append(to_spaces(gap_end - gap_start))
        out.write("".join(parts) + "\n")

    def _color_for(self, index: int, colors: Sequence[Color]) -> Color:
        if not self._pending_colors:
            self._pending_colors = list(colors)
        if index in self._index_colors:
            return self._index_colors[index]
        color = self._pending_colors.pop(0)
        self._index_colors[index] = color
        return color