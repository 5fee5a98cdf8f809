"""Printers that color each line as a whole."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Callable, Iterable

from kubecolor.color import Color, apply
from kubecolor.formatting import Printer


@dataclass
class SingleColoredPrinter(Printer):
    """Prints every line in one preconfigured color."""

    color: Color

    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Write every line of ``stream`` to ``out`` in ``self.color``."""
        for line in self._lines(stream):
            out.write(f"{apply(line, self.color)}\n")


@dataclass
class WithFuncPrinter(Printer):
    """Prints every line in the color that ``fn`` picks for it."""

    fn: Callable[[str], Color]

    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Write every line of ``stream`` to ``out`` in the color chosen by ``fn``."""
        for line in self._lines(stream):
            out.write(f"{apply(line, self.fn(line))}\n")