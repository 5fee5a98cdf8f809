"""Printer for JSON output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterable

from kubecolor.color import apply
from kubecolor.formatting import (
    Printer,
    color_by_key_indent,
    color_by_value_type,
    find_indent,
    to_spaces,
)

_BASIC_INDENT_WIDTH = 4
_VERBATIM_VALUES = frozenset({"{", "[", "{},", "{}"})


@dataclass
class JsonPrinter(Printer):
    """Colors kubectl's indented JSON output line by line."""

    dark_background: bool = True

    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Write the JSON read from ``stream`` to ``out``, colored."""
        for line in self._lines(stream):
            out.write(self._colorize_line(line) + "\n")

    def _colorize_line(self, line: str) -> str:
        dark = self.dark_background
        indent_cnt = find_indent(line)
        indent = to_spaces(indent_cnt)
        trimmed = line.lstrip(" ")

        # braces and closing brackets never follow a key
        if trimmed.startswith(("{", "}", "]")):
            return indent + trimmed

        parts = trimmed.split(": ", 1)
        if len(parts) == 1:
            # a value inside an array
            return indent + _colorize_value(parts[0], dark)

        key, val = parts
        return (
            f"{indent}{_colorize_key(key, indent_cnt, _BASIC_INDENT_WIDTH, dark)}"
            f": {_colorize_value(val, dark)}"
        )


def _colorize_key(key: str, indent_cnt: int, basic_width: int, dark: bool) -> str:
    has_colon = key.endswith(":")
    key = key.rstrip(":")
    unquoted = key.lstrip('"').rstrip('"')
    colored = apply(unquoted, color_by_key_indent(indent_cnt, basic_width, dark))
    return f'"{colored}"' + (":" if has_colon else "")


def _colorize_value(value: str, dark: bool) -> str:
    if value in _VERBATIM_VALUES:
        return value

    has_comma = value.endswith(",")
    value = value.rstrip(",")
    is_string = value.startswith('"') and value.endswith('"')
    unquoted = value.lstrip('"').rstrip('"')

    colored = apply(unquoted, color_by_value_type(value, dark))
    if is_string:
        colored = f'"{colored}"'
    if has_comma:
        colored += ","
    return colored