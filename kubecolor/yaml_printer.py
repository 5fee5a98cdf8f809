"""Printer for YAML output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, Iterable

from kubecolor.color import apply
from kubecolor.formatting import (
    STRING_COLOR_FOR_DARK,
    STRING_COLOR_FOR_LIGHT,
    Printer,
    color_by_key_indent,
    color_by_value_type,
    find_indent,
    to_spaces,
)

_BASIC_INDENT_WIDTH = 2


@dataclass
class YamlPrinter(Printer):
    """Colors kubectl's YAML output line by line."""

    dark_background: bool = True
    _in_string: bool = field(default=False, init=False, repr=False)

    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Write the YAML read from ``stream`` to ``out``, colored."""
        for line in self._lines(stream):
            out.write(self._colorize_line(line) + "\n")

    def _colorize_line(self, line: str) -> str:
        dark = self.dark_background
        indent_cnt = find_indent(line)
        indent = to_spaces(indent_cnt)
        trimmed = line.lstrip(" ")

        if self._in_string:
            # continuation of a string broken over several lines
            self._in_string = not _is_string_closed(trimmed)
            return indent + _colorize_string(trimmed, dark)

        parts = trimmed.split(": ", 1)
        if len(parts) == 2:
            key, val = parts
            self._in_string = _is_string_opened_but_not_closed(val)
            return (
                f"{indent}{_colorize_key(key, indent_cnt, _BASIC_INDENT_WIDTH, dark)}"
                f": {_colorize_value(val, dark)}"
            )

        if parts[0].endswith(":"):
            return indent + _colorize_key(parts[0], indent_cnt, _BASIC_INDENT_WIDTH, dark)
        return indent + _colorize_value(parts[0], dark)


def _colorize_key(key: str, indent_cnt: int, basic_width: int, dark: bool) -> str:
    has_colon = key.endswith(":")
    has_dash = key.startswith("- ")
    key = key.removesuffix(":").removeprefix("- ")
    if has_dash:
        indent_cnt += 2
    colored = apply(key, color_by_key_indent(indent_cnt, basic_width, dark))
    return ("- " if has_dash else "") + colored + (":" if has_colon else "")


def _colorize_value(value: str, dark: bool) -> str:
    if value == "{}":
        return "{}"

    has_dash = value.startswith("- ")
    value = value.removeprefix("- ")
    is_quoted = value.startswith('"') and value.endswith('"')
    unquoted = value.removeprefix('"').removesuffix('"')

    colored = apply(unquoted, color_by_value_type(value, dark))
    if is_quoted:
        colored = f'"{colored}"'
    return ("- " if has_dash else "") + colored


def _colorize_string(value: str, dark: bool) -> str:
    color = STRING_COLOR_FOR_DARK if dark else STRING_COLOR_FOR_LIGHT
    is_quoted = value.startswith('"') and value.endswith('"')
    colored = apply(value.lstrip('"').rstrip('"'), color)
    return f'"{colored}"' if is_quoted else colored


def _is_string_closed(line: str) -> bool:
    return line.endswith(("'", '"'))


def _is_string_opened_but_not_closed(line: str) -> bool:
    return (line.startswith("'") and not line.endswith("'")) or (
        line.startswith('"') and not line.endswith('"')
    )