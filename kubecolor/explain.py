"""Printer for the output of kubectl explain."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, Iterable

from kubecolor.color import apply
from kubecolor.formatting import (
    ANY_SPACES,
    SPACES,
    Printer,
    color_by_key_indent,
    color_by_value_type,
    find_indent,
    to_spaces,
)

_DESCRIPTION_INDENT = 5
_FIELD_INDENT = 3


@dataclass
class ExplainPrinter(Printer):
    """Colors the header, descriptions and fields of kubectl explain."""

    dark_background: bool = True
    recursive: bool = False
    _rendering_fields: bool = field(default=False, init=False, repr=False)

    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Write the explain output read from ``stream`` to ``out``, colored."""
        for line in self._lines(stream):
            if line == "":
                out.write("\n")
                continue

            if self._rendering_fields:
                out.write(self._field(line) + "\n")
                continue

            indent_cnt = find_indent(line)
            if indent_cnt == 0:
                out.write(self._key_val(line) + "\n")
            elif indent_cnt == _DESCRIPTION_INDENT:
                out.write(self._description(line) + "\n")

            if line == "FIELDS:":
                self._rendering_fields = True

    def _key_val(self, line: str) -> str:
        dark = self.dark_background
        parts = SPACES.split(line, maxsplit=1)
        key, val = (parts[0], parts[1]) if len(parts) > 1 else (line, "")

        colored_key = apply(key.rstrip(":"), color_by_key_indent(0, 2, dark))
        colored_val = apply(val, color_by_value_type(val, dark)) if val else ""

        gap = SPACES.search(line)
        spaces = to_spaces(gap.end() - gap.start()) if gap else ""
        return f"{colored_key}:{spaces}{colored_val}"

    def _description(self, line: str) -> str:
        text = line.lstrip(" ")
        return to_spaces(_DESCRIPTION_INDENT) + apply(
            text, color_by_value_type(line, self.dark_background)
        )

    def _field(self, line: str) -> str:
        if self.recursive or find_indent(line) == _FIELD_INDENT:
            return self._key_and_type(line)
        return self._description(line)

    def _key_and_type(self, line: str) -> str:
        dark = self.dark_background
        indent_cnt = find_indent(line)
        line = line.lstrip(" ")

        # key and type may be separated by a single space
        parts = ANY_SPACES.split(line, maxsplit=1)
        if len(parts) != 2:
            raise ValueError(f"expected a field name and its type: {line!r}")
        key, val = parts

        val = val.rstrip(">").lstrip("<")
        colored_key = apply(key, color_by_key_indent(indent_cnt, 2, dark))
        colored_val = apply(val, color_by_value_type(line, dark))
        # kubectl explain separates the name and the type with a tab
        return f"{to_spaces(indent_cnt)}{colored_key}\t<{colored_val}>"