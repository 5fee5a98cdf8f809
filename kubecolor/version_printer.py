"""Printers for the output of kubectl version."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterable

from kubecolor.color import apply
from kubecolor.formatting import Printer, color_by_key_indent, color_by_value_type


@dataclass
class VersionShortPrinter(Printer):
    """Colors lines such as ``Client Version: v1.19.3``."""

    dark_background: bool = True

    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Write the short version output read from ``stream`` to ``out``, colored."""
        dark = self.dark_background
        for line in self._lines(stream):
            parts = line.split(": ")
            if len(parts) < 2:
                raise ValueError(f"expected a key and a version: {line!r}")
            key, val = parts[0], parts[1]
            out.write(
                f"{apply(key, color_by_key_indent(0, 2, dark))}: "
                f"{apply(val, color_by_value_type(val, dark))}\n"
            )


@dataclass
class VersionPrinter(Printer):
    """Colors the struct-like lines of the default kubectl version output."""

    dark_background: bool = True

    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Write the version output read from ``stream`` to ``out``, colored."""
        for line in self._lines(stream):
            out.write(self._colorize_line(line) + "\n")

    def _colorize_line(self, line: str) -> str:
        dark = self.dark_background
        key, sep, val = line.partition(": ")
        if not sep:
            raise ValueError(f"expected a key and a version: {line!r}")

        # the value looks like version.Info{Major:"1", Minor:"19", ...}
        package, brace, fields = val.rstrip("}").partition("{")
        if not brace:
            raise ValueError(f"expected a version struct: {val!r}")

        colored_fields = ", ".join(self._colorize_field(f) for f in fields.split(", "))
        return (
            f"{apply(key, color_by_key_indent(0, 2, dark))}: "
            f"{apply(package, color_by_key_indent(2, 2, dark))}{{{colored_fields}}}"
        )

    def _colorize_field(self, field_text: str) -> str:
        dark = self.dark_background
        name, sep, raw = field_text.partition(":")
        if not sep:
            raise ValueError(f"expected a struct field: {field_text!r}")
        colored_name = apply(name, color_by_key_indent(0, 2, dark))
        is_quoted = raw.startswith('"') and raw.endswith('"')
        colored_val = apply(raw.lstrip('"').rstrip('"'), color_by_value_type(raw, dark))
        if is_quoted:
            return f'{colored_name}:"{colored_val}"'
        return f"{colored_name}:{colored_val}"