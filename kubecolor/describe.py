"""Printer for the output of kubectl describe."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterable, Optional, Sequence

from kubecolor.color import Color, apply
from kubecolor.formatting import (
    SPACES,
    Printer,
    color_by_key_indent,
    color_by_value_type,
    colors_by_background,
    find_indent,
    to_spaces,
)
from kubecolor.table import TablePrinter

_BASIC_INDENT_WIDTH = 2  # kubectl describe indents by two spaces

# keywords specific enough to tell that a route is being described
ROUTE_DETECTION_KEYWORDS = ("Requested Host:", "TLS Termination:", "Ingress:")
ROUTE_SPECIFIC_KEYS = frozenset(
    {
        "Name:",
        "Namespace:",
        "Created:",
        "Labels:",
        "Annotations:",
        "Requested Host:",
        "Path:",
        "TLS Termination:",
        "Service:",
        "Weight:",
        "Endpoints:",
        "Ingress:",
    }
)
ROUTE_KEY_COLOR = Color.YELLOW
ROUTE_RESOURCE_NAME_COLOR = Color.GREEN
ROUTE_ENDPOINT_COLOR = Color.CYAN
ROUTE_TLS_COLOR_EDGE = Color.BLUE
ROUTE_TLS_COLOR_PASSTHROUGH = Color.YELLOW
ROUTE_TLS_COLOR_REENCRYPT = Color.YELLOW
ROUTE_COMMA_COLOR = Color.WHITE

_TLS_COLORS = {
    "edge": ROUTE_TLS_COLOR_EDGE,
    "passthrough": ROUTE_TLS_COLOR_PASSTHROUGH,
    "reencrypt": ROUTE_TLS_COLOR_REENCRYPT,
}


@dataclass
class DescribePrinter(Printer):
    """Colors the key/value layout of kubectl describe."""

    dark_background: bool = True
    table_printer: Optional[TablePrinter] = None

    def __post_init__(self) -> None:
        if self.table_printer is None:
            self.table_printer = TablePrinter(False, self.dark_background)

    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Write the describe output read from ``stream`` to ``out``, colored."""
        dark = self.dark_background
        is_route = False

        for line in self._lines(stream):
            if not is_route:
                is_route = any(keyword in line for keyword in ROUTE_DETECTION_KEYWORDS)

            if line == "":
                out.write("\n")
                continue

            gaps = [match.span() for match in SPACES.finditer(line)]
            columns = SPACES.split(line)
            # an indented line yields an empty first column
            if columns and columns[0] == "":
                columns = columns[1:]

            indent_cnt = find_indent(line)
            indent = to_spaces(indent_cnt)
            # The "Resource Quota" section of `kubectl describe ns` is indented
            # by a single space, which the gap pattern does not match.
            if indent_cnt > 1:
                gaps = gaps[1:]

            spaces_cnt = gaps[0][1] - gaps[0][0] if gaps else 0

            if len(columns) > 2:
                self.table_printer.print_line(out, line, colors_by_background(dark))
                continue

            key_color, value_color = self._colors(columns, indent_cnt, is_route)

            key = columns[0]
            colored_key = apply(key.rstrip(":"), key_color)
            if key.endswith(":"):
                colored_key += ":"

            if len(columns) == 1:
                out.write(f"{indent}{colored_key}\n")
                continue

            value = columns[1]
            colored_value = self._route_value(key, value, value_color) if is_route else None
            if colored_value is None:
                colored_value = apply(value, value_color)
            out.write(f"{indent}{colored_key}{to_spaces(spaces_cnt)}{colored_value}\n")

    def _colors(
        self, columns: Sequence[str], indent_cnt: int, is_route: bool
    ) -> tuple[Color, Color]:
        dark = self.dark_background
        key_color = color_by_key_indent(indent_cnt, _BASIC_INDENT_WIDTH, dark)
        value_color = color_by_value_type(columns[1] if len(columns) > 1 else columns[0], dark)

        if not is_route:
            return key_color, value_color

        key_part = columns[0]
        trimmed = key_part.strip()
        if key_part in ROUTE_SPECIFIC_KEYS:
            key_color = ROUTE_KEY_COLOR
        elif indent_cnt > _BASIC_INDENT_WIDTH:
            if trimmed + ":" in ROUTE_SPECIFIC_KEYS:
                key_color = ROUTE_KEY_COLOR
            else:
                key_color = color_by_key_indent(indent_cnt, _BASIC_INDENT_WIDTH + 1, dark)

        if len(columns) > 1:
            value_color = _route_value_color(trimmed.removesuffix(":"), columns[1], value_color)
        elif not key_part.endswith(":"):
            # descriptive text inside a route: the whole line in the value color
            value_color = color_by_value_type(key_part, dark)
            key_color = value_color

        return key_color, value_color

    def _route_value(self, key: str, value: str, value_color: Color) -> Optional[str]:
        dark = self.dark_background
        name = key.strip().removesuffix(":")

        if name == "Service":
            if "(" not in value or "%" not in value:
                return None
            service, sep, weight = value.partition(" ")
            colored = apply(service, ROUTE_RESOURCE_NAME_COLOR)
            if sep:
                colored += " " + apply(weight, color_by_value_type(weight, dark))
            return colored

        if name == "Endpoints":
            separator = apply(",", ROUTE_COMMA_COLOR) + " "
            return separator.join(
                apply(endpoint.strip(), ROUTE_ENDPOINT_COLOR) for endpoint in value.split(",")
            )

        if name == "TLS Termination":
            first, sep, rest = value.partition(" ")
            remaining = sep + rest
            colored = apply(first, _TLS_COLORS.get(first.lower(), value_color))
            if remaining:
                colored += apply(remaining, color_by_value_type(remaining, dark))
            return colored

        return None


def _route_value_color(name: str, value: str, default: Color) -> Color:
    if name in ("Name", "Requested Host", "Service"):
        return ROUTE_RESOURCE_NAME_COLOR
    if name == "Endpoints":
        return ROUTE_ENDPOINT_COLOR
    if name == "TLS Termination":
        lowered = value.lower()
        for prefix, color in _TLS_COLORS.items():
            if lowered.startswith(prefix):
                return color
    return default