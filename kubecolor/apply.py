"""Printer for the output of kubectl apply."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterable

from kubecolor.color import Color, apply
from kubecolor.formatting import Printer

_CREATED = "created"
_CONFIGURED = "configured"
_UNCHANGED = "unchanged"
_DRY_RUN = "(dry run)"
_ACTIONS = (_CREATED, _CONFIGURED, _UNCHANGED)

_ACTION_COLORS = {
    _CREATED: Color.GREEN,
    _CONFIGURED: Color.YELLOW,
    _UNCHANGED: Color.MAGENTA,
}


@dataclass
class ApplyPrinter(Printer):
    """Colors the action word in lines such as ``deployment.apps/foo created``."""

    dark_background: bool = True

    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Write the apply output read from ``stream`` to ``out``, colored."""
        for line in self._lines(stream):
            out.write(self._colorize_line(line) + "\n")

    def _colorize_line(self, line: str) -> str:
        dry_run_color = Color.CYAN if self.dark_background else Color.BLUE
        for action in _ACTIONS:
            suffix = f" {action} {_DRY_RUN}"
            if line.endswith(suffix):
                target = line.removesuffix(suffix)
                return (
                    f"{target} {apply(action, _ACTION_COLORS[action])} "
                    f"{apply(_DRY_RUN, dry_run_color)}"
                )
        for action in _ACTIONS:
            suffix = f" {action}"
            if line.endswith(suffix):
                target = line.removesuffix(suffix)
                return f"{target} {apply(action, _ACTION_COLORS[action])}"
        return apply(line, Color.GREEN)