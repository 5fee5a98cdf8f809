"""Printer for the output of oc status."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import IO, Iterable

from kubecolor.color import Color, apply
from kubecolor.formatting import Printer

_NON_SPACE = r"[^\t\n\f\r ]"

_PATTERNS = (
    (re.compile(rf"svc/{_NON_SPACE}+"), Color.GREEN),
    (re.compile(rf"dc/{_NON_SPACE}+"), Color.BLUE),
    (re.compile(rf"https?://{_NON_SPACE}+"), Color.MAGENTA),
    (re.compile(r"\brunning\b", re.ASCII), Color.GREEN),
    (re.compile(r"\bdeployed\b", re.ASCII), Color.GREEN),
    (re.compile(r"\bfailed\b", re.ASCII), Color.RED),
)


@dataclass
class OpenShiftStatusPrinter(Printer):
    """Colors project, service, deployment config, URL and state words."""

    dark_background: bool = True

    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Write the status output read from ``stream`` to ``out``, colored."""
        for line in self._lines(stream):
            out.write(self.colorize_line(line) + "\n")

    def colorize_line(self, line: str) -> str:
        """Return ``line`` with its notable parts colored."""
        if line.startswith("In project "):
            return apply(line, Color.CYAN)
        for pattern, color in _PATTERNS:
            line = pattern.sub(lambda match, c=color: apply(match.group(0), c), line)
        return line