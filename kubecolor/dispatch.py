"""Choosing a printer for the output of a kubectl subcommand."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import IO, Iterable, Optional

from kubecolor.apply import ApplyPrinter
from kubecolor.color import Color
from kubecolor.describe import DescribePrinter
from kubecolor.explain import ExplainPrinter
from kubecolor.formatting import Printer
from kubecolor.json_printer import JsonPrinter
from kubecolor.kubectl import CLICommand, CLICommandInfo, FormatOption
from kubecolor.options import OptionsPrinter
from kubecolor.single import SingleColoredPrinter
from kubecolor.status import OpenShiftStatusPrinter
from kubecolor.table import TablePrinter
from kubecolor.version_printer import VersionPrinter, VersionShortPrinter
from kubecolor.yaml_printer import YamlPrinter

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _is_integer(text: str) -> bool:
    return _INTEGER.fullmatch(text) is not None and _INT64_MIN <= int(text) <= _INT64_MAX


def _get_column_color(_index: int, column: str) -> Optional[Color]:
    if column == "CrashLoopBackOff":
        return Color.RED
    # readiness such as "1/3" that is not complete
    if column.count("/") == 1:
        ready, total = column.split("/")
        if ready != total and _is_integer(ready) and _is_integer(total):
            return Color.YELLOW
    return None


@dataclass
class KubectlOutputColoredPrinter(Printer):
    """Prints kubectl output in the way that suits its subcommand."""

    subcommand_info: CLICommandInfo
    dark_background: bool = True
    recursive: bool = False

    def select_printer(self) -> Printer:
        """Return the printer for the subcommand; green lines if none fits."""
        info = self.subcommand_info
        if info.help:
            return SingleColoredPrinter(Color.YELLOW)

        dark = self.dark_background
        with_header = not info.no_header
        command = info.subcommand
        structured = self._structured_printer()

        if command in (CLICommand.TOP, CLICommand.API_RESOURCES):
            return TablePrinter(with_header, dark)
        if command is CLICommand.API_VERSIONS:
            return TablePrinter(False, dark)
        if command is CLICommand.GET:
            if structured is not None:
                return structured
            return TablePrinter(with_header, dark, _get_column_color)
        if command is CLICommand.DESCRIBE:
            return DescribePrinter(dark, TablePrinter(False, dark))
        if command is CLICommand.EXPLAIN:
            return ExplainPrinter(dark_background=dark, recursive=self.recursive)
        if command is CLICommand.VERSION:
            if structured is not None:
                return structured
            if info.short:
                return VersionShortPrinter(dark_background=dark)
            return VersionPrinter(dark_background=dark)
        if command is CLICommand.OPTIONS:
            return OptionsPrinter(dark_background=dark)
        if command is CLICommand.APPLY:
            return structured or ApplyPrinter(dark_background=dark)
        if command is CLICommand.STATUS:
            return OpenShiftStatusPrinter(dark_background=dark)
        return SingleColoredPrinter(Color.GREEN)

    def _structured_printer(self) -> Optional[Printer]:
        fmt = self.subcommand_info.format_option
        if fmt is FormatOption.JSON:
            return JsonPrinter(dark_background=self.dark_background)
        if fmt is FormatOption.YAML:
            return YamlPrinter(dark_background=self.dark_background)
        return None

    def print(self, stream: Iterable[str], out: IO[str]) -> None:
        """Write ``stream`` to ``out`` with the printer for the subcommand."""
        self.select_printer().print(stream, out)