"""Running kubectl and colorizing what it prints."""

from __future__ import annotations

import subprocess
import sys
import threading
from dataclasses import dataclass
from typing import IO, Iterable, Iterator

from kubecolor.color import Color
from kubecolor.config import KubectlError, resolve_config
from kubecolor.dispatch import KubectlOutputColoredPrinter
from kubecolor.formatting import Printer
from kubecolor.kubectl import CLICommandInfo
from kubecolor.resolve import resolve_subcommand
from kubecolor.single import WithFuncPrinter

VERSION = "unset"


@dataclass
class Printers:
    """The printers for kubectl's standard output and standard error."""

    full_colored_printer: Printer
    error_printer: Printer


def _error_line_color(line: str) -> Color:
    return Color.RED if line.lower().startswith("error") else Color.YELLOW


def get_printers(subcommand_info: CLICommandInfo, dark_background: bool) -> Printers:
    """Build the printers suited to ``subcommand_info``."""
    return Printers(
        full_colored_printer=KubectlOutputColoredPrinter(
            subcommand_info=subcommand_info,
            dark_background=dark_background,
            recursive=subcommand_info.recursive,
        ),
        error_printer=WithFuncPrinter(_error_line_color),
    )


class _Transcript:
    """Everything read from kubectl so far, kept to fall back on."""

    def __init__(self) -> None:
        self._chunks: list[str] = []
        self._lock = threading.Lock()

    def tee(self, stream: Iterable[str]) -> Iterator[str]:
        for chunk in stream:
            with self._lock:
                self._chunks.append(chunk)
            yield chunk

    def text(self) -> str:
        with self._lock:
            return "".join(self._chunks)


def _print_output(
    printer: Printer, pipe: IO[str], out: IO[str], transcript: _Transcript
) -> None:
    try:
        printer.print(transcript.tee(pipe), out)
    except Exception:
        # a printer could not cope with the output: show it as it came
        out.write(transcript.text())
        for rest in pipe:
            out.write(rest)


def _check_exit(returncode: int) -> None:
    if returncode != 0:
        raise KubectlError(returncode if returncode > 0 else -1)


def run(args, version: str) -> None:
    """Run kubectl with ``args``, colorizing its output where that fits.

    Raises KubectlError carrying kubectl's exit status when it fails.
    """
    args, config = resolve_config(args)
    should_colorize, subcommand_info = resolve_subcommand(args, config)

    if config.show_kubecolor_version:
        sys.stdout.write(f"{version}\n")
        return

    command = [config.kubectl_cmd, *args]

    if not should_colorize:
        sys.stdout.flush()
        sys.stderr.flush()
        _check_exit(subprocess.run(command).returncode)
        return

    out, err = sys.stdout, sys.stderr
    with subprocess.Popen(
        command,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        errors="replace",
    ) as process:
        printers = get_printers(subcommand_info, config.dark_background)
        transcript = _Transcript()
        workers = [
            threading.Thread(
                target=_print_output,
                args=(printers.full_colored_printer, process.stdout, out, transcript),
            ),
            threading.Thread(
                target=printers.error_printer.print,
                args=(transcript.tee(process.stderr), err),
            ),
        ]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()
        returncode = process.wait()

    out.flush()
    err.flush()
    _check_exit(returncode)


def main(argv=None) -> int:
    """Run kubecolor; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        run(argv, VERSION)
    except KubectlError as error:
        return error.exit_code
    except OSError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())