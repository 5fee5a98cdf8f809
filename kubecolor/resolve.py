"""Deciding whether the output of a command should be colorized."""

from __future__ import annotations

import sys

from kubecolor.config import KubecolorConfig
from kubecolor.kubectl import CLICommand, CLICommandInfo, inspect_cli_command_info

_UNSUPPORTED = frozenset(
    {
        CLICommand.CREATE,
        CLICommand.DEBUG,
        CLICommand.DELETE,
        CLICommand.EDIT,
        CLICommand.ATTACH,
        CLICommand.REPLACE,
        CLICommand.COMPLETION,
        CLICommand.EXEC,
        CLICommand.PROXY,
        CLICommand.PLUGIN,
        CLICommand.WAIT,
        CLICommand.RUN,
        CLICommand.CTX,
        CLICommand.NS,
        # oc commands
        CLICommand.NEW_PROJECT,
        CLICommand.NEW_APP,
        CLICommand.POLICY,
    }
)


def is_output_terminal() -> bool:
    """Tell whether standard output is a terminal."""
    stdout = sys.stdout
    if stdout is None:
        return False
    try:
        return stdout.isatty()
    except (AttributeError, ValueError):
        return False


def is_coloring_supported(subcommand: CLICommand | None) -> bool:
    """Tell whether output of ``subcommand`` may be colorized."""
    return subcommand not in _UNSUPPORTED


def resolve_subcommand(
    args, config: KubecolorConfig, is_output_terminal=is_output_terminal
) -> tuple[bool, CLICommandInfo]:
    """Return whether to colorize, and the inspected command line."""
    info, found = inspect_cli_command_info(args)

    if config.plain:
        return False, info

    # internal subcommands such as __completeNoDesc are left alone
    if any(arg.startswith("__") for arg in info.args):
        return False, info

    # kubectl prints help when no subcommand is given
    if not found:
        info.help = True
        return True, info

    if not is_output_terminal():
        return config.force_color, info

    return is_coloring_supported(info.subcommand), info