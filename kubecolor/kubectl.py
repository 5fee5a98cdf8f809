"""Inspection of kubectl command lines."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class FormatOption(enum.Enum):
    """Output format requested with ``-o``/``--output``."""

    NONE = 0
    WIDE = 1
    JSON = 2
    YAML = 3


class CLICommand(str, enum.Enum):
    """Known kubectl (and oc) subcommands."""

    CREATE = "create"
    EXPOSE = "expose"
    RUN = "run"
    SET = "set"
    EXPLAIN = "explain"
    GET = "get"
    EDIT = "edit"
    DELETE = "delete"
    ROLLOUT = "rollout"
    SCALE = "scale"
    AUTOSCALE = "autoscale"
    CERTIFICATE = "certificate"
    CLUSTER_INFO = "cluster-info"
    TOP = "top"
    CORDON = "cordon"
    UNCORDON = "uncordon"
    DRAIN = "drain"
    TAINT = "taint"
    DESCRIBE = "describe"
    LOGS = "logs"
    ATTACH = "attach"
    EXEC = "exec"
    PORT_FORWARD = "port-forward"
    PROXY = "proxy"
    CP = "cp"
    AUTH = "auth"
    DIFF = "diff"
    APPLY = "apply"
    PATCH = "patch"
    REPLACE = "replace"
    WAIT = "wait"
    CONVERT = "convert"
    KUSTOMIZE = "kustomize"
    LABEL = "label"
    ANNOTATE = "annotate"
    COMPLETION = "completion"
    API_RESOURCES = "api-resources"
    API_VERSIONS = "api-versions"
    CONFIG = "config"
    PLUGIN = "plugin"
    VERSION = "version"
    OPTIONS = "options"
    CTX = "ctx"
    NS = "ns"
    DEBUG = "debug"
    # oc commands
    PROJECTS = "projects"
    STATUS = "status"
    NEW_PROJECT = "new-project"
    NEW_APP = "new-app"
    ROUTES = "routes"
    POLICY = "policy"


@dataclass
class CLICommandInfo:
    """What was learned about a kubectl command line."""

    subcommand: CLICommand | None = None
    format_option: FormatOption = FormatOption.NONE
    no_header: bool = False
    watch: bool = False
    help: bool = False
    recursive: bool = False
    short: bool = False
    is_krew: bool = False
    args: list[str] = field(default_factory=list)


_FORMAT_NAMES = {
    "json": FormatOption.JSON,
    "yaml": FormatOption.YAML,
    "wide": FormatOption.WIDE,
}

_LONG_OUTPUT = {
    "--output=json": FormatOption.JSON,
    "--output=yaml": FormatOption.YAML,
    "--output=wide": FormatOption.WIDE,
}

_SHORT_OUTPUT = {
    "-ojson": FormatOption.JSON,
    "-o=json": FormatOption.JSON,
    "-oyaml": FormatOption.YAML,
    "-o=yaml": FormatOption.YAML,
    "-owide": FormatOption.WIDE,
    "-o=wide": FormatOption.WIDE,
}


def inspect_cli_command(command: str) -> CLICommand | None:
    """Return the subcommand named by ``command``, or None if unknown."""
    try:
        return CLICommand(command)
    except ValueError:
        return None


def _output_format(arg, following, table):
    if arg in table:
        return table[arg]
    if following is not None:
        # custom-columns, go-template and the like are not supported
        return _FORMAT_NAMES.get(following)
    return None


def collect_commandline_options(args, info: CLICommandInfo) -> None:
    """Record the options found in ``args`` on ``info``."""
    args = list(args)
    for arg, following in zip(args, [*args[1:], None]):
        if arg.startswith("--output") or arg.startswith("-o"):
            table = _LONG_OUTPUT if arg.startswith("--output") else _SHORT_OUTPUT
            found = _output_format(arg, following, table)
            if found is not None:
                info.format_option = found
        elif arg.startswith("--short"):
            info.short = arg != "--short=false"
        elif arg == "--no-headers":
            info.no_header = True
        elif arg in ("-w", "--watch"):
            info.watch = True
        elif arg in ("--recursive=true", "--recursive"):
            info.recursive = True
        elif arg in ("-h", "--help"):
            info.help = True


def inspect_cli_command_info(args) -> tuple[CLICommandInfo, bool]:
    """Inspect ``args``; the flag tells whether a subcommand was found."""
    info = CLICommandInfo(args=list(args))
    collect_commandline_options(info.args, info)
    for arg in info.args:
        command = inspect_cli_command(arg)
        if command is not None:
            info.subcommand = command
            return info, True
    return info, False