"""Command-line configuration of kubecolor itself."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class KubecolorConfig:
    """Settings taken from kubecolor's own flags and environment."""

    plain: bool = False
    dark_background: bool = True
    force_color: bool = False
    show_kubecolor_version: bool = False
    kubectl_cmd: str = "kubectl"
    use_oc_cli: bool = False


class KubectlError(Exception):
    """The wrapped kubectl exited with a non-zero status."""

    def __init__(self, exit_code: int) -> None:
        super().__init__(f"kubectl error: {exit_code}")
        self.exit_code = exit_code


def _take_flag(args: list[str], key: str) -> bool:
    if key in args:
        args.remove(key)
        return True
    return False


def resolve_config(args) -> tuple[list[str], KubecolorConfig]:
    """Strip kubecolor's flags from ``args``; return the rest and the config."""
    remaining = list(args)
    plain = _take_flag(remaining, "--plain")
    light_background = _take_flag(remaining, "--light-background")
    force_color = _take_flag(remaining, "--force-colors")
    show_version = _take_flag(remaining, "--kubecolor-version")
    use_oc_cli = _take_flag(remaining, "--use-oc-cli")

    if use_oc_cli:
        kubectl_cmd = "oc"
    else:
        kubectl_cmd = os.environ.get("KUBECTL_COMMAND") or "kubectl"

    return remaining, KubecolorConfig(
        plain=plain,
        dark_background=not light_background,
        force_color=force_color,
        show_kubecolor_version=show_version,
        kubectl_cmd=kubectl_cmd,
        use_oc_cli=use_oc_cli,
    )