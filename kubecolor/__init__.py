"""Colorize the output of kubectl and oc: command-line wrapper and printers."""

__version__ = "0.1.0"