import io

import pytest

from kubecolor.color import Color, apply
from kubecolor.options import OptionsPrinter

HEADLINE = "The following options can be passed to any command:"


def render(printer, text):
    out = io.StringIO()
    printer.print(io.StringIO(text), out)
    return out.getvalue()


def test_dark_background():
    text = f"{HEADLINE}\n\n  --add-dir-header=false: If true, adds\n      --v=0: 0\n"
    expected = (
        apply(HEADLINE, Color.CYAN)
        + "\n\n"
        + "  "
        + apply("--add-dir-header=false", Color.YELLOW)
        + ": "
        + apply("If true, adds", Color.CYAN)
        + "\n"
        + "      "
        + apply("--v=0", Color.YELLOW)
        + ": "
        + apply("0", Color.MAGENTA)
        + "\n"
    )
    assert render(OptionsPrinter(dark_background=True), text) == expected


def test_light_background_first_line():
    text = f"{HEADLINE}\n  --flag: true\n"
    lines = render(OptionsPrinter(dark_background=False), text).splitlines()
    assert lines[0] == apply(HEADLINE, Color.BLUE)
    assert lines[1] == "  " + apply("--flag", Color.YELLOW) + ": " + apply("true", Color.GREEN)


def test_leading_empty_line_does_not_consume_first_line():
    text = f"\n{HEADLINE}\n"
    assert render(OptionsPrinter(), text) == "\n" + apply(HEADLINE, Color.CYAN) + "\n"


def test_value_keeps_further_separators():
    text = f"{HEADLINE}\n  --a: b: c\n"
    lines = render(OptionsPrinter(), text).splitlines()
    assert lines[1] == "  " + apply("--a", Color.YELLOW) + ": " + apply("b: c", Color.CYAN)


def test_option_without_separator_is_rejected():
    with pytest.raises(ValueError):
        render(OptionsPrinter(), f"{HEADLINE}\n  --broken\n")