import io

import pytest

from kubecolor.color import Color, apply
from kubecolor.single import SingleColoredPrinter, WithFuncPrinter


def _render(printer, text):
    out = io.StringIO()
    printer.print(io.StringIO(text), out)
    return out.getvalue()


@pytest.mark.parametrize("color", [Color.WHITE, Color.RED])
def test_single_colored_printer(color):
    got = _render(SingleColoredPrinter(color=color), "test\ntest2\ntest3")
    expected = (
        f"{apply('test', color)}\n"
        f"{apply('test2', color)}\n"
        f"{apply('test3', color)}\n"
    )
    assert got == expected


def test_single_colored_printer_drops_carriage_returns():
    out = io.StringIO()
    SingleColoredPrinter(color=Color.GREEN).print(["a\r\n", "b"], out)
    assert out.getvalue() == f"{apply('a', Color.GREEN)}\n{apply('b', Color.GREEN)}\n"


def test_single_colored_printer_empty_input():
    assert _render(SingleColoredPrinter(color=Color.GREEN), "") == ""


def test_with_func_printer_constant_color():
    got = _render(WithFuncPrinter(fn=lambda _line: Color.WHITE), "test\ntest2\ntest3")
    expected = (
        f"{apply('test', Color.WHITE)}\n"
        f"{apply('test2', Color.WHITE)}\n"
        f"{apply('test3', Color.WHITE)}\n"
    )
    assert got == expected


def test_with_func_printer_color_changes_by_line():
    def pick(line):
        return Color.RED if line == "test2" else Color.WHITE

    got = _render(WithFuncPrinter(fn=pick), "test\ntest2\ntest3")
    expected = (
        f"{apply('test', Color.WHITE)}\n"
        f"{apply('test2', Color.RED)}\n"
        f"{apply('test3', Color.WHITE)}\n"
    )
    assert got == expected