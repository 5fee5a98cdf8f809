import pytest

from kubecolor.color import Color
from kubecolor.formatting import (
    ANY_SPACES,
    BOOL_COLOR_FOR_DARK,
    BOOL_COLOR_FOR_LIGHT,
    HEADER_COLOR_FOR_DARK,
    HEADER_COLOR_FOR_LIGHT,
    NULL_COLOR_FOR_DARK,
    NULL_COLOR_FOR_LIGHT,
    NUMBER_COLOR_FOR_DARK,
    NUMBER_COLOR_FOR_LIGHT,
    SPACES,
    STRING_COLOR_FOR_DARK,
    STRING_COLOR_FOR_LIGHT,
    Printer,
    color_by_key_indent,
    color_by_value_type,
    colors_by_background,
    find_indent,
    header_color_by_background,
    to_spaces,
)


def test_to_spaces():
    assert to_spaces(3) == "   "
    assert to_spaces(0) == ""


@pytest.mark.parametrize(
    ("dark", "indent", "width", "expected"),
    [
        (True, 2, 2, Color.WHITE),
        (False, 2, 2, Color.BLACK),
        (True, 4, 2, Color.YELLOW),
        (False, 4, 2, Color.YELLOW),
        (True, 0, 2, Color.YELLOW),
    ],
)
def test_color_by_key_indent(dark, indent, width, expected):
    assert color_by_key_indent(indent, width, dark) is expected


@pytest.mark.parametrize(
    ("dark", "val", "expected"),
    [
        (True, "null", NULL_COLOR_FOR_DARK),
        (False, "<none>", NULL_COLOR_FOR_LIGHT),
        (True, "true", BOOL_COLOR_FOR_DARK),
        (False, "false", BOOL_COLOR_FOR_LIGHT),
        (True, "123", NUMBER_COLOR_FOR_DARK),
        (False, "456", NUMBER_COLOR_FOR_LIGHT),
        (True, "aaa", STRING_COLOR_FOR_DARK),
        (False, "12345a", STRING_COLOR_FOR_LIGHT),
        (True, "-7", NUMBER_COLOR_FOR_DARK),
        (True, "1_000", STRING_COLOR_FOR_DARK),
        (True, " 12", STRING_COLOR_FOR_DARK),
        (True, "99999999999999999999", STRING_COLOR_FOR_DARK),
        (True, "<unknown>", NULL_COLOR_FOR_DARK),
    ],
)
def test_color_by_value_type(dark, val, expected):
    assert color_by_value_type(val, dark) is expected


def test_colors_by_background():
    assert colors_by_background(True) == (
        Color.CYAN, Color.GREEN, Color.MAGENTA, Color.WHITE, Color.YELLOW,
    )
    assert colors_by_background(False) == (
        Color.CYAN, Color.GREEN, Color.MAGENTA, Color.BLACK, Color.YELLOW, Color.BLUE,
    )


def test_header_color_by_background():
    assert header_color_by_background(True) is HEADER_COLOR_FOR_DARK
    assert header_color_by_background(False) is HEADER_COLOR_FOR_LIGHT


@pytest.mark.parametrize(("line", "expected"), [("no indent", 0), ("  2 indent", 2), ("   ", 3)])
def test_find_indent(line, expected):
    assert find_indent(line) == expected


def test_space_patterns():
    assert SPACES.split("NAME   READY  a b") == ["NAME", "READY", "a b"]
    assert ANY_SPACES.split("a b  c", maxsplit=1) == ["a", "b  c"]


def test_printer_is_abstract():
    with pytest.raises(TypeError):
        Printer()