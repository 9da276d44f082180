"""Tests for diagnostic rendering helpers."""

import inspect

import pytest

from softassert.diagnostics import (
    caller_location,
    format_record,
    indent_each_line,
    ordinal_label,
    render_value,
)


# --- ordinal_label ---


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, ""),
        (1, "1st"),
        (2, "2nd"),
        (3, "3rd"),
        (4, "4th"),
        (10, "10th"),
        (11, "11th"),
        (21, "21th"),
        (22, "22th"),
        (100, "100th"),
    ],
)
def test_ordinal_label(n, expected):
    assert ordinal_label(n) == expected


def test_ordinal_label_rejects_negative():
    with pytest.raises(ValueError, match="negative"):
        ordinal_label(-1)


# --- indent_each_line ---


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", "-"),
        ("a", "-a"),
        ("\n", "-\n"),
        ("a\n", "-a\n"),
        ("a\nb", "-a\n-b"),
        ("\na", "-\n-a"),
        ("a\n\nb", "-a\n-\n-b"),
    ],
)
def test_indent_each_line(text, expected):
    assert indent_each_line(text, "-") == expected


@pytest.mark.parametrize("text", ["", "a", "\n", "a\n", "a\nb", "\n\n"])
def test_indent_each_line_empty_prefix_is_identity(text):
    assert indent_each_line(text, "") == text


# --- render_value ---


def test_render_value_scalars():
    assert render_value(2) == "int(2)"
    assert render_value(1.0) == "float(1.0)"
    assert render_value(True) == "bool(True)"
    assert render_value("OK") == "str('OK')"


def test_render_value_none():
    assert render_value(None) == "NoneType(None)"


def test_render_value_containers():
    assert render_value([1, 2, 3]) == "list([1, 2, 3])"
    assert render_value({}) == "dict({})"
    assert render_value((1,)) == "tuple((1,))"


def test_render_value_wraps_long_values():
    rendered = render_value(list(range(30)), width=20)
    lines = rendered.split("\n")
    assert len(lines) > 1
    assert lines[0].startswith("list([0,")
    assert lines[-1].endswith("])")


def test_render_value_depth_elides_nesting():
    assert render_value([[[1]]], depth=1) == "list([[...]])"


# --- caller_location ---


def test_caller_location_points_at_caller():
    location = caller_location(0)
    assert "test_diagnostics.py:" in location
    line = int(location.rsplit(":", 1)[1])
    assert line > 0


def test_caller_location_skips_frames():
    def helper():
        return caller_location(1)

    frame = inspect.currentframe()
    expected = f"{frame.f_code.co_filename}:{frame.f_lineno + 1}"
    actual = helper()
    assert actual == expected


def test_caller_location_beyond_stack_is_empty():
    assert caller_location(100_000) == ""


# --- format_record ---


def test_format_record():
    assert format_record("boom", "x.py:3") == "\tboom\n\tx.py:3\n"
