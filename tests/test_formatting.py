"""Tests for number and unit rendering helpers."""

import pytest

from timespan import humanize, pluralize
from timespan.formatting import format_number, render


@pytest.mark.parametrize(
    "name, expected",
    [("hr", "hrs"), ("day", "days"), ("minute", "minutes"), ("s", "s"), ("ms", "ms")],
)
def test_pluralize(name, expected):
    assert pluralize(name) == expected


@pytest.mark.parametrize(
    "n, expected",
    [
        (24.0, "24"),
        (3, "3"),
        (1.5, "1.5"),
        (-0.5, "-0.5"),
        (0.0, "0"),
        (-0.0, "0"),
        (0.00001, "0.00001"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (-1.5e-7, "-1.5e-7"),
        (1e16, "10000000000000000"),
        (1e21, "1e+21"),
        (10**30, "1" + "0" * 30),
    ],
)
def test_format_number(n, expected):
    assert format_number(n) == expected


def test_render():
    assert render(24.0, "hr", True) == "24 hrs"
    assert render(1, "wk", False, sep="_") == "1_weeks"


def test_render_unknown_unit_is_hours():
    assert render(2, "bogus-unit", True) == "2 hrs"


def test_humanize():
    """Abbreviations attach to the number, full names are spaced."""
    assert humanize(1, "day", True) == "1day"
    assert humanize(3, "day", True) == "3days"
    assert humanize(1, "mo", False) == "1 month"
    assert humanize(0, "mo", False) == "0 months"
