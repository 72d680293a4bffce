"""Tests for the concise-unit search."""

import logging
import math

import pytest

from timespan import UNITS, Duration, concise


def test_minutes_become_hours():
    assert concise(90, "min").get() == (1.5, "hr")


def test_value_below_next_factor_stays():
    assert concise(59, "min").get() == (59, "min")


def test_value_at_next_factor_moves_up():
    """The range is half-open: 60 minutes is an hour."""
    assert concise(60, "min").get() == (1, "hr")


def test_fraction_moves_down():
    assert concise(0.5, "hr").get() == (30, "min")


def test_walks_several_units():
    result = concise(259_200_000, "ms")

    assert result.get() == (3, "day")
    assert str(result) == "3 days"


def test_millisecond_is_the_floor():
    assert concise(0.5, "ms").get() == (0.5, "ms")


def test_year_is_the_ceiling():
    assert concise(400, "yr").get() == (400, "yr")


def test_zero_and_negative_values_sink_to_milliseconds():
    assert concise(0, "day").get() == (0, "ms")
    assert concise(-5, "hr").get() == (-18_000_000, "ms")


def test_nan_is_returned_as_is():
    result = concise(math.nan, "hr")

    assert math.isnan(result.duration())
    assert result.unit() == "hr"


def test_unknown_unit_is_treated_as_hours():
    assert concise(90, "bogus-unit").get() == (3.75, "day")


def test_rounding_up_to_the_next_factor_moves_back_up():
    """0.99999 hr rounds to 60 min, which is then an hour again."""
    assert concise(0.99999, "hr").get() == (1, "hr")


def test_precision_applies_to_first_move():
    assert concise(0.123456, "hr", 4).get() == (7.4074, "min")


def test_later_moves_use_default_precision():
    """0.0012345 hr -> 0.07407 min (6 places) -> 4.44 s (2 places)."""
    assert concise(0.0012345, "hr", 6).get() == (4.44, "s")


def test_result_carries_display_preferences():
    result = concise(90, "min", 3, abbr=False)

    assert result.precision() == 3
    assert result.abbr() is False
    assert str(result) == "1.5 hours"


def test_default_precision_on_result():
    assert concise(90, "min").precision() == 2


VALUES = [0, 0.001, 0.5, 0.99999, 1, 59.5, 1000, 123_456.789, 1e6, 1e12]


@pytest.mark.parametrize("n", VALUES)
@pytest.mark.parametrize("unit", UNITS, ids=lambda u: u.abbr)
def test_lands_in_natural_range(n, unit, caplog):
    """Every search stops within eight moves in the unit's natural range."""
    caplog.set_level(logging.DEBUG, logger="timespan.search")

    result = concise(n, unit)
    value, abbr = result.get()
    landed = next(u for u in UNITS if u.abbr == abbr)

    moves = [r for r in caplog.records if r.getMessage().startswith("concise:")]
    assert len(moves) <= len(UNITS)

    if value < 1:
        assert landed.abbr == "ms"
    elif landed.next is not None:
        assert value < landed.next


def test_class_and_instance_access():
    """Duration.concise searches from arguments, d.concise() from the instance."""
    assert Duration.concise(90, "min").get() == (1.5, "hr")
    assert Duration(90, "min").concise().get() == (1.5, "hr")


def test_huge_ints_rise_to_years_without_raising():
    assert concise(10**400, "ms").get() == (math.inf, "yr")
    assert concise(-(10**400), "yr").get() == (-math.inf, "ms")
