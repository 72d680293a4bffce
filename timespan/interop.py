"""Bridges between Duration and the standard datetime / dateutil types.

Months and years map to their average lengths from the unit table, the same
approximation used everywhere else; no calendar arithmetic happens here.
"""

from datetime import timedelta
from typing import Any

from dateutil.relativedelta import relativedelta

from timespan.conversion import convert
from timespan.core import Duration
from timespan.units import MILLISECOND, MILLISECONDS, resolve

# relativedelta fields that pin a calendar position rather than a span
_ABSOLUTE_FIELDS = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)


def _milliseconds(d: Duration) -> float:
    return d.duration() * MILLISECONDS[resolve(d.unit()).abbr]


def from_timedelta(
    td: timedelta, unit: Any = "ms", precision: int | None = None
) -> Duration:
    """Express a timedelta in `unit`."""
    if not isinstance(td, timedelta):
        raise TypeError(
            f"Expected a datetime.timedelta.\n"
            f"Got {type(td).__name__!r}: {td!r}"
        )
    return convert(td / timedelta(milliseconds=1), MILLISECOND, unit, precision)


def to_timedelta(d: Duration) -> timedelta:
    return timedelta(milliseconds=_milliseconds(d))


def from_relativedelta(
    rd: relativedelta, unit: Any = "ms", precision: int | None = None
) -> Duration:
    """Express the relative part of a relativedelta in `unit`.

    Raises:
        TypeError: If rd is not a relativedelta
        ValueError: If rd sets absolute fields (year=, month=, weekday=, ...)
    """
    if not isinstance(rd, relativedelta):
        raise TypeError(
            f"Expected a dateutil.relativedelta.relativedelta.\n"
            f"Got {type(rd).__name__!r}: {rd!r}"
        )
    absolute = [name for name in _ABSOLUTE_FIELDS if getattr(rd, name) is not None]
    if absolute:
        raise ValueError(
            f"relativedelta with absolute fields cannot be expressed as a span.\n"
            f"Got: {', '.join(absolute)}\n"
            f"Hint: use relative fields only, e.g. relativedelta(months=+1)"
        )

    ms = (
        rd.years * MILLISECONDS["yr"]
        + rd.months * MILLISECONDS["mo"]
        + rd.days * MILLISECONDS["day"]
        + rd.hours * MILLISECONDS["hr"]
        + rd.minutes * MILLISECONDS["min"]
        + rd.seconds * MILLISECONDS["s"]
        + rd.microseconds / 1000
    )
    return convert(ms, MILLISECOND, unit, precision)


def to_relativedelta(d: Duration) -> relativedelta:
    """Return a normalized relativedelta in days and smaller fields."""
    microseconds = round(_milliseconds(d) * 1000)
    return relativedelta(microseconds=microseconds).normalized()
