"""Rendering durations as text."""

import math
from decimal import Decimal
from typing import Any

from timespan.units import resolve
from timespan.util import DEFAULT_SEPARATOR


def pluralize(name: str) -> str:
    return name if name.endswith("s") else name + "s"


def format_number(n: float) -> str:
    """Render a number the way it reads: 24.0 -> "24", 1.5 -> "1.5".

    Floats print in fixed notation from 1e-6 up to 1e21 and with a short
    exponent outside that range: 0.00001 -> "0.00001", 1e-7 -> "1e-7".
    """
    if not isinstance(n, float) or not math.isfinite(n):
        return str(n)
    if n == 0:
        return "0"
    if 1e-6 <= abs(n) < 1e21:
        if n.is_integer():
            return str(int(n))
        return format(Decimal(repr(n)), "f")
    mantissa, _, exponent = repr(n).partition("e")
    return f"{mantissa}e{int(exponent):+d}"


def render(n: float, unit: Any, abbr: bool, sep: str = DEFAULT_SEPARATOR) -> str:
    """Format as `<number><sep><unit name>`; the unit name is always plural."""
    name = resolve(unit).name_for(abbr)
    return f"{format_number(n)}{sep}{pluralize(name)}"


def humanize(n: float, unit: Any, abbr: bool) -> str:
    """Compact form with singular units for exactly one.

    Abbreviations are attached to the number, full names are spaced:
    "24hrs", "1hr", "1 hour", "2.5 days".
    """
    name = resolve(unit).name_for(abbr)
    if not abbr:
        name = " " + name
    return format_number(n) + (name if abs(n) == 1 else pluralize(name))
