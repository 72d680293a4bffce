"""Rescaling values between units and rounding them for display."""

from __future__ import annotations

import math
import operator
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any, Callable

from timespan.units import UNITS, resolve
from timespan.util import normalize_precision

if TYPE_CHECKING:
    from timespan.core import Duration


def decimal_round(value: float, places: int | None) -> float:
    """Round `value` to `places` decimal digits, halves away from zero.

    The decimal point is moved by adjusting the exponent of the value's
    shortest decimal representation, so no float multiplication by
    ``10 ** places`` takes place. With falsy `places` the value is rounded
    to the nearest integer. Ints are rounded exactly, however large.
    """
    places = places or 0
    if isinstance(value, int) and not isinstance(value, bool):
        if places >= 0:
            return value
        return _round_int(value, -places)
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(float(value)))
    # Nothing to round; quantize() would also overflow the context on huge values
    if -exact.as_tuple().exponent <= places:  # type: ignore[operator]
        return float(value)
    if not places:
        return float(exact.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    shifted = exact.scaleb(places).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return float(shifted.scaleb(-places))


def _round_int(value: int, digits: int) -> int:
    """Round an int to a multiple of 10 ** digits, halves away from zero."""
    unit = 10**digits
    magnitude = (abs(value) * 2 + unit) // (unit * 2) * unit
    return magnitude if value >= 0 else -magnitude


def _step(op: Callable[[float, float], float], n: float, factor: Any) -> float:
    try:
        return op(n, factor)
    except OverflowError:
        return math.inf if n > 0 else -math.inf


def rescale(n: float, from_unit: Any, to_unit: Any) -> float:
    """Walk the unit table from one unit to another without rounding.

    Ints too large for a float become signed infinity once a step needs
    float arithmetic.
    """
    rank = resolve(from_unit).rank
    target = resolve(to_unit).rank

    if target < rank:
        while target < rank:
            rank -= 1
            n = _step(operator.mul, n, UNITS[rank].next)
    elif target > rank:
        while target > rank:
            n = _step(operator.truediv, n, UNITS[rank].next)
            rank += 1
    return n


def convert(
    n: float,
    from_unit: Any,
    to_unit: Any,
    precision: int | None = None,
    *,
    abbr: bool = True,
) -> Duration:
    """Convert `n` from one unit to another.

    Unrecognized units are treated as hours. The result is rounded to
    `precision` decimal places, which defaults to 2 when omitted or falsy.

    Example:
        >>> convert(1000, "ms", "s").duration()
        1.0
    """
    from timespan.core import Duration

    precision = normalize_precision(precision)
    unit = resolve(to_unit)
    value = decimal_round(rescale(n, from_unit, unit), precision)
    return Duration(value, unit, precision=precision, abbr=abbr)
