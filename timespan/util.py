"""Library defaults and small helpers shared across timespan.

The defaults below are used wherever a caller omits (or passes an unusable)
unit, precision or separator.
"""

from numbers import Real
from typing import Any, Callable

DEFAULT_UNIT = "hr"
DEFAULT_PRECISION = 2
DEFAULT_SEPARATOR = " "


def is_number(value: Any) -> bool:
    """True for real numbers, excluding bools."""
    return isinstance(value, Real) and not isinstance(value, bool)


def as_precision(precision: Any) -> int | None:
    """Return `precision` as a non-negative int, or None if it is not one.

    Integral numbers of any type are accepted: 3, 3.0, numpy.int64(3).
    """
    if not is_number(precision):
        return None
    try:
        whole = int(precision)
    except (OverflowError, ValueError):
        return None
    if whole != precision or whole < 0:
        return None
    return whole


def normalize_precision(precision: Any) -> int:
    """Coerce a precision argument, falling back to DEFAULT_PRECISION.

    Zero is falsy and therefore also falls back to the default.
    """
    return as_precision(precision) or DEFAULT_PRECISION


class dualmethod:
    """Dispatch to one function on the class and another on instances.

    `Duration.convert(1000, "ms", "s")` and `Duration(1, "hr").convert("min")`
    share a name but not a signature.
    """

    def __init__(self, on_class: Callable[..., Any]):
        self._on_class = on_class
        self._on_instance: Callable[..., Any] | None = None

    def instancemethod(self, func: Callable[..., Any]) -> "dualmethod":
        self._on_instance = func
        return self

    def __get__(self, obj: Any, objtype: type | None = None) -> Callable[..., Any]:
        if obj is None or self._on_instance is None:
            return self._on_class
        return self._on_instance.__get__(obj, objtype)
