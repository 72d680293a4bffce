from datetime import timedelta
from typing import Any

from dateutil.relativedelta import relativedelta
from typing_extensions import override

from timespan import conversion as _conversion
from timespan import search as _search
from timespan.formatting import humanize, render
from timespan.units import Unit, lookup, resolve
from timespan.util import (
    DEFAULT_PRECISION,
    DEFAULT_SEPARATOR,
    DEFAULT_UNIT,
    as_precision,
    dualmethod,
    is_number,
)

_MISSING: Any = object()


class Duration:
    """A magnitude of time in one unit, with display preferences.

    Conversions never modify a Duration; `to()` and `concise()` return new
    ones. The chainable setters (`unit(s)`, `duration(d)`, `abbr(o)`,
    `precision(p)`) are the only way to change an instance in place.

    Example:
        >>> str(Duration(90, "min").concise())
        '1.5 hrs'
    """

    def __init__(
        self,
        magnitude: float = 1,
        unit: Any = DEFAULT_UNIT,
        *,
        precision: int = DEFAULT_PRECISION,
        abbr: bool = True,
    ):
        self._duration: float = magnitude if is_number(magnitude) else 1
        self._unit: Unit = resolve(unit)
        whole = as_precision(precision)
        self._precision: int = DEFAULT_PRECISION if whole is None else whole
        self._abbr: bool = bool(abbr)

    # Class access: Duration.convert(n, from_unit, to_unit, precision=None)
    convert = dualmethod(_conversion.convert)

    @convert.instancemethod
    def convert(self, unit: Any) -> "Duration":  # noqa: F811
        """Alias of to()."""
        return self.to(unit)

    # Class access: Duration.concise(n, unit, precision=None)
    concise = dualmethod(_search.concise)

    @concise.instancemethod
    def concise(self) -> "Duration":  # noqa: F811
        """Return the most concise equivalent of this duration."""
        return _search.concise(
            self._duration, self._unit, self._precision, abbr=self._abbr
        )

    def to(self, unit: Any) -> "Duration":
        """Return this duration converted to `unit` (hours if unrecognized)."""
        return _conversion.convert(
            self._duration, self._unit, unit, self._precision, abbr=self._abbr
        )

    def unit(self, s: Any = _MISSING) -> Any:
        """Get the unit name, or set the unit and return self.

        The getter returns the abbreviated or full name depending on the
        abbreviation flag. Unrecognized units are ignored by the setter.
        """
        if s is _MISSING:
            return self._unit.name_for(self._abbr)
        unit = lookup(s)
        if unit is not None:
            self._unit = unit
        return self

    def duration(self, d: Any = _MISSING) -> Any:
        if d is _MISSING:
            return self._duration
        if is_number(d):
            self._duration = d
        return self

    def abbr(self, o: Any = _MISSING) -> Any:
        if o is _MISSING:
            return self._abbr
        self._abbr = bool(o)
        return self

    def precision(self, p: Any = _MISSING) -> Any:
        if p is _MISSING:
            return self._precision
        whole = as_precision(p)
        if whole is not None:
            self._precision = whole
        return self

    def get(self) -> tuple[float, str]:
        """Return `(magnitude, unit abbreviation)`."""
        return self._duration, self._unit.abbr

    def to_string(self, sep: str | None = None) -> str:
        """Render as "<magnitude><sep><unit>s", e.g. "24 hrs".

        The unit name is pluralized even for a magnitude of 1.
        """
        sep = sep or DEFAULT_SEPARATOR
        return render(self._duration, self._unit, self._abbr, sep)

    def humanize(self) -> str:
        """Compact rendering with singular units: "1hr", "24hrs", "1 hour"."""
        return humanize(self._duration, self._unit, self._abbr)

    @classmethod
    def _rebuild(cls, d: "Duration") -> "Duration":
        if type(d) is cls:
            return d
        return cls(d._duration, d._unit, precision=d._precision, abbr=d._abbr)

    @classmethod
    def from_timedelta(
        cls, td: timedelta, unit: Any = "ms", precision: int | None = None
    ) -> "Duration":
        from timespan.interop import from_timedelta

        return cls._rebuild(from_timedelta(td, unit, precision))

    def to_timedelta(self) -> timedelta:
        from timespan.interop import to_timedelta

        return to_timedelta(self)

    @classmethod
    def from_relativedelta(
        cls, rd: relativedelta, unit: Any = "ms", precision: int | None = None
    ) -> "Duration":
        from timespan.interop import from_relativedelta

        return cls._rebuild(from_relativedelta(rd, unit, precision))

    def to_relativedelta(self) -> relativedelta:
        from timespan.interop import to_relativedelta

        return to_relativedelta(self)

    @override
    def __str__(self) -> str:
        return self.to_string()

    @override
    def __repr__(self) -> str:
        return f"Duration({self._duration!r}, {self._unit.abbr!r})"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self._duration, self._unit) == (other._duration, other._unit)

    __hash__ = None  # type: ignore[assignment]
