"""The fixed table of supported time units.

Each unit knows the factor that takes it to the next coarser unit. Every
conversion in the library walks this table; months and years use average
lengths rather than calendar arithmetic.
"""

import logging
from dataclasses import dataclass
from typing import Any

from timespan.util import DEFAULT_UNIT

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Unit:
    full: str
    abbr: str
    rank: int
    next: float | None

    @property
    def finer(self) -> "Unit | None":
        return UNITS[self.rank - 1] if self.rank > 0 else None

    @property
    def coarser(self) -> "Unit | None":
        return UNITS[self.rank + 1] if self.rank < len(UNITS) - 1 else None

    def name_for(self, abbr: bool) -> str:
        return self.abbr if abbr else self.full

    def __str__(self) -> str:
        return self.abbr


MILLISECOND = Unit(full="millisecond", abbr="ms", rank=0, next=1000)
SECOND = Unit(full="second", abbr="s", rank=1, next=60)
MINUTE = Unit(full="minute", abbr="min", rank=2, next=60)
HOUR = Unit(full="hour", abbr="hr", rank=3, next=24)
DAY = Unit(full="day", abbr="day", rank=4, next=7)
WEEK = Unit(full="week", abbr="wk", rank=5, next=4.345238)
MONTH = Unit(full="month", abbr="mo", rank=6, next=12)
YEAR = Unit(full="year", abbr="yr", rank=7, next=None)

UNITS: tuple[Unit, ...] = (
    MILLISECOND,
    SECOND,
    MINUTE,
    HOUR,
    DAY,
    WEEK,
    MONTH,
    YEAR,
)

_BY_NAME: dict[str, Unit] = {}
for _unit in UNITS:
    _BY_NAME[_unit.abbr] = _unit
    _BY_NAME[_unit.full] = _unit
    _BY_NAME[_unit.full + "s"] = _unit
del _unit


def _milliseconds_per_unit() -> dict[str, float]:
    table: dict[str, float] = {}
    factor: float = 1
    for unit in UNITS:
        table[unit.abbr] = factor
        if unit.next is not None:
            factor *= unit.next
    return table


# Derived from UNITS; milliseconds in one of each unit
MILLISECONDS: dict[str, float] = _milliseconds_per_unit()


def lookup(ident: Any) -> Unit | None:
    """Find a unit by Unit instance, rank, abbreviation or full name.

    Returns None when the identifier is not recognized.
    """
    if isinstance(ident, Unit):
        return ident
    if isinstance(ident, bool):
        return None
    if isinstance(ident, int):
        return UNITS[ident] if 0 <= ident < len(UNITS) else None
    if isinstance(ident, str):
        return _BY_NAME.get(ident.strip().lower())
    return None


def resolve(ident: Any, default: str = DEFAULT_UNIT) -> Unit:
    """Like lookup(), but unrecognized identifiers fall back to `default`."""
    unit = lookup(ident)
    if unit is None:
        logger.debug("Unrecognized unit %r, using %r", ident, default)
        unit = _BY_NAME[default]
    return unit
