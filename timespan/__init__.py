from .conversion import convert, decimal_round, rescale
from .core import Duration
from .formatting import humanize, pluralize
from .search import concise
from .units import MILLISECONDS, UNITS, Unit, lookup, resolve
from .util import DEFAULT_PRECISION, DEFAULT_SEPARATOR, DEFAULT_UNIT

__all__ = [
    "Duration",
    "Unit",
    "UNITS",
    "MILLISECONDS",
    "convert",
    "concise",
    "rescale",
    "decimal_round",
    "lookup",
    "resolve",
    "pluralize",
    "humanize",
    "DEFAULT_PRECISION",
    "DEFAULT_SEPARATOR",
    "DEFAULT_UNIT",
]
