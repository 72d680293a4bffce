"""Search for the most concise unit to express a value in."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from timespan.conversion import convert
from timespan.units import UNITS, resolve

if TYPE_CHECKING:
    from timespan.core import Duration

logger = logging.getLogger(__name__)


def concise(
    n: float,
    unit: Any,
    precision: int | None = None,
    *,
    abbr: bool = True,
) -> Duration:
    """Rescale `n` until it lands in [1, unit.next) for some unit.

    Values below 1 move to finer units and values at or above the unit's
    next factor move to coarser ones. Milliseconds and years are terminal:
    a value is returned as-is once it cannot move any further.

    Only the first move rounds with `precision`; later moves round with the
    default precision. The returned Duration carries `precision` for display.

    Example:
        >>> concise(90, "min").get()
        (1.5, 'hr')
    """
    from timespan.core import Duration

    current = resolve(unit)
    step_precision = precision

    # Every move walks toward one end of the table
    for _ in range(len(UNITS)):
        if n < 1:
            target = current.finer
        elif current.next is not None and n >= current.next:
            target = current.coarser
        else:
            break
        if target is None:
            break

        moved = convert(n, current, target, step_precision)
        logger.debug("concise: %r %s -> %r %s", n, current, moved.duration(), target)
        n, current = moved.duration(), target
        step_precision = None

    return Duration(n, current, precision=precision, abbr=abbr)
