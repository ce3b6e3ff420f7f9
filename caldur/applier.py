"""Apply durations to dates and times.

Components are applied years first. Calendar components with a whole
magnitude step the matching wall-clock field one component at a time
(weeks as seven days), so month-end dates clamp and days follow local
midnight across DST changes. Exact components, and calendar components
with a fractional magnitude, are summed into one offset in seconds that
is added to the instant afterwards: 24 hours is always 86400 seconds,
whatever the wall clock does.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any, TypeAlias
from zoneinfo import ZoneInfo

from caldur.config import get_settings
from caldur.parts import Number, Parts
from caldur.points import adapt, unwrap
from caldur.units import Unit
from caldur.util import is_integral

if TYPE_CHECKING:
    from caldur.duration import Duration

logger = logging.getLogger(__name__)

Clock: TypeAlias = Callable[[], Any]


def system_clock() -> datetime:
    """Current time in the configured default timezone."""
    return datetime.now(ZoneInfo(get_settings().default_timezone))


def apply(parts: Parts, time: Any) -> Any:
    """Return ``time`` moved forward by the given components.

    Raises:
        InvalidArgument: If ``time`` is not a date, datetime or PointInTime.
    """
    point = adapt(time)
    offset: Number = 0

    for unit, magnitude in parts:
        if unit.calendar and is_integral(magnitude):
            if unit is Unit.WEEKS:
                point = point.advance(Unit.DAYS, int(magnitude) * 7)
            else:
                point = point.advance(unit, int(magnitude))
        else:
            offset += magnitude * unit.factor

    # Dates stay dates unless there is an exact offset to add
    if offset:
        point = point.add_seconds(offset)

    logger.debug("applied %s to %r", parts, time)
    return unwrap(point)


def since(
    duration: "Duration", time: Any = None, *, clock: Clock | None = None
) -> Any:
    """Return the point ``duration`` after ``time`` (default: now)."""
    if time is None:
        time = (clock or system_clock)()
    return apply(duration.parts, time)


def ago(duration: "Duration", time: Any = None, *, clock: Clock | None = None) -> Any:
    """Return the point ``duration`` before ``time`` (default: now)."""
    return since(-duration, time, clock=clock)


after = since
before = ago
from_now = since
