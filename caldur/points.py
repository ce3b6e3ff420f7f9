"""Point-in-time collaborators that durations are applied to.

Anything with ``advance`` (calendar field stepping) and ``add_seconds``
(exact offset) can be the target of ``Duration.since``/``ago``. Python
``datetime`` and ``date`` values are wrapped in adapters backed by
python-dateutil's ``relativedelta``, which clamps month-end dates
(Jan 31 + 1 month = Feb 28/29) and steps wall-clock fields so that
day arithmetic follows local midnight across DST transitions.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Protocol, runtime_checkable

from dateutil.relativedelta import relativedelta
from typing_extensions import override

from caldur.errors import InvalidArgument
from caldur.units import Unit


@runtime_checkable
class PointInTime(Protocol):
    def advance(self, unit: Unit, amount: int) -> "PointInTime":
        """Step a calendar field (years, months, weeks or days) by ``amount``."""
        ...

    def add_seconds(self, amount: int | float) -> "PointInTime":
        """Move the underlying instant by exactly ``amount`` seconds."""
        ...


def _relative(unit: Unit, amount: int) -> relativedelta:
    if unit is Unit.YEARS:
        return relativedelta(years=amount)
    if unit is Unit.MONTHS:
        return relativedelta(months=amount)
    if unit is Unit.WEEKS:
        return relativedelta(days=amount * 7)
    if unit is Unit.DAYS:
        return relativedelta(days=amount)
    raise ValueError(f"{unit.plural} is not a calendar unit")


class DateTimePoint(PointInTime):
    """Adapter for ``datetime`` values.

    Aware datetimes step calendar fields in wall-clock time (the zone
    supplies the new offset, and a wall time that falls in a DST gap is
    normalized through UTC) and add exact seconds in UTC. Naive datetimes
    have no offset to honour, so both are plain wall-clock arithmetic.
    """

    def __init__(self, value: datetime):
        self.value: datetime = value

    @override
    def advance(self, unit: Unit, amount: int) -> "DateTimePoint":
        stepped = self.value + _relative(unit, amount)
        if stepped.tzinfo is None:
            return DateTimePoint(stepped)
        # Wall times skipped by a spring-forward gap move to the real instant.
        return DateTimePoint(
            stepped.astimezone(timezone.utc).astimezone(stepped.tzinfo)
        )

    @override
    def add_seconds(self, amount: int | float) -> "DateTimePoint":
        delta = timedelta(seconds=amount)
        if self.value.tzinfo is None:
            return DateTimePoint(self.value + delta)
        shifted = self.value.astimezone(timezone.utc) + delta
        return DateTimePoint(shifted.astimezone(self.value.tzinfo))


class DatePoint(PointInTime):
    """Adapter for ``date`` values.

    Adding exact seconds to a date promotes it to a naive datetime at
    midnight.
    """

    def __init__(self, value: date):
        self.value: date = value

    @override
    def advance(self, unit: Unit, amount: int) -> "DatePoint":
        return DatePoint(self.value + _relative(unit, amount))

    @override
    def add_seconds(self, amount: int | float) -> DateTimePoint:
        midnight = datetime.combine(self.value, time.min)
        return DateTimePoint(midnight).add_seconds(amount)


def adapt(value: Any) -> PointInTime:
    """Wrap ``value`` as a PointInTime.

    Raises:
        InvalidArgument: If ``value`` is neither a date, a datetime nor an
            object implementing ``advance`` and ``add_seconds``.
    """
    if isinstance(value, datetime):
        return DateTimePoint(value)
    if isinstance(value, date):
        return DatePoint(value)
    if isinstance(value, PointInTime):
        return value
    raise InvalidArgument(f"expected a time or date, got {value!r}")


def unwrap(point: PointInTime) -> Any:
    """Return the plain value behind an adapter, or the point itself."""
    if isinstance(point, (DateTimePoint, DatePoint)):
        return point.value
    return point


def is_point(value: Any) -> bool:
    return isinstance(value, (date, PointInTime))
