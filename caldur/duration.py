"""The Duration value type and its unit constructors.

A Duration keeps its calendar structure (``1 month`` is not ``30 days``)
alongside a scalar total in seconds. Arithmetic between durations merges
components; comparison and ``==`` use the scalar total.

Plain numbers are accepted wherever a duration is and are read as seconds,
but that path is deprecated and reported with DeprecatedUsageWarning:

    >>> minutes(1) + 30  # warns, prefer minutes(1) + seconds(30)
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from numbers import Real
from typing import Any

from caldur import applier
from caldur.applier import Clock
from caldur.iso8601 import format_iso8601, parse_iso8601
from caldur.parts import Component, Number, Parts, merge, scalar_of
from caldur.points import is_point
from caldur.sentence import Connectors, inspect_parts
from caldur.units import ORDER, Unit
from caldur.util import warn_deprecated


def _is_number(value: Any) -> bool:
    return isinstance(value, Real)


def _divide(magnitude: Number, divisor: Number) -> Number:
    if (
        isinstance(magnitude, int)
        and isinstance(divisor, int)
        and magnitude % divisor == 0
    ):
        return magnitude // divisor
    return magnitude / divisor


@dataclass(frozen=True, eq=False, repr=False)
class Duration:
    parts: Parts = ()
    value: Number = field(init=False)

    def __post_init__(self) -> None:
        parts = merge((Unit.coerce(unit), magnitude) for unit, magnitude in self.parts)
        object.__setattr__(self, "parts", parts)
        object.__setattr__(self, "value", scalar_of(parts))

    # Construction

    @classmethod
    def from_unit(cls, unit: Unit | str, magnitude: Number) -> "Duration":
        return cls(((Unit.coerce(unit), magnitude),))

    @classmethod
    def build(cls, value: Number) -> "Duration":
        """Decompose a number of seconds into the largest whole units.

        Uses the fixed unit lengths (a month is 2629746 seconds), so the
        result has the same total as ``value`` but reads naturally:

            >>> Duration.build(3700).inspect()
            '1 hour, 1 minute, and 40 seconds'
        """
        sign = -1 if value < 0 else 1
        remainder = abs(value)
        components: list[Component] = []
        for unit in ORDER[:-1]:
            count, remainder = divmod(remainder, unit.factor)
            components.append((unit, sign * int(count)))
        if isinstance(remainder, float):
            remainder = round(remainder, 9)
        components.append((Unit.SECONDS, sign * remainder))
        return cls(tuple(components))

    @classmethod
    def parse(cls, text: str) -> "Duration":
        """Create a Duration from an ISO 8601 string such as ``P1Y2M3DT4H``.

        Raises:
            ParsingError: If ``text`` is not a valid ISO 8601 duration.
        """
        return cls(parse_iso8601(text))

    def _from_number(
        self, number: Number, operation: str, stacklevel: int = 4
    ) -> "Duration":
        warn_deprecated(
            f"Implicit conversion of {number!r} to seconds in Duration {operation} "
            f"is deprecated.\n"
            f"Hint: Wrap the number in a unit: seconds({number!r})",
            stacklevel=stacklevel,
        )
        return Duration(((Unit.SECONDS, number),))

    # Arithmetic

    def __add__(self, other: Any) -> "Duration":
        if isinstance(other, Duration):
            return Duration(self.parts + other.parts)
        if _is_number(other):
            return Duration(self.parts + self._from_number(other, "addition").parts)
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        if is_point(other):
            return self.since(other)
        if _is_number(other):
            return self._from_number(other, "addition") + self
        return NotImplemented

    def __sub__(self, other: Any) -> "Duration":
        if isinstance(other, Duration):
            return self + (-other)
        if _is_number(other):
            return self + (-self._from_number(other, "subtraction"))
        return NotImplemented

    def __rsub__(self, other: Any) -> Any:
        if is_point(other):
            return self.ago(other)
        if _is_number(other):
            return self._from_number(other, "subtraction") + (-self)
        return NotImplemented

    def __neg__(self) -> "Duration":
        return Duration(tuple((unit, -magnitude) for unit, magnitude in self.parts))

    def __pos__(self) -> "Duration":
        return self

    def __abs__(self) -> "Duration":
        return -self if self.value < 0 else self

    def __mul__(self, other: Any) -> "Duration | Number":
        if isinstance(other, Duration):
            warn_deprecated(
                "Multiplying a Duration by a Duration is deprecated and returns "
                "the product of their totals in seconds.\n"
                "Hint: Multiply by a plain number: days(1) * 7"
            )
            return self.value * other.value
        if _is_number(other):
            return Duration(tuple((unit, m * other) for unit, m in self.parts))
        return NotImplemented

    def __rmul__(self, other: Any) -> "Duration":
        if _is_number(other):
            warn_deprecated(
                f"Multiplying {other!r} by a Duration relies on implicit "
                f"coercion and is deprecated.\n"
                f"Hint: Put the Duration first: duration * {other!r}"
            )
            return Duration(tuple((unit, other * m) for unit, m in self.parts))
        return NotImplemented

    def __truediv__(self, other: Any) -> "Duration | Number":
        if isinstance(other, Duration):
            warn_deprecated(
                "Dividing a Duration by a Duration is deprecated and returns "
                "the ratio of their totals in seconds.\n"
                "Hint: Compare totals explicitly: a.in_seconds() / b.in_seconds()"
            )
            return self.value / other.value
        if _is_number(other):
            return Duration(tuple((unit, _divide(m, other)) for unit, m in self.parts))
        return NotImplemented

    def __rtruediv__(self, other: Any) -> Number:
        if _is_number(other):
            warn_deprecated(
                f"Dividing {other!r} by a Duration relies on implicit coercion "
                f"and is deprecated.\n"
                f"Hint: Divide by the total explicitly: {other!r} / d.in_seconds()"
            )
            return other / self.value
        return NotImplemented

    def __mod__(self, other: Any) -> "Duration":
        if isinstance(other, Duration):
            return Duration.build(self.value % other.value)
        if _is_number(other):
            return Duration.build(self.value % self._from_number(other, "modulo").value)
        return NotImplemented

    # Comparison

    def _comparable(self, other: Any) -> Number | None:
        if isinstance(other, Duration):
            return other.value
        if _is_number(other):
            self._from_number(other, "comparison", stacklevel=5)
            return other
        return None

    def compare(self, other: "Duration | Number") -> int:
        """Return -1, 0 or 1 as this duration is shorter, equal or longer."""
        value = self._comparable(other)
        if value is None:
            raise TypeError(
                f"Cannot compare Duration with {type(other).__name__!r}.\n"
                f"Hint: Compare with another Duration: minutes(1).compare(seconds(90))"
            )
        return (self.value > value) - (self.value < value)

    def __lt__(self, other: Any) -> bool:
        value = self._comparable(other)
        return NotImplemented if value is None else self.value < value

    def __le__(self, other: Any) -> bool:
        value = self._comparable(other)
        return NotImplemented if value is None else self.value <= value

    def __gt__(self, other: Any) -> bool:
        value = self._comparable(other)
        return NotImplemented if value is None else self.value > value

    def __ge__(self, other: Any) -> bool:
        value = self._comparable(other)
        return NotImplemented if value is None else self.value >= value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Duration):
            return self.value == other.value
        if _is_number(other):
            return self.value == other
        return NotImplemented

    def eql(self, other: object) -> bool:
        """Strict equality: only another Duration with the same total.

        ``minutes(1).eql(seconds(60))`` is true while ``minutes(1).eql(60)``
        is not.
        """
        return isinstance(other, Duration) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    # Conversion

    def is_zero(self) -> bool:
        return self.value == 0

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return int(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def in_seconds(self) -> Number:
        return self.value

    def in_minutes(self) -> float:
        return self.value / Unit.MINUTES.factor

    def in_hours(self) -> float:
        return self.value / Unit.HOURS.factor

    def in_days(self) -> float:
        return self.value / Unit.DAYS.factor

    def in_weeks(self) -> float:
        return self.value / Unit.WEEKS.factor

    def in_months(self) -> float:
        return self.value / Unit.MONTHS.factor

    def in_years(self) -> float:
        return self.value / Unit.YEARS.factor

    def as_json(self) -> Number:
        return self.value

    def to_json(self) -> str:
        return json.dumps(self.value)

    # Application to times

    def since(self, time: Any = None, *, clock: Clock | None = None) -> Any:
        """Return the time this duration after ``time`` (default: now).

        Example:
            >>> months(1).since(date(2016, 1, 31))
            datetime.date(2016, 2, 29)
        """
        return applier.since(self, time, clock=clock)

    def ago(self, time: Any = None, *, clock: Clock | None = None) -> Any:
        """Return the time this duration before ``time`` (default: now)."""
        return applier.ago(self, time, clock=clock)

    after = since
    from_now = since
    before = ago

    # Text

    def iso8601(self, precision: int | None = None) -> str:
        return format_iso8601(self.parts, precision)

    def inspect(
        self, *, locale: str | None = None, connectors: Connectors | None = None
    ) -> str:
        return inspect_parts(self.parts, locale=locale, connectors=connectors)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"<Duration {self.inspect(locale='en')}>"


def seconds(n: Number = 1) -> Duration:
    return Duration.from_unit(Unit.SECONDS, n)


def minutes(n: Number = 1) -> Duration:
    return Duration.from_unit(Unit.MINUTES, n)


def hours(n: Number = 1) -> Duration:
    return Duration.from_unit(Unit.HOURS, n)


def days(n: Number = 1) -> Duration:
    return Duration.from_unit(Unit.DAYS, n)


def weeks(n: Number = 1) -> Duration:
    return Duration.from_unit(Unit.WEEKS, n)


def fortnights(n: Number = 1) -> Duration:
    return Duration.from_unit(Unit.WEEKS, n * 2)


def months(n: Number = 1) -> Duration:
    return Duration.from_unit(Unit.MONTHS, n)


def years(n: Number = 1) -> Duration:
    return Duration.from_unit(Unit.YEARS, n)


second = seconds
minute = minutes
hour = hours
day = days
week = weeks
fortnight = fortnights
month = months
year = years


def parse(text: str) -> Duration:
    """Shortcut for ``Duration.parse``."""
    return Duration.parse(text)


def from_parts(components: Iterable[tuple[Unit | str, Number]]) -> Duration:
    """Build a Duration from ``(unit, magnitude)`` pairs in any order."""
    return Duration(tuple(components))
