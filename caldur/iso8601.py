"""ISO 8601 duration parsing and formatting.

Accepted grammar::

    [+-]P[nY][nM][nW][nD][T[nH][nM][nS]]

Each ``n`` may carry its own sign (as PostgreSQL intervals do) and a
fractional part separated by ``.`` or ``,``. Only the last non-zero
component may be fractional, and weeks cannot be combined with other date
components.
"""

import logging
import re
from typing import Literal

from caldur.errors import ParsingError
from caldur.parts import Component, Number, Parts, merge
from caldur.units import ORDER, Unit
from caldur.util import format_number, is_integral

logger = logging.getLogger(__name__)

_NUMBER = r"([+-]?[0-9]+(?:[.,][0-9]+)?)"
_DATE_COMPONENT = re.compile(_NUMBER + r"([YMWD])", re.ASCII)
_TIME_COMPONENT = re.compile(_NUMBER + r"([HMS])", re.ASCII)

_DATE_UNITS = {"Y": Unit.YEARS, "M": Unit.MONTHS, "W": Unit.WEEKS, "D": Unit.DAYS}
_TIME_UNITS = {"H": Unit.HOURS, "M": Unit.MINUTES, "S": Unit.SECONDS}

_DESIGNATORS = {
    Unit.YEARS: "Y",
    Unit.MONTHS: "M",
    Unit.WEEKS: "W",
    Unit.DAYS: "D",
    Unit.HOURS: "H",
    Unit.MINUTES: "M",
    Unit.SECONDS: "S",
}


class ISO8601Parser:
    """Scan an ISO 8601 duration string into components.

    The scanner moves through three modes: ``sign`` (optional leading sign
    and the mandatory ``P``), ``date`` (date components or the ``T``
    marker) and ``time`` (time components).
    """

    def __init__(self, text: str):
        self.text: str = text
        self.pos: int = 0
        self.sign: int = 1
        self.mode: Literal["sign", "date", "time"] = "sign"
        self.components: list[Component] = []

    def parse(self) -> Parts:
        if not isinstance(self.text, str):
            raise ParsingError(self.text, "(expected a string)")

        self._scan_sign()
        while self.pos < len(self.text):
            if self.mode == "date":
                if self.text.startswith("T", self.pos):
                    self.pos += 1
                    self.mode = "time"
                else:
                    self._scan_component(_DATE_COMPONENT, _DATE_UNITS)
            else:
                self._scan_component(_TIME_COMPONENT, _TIME_UNITS)

        self._validate()
        return merge(self.components)

    def _fail(self, reason: str) -> ParsingError:
        logger.debug("rejected duration %r: %s", self.text, reason)
        return ParsingError(self.text, reason)

    def _scan_sign(self) -> None:
        if self.text[:1] in ("+", "-"):
            self.sign = -1 if self.text[0] == "-" else 1
            self.pos = 1
        if not self.text.startswith("P", self.pos):
            raise self._fail("(expected 'P' designator)")
        self.pos += 1
        self.mode = "date"

    def _scan_component(
        self, pattern: re.Pattern[str], units: dict[str, Unit]
    ) -> None:
        match = pattern.match(self.text, self.pos)
        if match is None:
            raise self._fail(f"(unexpected {self.text[self.pos:]!r})")

        unit = units[match.group(2)]
        if self.components and self.components[-1][0].rank >= unit.rank:
            raise self._fail(f"({match.group(0)!r} is out of order or repeated)")

        self.components.append((unit, self.sign * _parse_number(match.group(1))))
        self.pos = match.end()

    def _validate(self) -> None:
        units = [unit for unit, _ in self.components]
        if not units:
            raise self._fail("(is empty duration)")

        if Unit.WEEKS in units and any(
            u in units for u in (Unit.YEARS, Unit.MONTHS, Unit.DAYS)
        ):
            raise self._fail("(mixing weeks with other date parts not allowed)")

        if self.mode == "time" and not any(not u.calendar for u in units):
            raise self._fail("(time part marker is present but time part is empty)")

        nonzero = [magnitude for _, magnitude in self.components if magnitude != 0]
        fractions = [m for m in nonzero if m % 1 != 0]
        if fractions and (len(fractions) > 1 or nonzero[-1] % 1 == 0):
            raise self._fail("(only last part can be fractional)")


def _parse_number(text: str) -> Number:
    text = text.replace(",", ".")
    if "." in text:
        return float(text)
    return int(text)


def parse_iso8601(text: str) -> Parts:
    """Parse an ISO 8601 duration string into merged components.

    Raises:
        ParsingError: If ``text`` is not a valid duration.
    """
    return ISO8601Parser(text).parse()


def _into_seconds(values: dict[Unit, Number], unit: Unit) -> None:
    if unit in values:
        values[Unit.SECONDS] = (
            values.get(Unit.SECONDS, 0) + values.pop(unit) * unit.factor
        )


def _fractions_last(values: dict[Unit, Number]) -> bool:
    magnitudes = [values[unit] for unit in ORDER if values.get(unit)]
    fractions = [m for m in magnitudes if not is_integral(m)]
    return not fractions or (len(fractions) == 1 and fractions[0] == magnitudes[-1])


def _parseable(values: dict[Unit, Number]) -> dict[Unit, Number]:
    """Rewrite components so the output parses back to the same time.

    Fractional calendar magnitudes are applied as exact seconds, so moving
    them into the seconds field keeps their meaning. Weeks next to other
    date parts fold into days only when both are whole.
    """
    values = dict(values)
    if Unit.WEEKS in values and len(values.keys() & _DATE_UNITS.values()) > 1:
        for unit in (Unit.WEEKS, Unit.DAYS):
            if not is_integral(values.get(unit, 0)):
                _into_seconds(values, unit)
        if Unit.WEEKS in values:
            values[Unit.DAYS] = values.get(Unit.DAYS, 0) + values.pop(Unit.WEEKS) * 7

    if not _fractions_last(values):
        for unit in ORDER[:-1]:
            if not unit.calendar or not is_integral(values.get(unit, 0)):
                _into_seconds(values, unit)
    return {unit: m for unit, m in values.items() if m != 0}


def format_iso8601(parts: Parts, precision: int | None = None) -> str:
    """Render components as an ISO 8601 duration string.

    When every component is negative the result carries a single leading
    ``-``; mixed signs are kept per component (``P1Y-1DT-1S``). The output
    always parses back to a duration that lands on the same time:

        >>> format_iso8601(((Unit.DAYS, 1.5), (Unit.HOURS, 1)))
        'PT133200S'

    Args:
        parts: Components in canonical order
        precision: Fractional digits for seconds. ``None`` keeps the value
            as is, trimming trailing zeros; an integer rounds and pads.
    """
    values = _parseable({unit: m for unit, m in parts if m != 0})
    if not values:
        return "PT0S"

    sign = ""
    if all(m < 0 for m in values.values()):
        sign = "-"
        values = {unit: -m for unit, m in values.items()}

    date = "".join(
        f"{format_number(values[unit])}{_DESIGNATORS[unit]}"
        for unit in (Unit.YEARS, Unit.MONTHS, Unit.WEEKS, Unit.DAYS)
        if values.get(unit)
    )
    time = "".join(
        f"{format_number(values[unit])}{_DESIGNATORS[unit]}"
        for unit in (Unit.HOURS, Unit.MINUTES)
        if values.get(unit)
    )
    if Unit.SECONDS in values:
        time += f"{_format_seconds(values[Unit.SECONDS], precision)}S"
    if not date and not time:
        return "PT0S"

    output = f"P{date}"
    if time:
        output += f"T{time}"
    return f"{sign}{output}"


def _format_seconds(value: Number, precision: int | None) -> str:
    if precision is None:
        return format_number(value)
    return f"{value:.{precision}f}"
