"""Canonical component lists for durations.

A component is a ``(Unit, magnitude)`` pair. Merging sums magnitudes per
unit, orders them years first and drops zeros, but always leaves at least
one component so formatted output is never empty.
"""

from collections.abc import Iterable
from typing import TypeAlias

from caldur.units import ORDER, Unit

Number: TypeAlias = int | float
Component: TypeAlias = tuple[Unit, Number]
Parts: TypeAlias = tuple[Component, ...]

ZERO: Parts = ((Unit.SECONDS, 0),)


def merge(components: Iterable[Component]) -> Parts:
    """Sum magnitudes sharing a unit and return them in canonical order."""
    totals: dict[Unit, Number] = {}
    for unit, magnitude in components:
        totals[unit] = totals.get(unit, 0) + magnitude

    merged = tuple(
        (unit, totals[unit]) for unit in ORDER if totals.get(unit, 0) != 0
    )
    return merged or ZERO


def scalar_of(components: Iterable[Component]) -> Number:
    """Total exact-seconds value of the components."""
    return sum(magnitude * unit.factor for unit, magnitude in components)
