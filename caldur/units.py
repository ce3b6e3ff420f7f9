from enum import Enum

from caldur.util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR


class Unit(Enum):
    """A duration unit with its seconds factor and application semantics.

    Calendar units shift wall-clock date fields when applied to a time;
    exact units add a fixed number of seconds to the instant.
    """

    YEARS = ("years", YEAR, True)
    MONTHS = ("months", MONTH, True)
    WEEKS = ("weeks", WEEK, True)
    DAYS = ("days", DAY, True)
    HOURS = ("hours", HOUR, False)
    MINUTES = ("minutes", MINUTE, False)
    SECONDS = ("seconds", SECOND, False)

    def __init__(self, plural: str, factor: int, calendar: bool):
        self.plural: str = plural
        self.factor: int = factor
        self.calendar: bool = calendar

    @property
    def singular(self) -> str:
        return self.plural[:-1]

    @property
    def rank(self) -> int:
        """Position in canonical order (years first, seconds last)."""
        return ORDER.index(self)

    @classmethod
    def coerce(cls, unit: "Unit | str") -> "Unit":
        """Accept a Unit or its name ("days", "day", "DAYS")."""
        if isinstance(unit, Unit):
            return unit
        name = unit.lower()
        for member in cls:
            if name in (member.plural, member.singular):
                return member
        valid = ", ".join(m.plural for m in cls)
        raise ValueError(f"Invalid unit '{unit}'. Valid units: {valid}")


ORDER: tuple[Unit, ...] = tuple(Unit)
CALENDAR_UNITS: tuple[Unit, ...] = tuple(u for u in ORDER if u.calendar)
EXACT_UNITS: tuple[Unit, ...] = tuple(u for u in ORDER if not u.calendar)
