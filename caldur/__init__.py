from .applier import after, ago, before, from_now, since, system_clock
from .config import Settings, get_settings, reset_settings
from .duration import (
    Duration,
    day,
    days,
    fortnight,
    fortnights,
    from_parts,
    hour,
    hours,
    minute,
    minutes,
    month,
    months,
    parse,
    second,
    seconds,
    week,
    weeks,
    year,
    years,
)
from .errors import CaldurError, DeprecatedUsageWarning, InvalidArgument, ParsingError
from .points import DatePoint, DateTimePoint, PointInTime
from .sentence import Connectors, register_connectors
from .units import Unit
from .util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR

__all__ = [
    "Duration",
    "Unit",
    "PointInTime",
    "DatePoint",
    "DateTimePoint",
    "Connectors",
    "Settings",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "fortnights",
    "months",
    "years",
    "second",
    "minute",
    "hour",
    "day",
    "week",
    "fortnight",
    "month",
    "year",
    "parse",
    "from_parts",
    "since",
    "ago",
    "after",
    "before",
    "from_now",
    "system_clock",
    "register_connectors",
    "get_settings",
    "reset_settings",
    "CaldurError",
    "ParsingError",
    "InvalidArgument",
    "DeprecatedUsageWarning",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]
