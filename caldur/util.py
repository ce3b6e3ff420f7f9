"""Utility constants and helpers for caldur.

Time unit constants represent durations in seconds.
Months and years use the mean Gregorian lengths so every duration has a
well-defined total, even though their calendar application varies.
"""

import logging
import warnings
from decimal import Decimal

from caldur.config import get_settings
from caldur.errors import DeprecatedUsageWarning

logger = logging.getLogger(__name__)

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2629746
YEAR = 31556952


def warn_deprecated(message: str, stacklevel: int = 3) -> None:
    """Report use of a deprecated coercion path.

    Emits a DeprecatedUsageWarning so callers can filter or escalate it,
    or raises it outright when strict deprecations are configured.
    """
    logger.debug("deprecated duration usage: %s", message)
    if get_settings().strict_deprecations:
        raise DeprecatedUsageWarning(message)
    warnings.warn(message, DeprecatedUsageWarning, stacklevel=stacklevel)


def format_number(value: int | float) -> str:
    """Render a magnitude without exponent notation or a trailing ``.0``."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)


def is_integral(value: int | float) -> bool:
    return isinstance(value, int) or float(value).is_integer()
