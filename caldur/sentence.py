"""Human-readable rendering of durations ("10 years, 2 months, and 1 day").

Connector words are looked up per locale from a small registry rather than
a translation store. Register additional locales with
``register_connectors``.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace

from caldur.config import get_settings
from caldur.parts import Parts
from caldur.util import format_number


@dataclass(frozen=True, kw_only=True)
class Connectors:
    words: str = ", "
    two_words: str = " and "
    last_word: str = ", and "


_REGISTRY: dict[str, Connectors] = {"en": Connectors()}


def register_connectors(locale: str, **overrides: str) -> Connectors:
    """Register connectors for a locale, starting from the English defaults.

    Example:
        >>> register_connectors("de", last_word=" und ")
        >>> (years(10) + months(1) + days(1)).inspect(locale="de")
        '10 years, 1 month und 1 day'
    """
    connectors = replace(Connectors(), **overrides)
    _REGISTRY[locale] = connectors
    return connectors


def connectors_for(locale: str | None = None) -> Connectors:
    """Return connectors for ``locale`` (default: configured locale).

    Unknown locales fall back to English.
    """
    if locale is None:
        locale = get_settings().locale
    return _REGISTRY.get(locale, _REGISTRY["en"])


def to_sentence(words: Sequence[str], connectors: Connectors) -> str:
    if len(words) == 0:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]}{connectors.two_words}{words[1]}"
    return f"{connectors.words.join(words[:-1])}{connectors.last_word}{words[-1]}"


def inspect_parts(
    parts: Parts,
    *,
    locale: str | None = None,
    connectors: Connectors | None = None,
) -> str:
    words = [
        f"{format_number(magnitude)} "
        f"{unit.singular if magnitude == 1 else unit.plural}"
        for unit, magnitude in parts
    ]
    return to_sentence(words, connectors or connectors_for(locale))
