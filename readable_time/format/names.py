"""Weekday and month name lookup.

Names are the fixed three-letter English abbreviations; nothing here is
locale-dependent.
"""

from __future__ import annotations

from readable_time._internal.constants import (
    MONTH_ABBREVIATIONS,
    WEEKDAY_ABBREVIATIONS,
)
from readable_time.errors import NameLookupError


def weekday_name(weekday: int) -> str:
    """Return the abbreviation for a weekday index (Sunday = 0).

    Raises:
        NameLookupError: If weekday is not in 0-6.

    Examples:
        >>> weekday_name(0)
        'Sun'
        >>> weekday_name(6)
        'Sat'
    """
    if isinstance(weekday, bool) or not isinstance(weekday, int) or not (0 <= weekday <= 6):
        raise NameLookupError(
            f"invalid day of week {weekday!r}. only 0-6 are valid days"
        )
    return WEEKDAY_ABBREVIATIONS[weekday]


def month_name(month: int) -> str:
    """Return the abbreviation for a month (1-12).

    Raises:
        NameLookupError: If month is not in 1-12.

    Examples:
        >>> month_name(1)
        'Jan'
        >>> month_name(12)
        'Dec'
    """
    if isinstance(month, bool) or not isinstance(month, int) or not (1 <= month <= 12):
        raise NameLookupError(f"invalid month {month!r}. month should be 1-12")
    return MONTH_ABBREVIATIONS[month - 1]


__all__ = ["weekday_name", "month_name"]
