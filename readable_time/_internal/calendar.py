"""Calendar utilities for readable_time.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, ordinal day numbers and the
conversion of Unix epoch seconds into broken-down calendar fields.

Ordinal 1 = 0001-01-01. Weekdays are numbered Sunday = 0 .. Saturday = 6.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import NamedTuple

from readable_time._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    MAX_YEAR,
    MIN_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_EPOCH_ORDINAL,
    UNIX_EPOCH_WEEKDAY,
)

# Days in 400, 100 and 4 year cycles
_DAYS_IN_400_YEARS = 146_097
_DAYS_IN_100_YEARS = 36_524
_DAYS_IN_4_YEARS = 1_461


class CalendarFields(NamedTuple):
    """Broken-down local time for one instant."""

    year: int
    month: int
    day: int
    weekday: int
    hour: int
    minute: int
    second: int


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (0001-01-01 is 1)."""
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    days_before_month = DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        days_before_month += 1

    return days_before_year + days_before_month + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).

    Raises:
        ValueError: If ordinal is before 0001-01-01.
    """
    if ordinal < 1:
        raise ValueError(f"ordinal must be >= 1, got {ordinal}")

    n = ordinal - 1

    n400, n = divmod(n, _DAYS_IN_400_YEARS)
    n100, n = divmod(n, _DAYS_IN_100_YEARS)
    n4, n = divmod(n, _DAYS_IN_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle lands one past the final year
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    doy = n + 1
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (year, month, doy)
        doy -= dim

    raise ValueError(f"Invalid ordinal: {ordinal}")


def weekday_from_days(days_since_epoch: int) -> int:
    """Return the weekday (Sunday = 0) for a day count relative to 1970-01-01."""
    return (days_since_epoch + UNIX_EPOCH_WEEKDAY) % 7


def epoch_to_fields(epoch_seconds: int, offset_seconds: int = 0) -> CalendarFields:
    """Break Unix epoch seconds down into local calendar fields.

    The local wall-clock value is ``epoch_seconds + offset_seconds``; it is
    split into whole days since 1970-01-01 and seconds into the day. Floor
    division keeps instants before the epoch on the correct day.

    Args:
        epoch_seconds: Seconds since 1970-01-01 00:00:00 UTC.
        offset_seconds: Local UTC offset in seconds (east positive).

    Returns:
        CalendarFields for the local time.

    Raises:
        ValueError: If the result falls outside years 1-9999.

    Examples:
        >>> epoch_to_fields(0)
        CalendarFields(year=1970, month=1, day=1, weekday=4, hour=0, minute=0, second=0)
        >>> epoch_to_fields(1705333500, 0).hour
        15
    """
    local_seconds = epoch_seconds + offset_seconds
    days, seconds_of_day = divmod(local_seconds, SECONDS_PER_DAY)

    year, month, day = ordinal_to_ymd(days + UNIX_EPOCH_ORDINAL)
    if year > MAX_YEAR:
        raise ValueError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")

    hour, rest = divmod(seconds_of_day, SECONDS_PER_HOUR)
    minute, second = divmod(rest, SECONDS_PER_MINUTE)

    return CalendarFields(
        year=year,
        month=month,
        day=day,
        weekday=weekday_from_days(days),
        hour=hour,
        minute=minute,
        second=second,
    )


def fields_to_epoch(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    offset_seconds: int = 0,
) -> int:
    """Return the Unix epoch seconds for local calendar fields at an offset."""
    days = ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL
    local_seconds = (
        days * SECONDS_PER_DAY
        + hour * SECONDS_PER_HOUR
        + minute * SECONDS_PER_MINUTE
        + second
    )
    return local_seconds - offset_seconds


__all__ = [
    "CalendarFields",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "weekday_from_days",
    "epoch_to_fields",
    "fields_to_epoch",
]
