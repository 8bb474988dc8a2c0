"""Internal constants for readable_time.

These constants define the limits and lookup tables used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days before each month (cumulative), for non-leap years
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)

# Indexed by weekday, Sunday = 0 (same numbering as struct tm)
WEEKDAY_ABBREVIATIONS: tuple[str, ...] = (
    "Sun",
    "Mon",
    "Tue",
    "Wed",
    "Thu",
    "Fri",
    "Sat",
)

# Indexed by month - 1
MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# Proleptic Gregorian ordinal of 1970-01-01 (0001-01-01 is ordinal 1)
UNIX_EPOCH_ORDINAL: int = 719_163

# 1970-01-01 was a Thursday
UNIX_EPOCH_WEEKDAY: int = 4

# Timezone offset limits (in seconds)
MAX_UTC_OFFSET_SECONDS: int = 24 * SECONDS_PER_HOUR  # +/- 24 hours

MIN_YEAR: int = 1
MAX_YEAR: int = 9999


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "WEEKDAY_ABBREVIATIONS",
    "MONTH_ABBREVIATIONS",
    "UNIX_EPOCH_ORDINAL",
    "UNIX_EPOCH_WEEKDAY",
    "MAX_UTC_OFFSET_SECONDS",
    "MIN_YEAR",
    "MAX_YEAR",
]
