"""readable_time: a lightweight helper for human-readable local time.

readable_time reads the system clock once and exposes the result as a
ReadableTime snapshot with convenience fields and preformatted strings.

Core Types:
    ReadableTime: Immutable calendar fields for one clock reading
    UtcOffset: Signed fixed offset from UTC

Clocks:
    SystemClock: Operating system clock (POSIX only)
    FixedClock: Constant reading, for tests
    ClockReading: Epoch seconds, offset and zone name from one read

Functions:
    get_readable_time: Snapshot of the current local time
    time_since_epoch: Whole seconds since the Unix epoch
    to_hour_12: 24-hour to 12-hour conversion
    get_time_period: "AM" or "PM" for a 24-hour value
    format_basic, format_pretty, format_extended: Fixed renderers
    weekday_name, month_name: Three-letter abbreviations
    is_leap_year, days_in_month: Gregorian calendar helpers

Exceptions:
    ReadableTimeError: Base exception
    ClockError: The clock could not be read
    ValidationError: Invalid field values
    InvalidHourError: Hour outside 0-23
    NameLookupError: Weekday or month index without a name
    OffsetError: Invalid UTC offset

Example:
    >>> from readable_time import get_readable_time
    >>> rt = get_readable_time()
    >>> rt.get_timef()          # '2025-01-01 03:04:05'
    >>> rt.get_ptimef()         # 'Mon Jan 15 2024 03:45 PM'
    >>> rt.get_extended_ptimef()  # 'Sun Nov 30 07:14:00 +0545 2025'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from readable_time.snapshot import ReadableTime, get_readable_time
from readable_time.units.offset import UtcOffset

# Clocks
from readable_time.clock import (
    ClockReading,
    FixedClock,
    SystemClock,
    time_since_epoch,
)

# Helpers
from readable_time._internal.calendar import days_in_month, is_leap_year
from readable_time.format import (
    format_basic,
    format_extended,
    format_pretty,
    month_name,
    weekday_name,
)
from readable_time.units.hour import get_time_period, to_hour_12

# Exceptions
from readable_time.errors import (
    ClockError,
    InvalidHourError,
    NameLookupError,
    OffsetError,
    ReadableTimeError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "ReadableTime",
    "UtcOffset",
    "get_readable_time",
    # Clocks
    "ClockReading",
    "FixedClock",
    "SystemClock",
    "time_since_epoch",
    # Helpers
    "to_hour_12",
    "get_time_period",
    "format_basic",
    "format_pretty",
    "format_extended",
    "weekday_name",
    "month_name",
    "is_leap_year",
    "days_in_month",
    # Exceptions
    "ReadableTimeError",
    "ClockError",
    "ValidationError",
    "InvalidHourError",
    "NameLookupError",
    "OffsetError",
]
