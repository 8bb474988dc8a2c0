"""Fixed string templates for time snapshots.

Each renderer reads the fields it needs from the value passed in, so any
object exposing the ReadableTime attributes can be formatted.

Templates:
    basic     2025-01-01 03:04:05
    pretty    Mon Jan 15 2024 03:45 PM
    extended  Sun Nov 30 07:14:00 +0545 2025

Examples:
    >>> from readable_time import ReadableTime
    >>> t = ReadableTime(2024, 1, 15, 15, 45, 0)
    >>> format_basic(t)
    '2024-01-15 15:45:00'
    >>> format_pretty(t)
    'Mon Jan 15 2024 03:45 PM'
    >>> format_extended(t)
    'Mon Jan 15 15:45:00 +0000 2024'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from readable_time.format.names import month_name, weekday_name
from readable_time.units.hour import get_time_period

if TYPE_CHECKING:
    from readable_time.snapshot import ReadableTime


def format_basic(value: "ReadableTime") -> str:
    """Format as zero-padded ``YYYY-MM-DD HH:MM:SS`` on the 24-hour clock."""
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour_24:02d}:{value.minute:02d}:{value.second:02d}"
    )


def format_pretty(value: "ReadableTime") -> str:
    """Format as ``Dow Mon D YYYY hh:mm AM/PM`` on the 12-hour clock.

    Raises:
        NameLookupError: If the weekday or month index is out of range.
        InvalidHourError: If hour_24 is out of range.
    """
    return (
        f"{weekday_name(value.weekday)} {month_name(value.month)} "
        f"{value.day} {value.year} "
        f"{value.hour_12:02d}:{value.minute:02d} {get_time_period(value.hour_24)}"
    )


def format_extended(value: "ReadableTime") -> str:
    """Format as ``Dow Mon D HH:MM:SS +HHMM YYYY`` with seconds and offset.

    Raises:
        NameLookupError: If the weekday or month index is out of range.
    """
    return (
        f"{weekday_name(value.weekday)} {month_name(value.month)} {value.day} "
        f"{value.hour_24:02d}:{value.minute:02d}:{value.second:02d} "
        f"{value.utc_offset} {value.year}"
    )


__all__ = ["format_basic", "format_pretty", "format_extended"]
