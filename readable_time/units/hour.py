"""Hour-of-day conversions.

This module converts 24-hour clock values to the 12-hour clock and
reports the AM/PM period. Both functions take a bare hour and do not
need a snapshot.
"""

from __future__ import annotations

from readable_time.errors import InvalidHourError


def _check_hour(hour_24: int) -> None:
    if isinstance(hour_24, bool) or not isinstance(hour_24, int):
        raise InvalidHourError(
            f"hour must be an integer, got {type(hour_24).__name__}"
        )
    if not (0 <= hour_24 <= 23):
        raise InvalidHourError(
            f"invalid hour. hour should be in 0-23 format, got {hour_24}"
        )


def to_hour_12(hour_24: int) -> int:
    """Convert a 24-hour clock value to the 12-hour clock.

    Midnight (0) becomes 12 and afternoon hours 13-23 wrap to 1-11.
    Hours 1-12 are unchanged.

    Args:
        hour_24: Hour of day (0-23).

    Returns:
        Hour on the 12-hour clock (1-12).

    Raises:
        InvalidHourError: If hour_24 is not an integer in 0-23.

    Examples:
        >>> to_hour_12(0)
        12
        >>> to_hour_12(13)
        1
        >>> to_hour_12(12)
        12
    """
    _check_hour(hour_24)
    if hour_24 == 0:
        return 12
    if hour_24 > 12:
        return hour_24 - 12
    return hour_24


def get_time_period(hour_24: int) -> str:
    """Return "AM" for hours 0-11 and "PM" for hours 12-23.

    Raises:
        InvalidHourError: If hour_24 is not an integer in 0-23.

    Examples:
        >>> get_time_period(0)
        'AM'
        >>> get_time_period(12)
        'PM'
    """
    _check_hour(hour_24)
    return "AM" if hour_24 < 12 else "PM"


__all__ = ["to_hour_12", "get_time_period"]
