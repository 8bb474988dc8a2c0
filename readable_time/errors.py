"""readable_time exception hierarchy.

All readable_time-specific exceptions inherit from ReadableTimeError.
"""

from __future__ import annotations


class ReadableTimeError(Exception):
    """Base exception for all readable_time errors."""

    pass


class ClockError(ReadableTimeError):
    """The system clock could not be read.

    Raised when the platform time API fails or when the local UTC
    offset cannot be determined.

    Examples:
        - localtime() rejects the epoch value
        - The platform does not report tm_gmtoff
        - Running on a non-POSIX platform
    """

    pass


class ValidationError(ReadableTimeError):
    """Invalid input values.

    Raised when a calendar or clock field is out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Minute value outside 0-59
    """

    pass


class InvalidHourError(ValidationError):
    """An hour outside 0-23 was passed to an hour helper."""

    pass


class NameLookupError(ReadableTimeError):
    """A weekday or month index has no name.

    A snapshot built by the constructor never triggers this; it signals
    a broken internal invariant rather than bad user input.
    """

    pass


class OffsetError(ReadableTimeError):
    """Invalid UTC offset.

    Examples:
        - Offset outside -24h to +24h
        - Negative minute component
    """

    pass


__all__ = [
    "ReadableTimeError",
    "ClockError",
    "ValidationError",
    "InvalidHourError",
    "NameLookupError",
    "OffsetError",
]
