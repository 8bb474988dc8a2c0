"""ReadableTime snapshot of one clock reading.

This module provides the ReadableTime class and the get_readable_time()
constructor that builds one from the current system clock.
"""

from __future__ import annotations

from typing import Optional, Union

from readable_time._internal.calendar import (
    epoch_to_fields,
    fields_to_epoch,
    weekday_from_days,
    ymd_to_ordinal,
)
from readable_time._internal.constants import UNIX_EPOCH_ORDINAL
from readable_time._internal.validation import (
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)
from readable_time.clock import Clock, ClockReading, SystemClock
from readable_time.errors import ClockError, OffsetError, ValidationError
from readable_time.format.names import month_name, weekday_name
from readable_time.format.templates import (
    format_basic,
    format_extended,
    format_pretty,
)
from readable_time.units.hour import get_time_period, to_hour_12
from readable_time.units.offset import UtcOffset


class ReadableTime:
    """Immutable calendar fields for one instant, in local time.

    A ReadableTime holds the year, month, day, weekday, hour, minute and
    second of one instant as seen at a fixed UTC offset, together with the
    epoch-second value they were derived from. The fields cannot be
    reassigned; take a new snapshot to observe a later time.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of month (1-31).
        weekday: The day of week (0-6, Sunday = 0).
        hour_24: The hour on the 24-hour clock (0-23).
        hour_12: The hour on the 12-hour clock (1-12).
        minute: The minute (0-59).
        second: The second (0-59).
        utc_offset: The UtcOffset the fields are expressed in.
        time_zone: Zone abbreviation, or the offset text if none is known.
        epoch_seconds: Seconds since 1970-01-01 00:00:00 UTC.

    Examples:
        >>> t = ReadableTime(2024, 1, 15, 15, 45, 0)
        >>> t.hour_12, t.time_period
        (3, 'PM')
        >>> t.get_ptimef()
        'Mon Jan 15 2024 03:45 PM'

        >>> t = ReadableTime.from_epoch(1764466140, UtcOffset.from_hours(5, 45))
        >>> t.get_extended_ptimef()
        'Sun Nov 30 07:14:00 +0545 2025'
    """

    __slots__ = (
        "_year",
        "_month",
        "_day",
        "_weekday",
        "_hour_24",
        "_minute",
        "_second",
        "_offset",
        "_time_zone",
        "_epoch_seconds",
    )

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour_24: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        offset: Optional[UtcOffset] = None,
        time_zone: Optional[str] = None,
    ) -> None:
        """Create a snapshot from local calendar fields.

        The weekday and epoch seconds are derived from the fields.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day (1-31, depending on month).
            hour_24: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            offset: The UTC offset of the fields. Defaults to UTC.
            time_zone: Zone abbreviation. Defaults to the offset text.

        Raises:
            ValidationError: If any field is out of range.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)
        validate_range("hour_24", hour_24, 0, 23)
        validate_range("minute", minute, 0, 59)
        validate_range("second", second, 0, 59)

        if offset is None:
            offset = UtcOffset.utc()
        elif not isinstance(offset, UtcOffset):
            raise ValidationError(
                f"offset must be a UtcOffset, got {type(offset).__name__}"
            )

        days = ymd_to_ordinal(year, month, day) - UNIX_EPOCH_ORDINAL
        epoch_seconds = fields_to_epoch(
            year, month, day, hour_24, minute, second, offset.total_seconds
        )
        self._set(
            year,
            month,
            day,
            weekday_from_days(days),
            hour_24,
            minute,
            second,
            offset,
            time_zone,
            epoch_seconds,
        )

    def _set(
        self,
        year: int,
        month: int,
        day: int,
        weekday: int,
        hour_24: int,
        minute: int,
        second: int,
        offset: UtcOffset,
        time_zone: Optional[str],
        epoch_seconds: int,
    ) -> None:
        self._year: int = year
        self._month: int = month
        self._day: int = day
        self._weekday: int = weekday
        self._hour_24: int = hour_24
        self._minute: int = minute
        self._second: int = second
        self._offset: UtcOffset = offset
        self._time_zone: str = time_zone if time_zone else str(offset)
        self._epoch_seconds: int = epoch_seconds

    # -------------------------------------------------------------------------
    # Factory methods
    # -------------------------------------------------------------------------

    @classmethod
    def from_epoch(
        cls,
        epoch_seconds: int,
        offset: Union[UtcOffset, int, None] = None,
        time_zone: Optional[str] = None,
    ) -> ReadableTime:
        """Create a snapshot for a known instant without reading the clock.

        Args:
            epoch_seconds: Seconds since 1970-01-01 00:00:00 UTC.
            offset: A UtcOffset or offset in seconds. Defaults to UTC.
            time_zone: Zone abbreviation. Defaults to the offset text.

        Raises:
            ValidationError: If the instant falls outside years 1-9999.
            OffsetError: If offset seconds are out of range.

        Examples:
            >>> ReadableTime.from_epoch(0).get_timef()
            '1970-01-01 00:00:00'
            >>> ReadableTime.from_epoch(0, -18000).get_timef()
            '1969-12-31 19:00:00'
        """
        if isinstance(epoch_seconds, bool) or not isinstance(epoch_seconds, int):
            raise ValidationError(
                f"epoch_seconds must be an integer, got {type(epoch_seconds).__name__}"
            )
        if offset is None:
            offset = UtcOffset.utc()
        elif not isinstance(offset, UtcOffset):
            offset = UtcOffset(offset)

        try:
            fields = epoch_to_fields(epoch_seconds, offset.total_seconds)
        except ValueError as e:
            raise ValidationError(
                f"epoch {epoch_seconds} is outside the supported range: {e}"
            ) from e

        instance = object.__new__(cls)
        instance._set(
            fields.year,
            fields.month,
            fields.day,
            fields.weekday,
            fields.hour,
            fields.minute,
            fields.second,
            offset,
            time_zone,
            epoch_seconds,
        )
        return instance

    @classmethod
    def from_reading(cls, reading: ClockReading) -> ReadableTime:
        """Create a snapshot from a clock reading.

        Raises:
            ClockError: If the reading carries an unusable offset or epoch.
        """
        try:
            offset = UtcOffset(reading.offset_seconds)
            return cls.from_epoch(reading.epoch_seconds, offset, reading.zone_name)
        except (OffsetError, ValidationError) as e:
            raise ClockError(f"unusable clock reading {reading}: {e}") from e

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> ReadableTime:
        """Read the clock and return a new snapshot.

        Args:
            clock: Clock to read. Defaults to the system clock.

        Raises:
            ClockError: If the clock cannot be read.
        """
        if clock is None:
            clock = SystemClock()
        return cls.from_reading(clock.read())

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def weekday(self) -> int:
        """Day of week, Sunday = 0 through Saturday = 6."""
        return self._weekday

    @property
    def weekday_name(self) -> str:
        return weekday_name(self._weekday)

    @property
    def month_name(self) -> str:
        return month_name(self._month)

    @property
    def hour_24(self) -> int:
        return self._hour_24

    @property
    def hour_12(self) -> int:
        return to_hour_12(self._hour_24)

    @property
    def time_period(self) -> str:
        """Return "AM" or "PM"."""
        return get_time_period(self._hour_24)

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def utc_offset(self) -> UtcOffset:
        return self._offset

    @property
    def time_zone(self) -> str:
        return self._time_zone

    @property
    def epoch_seconds(self) -> int:
        return self._epoch_seconds

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def get_timef(self) -> str:
        """Return the basic form, e.g. ``2025-01-01 03:04:05``."""
        return format_basic(self)

    def get_ptimef(self) -> str:
        """Return the pretty form, e.g. ``Mon Jan 15 2024 03:45 PM``."""
        return format_pretty(self)

    def get_extended_ptimef(self) -> str:
        """Return the extended form, e.g. ``Sun Nov 30 07:14:00 +0545 2025``."""
        return format_extended(self)

    @staticmethod
    def weekstr(weekday: int) -> str:
        return weekday_name(weekday)

    @staticmethod
    def monthstr(month: int) -> str:
        return month_name(month)

    @staticmethod
    def get_time_period(hour_24: int) -> str:
        return get_time_period(hour_24)

    # -------------------------------------------------------------------------
    # Comparison and hashing
    # -------------------------------------------------------------------------

    def _key(self) -> tuple[int, int]:
        return (self._epoch_seconds, self._offset.total_seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadableTime):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: ReadableTime) -> bool:
        if not isinstance(other, ReadableTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: ReadableTime) -> bool:
        if not isinstance(other, ReadableTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: ReadableTime) -> bool:
        if not isinstance(other, ReadableTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: ReadableTime) -> bool:
        if not isinstance(other, ReadableTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"ReadableTime({self._year}, {self._month}, {self._day}, "
            f"{self._hour_24}, {self._minute}, {self._second}, "
            f"offset={self._offset!r}, time_zone={self._time_zone!r})"
        )

    def __str__(self) -> str:
        return format_basic(self)


def get_readable_time(clock: Optional[Clock] = None) -> ReadableTime:
    """Read the current time and return it as a ReadableTime.

    Args:
        clock: Clock to read. Defaults to the system clock.

    Returns:
        A snapshot of the local time at the moment of the call.

    Raises:
        ClockError: If the clock cannot be read or reports no offset.

    Examples:
        >>> rt = get_readable_time()
        >>> 1 <= rt.hour_12 <= 12
        True
    """
    return ReadableTime.now(clock)


__all__ = ["ReadableTime", "get_readable_time"]
