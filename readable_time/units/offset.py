"""Fixed UTC offset representation.

This module provides the UtcOffset class: the signed hour/minute
difference between local time and UTC for one clock reading. There is no
timezone database behind it, only the number of seconds.
"""

from __future__ import annotations

from typing import ClassVar

from readable_time._internal.constants import (
    MAX_UTC_OFFSET_SECONDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from readable_time.errors import OffsetError


class UtcOffset:
    """A signed UTC offset.

    The offset is stored in seconds from UTC, with positive values being
    east of UTC (ahead in time) and negative values being west of UTC
    (behind in time). Offsets must lie strictly between -24h and +24h.

    Attributes:
        total_seconds: The offset in seconds.
        sign: "+" or "-".
        hours: Absolute hour component.
        minutes: Absolute minute component.

    Examples:
        >>> off = UtcOffset(20700)
        >>> str(off)
        '+0545'
        >>> off.hours, off.minutes
        (5, 45)

        >>> str(UtcOffset.from_hours(-3, 30))
        '-0330'
    """

    __slots__ = ("_seconds",)

    _utc_instance: ClassVar[UtcOffset | None] = None

    def __init__(self, seconds: int) -> None:
        """Create an offset of the given number of seconds.

        Raises:
            OffsetError: If seconds is not an integer or is out of range.
        """
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise OffsetError(
                f"offset seconds must be an integer, got {type(seconds).__name__}"
            )
        if abs(seconds) >= MAX_UTC_OFFSET_SECONDS:
            raise OffsetError(
                f"offset {seconds} is outside valid range "
                f"(-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS})"
            )
        self._seconds: int = seconds

    @classmethod
    def utc(cls) -> UtcOffset:
        """Return the zero offset (shared instance)."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0)
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> UtcOffset:
        """Create an offset from hours and minutes.

        Args:
            hours: Hour component. Its sign sets the direction.
            minutes: Minute component (0-59), always non-negative.

        Raises:
            OffsetError: If a component is out of range.

        Examples:
            >>> UtcOffset.from_hours(5, 45).total_seconds
            20700
            >>> UtcOffset.from_hours(-5).total_seconds
            -18000
        """
        if isinstance(hours, bool) or not isinstance(hours, int):
            raise OffsetError(f"hours must be an integer, got {type(hours).__name__}")
        if isinstance(minutes, bool) or not isinstance(minutes, int):
            raise OffsetError(
                f"minutes must be an integer, got {type(minutes).__name__}"
            )
        if minutes < 0 or minutes > 59:
            raise OffsetError(f"minutes must be 0-59, got {minutes}")

        magnitude = abs(hours) * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE
        return cls(-magnitude if hours < 0 else magnitude)

    @property
    def total_seconds(self) -> int:
        return self._seconds

    @property
    def sign(self) -> str:
        return "-" if self._seconds < 0 else "+"

    @property
    def hours(self) -> int:
        return abs(self._seconds) // SECONDS_PER_HOUR

    @property
    def minutes(self) -> int:
        # Sub-minute remainders (historical LMT offsets) are dropped
        return (abs(self._seconds) % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE

    @property
    def is_utc(self) -> bool:
        return self._seconds == 0

    def isoformat(self) -> str:
        """Return the offset with a colon, e.g. "+05:45"."""
        return f"{self.sign}{self.hours:02d}:{self.minutes:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self._seconds == other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __repr__(self) -> str:
        return f"UtcOffset({self._seconds})"

    def __str__(self) -> str:
        """Return the compact form used in the extended format, e.g. "+0545"."""
        return f"{self.sign}{self.hours:02d}{self.minutes:02d}"


__all__ = ["UtcOffset"]
