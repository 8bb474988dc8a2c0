"""Clock readings for readable_time.

A clock is any object with a ``read()`` method returning a ClockReading:
whole seconds since the Unix epoch, the local UTC offset in seconds and
the zone abbreviation reported by the platform.

Classes:
    ClockReading: Result of one clock call.
    SystemClock: Reads the operating system clock (POSIX only).
    FixedClock: Always returns the same reading.

Functions:
    time_since_epoch: Whole seconds since 1970-01-01 00:00:00 UTC.

Examples:
    >>> reading = FixedClock(0, offset_seconds=3600, zone_name="CET").read()
    >>> reading.offset_seconds
    3600
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from typing import Optional, Protocol

from readable_time.errors import ClockError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClockReading:
    """One reading of the wall clock."""

    epoch_seconds: int
    offset_seconds: int
    zone_name: Optional[str] = None


class Clock(Protocol):
    def read(self) -> ClockReading: ...


def time_since_epoch() -> int:
    """Return whole seconds since the Unix epoch.

    Raises:
        ClockError: If the system clock is set before 1970-01-01.
    """
    seconds = time.time()
    if seconds < 0:
        raise ClockError(f"system clock is before the Unix epoch: {seconds}")
    return int(seconds)


class SystemClock:
    """Clock backed by the operating system.

    The epoch value comes from ``time.time()`` and the offset and zone
    abbreviation from ``time.localtime()`` for that same second, so the
    three always describe one instant. Only POSIX platforms report
    ``tm_gmtoff``; anything else is rejected.
    """

    __slots__ = ()

    def read(self) -> ClockReading:
        """Read the current time.

        Raises:
            ClockError: If the platform is unsupported, the clock call
                fails, or the UTC offset cannot be determined.
        """
        if os.name != "posix":
            raise ClockError(
                f"unsupported platform {os.name!r}: only POSIX clocks are supported"
            )

        epoch_seconds = time_since_epoch()
        try:
            local = time.localtime(epoch_seconds)
        except (OSError, OverflowError, ValueError) as e:
            logger.warning("localtime(%d) failed: %s", epoch_seconds, e)
            raise ClockError(
                "Could not get local time. function 'localtime' failed."
            ) from e

        offset = getattr(local, "tm_gmtoff", None)
        if offset is None:
            raise ClockError("Could not determine the local UTC offset.")

        reading = ClockReading(
            epoch_seconds=epoch_seconds,
            offset_seconds=int(offset),
            zone_name=getattr(local, "tm_zone", None) or None,
        )
        logger.debug("clock reading %s", reading)
        return reading

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    """Clock that always returns the same reading (useful for tests)."""

    epoch_seconds: int
    offset_seconds: int = 0
    zone_name: Optional[str] = None

    def read(self) -> ClockReading:
        return ClockReading(
            epoch_seconds=self.epoch_seconds,
            offset_seconds=self.offset_seconds,
            zone_name=self.zone_name,
        )


__all__ = [
    "Clock",
    "ClockReading",
    "SystemClock",
    "FixedClock",
    "time_since_epoch",
]
