"""Clock units for readable_time.

This module provides:
    - UtcOffset: Signed fixed offset from UTC
    - to_hour_12: 24-hour to 12-hour conversion
    - get_time_period: AM/PM for a 24-hour value
"""

from __future__ import annotations

from readable_time.units.hour import get_time_period, to_hour_12
from readable_time.units.offset import UtcOffset

__all__: list[str] = [
    "UtcOffset",
    "get_time_period",
    "to_hour_12",
]
