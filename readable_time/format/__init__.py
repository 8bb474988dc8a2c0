"""Snapshot formatting.

This module provides the fixed renderers for time snapshots and the
name lookups they rely on.

Functions:
    format_basic: ``2025-01-01 03:04:05``
    format_pretty: ``Mon Jan 15 2024 03:45 PM``
    format_extended: ``Sun Nov 30 07:14:00 +0545 2025``
    weekday_name: Weekday abbreviation for 0-6 (Sunday = 0).
    month_name: Month abbreviation for 1-12.
"""

from __future__ import annotations

from readable_time.format.names import month_name, weekday_name
from readable_time.format.templates import (
    format_basic,
    format_extended,
    format_pretty,
)

__all__: list[str] = [
    "format_basic",
    "format_pretty",
    "format_extended",
    "weekday_name",
    "month_name",
]
