"""Pytest configuration and fixtures for readable_time tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so readable_time can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from readable_time.clock import FixedClock  # noqa: E402

# 2024-01-15 15:45:00 UTC, a Monday
MONDAY_AFTERNOON_UTC = 1_705_333_500

# 2025-11-30 01:29:00 UTC, 07:14:00 at +05:45
SUNDAY_MORNING_UTC = 1_764_466_140


@pytest.fixture
def utc_clock() -> FixedClock:
    """Fixed clock at 2024-01-15 15:45:00 UTC."""
    return FixedClock(MONDAY_AFTERNOON_UTC, offset_seconds=0, zone_name="UTC")


@pytest.fixture
def kathmandu_clock() -> FixedClock:
    """Fixed clock at 2025-11-30 07:14:00 +0545."""
    return FixedClock(SUNDAY_MORNING_UTC, offset_seconds=20_700, zone_name="+0545")
