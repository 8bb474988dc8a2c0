"""Validation utilities for readable_time.

This module provides helpers that check calendar and clock fields
before a snapshot is built from them.

This module is not part of the public API.
"""

from __future__ import annotations

from readable_time._internal.calendar import days_in_month
from readable_time._internal.constants import MAX_YEAR, MIN_YEAR
from readable_time.errors import ValidationError


def validate_int(name: str, value: object) -> None:
    """Reject non-integers, including booleans."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )


def validate_range(name: str, value: int, min_val: int, max_val: int) -> None:
    """Validate that an integer field lies within [min_val, max_val].

    Raises:
        ValidationError: If value is not an integer or is out of range.

    Examples:
        >>> validate_range("minute", 61, 0, 59)
        Traceback (most recent call last):
        ...
        ValidationError: minute must be between 0 and 59, got 61
    """
    validate_int(name, value)
    if value < min_val or value > max_val:
        raise ValidationError(
            f"{name} must be between {min_val} and {max_val}, got {value}"
        )


def validate_year(year: int) -> None:
    """Validate that a year is within MIN_YEAR to MAX_YEAR."""
    validate_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12."""
    validate_range("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    validate_int("day", day)
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


__all__ = [
    "validate_int",
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
]
