"""Internal utilities for readable_time.

This module contains private implementation details:
    - Calendar arithmetic
    - Constants and lookup tables
    - Field validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from readable_time._internal.calendar import (
    CalendarFields,
    epoch_to_fields,
    fields_to_epoch,
)
from readable_time._internal.validation import (
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "CalendarFields",
    "epoch_to_fields",
    "fields_to_epoch",
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_year",
]
