"""Internal utilities for datemorph.

This module contains private implementation details:
    - Calendar arithmetic helpers
    - Constants and magic numbers
    - Range validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datemorph._internal.calendar import days_in_month, is_leap_year
from datemorph._internal.validation import (
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "days_in_month",
    "is_leap_year",
    "validate_day",
    "validate_month",
    "validate_time",
    "validate_year",
]
