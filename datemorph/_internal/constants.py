"""Internal constants for datemorph.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Two-digit years ("yy") resolve into 2000-2099
TWO_DIGIT_YEAR_BASE: int = 2000

# Fixed zone offsets accepted by the zone resolver (in seconds)
MAX_UTC_OFFSET_SECONDS: int = 18 * SECONDS_PER_HOUR

# Legacy failure markers, one per operation family
INVALID_DATE_FORMAT: str = "Invalid date format"
INVALID_TIME_FORMAT: str = "Invalid time format"
INVALID_UNIX_TIMESTAMP: str = "Invalid Unix timestamp"
INVALID_DATE_OR_ZONE: str = "Invalid date format or timezone"
INVALID_NUMBER: int = -1


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "TWO_DIGIT_YEAR_BASE",
    "MAX_UTC_OFFSET_SECONDS",
    "INVALID_DATE_FORMAT",
    "INVALID_TIME_FORMAT",
    "INVALID_UNIX_TIMESTAMP",
    "INVALID_DATE_OR_ZONE",
    "INVALID_NUMBER",
]
