"""Calendar utilities for datemorph.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, ordinal day numbers, ISO weeks
and whole-month differences.

Ordinal 1 = 0001-01-01 (a Monday). Ordinals may be zero or negative for
dates in year 0 and earlier.

This module is not part of the public API.
"""

from __future__ import annotations

from datemorph._internal.constants import DAYS_IN_MONTH
from datemorph.errors import CalendarInputError

# Days in one full 400-year Gregorian cycle
_DAYS_PER_400_YEARS = 146097


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        CalendarInputError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise CalendarInputError(f"month must be between 1 and 12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    Python's floor division makes the formula valid for year 0 and
    negative years as well.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(2024, 1, 15)
        738900
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Ordinals below 1 are shifted forward by whole 400-year cycles, which
    repeat exactly in the Gregorian calendar, then shifted back.

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    cycles = 0
    if ordinal < 1:
        cycles = (1 - ordinal) // _DAYS_PER_400_YEARS + 1
        ordinal += cycles * _DAYS_PER_400_YEARS

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1
    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1 - cycles * 400

    # Last day of a leap cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    doy = n + 1
    month = 1
    while True:
        dim = days_in_month(year, month)
        if doy <= dim:
            return (year, month, doy)
        doy -= dim
        month += 1


def ordinal_to_weekday(ordinal: int) -> int:
    """Return the day of week for an ordinal (Monday=0, Sunday=6)."""
    # Ordinal 1 (0001-01-01) was a Monday
    return (ordinal - 1) % 7


def iso_week(year: int, month: int, day: int) -> tuple[int, int]:
    """Return the ISO-8601 (week-based-year, week) for a date.

    Weeks start on Monday; week 1 is the week holding the year's first
    Thursday.

    Examples:
        >>> iso_week(2024, 1, 1)
        (2024, 1)
        >>> iso_week(2021, 1, 3)
        (2020, 53)
        >>> iso_week(2024, 12, 30)
        (2025, 1)
    """
    ordinal = ymd_to_ordinal(year, month, day)
    thursday = ordinal + 3 - ordinal_to_weekday(ordinal)
    week_year, _, _ = ordinal_to_ymd(thursday)
    week = (thursday - ymd_to_ordinal(week_year, 1, 1)) // 7 + 1
    return (week_year, week)


def clamp_day(year: int, month: int, day: int) -> int:
    """Clamp a day to the last valid day of (year, month)."""
    return min(day, days_in_month(year, month))


def months_between(
    start: tuple[int, int, int],
    end: tuple[int, int, int],
) -> int:
    """Return the number of whole months from start to end.

    The result is signed and truncated toward zero: a month only counts
    once its day-of-month has been reached.

    Examples:
        >>> months_between((2024, 1, 15), (2024, 3, 14))
        1
        >>> months_between((2024, 1, 31), (2024, 2, 29))
        0
        >>> months_between((2024, 3, 14), (2024, 1, 15))
        -1
    """
    total = (end[0] * 12 + end[1]) - (start[0] * 12 + start[1])
    day_delta = end[2] - start[2]
    if total > 0 and day_delta < 0:
        total -= 1
    elif total < 0 and day_delta > 0:
        total += 1
    return total


def years_between(
    start: tuple[int, int, int],
    end: tuple[int, int, int],
) -> int:
    """Return the number of whole years from start to end, signed."""
    months = months_between(start, end)
    if months >= 0:
        return months // 12
    return -(-months // 12)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ordinal_to_weekday",
    "iso_week",
    "clamp_day",
    "months_between",
    "years_between",
]
