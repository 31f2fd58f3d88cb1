"""CivilDate class representing a calendar date.

This module provides the CivilDate class for representing calendar dates
in the proleptic Gregorian calendar, with the calendar arithmetic and
queries the engine builds on.
"""

from __future__ import annotations

from datemorph._internal.calendar import (
    clamp_day,
    days_before_month,
    days_in_month,
    is_leap_year,
    iso_week,
    months_between,
    ordinal_to_weekday,
    ordinal_to_ymd,
    years_between,
    ymd_to_ordinal,
)
from datemorph._internal.validation import validate_day, validate_month, validate_year


class CivilDate:
    """A calendar date in the proleptic Gregorian calendar.

    CivilDate represents a calendar day with year, month, and day
    components and no time zone. Gregorian rules are extended to dates
    before the calendar's adoption in 1582, and year 0 exists (1 BCE).

    Internal representation is the ordinal day number (0001-01-01 = 1),
    which makes day arithmetic and differences a plain subtraction.

    Attributes:
        year: The year (-9999 to 9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = CivilDate(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> CivilDate(2024, 2, 29)  # Valid leap year date
        CivilDate(2024, 2, 29)
    """

    __slots__ = ("_ordinal",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a CivilDate from year, month, and day.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> CivilDate(2024, 2, 30)  # February doesn't have 30 days
            Traceback (most recent call last):
            ...
            ValidationError: day must be between 1 and 29 for 2024-02, got 30
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._ordinal = ymd_to_ordinal(year, month, day)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> CivilDate:
        """Create a CivilDate from an ordinal day number.

        Raises:
            ValidationError: If the resulting date is out of range.

        Examples:
            >>> CivilDate.from_ordinal(1)
            CivilDate(1, 1, 1)
        """
        year, month, day = ordinal_to_ymd(ordinal)
        return cls(year, month, day)

    @property
    def year(self) -> int:
        """Return the year component."""
        return ordinal_to_ymd(self._ordinal)[0]

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return ordinal_to_ymd(self._ordinal)[1]

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return ordinal_to_ymd(self._ordinal)[2]

    @property
    def weekday(self) -> int:
        """Return the day of the week, Monday as 0 through Sunday as 6.

        Examples:
            >>> CivilDate(2024, 1, 15).weekday  # Monday
            0
            >>> CivilDate(2024, 1, 21).weekday  # Sunday
            6
        """
        return ordinal_to_weekday(self._ordinal)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> CivilDate(2024, 12, 31).day_of_year  # Leap year
            366
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        return days_before_month(year, month) + day

    @property
    def iso_week(self) -> int:
        """Return the ISO-8601 week number (1-53).

        Examples:
            >>> CivilDate(2024, 1, 1).iso_week
            1
            >>> CivilDate(2021, 1, 3).iso_week  # Belongs to 2020-W53
            53
        """
        return iso_week(*ordinal_to_ymd(self._ordinal))[1]

    @property
    def quarter(self) -> int:
        """Return the quarter of the year (1-4).

        Examples:
            >>> CivilDate(2024, 3, 31).quarter
            1
            >>> CivilDate(2024, 4, 1).quarter
            2
        """
        return (self.month - 1) // 3 + 1

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self.year)

    @property
    def days_in_month(self) -> int:
        """Return the length of this date's month."""
        year, month, _ = ordinal_to_ymd(self._ordinal)
        return days_in_month(year, month)

    @property
    def days_remaining_in_month(self) -> int:
        """Return the days left in the month after this one.

        Examples:
            >>> CivilDate(2024, 2, 10).days_remaining_in_month
            19
        """
        return self.days_in_month - self.day

    def add_days(self, days: int) -> CivilDate:
        """Return a new CivilDate offset by the given number of days.

        Raises:
            ValidationError: If the result is out of range.

        Examples:
            >>> CivilDate(2024, 1, 15).add_days(-20)
            CivilDate(2023, 12, 26)
        """
        return CivilDate.from_ordinal(self._ordinal + days)

    def add_months(self, months: int) -> CivilDate:
        """Return a new CivilDate offset by the given number of months.

        If the resulting day does not exist in the new month, it is
        clamped to the last valid day of that month.

        Raises:
            ValidationError: If the result is out of range.

        Examples:
            >>> CivilDate(2024, 1, 31).add_months(1)  # Clamps to Feb 29
            CivilDate(2024, 2, 29)

            >>> CivilDate(2023, 1, 31).add_months(1)  # Clamps to Feb 28
            CivilDate(2023, 2, 28)
        """
        year, month, day = ordinal_to_ymd(self._ordinal)

        total_months = year * 12 + (month - 1) + months
        new_year, new_month = divmod(total_months, 12)
        new_month += 1

        validate_year(new_year)
        return CivilDate(new_year, new_month, clamp_day(new_year, new_month, day))

    def add_years(self, years: int) -> CivilDate:
        """Return a new CivilDate offset by the given number of years.

        Feb 29 becomes Feb 28 when the target year is not a leap year.

        Examples:
            >>> CivilDate(2024, 2, 29).add_years(1)
            CivilDate(2025, 2, 28)
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        new_year = year + years

        validate_year(new_year)
        return CivilDate(new_year, month, clamp_day(new_year, month, day))

    def start_of_week(self) -> CivilDate:
        """Return the nearest Monday on or before this date.

        Examples:
            >>> CivilDate(2024, 1, 17).start_of_week()
            CivilDate(2024, 1, 15)
        """
        return CivilDate.from_ordinal(self._ordinal - self.weekday)

    def end_of_week(self) -> CivilDate:
        """Return the nearest Sunday on or after this date.

        Examples:
            >>> CivilDate(2024, 1, 17).end_of_week()
            CivilDate(2024, 1, 21)
        """
        return CivilDate.from_ordinal(self._ordinal + 6 - self.weekday)

    def days_until(self, other: CivilDate) -> int:
        """Return the signed number of days from this date to ``other``.

        Examples:
            >>> CivilDate(2024, 1, 1).days_until(CivilDate(2024, 1, 10))
            9
        """
        return other._ordinal - self._ordinal

    def months_until(self, other: CivilDate) -> int:
        """Return the signed number of whole months from this date to ``other``."""
        return months_between(self.to_tuple(), other.to_tuple())

    def years_until(self, other: CivilDate) -> int:
        """Return the signed number of whole years from this date to ``other``.

        Examples:
            >>> CivilDate(2000, 6, 15).years_until(CivilDate(2024, 6, 14))
            23
        """
        return years_between(self.to_tuple(), other.to_tuple())

    def to_ordinal(self) -> int:
        """Return the ordinal day number (0001-01-01 = 1)."""
        return self._ordinal

    def to_tuple(self) -> tuple[int, int, int]:
        """Return (year, month, day)."""
        return ordinal_to_ymd(self._ordinal)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Examples:
            >>> CivilDate(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        if year >= 0:
            return f"{year:04d}-{month:02d}-{day:02d}"
        return f"{year:05d}-{month:02d}-{day:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self._ordinal == other._ordinal

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self._ordinal <= other._ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self._ordinal > other._ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self._ordinal >= other._ordinal

    def __hash__(self) -> int:
        return hash(("CivilDate", self._ordinal))

    def __repr__(self) -> str:
        year, month, day = ordinal_to_ymd(self._ordinal)
        return f"CivilDate({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["CivilDate"]
