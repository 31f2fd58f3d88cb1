"""Tests for the internal calendar helpers."""

from __future__ import annotations

import pytest

from datemorph._internal.calendar import (
    days_in_month,
    is_leap_year,
    iso_week,
    months_between,
    ordinal_to_weekday,
    ordinal_to_ymd,
    years_between,
    ymd_to_ordinal,
)
from datemorph.errors import CalendarInputError, ValidationError


class TestLeapYear:
    """Tests for the Gregorian leap rule."""

    @pytest.mark.parametrize("year", [2000, 2024, 1600, 0, -4, 2400])
    def test_leap_years(self, year: int) -> None:
        """Years divisible by 4 (and by 400 at centuries) are leap."""
        assert is_leap_year(year) is True

    @pytest.mark.parametrize("year", [1900, 2023, 2100, 1, -1, 1700])
    def test_common_years(self, year: int) -> None:
        """Centuries not divisible by 400 and non-multiples of 4 are common."""
        assert is_leap_year(year) is False


class TestDaysInMonth:
    """Tests for days_in_month."""

    def test_thirty_one_day_months(self) -> None:
        for month in (1, 3, 5, 7, 8, 10, 12):
            assert days_in_month(2023, month) == 31

    def test_thirty_day_months(self) -> None:
        for month in (4, 6, 9, 11):
            assert days_in_month(2023, month) == 30

    def test_february(self) -> None:
        """February has 29 days only in leap years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_invalid_month(self, month: int) -> None:
        """Out-of-range months raise CalendarInputError."""
        with pytest.raises(CalendarInputError, match="month must be between 1 and 12"):
            days_in_month(2024, month)

    def test_calendar_input_error_is_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            days_in_month(2024, 13)


class TestOrdinals:
    """Tests for ordinal day numbers."""

    def test_epoch_of_ordinals(self) -> None:
        """Ordinal 1 is 0001-01-01."""
        assert ymd_to_ordinal(1, 1, 1) == 1
        assert ordinal_to_ymd(1) == (1, 1, 1)

    def test_known_ordinal(self) -> None:
        assert ymd_to_ordinal(2024, 1, 15) == 738900
        assert ordinal_to_ymd(738900) == (2024, 1, 15)

    def test_year_zero(self) -> None:
        """The day before 0001-01-01 is 0000-12-31."""
        assert ordinal_to_ymd(0) == (0, 12, 31)
        assert ymd_to_ordinal(0, 12, 31) == 0

    @pytest.mark.parametrize(
        "ymd",
        [(2024, 2, 29), (2000, 12, 31), (1, 12, 31), (-44, 3, 15), (-1, 1, 1), (9999, 12, 31)],
    )
    def test_round_trip(self, ymd: tuple[int, int, int]) -> None:
        """Converting to an ordinal and back gives the same date."""
        assert ordinal_to_ymd(ymd_to_ordinal(*ymd)) == ymd

    def test_consecutive_days(self) -> None:
        """Consecutive ordinals cross month and year boundaries."""
        assert ymd_to_ordinal(2024, 3, 1) - ymd_to_ordinal(2024, 2, 28) == 2
        assert ymd_to_ordinal(2024, 1, 1) - ymd_to_ordinal(2023, 12, 31) == 1

    def test_weekday(self) -> None:
        """0001-01-01 was a Monday; 2024-01-21 is a Sunday."""
        assert ordinal_to_weekday(1) == 0
        assert ordinal_to_weekday(ymd_to_ordinal(2024, 1, 21)) == 6


class TestIsoWeek:
    """Tests for ISO-8601 week numbering."""

    def test_first_week(self) -> None:
        assert iso_week(2024, 1, 1) == (2024, 1)

    def test_early_january_in_previous_year(self) -> None:
        """Jan 1-3 2021 belong to week 53 of 2020."""
        assert iso_week(2021, 1, 1) == (2020, 53)
        assert iso_week(2021, 1, 3) == (2020, 53)
        assert iso_week(2021, 1, 4) == (2021, 1)

    def test_late_december_in_next_year(self) -> None:
        """Dec 30 2024 is a Monday in week 1 of 2025."""
        assert iso_week(2024, 12, 30) == (2025, 1)
        assert iso_week(2024, 12, 29) == (2024, 52)

    def test_week_53(self) -> None:
        assert iso_week(2015, 12, 31) == (2015, 53)


class TestMonthsBetween:
    """Tests for whole-month and whole-year differences."""

    def test_same_day_of_month(self) -> None:
        assert months_between((2024, 1, 15), (2024, 4, 15)) == 3

    def test_incomplete_month_not_counted(self) -> None:
        """A month only counts once its day-of-month is reached."""
        assert months_between((2024, 1, 15), (2024, 3, 14)) == 1
        assert months_between((2024, 1, 31), (2024, 2, 29)) == 0

    def test_negative(self) -> None:
        """Reversed arguments give a negative count, truncated toward zero."""
        assert months_between((2024, 3, 14), (2024, 1, 15)) == -1
        assert months_between((2024, 4, 15), (2024, 1, 15)) == -3

    def test_same_date(self) -> None:
        assert months_between((2024, 1, 15), (2024, 1, 15)) == 0

    def test_years(self) -> None:
        assert years_between((2000, 6, 15), (2024, 6, 15)) == 24
        assert years_between((2000, 6, 15), (2024, 6, 14)) == 23
        assert years_between((2024, 6, 14), (2000, 6, 15)) == -23
