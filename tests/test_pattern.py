"""Tests for pattern compilation, rendering and strict parsing."""

from __future__ import annotations

import pytest

from datemorph.core.date import CivilDate
from datemorph.core.datetime import CivilDateTime
from datemorph.core.time import CivilTime
from datemorph.errors import ParseError, PatternError, ValidationError
from datemorph.format import compile_pattern, parse, render


class TestCompilePattern:
    """Tests for compile_pattern."""

    def test_cached(self) -> None:
        """Identical pattern strings share one compiled instance."""
        assert compile_pattern("yyyy-MM-dd") is compile_pattern("yyyy-MM-dd")

    def test_field_detection(self) -> None:
        p = compile_pattern("yyyy-MM-dd HH:mm")
        assert p.has_date_fields is True
        assert p.has_time_fields is True
        assert compile_pattern("HH:mm").has_date_fields is False
        assert compile_pattern("MM/yyyy").has_date_fields is False

    @pytest.mark.parametrize(
        "source, message",
        [
            ("yyyy-QQ", "unknown pattern letter 'Q'"),
            ("yyyy-MM-dd 'at", "unterminated quoted literal"),
            ("[yyyy]", "reserved pattern character"),
            ("yyyy#MM", "reserved pattern character"),
            ("MMMMM", "too many pattern letters"),
            ("ddd", "too many pattern letters"),
            ("", "must not be empty"),
        ],
    )
    def test_invalid_patterns(self, source: str, message: str) -> None:
        """Structurally invalid patterns raise PatternError."""
        with pytest.raises(PatternError, match=message):
            compile_pattern(source)

    def test_non_string_pattern(self) -> None:
        with pytest.raises(TypeError):
            compile_pattern(20240115)  # type: ignore[arg-type]

    def test_u_is_year(self) -> None:
        assert parse("2024-01-15", "uuuu-MM-dd") == CivilDate(2024, 1, 15)


class TestRender:
    """Tests for rendering values through patterns."""

    def test_numeric_date(self) -> None:
        d = CivilDate(2024, 1, 5)
        assert render(d, "dd/MM/yyyy") == "05/01/2024"
        assert render(d, "d/M/y") == "5/1/2024"
        assert render(d, "yyyyMMdd") == "20240105"

    def test_two_digit_year(self) -> None:
        assert render(CivilDate(1999, 12, 31), "yy") == "99"

    def test_names(self) -> None:
        d = CivilDate(2024, 1, 15)
        assert render(d, "EEEE, d MMMM yyyy") == "Monday, 15 January 2024"
        assert render(d, "EEE dd MMM") == "Mon 15 Jan"

    def test_clock_hour(self) -> None:
        """Hour 0 renders as 12 AM, hour 12 as 12 PM."""
        assert render(CivilTime(0, 5), "hh:mm a") == "12:05 AM"
        assert render(CivilTime(12, 0), "h:mm a") == "12:00 PM"
        assert render(CivilTime(14, 5), "hh:mm a") == "02:05 PM"

    def test_quoted_literals(self) -> None:
        dt = CivilDateTime(2024, 1, 15, 9, 30)
        assert render(dt, "yyyy-MM-dd'T'HH:mm") == "2024-01-15T09:30"
        assert render(dt, "'at' HH 'o''clock'") == "at 09 o'clock"
        assert render(dt, "''yy") == "'24"

    def test_negative_year(self) -> None:
        assert render(CivilDate(-44, 3, 15), "yyyy-MM-dd") == "-0044-03-15"

    def test_date_through_time_field(self) -> None:
        """Rendering a date with an hour field is a PatternError, not a crash."""
        with pytest.raises(PatternError, match="requires hour"):
            render(CivilDate(2024, 1, 15), "yyyy-MM-dd HH:mm")

    def test_time_through_date_field(self) -> None:
        with pytest.raises(PatternError, match="requires year"):
            render(CivilTime(9, 0), "yyyy HH")


class TestStrictParse:
    """Parsing must match the whole input and never wrap fields."""

    def test_parse_date(self) -> None:
        assert parse("15/01/2024", "dd/MM/yyyy") == CivilDate(2024, 1, 15)

    def test_parse_time(self) -> None:
        assert parse("09:30", "HH:mm") == CivilTime(9, 30)

    def test_parse_datetime(self) -> None:
        assert parse("2024-01-15 09:30:15", "yyyy-MM-dd HH:mm:ss") == CivilDateTime(
            2024, 1, 15, 9, 30, 15
        )

    def test_single_letter_fields_accept_one_or_two_digits(self) -> None:
        p = compile_pattern("d/M/yyyy")
        assert p.parse_date("5/1/2024") == CivilDate(2024, 1, 5)
        assert p.parse_date("15/12/2024") == CivilDate(2024, 12, 15)

    def test_month_13_rejected(self) -> None:
        """A two-digit month of 13 is an error, never wrapped into next year."""
        with pytest.raises(ValidationError, match="month must be between 1 and 12"):
            parse("2024-13-01", "yyyy-MM-dd")

    def test_feb_30_rejected(self) -> None:
        """Nonexistent days are rejected rather than clamped."""
        with pytest.raises(ValidationError):
            parse("2023-02-29", "yyyy-MM-dd")
        with pytest.raises(ValidationError):
            parse("2024-02-30", "yyyy-MM-dd")

    @pytest.mark.parametrize(
        "text",
        ["2024-01-15x", " 2024-01-15", "2024/01/15", "2024-1-15", "24-01-15", "", "20240115"],
    )
    def test_mismatched_text(self, text: str) -> None:
        """Extra, missing or different characters fail to parse."""
        with pytest.raises(ParseError):
            parse(text, "yyyy-MM-dd")

    def test_hour_out_of_range(self) -> None:
        with pytest.raises(ValidationError, match="hour must be between 0 and 23"):
            parse("24:00", "HH:mm")

    def test_minute_out_of_range_without_hour(self) -> None:
        """Time fields are range-checked even when a date is requested."""
        with pytest.raises(ValidationError, match="minute must be between"):
            compile_pattern("yyyy-MM-dd mm").parse_date("2024-01-15 61")

    def test_day_out_of_range_without_month(self) -> None:
        """A day field is range-checked when a time is requested."""
        with pytest.raises(ValidationError, match="day must be between 1 and 31, got 32"):
            compile_pattern("dd HH:mm").parse_time("32 10:00")

    def test_day_checked_against_month_without_year(self) -> None:
        """Without a year, Feb 29 is allowed and Feb 30 is not."""
        assert parse("29/02 10:00", "dd/MM HH:mm") == CivilTime(10, 0)
        with pytest.raises(ValidationError, match="day must be between 1 and 29"):
            parse("30/02 10:00", "dd/MM HH:mm")

    def test_year_out_of_range_without_month(self) -> None:
        with pytest.raises(ValidationError, match="year must be between"):
            compile_pattern("yyyyy HH:mm").parse_time("10000 10:00")

    def test_two_digit_year(self) -> None:
        assert parse("15/01/24", "dd/MM/yy") == CivilDate(2024, 1, 15)
        assert parse("01/01/99", "dd/MM/yy") == CivilDate(2099, 1, 1)

    def test_two_digit_year_round_trip_limited_to_base_century(self) -> None:
        """yy round-trips 2000-2099 only; other centuries land in the 2000s."""
        pattern = compile_pattern("yy-MM-dd")
        assert pattern.parse_date(pattern.render(CivilDate(2099, 12, 31))) == CivilDate(2099, 12, 31)
        assert pattern.parse_date(pattern.render(CivilDate(1999, 12, 31))) == CivilDate(2099, 12, 31)

    def test_month_names_case_insensitive(self) -> None:
        assert parse("15 jan 2024", "dd MMM yyyy") == CivilDate(2024, 1, 15)
        assert parse("15 SEPTEMBER 2024", "dd MMMM yyyy") == CivilDate(2024, 9, 15)

    def test_full_month_names_not_cut_short(self) -> None:
        assert parse("June 1 2024", "MMMM d yyyy") == CivilDate(2024, 6, 1)

    def test_unknown_month_name(self) -> None:
        with pytest.raises(ParseError):
            parse("15 Foo 2024", "dd MMM yyyy")

    def test_weekday_must_agree(self) -> None:
        """A weekday name that contradicts the date is rejected."""
        assert parse("Mon 2024-01-15", "EEE yyyy-MM-dd") == CivilDate(2024, 1, 15)
        with pytest.raises(ParseError, match="weekday"):
            parse("Tue 2024-01-15", "EEE yyyy-MM-dd")

    def test_clock_hour_with_marker(self) -> None:
        assert parse("12:05 AM", "hh:mm a") == CivilTime(0, 5)
        assert parse("02:30 pm", "hh:mm a") == CivilTime(14, 30)

    def test_clock_hour_needs_marker(self) -> None:
        with pytest.raises(ParseError, match="AM/PM"):
            parse("02:30", "hh:mm")

    def test_clock_hour_range(self) -> None:
        with pytest.raises(ValidationError, match="clock hour"):
            parse("13:00 PM", "hh:mm a")

    def test_repeated_fields_must_agree(self) -> None:
        assert parse("2024-01-15 (2024)", "yyyy-MM-dd (yyyy)") == CivilDate(2024, 1, 15)
        with pytest.raises(ParseError, match="conflicting"):
            parse("2024-01-15 (2023)", "yyyy-MM-dd (yyyy)")

    def test_incomplete_pattern(self) -> None:
        """A pattern with neither a full date nor an hour cannot parse."""
        with pytest.raises(ParseError, match="neither"):
            parse("01/2024", "MM/yyyy")

    def test_parse_date_requires_date_fields(self) -> None:
        with pytest.raises(ParseError, match="year, month and day"):
            compile_pattern("HH:mm").parse_date("09:30")

    def test_parse_time_requires_hour(self) -> None:
        with pytest.raises(ParseError, match="hour"):
            compile_pattern("yyyy-MM-dd").parse_time("2024-01-15")

    def test_parse_datetime_requires_both(self) -> None:
        with pytest.raises(ParseError, match="both a date and a time"):
            compile_pattern("yyyy-MM-dd").parse_datetime("2024-01-15")

    def test_non_string_input(self) -> None:
        with pytest.raises(TypeError):
            parse(20240115, "yyyyMMdd")  # type: ignore[arg-type]

    def test_parse_date_ignores_time(self) -> None:
        p = compile_pattern("yyyy-MM-dd HH:mm")
        assert p.parse_date("2024-01-15 23:59") == CivilDate(2024, 1, 15)
        assert p.parse_time("2024-01-15 23:59") == CivilTime(23, 59)


class TestRoundTrip:
    """Re-rendering through the parsing pattern gives back the input."""

    @pytest.mark.parametrize(
        "text, pattern",
        [
            ("2024-01-15", "yyyy-MM-dd"),
            ("15 Jan 2024", "dd MMM yyyy"),
            ("Monday, January 15, 2024", "EEEE, MMMM dd, yyyy"),
            ("09:05:00 PM", "hh:mm:ss a"),
            ("2024-01-15T23:59:59", "yyyy-MM-dd'T'HH:mm:ss"),
        ],
    )
    def test_round_trip(self, text: str, pattern: str) -> None:
        assert render(parse(text, pattern), pattern) == text
