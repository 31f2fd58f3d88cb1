"""DateTimeEngine: parse, compute and re-render dates and times.

Every operation follows the same order: compile the patterns, strictly
parse the input, compute, render. Nothing raises for malformed input;
each operation returns a :class:`~datemorph.result.Result` whose error
kind says why the input was rejected and whose sentinel reproduces the
legacy in-band marker (``-1``, ``False``, ``"Invalid date format"``...).

Examples:
    >>> engine = DateTimeEngine()
    >>> engine.transform_date("2024-01-15", "yyyy-MM-dd", "dd/MM/yyyy").value
    '15/01/2024'

    >>> engine.add_months("2024-01-31", "yyyy-MM-dd", 1, "yyyy-MM-dd").value
    '2024-02-29'

    >>> bad = engine.get_week_number("2024-13-01", "yyyy-MM-dd")
    >>> bad.error, bad.or_sentinel()
    (<ErrorKind.INVALID_FORMAT: 'invalid_format'>, -1)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

import structlog

from datemorph._internal.calendar import days_in_month, is_leap_year
from datemorph._internal.constants import (
    INVALID_DATE_FORMAT,
    INVALID_DATE_OR_ZONE,
    INVALID_NUMBER,
    INVALID_TIME_FORMAT,
    INVALID_UNIX_TIMESTAMP,
)
from datemorph.clock import Clock, SystemClock
from datemorph.config.logging import configure_logging
from datemorph.config.settings import DatemorphSettings
from datemorph.core.date import CivilDate
from datemorph.core.time import CivilTime
from datemorph.errors import DatemorphError, TimestampError
from datemorph.format.names import ENGLISH, NameTable
from datemorph.format.pattern import TemporalType, compile_pattern
from datemorph.result import Result
from datemorph.units.timezone import ZonedInstant, resolve_zone

T = TypeVar("T")

log = structlog.get_logger("datemorph.engine")

# Debug events are emitted only when this stdlib logger allows DEBUG
_level_gate = logging.getLogger("datemorph.engine")


class DateTimeEngine:
    """Stateless date/time transformation operations.

    The engine holds only capabilities, never request data: a clock
    (for "now" and the local zone) and a name table (for month and
    weekday names). Instances are safe to share across threads.

    Attributes:
        clock: Source of the current moment and of epoch conversion.
        names: Month, weekday and AM/PM names for text fields.
    """

    __slots__ = ("_clock", "_names")

    def __init__(self, clock: Clock | None = None, names: NameTable = ENGLISH) -> None:
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._names = names

    @classmethod
    def from_settings(cls, settings: DatemorphSettings | None = None) -> DateTimeEngine:
        """Build an engine from settings (environment variables by default).

        When ``verbose`` or ``log_json`` is set, log output is configured
        from them as well; otherwise the host's logging setup is left
        untouched.
        """
        if settings is None:
            settings = DatemorphSettings()
        if settings.verbose or settings.log_json:
            configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        zone = resolve_zone(settings.zone) if settings.zone else None
        names = NameTable.from_system() if settings.names == "system" else ENGLISH
        return cls(SystemClock(zone), names)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def names(self) -> NameTable:
        return self._names

    # Parsing and rendering

    def parse(self, raw: str, pattern: str) -> Result[TemporalType]:
        """Strictly parse ``raw`` into a CivilDate, CivilTime or CivilDateTime."""
        return self._guard(
            "parse",
            None,
            lambda: compile_pattern(pattern).parse(raw, self._names),
        )

    def render(self, value: TemporalType, pattern: str) -> Result[str]:
        """Render a value; fails if the pattern needs a field the value lacks."""
        return self._guard(
            "render",
            INVALID_DATE_FORMAT,
            lambda: compile_pattern(pattern).render(value, self._names),
        )

    # Transforms

    def transform_date(self, raw: str, from_pattern: str, to_pattern: str) -> Result[str]:
        """Re-render ``raw`` from one pattern into another.

        The most specific value ``from_pattern`` carries is kept, so a
        date-time pattern round-trips its time as well.

        Examples:
            >>> DateTimeEngine().transform_date(
            ...     "2024-01-15 14:30", "yyyy-MM-dd HH:mm", "dd MMM yyyy, hh:mm a"
            ... ).value
            '15 Jan 2024, 02:30 PM'
        """

        def compute() -> str:
            source, target = compile_pattern(from_pattern), compile_pattern(to_pattern)
            return target.render(source.parse(raw, self._names), self._names)

        return self._guard("transform_date", INVALID_DATE_FORMAT, compute)

    def transform_unix(self, timestamp: int, to_pattern: str) -> Result[str]:
        """Render a Unix timestamp (seconds) in the clock's zone.

        The system clock uses the machine's local zone; callers needing
        UTC inject a clock bound to UTC or use :meth:`convert_time_zone`.
        Negative timestamps fail with ``INVALID_TIMESTAMP``.
        """

        def compute() -> str:
            target = compile_pattern(to_pattern)
            if timestamp < 0:
                raise TimestampError(f"timestamp must not be negative, got {timestamp}")
            return target.render(self._clock.from_epoch(timestamp), self._names)

        return self._guard("transform_unix", INVALID_UNIX_TIMESTAMP, compute)

    # Date arithmetic

    def add_days(self, raw: str, from_pattern: str, days: int, to_pattern: str) -> Result[str]:
        """Add a signed number of days to a date."""
        return self._shift_date("add_days", raw, from_pattern, to_pattern, lambda d: d.add_days(days))

    def add_months(self, raw: str, from_pattern: str, months: int, to_pattern: str) -> Result[str]:
        """Add a signed number of months, clamping to the end of shorter months."""
        return self._shift_date(
            "add_months", raw, from_pattern, to_pattern, lambda d: d.add_months(months)
        )

    def add_years(self, raw: str, from_pattern: str, years: int, to_pattern: str) -> Result[str]:
        """Add a signed number of years; Feb 29 clamps to Feb 28."""
        return self._shift_date(
            "add_years", raw, from_pattern, to_pattern, lambda d: d.add_years(years)
        )

    def subtract_days(self, raw: str, from_pattern: str, days: int, to_pattern: str) -> Result[str]:
        return self.add_days(raw, from_pattern, -days, to_pattern)

    # Time arithmetic (wraps within one day, no date carry)

    def add_hours(self, raw: str, from_pattern: str, hours: int, to_pattern: str) -> Result[str]:
        """Add hours to a time of day.

        Examples:
            >>> DateTimeEngine().add_hours("23:00", "HH:mm", 25, "HH:mm").value
            '00:00'
        """
        return self._shift_time(
            "add_hours", raw, from_pattern, to_pattern, lambda t: t.add_hours(hours)
        )

    def add_minutes(self, raw: str, from_pattern: str, minutes: int, to_pattern: str) -> Result[str]:
        return self._shift_time(
            "add_minutes", raw, from_pattern, to_pattern, lambda t: t.add_minutes(minutes)
        )

    def add_seconds(self, raw: str, from_pattern: str, seconds: int, to_pattern: str) -> Result[str]:
        return self._shift_time(
            "add_seconds", raw, from_pattern, to_pattern, lambda t: t.add_seconds(seconds)
        )

    def add_time_offset(
        self, raw: str, from_pattern: str, offset_seconds: int, to_pattern: str
    ) -> Result[str]:
        """Add an offset expressed in seconds to a time of day."""
        return self._shift_time(
            "add_time_offset",
            raw,
            from_pattern,
            to_pattern,
            lambda t: t.add_seconds(offset_seconds),
        )

    def subtract_hours(self, raw: str, from_pattern: str, hours: int, to_pattern: str) -> Result[str]:
        return self.add_hours(raw, from_pattern, -hours, to_pattern)

    def subtract_minutes(
        self, raw: str, from_pattern: str, minutes: int, to_pattern: str
    ) -> Result[str]:
        return self.add_minutes(raw, from_pattern, -minutes, to_pattern)

    def subtract_seconds(
        self, raw: str, from_pattern: str, seconds: int, to_pattern: str
    ) -> Result[str]:
        return self.add_seconds(raw, from_pattern, -seconds, to_pattern)

    # Calendar queries on raw integers

    def is_leap_year(self, year: int) -> Result[bool]:
        """Apply the Gregorian leap rule. Never fails."""
        return Result.success(is_leap_year(year))

    def get_days_in_month(self, year: int, month: int) -> Result[int]:
        """Return the length of a month; month outside 1-12 is ``INVALID_CALENDAR_INPUT``."""
        return self._guard("get_days_in_month", INVALID_NUMBER, lambda: days_in_month(year, month))

    # Calendar queries on parsed dates

    def get_days_remaining_in_month(self, raw: str, pattern: str) -> Result[int]:
        return self._query_date(
            "get_days_remaining_in_month", raw, pattern, INVALID_NUMBER,
            lambda d: d.days_remaining_in_month,
        )

    def get_week_number(self, raw: str, pattern: str) -> Result[int]:
        """Return the ISO-8601 week number (weeks start Monday)."""
        return self._query_date(
            "get_week_number", raw, pattern, INVALID_NUMBER, lambda d: d.iso_week
        )

    def get_quarter_of_year(self, raw: str, pattern: str) -> Result[int]:
        return self._query_date(
            "get_quarter_of_year", raw, pattern, INVALID_NUMBER, lambda d: d.quarter
        )

    def get_day_of_week(self, raw: str, pattern: str) -> Result[str]:
        """Return the full weekday name from the engine's name table."""
        return self._query_date(
            "get_day_of_week", raw, pattern, INVALID_DATE_FORMAT,
            lambda d: self._names.weekdays[d.weekday],
        )

    def get_age(self, raw: str, pattern: str) -> Result[int]:
        """Return completed years between a birth date and the clock's today."""
        return self._query_date(
            "get_age", raw, pattern, INVALID_NUMBER,
            lambda d: d.years_until(self._clock.today()),
        )

    def get_days_until_future_date(self, raw: str, pattern: str) -> Result[int]:
        """Return signed days from the clock's today to the given date."""
        return self._query_date(
            "get_days_until_future_date", raw, pattern, INVALID_NUMBER,
            lambda d: self._clock.today().days_until(d),
        )

    def get_start_of_week(self, raw: str, pattern: str) -> Result[CivilDate]:
        """Return the Monday on or before the date."""
        return self._query_date(
            "get_start_of_week", raw, pattern, None, lambda d: d.start_of_week()
        )

    def get_end_of_week(self, raw: str, pattern: str) -> Result[CivilDate]:
        """Return the Sunday on or after the date."""
        return self._query_date(
            "get_end_of_week", raw, pattern, None, lambda d: d.end_of_week()
        )

    def is_same_date(self, raw1: str, pattern1: str, raw2: str, pattern2: str) -> Result[bool]:
        """Compare the calendar dates of two inputs, each with its own pattern.

        Examples:
            >>> DateTimeEngine().is_same_date(
            ...     "2024-01-15", "yyyy-MM-dd", "15/01/2024 23:59", "dd/MM/yyyy HH:mm"
            ... ).value
            True
        """

        def compute() -> bool:
            first, second = compile_pattern(pattern1), compile_pattern(pattern2)
            return first.parse_date(raw1, self._names) == second.parse_date(raw2, self._names)

        return self._guard("is_same_date", False, compute)

    # Intervals

    def get_days_between(self, start: str, end: str, pattern: str) -> Result[int]:
        """Return ``end - start`` in days, negative if end precedes start."""
        return self._interval("get_days_between", start, end, pattern, CivilDate.days_until)

    def get_months_between(self, start: str, end: str, pattern: str) -> Result[int]:
        """Return whole months from start to end, signed."""
        return self._interval("get_months_between", start, end, pattern, CivilDate.months_until)

    def get_years_between(self, start: str, end: str, pattern: str) -> Result[int]:
        """Return whole years from start to end, signed."""
        return self._interval("get_years_between", start, end, pattern, CivilDate.years_until)

    def calculate_days_difference(self, start: str, end: str, pattern: str) -> Result[int]:
        """Same contract and validation order as :meth:`get_days_between`."""
        return self._interval(
            "calculate_days_difference", start, end, pattern, CivilDate.days_until
        )

    # Zone conversion

    def convert_time_zone(
        self,
        raw: str,
        from_zone: str,
        to_zone: str,
        from_pattern: str,
        to_pattern: str,
    ) -> Result[str]:
        """Express a wall-clock date-time from one zone in another.

        Unknown zones fail with ``INVALID_ZONE``, unparseable input with
        ``INVALID_FORMAT``.

        Examples:
            >>> DateTimeEngine().convert_time_zone(
            ...     "2024-06-01 12:00", "UTC", "America/New_York",
            ...     "yyyy-MM-dd HH:mm", "yyyy-MM-dd HH:mm",
            ... ).value
            '2024-06-01 08:00'
        """

        def compute() -> str:
            source, target = compile_pattern(from_pattern), compile_pattern(to_pattern)
            origin, destination = resolve_zone(from_zone), resolve_zone(to_zone)
            local = source.parse_datetime(raw, self._names)
            converted = ZonedInstant(local, origin).in_zone(destination)
            return target.render(converted.local, self._names)

        return self._guard("convert_time_zone", INVALID_DATE_OR_ZONE, compute)

    # Current moment

    def get_current_date(self, pattern: str) -> Result[str]:
        return self._guard(
            "get_current_date",
            INVALID_DATE_FORMAT,
            lambda: compile_pattern(pattern).render(self._clock.today(), self._names),
        )

    def get_current_time(self, pattern: str) -> Result[str]:
        return self._guard(
            "get_current_time",
            INVALID_TIME_FORMAT,
            lambda: compile_pattern(pattern).render(self._clock.now().time, self._names),
        )

    def get_current_date_time(self, pattern: str) -> Result[str]:
        return self._guard(
            "get_current_date_time",
            INVALID_DATE_FORMAT,
            lambda: compile_pattern(pattern).render(self._clock.now(), self._names),
        )

    # Shared operation shapes

    def _shift_date(
        self,
        op: str,
        raw: str,
        from_pattern: str,
        to_pattern: str,
        shift: Callable[[CivilDate], CivilDate],
    ) -> Result[str]:
        def compute() -> str:
            source, target = compile_pattern(from_pattern), compile_pattern(to_pattern)
            return target.render(shift(source.parse_date(raw, self._names)), self._names)

        return self._guard(op, INVALID_DATE_FORMAT, compute)

    def _shift_time(
        self,
        op: str,
        raw: str,
        from_pattern: str,
        to_pattern: str,
        shift: Callable[[CivilTime], CivilTime],
    ) -> Result[str]:
        def compute() -> str:
            source, target = compile_pattern(from_pattern), compile_pattern(to_pattern)
            return target.render(shift(source.parse_time(raw, self._names)), self._names)

        return self._guard(op, INVALID_TIME_FORMAT, compute)

    def _query_date(
        self,
        op: str,
        raw: str,
        pattern: str,
        sentinel: Any,
        query: Callable[[CivilDate], T],
    ) -> Result[T]:
        return self._guard(
            op,
            sentinel,
            lambda: query(compile_pattern(pattern).parse_date(raw, self._names)),
        )

    def _interval(
        self,
        op: str,
        start: str,
        end: str,
        pattern: str,
        measure: Callable[[CivilDate, CivilDate], int],
    ) -> Result[int]:
        def compute() -> int:
            compiled = compile_pattern(pattern)
            first = compiled.parse_date(start, self._names)
            second = compiled.parse_date(end, self._names)
            return measure(first, second)

        return self._guard(op, INVALID_NUMBER, compute)

    def _guard(self, op: str, sentinel: Any, compute: Callable[[], T]) -> Result[T]:
        """Run ``compute``, turning any datemorph error into a failed Result."""
        try:
            return Result.success(compute())
        except DatemorphError as exc:
            if _level_gate.isEnabledFor(logging.DEBUG):
                log.debug("input_rejected", op=op, kind=exc.kind.value, reason=str(exc))
            return Result.failure(exc.kind, str(exc), sentinel=sentinel)

    def __repr__(self) -> str:
        return f"DateTimeEngine(clock={self._clock!r})"


__all__ = ["DateTimeEngine"]
