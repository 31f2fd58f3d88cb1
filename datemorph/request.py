"""DateRequest: engine operations with their inputs bound up front.

A DateRequest stores an input string, the pattern it is written in, an
output pattern and an engine, then forwards each call to the engine
unchanged. It holds no logic of its own; the engine remains the single
place where parsing and arithmetic happen.

Examples:
    >>> request = DateRequest("2024-01-31", "yyyy-MM-dd")
    >>> request.add_months(1).value
    '2024-02-29'

    >>> request.with_output_pattern("dd MMM yyyy").transform().value
    '31 Jan 2024'
"""

from __future__ import annotations

from datemorph.core.date import CivilDate
from datemorph.engine import DateTimeEngine
from datemorph.result import Result

_DEFAULT_ENGINE = DateTimeEngine()


class DateRequest:
    """An input string bound to its pattern, output pattern and engine.

    Attributes:
        raw: The input text.
        pattern: The pattern ``raw`` is written in.
        output_pattern: The pattern results are rendered with. Defaults
            to ``pattern``.
        engine: The engine operations are forwarded to.
    """

    __slots__ = ("_raw", "_pattern", "_output_pattern", "_engine")

    def __init__(
        self,
        raw: str,
        pattern: str,
        output_pattern: str | None = None,
        engine: DateTimeEngine | None = None,
    ) -> None:
        self._raw = raw
        self._pattern = pattern
        self._output_pattern = output_pattern if output_pattern is not None else pattern
        self._engine = engine if engine is not None else _DEFAULT_ENGINE

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def output_pattern(self) -> str:
        return self._output_pattern

    @property
    def engine(self) -> DateTimeEngine:
        return self._engine

    def with_input(self, raw: str, pattern: str | None = None) -> DateRequest:
        """Return a copy with a new input (and optionally its pattern)."""
        return DateRequest(
            raw,
            pattern if pattern is not None else self._pattern,
            self._output_pattern,
            self._engine,
        )

    def with_output_pattern(self, output_pattern: str) -> DateRequest:
        return DateRequest(self._raw, self._pattern, output_pattern, self._engine)

    def with_engine(self, engine: DateTimeEngine) -> DateRequest:
        return DateRequest(self._raw, self._pattern, self._output_pattern, engine)

    # Transforms and arithmetic

    def transform(self) -> Result[str]:
        return self._engine.transform_date(self._raw, self._pattern, self._output_pattern)

    def add_days(self, days: int) -> Result[str]:
        return self._engine.add_days(self._raw, self._pattern, days, self._output_pattern)

    def add_months(self, months: int) -> Result[str]:
        return self._engine.add_months(self._raw, self._pattern, months, self._output_pattern)

    def add_years(self, years: int) -> Result[str]:
        return self._engine.add_years(self._raw, self._pattern, years, self._output_pattern)

    def subtract_days(self, days: int) -> Result[str]:
        return self._engine.subtract_days(self._raw, self._pattern, days, self._output_pattern)

    def add_hours(self, hours: int) -> Result[str]:
        return self._engine.add_hours(self._raw, self._pattern, hours, self._output_pattern)

    def add_minutes(self, minutes: int) -> Result[str]:
        return self._engine.add_minutes(self._raw, self._pattern, minutes, self._output_pattern)

    def add_seconds(self, seconds: int) -> Result[str]:
        return self._engine.add_seconds(self._raw, self._pattern, seconds, self._output_pattern)

    def add_time_offset(self, offset_seconds: int) -> Result[str]:
        return self._engine.add_time_offset(
            self._raw, self._pattern, offset_seconds, self._output_pattern
        )

    def subtract_hours(self, hours: int) -> Result[str]:
        return self._engine.subtract_hours(self._raw, self._pattern, hours, self._output_pattern)

    def subtract_minutes(self, minutes: int) -> Result[str]:
        return self._engine.subtract_minutes(
            self._raw, self._pattern, minutes, self._output_pattern
        )

    def subtract_seconds(self, seconds: int) -> Result[str]:
        return self._engine.subtract_seconds(
            self._raw, self._pattern, seconds, self._output_pattern
        )

    def convert_time_zone(self, from_zone: str, to_zone: str) -> Result[str]:
        return self._engine.convert_time_zone(
            self._raw, from_zone, to_zone, self._pattern, self._output_pattern
        )

    # Calendar queries

    def days_remaining_in_month(self) -> Result[int]:
        return self._engine.get_days_remaining_in_month(self._raw, self._pattern)

    def week_number(self) -> Result[int]:
        return self._engine.get_week_number(self._raw, self._pattern)

    def quarter_of_year(self) -> Result[int]:
        return self._engine.get_quarter_of_year(self._raw, self._pattern)

    def day_of_week(self) -> Result[str]:
        return self._engine.get_day_of_week(self._raw, self._pattern)

    def age(self) -> Result[int]:
        return self._engine.get_age(self._raw, self._pattern)

    def days_until(self) -> Result[int]:
        """Signed days from the engine clock's today to this date."""
        return self._engine.get_days_until_future_date(self._raw, self._pattern)

    def start_of_week(self) -> Result[CivilDate]:
        return self._engine.get_start_of_week(self._raw, self._pattern)

    def end_of_week(self) -> Result[CivilDate]:
        return self._engine.get_end_of_week(self._raw, self._pattern)

    # Comparisons with another request

    def is_same_date(self, other: DateRequest) -> Result[bool]:
        return self._engine.is_same_date(self._raw, self._pattern, other.raw, other.pattern)

    def days_between(self, end: str) -> Result[int]:
        """Days from this input to ``end``, both in this request's pattern."""
        return self._engine.get_days_between(self._raw, end, self._pattern)

    def months_between(self, end: str) -> Result[int]:
        return self._engine.get_months_between(self._raw, end, self._pattern)

    def years_between(self, end: str) -> Result[int]:
        return self._engine.get_years_between(self._raw, end, self._pattern)

    def __repr__(self) -> str:
        return (
            f"DateRequest({self._raw!r}, {self._pattern!r}, "
            f"output_pattern={self._output_pattern!r})"
        )


__all__ = ["DateRequest"]
