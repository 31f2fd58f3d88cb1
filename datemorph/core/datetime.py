"""CivilDateTime class combining a calendar date and a time of day.

This module provides the CivilDateTime class and its bridge to the
standard library's datetime, which zone conversion and the clock use
to apply time zone rules.
"""

from __future__ import annotations

import datetime as _datetime

from datemorph.core.date import CivilDate
from datemorph.core.time import CivilTime


class CivilDateTime:
    """A calendar date and a time of day, with no time zone attached.

    Attributes:
        date: The CivilDate part.
        time: The CivilTime part.

    Examples:
        >>> dt = CivilDateTime(2024, 6, 1, 12, 0)
        >>> dt.date, dt.time
        (CivilDate(2024, 6, 1), CivilTime(12, 0, 0))
    """

    __slots__ = ("_date", "_time")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> None:
        """Create a CivilDateTime from component parts.

        Raises:
            ValidationError: If any component is out of range.
        """
        self._date = CivilDate(year, month, day)
        self._time = CivilTime(hour, minute, second)

    @classmethod
    def combine(cls, date: CivilDate, time: CivilTime) -> CivilDateTime:
        """Create a CivilDateTime from a date and a time."""
        instance = object.__new__(cls)
        instance._date = date
        instance._time = time
        return instance

    @classmethod
    def from_stdlib(cls, value: _datetime.datetime) -> CivilDateTime:
        """Create a CivilDateTime from a stdlib datetime's wall-clock fields.

        Sub-second precision and any tzinfo are dropped.

        Examples:
            >>> CivilDateTime.from_stdlib(_datetime.datetime(2024, 1, 15, 9, 5, 7, 999))
            CivilDateTime(2024, 1, 15, 9, 5, 7)
        """
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
        )

    def to_stdlib(self, tzinfo: _datetime.tzinfo | None = None) -> _datetime.datetime:
        """Return a stdlib datetime with the same wall-clock fields.

        Raises:
            ValueError: If the year is outside the stdlib range 1-9999.
        """
        year, month, day = self._date.to_tuple()
        return _datetime.datetime(
            year,
            month,
            day,
            self._time.hour,
            self._time.minute,
            self._time.second,
            tzinfo=tzinfo,
        )

    @property
    def date(self) -> CivilDate:
        """Return the date part."""
        return self._date

    @property
    def time(self) -> CivilTime:
        """Return the time part."""
        return self._time

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def weekday(self) -> int:
        return self._date.weekday

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    def to_iso_format(self) -> str:
        """Return the value as YYYY-MM-DDTHH:MM:SS."""
        return f"{self._date.to_iso_format()}T{self._time.to_iso_format()}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CivilDateTime):
            return NotImplemented
        return self._date == other._date and self._time == other._time

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CivilDateTime):
            return NotImplemented
        return (self._date, self._time) < (other._date, other._time)

    def __hash__(self) -> int:
        return hash((self._date, self._time))

    def __repr__(self) -> str:
        year, month, day = self._date.to_tuple()
        return (
            f"CivilDateTime({year}, {month}, {day}, "
            f"{self._time.hour}, {self._time.minute}, {self._time.second})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["CivilDateTime"]
