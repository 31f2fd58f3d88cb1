"""CivilTime class representing a time of day.

This module provides the CivilTime class for time-of-day values with
whole-second precision.
"""

from __future__ import annotations

from datemorph._internal.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from datemorph._internal.validation import validate_time


class CivilTime:
    """A time of day with whole-second precision.

    CivilTime represents the time portion of a day, from midnight
    (00:00:00) to 23:59:59. It carries no date or time zone, so
    arithmetic wraps around midnight without a day carry.

    The internal representation is the number of seconds since midnight.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).

    Examples:
        >>> t = CivilTime(14, 30, 45)
        >>> t.hour, t.minute, t.second
        (14, 30, 45)

        >>> CivilTime(23, 0).add_hours(25)
        CivilTime(0, 0, 0)
    """

    __slots__ = ("_seconds",)

    def __init__(self, hour: int = 0, minute: int = 0, second: int = 0) -> None:
        """Create a CivilTime from component parts.

        Raises:
            ValidationError: If any component is out of range.
        """
        validate_time(hour, minute, second)
        self._seconds = hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second

    @classmethod
    def from_seconds(cls, seconds: int) -> CivilTime:
        """Create a CivilTime from seconds since midnight, wrapping modulo one day.

        Examples:
            >>> CivilTime.from_seconds(-1)
            CivilTime(23, 59, 59)
        """
        seconds %= SECONDS_PER_DAY
        hour, rest = divmod(seconds, SECONDS_PER_HOUR)
        minute, second = divmod(rest, SECONDS_PER_MINUTE)
        return cls(hour, minute, second)

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._seconds // SECONDS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return self._seconds % SECONDS_PER_MINUTE

    @property
    def total_seconds(self) -> int:
        """Return the number of seconds since midnight."""
        return self._seconds

    def add_seconds(self, seconds: int) -> CivilTime:
        """Return a new CivilTime offset by ``seconds``, wrapping within the day.

        Examples:
            >>> CivilTime(23, 59, 30).add_seconds(45)
            CivilTime(0, 0, 15)
        """
        return CivilTime.from_seconds(self._seconds + seconds)

    def add_minutes(self, minutes: int) -> CivilTime:
        """Return a new CivilTime offset by ``minutes``, wrapping within the day."""
        return self.add_seconds(minutes * SECONDS_PER_MINUTE)

    def add_hours(self, hours: int) -> CivilTime:
        """Return a new CivilTime offset by ``hours``, wrapping within the day."""
        return self.add_seconds(hours * SECONDS_PER_HOUR)

    def to_iso_format(self) -> str:
        """Return the time as HH:MM:SS."""
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return self._seconds < other._seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return self._seconds <= other._seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return self._seconds > other._seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return self._seconds >= other._seconds

    def __hash__(self) -> int:
        return hash(("CivilTime", self._seconds))

    def __repr__(self) -> str:
        return f"CivilTime({self.hour}, {self.minute}, {self.second})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["CivilTime"]
