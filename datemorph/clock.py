"""Clock capabilities: the source of "now" and of the local zone.

Operations that depend on the current moment (age, days until a date,
current date/time) or on the local zone (epoch conversion) read them
from an injected Clock instead of the process's wall clock, so callers
and tests can pin both.

Examples:
    >>> clock = FixedClock(CivilDateTime(2024, 6, 1, 9, 30))
    >>> clock.today()
    CivilDate(2024, 6, 1)
    >>> clock.from_epoch(0)
    CivilDateTime(1970, 1, 1, 0, 0, 0)
"""

from __future__ import annotations

import datetime as _datetime
from typing import Protocol

from datemorph.core.date import CivilDate
from datemorph.core.datetime import CivilDateTime
from datemorph.errors import TimestampError


class Clock(Protocol):
    """Source of the current civil date-time and of epoch conversion."""

    def now(self) -> CivilDateTime: ...

    def today(self) -> CivilDate: ...

    def from_epoch(self, seconds: int) -> CivilDateTime: ...


class SystemClock:
    """The process's wall clock.

    Attributes:
        zone: Zone to read the wall clock in. None means the system's
            configured local zone.
    """

    __slots__ = ("_zone",)

    def __init__(self, zone: _datetime.tzinfo | None = None) -> None:
        self._zone = zone

    @property
    def zone(self) -> _datetime.tzinfo | None:
        return self._zone

    def now(self) -> CivilDateTime:
        return CivilDateTime.from_stdlib(_datetime.datetime.now(self._zone))

    def today(self) -> CivilDate:
        return self.now().date

    def from_epoch(self, seconds: int) -> CivilDateTime:
        """Return the wall-clock value of an epoch timestamp in this clock's zone.

        Raises:
            TimestampError: If the timestamp cannot be represented.
        """
        return _from_epoch(seconds, self._zone)

    def __repr__(self) -> str:
        return f"SystemClock(zone={self._zone!s})"


class FixedClock:
    """A clock pinned to one instant, for tests and reproducible runs.

    Attributes:
        instant: The civil date-time ``now()`` always returns.
        zone: Zone used for epoch conversion (UTC by default).
    """

    __slots__ = ("_instant", "_zone")

    def __init__(
        self,
        instant: CivilDateTime,
        zone: _datetime.tzinfo = _datetime.timezone.utc,
    ) -> None:
        self._instant = instant
        self._zone = zone

    @property
    def zone(self) -> _datetime.tzinfo:
        return self._zone

    def now(self) -> CivilDateTime:
        return self._instant

    def today(self) -> CivilDate:
        return self._instant.date

    def from_epoch(self, seconds: int) -> CivilDateTime:
        return _from_epoch(seconds, self._zone)

    def __repr__(self) -> str:
        return f"FixedClock({self._instant!r}, zone={self._zone!s})"


def _from_epoch(seconds: int, zone: _datetime.tzinfo | None) -> CivilDateTime:
    try:
        value = _datetime.datetime.fromtimestamp(seconds, tz=zone)
    except (OverflowError, OSError, ValueError) as exc:
        raise TimestampError(f"timestamp {seconds} cannot be represented") from exc
    return CivilDateTime.from_stdlib(value)


__all__ = ["Clock", "FixedClock", "SystemClock"]
