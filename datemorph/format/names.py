"""Month, weekday and AM/PM names used by text pattern fields.

Names are never read from hidden process state during formatting. An
engine is given a NameTable explicitly: ``ENGLISH`` by default, or a
table captured from the platform locale with :meth:`NameTable.from_system`.
"""

from __future__ import annotations

import calendar
import datetime as _datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class NameTable:
    """Text names for pattern fields.

    Attributes:
        months: Full month names, January first.
        months_short: Abbreviated month names, January first.
        weekdays: Full weekday names, Monday first.
        weekdays_short: Abbreviated weekday names, Monday first.
        am_pm: Morning and afternoon markers.

    Examples:
        >>> ENGLISH.weekdays[0]
        'Monday'
        >>> ENGLISH.month_number("sep", short=True)
        9
    """

    months: tuple[str, ...]
    months_short: tuple[str, ...]
    weekdays: tuple[str, ...]
    weekdays_short: tuple[str, ...]
    am_pm: tuple[str, str] = ("AM", "PM")

    def __post_init__(self) -> None:
        if len(self.months) != 12 or len(self.months_short) != 12:
            raise ValueError("a NameTable needs exactly 12 month names")
        if len(self.weekdays) != 7 or len(self.weekdays_short) != 7:
            raise ValueError("a NameTable needs exactly 7 weekday names")

    @classmethod
    def from_system(cls) -> NameTable:
        """Capture names from the process's current LC_TIME locale."""
        return cls(
            months=tuple(calendar.month_name[1:]),
            months_short=tuple(calendar.month_abbr[1:]),
            weekdays=tuple(calendar.day_name),
            weekdays_short=tuple(calendar.day_abbr),
            am_pm=(
                _datetime.time(1).strftime("%p") or "AM",
                _datetime.time(13).strftime("%p") or "PM",
            ),
        )

    def month_number(self, text: str, *, short: bool) -> int | None:
        """Return the month (1-12) named by ``text``, case-insensitively."""
        names = self.months_short if short else self.months
        return _lookup(names, text)

    def weekday_number(self, text: str, *, short: bool) -> int | None:
        """Return the weekday (Monday=0) named by ``text``, case-insensitively."""
        names = self.weekdays_short if short else self.weekdays
        index = _lookup(names, text)
        return None if index is None else index - 1


def _lookup(names: tuple[str, ...], text: str) -> int | None:
    folded = text.casefold()
    for index, name in enumerate(names, start=1):
        if name.casefold() == folded:
            return index
    return None


ENGLISH = NameTable(
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    months_short=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    weekdays=(
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    ),
    weekdays_short=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
)


__all__ = ["NameTable", "ENGLISH"]
