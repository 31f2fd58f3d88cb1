"""Time zone resolution and zone-bound instants.

Zone identifiers resolve against the IANA database through ``zoneinfo``
(backed by the ``tzdata`` package where the platform has no database),
plus UTC and fixed UTC offsets:

    - "Z", "UTC", "GMT": UTC
    - "+HH:MM", "-HHMM", "+HH": fixed offsets, optionally prefixed by UTC/GMT
    - "Europe/Paris", "America/New_York", ...: IANA zones with DST rules
"""

from __future__ import annotations

import datetime as _datetime
import re
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datemorph._internal.constants import MAX_UTC_OFFSET_SECONDS
from datemorph.core.datetime import CivilDateTime
from datemorph.errors import TimezoneError, ValidationError

_UTC_NAMES = frozenset({"Z", "UTC", "GMT", "UT"})

# +HH:MM, -HH:MM, +HHMM, -HHMM, +HH, -HH, optionally after UTC/GMT
_OFFSET_PATTERN = re.compile(r"^(?:UTC|GMT|UT)?([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE)


def resolve_zone(identifier: str) -> _datetime.tzinfo:
    """Resolve a zone identifier to a tzinfo.

    Raises:
        TimezoneError: If the identifier is not recognized.

    Examples:
        >>> resolve_zone("UTC")
        datetime.timezone.utc

        >>> resolve_zone("+05:30").utcoffset(None)
        datetime.timedelta(seconds=19800)

        >>> resolve_zone("Mars/Olympus_Mons")
        Traceback (most recent call last):
        ...
        TimezoneError: unknown time zone: 'Mars/Olympus_Mons'
    """
    if not isinstance(identifier, str):
        raise TimezoneError(f"zone must be a string, got {type(identifier).__name__}")

    name = identifier.strip()
    if not name:
        raise TimezoneError("zone must not be empty")
    if name.upper() in _UTC_NAMES:
        return _datetime.timezone.utc

    match = _OFFSET_PATTERN.match(name)
    if match:
        return _fixed_offset(name, *match.groups())

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise TimezoneError(f"unknown time zone: {identifier!r}") from exc


def _fixed_offset(name: str, sign: str, hours: str, minutes: str | None) -> _datetime.tzinfo:
    minute_value = int(minutes) if minutes else 0
    if minute_value > 59:
        raise TimezoneError(f"offset minutes out of range: {name!r}")

    offset = int(hours) * 3600 + minute_value * 60
    if offset > MAX_UTC_OFFSET_SECONDS:
        raise TimezoneError(f"offset out of range: {name!r}")
    if sign == "-":
        offset = -offset
    return _datetime.timezone(_datetime.timedelta(seconds=offset))


class ZonedInstant:
    """A civil date-time bound to a time zone's rules.

    The local wall-clock value is interpreted with the zone's offset in
    force at that moment. Wall-clock times skipped by a DST gap move
    forward by the gap length; repeated times in a DST overlap take the
    earlier offset.

    Examples:
        >>> utc = ZonedInstant(CivilDateTime(2024, 6, 1, 12, 0), resolve_zone("UTC"))
        >>> utc.in_zone(resolve_zone("America/New_York")).local
        CivilDateTime(2024, 6, 1, 8, 0, 0)
    """

    __slots__ = ("_local", "_zone")

    def __init__(self, local: CivilDateTime, zone: _datetime.tzinfo) -> None:
        self._local = local
        self._zone = zone

    @property
    def local(self) -> CivilDateTime:
        """Return the wall-clock value in this instant's zone."""
        return self._local

    @property
    def zone(self) -> _datetime.tzinfo:
        return self._zone

    @property
    def utc_offset_seconds(self) -> int:
        """Return the zone offset in force at this instant, in seconds."""
        offset = self._aware().utcoffset()
        return int(offset.total_seconds()) if offset is not None else 0

    def in_zone(self, zone: _datetime.tzinfo) -> ZonedInstant:
        """Return the same instant expressed in another zone.

        Raises:
            ValidationError: If the result falls outside years 1-9999.
        """
        try:
            converted = self._aware().astimezone(zone)
        except OverflowError as exc:
            raise ValidationError(f"{self._local} cannot be expressed in {zone}") from exc
        return ZonedInstant(CivilDateTime.from_stdlib(converted), zone)

    def _aware(self) -> _datetime.datetime:
        try:
            aware = self._local.to_stdlib(self._zone)
        except ValueError as exc:
            raise ValidationError(
                f"{self._local} is outside the range zone rules cover"
            ) from exc
        # Round-trip through UTC to normalize wall-clock times inside a DST gap
        return aware.astimezone(_datetime.timezone.utc).astimezone(self._zone)

    def __repr__(self) -> str:
        return f"ZonedInstant({self._local!r}, {self._zone!s})"


__all__ = ["ZonedInstant", "resolve_zone"]
