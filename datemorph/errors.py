"""Datemorph exception hierarchy.

All datemorph exceptions inherit from DatemorphError and carry the
ErrorKind the engine reports when it converts them into a Result.
"""

from __future__ import annotations

from typing import ClassVar

from datemorph.result import ErrorKind


class DatemorphError(Exception):
    """Base exception for all datemorph errors."""

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_FORMAT


class PatternError(DatemorphError):
    """Structurally invalid format pattern.

    Raised when a pattern cannot be compiled, or cannot render a value.

    Examples:
        - Unknown pattern letter (``"yyyy-QQ"``)
        - Unterminated quoted literal (``"yyyy 'at"``)
        - Rendering a date through an hour field
    """

    pass


class ParseError(DatemorphError):
    """Input text does not strictly match a pattern.

    Examples:
        - Missing separators (``"20240101"`` for ``yyyy-MM-dd``)
        - Trailing characters
        - Required fields absent from the pattern
    """

    pass


class ValidationError(DatemorphError):
    """Field value out of range.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Hour value outside 0-23
    """

    pass


class CalendarInputError(ValidationError):
    """Raw calendar integer out of range (month 13 for days-in-month)."""

    kind = ErrorKind.INVALID_CALENDAR_INPUT


class TimestampError(DatemorphError):
    """Epoch timestamp is not acceptable (negative)."""

    kind = ErrorKind.INVALID_TIMESTAMP


class TimezoneError(DatemorphError):
    """Invalid or unknown time zone identifier.

    Examples:
        - Unknown IANA name (``"Mars/Olympus"``)
        - Offset outside -18:00 to +18:00
    """

    kind = ErrorKind.INVALID_ZONE


__all__ = [
    "DatemorphError",
    "PatternError",
    "ParseError",
    "ValidationError",
    "CalendarInputError",
    "TimestampError",
    "TimezoneError",
]
