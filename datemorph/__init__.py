"""Datemorph: pattern-driven date and time transformation.

Datemorph parses dates and times strictly against user-supplied patterns
such as ``dd/MM/yyyy``, computes with them in the proleptic Gregorian
calendar, converts between time zones and renders the result through
another pattern. Every engine operation returns a Result instead of
raising for malformed input.

Core Types:
    CivilDate: Calendar date (year, month, day)
    CivilTime: Time of day (hour, minute, second)
    CivilDateTime: Combined date and time, no zone

Engine:
    DateTimeEngine: All transformation and calendar operations
    DateRequest: Engine operations with inputs bound up front
    Result: Value-or-error outcome of an operation
    ErrorKind: Why an operation rejected its input

Capabilities:
    SystemClock, FixedClock: Source of "now" and of the local zone
    NameTable: Month, weekday and AM/PM names
    ZonedInstant: Civil date-time bound to a zone

Exceptions:
    DatemorphError: Base exception
    PatternError: Invalid pattern
    ParseError: Input does not match its pattern
    ValidationError: Field value out of range
    TimestampError: Unusable epoch timestamp
    TimezoneError: Unknown zone

Example:
    >>> from datemorph import DateTimeEngine
    >>> engine = DateTimeEngine()
    >>> engine.add_days("2024-02-28", "yyyy-MM-dd", 1, "dd.MM.yyyy").value
    '29.02.2024'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

logging.getLogger("datemorph").addHandler(logging.NullHandler())

# Core types
from datemorph.core.date import CivilDate
from datemorph.core.datetime import CivilDateTime
from datemorph.core.time import CivilTime

# Engine
from datemorph.engine import DateTimeEngine
from datemorph.request import DateRequest
from datemorph.result import ErrorKind, Result, ResultError

# Capabilities
from datemorph.clock import Clock, FixedClock, SystemClock
from datemorph.format import ENGLISH, FormatPattern, NameTable, compile_pattern, parse, render
from datemorph.units.timezone import ZonedInstant, resolve_zone

# Configuration
from datemorph.config import DatemorphSettings, configure_logging

# Exceptions
from datemorph.errors import (
    CalendarInputError,
    DatemorphError,
    ParseError,
    PatternError,
    TimestampError,
    TimezoneError,
    ValidationError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "CivilDate",
    "CivilDateTime",
    "CivilTime",
    # Engine
    "DateTimeEngine",
    "DateRequest",
    "ErrorKind",
    "Result",
    "ResultError",
    # Capabilities
    "Clock",
    "FixedClock",
    "SystemClock",
    "ENGLISH",
    "FormatPattern",
    "NameTable",
    "compile_pattern",
    "parse",
    "render",
    "ZonedInstant",
    "resolve_zone",
    # Configuration
    "DatemorphSettings",
    "configure_logging",
    # Exceptions
    "DatemorphError",
    "PatternError",
    "ParseError",
    "ValidationError",
    "CalendarInputError",
    "TimestampError",
    "TimezoneError",
]
