"""Pattern-driven formatting and strict parsing.

A pattern is a string of field letters and literals, such as
``yyyy-MM-dd HH:mm:ss``. Compiling a pattern checks its structure once;
the compiled FormatPattern can then render values and strictly parse
text.

Supported Fields:
    y, u    - year: yyyy (zero-padded), yy (two digits, 2000-2099), y (unpadded)
    M       - month: M, MM (number), MMM (short name), MMMM (full name)
    d       - day of month: d, dd
    H       - hour of day 0-23: H, HH
    h       - clock hour 1-12: h, hh (needs ``a`` when parsing)
    a       - AM/PM marker
    m       - minute: m, mm
    s       - second: s, ss
    E       - weekday name: E, EE, EEE (short), EEEE (full)
    'text'  - quoted literal; ``''`` is a single quote

Any other ASCII letter, and the reserved characters ``[]{}#``, make the
pattern invalid. Every other character is a literal.

Parsing is strict: the entire input must match, numeric fields must be
in range (month 13 is rejected, never wrapped), the day must exist in
its month, and a weekday name must agree with the date. Fields of a
partial date (``dd HH:mm``) are range-checked too.

Two-digit years always parse into 2000-2099, so ``yy`` only round-trips
years in that range: 1999 renders as ``99``, which parses back as 2099.

Examples:
    >>> from datemorph.core.date import CivilDate
    >>> pattern = compile_pattern("dd MMM yyyy")
    >>> pattern.render(CivilDate(2024, 1, 5))
    '05 Jan 2024'

    >>> compile_pattern("yyyy-MM-dd").parse_date("2024-02-29")
    CivilDate(2024, 2, 29)

    >>> compile_pattern("yyyy-MM-dd").parse_date("2024-13-01")
    Traceback (most recent call last):
    ...
    ValidationError: month must be between 1 and 12, got 13
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from typing import Union

from datemorph._internal.constants import TWO_DIGIT_YEAR_BASE
from datemorph._internal.validation import (
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)
from datemorph.core.date import CivilDate
from datemorph.core.datetime import CivilDateTime
from datemorph.core.time import CivilTime
from datemorph.errors import ParseError, PatternError, ValidationError
from datemorph.format.names import ENGLISH, NameTable

# Type alias for values a pattern can render or produce
TemporalType = Union[CivilDate, CivilTime, CivilDateTime]

# Maximum run length for each supported field letter
_MAX_WIDTH: dict[str, int] = {
    "y": 9,
    "M": 4,
    "d": 2,
    "H": 2,
    "h": 2,
    "a": 1,
    "m": 2,
    "s": 2,
    "E": 4,
}

# Letters accepted as spellings of another field
_ALIASES: dict[str, str] = {"u": "y"}

_RESERVED = frozenset("[]{}#")

# Year assumed when checking a day whose pattern has no year
_LEAP_YEAR = 2000

# Value attribute each field renders from
_ATTRIBUTES: dict[str, str] = {
    "y": "year",
    "M": "month",
    "d": "day",
    "E": "weekday",
    "H": "hour",
    "h": "hour",
    "a": "hour",
    "m": "minute",
    "s": "second",
}


@dataclass(frozen=True)
class _Field:
    """One field of a compiled pattern."""

    letter: str
    width: int

    @property
    def text(self) -> str:
        return self.letter * self.width


_Token = Union[_Field, str]


class FormatPattern:
    """A compiled date/time pattern.

    Use :func:`compile_pattern` rather than the constructor so repeated
    patterns share one compiled instance.

    Attributes:
        source: The pattern string this was compiled from.
        has_date_fields: True if the pattern can carry a full date.
        has_time_fields: True if the pattern can carry a time of day.

    Examples:
        >>> p = compile_pattern("HH:mm")
        >>> p.has_time_fields, p.has_date_fields
        (True, False)
    """

    __slots__ = ("_source", "_tokens", "_letters")

    def __init__(self, source: str) -> None:
        """Compile a pattern string.

        Raises:
            PatternError: If the pattern is structurally invalid.
            TypeError: If source is not a string.
        """
        if not isinstance(source, str):
            raise TypeError(f"pattern must be a string, got {type(source).__name__}")

        self._source = source
        self._tokens: tuple[_Token, ...] = _tokenize(source)
        self._letters = frozenset(
            token.letter for token in self._tokens if isinstance(token, _Field)
        )

    @property
    def source(self) -> str:
        return self._source

    @property
    def has_date_fields(self) -> bool:
        return {"y", "M", "d"} <= self._letters

    @property
    def has_time_fields(self) -> bool:
        return "H" in self._letters or "h" in self._letters

    def render(self, value: TemporalType, names: NameTable = ENGLISH) -> str:
        """Render a value through this pattern.

        Raises:
            PatternError: If the pattern needs a field the value lacks,
                such as an hour for a CivilDate.

        Examples:
            >>> from datemorph.core.time import CivilTime
            >>> compile_pattern("hh:mm a").render(CivilTime(14, 5))
            '02:05 PM'
        """
        parts = []
        for token in self._tokens:
            if isinstance(token, str):
                parts.append(token)
            else:
                parts.append(_render_field(value, token, names))
        return "".join(parts)

    def parse(self, text: str, names: NameTable = ENGLISH) -> TemporalType:
        """Parse text into the most specific value the pattern carries.

        Returns a CivilDateTime when both a date and a time are present,
        otherwise a CivilDate or a CivilTime.

        Raises:
            ParseError: If text does not match, or carries neither a full
                date nor a time.
            ValidationError: If a field is out of range.
        """
        date, time = self._resolve(text, names)
        if date is not None and time is not None:
            return CivilDateTime.combine(date, time)
        if date is not None:
            return date
        if time is not None:
            return time
        raise ParseError(
            f"pattern {self._source!r} carries neither a full date nor a time"
        )

    def parse_date(self, text: str, names: NameTable = ENGLISH) -> CivilDate:
        """Parse text into a CivilDate. Time fields are validated, then ignored.

        Raises:
            ParseError: If text does not match or the pattern lacks
                year, month or day.
            ValidationError: If a field is out of range.
        """
        date, _ = self._resolve(text, names)
        if date is None:
            raise ParseError(
                f"pattern {self._source!r} does not contain year, month and day"
            )
        return date

    def parse_time(self, text: str, names: NameTable = ENGLISH) -> CivilTime:
        """Parse text into a CivilTime. Date fields are validated, then ignored.

        Minutes and seconds default to zero when the pattern omits them.

        Raises:
            ParseError: If text does not match or the pattern has no hour.
            ValidationError: If a field is out of range.
        """
        _, time = self._resolve(text, names)
        if time is None:
            raise ParseError(f"pattern {self._source!r} does not contain an hour")
        return time

    def parse_datetime(self, text: str, names: NameTable = ENGLISH) -> CivilDateTime:
        """Parse text into a CivilDateTime.

        Raises:
            ParseError: If text does not match or the pattern lacks a full
                date or an hour.
            ValidationError: If a field is out of range.
        """
        date, time = self._resolve(text, names)
        if date is None or time is None:
            raise ParseError(
                f"pattern {self._source!r} does not contain both a date and a time"
            )
        return CivilDateTime.combine(date, time)

    def _resolve(
        self, text: str, names: NameTable
    ) -> tuple[CivilDate | None, CivilTime | None]:
        if not isinstance(text, str):
            raise TypeError(f"input must be a string, got {type(text).__name__}")

        match = _compile_regex(self._source, names).fullmatch(text)
        if match is None:
            raise ParseError(f"{text!r} does not match pattern {self._source!r}")

        fields: dict[str, int] = {}
        for index, token in enumerate(self._tokens):
            if isinstance(token, str):
                continue
            value = _field_value(token, match.group(f"f{index}"), names)
            previous = fields.setdefault(token.letter, value)
            if previous != value:
                raise ParseError(
                    f"field {token.text} is repeated with conflicting values in {text!r}"
                )

        return _resolve_date(fields, text), _resolve_time(fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormatPattern):
            return NotImplemented
        return self._source == other._source

    def __hash__(self) -> int:
        return hash(self._source)

    def __repr__(self) -> str:
        return f"FormatPattern({self._source!r})"


@functools.lru_cache(maxsize=256)
def compile_pattern(source: str) -> FormatPattern:
    """Compile (or fetch the cached compilation of) a pattern string.

    Raises:
        PatternError: If the pattern is structurally invalid.

    Examples:
        >>> compile_pattern("yyyy-MM-dd") is compile_pattern("yyyy-MM-dd")
        True

        >>> compile_pattern("yyyy-QQ")
        Traceback (most recent call last):
        ...
        PatternError: unknown pattern letter 'Q' at position 5 in 'yyyy-QQ'
    """
    return FormatPattern(source)


def render(value: TemporalType, pattern: str, names: NameTable = ENGLISH) -> str:
    """Render a value with a pattern string."""
    return compile_pattern(pattern).render(value, names)


def parse(text: str, pattern: str, names: NameTable = ENGLISH) -> TemporalType:
    """Parse text with a pattern string (see :meth:`FormatPattern.parse`)."""
    return compile_pattern(pattern).parse(text, names)


def _tokenize(source: str) -> tuple[_Token, ...]:
    """Split a pattern into fields and literal runs.

    Raises:
        PatternError: If the pattern is structurally invalid.
    """
    if not source:
        raise PatternError("pattern must not be empty")

    tokens: list[_Token] = []
    i = 0
    n = len(source)
    while i < n:
        char = source[i]
        if char == "'":
            literal, i = _read_quoted(source, i)
            tokens.append(literal)
        elif char.isascii() and char.isalpha():
            j = i
            while j < n and source[j] == char:
                j += 1
            letter = _ALIASES.get(char, char)
            if letter not in _MAX_WIDTH:
                raise PatternError(
                    f"unknown pattern letter {char!r} at position {i} in {source!r}"
                )
            width = j - i
            if width > _MAX_WIDTH[letter]:
                raise PatternError(
                    f"too many pattern letters {char * width!r} at position {i} "
                    f"in {source!r}"
                )
            tokens.append(_Field(letter, width))
            i = j
        elif char in _RESERVED:
            raise PatternError(
                f"reserved pattern character {char!r} at position {i} in {source!r}"
            )
        else:
            tokens.append(char)
            i += 1

    return tuple(tokens)


def _read_quoted(source: str, start: int) -> tuple[str, int]:
    """Read a quoted literal starting at ``start``; return (text, next index)."""
    if source.startswith("''", start):
        return "'", start + 2

    chars = []
    i = start + 1
    while i < len(source):
        if source[i] == "'":
            if source.startswith("''", i):
                chars.append("'")
                i += 2
                continue
            return "".join(chars), i + 1
        chars.append(source[i])
        i += 1

    raise PatternError(f"unterminated quoted literal at position {start} in {source!r}")


@functools.lru_cache(maxsize=256)
def _compile_regex(source: str, names: NameTable) -> re.Pattern[str]:
    """Build the anchored parse regex for a pattern and name table."""
    parts = []
    for index, token in enumerate(compile_pattern(source)._tokens):
        if isinstance(token, str):
            parts.append(re.escape(token))
        else:
            parts.append(f"(?P<f{index}>{_field_regex(token, names)})")
    return re.compile("".join(parts))


def _field_regex(field: _Field, names: NameTable) -> str:
    letter, width = field.letter, field.width
    if letter == "y":
        if width == 1:
            return r"-?[0-9]{1,4}"
        if width == 2:
            return r"[0-9]{2}"
        if width == 3:
            return r"-?[0-9]{3,4}"
        return rf"-?[0-9]{{{width}}}"
    if letter == "M" and width >= 3:
        return _alternation(names.months_short if width == 3 else names.months)
    if letter == "E":
        return _alternation(names.weekdays if width == 4 else names.weekdays_short)
    if letter == "a":
        return _alternation(names.am_pm)
    if width == 1:
        return r"[0-9]{1,2}"
    return r"[0-9]{2}"


def _alternation(choices: tuple[str, ...]) -> str:
    # Longest first so "June" is not cut short by a "Jun" prefix
    ordered = sorted(set(choices), key=len, reverse=True)
    return "(?i:" + "|".join(re.escape(choice) for choice in ordered) + ")"


def _field_value(field: _Field, text: str, names: NameTable) -> int:
    """Convert the matched text of one field to its integer value."""
    letter, width = field.letter, field.width
    if letter == "y" and width == 2:
        return TWO_DIGIT_YEAR_BASE + int(text)
    if letter == "M" and width >= 3:
        number = names.month_number(text, short=width == 3)
    elif letter == "E":
        number = names.weekday_number(text, short=width < 4)
    elif letter == "a":
        folded = text.casefold()
        number = 0 if folded == names.am_pm[0].casefold() else 1
    else:
        return int(text)

    if number is None:
        raise ParseError(f"unrecognized name {text!r} for field {field.text}")
    return number


def _resolve_date(fields: dict[str, int], text: str) -> CivilDate | None:
    if not {"y", "M", "d"} <= fields.keys():
        _check_partial_date(fields)
        return None

    date = CivilDate(fields["y"], fields["M"], fields["d"])
    if "E" in fields and fields["E"] != date.weekday:
        raise ParseError(f"weekday in {text!r} does not match {date.to_iso_format()}")
    return date


def _check_partial_date(fields: dict[str, int]) -> None:
    """Range-check the date fields of a pattern that lacks a full date."""
    if "y" in fields:
        validate_year(fields["y"])
    if "M" in fields:
        validate_month(fields["M"])
    if "d" in fields:
        if "M" in fields:
            validate_day(fields.get("y", _LEAP_YEAR), fields["M"], fields["d"])
        elif not (1 <= fields["d"] <= 31):
            raise ValidationError(f"day must be between 1 and 31, got {fields['d']}")


def _resolve_time(fields: dict[str, int]) -> CivilTime | None:
    minute = fields.get("m", 0)
    second = fields.get("s", 0)

    hour = fields.get("H")
    if "h" in fields:
        clock_hour = fields["h"]
        if not (1 <= clock_hour <= 12):
            raise ValidationError(f"clock hour must be between 1 and 12, got {clock_hour}")
        if "a" not in fields:
            raise ParseError("clock hour (h) needs an AM/PM marker (a) to parse")
        from_clock = clock_hour % 12 + 12 * fields["a"]
        if hour is not None and hour != from_clock:
            raise ParseError(f"hour {hour} conflicts with clock hour {clock_hour}")
        hour = from_clock
    elif hour is not None and "a" in fields and hour // 12 != fields["a"]:
        raise ParseError(f"hour {hour} conflicts with the AM/PM marker")

    if hour is None:
        validate_time(0, minute, second)
        return None
    return CivilTime(hour, minute, second)


def _render_field(value: TemporalType, field: _Field, names: NameTable) -> str:
    """Render a single field of ``value``.

    Raises:
        PatternError: If value has no component for this field.
    """
    letter, width = field.letter, field.width
    attribute = _ATTRIBUTES[letter]

    component = getattr(value, attribute, None)
    if component is None:
        raise PatternError(
            f"pattern field {field.text} requires {attribute}, "
            f"but {type(value).__name__} has no {attribute}"
        )

    if letter == "y":
        if width == 2:
            return f"{component % 100:02d}"
        if width == 1:
            return str(component)
        sign = "-" if component < 0 else ""
        return f"{sign}{abs(component):0{width}d}"
    if letter == "M" and width >= 3:
        return (names.months_short if width == 3 else names.months)[component - 1]
    if letter == "E":
        return (names.weekdays if width == 4 else names.weekdays_short)[component]
    if letter == "a":
        return names.am_pm[component // 12]
    if letter == "h":
        component = component % 12 or 12
    return f"{component:0{width}d}"


__all__ = ["FormatPattern", "TemporalType", "compile_pattern", "render", "parse"]
