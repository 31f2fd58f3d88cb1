"""Pattern-driven formatting and parsing.

This module provides functions for converting civil values to and from
text through user-supplied patterns such as ``yyyy-MM-dd HH:mm``.

Functions:
    compile_pattern: Compile a pattern string (cached).
    render: Render a value with a pattern string.
    parse: Strictly parse text with a pattern string.

Examples:
    >>> from datemorph.core.date import CivilDate
    >>> render(CivilDate(2024, 1, 15), "dd/MM/yyyy")
    '15/01/2024'

    >>> parse("15/01/2024", "dd/MM/yyyy")
    CivilDate(2024, 1, 15)
"""

from __future__ import annotations

from datemorph.format.names import ENGLISH, NameTable
from datemorph.format.pattern import FormatPattern, compile_pattern, parse, render

__all__: list[str] = [
    "ENGLISH",
    "FormatPattern",
    "NameTable",
    "compile_pattern",
    "parse",
    "render",
]
