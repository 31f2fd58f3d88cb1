"""Core value types: CivilDate, CivilTime, CivilDateTime."""

from __future__ import annotations

from datemorph.core.date import CivilDate
from datemorph.core.datetime import CivilDateTime
from datemorph.core.time import CivilTime

__all__: list[str] = [
    "CivilDate",
    "CivilDateTime",
    "CivilTime",
]
