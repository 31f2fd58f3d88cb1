"""Runtime configuration: settings and log output."""

from __future__ import annotations

from datemorph.config.logging import configure_logging
from datemorph.config.settings import DatemorphSettings

__all__: list[str] = [
    "DatemorphSettings",
    "configure_logging",
]
