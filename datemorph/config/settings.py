"""Settings for building an engine from the environment.

Priority chain (highest to lowest):
  1. Init kwargs
  2. Env vars (``DATEMORPH_*`` prefix)
  3. Code defaults

Examples:
    >>> settings = DatemorphSettings(zone="Europe/Paris", names="english")
    >>> settings.zone
    'Europe/Paris'
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

from datemorph.errors import TimezoneError
from datemorph.units.timezone import resolve_zone


class DatemorphSettings(BaseSettings):
    """Engine settings, frozen after construction.

    Attributes:
        zone: Zone the system clock reads "now" and epoch timestamps in.
            None means the machine's local zone.
        names: ``"english"`` for fixed English month and weekday names,
            ``"system"`` to read them from the process locale.
        verbose: Log rejected inputs at debug level.
        log_json: Emit logs as JSON lines.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DATEMORPH_",
    }

    zone: str | None = None
    names: Literal["english", "system"] = "english"
    verbose: bool = False
    log_json: bool = False

    @field_validator("zone")
    @classmethod
    def _check_zone(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            resolve_zone(value)
        except TimezoneError as exc:
            raise ValueError(str(exc)) from exc
        return value


__all__ = ["DatemorphSettings"]
