"""Time zone units: zone resolution and zone-bound instants."""

from __future__ import annotations

from datemorph.units.timezone import ZonedInstant, resolve_zone

__all__: list[str] = [
    "ZonedInstant",
    "resolve_zone",
]
