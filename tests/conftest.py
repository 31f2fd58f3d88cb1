"""Pytest configuration and fixtures for datemorph tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datemorph can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datemorph.clock import FixedClock  # noqa: E402
from datemorph.core.datetime import CivilDateTime  # noqa: E402
from datemorph.engine import DateTimeEngine  # noqa: E402

# Saturday, 15 June 2024, 10:30:00
FIXED_NOW = CivilDateTime(2024, 6, 15, 10, 30, 0)


@pytest.fixture
def clock() -> FixedClock:
    """A clock pinned to FIXED_NOW, converting epoch timestamps in UTC."""
    return FixedClock(FIXED_NOW)


@pytest.fixture
def engine(clock: FixedClock) -> DateTimeEngine:
    """An engine on the fixed clock with English names."""
    return DateTimeEngine(clock)
