"""Tests for DatemorphSettings and engine construction from settings."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pydantic
import pytest
import structlog

from datemorph.clock import SystemClock
from datemorph.config.settings import DatemorphSettings
from datemorph.engine import DateTimeEngine
from datemorph.format import ENGLISH


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ZONE", "NAMES", "VERBOSE", "LOG_JSON"):
        monkeypatch.delenv(f"DATEMORPH_{name}", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root logger and structlog state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    datemorph_logger = logging.getLogger("datemorph")
    datemorph_level = datemorph_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    datemorph_logger.setLevel(datemorph_level)
    structlog.reset_defaults()


class TestDatemorphSettingsDefaults:
    def test_all_defaults(self) -> None:
        """With no env vars, all fields use code defaults."""
        settings = DatemorphSettings()
        assert settings.zone is None
        assert settings.names == "english"
        assert settings.verbose is False
        assert settings.log_json is False

    def test_frozen(self) -> None:
        settings = DatemorphSettings()
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestEnvironment:
    """Env vars with the DATEMORPH_ prefix override defaults."""

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATEMORPH_ZONE", "Europe/Paris")
        monkeypatch.setenv("DATEMORPH_VERBOSE", "true")
        settings = DatemorphSettings()
        assert settings.zone == "Europe/Paris"
        assert settings.verbose is True

    def test_init_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATEMORPH_ZONE", "Europe/Paris")
        assert DatemorphSettings(zone="UTC").zone == "UTC"


class TestValidation:
    def test_unknown_zone(self) -> None:
        with pytest.raises(pydantic.ValidationError, match="unknown time zone"):
            DatemorphSettings(zone="Mars/Olympus")

    def test_unknown_names(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            DatemorphSettings(names="klingon")


class TestFromSettings:
    """DateTimeEngine.from_settings builds the configured clock and names."""

    def test_zone(self) -> None:
        engine = DateTimeEngine.from_settings(DatemorphSettings(zone="+02:00"))
        assert isinstance(engine.clock, SystemClock)
        assert engine.transform_unix(0, "HH:mm").value == "02:00"

    def test_local_zone(self) -> None:
        engine = DateTimeEngine.from_settings(DatemorphSettings())
        assert engine.clock.zone is None
        assert engine.names is ENGLISH

    def test_system_names(self) -> None:
        engine = DateTimeEngine.from_settings(DatemorphSettings(names="system"))
        assert len(engine.names.weekdays) == 7

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATEMORPH_ZONE", "Asia/Tokyo")
        engine = DateTimeEngine.from_settings()
        assert engine.transform_unix(0, "yyyy-MM-dd HH:mm").value == "1970-01-01 09:00"

    def test_verbose_configures_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """DATEMORPH_VERBOSE turns on debug output for datemorph loggers."""
        monkeypatch.setenv("DATEMORPH_VERBOSE", "true")
        DateTimeEngine.from_settings()
        assert logging.getLogger("datemorph").level == logging.DEBUG
        assert len(logging.getLogger().handlers) == 1

    def test_log_json_configures_logging(self, capfd: pytest.CaptureFixture[str]) -> None:
        engine = DateTimeEngine.from_settings(DatemorphSettings(verbose=True, log_json=True))
        engine.get_week_number("2024-13-01", "yyyy-MM-dd")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "input_rejected"
        assert parsed["op"] == "get_week_number"

    def test_defaults_leave_logging_alone(self) -> None:
        """Without verbose or log_json, the host's logging setup is untouched."""
        root = logging.getLogger()
        handlers = root.handlers[:]
        DateTimeEngine.from_settings(DatemorphSettings())
        assert root.handlers == handlers
        assert logging.getLogger("datemorph").level == logging.NOTSET
