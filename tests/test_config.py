"""Tests for configuration adapter."""

from datetime import timedelta
from pathlib import Path

import pytest

from dublin_bikes.adapters.config import AppConfig


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.host == "0.0.0.0"
    assert config.port == 8000
    assert config.log_level == "INFO"
    assert config.cache_ttl == timedelta(minutes=5)
    assert config.simulator_enabled is True
    assert config.simulator_interval_seconds == 15.0
    assert config.simulator_warmup_seconds == 5.0
    assert config.zone.key == "Europe/Dublin"
    assert Path(config.dataset_path).name == "dublinbike.json"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("CACHE_TTL_SECONDS", "30")
    monkeypatch.setenv("SIMULATOR_ENABLED", "false")
    monkeypatch.setenv("SIMULATOR_SEED", "7")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig()

    assert config.host == "127.0.0.1"
    assert config.port == 9000
    assert config.cache_ttl == timedelta(seconds=30)
    assert config.simulator_enabled is False
    assert config.simulator_seed == 7
    assert config.log_level == "DEBUG"


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown log level, when loading config, then validation fails."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="log_level must be a logging level name"):
        AppConfig()


def test_config_validates_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown timezone, when loading config, then validation fails."""
    monkeypatch.setenv("TIMEZONE", "Mars/Olympus_Mons")

    with pytest.raises(ValueError, match="timezone must be an IANA timezone name"):
        AppConfig()


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("CACHE_TTL_SECONDS", "0"),
        ("SIMULATOR_INTERVAL_SECONDS", "0"),
        ("SIMULATOR_WARMUP_SECONDS", "-1"),
    ],
)
def test_config_rejects_non_positive_timings(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    """Given a non-positive timing, when loading config, then validation fails."""
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        AppConfig()
