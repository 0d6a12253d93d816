from __future__ import annotations

import pytest

from pyclimate.config import ClimateConfig
from pyclimate.exceptions import ClimateConfigError


def test_defaults() -> None:
    config = ClimateConfig()

    assert config.strict is False
    assert config.time_zone is None
    assert config.zone is None
    assert config.encoding == "utf-8"


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIMATE_STRICT", "yes")
    monkeypatch.setenv("CLIMATE_TIME_ZONE", "America/Chicago")
    monkeypatch.setenv("CLIMATE_ENCODING", "latin-1")
    monkeypatch.setenv("CLIMATE_MAX_REPORTED_ERRORS", "5")

    config = ClimateConfig.from_env()

    assert config.strict is True
    assert config.time_zone == "America/Chicago"
    assert config.zone is not None
    assert config.encoding == "latin-1"
    assert config.max_reported_errors == 5


def test_overrides_beat_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIMATE_STRICT", "true")
    monkeypatch.setenv("CLIMATE_MAX_REPORTED_ERRORS", "5")

    config = ClimateConfig.from_env(strict=False, max_reported_errors=1)

    assert config.strict is False
    assert config.max_reported_errors == 1


def test_unknown_time_zone_rejected() -> None:
    with pytest.raises(ClimateConfigError):
        ClimateConfig(time_zone="Mars/Olympus_Mons")


def test_bad_numeric_env_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLIMATE_MAX_REPORTED_ERRORS", "many")

    with pytest.raises(ClimateConfigError):
        ClimateConfig.from_env()


def test_negative_error_budget_rejected() -> None:
    with pytest.raises(ClimateConfigError):
        ClimateConfig(max_reported_errors=-1)
