from __future__ import annotations

import pytest

from weathernoaa.config import DEFAULT_BASE_URL, ImproperlyConfigured, Settings, env


def test_defaults() -> None:
    settings = Settings.from_env()

    assert settings == Settings()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.default_station == "VOBL"


def test_values_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("NOAA_BASE_URL", "https://mirror.test/decoded/")
    monkeypatch.setenv("NOAA_TIMEOUT", "2.5")
    monkeypatch.setenv("NOAA_RETRIES", "0")
    monkeypatch.setenv("NOAA_CACHE_TIMEOUT", "0")
    monkeypatch.setenv("NOAA_DEFAULT_STATION", " kykm ")
    monkeypatch.setenv("NOAA_LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.base_url == "https://mirror.test/decoded"
    assert settings.timeout == 2.5
    assert settings.retries == 0
    assert settings.cache_timeout == 0
    assert settings.default_station == "KYKM"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("NOAA_TIMEOUT", "soon"),
        ("NOAA_TIMEOUT", "0"),
        ("NOAA_RETRIES", "-1"),
        ("NOAA_RETRIES", "1.5"),
        ("NOAA_BACKOFF_FACTOR", "-0.1"),
        ("NOAA_CACHE_TIMEOUT", "forever"),
        ("NOAA_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_are_rejected(monkeypatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ImproperlyConfigured) as excinfo:
        Settings.from_env()

    assert name in str(excinfo.value)


def test_env_requires_value_without_default() -> None:
    with pytest.raises(ImproperlyConfigured):
        env("NOAA_DOES_NOT_EXIST")
