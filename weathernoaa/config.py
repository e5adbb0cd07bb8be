"""Runtime settings read from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

DEFAULT_BASE_URL = "https://tgftp.nws.noaa.gov/data/observations/metar/decoded"
DEFAULT_STATION = "VOBL"


class ImproperlyConfigured(Exception):
    """An environment variable holds an unusable value."""


def env(name: str, default: Optional[str] = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


def _typed(name: str, default: str, cast: Callable[[str], T], check: Callable[[T], bool], expected: str) -> T:
    raw = env(name, default)
    try:
        value = cast(raw)
    except ValueError as exc:
        raise ImproperlyConfigured(f"{name} must be {expected}, got {raw!r}") from exc
    if not check(value):
        raise ImproperlyConfigured(f"{name} must be {expected}, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    retries: int = 2
    backoff_factor: float = 0.3
    cache_timeout: float = 300.0
    default_station: str = DEFAULT_STATION
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        log_level = env("NOAA_LOG_LEVEL", "WARNING").upper()
        if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ImproperlyConfigured(f"NOAA_LOG_LEVEL must be a logging level name, got {log_level!r}")
        return cls(
            base_url=env("NOAA_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=_typed("NOAA_TIMEOUT", "10", float, lambda v: v > 0, "a positive number"),
            retries=_typed("NOAA_RETRIES", "2", int, lambda v: v >= 0, "a non-negative integer"),
            backoff_factor=_typed("NOAA_BACKOFF_FACTOR", "0.3", float, lambda v: v >= 0, "a non-negative number"),
            cache_timeout=_typed("NOAA_CACHE_TIMEOUT", "300", float, lambda v: v >= 0, "a non-negative number"),
            default_station=env("NOAA_DEFAULT_STATION", DEFAULT_STATION).strip().upper() or DEFAULT_STATION,
            log_level=log_level,
        )


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_STATION", "ImproperlyConfigured", "Settings", "env"]
