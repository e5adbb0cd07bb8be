"""NOAA decoded METAR reports.

Reports are plain text files published per station under
``https://tgftp.nws.noaa.gov/data/observations/metar/decoded/{STATION}.TXT``.
"""
from __future__ import annotations

from typing import Optional

from ..config import DEFAULT_BASE_URL, Settings
from ..entities import WeatherInfo
from ..parser.report import parse
from .base import AsyncWeatherProvider, RequestConfig, WeatherProvider


def normalize_station_code(station_code: str) -> str:
    code = (station_code or "").strip().upper()
    if not code or "/" in code or any(char.isspace() for char in code):
        raise ValueError(f"invalid station code: {station_code!r}")
    return code


def report_url(base_url: str, station_code: str) -> str:
    return f"{base_url.rstrip('/')}/{normalize_station_code(station_code)}.TXT"


class NoaaProvider(WeatherProvider):
    name = "noaa"
    base_url = DEFAULT_BASE_URL

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "NoaaProvider":
        return cls(base_url=settings.base_url, request_config=RequestConfig.from_settings(settings), **kwargs)

    def fetch_report(self, station_code: str) -> str:
        """Return the raw decoded report; raises :class:`~weathernoaa.errors.FetchError`."""
        code = normalize_station_code(station_code)
        response = self._request("GET", report_url(self.base_url, code), station_code=code)
        self._log.debug("Fetched %d characters for %s", len(response.text), code)
        return response.text

    def get_weather(self, station_code: str) -> WeatherInfo:
        return parse(self.fetch_report(station_code))


class AsyncNoaaProvider(AsyncWeatherProvider):
    name = "noaa"
    base_url = DEFAULT_BASE_URL

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "AsyncNoaaProvider":
        return cls(base_url=settings.base_url, request_config=RequestConfig.from_settings(settings), **kwargs)

    async def fetch_report(self, station_code: str) -> str:
        code = normalize_station_code(station_code)
        response = await self._request("GET", report_url(self.base_url, code), station_code=code)
        self._log.debug("Fetched %d characters for %s", len(response.text), code)
        return response.text

    async def get_weather(self, station_code: str) -> WeatherInfo:
        return parse(await self.fetch_report(station_code))


__all__ = ["AsyncNoaaProvider", "NoaaProvider", "normalize_station_code", "report_url"]
