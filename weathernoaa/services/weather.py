from __future__ import annotations

import logging
from typing import Optional

from ..cache import WeatherCache
from ..config import Settings
from ..entities import WeatherInfo
from ..errors import FetchError, ParseError
from ..providers.noaa import AsyncNoaaProvider, NoaaProvider, normalize_station_code


class WeatherService:
    """Fetch, parse and cache current conditions by station code.

    Fetch failures surface as :class:`FetchError` and malformed reports as
    :class:`ParseError`; nothing is cached unless the parse succeeded.
    """

    CACHE_TTL = 5 * 60

    def __init__(
        self,
        *,
        provider: Optional[NoaaProvider] = None,
        async_provider: Optional[AsyncNoaaProvider] = None,
        cache: Optional[WeatherCache] = None,
        ttl: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.provider = provider or NoaaProvider()
        self.async_provider = async_provider or AsyncNoaaProvider(base_url=self.provider.base_url)
        self.cache = cache if cache is not None else WeatherCache()
        self.ttl = self.CACHE_TTL if ttl is None else ttl
        self._log = logger or logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "WeatherService":
        return cls(
            provider=NoaaProvider.from_settings(settings),
            async_provider=AsyncNoaaProvider.from_settings(settings),
            ttl=settings.cache_timeout,
            **kwargs,
        )

    # Public API ---------------------------------------------------------
    def get_weather(self, station_code: str) -> WeatherInfo:
        code = normalize_station_code(station_code)
        cached = self._cached(code)
        if cached is not None:
            return cached
        try:
            info = self.provider.get_weather(code)
        except (FetchError, ParseError) as exc:
            self._log.warning("Weather for %s unavailable: %s", code, exc)
            raise
        self.cache.set(self._cache_key(code), info, self.ttl)
        return info

    async def get_weather_async(self, station_code: str) -> WeatherInfo:
        code = normalize_station_code(station_code)
        cached = self._cached(code)
        if cached is not None:
            return cached
        try:
            info = await self.async_provider.get_weather(code)
        except (FetchError, ParseError) as exc:
            self._log.warning("Weather for %s unavailable: %s", code, exc)
            raise
        self.cache.set(self._cache_key(code), info, self.ttl)
        return info

    def close(self) -> None:
        self.provider.close()

    # Helpers ------------------------------------------------------------
    def _cached(self, code: str) -> Optional[WeatherInfo]:
        cached = self.cache.get(self._cache_key(code))
        if cached is not None:
            self._log.debug("Serving %s from cache", code)
        return cached

    def _cache_key(self, code: str) -> str:
        return f"weather:{code}"


__all__ = ["WeatherService"]
