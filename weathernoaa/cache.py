from __future__ import annotations

import time
from threading import Lock
from typing import Callable, Dict, Optional, Tuple

from .entities import WeatherInfo


class WeatherCache:
    """In-memory TTL cache of parsed reports keyed by station code."""

    def __init__(self, time_func: Callable[[], float] = time.monotonic) -> None:
        self._time_func = time_func
        self._storage: Dict[str, Tuple[float, WeatherInfo]] = {}
        self._lock = Lock()

    def get(self, key: str) -> Optional[WeatherInfo]:
        with self._lock:
            item = self._storage.get(key)
            if not item:
                return None
            expires_at, value = item
            if expires_at < self._time_func():
                self._storage.pop(key, None)
                return None
            return value

    def set(self, key: str, value: WeatherInfo, ttl: float) -> None:
        if ttl <= 0:
            return
        with self._lock:
            self._storage[key] = (self._time_func() + ttl, value)

    def clear(self) -> None:
        with self._lock:
            self._storage.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._storage)


__all__ = ["WeatherCache"]
