from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

import httpx
import requests
from requests import Response
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import Settings
from ..errors import FetchError, StationNotFound


@dataclass
class RequestConfig:
    timeout: float = 10.0
    retries: int = 2
    backoff_factor: float = 0.3
    status_forcelist: Iterable[int] = (429, 500, 502, 503, 504)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RequestConfig":
        return cls(
            timeout=settings.timeout,
            retries=settings.retries,
            backoff_factor=settings.backoff_factor,
        )


def _handle_response(
    log: logging.Logger,
    response: Union[Response, httpx.Response],
    station_code: Optional[str],
) -> None:
    status = response.status_code
    if 200 <= status < 300:
        return
    if status == 404:
        log.warning("No report published for station %s", station_code)
        raise StationNotFound(
            f"no report for station {station_code}", station_code=station_code, status_code=status
        )
    log.error("Provider returned %s: %s", status, response.text[:200])
    raise FetchError(f"HTTP {status}", station_code=station_code, status_code=status)


class WeatherProvider:
    """Base class that adds retry/timeouts for HTTP providers."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or self._build_session(self.request_config)
        self._log = logging.getLogger(self.__class__.__name__)

    def _build_session(self, config: RequestConfig) -> requests.Session:
        retry = Retry(
            total=config.retries,
            backoff_factor=config.backoff_factor,
            status_forcelist=tuple(config.status_forcelist),
            allowed_methods=frozenset({"GET", "HEAD"}),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session = requests.Session()
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def _request(self, method: str, url: str, *, station_code: Optional[str] = None, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request to %s timed out", url, exc_info=exc)
            raise FetchError("timeout", station_code=station_code) from exc
        except requests.RequestException as exc:
            self._log.error("Request to %s failed", url, exc_info=exc)
            raise FetchError("request failed", station_code=station_code) from exc
        _handle_response(self._log, response, station_code)
        return response

    def close(self) -> None:
        self.session.close()


class AsyncWeatherProvider:
    """Asynchronous counterpart of :class:`WeatherProvider` built on ``httpx``.

    Without an explicit ``client`` every request opens a short-lived
    ``httpx.AsyncClient``; pass one in to share connections across calls.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        request_config: Optional[RequestConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.client = client
        self._transport = transport
        self._log = logging.getLogger(self.__class__.__name__)

    def _build_client(self) -> httpx.AsyncClient:
        transport = self._transport or httpx.AsyncHTTPTransport(retries=self.request_config.retries)
        return httpx.AsyncClient(
            timeout=self.request_config.timeout,
            transport=transport,
            follow_redirects=True,
        )

    async def _request(
        self, method: str, url: str, *, station_code: Optional[str] = None, **kwargs
    ) -> httpx.Response:
        try:
            if self.client is not None:
                response = await self.client.request(method, url, timeout=self.request_config.timeout, **kwargs)
            else:
                async with self._build_client() as client:
                    response = await client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            self._log.error("Request to %s timed out", url, exc_info=exc)
            raise FetchError("timeout", station_code=station_code) from exc
        except httpx.HTTPError as exc:
            self._log.error("Request to %s failed", url, exc_info=exc)
            raise FetchError("request failed", station_code=station_code) from exc
        _handle_response(self._log, response, station_code)
        return response


__all__ = ["AsyncWeatherProvider", "RequestConfig", "WeatherProvider"]
