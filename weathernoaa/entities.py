from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .errors import MalformedStation


@dataclass(frozen=True)
class Station:
    """Named weather-reporting location taken from the report header.

    The header looks like ``Qingdao, China (ZSQD) 36-04N 120-20E 77M``; the
    ICAO code and the coordinates are not kept.
    """

    place: str
    country: str

    @classmethod
    def from_header(cls, header: str) -> "Station":
        place, sep, rest = header.partition(",")
        if not sep:
            raise MalformedStation("station", header, 0, detail="expected 'Place, Country'")
        country = rest.split("(", 1)[0]
        return cls(place=place.strip(), country=country.strip())


@dataclass(frozen=True)
class WeatherTime:
    """Machine-readable part of the timestamp line (``2021.03.28 0800 UTC``).

    ``time`` keeps whatever follows the day verbatim because upstream
    timezone abbreviations are not consistent.
    """

    year: int
    month: int
    day: int
    time: str


@dataclass(frozen=True)
class WindInfo:
    cardinal: str = ""
    azimuth: float = 0.0
    speed_mph: float = 0.0
    speed_knots: float = 0.0

    @classmethod
    def calm(cls) -> "WindInfo":
        return cls()


@dataclass(frozen=True)
class Temperature:
    """Temperature reading; both units are reported upstream, nothing is converted."""

    celsius: float
    fahrenheit: float


@dataclass(frozen=True)
class WeatherInfo:
    """Current conditions for one station.

    - ``visibility`` is the raw text, unit and annotation included
    - ``relative_humidity`` is a percentage
    - ``pressure`` is in hectopascal (hPa)
    """

    station: Optional[Station]
    observed_at: WeatherTime
    wind: WindInfo
    visibility: str
    sky_condition: Optional[str]
    weather: Optional[str]
    temperature: Temperature
    dewpoint: Temperature
    relative_humidity: float
    pressure: int

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["Station", "Temperature", "WeatherInfo", "WeatherTime", "WindInfo"]
