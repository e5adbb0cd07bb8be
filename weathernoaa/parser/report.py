"""Parse a whole decoded report into a :class:`~weathernoaa.entities.WeatherInfo`."""
from __future__ import annotations

import logging
from typing import Tuple

from ..entities import WeatherInfo
from .cursor import Cursor
from .fields import (
    DEW_POINT_TAG,
    TEMPERATURE_TAG,
    parse_pressure,
    parse_relative_humidity,
    parse_sky_condition,
    parse_station,
    parse_temperature,
    parse_time,
    parse_visibility,
    parse_weather_description,
    parse_wind,
)


logger = logging.getLogger(__name__)


def parse_weather(text: str) -> Tuple[WeatherInfo, str]:
    """Parse ``text`` and return the record together with the unconsumed input.

    Everything after the pressure line (the coded ``ob:``/``cycle:`` trailer)
    is returned untouched, starting with the pressure line terminator.  Raises
    :class:`~weathernoaa.errors.ParseError` on the first malformed mandatory
    field; there are no partial results.
    """
    cursor = Cursor(text)
    station = parse_station(cursor)
    cursor.newline("station line")
    observed_at = parse_time(cursor)
    cursor.newline("timestamp line")
    wind = parse_wind(cursor)
    cursor.newline("wind line")
    visibility = parse_visibility(cursor)
    cursor.newline("visibility line")
    sky_condition = parse_sky_condition(cursor)
    weather = parse_weather_description(cursor)
    cursor.tag(TEMPERATURE_TAG, "temperature")
    temperature = parse_temperature(cursor)
    cursor.newline("temperature line")
    cursor.tag(DEW_POINT_TAG, "dew point")
    dewpoint = parse_temperature(cursor)
    cursor.newline("dew point line")
    relative_humidity = parse_relative_humidity(cursor)
    cursor.newline("relative humidity line")
    pressure = parse_pressure(cursor)

    info = WeatherInfo(
        station=station,
        observed_at=observed_at,
        wind=wind,
        visibility=visibility,
        sky_condition=sky_condition,
        weather=weather,
        temperature=temperature,
        dewpoint=dewpoint,
        relative_humidity=relative_humidity,
        pressure=pressure,
    )
    logger.debug("Parsed report for %s, %d trailing characters left", station, len(text) - cursor.pos)
    return info, cursor.remaining


def parse(text: str) -> WeatherInfo:
    info, _ = parse_weather(text)
    return info


__all__ = ["parse", "parse_weather"]
