"""Parsers for the individual lines of a decoded report.

A report looks like this (the last two lines are the coded trailer and are
never read)::

    Qingdao, China (ZSQD) 36-04N 120-20E 77M
    Mar 28, 2021 - 04:00 AM EDT / 2021.03.28 0800 UTC
    Wind: from the NNW (340 degrees) at 16 MPH (14 KT):0
    Visibility: 1 mile(s):0
    Sky conditions: overcast
    Weather: widespread dust
    Temperature: 64 F (18 C)
    Dew Point: 42 F (6 C)
    Relative Humidity: 45%
    Pressure (altimeter): 29.65 in. Hg (1004 hPa)
    ob: ZSQD 280800Z 34007MPS 1600 DU OVC040 18/06 Q1004 NOSIG
    cycle: 8

Every parser starts at the beginning of its line and stops before the line
terminator unless documented otherwise.  All upstream literals live here so a
change in the upstream format stays local to one function.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..entities import Station, Temperature, WeatherTime, WindInfo
from ..errors import MalformedStation, MalformedTimestamp, ParseError, UnrecognizedWindFormat
from .cursor import Cursor, is_space


logger = logging.getLogger(__name__)

STATION_UNAVAILABLE = "Station name not available"
WIND_CALM = "Wind: Calm:0"
WIND_FROM = "Wind: from the "
WIND_VARIABLE = "Wind: Variable at "
VISIBILITY_TAG = "Visibility: "
SKY_CONDITIONS_TAG = "Sky conditions: "
WEATHER_TAG = "Weather: "
TEMPERATURE_TAG = "Temperature:"
DEW_POINT_TAG = "Dew Point:"
HUMIDITY_TAG = "Relative Humidity: "
PRESSURE_TAG = "Pressure (altimeter): "


def _until(*chars: str) -> Callable[[str], bool]:
    stops = frozenset(chars) | {"\n"}
    return lambda char: char in stops


def parse_station(cursor: Cursor) -> Optional[Station]:
    """Header line; an unknown or unparseable station is reported as ``None``."""
    header = cursor.take_line()
    if header.strip().lower() == STATION_UNAVAILABLE.lower():
        return None
    try:
        return Station.from_header(header)
    except MalformedStation as exc:
        logger.debug("Ignoring station header %r: %s", header, exc)
        return None


def parse_time(cursor: Cursor) -> WeatherTime:
    """Parse ``Mar 28, 2021 - 04:00 AM EDT / 2021.03.28 0800 UTC``.

    Only the part after ``/`` is read; the human-readable half uses local
    time and is ignored.
    """
    branch = cursor.fork()
    try:
        branch.take_till(_until("/"))
        branch.char("/", "timestamp separator")
        branch.char(" ", "timestamp separator")
        year = branch.integer(_until("."), "year")
        branch.char(".", "year")
        month = branch.integer(_until("."), "month")
        branch.char(".", "month")
        day = branch.integer(_until(" "), "day")
        branch.char(" ", "day")
    except ParseError as exc:
        raise MalformedTimestamp("timestamp", exc.text, exc.position, detail=exc.detail) from exc

    if not 0 <= year <= 0xFFFF:
        raise cursor.fail("timestamp", f"year {year} out of range", error=MalformedTimestamp)
    if not 1 <= month <= 12:
        raise cursor.fail("timestamp", f"month {month} out of range", error=MalformedTimestamp)
    if not 1 <= day <= 31:
        raise cursor.fail("timestamp", f"day {day} out of range", error=MalformedTimestamp)

    time = branch.take_line()
    cursor.commit(branch)
    return WeatherTime(year=year, month=month, day=day, time=time)


def _calm_wind(cursor: Cursor) -> WindInfo:
    cursor.tag(WIND_CALM, "calm wind")
    cursor.take_line()
    return WindInfo.calm()


def _directional_wind(cursor: Cursor) -> WindInfo:
    # Wind: from the NNW (340 degrees) at 16 MPH (14 KT):0
    cursor.tag(WIND_FROM, "directional wind")
    cardinal = cursor.take_till(is_space)
    if not cardinal:
        raise cursor.fail("wind direction", "expected a cardinal direction")
    cursor.spaces("wind direction")
    cursor.char("(", "wind azimuth")
    azimuth = cursor.integer(is_space, "wind azimuth")
    cursor.tag(" degrees) at ", "wind azimuth")
    mph = cursor.number(is_space, "wind speed")
    cursor.tag(" MPH (", "wind speed")
    knots = cursor.number(is_space, "wind speed")
    cursor.take_line()
    return WindInfo(cardinal=cardinal, azimuth=float(azimuth), speed_mph=mph, speed_knots=knots)


def _variable_wind(cursor: Cursor) -> WindInfo:
    # Wind: Variable at 7 MPH (6 KT):0
    cursor.tag(WIND_VARIABLE, "variable wind")
    mph = cursor.number(is_space, "wind speed")
    cursor.tag(" MPH (", "wind speed")
    knots = cursor.number(is_space, "wind speed")
    cursor.take_line()
    return WindInfo(speed_mph=mph, speed_knots=knots)


WIND_SHAPES: Sequence[Callable[[Cursor], WindInfo]] = (_calm_wind, _directional_wind, _variable_wind)


def parse_wind(cursor: Cursor) -> WindInfo:
    """Try each known wind shape in order; the first one that matches wins."""
    failures = []
    for shape in WIND_SHAPES:
        branch = cursor.fork()
        try:
            wind = shape(branch)
        except ParseError as exc:
            failures.append(exc)
            continue
        cursor.commit(branch)
        return wind
    furthest = max(failures, key=lambda exc: exc.position)
    raise cursor.fail("wind", "unrecognized wind format", error=UnrecognizedWindFormat) from furthest


def parse_visibility(cursor: Cursor) -> str:
    cursor.tag(VISIBILITY_TAG, "visibility")
    return cursor.take_line()


def _optional_line(cursor: Cursor, tag: str, rule: str) -> Optional[str]:
    if not cursor.opt_tag(tag):
        return None
    text = cursor.take_line()
    cursor.newline(rule)
    return text


def parse_sky_condition(cursor: Cursor) -> Optional[str]:
    """Optional ``Sky conditions:`` line, consumed with its terminator when present."""
    return _optional_line(cursor, SKY_CONDITIONS_TAG, "sky conditions")


def parse_weather_description(cursor: Cursor) -> Optional[str]:
    """Optional ``Weather:`` line, consumed with its terminator when present."""
    return _optional_line(cursor, WEATHER_TAG, "weather")


def parse_temperature(cursor: Cursor) -> Temperature:
    """Parse `` 64 F (18 C)``, the part following the temperature or dew point tag."""
    cursor.spaces("temperature")
    fahrenheit = cursor.number(is_space, "temperature (F)")
    cursor.tag(" F (", "temperature (F)")
    celsius = cursor.number(is_space, "temperature (C)")
    cursor.take_line()
    return Temperature(celsius=celsius, fahrenheit=fahrenheit)


def parse_relative_humidity(cursor: Cursor) -> float:
    cursor.tag(HUMIDITY_TAG, "relative humidity")
    humidity = cursor.number(_until("%"), "relative humidity")
    cursor.char("%", "relative humidity")
    return humidity


def parse_pressure(cursor: Cursor) -> int:
    """Hectopascal value of ``Pressure (altimeter): 29.65 in. Hg (1004 hPa)``."""
    cursor.tag(PRESSURE_TAG, "pressure")
    cursor.take_till(_until("("))
    cursor.char("(", "pressure")
    pressure = cursor.integer(lambda char: char.isspace() or char == ")", "pressure")
    cursor.take_line()
    return pressure


__all__ = [
    "DEW_POINT_TAG",
    "TEMPERATURE_TAG",
    "WIND_SHAPES",
    "parse_pressure",
    "parse_relative_humidity",
    "parse_sky_condition",
    "parse_station",
    "parse_temperature",
    "parse_time",
    "parse_visibility",
    "parse_weather_description",
    "parse_wind",
]
