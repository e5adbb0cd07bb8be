"""Errors raised by the fetch layer and the report parser.

Callers only need to tell two domains apart: :class:`FetchError` (the report
could not be retrieved) and :class:`ParseError` (it was retrieved but does not
look like a decoded report).  Both derive from :class:`WeatherError`.
"""
from __future__ import annotations

from typing import Optional


class WeatherError(RuntimeError):
    """Base error of the library."""


class FetchError(WeatherError):
    """Network or HTTP failure while retrieving a report."""

    def __init__(
        self,
        message: str,
        *,
        station_code: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.station_code = station_code
        self.status_code = status_code


class StationNotFound(FetchError):
    """The server has no report file for the requested station."""


class ParseError(WeatherError):
    """A report could not be parsed.

    ``rule`` names the field or literal that failed and ``position`` is the
    offset in ``text`` where it was attempted.
    """

    snippet_length = 40

    def __init__(self, rule: str, text: str, position: int, *, detail: Optional[str] = None) -> None:
        self.rule = rule
        self.text = text
        self.position = position
        self.detail = detail
        super().__init__(self._format())

    @property
    def remaining(self) -> str:
        return self.text[self.position:]

    @property
    def line(self) -> int:
        return self.text.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int:
        return self.position - (self.text.rfind("\n", 0, self.position) + 1) + 1

    def _format(self) -> str:
        snippet = self.remaining[: self.snippet_length]
        message = f"failed to parse {self.rule} at line {self.line}, column {self.column}"
        if self.detail:
            message = f"{message}: {self.detail}"
        return f"{message} (input: {snippet!r})"


class MalformedStation(ParseError):
    """Station header is neither the sentinel nor ``Place, Country ...``."""


class MalformedTimestamp(ParseError):
    """Timestamp line lacks the ``/`` separator or a numeric date segment."""


class UnrecognizedWindFormat(ParseError):
    """Wind line matches none of the calm, directional or variable shapes."""


class MalformedNumber(ParseError):
    """A numeric token does not follow the plain decimal grammar."""


__all__ = [
    "FetchError",
    "MalformedNumber",
    "MalformedStation",
    "MalformedTimestamp",
    "ParseError",
    "StationNotFound",
    "UnrecognizedWindFormat",
    "WeatherError",
]
