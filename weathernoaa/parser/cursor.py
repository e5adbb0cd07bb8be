"""Input cursor shared by the field parsers.

A :class:`Cursor` is a position over an immutable string.  Consuming methods
either advance the position or raise :class:`~weathernoaa.errors.ParseError`
without moving it; :meth:`Cursor.opt_tag` and :meth:`Cursor.fork` provide the
peek-then-commit behaviour needed for optional lines and alternatives.
"""
from __future__ import annotations

import re
from typing import Callable, Optional, Type

from ..errors import MalformedNumber, ParseError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_NUMBER_RE = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")


class Cursor:
    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, remaining={self.remaining[:20]!r})"

    @property
    def remaining(self) -> str:
        return self.text[self.pos:]

    # -- lookahead ----------------------------------------------------------
    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def fork(self) -> "Cursor":
        return Cursor(self.text, self.pos)

    def commit(self, other: "Cursor") -> None:
        if other.text is not self.text:
            raise ValueError("cannot commit a cursor over a different input")
        self.pos = other.pos

    def fail(self, rule: str, detail: Optional[str] = None, *, error: Type[ParseError] = ParseError) -> ParseError:
        return error(rule, self.text, self.pos, detail=detail)

    # -- consuming primitives -----------------------------------------------
    def tag(self, literal: str, rule: Optional[str] = None) -> str:
        if not self.startswith(literal):
            raise self.fail(rule or repr(literal), f"expected {literal!r}")
        self.pos += len(literal)
        return literal

    def opt_tag(self, literal: str) -> bool:
        if self.startswith(literal):
            self.pos += len(literal)
            return True
        return False

    def char(self, expected: str, rule: Optional[str] = None) -> str:
        return self.tag(expected, rule)

    def newline(self, rule: str = "newline") -> None:
        self.tag("\n", rule)

    def spaces(self, rule: str = "whitespace") -> str:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in " \t":
            self.pos += 1
        if self.pos == start:
            raise self.fail(rule, "expected whitespace")
        return self.text[start:self.pos]

    def take_till(self, stop: Callable[[str], bool]) -> str:
        """Consume characters up to (not including) the first one matching ``stop``."""
        start = self.pos
        end = len(self.text)
        while self.pos < end and not stop(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def take_line(self) -> str:
        """Consume the rest of the current line, leaving the terminator in place."""
        end = self.text.find("\n", self.pos)
        if end == -1:
            end = len(self.text)
        line = self.text[self.pos:end]
        self.pos = end
        return line

    # -- numbers ------------------------------------------------------------
    def integer(self, stop: Callable[[str], bool], rule: str) -> int:
        return int(self._token(stop, rule, _INTEGER_RE))

    def number(self, stop: Callable[[str], bool], rule: str) -> float:
        return float(self._token(stop, rule, _NUMBER_RE))

    def _token(self, stop: Callable[[str], bool], rule: str, pattern: "re.Pattern[str]") -> str:
        start = self.pos
        token = self.take_till(stop)
        if not pattern.fullmatch(token):
            self.pos = start
            raise self.fail(rule, f"{token!r} is not a number", error=MalformedNumber)
        return token


def is_space(char: str) -> bool:
    return char.isspace()


__all__ = ["Cursor", "is_space"]
