from __future__ import annotations

import pytest

from weathernoaa.errors import MalformedNumber, ParseError
from weathernoaa.parser.cursor import Cursor, is_space


def test_tag_consumes_literal() -> None:
    cursor = Cursor("Wind: Calm:0\nnext")

    cursor.tag("Wind: ")

    assert cursor.remaining == "Calm:0\nnext"


def test_failed_tag_leaves_cursor_in_place() -> None:
    cursor = Cursor("Visibility: 1 mile(s):0")

    with pytest.raises(ParseError) as excinfo:
        cursor.tag("Weather: ", "weather")

    assert cursor.pos == 0
    assert excinfo.value.rule == "weather"
    assert excinfo.value.remaining == "Visibility: 1 mile(s):0"


def test_opt_tag_only_commits_on_match() -> None:
    cursor = Cursor("Temperature: 64 F (18 C)")

    assert cursor.opt_tag("Sky conditions: ") is False
    assert cursor.pos == 0
    assert cursor.opt_tag("Temperature:") is True
    assert cursor.remaining == " 64 F (18 C)"


def test_fork_and_commit() -> None:
    cursor = Cursor("abc def")
    branch = cursor.fork()
    branch.take_till(is_space)

    assert cursor.pos == 0
    cursor.commit(branch)
    assert cursor.remaining == " def"


def test_commit_rejects_foreign_cursor() -> None:
    with pytest.raises(ValueError):
        Cursor("abc").commit(Cursor("xyz", 1))


def test_take_line_keeps_terminator() -> None:
    cursor = Cursor("first line\nsecond")

    assert cursor.take_line() == "first line"
    assert cursor.remaining == "\nsecond"
    cursor.newline()
    assert cursor.take_line() == "second"
    assert cursor.remaining == ""


def test_spaces_requires_at_least_one() -> None:
    cursor = Cursor("  x")
    assert cursor.spaces() == "  "

    with pytest.raises(ParseError):
        cursor.spaces()


@pytest.mark.parametrize(
    "text, expected",
    [("12 rest", 12.0), ("-4.5 rest", -4.5), ("+3 rest", 3.0), ("0.25 rest", 0.25)],
)
def test_number_accepts_plain_decimals(text: str, expected: float) -> None:
    cursor = Cursor(text)

    assert cursor.number(is_space, "value") == expected
    assert cursor.remaining == " rest"


@pytest.mark.parametrize("token", ["1,5", "nan", "inf", "1_000", "12a", "", "1.", ".5"])
def test_number_rejects_other_spellings(token: str) -> None:
    cursor = Cursor(f"{token} C")

    with pytest.raises(MalformedNumber) as excinfo:
        cursor.number(is_space, "value")

    assert cursor.pos == 0
    assert excinfo.value.rule == "value"


def test_integer_rejects_decimals() -> None:
    with pytest.raises(MalformedNumber):
        Cursor("29.65").integer(is_space, "pressure")


def test_parse_error_reports_line_and_column() -> None:
    cursor = Cursor("abc\ndef")
    cursor.tag("abc")
    cursor.newline()
    cursor.tag("de")

    error = cursor.fail("rule", "boom")

    assert error.line == 2
    assert error.column == 3
    assert "rule" in str(error)
    assert "'f'" in str(error)
