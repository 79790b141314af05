from __future__ import annotations

import pytest

from pathlex.cursor import Cursor
from pathlex.errors import EndOfInputError, InvalidPathError


def test_consume_advances_one_character():
    cursor = Cursor("$.a")
    assert cursor.peek() == "$"
    assert cursor.consume() == "$"
    assert cursor.index == 1
    assert cursor.peek() == "."


def test_is_empty_after_last_character():
    cursor = Cursor("ab")
    cursor.consume()
    assert not cursor.is_empty()
    cursor.consume()
    assert cursor.is_empty()


def test_empty_text_is_empty():
    assert Cursor("").is_empty()


def test_peek_past_end_raises():
    cursor = Cursor("")
    with pytest.raises(EndOfInputError):
        cursor.peek()


def test_consume_past_end_raises_index_error():
    cursor = Cursor("x")
    cursor.consume()
    with pytest.raises(IndexError):
        cursor.consume()


def test_end_of_input_is_not_an_invalid_path():
    assert not issubclass(EndOfInputError, InvalidPathError)


def test_skip_consumes_run_only():
    cursor = Cursor("   a ")
    cursor.skip(" ")
    assert cursor.index == 3
    assert cursor.peek() == "a"


def test_skip_stops_at_end_of_input():
    cursor = Cursor("   ")
    cursor.skip(" ")
    assert cursor.is_empty()
