from __future__ import annotations

import pytest

from cents_money.utils.numeric_tools import is_within, parse_int_literal


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        ("05", 5),
        ("123", 123),
        ("-7", -7),
        ("+7", 7),
    ],
)
def test_parse_int_literal_signed(text, expected):
    assert parse_int_literal(text) == expected


@pytest.mark.parametrize("text", ["", "-", "1.0", "1_000", " 1", "1 ", "0x10", "١٢", "1e3"])
def test_parse_int_literal_rejects_non_literals(text):
    assert parse_int_literal(text) is None


def test_parse_int_literal_unsigned_rejects_sign():
    assert parse_int_literal("-1", signed=False) is None
    assert parse_int_literal("+1", signed=False) is None
    assert parse_int_literal("01", signed=False) == 1


def test_is_within_is_inclusive():
    assert is_within(0, 0, 10)
    assert is_within(10, 0, 10)
    assert not is_within(11, 0, 10)
    assert not is_within(-1, 0, 10)
