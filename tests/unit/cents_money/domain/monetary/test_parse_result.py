from __future__ import annotations

import logging

import pytest

from cents_money import Money, MoneyError, MoneyErrorKind, ParseResult


def test_parse_result_requires_exactly_one_side():
    with pytest.raises(ValueError):
        ParseResult(text="10 USD")
    with pytest.raises(ValueError):
        ParseResult(text="10 USD", money=Money(1000, "USD"), error=MoneyErrorKind.INVALID_CENTS)


def test_unwrap_failure_raises_money_error():
    result = ParseResult.fail("10.1 USD", MoneyErrorKind.INVALID_CENTS)

    with pytest.raises(MoneyError, match=r"^invalid_cents: cannot parse \$text \('10.1 USD'\)$"):
        result.unwrap()


def test_equality_ignores_source_text():
    assert ParseResult.ok("10 USD", Money(1000, "USD")) == ParseResult.ok("10.00 USD", Money(1000, "USD"))


def test_rejected_input_is_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="cents_money.domain.monetary.money"):
        Money.parse("10.00 US")

    assert "invalid_currency" in caplog.text
    assert "10.00 US" in caplog.text


def test_refused_additions_are_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="cents_money.domain.monetary.money"):
        with pytest.raises(MoneyError):
            Money(1000, "USD") + Money(1000, "EUR")
        with pytest.raises(MoneyError):
            Money(Money.MAX_CENTS, "USD") + Money(1, "USD")

    messages = [record.getMessage() for record in caplog.records if record.levelno == logging.DEBUG]
    assert "Refused to add 10.00 USD and 10.00 EUR: currencies differ" in messages
    assert any("Refused to add 92233720368547758.07 USD and 0.01 USD: sum" in m and "out of range" in m for m in messages)
