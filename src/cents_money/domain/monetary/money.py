from __future__ import annotations

import logging

from cents_money.domain.monetary.money_error import MoneyError, MoneyErrorKind
from cents_money.domain.monetary.parse_result import ParseResult
from cents_money.utils.numeric_tools import is_within, parse_int_literal

logger = logging.getLogger(__name__)


class Money:
    """Represents a monetary amount as integer cents in a given currency.

    The canonical text form is "<dollars>.<cc> <currency>", e.g. "10.00 USD".
    Values are immutable; arithmetic returns new instances.

    Arithmetic is checked: amounts must stay within a signed 64-bit cents range
    [MIN_CENTS, MAX_CENTS], otherwise `MoneyError` with kind OVERFLOW is raised.

    Attributes:
        cents (int): Full amount in subunits (dollars * 100 + fraction), signed.
        currency (str): 3-character currency code, stored verbatim.
    """

    __slots__ = ("_cents", "_currency")

    # Value limits
    MIN_CENTS = -(2**63)
    MAX_CENTS = 2**63 - 1

    # Text format
    CENTS_DIGITS = 2
    CURRENCY_LENGTH = 3
    DEFAULT_CENTS = "00"

    def __init__(self, cents: int, currency: str):
        """Initialize Money directly from its fields.

        No validation happens here; use `Money.parse` or `Money.new` for untrusted input.

        Args:
            cents (int): Full amount in subunits.
            currency (str): Currency code.
        """
        object.__setattr__(self, "_cents", cents)
        object.__setattr__(self, "_currency", currency)

    def __setattr__(self, name, value):
        raise AttributeError(f"Cannot set attribute '{name}' because `Money` is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"Cannot delete attribute '{name}' because `Money` is immutable")

    def __reduce__(self):
        # Rebuild through __init__; attribute-by-attribute restore is blocked by __setattr__
        return (self.__class__, (self._cents, self._currency))

    @property
    def cents(self) -> int:
        """Get the full amount in cents."""
        return self._cents

    @property
    def currency(self) -> str:
        """Get the currency code."""
        return self._currency

    # region Parsing

    @classmethod
    def parse(cls, text: str) -> ParseResult:
        """Parse Money from a string like "10.00 USD" or "10 USD".

        Failures are returned as data, never raised. Checks run in this order:
        overall shape, cents length, currency length, numeric literals, range.
        A leading sign on the dollars applies to the whole amount, so "-10.05 USD"
        is -1005 cents.

        Args:
            text (str): String representation.

        Returns:
            ParseResult: Holds the parsed Money or the `MoneyErrorKind` of the failure.

        Raises:
            TypeError: If $text is not a string.
        """
        if not isinstance(text, str):
            raise TypeError(f"$text must be a string, but provided value is: {text!r}")

        result = cls._parse(text)
        if not result.is_ok:
            logger.debug(f"Rejected money string $text '{text}': {result.error.value}")
        return result

    @classmethod
    def _parse(cls, text: str) -> ParseResult:
        parts = text.split(" ")
        if len(parts) != 2 or not all(parts):
            return ParseResult.fail(text, MoneyErrorKind.INVALID_FORMAT)
        amount_part, currency_part = parts

        amount_parts = amount_part.split(".")
        if len(amount_parts) == 2:
            dollars_part, cents_part = amount_parts
        elif len(amount_parts) == 1:
            dollars_part, cents_part = amount_parts[0], cls.DEFAULT_CENTS
        else:
            return ParseResult.fail(text, MoneyErrorKind.INVALID_FORMAT)

        # Cents length is reported before currency length when both are wrong
        if len(cents_part) != cls.CENTS_DIGITS:
            return ParseResult.fail(text, MoneyErrorKind.INVALID_CENTS)
        if len(currency_part) != cls.CURRENCY_LENGTH:
            return ParseResult.fail(text, MoneyErrorKind.INVALID_CURRENCY)

        dollars = parse_int_literal(dollars_part, signed=True)
        fraction = parse_int_literal(cents_part, signed=False)
        if dollars is None or fraction is None:
            return ParseResult.fail(text, MoneyErrorKind.INVALID_NUMBER)

        magnitude = abs(dollars) * 100 + fraction
        cents = -magnitude if dollars_part.startswith("-") else magnitude
        if not is_within(cents, cls.MIN_CENTS, cls.MAX_CENTS):
            return ParseResult.fail(text, MoneyErrorKind.OVERFLOW)

        return ParseResult.ok(text, cls(cents, currency_part))

    @classmethod
    def new(cls, text: str) -> Money:
        """Parse Money from trusted input, raising on failure.

        Meant for literals in tests and examples; production code paths should
        prefer `Money.parse`.

        Args:
            text (str): String representation.

        Returns:
            Money: Parsed value.

        Raises:
            MoneyError: If $text is not a valid money string; `kind` tells why.
        """
        return cls.parse(text).unwrap()

    # endregion

    # region Arithmetic

    def add(self, other: Money) -> Money:
        """Add two Money values of the same currency.

        Args:
            other (Money): Value to add.

        Returns:
            Money: New value with summed cents and the shared currency.

        Raises:
            MoneyError: CURRENCY_MISMATCH if currencies differ (case-sensitive),
                OVERFLOW if the sum leaves [MIN_CENTS, MAX_CENTS].
        """
        if self.currency != other.currency:
            logger.debug(f"Refused to add {self} and {other}: currencies differ")
            raise MoneyError(
                MoneyErrorKind.CURRENCY_MISMATCH,
                f"cannot add $other ('{other}') to $self ('{self}')",
            )

        total = self.cents + other.cents
        if not is_within(total, self.MIN_CENTS, self.MAX_CENTS):
            logger.debug(f"Refused to add {self} and {other}: sum {total} is out of range")
            raise MoneyError(
                MoneyErrorKind.OVERFLOW,
                f"sum of $self ('{self}') and $other ('{other}') is outside [{self.MIN_CENTS}, {self.MAX_CENTS}] cents",
            )

        return self.__class__(total, self.currency)

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    # endregion

    # region Formatting

    def to_string(self) -> str:
        """Return the canonical form, e.g. "10.01 USD" or "-0.50 USD"."""
        dollars, fraction = divmod(abs(self.cents), 100)
        sign = "-" if self.cents < 0 else ""
        return f"{sign}{dollars}.{fraction:02d} {self.currency}"

    def debug_format(self) -> str:
        """Return the shorthand constructor call that rebuilds this value, e.g. 'M("10.00 USD")'.

        The canonical string is wrapped verbatim, without escaping, so a
        currency containing `"` or `\\` does not evaluate back to an equal value.
        """
        return f'M("{self.to_string()}")'

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return self.debug_format()

    # endregion

    def __eq__(self, other) -> bool:
        """Check equality with another Money object (same cents and currency)."""
        if not isinstance(other, Money):
            return False
        return self.cents == other.cents and self.currency == other.currency

    def __hash__(self) -> int:
        """Hash based on cents and currency code."""
        return hash((self.cents, self.currency))


# region Module-level operations


def parse(text: str) -> ParseResult:
    """Parse $text into a `ParseResult`; see `Money.parse`."""
    return Money.parse(text)


def new(text: str) -> Money:
    """Parse $text or raise `MoneyError`; see `Money.new`."""
    return Money.new(text)


def M(text: str) -> Money:
    """Shorthand for `new`, used for money literals: M("10.00 USD")."""
    return Money.new(text)


def add(left: Money, right: Money) -> Money:
    """Add two values of the same currency; see `Money.add`."""
    return left.add(right)


def to_string(money: Money) -> str:
    """Format $money canonically; see `Money.to_string`."""
    return money.to_string()


def debug_format(money: Money) -> str:
    """Return the shorthand form of $money; see `Money.debug_format`."""
    return money.debug_format()


# endregion
