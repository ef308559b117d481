from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cents_money.domain.monetary.money_error import MoneyError, MoneyErrorKind

if TYPE_CHECKING:
    from cents_money.domain.monetary.money import Money


@dataclass(frozen=True)
class ParseResult:
    """Outcome of `Money.parse`: exactly one of $money and $error is set.

    Attributes:
        text (str): The input that was parsed.
        money (Money | None): Parsed value on success.
        error (MoneyErrorKind | None): Reason on failure.
    """

    text: str = field(compare=False)
    money: Money | None = None
    error: MoneyErrorKind | None = None

    def __post_init__(self) -> None:
        # Raise: exactly one side of the result must be present
        if (self.money is None) == (self.error is None):
            raise ValueError(f"$money ({self.money}) and $error ({self.error}) must not be both set or both empty")

    @classmethod
    def ok(cls, text: str, money: Money) -> ParseResult:
        return cls(text=text, money=money)

    @classmethod
    def fail(cls, text: str, error: MoneyErrorKind) -> ParseResult:
        return cls(text=text, error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Money:
        """Return the parsed value.

        Raises:
            MoneyError: If parsing failed; carries the failure kind.
        """
        if self.error is not None:
            raise MoneyError(self.error, f"cannot parse $text ('{self.text}')")
        return self.money

    def unwrap_or(self, default: Money | None) -> Money | None:
        """Return the parsed value, or $default if parsing failed."""
        return self.money if self.error is None else default
