from __future__ import annotations

from enum import Enum


class MoneyErrorKind(Enum):
    """Reasons why a monetary string or operation is rejected.

    Values are the short reason codes that also start every `MoneyError` message.
    """

    # Parsing
    INVALID_FORMAT = "invalid_format"
    INVALID_CENTS = "invalid_cents"
    INVALID_CURRENCY = "invalid_currency"
    INVALID_NUMBER = "invalid_number"

    # Arithmetic
    CURRENCY_MISMATCH = "currency_mismatch"
    OVERFLOW = "overflow"


class MoneyError(ValueError):
    """Raised when `Money` cannot be built or combined.

    Attributes:
        kind (MoneyErrorKind): Machine-readable reason.
    """

    def __init__(self, kind: MoneyErrorKind, detail: str | None = None):
        self.kind = kind
        message = kind.value if detail is None else f"{kind.value}: {detail}"
        super().__init__(message)
