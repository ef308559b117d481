__version__ = "0.1.0"

from cents_money.domain.monetary.money import Money, M, add, debug_format, new, parse, to_string
from cents_money.domain.monetary.money_error import MoneyError, MoneyErrorKind
from cents_money.domain.monetary.parse_result import ParseResult

__all__ = [
    "Money",
    "MoneyError",
    "MoneyErrorKind",
    "ParseResult",
    "M",
    "add",
    "debug_format",
    "new",
    "parse",
    "to_string",
]
