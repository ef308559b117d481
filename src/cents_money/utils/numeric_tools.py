from __future__ import annotations

import re

# ASCII digits only; `int()` alone would also accept underscores, whitespace and non-ASCII digits
_SIGNED_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT_PATTERN = re.compile(r"[0-9]+")


def parse_int_literal(text: str, signed: bool = True) -> int | None:
    """Parses $text as a strict base-10 integer literal.

    Args:
        text: Candidate literal, e.g. "10", "-3", "05".
        signed: Whether a leading '+' or '-' is allowed.

    Returns:
        The integer value, or None when $text is not a valid literal.
    """
    pattern = _SIGNED_INT_PATTERN if signed else _UNSIGNED_INT_PATTERN
    if pattern.fullmatch(text) is None:
        return None

    return int(text)


def is_within(value: int, lower: int, upper: int) -> bool:
    """Check if $value lies in the closed range [$lower, $upper]."""
    return lower <= value <= upper
