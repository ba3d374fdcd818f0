"""Checking of the numbers given to the sorter on the command line."""

from __future__ import annotations

from typing import List, Sequence

from .chars import isdigit
from .numbers import atoi, atol

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Only texts at least this long are checked against the 32-bit range.
_RANGE_CHECK_LENGTH = 10


class ValidationError(ValueError):
    """Raised when the input numbers cannot be sorted."""

    def __init__(self, reason: str = "Error") -> None:
        super().__init__(reason)
        self.reason = reason


def is_valid_number(text: str) -> bool:
    """Return True when ``text`` is one optional sign followed only by digits.

    ``25``, ``-13`` and ``+96`` are valid; ``--25``, ``-+13``, ``9-6`` and
    ``87-+`` are not. A lone sign, or nothing at all, counts as valid.
    """
    digits = text[1:] if text[:1] in ("-", "+") else text
    return all(isdigit(ch) for ch in digits)


def validate(args: Sequence[str]) -> List[int]:
    """Check every argument and return their integer values in order.

    Raises ValidationError when an argument is not an integer, lies
    outside the 32-bit signed range, or repeats an earlier value.
    """
    values: List[int] = []
    seen = set()
    for text in args:
        if len(text) >= _RANGE_CHECK_LENGTH and not INT_MIN <= atol(text) <= INT_MAX:
            raise ValidationError(f"{text!r} is outside the integer range")
        if not is_valid_number(text):
            raise ValidationError(f"{text!r} is not an integer")
        value = atoi(text)
        if value in seen:
            raise ValidationError(f"{text!r} is a duplicate")
        seen.add(value)
        values.append(value)
    return values