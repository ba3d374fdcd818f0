"""Conversion between decimal text and integers of fixed machine width."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _parse(text: str) -> int:
    """Read optional leading whitespace, one optional sign and a run of digits.

    Parsing stops at the first character that is not a digit. Text that
    holds no digits in that position reads as 0.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = _wrap(value * 10 + (ord(ch) - ord("0")), 64)
    return _wrap(value * sign, 64)


def atoi(text: str) -> int:
    """Convert the leading decimal number in ``text`` to a 32-bit signed integer.

    Values outside the 32-bit range wrap around. Returns 0 when no number
    is found.
    """
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Convert the leading decimal number in ``text`` to a 64-bit signed integer.

    Values outside the 64-bit range wrap around. Returns 0 when no number
    is found.
    """
    return _parse(text)


def itoa(n: int) -> str:
    """Return the decimal representation of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)