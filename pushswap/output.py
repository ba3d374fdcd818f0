"""Formatted output and writing of characters, strings and numbers.

``format_printf`` understands the conversions ``%c %s %d %i %u %x %X %p``
and ``%%``. An unknown conversion produces nothing, and a lone ``%`` at the
end of the template is written as it is. Integers are treated as 32-bit
machine values: ``%d`` and ``%i`` wrap to signed, while ``%u``, ``%x`` and
``%X`` wrap to unsigned.
"""

from __future__ import annotations

import operator
import os
import sys
from typing import Any, Iterator, Optional, TextIO, Union

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"
_ARGUMENT_CONVERSIONS = frozenset("csdiuxXp")


def _int32(value: Any) -> int:
    number = operator.index(value) & 0xFFFFFFFF
    return number - (1 << 32) if number >= 1 << 31 else number


def _uint32(value: Any) -> int:
    return operator.index(value) & 0xFFFFFFFF


def _hex(number: int, digits: str) -> str:
    text = ""
    while True:
        number, remainder = divmod(number, 16)
        text = digits[remainder] + text
        if number == 0:
            return text


def _char(value: Union[int, str]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Optional[str]) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    address = value if isinstance(value, int) else id(value)
    if address == 0:
        return _NULL_POINTER
    return "0x" + _hex(address, _LOWER_HEX)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in _ARGUMENT_CONVERSIONS:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec in ("d", "i"):
        return str(_int32(value))
    if spec == "u":
        return str(_uint32(value))
    if spec == "x":
        return _hex(_uint32(value), _LOWER_HEX)
    if spec == "X":
        return _hex(_uint32(value), _UPPER_HEX)
    return _pointer(value)


def format_printf(template: str, *args: Any) -> str:
    """Return ``template`` with its conversions replaced by ``args``."""
    if not isinstance(template, str):
        raise TypeError(f"template must be a str, got {type(template).__name__}")
    pieces = []
    remaining = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(template, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: Union[int, str], fd: int) -> None:
    """Write the single character ``c`` to the file descriptor ``fd``."""
    if isinstance(c, str):
        _write_all(fd, _char(c).encode("utf-8"))
    else:
        _write_all(fd, bytes([operator.index(c) & 0xFF]))


def putstr_fd(s: str, fd: int) -> None:
    """Write the string ``s`` to the file descriptor ``fd``."""
    _write_all(fd, _string_required(s).encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write the string ``s`` followed by a newline to ``fd``."""
    _write_all(fd, (_string_required(s) + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write the 32-bit signed integer ``n`` in decimal to ``fd``."""
    _write_all(fd, str(_int32(n)).encode("ascii"))


def _string_required(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    return s