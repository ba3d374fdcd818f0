import io
import os

import pytest

from pushswap.output import (
    format_printf,
    printf,
    putchar_fd,
    putendl_fd,
    putnbr_fd,
    putstr_fd,
)


def _capture(write):
    read_end, write_end = os.pipe()
    try:
        write(write_end)
    finally:
        os.close(write_end)
    with os.fdopen(read_end, "rb") as reader:
        return reader.read()


def test_plain_text_passes_through():
    assert format_printf("hello world") == "hello world"


def test_percent_escape():
    assert format_printf("100%%") == "100%"


def test_trailing_percent_is_literal():
    assert format_printf("abc%") == "abc%"


def test_unknown_conversion_produces_nothing_and_keeps_arguments():
    assert format_printf("a%qb%d", 7) == "ab7"


def test_char_from_code_and_string():
    assert format_printf("%c%c", ord("x"), "y") == "xy"


def test_string_and_null_string():
    assert format_printf("[%s]", "abc") == "[abc]"
    assert format_printf("%s", None) == "(null)"


@pytest.mark.parametrize("n", [0, 1, -1, 123456, -98765, 2147483647])
def test_signed_round_trip(n):
    assert int(format_printf("%d", n)) == n
    assert format_printf("%i", n) == format_printf("%d", n)


def test_signed_minimum():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert int(format_printf("%d", 2**31)) == -(2**31)


def test_unsigned_of_negative_wraps():
    assert int(format_printf("%u", -1)) == 0xFFFFFFFF


@pytest.mark.parametrize("n", [0, 9, 10, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(n):
    lower = format_printf("%x", n)
    assert int(lower, 16) == n
    assert lower == lower.lower()
    assert format_printf("%X", n) == lower.upper()


def test_hex_of_negative_is_unsigned():
    assert int(format_printf("%x", -1), 16) == 0xFFFFFFFF


def test_pointer_null():
    assert format_printf("%p", None) == "(nil)"
    assert format_printf("%p", 0) == "(nil)"


def test_pointer_address_round_trip():
    text = format_printf("%p", 0x1234ABCD)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x1234ABCD


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_non_string_template_raises():
    with pytest.raises(TypeError):
        format_printf(None)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d\n", "value", 5, stream=stream)
    assert stream.getvalue() == "value=5\n"
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("pa\n")
    assert capsys.readouterr().out == "pa\n"
    assert count == 3


def test_putchar_fd():
    assert _capture(lambda fd: putchar_fd("a", fd)) == b"a"
    assert _capture(lambda fd: putchar_fd(ord("z"), fd)) == b"z"


def test_putstr_fd():
    assert _capture(lambda fd: putstr_fd("Error", fd)) == b"Error"


def test_putendl_fd():
    assert _capture(lambda fd: putendl_fd("hi", fd)) == b"hi\n"


@pytest.mark.parametrize("n", [0, 42, -42, 2147483647])
def test_putnbr_fd_round_trip(n):
    assert int(_capture(lambda fd: putnbr_fd(n, fd))) == n


def test_putnbr_fd_minimum():
    assert _capture(lambda fd: putnbr_fd(-2147483648, fd)) == b"-2147483648"