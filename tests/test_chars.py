import string

import pytest

from pushswap import chars

ALL_CODES = range(-5, 300)


@pytest.mark.parametrize("code", ALL_CODES)
def test_isalpha_matches_ascii_letters(code):
    expected = 0 <= code < 128 and chr(code) in string.ascii_letters
    assert chars.isalpha(code) == expected


@pytest.mark.parametrize("code", ALL_CODES)
def test_isdigit_matches_ascii_digits(code):
    expected = 0 <= code < 128 and chr(code) in string.digits
    assert chars.isdigit(code) == expected


@pytest.mark.parametrize("code", ALL_CODES)
def test_isalnum_is_alpha_or_digit(code):
    assert chars.isalnum(code) == (chars.isalpha(code) or chars.isdigit(code))


def test_isascii_bounds():
    assert chars.isascii(0)
    assert chars.isascii(127)
    assert not chars.isascii(128)
    assert not chars.isascii(-1)


def test_isprint_bounds():
    assert chars.isprint(" ")
    assert chars.isprint("~")
    assert not chars.isprint(31)
    assert not chars.isprint(127)
    assert not chars.isprint("\t")


def test_string_and_int_agree():
    for ch in string.printable:
        assert chars.isalpha(ch) == chars.isalpha(ord(ch))
        assert chars.isprint(ch) == chars.isprint(ord(ch))


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_toupper_letters(ch):
    assert chars.toupper(ch) == ch.upper()
    assert chars.toupper(ord(ch)) == ord(ch.upper())


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_tolower_letters(ch):
    assert chars.tolower(ch) == ch.lower()
    assert chars.tolower(ord(ch)) == ord(ch.lower())


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_non_letters(ch):
    assert chars.toupper(ch) == ch
    assert chars.tolower(ch) == ch


def test_case_conversion_leaves_non_ascii_unchanged():
    assert chars.toupper("é") == "é"
    assert chars.tolower(200) == 200


def test_case_round_trip():
    for ch in string.ascii_letters:
        assert chars.tolower(chars.toupper(ch)) == ch.lower()
        assert chars.toupper(chars.tolower(ch)) == ch.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        chars.isalpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        chars.isdigit(1.5)