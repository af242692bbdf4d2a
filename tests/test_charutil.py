import string

import pytest

from pushswap.charutil import (
    INT_MAX,
    INT_MIN,
    atoi,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    itoa,
    tolower,
    toupper,
)


def _matching(predicate):
    return {chr(code) for code in range(256) if predicate(code)}


def test_isalpha_matches_ascii_letters():
    assert _matching(isalpha) == set(string.ascii_letters)


def test_isdigit_matches_digits():
    assert _matching(isdigit) == set(string.digits)


def test_isalnum_is_letter_or_digit():
    assert _matching(isalnum) == set(string.ascii_letters) | set(string.digits)


def test_isascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_range():
    expected = (set(string.printable) - set(string.whitespace)) | {" "}
    assert _matching(isprint) == expected


def test_character_arguments_accepted():
    assert isalpha("q")
    assert not isalpha("3")
    assert isdigit("3")


def test_multi_character_string_rejected():
    with pytest.raises(TypeError):
        isalpha("ab")


@pytest.mark.parametrize("char", string.ascii_lowercase)
def test_toupper_letters(char):
    assert toupper(char) == char.upper()
    assert toupper(ord(char)) == ord(char.upper())


@pytest.mark.parametrize("char", string.ascii_uppercase)
def test_tolower_letters(char):
    assert tolower(char) == char.lower()
    assert tolower(ord(char)) == ord(char.lower())


@pytest.mark.parametrize("char", string.digits + string.punctuation + " ")
def test_case_mapping_leaves_others(char):
    assert toupper(char) == char
    assert tolower(char) == char


@pytest.mark.parametrize("n", [0, 7, -7, 12345, -98765, INT_MAX, INT_MIN])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert int(itoa(n)) == n


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(ValueError):
        itoa(INT_MAX + 1)


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r+17") == atoi("17")
    assert atoi("  -42abc") == -atoi("42")


def test_atoi_stops_at_non_digit():
    assert atoi("123x456") == atoi("123")


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("--5") == 0


def test_atoi_wraps_like_int32():
    assert atoi("2147483648") == -2147483648