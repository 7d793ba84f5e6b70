import string

import pytest

from microsh.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)


def test_isalpha_accepts_all_ascii_letters():
    assert all(isalpha(ch) for ch in string.ascii_letters)


def test_isalpha_rejects_digits_and_punctuation():
    assert not any(isalpha(ch) for ch in string.digits + string.punctuation + " ")


def test_isdigit_accepts_digits_only():
    assert all(isdigit(ch) for ch in string.digits)
    assert not any(isdigit(ch) for ch in string.ascii_letters + string.punctuation)


def test_isalnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_bounds():
    assert isprint(" ")
    assert isprint("~")
    assert not isprint("\t")
    assert not isprint(chr(127))
    assert all(isprint(ch) for ch in string.ascii_letters + string.digits + string.punctuation)


def test_toupper_maps_lowercase_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert toupper(lower) == upper


def test_tolower_maps_uppercase_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert tolower(upper) == lower


def test_case_conversion_leaves_other_characters():
    for ch in string.digits + string.punctuation + " ":
        assert toupper(ch) == ch
        assert tolower(ch) == ch


def test_case_conversion_keeps_int_kind():
    assert toupper(ord("q")) == ord("Q")
    assert tolower(ord("Q")) == ord("q")


def test_round_trip_over_letters():
    for ch in string.ascii_letters:
        assert tolower(toupper(ch)) == ch.lower()
        assert toupper(tolower(ch)) == ch.upper()


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_non_character_type_is_rejected():
    with pytest.raises(TypeError):
        isdigit(1.5)