import pytest

from microsh.textscan import (
    atoi,
    itoa,
    strchr,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)

HELLO = "Hello, World!"


def test_strlen_of_none_is_zero():
    assert strlen(None) == 0


def test_strlen_matches_length():
    assert strlen(HELLO) == len(HELLO)
    assert strlen("") == 0


def test_strchr_finds_first_occurrence():
    index = strchr(HELLO, "o")
    assert HELLO[index] == "o"
    assert "o" not in HELLO[:index]


def test_strchr_accepts_code():
    assert strchr(HELLO, ord("W")) == strchr(HELLO, "W")


def test_strchr_nul_finds_terminator():
    assert strchr(HELLO, "\0") == len(HELLO)
    assert strchr(HELLO, 0) == len(HELLO)


def test_strchr_missing_is_none():
    assert strchr(HELLO, "z") is None


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr(HELLO, "ab")


def test_strrchr_finds_last_occurrence():
    index = strrchr(HELLO, "o")
    assert HELLO[index] == "o"
    assert "o" not in HELLO[index + 1:]
    assert index > strchr(HELLO, "o")


def test_strrchr_nul_and_missing():
    assert strrchr(HELLO, "\0") == len(HELLO)
    assert strrchr(HELLO, "q") is None


def test_strncmp_equal_prefix():
    assert strncmp("He", "He", 1) == 0
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_sign_of_difference():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)


def test_strncmp_shorter_string():
    assert strncmp("a", "", 1) == ord("a")
    assert strncmp("", "a", 1) == -ord("a")


def test_strncmp_zero_count():
    assert strncmp("x", "y", 0) == 0


def test_strnstr_finds_within_length():
    index = strnstr(HELLO, "World", 13)
    assert HELLO[index:index + len("World")] == "World"


def test_strnstr_length_too_short():
    full = strnstr(HELLO, "World", len(HELLO))
    assert strnstr(HELLO, "World", full + len("World") - 1) is None
    assert strnstr(HELLO, "World", full + len("World")) == full


def test_strnstr_empty_needle():
    assert strnstr(HELLO, "", 0) == 0


def test_strlcpy_fits():
    assert strlcpy(HELLO, 20) == (HELLO, len(HELLO))


def test_strlcpy_truncates():
    copied, length = strlcpy(HELLO, 3)
    assert copied == HELLO[:2]
    assert length == len(HELLO)


def test_strlcpy_zero_size():
    copied, length = strlcpy(HELLO, 0)
    assert copied == ""
    assert length == len(HELLO)


def test_strlcat_small_size_leaves_dest():
    dest, src = "Hello", " World"
    assert strlcat(dest, src, 3) == (dest, 3 + len(src))


def test_strlcat_appends():
    dest, src = "Hello", " World"
    assert strlcat(dest, src, 50) == (dest + src, len(dest) + len(src))


def test_strlcat_truncates_append():
    dest, src = "Hello", " World"
    result, length = strlcat(dest, src, len(dest) + 3)
    assert result == dest + src[:2]
    assert length == len(dest) + len(src)


def test_atoi_negative():
    assert atoi("-42") == -42


def test_atoi_skips_space_and_stops_at_nondigit():
    assert atoi("  \t\n+17abc") == 17


def test_atoi_no_digits():
    assert atoi("abc") == 0
    assert atoi("--5") == atoi("")


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")