"""Measuring, searching, comparing and converting strings.

Search functions return indices into the given string instead of
pointers, and None where nothing is found. The bounded copy and
concatenation helpers return the resulting text together with the
length they would have tried to produce.
"""

from __future__ import annotations

from typing import Union

from microsh.chars import isdigit

CharLike = Union[str, int]

_SPACES = frozenset("\t\n\v\f\r ")


def _char(c: CharLike) -> str:
    """Normalise a character argument, truncating integer codes to a byte."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def strlen(text: str | None) -> int:
    """Return the length of text; None counts as empty."""
    if text is None:
        return 0
    return len(text)


def strchr(text: str, c: CharLike) -> int | None:
    """Return the index of the first occurrence of c in text, or None.

    Searching for the NUL character finds the terminator at len(text).
    """
    ch = _char(c)
    if ch == "\0":
        index = text.find(ch)
        return len(text) if index < 0 else index
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> int | None:
    """Return the index of the last occurrence of c in text, or None.

    Searching for the NUL character finds the terminator at len(text).
    """
    ch = _char(c)
    index = text.rfind(ch)
    if index >= 0:
        return index
    if ch == "\0":
        return len(text)
    return None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference of the first mismatch."""
    if n < 0:
        raise ValueError(f"count must not be negative: {n}")
    for position in range(min(n, max(len(s1), len(s2)))):
        a = ord(s1[position]) if position < len(s1) else 0
        b = ord(s2[position]) if position < len(s2) else 0
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find needle wholly within the first length characters of haystack.

    An empty needle matches at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text (at most size - 1 characters; empty when size
    is 0) and the full length of src.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters, terminator included.

    Returns the resulting text and the length it tried to create. When size
    does not exceed len(dest), dest is left unchanged and the length is
    size + len(src).
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    dlen = len(dest)
    slen = len(src)
    if size <= dlen:
        return dest, size + slen
    return dest + src[:size - 1 - dlen], dlen + slen


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign."""
    position = 0
    while position < len(text) and text[position] in _SPACES:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    while position < len(text) and isdigit(text[position]):
        result = result * 10 + (ord(text[position]) - ord("0"))
        position += 1
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal representation of n."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)