"""Building new strings: copies, slices, joins, trims, splits and maps."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def strdup(text: str | None) -> str:
    """Return a copy of text; None yields an empty string."""
    if text is None:
        return ""
    return str(_require_str(text, "text"))


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start at or past the end of text yields an empty string.
    """
    _require_str(text, "text")
    if start < 0:
        raise ValueError(f"start must not be negative: {start}")
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in charset."""
    _require_str(text, "text")
    _require_str(charset, "charset")
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split text on the single character sep, dropping empty pieces."""
    _require_str(text, "text")
    _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in text.split(sep) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of func(index, char) for every character."""
    _require_str(text, "text")
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: MutableSequence[str] | None,
    func: Callable[[int, str], str | None],
) -> None:
    """Call func(index, char) for each character, in place.

    A non-None return value replaces the character at that index.
    None for text does nothing.
    """
    if text is None:
        return
    for index, char in enumerate(text):
        replacement = func(index, char)
        if replacement is not None:
            text[index] = replacement