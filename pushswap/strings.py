"""String helpers with C-string semantics: text ends at the first NUL character."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_NUL = "\0"


def _cstr(text: str) -> str:
    """Return ``text`` up to, not including, its first NUL character."""
    end = text.find(_NUL)
    return text if end < 0 else text[:end]


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strlen(text: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(text))


def strdup(text: str) -> str:
    """Return a copy of ``text`` as a C string."""
    return _cstr(text)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return _cstr(first) + _cstr(second)


def split(text: str, sep: str) -> list[str]:
    """Split on ``sep``, dropping the empty pieces that runs of ``sep`` produce."""
    sep = _single_char(sep)
    text = _cstr(text)
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str) -> int | None:
    """Index of the first ``c`` in ``text``; NUL matches the terminator."""
    c = _single_char(c)
    text = _cstr(text)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> int | None:
    """Index of the last ``c`` in ``text``; NUL matches the terminator."""
    c = _single_char(c)
    text = _cstr(text)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def striteri(text: MutableSequence[str], func: Callable[[int, str], str | None]) -> None:
    """Call ``func(index, char)`` for each character, in place.

    A character is replaced by whatever ``func`` returns, unless it returns None.
    Iteration stops at the first NUL, as for a C string.
    """
    for index, ch in enumerate(list(text)):
        if ch == _NUL:
            break
        replacement = func(index, ch)
        if replacement is not None:
            text[index] = replacement


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` over every character."""
    return "".join(func(index, ch) for index, ch in enumerate(_cstr(text)))


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``, so truncation shows
    as a returned length of at least ``size``.
    """
    _non_negative("size", size)
    src = _cstr(src)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had; ``dst`` is left as it is when it already fills the buffer.
    """
    _non_negative("size", size)
    dst = _cstr(dst)
    src = _cstr(src)
    used = min(len(dst), size)
    if used < size:
        dst = dst + src[: size - used - 1]
    return dst, used + len(src)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair."""
    _non_negative("n", n)
    pairs = zip_longest(_cstr(first)[:n], _cstr(second)[:n], fillvalue=_NUL)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` lying wholly within the first ``length`` characters of ``big``."""
    _non_negative("length", length)
    little = _cstr(little)
    if not little:
        return 0
    index = _cstr(big)[:length].find(little)
    return None if index < 0 else index


def strtrim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    text = _cstr(text)
    chars = _cstr(chars)
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    text = _cstr(text)
    if start >= len(text):
        return ""
    return text[start : start + length]