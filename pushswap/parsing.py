"""Argument collection, validation and rank indexing of the input numbers."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import takewhile

from .chars import atoi, is_digit
from .strings import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"


class ParseError(ValueError):
    """Raised when the command-line arguments are not a valid list of integers."""


def is_valid_number(text: str | None) -> bool:
    """True for an optional leading '-' followed by one or more decimal digits."""
    if not text:
        return False
    digits = text[1:] if text.startswith("-") else text
    return bool(digits) and all(is_digit(ch) for ch in digits)


def fits_int(text: str) -> bool:
    """True if the leading integer in ``text`` lies within the 32-bit signed range."""
    stripped = text.lstrip(_WHITESPACE)
    negative = False
    if stripped[:1] in ("-", "+"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    digits = "".join(takewhile(is_digit, stripped))
    if not digits:
        return True
    value = int(digits)
    return -value >= INT_MIN if negative else value <= INT_MAX


def is_blank(text: str | None) -> bool:
    """True for None, an empty string, or a string made only of whitespace."""
    return text is None or all(ch in _WHITESPACE for ch in text)


def has_duplicates(numbers: Iterable[int]) -> bool:
    """True if any value appears more than once."""
    seen: set[int] = set()
    for number in numbers:
        if number in seen:
            return True
        seen.add(number)
    return False


def collect_arguments(argv: Sequence[str]) -> list[str]:
    """Turn command-line arguments into number words.

    A single argument is split on spaces; several are taken as they are.
    No arguments give an empty list. A blank single argument, or an empty
    first argument, raises ParseError.
    """
    args = list(argv)
    if not args:
        return []
    if len(args) == 1:
        if is_blank(args[0]):
            raise ParseError("argument is blank")
        return split(args[0], " ")
    if not args[0]:
        raise ParseError("first argument is empty")
    return args


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Convert number words to integers, rejecting bad syntax, overflow and duplicates."""
    numbers = []
    for word in args:
        if not is_valid_number(word):
            raise ParseError(f"not an integer: {word!r}")
        if not fits_int(word):
            raise ParseError(f"out of range: {word!r}")
        numbers.append(atoi(word))
    if has_duplicates(numbers):
        raise ParseError("duplicate numbers")
    return numbers


def index_numbers(numbers: Sequence[int]) -> list[int]:
    """Replace each number by how many numbers are strictly smaller than it."""
    ordered = sorted(numbers)
    return [bisect_left(ordered, number) for number in numbers]