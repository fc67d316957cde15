"""Formatted output to text streams: single conversions and a small printf."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

from .chars import itoa
from .strings import strdup

_UINT_BITS = 32
_POINTER_BITS = 64


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _emit(text: str, stream: TextIO | None) -> int:
    _target(stream).write(text)
    return len(text)


def _char_text(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _unsigned(n: int, bits: int = _UINT_BITS) -> int:
    """Reinterpret ``n`` as an unsigned integer of ``bits`` bits."""
    n = int(n)
    if not -(1 << (bits - 1)) <= n < (1 << bits):
        raise OverflowError(f"{n} does not fit in {bits} bits")
    return n & ((1 << bits) - 1)


def _str_text(text: str | None) -> str:
    return "(null)" if text is None else strdup(text)


def _pointer_text(address: int | None) -> str:
    if not address:
        return "(nil)"
    if address < 0:
        raise ValueError(f"an address must not be negative, got {address}")
    if address >= 1 << _POINTER_BITS:
        raise OverflowError(f"address {address:#x} does not fit in {_POINTER_BITS} bits")
    return "0x" + format(address, "x")


def _dec_text(n: int) -> str:
    return itoa(n)


def _unsigned_text(n: int) -> str:
    return str(_unsigned(n))


def _hex_text(n: int) -> str:
    return format(_unsigned(n), "x")


def _hex_upper_text(n: int) -> str:
    return format(_unsigned(n), "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char_text,
    "s": _str_text,
    "d": _dec_text,
    "i": _dec_text,
    "u": _unsigned_text,
    "x": _hex_text,
    "X": _hex_upper_text,
    "p": _pointer_text,
}


def print_char(c: int | str, stream: TextIO | None = None) -> int:
    """Write one character; an int is taken as a byte value. Returns 1."""
    return _emit(_char_text(c), stream)


def print_str(text: str | None, stream: TextIO | None = None) -> int:
    """Write ``text`` up to its first NUL, or "(null)" for None; return the count."""
    return _emit(_str_text(text), stream)


def print_dec(n: int, stream: TextIO | None = None) -> int:
    """Write a 32-bit signed integer in decimal; return the count."""
    return _emit(_dec_text(n), stream)


def print_unsigned(n: int, stream: TextIO | None = None) -> int:
    """Write ``n`` as a 32-bit unsigned integer in decimal; return the count."""
    return _emit(_unsigned_text(n), stream)


def print_hex(n: int, stream: TextIO | None = None) -> int:
    """Write ``n`` as a 32-bit unsigned integer in lower-case hex; return the count."""
    return _emit(_hex_text(n), stream)


def print_hex_upper(n: int, stream: TextIO | None = None) -> int:
    """Write ``n`` as a 32-bit unsigned integer in upper-case hex; return the count."""
    return _emit(_hex_upper_text(n), stream)


def print_pointer(address: int | None, stream: TextIO | None = None) -> int:
    """Write an address as 0x-prefixed hex, or "(nil)" for a null one; return the count."""
    return _emit(_pointer_text(address), stream)


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``%c %s %d %i %u %x %X %p %%`` in ``fmt``.

    An unknown conversion produces nothing and consumes no argument; a lone
    ``%`` at the end of the format is dropped.
    """
    pieces: list[str] = []
    chars = iter(strdup(fmt))
    values = iter(args)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        if conversion == "%":
            pieces.append("%")
            continue
        render = _CONVERSIONS.get(conversion)
        if render is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        pieces.append(render(value))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expansion of ``fmt`` and return the number of characters written."""
    return _emit(format_printf(fmt, *args), stream)


def put_char(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character."""
    _emit(_char_text(c), stream)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` up to its first NUL."""
    _emit(strdup(text), stream)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` up to its first NUL, followed by a newline."""
    _emit(strdup(text) + "\n", stream)


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _emit(itoa(n), stream)