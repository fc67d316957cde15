"""Sorting strategies: fixed sequences for small inputs, binary radix for larger ones."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from .stacks import PushSwap


def is_sorted(values: Sequence[int]) -> bool:
    """True if ``values`` is in non-decreasing order."""
    return all(left <= right for left, right in zip(values, values[1:]))


def max_bits(count: int) -> int:
    """Number of bits needed to write the largest index ``count - 1``."""
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")
    bits = 0
    while (count - 1) >> bits:
        bits += 1
    return bits


def sort_two(machine: PushSwap) -> None:
    """Order the two values of ``a``."""
    a = machine.a
    if a[0] > a[1]:
        machine.sa()


def sort_three(machine: PushSwap) -> None:
    """Order the three values of ``a`` in at most two operations."""
    first, second, third = machine.a[:3]
    if first > second and second < third and first < third:
        machine.sa()
    elif first > second and second > third:
        machine.sa()
        machine.rra()
    elif first > second and second < third:
        machine.ra()
    elif first < second and second > third and first < third:
        machine.sa()
        machine.ra()
    elif first < second and second > third:
        machine.rra()


def _bring_min_to_top(machine: PushSwap) -> None:
    a = machine.a
    smallest = min(a)
    # Shortcut for a full five-value stack ending in ... 1, 0.
    rotate = machine.rra if len(a) >= 5 and a[3] == 1 and a[4] == 0 else machine.ra
    while machine.a[0] != smallest:
        rotate()


def sort_five(machine: PushSwap) -> None:
    """Order four or five values by parking the smallest on ``b``."""
    while len(machine.a) > 3:
        _bring_min_to_top(machine)
        machine.pb()
    sort_three(machine)
    while machine.b:
        machine.pa()


def sort_radix(machine: PushSwap, bits: int) -> None:
    """Least-significant-bit-first radix sort of non-negative values in ``a``."""
    count = len(machine.a)
    for bit in range(bits):
        for _ in range(count):
            if (machine.a[0] >> bit) & 1 == 0:
                machine.pb()
            else:
                machine.ra()
        while machine.b:
            machine.pa()


def solve(indexed: Sequence[int], out: TextIO | None = None) -> PushSwap:
    """Sort rank-indexed values, writing each operation to ``out``; return the stacks."""
    machine = PushSwap(indexed, out)
    count = len(indexed)
    if count == 2:
        sort_two(machine)
    elif count == 3:
        sort_three(machine)
    elif count in (4, 5):
        sort_five(machine)
    elif count > 5:
        sort_radix(machine, max_bits(count))
    return machine