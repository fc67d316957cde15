"""Command line: read integers, print the stack operations that sort them."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .output import put_str
from .parsing import ParseError, collect_arguments, index_numbers, parse_numbers
from .sorting import is_sorted, solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print a sequence of operations sorting the given integers.

    Invalid input prints "Error" on standard error. The exit status is 0 in
    every case.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(collect_arguments(args))
    except ParseError:
        put_str("Error\n", stream=sys.stderr)
        return 0
    indexed = index_numbers(numbers)
    if is_sorted(indexed):
        return 0
    solve(indexed)
    return 0


if __name__ == "__main__":
    sys.exit(main())