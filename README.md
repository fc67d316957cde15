# pushswap

Sorts a list of distinct integers using two stacks and a small set of
operations, printing each operation it performs, one per line.

The operations are:

| op    | effect                                           |
|-------|--------------------------------------------------|
| `sa`  | swap the top two elements of stack A             |
| `ra`  | rotate stack A up (the top goes to the bottom)   |
| `rra` | rotate stack A down (the bottom goes to the top) |
| `pa`  | move the top of stack B onto stack A             |
| `pb`  | move the top of stack A onto stack B             |

An operation that has nothing to act on (for example `pa` with stack B
empty) does nothing and is not printed.

## Installation

```
pip install .
```

## Command line

Pass the numbers either as separate arguments or as a single string
separated by spaces:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The same entry point can be run as `python -m pushswap.cli`.

The first number given is the top of stack A. The command prints the
operations that leave stack A sorted in ascending order with the smallest
value on top. The exit status is 0 in every case.

- If no arguments are given, nothing is printed.
- If the input is already sorted (this includes a single number), nothing
  is printed.
- `Error` is written to standard error if any number is not an optional
  `-` followed by decimal digits (a leading `+` is rejected), lies outside
  the 32-bit signed range, or appears twice; also if a single argument is
  empty or only whitespace, or if the first of several arguments is empty.

Two or three values are handled with fixed sequences. Four or five values
are sorted by moving the smallest onto stack B until three remain. Anything
larger is sorted with a least-significant-bit-first binary radix sort on the
rank of each value.

## Library use

```python
import io
from pushswap.parsing import parse_numbers, index_numbers
from pushswap.sorting import solve

numbers = parse_numbers(["3", "-1", "7", "0"])
ranks = index_numbers(numbers)      # [2, 0, 3, 1]
out = io.StringIO()
machine = solve(ranks, out)
print(out.getvalue().splitlines())  # the operations, one per item
print(machine.a)                    # [0, 1, 2, 3]
print(machine.moves)                # the same operations as a list
```

- `pushswap.parsing`: `collect_arguments`, `parse_numbers` (raises
  `ParseError`, a `ValueError`), `index_numbers`, and the checks
  `is_valid_number`, `fits_int`, `is_blank`, `has_duplicates`.
- `pushswap.stacks.PushSwap` holds stacks `a` and `b` (top first) and applies
  `sa`, `ra`, `rra`, `pa`, `pb`, writing each effective operation to its
  output stream and appending it to `moves`.
- `pushswap.sorting`: `solve`, `is_sorted`, `max_bits`, and the strategies
  `sort_two`, `sort_three`, `sort_five`, `sort_radix` that drive a `PushSwap`.

The package also carries the small helpers these build on:

- `pushswap.chars`: ASCII classification (`is_alpha`, `is_digit`, ...),
  `to_upper`, `to_lower`, `atoi` (32-bit wrap-around) and `itoa`.
- `pushswap.strings`: C-string style helpers such as `split`, `strchr`,
  `strlcpy`, `strlcat`, `strncmp`, `strnstr`, `strtrim` and `substr`.
- `pushswap.memory`: byte-buffer helpers `memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`.
- `pushswap.output`: `printf`/`format_printf` supporting
  `%c %s %d %i %u %x %X %p %%`, the single conversions (`print_dec`,
  `print_hex`, ...) and `put_char`, `put_str`, `put_endl`, `put_nbr`.
- `pushswap.lines`: `LineReader` and `read_lines`, reading a text or binary
  stream line by line through a fixed-size buffer (42 by default).

## What it does not do

- Only the five operations above are used; there are no operations on
  stack B alone (`sb`, `rb`, `rrb`) and no combined ones (`ss`, `rr`, `rrr`).
- There is no command that reads a list of operations and checks whether
  they sort a given input.
- The output is a correct sort, not a minimal one: for more than five values
  the radix sort makes no attempt to shorten the sequence.

## Tests

```
pip install ".[test]"
pytest
```