# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small fixed set of operations. The `push-swap` command prints the
operations it performs, one per line, to standard output. Applied to
stack `a` in that order, they leave it sorted in ascending order with
the smallest number on top.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`  | swap the top two elements of `a` |
| `pa`  | move the top of `b` onto `a` |
| `pb`  | move the top of `a` onto `b` |
| `ra`, `rb`, `rr`  | rotate `a`, `b`, or both up by one (the top goes to the bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (the bottom goes to the top) |

## Command line

Give the numbers as separate arguments, or as a single argument with
the numbers separated by spaces:

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The first number is the top of stack `a`. A number may carry one `+`
or `-` sign.

- With no arguments, or a single number, the program prints nothing.
- With input that is already sorted, it prints nothing.
- With input that is not valid, it prints `Error` to standard error.
  Input is invalid when it contains something that is not an integer,
  when a number falls outside the 32-bit signed range, when a number
  appears twice, or when the first argument is empty.

The exit status is 0 in every case.

## From Python

```python
from pushswap.algorithm import push_swap
from pushswap.parsing import parse_arguments, ParseError
from pushswap.stacks import Stacks

ops = push_swap([3, 2, 5, 1, 4])     # list of operation names

stacks = Stacks.from_values([2, 1, 3])
stacks.sa()
print(stacks.values("a"))            # [1, 2, 3]
print(stacks.operations)             # ['sa']

try:
    parse_arguments(["1", "1"])
except ParseError:
    print("duplicate")
```

`pushswap.algorithm` also exposes the steps of the sort on their own
(`sort_three`, `seed_b`, `move_a_to_b`, `move_b_to_a`, `bring_to_top`,
and the cost helpers). `Stacks` takes an optional `out` text stream to
which each operation is written as it is performed.

The package also carries small helper modules:

- `pushswap.chars` – ASCII classification and case conversion
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_lower`, `to_upper`).
- `pushswap.numbers` – `atoi` (32-bit wrapping) and `itoa`.
- `pushswap.output` – `put_char`, `put_str`, `put_endl`, `put_nbr`
  writing to a text stream (standard output by default).
- `pushswap.textops` – string routines with C string semantics
  (`strchr`, `strrchr`, `strnstr`, `strncmp`, `strlcpy`, `strlcat`,
  `strtrim`, `substr`, `strmapi`, `striteri` and others).
- `pushswap.memory` – byte-buffer routines (`memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`).
- `pushswap.linked` – `LinkedList`, a singly linked list of `ListNode`s.

## What it does not do

There is no checker: the package produces sorting operations but has no
command that reads a list of operations and verifies that they sort a
given input.

## Installation

```
pip install .
pip install ".[test]"   # with pytest, for the test suite
```