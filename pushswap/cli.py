"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys

from pushswap.algorithm import push_swap
from pushswap.output import put_endl, put_str
from pushswap.parsing import ParseError, parse_arguments


def main(argv: list[str] | None = None) -> int:
    """Parse the numbers, print one operation per line; report bad input as Error."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except ParseError:
        put_str("Error\n", sys.stderr)
        return 0
    for operation in push_swap(values):
        put_endl(operation, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())