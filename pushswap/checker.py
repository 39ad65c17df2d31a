"""Command that reads moves from standard input and checks they sort the arguments."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from pushswap.operations import apply, parse_operation
from pushswap.parsing import InputError, build_stack, validate
from pushswap.stack import Stack


def run_checker(args: Sequence[str], lines: Iterable[str]) -> str:
    """Apply each instruction line to the stack built from ``args``.

    Returns "OK" when stack a ends sorted and stack b empty, "KO" otherwise.
    Raises InputError for bad arguments or an unknown instruction.
    """
    validate(args)
    a = build_stack(args)
    b = Stack()
    for line in lines:
        apply(parse_operation(line), a, b)
    return "OK" if a.is_sorted() and not len(b) else "KO"


def main(argv: Sequence[str] | None = None) -> int:
    """Check the moves on standard input; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        verdict = run_checker(args, sys.stdin)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write(f"{verdict}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())