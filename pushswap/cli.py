"""Command that prints the moves sorting the numbers given as arguments."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parsing import InputError, build_stack, validate
from pushswap.sorter import Solver


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line that sorts the arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        validate(args)
        stack = build_stack(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for op in Solver(stack).solve():
        sys.stdout.write(f"{op}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())