"""The eleven named moves of the puzzle and how they act on the two stacks."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from pushswap.parsing import InputError
from pushswap.stack import Stack


class Operation(str, Enum):
    """A move, named as it is written on output and read back by the checker."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap_both(a: Stack, b: Stack) -> None:
    a.swap()
    b.swap()


def _rotate_both(a: Stack, b: Stack) -> None:
    a.rotate()
    b.rotate()


def _reverse_rotate_both(a: Stack, b: Stack) -> None:
    a.reverse_rotate()
    b.reverse_rotate()


_ACTIONS: dict[Operation, Callable[[Stack, Stack], None]] = {
    Operation.SA: lambda a, b: a.swap(),
    Operation.SB: lambda a, b: b.swap(),
    Operation.SS: _swap_both,
    Operation.PA: lambda a, b: a.push_from(b),
    Operation.PB: lambda a, b: b.push_from(a),
    Operation.RA: lambda a, b: a.rotate(),
    Operation.RB: lambda a, b: b.rotate(),
    Operation.RR: _rotate_both,
    Operation.RRA: lambda a, b: a.reverse_rotate(),
    Operation.RRB: lambda a, b: b.reverse_rotate(),
    Operation.RRR: _reverse_rotate_both,
}


def apply(op: Operation, a: Stack, b: Stack) -> None:
    """Carry out ``op`` on stacks ``a`` and ``b`` in place."""
    _ACTIONS[Operation(op)](a, b)


def parse_operation(line: str) -> Operation:
    """Read one instruction line, which must be a move name ending in a newline."""
    if not line.endswith("\n"):
        raise InputError()
    try:
        return Operation(line[:-1])
    except ValueError:
        raise InputError() from None