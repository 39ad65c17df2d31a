"""Sorting stack a with the puzzle's moves by cheapest insertion from stack b."""

from __future__ import annotations

from itertools import islice
from typing import Iterable

from pushswap.operations import Operation, apply
from pushswap.stack import Node, Stack


def assign_indices(stack: Stack) -> None:
    """Give every node its rank by value, 1 for the smallest."""
    for rank, node in enumerate(sorted(stack, key=lambda n: n.value), start=1):
        node.index = rank


def _top(stack: Stack) -> Node:
    return next(iter(stack))


def _second(stack: Stack) -> Node:
    return list(islice(stack, 2))[1]


def _number_positions(stack: Stack) -> None:
    for pos, node in enumerate(stack):
        node.pos = pos


def _signed_cost(pos: int, size: int) -> int:
    """Rotations to bring ``pos`` to the top; negative means reverse rotations."""
    if pos > size // 2:
        return -(size - pos)
    return pos


class Solver:
    """Sorts stack a, recording every move it makes."""

    def __init__(self, stack: Stack) -> None:
        self.a = stack
        self.b = Stack()
        self.operations: list[Operation] = []

    def solve(self) -> list[Operation]:
        """Sort stack a and return the moves made by this call."""
        start = len(self.operations)
        size = len(self.a)
        assign_indices(self.a)
        if size == 2 and not self.a.is_sorted():
            self._do(Operation.SA)
        elif size == 3:
            self._sort_three()
        elif size > 3 and not self.a.is_sorted():
            self._sort_many()
        return self.operations[start:]

    def _do(self, op: Operation) -> None:
        apply(op, self.a, self.b)
        self.operations.append(op)

    def _sort_three(self) -> None:
        if self.a.is_sorted():
            return
        highest = self.a.max_index()
        if _top(self.a).index == highest:
            self._do(Operation.RA)
        elif _second(self.a).index == highest:
            self._do(Operation.RRA)
        if _top(self.a).index > _second(self.a).index:
            self._do(Operation.SA)

    def _push_to_b(self) -> None:
        size = len(self.a)
        pushed = 0
        if size > 6:
            for _ in range(size):
                if pushed >= size // 2:
                    break
                if _top(self.a).index <= size // 2:
                    self._do(Operation.PB)
                    pushed += 1
                else:
                    self._do(Operation.RA)
        while size - pushed > 3:
            self._do(Operation.PB)
            pushed += 1

    def _assign_targets(self) -> None:
        _number_positions(self.a)
        _number_positions(self.b)
        for node in self.b:
            above = [n for n in self.a if n.index > node.index]
            pool = above or list(self.a)
            node.target = min(pool, key=lambda n: n.index).pos

    def _assign_costs(self) -> None:
        size_a = len(self.a)
        size_b = len(self.b)
        for node in self.b:
            node.cost_b = _signed_cost(node.pos, size_b)
            node.cost_a = _signed_cost(node.target, size_a)

    def _move_cheapest(self) -> None:
        cheapest = min(self.b, key=lambda n: abs(n.cost_a) + abs(n.cost_b))
        self._move(cheapest.cost_a, cheapest.cost_b)

    def _move(self, cost_a: int, cost_b: int) -> None:
        while cost_a < 0 and cost_b < 0:
            self._do(Operation.RRR)
            cost_a += 1
            cost_b += 1
        while cost_a > 0 and cost_b > 0:
            self._do(Operation.RR)
            cost_a -= 1
            cost_b -= 1
        while cost_a:
            if cost_a < 0:
                self._do(Operation.RRA)
                cost_a += 1
            else:
                self._do(Operation.RA)
                cost_a -= 1
        while cost_b:
            if cost_b < 0:
                self._do(Operation.RRB)
                cost_b += 1
            else:
                self._do(Operation.RB)
                cost_b -= 1
        self._do(Operation.PA)

    def _rotate_smallest_to_top(self) -> None:
        nodes = list(self.a)
        size = len(nodes)
        lowest = min(range(size), key=lambda i: nodes[i].index)
        if lowest > size // 2:
            for _ in range(size - lowest):
                self._do(Operation.RRA)
        else:
            for _ in range(lowest):
                self._do(Operation.RA)

    def _sort_many(self) -> None:
        self._push_to_b()
        self._sort_three()
        while len(self.b):
            self._assign_targets()
            self._assign_costs()
            self._move_cheapest()
        if not self.a.is_sorted():
            self._rotate_smallest_to_top()


def sort_values(values: Iterable[int]) -> list[Operation]:
    """Return the moves that sort the given values, first value on top."""
    return Solver(Stack(Node(v) for v in values)).solve()