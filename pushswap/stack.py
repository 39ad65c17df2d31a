"""Stack of numbered nodes and the primitive moves the puzzle allows."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(eq=False)
class Node:
    """One element of a stack, with the bookkeeping the sorter relies on."""

    value: int
    index: int = 0
    pos: int = 0
    target: int = 0
    cost_a: int = 0
    cost_b: int = 0


class Stack:
    """A stack whose top is its first element."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._nodes: deque[Node] = deque(nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def swap(self) -> None:
        """Exchange the two top elements; does nothing with fewer than two."""
        if len(self._nodes) < 2:
            return
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)

    def push_from(self, other: Stack) -> None:
        """Move the top element of ``other`` onto this stack, if there is one."""
        if not other._nodes:
            return
        self._nodes.appendleft(other._nodes.popleft())

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        if len(self._nodes) < 2:
            return
        self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        if len(self._nodes) < 2:
            return
        self._nodes.rotate(1)

    def is_sorted(self) -> bool:
        """True when values never decrease from top to bottom."""
        values = self.values()
        return all(a <= b for a, b in zip(values, values[1:]))

    def max_index(self) -> int:
        """Largest rank held in the stack."""
        if not self._nodes:
            raise ValueError("max_index of an empty stack")
        return max(node.index for node in self._nodes)

    def values(self) -> list[int]:
        """The values from top to bottom."""
        return [node.value for node in self._nodes]