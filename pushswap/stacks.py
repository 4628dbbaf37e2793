"""Two stacks of integers and the operations allowed on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, TextIO


@dataclass(eq=False)
class Node:
    """One element of a stack, with the bookkeeping the sorter needs."""

    value: int
    index: int = 0
    push_cost: int = 0
    under_median: bool = False
    cheapest: bool = False
    target: Node | None = None


def is_sorted(nodes: Iterable[Node]) -> bool:
    """True when the nodes are non-empty and strictly increasing from the top."""
    items = list(nodes)
    if not items:
        return False
    return all(upper.value < lower.value for upper, lower in zip(items, items[1:]))


def find_min(nodes: Iterable[Node]) -> Node | None:
    """The first node holding the smallest value, or None when there is none."""
    return min(nodes, key=lambda node: node.value, default=None)


def find_max(nodes: Iterable[Node]) -> Node | None:
    """The first node holding the largest value, or None when there is none."""
    return max(nodes, key=lambda node: node.value, default=None)


@dataclass
class Stacks:
    """Stacks a and b (top first); every operation performed is recorded."""

    a: list[Node] = field(default_factory=list)
    b: list[Node] = field(default_factory=list)
    out: TextIO | None = None
    operations: list[str] = field(default_factory=list)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Stacks:
        """Stack a holding the values, the first one on top; b empty."""
        return cls(a=[Node(value) for value in values])

    def values(self, name: str) -> list[int]:
        """The values of stack 'a' or 'b', top first."""
        return [node.value for node in self._stack(name)]

    def _stack(self, name: str) -> list[Node]:
        if name == "a":
            return self.a
        if name == "b":
            return self.b
        raise ValueError(f"unknown stack {name!r}")

    def _emit(self, operation: str) -> None:
        self.operations.append(operation)
        if self.out is not None:
            self.out.write(operation + "\n")

    @staticmethod
    def _rotate(stack: list[Node]) -> None:
        if stack:
            stack.append(stack.pop(0))

    @staticmethod
    def _reverse_rotate(stack: list[Node]) -> None:
        if stack:
            stack.insert(0, stack.pop())

    def sa(self) -> None:
        """Swap the two top elements of a."""
        if len(self.a) < 2:
            return
        self.a[0], self.a[1] = self.a[1], self.a[0]
        self._emit("sa")

    def pa(self) -> None:
        """Move the top of b onto a."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self._emit("pb")

    def ra(self) -> None:
        """Rotate a: the top element goes to the bottom."""
        if len(self.a) < 2:
            return
        self._rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Rotate b: the top element goes to the bottom."""
        if len(self.b) < 2:
            return
        self._rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate a and b together."""
        if len(self.a) < 2 and len(self.b) < 2:
            return
        self._rotate(self.a)
        self._rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Reverse-rotate a: the bottom element comes to the top."""
        if len(self.a) < 2:
            return
        self._reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Reverse-rotate b: the bottom element comes to the top."""
        if len(self.b) < 2:
            return
        self._reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate a and b together.

        Nothing happens when a has fewer than two elements; when only b is
        too short, a is still rotated but no operation is recorded.
        """
        if len(self.a) < 2:
            return
        self._reverse_rotate(self.a)
        if len(self.b) < 2:
            return
        self._reverse_rotate(self.b)
        self._emit("rrr")