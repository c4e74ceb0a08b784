"""The two stacks of the sorter, their operations and queries over a stack."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TextIO, Union

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[+-]?[0-9]+")


@dataclass(eq=False)
class Node:
    """One element of a stack together with the sorter's bookkeeping."""

    value: int
    index: int = 0
    above_median: bool = False
    push_cost: int = 0
    cheapest: bool = False
    target: Optional["Node"] = None


def _to_int(raw: Union[int, str]) -> int:
    if isinstance(raw, bool):
        raise TypeError(f"not an integer: {raw!r}")
    if isinstance(raw, str):
        if not _NUMBER.fullmatch(raw):
            raise ValueError(f"not a number: {raw!r}")
        number = int(raw)
    elif isinstance(raw, int):
        number = raw
    else:
        raise TypeError(f"not an integer: {raw!r}")
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"out of range: {number}")
    return number


def _swap(stack: list[Node]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: list[Node]) -> None:
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def _reverse_rotate(stack: list[Node]) -> None:
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


def _push(dest: list[Node], src: list[Node]) -> None:
    if src:
        dest.insert(0, src.pop(0))


class Stacks:
    """Stacks ``a`` and ``b`` (top first) and the operations that move nodes.

    Every operation writes its name to ``output`` (standard output when
    ``output`` is None) unless called with ``quiet=True``.
    """

    def __init__(
        self,
        values: Iterable[Union[int, str]] = (),
        output: Optional[TextIO] = None,
    ) -> None:
        self.a: list[Node] = []
        self.b: list[Node] = []
        self._output = output
        seen: set[int] = set()
        for raw in values:
            number = _to_int(raw)
            if number in seen:
                raise ValueError(f"duplicate value: {number}")
            seen.add(number)
            self.a.append(Node(number))

    def _emit(self, name: str, quiet: bool) -> None:
        if quiet:
            return
        stream = self._output if self._output is not None else sys.stdout
        stream.write(name + "\n")

    def sa(self, quiet: bool = False) -> None:
        """Swap the top two nodes of ``a``."""
        _swap(self.a)
        self._emit("sa", quiet)

    def sb(self, quiet: bool = False) -> None:
        """Swap the top two nodes of ``b``."""
        _swap(self.b)
        self._emit("sb", quiet)

    def ss(self, quiet: bool = False) -> None:
        """Swap the top two nodes of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self._emit("ss", quiet)

    def pa(self, quiet: bool = False) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.a, self.b)
        self._emit("pa", quiet)

    def pb(self, quiet: bool = False) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.b, self.a)
        self._emit("pb", quiet)

    def ra(self, quiet: bool = False) -> None:
        """Rotate ``a`` up: the top becomes the bottom."""
        _rotate(self.a)
        self._emit("ra", quiet)

    def rb(self, quiet: bool = False) -> None:
        """Rotate ``b`` up: the top becomes the bottom."""
        _rotate(self.b)
        self._emit("rb", quiet)

    def rr(self, quiet: bool = False) -> None:
        """Rotate both stacks up."""
        _rotate(self.a)
        _rotate(self.b)
        self._emit("rr", quiet)

    def rra(self, quiet: bool = False) -> None:
        """Rotate ``a`` down: the bottom becomes the top."""
        _reverse_rotate(self.a)
        self._emit("rra", quiet)

    def rrb(self, quiet: bool = False) -> None:
        """Rotate ``b`` down: the bottom becomes the top."""
        _reverse_rotate(self.b)
        self._emit("rrb", quiet)

    def rrr(self, quiet: bool = False) -> None:
        """Rotate both stacks down."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._emit("rrr", quiet)

    def push_to_top(self, node: Node, name: str) -> None:
        """Rotate stack ``name`` ('a' or 'b') until ``node`` is on top.

        The direction follows the node's ``above_median`` flag.
        """
        if name == "a":
            stack, up, down = self.a, self.ra, self.rra
        elif name == "b":
            stack, up, down = self.b, self.rb, self.rrb
        else:
            raise ValueError(f"unknown stack: {name!r}")
        if not any(item is node for item in stack):
            raise ValueError(f"node is not in stack {name}")
        while stack[0] is not node:
            if node.above_median:
                up()
            else:
                down()


def is_sorted(stack: Sequence[Node]) -> bool:
    """True when the values ascend from top to bottom."""
    return all(lower.value <= upper.value for lower, upper in zip(stack, stack[1:]))


def min_node(stack: Sequence[Node]) -> Optional[Node]:
    """The first node holding the smallest value, or None for an empty stack."""
    return min(stack, key=lambda node: node.value, default=None)


def max_node(stack: Sequence[Node]) -> Optional[Node]:
    """The first node holding the largest value, or None for an empty stack."""
    return max(stack, key=lambda node: node.value, default=None)


def cheapest_node(stack: Sequence[Node]) -> Optional[Node]:
    """The first node flagged as cheapest, or None."""
    return next((node for node in stack if node.cheapest), None)