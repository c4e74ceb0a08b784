"""Sorting stack ``a`` with the two-stack operations, cheapest move first."""

from __future__ import annotations

import io
from typing import Iterable, Union

from .stack import Node, Stacks, cheapest_node, is_sorted, max_node, min_node
from .targets import assign_index, prepare_a_for_push, prepare_b_for_push


def sort_three(stacks: Stacks) -> None:
    """Order the top of ``a`` with at most one rotation and one swap.

    Exact for a stack of three; the largest node is moved to the bottom,
    then the top two are swapped if needed.
    """
    a = stacks.a
    if len(a) < 2:
        raise ValueError("need at least two elements in stack a")
    biggest = max_node(a)
    if biggest is a[0]:
        stacks.ra()
    elif biggest is a[1]:
        stacks.rra()
    if stacks.a[0].value > stacks.a[1].value:
        stacks.sa()


def _rotate_both(stacks: Stacks, cheapest: Node, reverse: bool) -> None:
    step = stacks.rrr if reverse else stacks.rr
    while stacks.b[0] is not cheapest.target and stacks.a[0] is not cheapest:
        step()
    assign_index(stacks.a)
    assign_index(stacks.b)


def _push_cheapest_a_to_b(stacks: Stacks) -> None:
    cheapest = cheapest_node(stacks.a)
    if cheapest is None or cheapest.target is None:
        raise ValueError("stack a has not been prepared")
    target = cheapest.target
    if cheapest.above_median and target.above_median:
        _rotate_both(stacks, cheapest, reverse=False)
    elif not cheapest.above_median and not target.above_median:
        _rotate_both(stacks, cheapest, reverse=True)
    stacks.push_to_top(cheapest, "a")
    stacks.push_to_top(target, "b")
    stacks.pb()


def _push_b_to_target_in_a(stacks: Stacks) -> None:
    target = stacks.b[0].target
    if target is None:
        raise ValueError("stack b has not been prepared")
    stacks.push_to_top(target, "a")
    stacks.pa()


def _rotate_min_to_top(stacks: Stacks) -> None:
    while stacks.a[0].value != min_node(stacks.a).value:
        if min_node(stacks.a).above_median:
            stacks.ra()
        else:
            stacks.rra()


def push_swap(stacks: Stacks) -> None:
    """Sort ``a`` by moving nodes to ``b`` cheapest first and inserting them back."""
    remaining = len(stacks.a)
    for _ in range(2):
        if remaining > 3 and not is_sorted(stacks.a):
            stacks.pb()
        remaining -= 1
    while True:
        more = remaining > 3
        remaining -= 1
        if not more or is_sorted(stacks.a):
            break
        prepare_a_for_push(stacks.a, stacks.b)
        _push_cheapest_a_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        prepare_b_for_push(stacks.a, stacks.b)
        _push_b_to_target_in_a(stacks)
    assign_index(stacks.a)
    _rotate_min_to_top(stacks)


def solve(values: Iterable[Union[int, str]]) -> list[str]:
    """Return the operations that sort ``values`` in ascending order.

    Raises ValueError for values that are not integers in the 32-bit range
    or that repeat.
    """
    output = io.StringIO()
    stacks = Stacks(values, output)
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.sa()
        elif len(stacks.a) == 3:
            sort_three(stacks)
        else:
            push_swap(stacks)
    return output.getvalue().splitlines()