"""Index, target and cost bookkeeping that steers the sorter's moves."""

from __future__ import annotations

from typing import Sequence

from .stack import Node, max_node, min_node


def assign_index(stack: Sequence[Node]) -> None:
    """Number the nodes from the top and flag those in the upper half.

    A node is above the median when its index is at most half the stack size
    (rounded down), so rotating it up is the shorter way to the top.
    """
    median = len(stack) // 2
    for position, node in enumerate(stack):
        node.index = position
        node.above_median = position <= median


def _assign_targets_in_b(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Give each node of ``a`` the closest smaller node of ``b``, else b's maximum."""
    for node in a:
        smaller = [candidate for candidate in b if candidate.value < node.value]
        if smaller:
            node.target = max(smaller, key=lambda candidate: candidate.value)
        else:
            node.target = max_node(b)


def _assign_targets_in_a(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Give each node of ``b`` the closest bigger node of ``a``, else a's minimum."""
    for node in b:
        bigger = [candidate for candidate in a if candidate.value > node.value]
        if bigger:
            node.target = min(bigger, key=lambda candidate: candidate.value)
        else:
            node.target = min_node(a)


def _calculate_push_costs(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Count the rotations that bring each node of ``a`` and its target to the top."""
    size_a = len(a)
    size_b = len(b)
    for node in a:
        target = node.target
        if target is None:
            raise ValueError(f"node {node.value} has no target")
        cost = node.index if node.above_median else size_a - node.index
        if target.above_median:
            cost += target.index
        else:
            cost += size_b - target.index
        node.push_cost = cost


def mark_cheapest(stack: Sequence[Node]) -> None:
    """Flag the first node with the lowest push cost as the cheapest one."""
    best = min(stack, key=lambda node: node.push_cost, default=None)
    if best is None:
        return
    for node in stack:
        node.cheapest = node is best


def prepare_a_for_push(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Compute indices, targets in ``b`` and push costs, and mark the cheapest node of ``a``."""
    if not b:
        raise ValueError("stack b is empty")
    assign_index(a)
    assign_index(b)
    _assign_targets_in_b(a, b)
    _calculate_push_costs(a, b)
    mark_cheapest(a)


def prepare_b_for_push(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Compute indices and give each node of ``b`` its insertion target in ``a``."""
    if b and not a:
        raise ValueError("stack a is empty")
    assign_index(a)
    assign_index(b)
    _assign_targets_in_a(a, b)