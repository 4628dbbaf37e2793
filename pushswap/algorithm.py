"""The cost-driven sort: push to b cheaply, then insert back into a in order."""

from __future__ import annotations

from typing import Iterable

from pushswap.stacks import Node, Stacks, find_max, find_min, is_sorted


def index_stack(nodes: list[Node]) -> None:
    """Record each node's position and whether it lies past the median."""
    median = len(nodes) // 2
    for position, node in enumerate(nodes):
        node.index = position
        node.under_median = position > median


def _reset_marks(nodes: Iterable[Node]) -> None:
    for node in nodes:
        node.target = None
        node.cheapest = False


def set_targets_a(stacks: Stacks) -> None:
    """Give every node of a its target in b: the closest smaller value, else the largest."""
    if not stacks.a or not stacks.b:
        return
    for node in stacks.a:
        smaller = [other for other in stacks.b if other.value < node.value]
        closest = max(smaller, key=lambda other: other.value, default=None)
        node.target = closest if closest is not None else find_max(stacks.b)


def set_targets_b(stacks: Stacks) -> None:
    """Give every node of b its target in a: the closest larger value, else the smallest."""
    if not stacks.a or not stacks.b:
        return
    for node in stacks.b:
        larger = [other for other in stacks.a if other.value > node.value]
        closest = min(larger, key=lambda other: other.value, default=None)
        node.target = closest if closest is not None else find_min(stacks.a)


def push_cost(node: Node | None, length: int) -> int:
    """Rotations needed to bring an indexed node to the top of a stack of that length."""
    if node is None:
        return 0
    if node.under_median:
        return length - node.index
    return node.index


def assign_costs(stacks: Stacks) -> None:
    """Store on each node of a the cost of bringing it and its target to the top."""
    length_a = len(stacks.a)
    length_b = len(stacks.b)
    for node in stacks.a:
        node.push_cost = push_cost(node, length_a) + push_cost(node.target, length_b)


def cheapest(nodes: Iterable[Node]) -> Node | None:
    """Mark and return the first node with the lowest push cost."""
    best = min(nodes, key=lambda node: node.push_cost, default=None)
    if best is not None:
        best.cheapest = True
    return best


def sort_three(stacks: Stacks) -> None:
    """Order the three top values of a with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("stack a needs three elements")
    first, second, third = (node.value for node in stacks.a[:3])
    if first < second < third:
        return
    if second < third and first < third and first > second:
        stacks.sa()
    elif second < third and first > third and first > second:
        stacks.ra()
    elif second > third and first < second and first < third:
        stacks.rra()
        stacks.sa()
    elif first > second > third:
        stacks.sa()
        stacks.rra()
    elif second > third and first < second and first > third:
        stacks.rra()


def _contains(stack: list[Node], node: Node) -> bool:
    return any(member is node for member in stack)


def bring_to_top(stacks: Stacks, node: Node | None, name: str) -> None:
    """Rotate stack 'a' or 'b' until the node is on top, in its median's direction."""
    if name == "a":
        stack, forward, backward = stacks.a, stacks.ra, stacks.rra
    elif name == "b":
        stack, forward, backward = stacks.b, stacks.rb, stacks.rrb
    else:
        raise ValueError(f"unknown stack {name!r}")
    if node is None and not stack:
        return
    if node is None or not _contains(stack, node):
        raise ValueError("node is not in the stack")
    while stack[0] is not node:
        if node.under_median:
            backward()
        else:
            forward()


def bring_both_to_top(stacks: Stacks, node_a: Node, node_b: Node) -> None:
    """Rotate both stacks together until one of the two nodes reaches its top."""
    if not _contains(stacks.a, node_a) or not _contains(stacks.b, node_b):
        raise ValueError("node is not in its stack")
    while stacks.a[0] is not node_a and stacks.b[0] is not node_b:
        if not node_a.under_median and not node_b.under_median:
            stacks.rr()
        elif node_a.under_median and node_b.under_median:
            stacks.rrr()
        elif not node_a.under_median:
            stacks.ra()
            stacks.rrb()
        else:
            stacks.rra()
            stacks.rb()


def seed_b(stacks: Stacks) -> None:
    """Push up to two elements to b while a is long and unsorted."""
    for _ in range(2):
        if len(stacks.a) > 3 and not is_sorted(stacks.a):
            stacks.pb()


def move_a_to_b(stacks: Stacks) -> None:
    """Push the cheapest nodes to b until three remain in a, then sort those."""
    if is_sorted(stacks.a):
        return
    while len(stacks.a) > 3:
        _reset_marks(stacks.a)
        _reset_marks(stacks.b)
        index_stack(stacks.a)
        index_stack(stacks.b)
        set_targets_a(stacks)
        assign_costs(stacks)
        node = cheapest(stacks.a)
        target = node.target
        if target is not None:
            bring_both_to_top(stacks, node, target)
        bring_to_top(stacks, node, "a")
        if target is not None:
            bring_to_top(stacks, target, "b")
        stacks.pb()
    if len(stacks.a) == 3:
        sort_three(stacks)


def move_b_to_a(stacks: Stacks) -> None:
    """Push every node of b back above its closest larger value in a."""
    while stacks.b:
        index_stack(stacks.a)
        index_stack(stacks.b)
        if stacks.a:
            set_targets_b(stacks)
            bring_to_top(stacks, stacks.b[0].target, "a")
        stacks.pa()


def push_swap(values: Iterable[int]) -> list[str]:
    """The operations that sort the values, first value on top, in ascending order."""
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    stacks = Stacks.from_values(values)
    if not stacks.a or is_sorted(stacks.a):
        return []
    if len(stacks.a) == 2:
        stacks.sa()
    elif len(stacks.a) == 3:
        sort_three(stacks)
    else:
        seed_b(stacks)
        move_a_to_b(stacks)
        move_b_to_a(stacks)
        bring_to_top(stacks, find_min(stacks.a), "a")
    return list(stacks.operations)