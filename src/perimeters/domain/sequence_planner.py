"""Wall print-order planning.

Given the number of walls on an island and a WallSequence policy, produce
the order in which the walls are printed as 1-based wall indices
(index = depth + 1). The planner is a pure function of its arguments.

Orders for three or more walls come from one builder per policy. Two-wall
orders are a fixed lookup: the middle-out phase is empty at that size, so
the builders do not give a meaningful answer there.

Example:
    >>> generate_order(5, WallSequence.MIDDLE_OUT_OUTER_INNER)
    [3, 4, 5, 1, 2]
    >>> generate_order(5, WallSequence.INNER_OUTER_INNER)
    [5, 4, 3, 1, 2]
"""

from __future__ import annotations

from typing import Callable

from .value_objects import Order, WallSequence


def _inner_outer(wall_count: int) -> Order:
    return list(range(wall_count, 0, -1))


def _outer_inner(wall_count: int) -> Order:
    return list(range(1, wall_count + 1))


def _inner_outer_inner(wall_count: int) -> Order:
    return list(range(wall_count, 2, -1)) + [1, 2]


def _middle_out_outer_inner(wall_count: int) -> Order:
    return list(range(3, wall_count + 1)) + [1, 2]


def _middle_out_inner_outer(wall_count: int) -> Order:
    return list(range(3, wall_count + 1)) + [2, 1]


_ORDER_BUILDERS: dict[WallSequence, Callable[[int], Order]] = {
    WallSequence.INNER_OUTER: _inner_outer,
    WallSequence.OUTER_INNER: _outer_inner,
    WallSequence.INNER_OUTER_INNER: _inner_outer_inner,
    WallSequence.MIDDLE_OUT_OUTER_INNER: _middle_out_outer_inner,
    WallSequence.MIDDLE_OUT_INNER_OUTER: _middle_out_inner_outer,
}

_TWO_WALL_ORDERS: dict[WallSequence, tuple[int, int]] = {
    WallSequence.INNER_OUTER: (2, 1),
    WallSequence.OUTER_INNER: (1, 2),
    WallSequence.INNER_OUTER_INNER: (2, 1),
    WallSequence.MIDDLE_OUT_OUTER_INNER: (2, 1),
    WallSequence.MIDDLE_OUT_INNER_OUTER: (1, 2),
}


def generate_order(wall_count: int, policy: WallSequence) -> Order:
    """Return the print order of an island's walls.

    Args:
        wall_count: Number of walls on the island. Zero or negative means
            there is nothing to print.
        policy: The wall sequence policy to apply.

    Returns:
        A permutation of 1..wall_count, or an empty list when
        wall_count <= 0.
    """
    if wall_count <= 0:
        return []
    if wall_count == 1:
        return [1]
    if wall_count == 2:
        return list(_TWO_WALL_ORDERS[policy])
    return _ORDER_BUILDERS[policy](wall_count)


def generate_depth_order(wall_count: int, policy: WallSequence) -> list[int]:
    """Same as generate_order(), expressed as 0-based depths."""
    return [index - 1 for index in generate_order(wall_count, policy)]


def is_valid_order(order: Order, wall_count: int) -> bool:
    """Check that order is exactly a permutation of 1..wall_count.

    An empty order is valid for a non-positive wall count.
    """
    if wall_count <= 0:
        return not order
    return len(order) == wall_count and set(order) == set(range(1, wall_count + 1))
