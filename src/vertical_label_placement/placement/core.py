"""Minimax placement of labels along a single axis.

Labels must keep their order and stay at least ``separation`` apart. Among
all placements that do, ``place`` returns one that minimises the largest
distance between any label and its preferred position.

Subtracting ``i * separation`` from the i-th position turns the separation
constraint into plain monotonicity, so the problem reduces to an L-infinity
isotonic regression. That has a closed form: each value is the midpoint of
the running maximum from the left and the running minimum from the right.
"""

from __future__ import annotations

__all__ = ["minimax_isotonic", "place"]

from collections.abc import Sequence
from itertools import accumulate

from vertical_label_placement.placement.validation import as_positions, check_separation


def minimax_isotonic(values: Sequence[int]) -> list[int]:
    """Closest non-decreasing integer sequence to *values* in the L-infinity sense.

    Midpoints are rounded down. Flooring keeps the result optimal over
    integer sequences, so odd sums never cost more than half a unit.
    """
    if not values:
        return []
    prefix_max = list(accumulate(values, max))
    suffix_min = list(accumulate(reversed(values), min))[::-1]
    return [(lo + hi) // 2 for lo, hi in zip(prefix_max, suffix_min)]


def place(preferred: Sequence[int], separation: int) -> list[int]:
    """Place labels, respecting a minimum separation.

    Args:
        preferred: Preferred positions, already in the order the labels
            must appear in (usually ascending).
        separation: Minimum gap between consecutive labels.

    Returns a new list of positions, one per label, in the same order.

    >>> place([-10, -1, 1, 10], 10)
    [-15, -5, 5, 15]
    """
    separation = check_separation(separation)
    positions = as_positions(preferred)
    shifted = [p - i * separation for i, p in enumerate(positions)]
    return [y + i * separation for i, y in enumerate(minimax_isotonic(shifted))]
