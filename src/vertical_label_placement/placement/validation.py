"""Argument checks and measurements for label positions."""

from __future__ import annotations

__all__ = ["as_positions", "check_limits", "check_separation", "is_separated", "max_offset"]

import operator
from collections.abc import Sequence


def as_positions(values: Sequence[int]) -> list[int]:
    """Copy a sequence of positions into a list of plain ints.

    Raises TypeError for anything that is not an integer (floats included).
    """
    try:
        return [operator.index(v) for v in values]
    except TypeError:
        raise TypeError(
            f"Positions must be integers, got {list(values)!r}"
        ) from None


def check_separation(separation: int) -> int:
    """Return *separation* as an int, rejecting negative values."""
    separation = operator.index(separation)
    if separation < 0:
        raise ValueError(f"Separation must be non-negative, got {separation}")
    return separation


def check_limits(min_bound: int, max_bound: int) -> tuple[int, int]:
    """Return the bounds as ints, rejecting an inverted interval."""
    min_bound = operator.index(min_bound)
    max_bound = operator.index(max_bound)
    if min_bound > max_bound:
        raise ValueError(
            f"Minimum bound {min_bound} is greater than maximum bound {max_bound}"
        )
    return min_bound, max_bound


def max_offset(preferred: Sequence[int], placed: Sequence[int]) -> int:
    """Largest absolute distance between a label and its preferred position."""
    if len(preferred) != len(placed):
        raise ValueError(
            f"Length mismatch: {len(preferred)} preferred vs {len(placed)} placed"
        )
    return max((abs(y - p) for p, y in zip(preferred, placed)), default=0)


def is_separated(positions: Sequence[int], separation: int) -> bool:
    """True if consecutive positions are at least *separation* apart."""
    return all(b - a >= separation for a, b in zip(positions, positions[1:]))
