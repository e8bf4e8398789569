"""Placement confined to a minimum and maximum position.

The unbounded solution from ``place`` is computed first. If it already fits
the limits it is returned as is; otherwise a single correction step moves it
inside. Two corrections are available:

- ``LimitStrategy.CLAMP`` re-solves with the limits as fixed anchors. Every
  label outside the range it is allowed to occupy is pulled to the edge of
  that range, while groups of labels that are already inside keep their
  unbounded positions. This is optimal whenever the limits are wide enough.
- ``LimitStrategy.SHIFT`` translates the whole sequence rigidly. It never
  changes the relative spacing, but on spread-out inputs it can push the
  far end of the sequence past the other limit.

If the limits are too close together for the labels at minimum separation,
separation wins and only the maximum limit is kept.
"""

from __future__ import annotations

__all__ = [
    "InfeasibleLimitsWarning",
    "LimitStrategy",
    "clamp_into_limits",
    "place_with_limits",
    "shift_into_limits",
]

import warnings
from collections.abc import Sequence
from enum import Enum

from vertical_label_placement.constants import DEFAULT_STRATEGY
from vertical_label_placement.placement.core import place
from vertical_label_placement.placement.validation import check_limits, check_separation


class LimitStrategy(str, Enum):
    """How an out-of-range placement is moved back inside the limits."""

    CLAMP = "clamp"
    SHIFT = "shift"


class InfeasibleLimitsWarning(UserWarning):
    """The requested limits could not be honoured."""


def _resolve_strategy(strategy: LimitStrategy | str) -> LimitStrategy:
    try:
        return LimitStrategy(strategy)
    except ValueError:
        valid = ", ".join(s.value for s in LimitStrategy)
        raise ValueError(
            f"Unknown limit strategy {strategy!r}. Use one of: {valid}."
        ) from None


def clamp_into_limits(
    placed: Sequence[int],
    separation: int,
    min_bound: int,
    max_bound: int,
) -> list[int]:
    """Clamp an unbounded placement into the limits, label by label.

    Label i can sit no lower than ``min_bound + i * separation`` and no
    higher than ``max_bound - (n - 1 - i) * separation``. In coordinates
    with the cumulative separation removed these become one shared range,
    and clamping a non-decreasing sequence into a range keeps it
    non-decreasing. The maximum is applied last.
    """
    if not placed:
        return []
    lo = min_bound
    hi = max_bound - (len(placed) - 1) * separation
    result = []
    for i, y in enumerate(placed):
        shifted = y - i * separation
        shifted = min(max(shifted, lo), hi)
        result.append(shifted + i * separation)
    return result


def shift_into_limits(placed: Sequence[int], min_bound: int, max_bound: int) -> list[int]:
    """Translate the whole placement so it starts and ends inside the limits.

    The minimum is corrected first and the maximum second.
    """
    if not placed:
        return []
    delta = 0
    if placed[0] < min_bound:
        delta = min_bound - placed[0]
    if placed[-1] + delta > max_bound:
        delta = max_bound - placed[-1]
    return [y + delta for y in placed]


def place_with_limits(
    preferred: Sequence[int],
    separation: int,
    min_bound: int,
    max_bound: int,
    strategy: LimitStrategy | str = DEFAULT_STRATEGY,
) -> list[int]:
    """Place labels, respecting a minimum separation and minimum and maximum positions.

    Args:
        preferred: Preferred positions in the order the labels must appear.
        separation: Minimum gap between consecutive labels.
        min_bound: Lowest position the first label may take.
        max_bound: Highest position the last label may take.
        strategy: Correction applied when the unbounded placement does not
            fit (``"clamp"`` or ``"shift"``).

    >>> place_with_limits([-10, -1, 1, 10], 10, 0, 100)
    [0, 10, 20, 30]
    >>> place_with_limits([-10, -1, 1, 10], 10, -10, 10)
    [-20, -10, 0, 10]
    """
    separation = check_separation(separation)
    min_bound, max_bound = check_limits(min_bound, max_bound)
    strategy = _resolve_strategy(strategy)

    placed = place(preferred, separation)
    if not placed:
        return placed

    span = (len(placed) - 1) * separation
    feasible = span <= max_bound - min_bound
    if not feasible:
        warnings.warn(
            f"{len(placed)} labels at separation {separation} need {span} units "
            f"but the limits [{min_bound}, {max_bound}] only allow "
            f"{max_bound - min_bound}; keeping the maximum limit only",
            InfeasibleLimitsWarning,
            stacklevel=2,
        )

    if placed[0] >= min_bound and placed[-1] <= max_bound:
        return placed

    if strategy is LimitStrategy.SHIFT:
        result = shift_into_limits(placed, min_bound, max_bound)
    else:
        result = clamp_into_limits(placed, separation, min_bound, max_bound)

    if feasible and result[0] < min_bound:
        warnings.warn(
            f"Rigid shift left the first label at {result[0]}, below the "
            f"minimum limit {min_bound}; use strategy='clamp' to keep both limits",
            InfeasibleLimitsWarning,
            stacklevel=2,
        )
    return result
