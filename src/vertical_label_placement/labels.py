"""Label placement for captioned markers.

Wraps the integer placement functions for callers that hold labels as
(text, marker position) pairs in arbitrary order: labels are sorted along
the axis, placed, and handed back in the order they were given.
"""

from __future__ import annotations

__all__ = ["Label", "LabelPlacement", "place_labels"]

from collections.abc import Iterable
from dataclasses import dataclass

from vertical_label_placement.constants import DEFAULT_STRATEGY
from vertical_label_placement.placement import LimitStrategy, place, place_with_limits


@dataclass(frozen=True)
class Label:
    """A caption attached to a marker on the axis."""

    text: str
    position: int


@dataclass
class LabelPlacement:
    """Where a label ended up relative to its marker."""

    text: str
    preferred: int
    y: int

    @property
    def offset(self) -> int:
        """Signed distance from the marker to the label."""
        return self.y - self.preferred


def place_labels(
    labels: Iterable[Label],
    separation: int,
    min_bound: int | None = None,
    max_bound: int | None = None,
    strategy: LimitStrategy | str = DEFAULT_STRATEGY,
) -> list[LabelPlacement]:
    """Place captioned labels along the axis.

    Labels are ordered by marker position before placing; ties keep their
    input order. Limits are optional but must be given together.

    Returns one LabelPlacement per label, in input order.
    """
    if (min_bound is None) != (max_bound is None):
        raise ValueError("min_bound and max_bound must be given together")

    labels = list(labels)
    order = sorted(range(len(labels)), key=lambda i: labels[i].position)
    preferred = [labels[i].position for i in order]

    if min_bound is None:
        placed = place(preferred, separation)
    else:
        placed = place_with_limits(preferred, separation, min_bound, max_bound, strategy)

    placements: list[LabelPlacement | None] = [None] * len(labels)
    for idx, y in zip(order, placed):
        label = labels[idx]
        placements[idx] = LabelPlacement(text=label.text, preferred=label.position, y=y)
    return placements
