"""Vertical label placement that minimises the largest label offset.

Labels keep their order and a minimum separation, optionally stay within a
minimum and maximum position, and are moved as little as possible: no
other valid placement has a smaller maximum distance between a label and
its marker.

>>> from vertical_label_placement import place, place_with_limits
>>> place([-10, -1, 1, 10], 10)
[-15, -5, 5, 15]
>>> place_with_limits([-10, -1, 1, 10], 10, 0, 100)
[0, 10, 20, 30]
"""

from vertical_label_placement.labels import Label, LabelPlacement, place_labels
from vertical_label_placement.placement import (
    InfeasibleLimitsWarning,
    LimitStrategy,
    is_separated,
    max_offset,
    minimax_isotonic,
    place,
    place_with_limits,
)

__version__ = "0.1.0"

__all__ = [
    "InfeasibleLimitsWarning",
    "Label",
    "LabelPlacement",
    "LimitStrategy",
    "is_separated",
    "max_offset",
    "minimax_isotonic",
    "place",
    "place_labels",
    "place_with_limits",
]
