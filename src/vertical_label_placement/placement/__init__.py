"""Label placement subpackage.

Public API:
- place: Minimax placement with a minimum separation
- place_with_limits: Same, confined to a minimum and maximum position
- LimitStrategy: Correction used when the unbounded placement does not fit
- InfeasibleLimitsWarning: Issued when the limits cannot be honoured
- minimax_isotonic: L-infinity isotonic regression of an integer sequence
- max_offset / is_separated: Measurements on a placement
"""

from vertical_label_placement.placement.core import minimax_isotonic, place
from vertical_label_placement.placement.limits import (
    InfeasibleLimitsWarning,
    LimitStrategy,
    place_with_limits,
)
from vertical_label_placement.placement.validation import is_separated, max_offset

__all__ = [
    "InfeasibleLimitsWarning",
    "LimitStrategy",
    "is_separated",
    "max_offset",
    "minimax_isotonic",
    "place",
    "place_with_limits",
]
