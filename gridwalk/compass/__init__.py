from .types import (
    Direction,
    DirectionEntry,
    Position,
    Turn,
    TurnEntry,
    taxicab_norm,
)
from .registry import CompassRegistry, get_registry
from .rotation import (
    offset,
    offset_with_amount,
    rotate,
    rotate_ccw,
    rotate_cw,
    rotate_left,
    rotate_right,
    unit_offset,
)

__all__ = [
    "Direction",
    "Turn",
    "Position",
    "DirectionEntry",
    "TurnEntry",
    "taxicab_norm",
    "CompassRegistry",
    "get_registry",
    "rotate",
    "rotate_cw",
    "rotate_ccw",
    "rotate_left",
    "rotate_right",
    "unit_offset",
    "offset",
    "offset_with_amount",
]
