"""
Rotation and movement rules over the closed four-direction compass.

All functions are pure and total. The cycle order and offsets come from the
compass registry, so both simulation modes and the norm agree on one sign
convention.
"""

from __future__ import annotations

from collections.abc import Callable

from .registry import get_registry
from .types import Direction, Position, Turn


def rotate_cw(direction: Direction) -> Direction:
    """NORTH → EAST → SOUTH → WEST → NORTH."""
    return get_registry().step_clockwise(direction, 1)


def rotate_ccw(direction: Direction) -> Direction:
    """NORTH → WEST → SOUTH → EAST → NORTH."""
    return get_registry().step_clockwise(direction, -1)


rotate_right = rotate_cw
rotate_left = rotate_ccw

_TURN_DISPATCH: dict[Turn, Callable[[Direction], Direction]] = {
    Turn.LEFT: rotate_ccw,
    Turn.RIGHT: rotate_cw,
}


def rotate(direction: Direction, turn: Turn) -> Direction:
    return _TURN_DISPATCH[turn](direction)


def unit_offset(direction: Direction) -> Position:
    return get_registry().get_offset(direction)


def offset_with_amount(direction: Direction, position: Position, amount: int) -> Position:
    """Move *amount* units from *position* in one step, without visiting the cells between."""
    return position + unit_offset(direction).scaled(amount)


def offset(direction: Direction, position: Position) -> Position:
    return position + unit_offset(direction)
