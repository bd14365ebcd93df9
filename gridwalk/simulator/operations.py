"""
Single-instruction execution for the walk simulator.

Every instruction is a rotation followed by a straight run. The rotation is
shared; the run is either applied in bulk (final-position mode) or one cell
at a time (first-revisit mode, via step_once).
"""

from __future__ import annotations

from gridwalk.compass.rotation import offset, offset_with_amount, rotate
from gridwalk.compass.types import Position
from gridwalk.schemas.instruction import Instruction

from .walk_state import WalkState


def apply_turn(state: WalkState, instruction: Instruction) -> None:
    state.facing = rotate(state.facing, instruction.turn)


def execute_instruction(state: WalkState, instruction: Instruction) -> None:
    """Turn, then jump *amount* cells in the new facing without visiting the cells between."""
    apply_turn(state, instruction)
    state.position = offset_with_amount(state.facing, state.position, instruction.amount)
    state.steps_taken += instruction.amount


def step_once(state: WalkState) -> Position:
    """Advance one cell in the current facing and return the new position."""
    state.position = offset(state.facing, state.position)
    state.steps_taken += 1
    return state.position
