"""
Walk simulator: replays an instruction sequence on the unbounded grid.

The simulator answers two questions about a walk that starts at the origin
facing north: where it ends (final_position), and which cell it enters a
second time first (first_revisit). Each call owns its own WalkState and
visited set, so independent walks never share mutable state.
"""

from .operations import apply_turn, execute_instruction, step_once
from .simulate import (
    NoRevisitFound,
    RevisitResult,
    final_position,
    find_first_revisit,
    first_revisit,
    simulate_walk,
    walk_path,
)
from .walk_state import WalkState

__all__ = [
    # Full-amount mode
    "simulate_walk",
    "final_position",
    # First-revisit mode
    "walk_path",
    "find_first_revisit",
    "first_revisit",
    "RevisitResult",
    "NoRevisitFound",
    # Operations
    "apply_turn",
    "execute_instruction",
    "step_once",
    # Walk state
    "WalkState",
]
