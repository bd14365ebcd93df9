"""
Walk state for the grid simulator.

WalkState tracks the walker's position, facing, and the number of unit cells
walked so far. A WalkState belongs to exactly one simulation run; instruction
handlers update it in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gridwalk.compass.types import Direction, Position


@dataclass
class WalkState:
    """
    Simulation state for a single walk.

    Attributes:
        position: Current cell. Starts at the origin.
        facing: Current facing. Starts NORTH.
        steps_taken: Total unit cells advanced so far.
    """

    position: Position = field(default_factory=Position.origin)
    facing: Direction = Direction.NORTH
    steps_taken: int = 0

    def __post_init__(self) -> None:
        if self.steps_taken < 0:
            raise ValueError(f"steps_taken must be >= 0, got {self.steps_taken}")
