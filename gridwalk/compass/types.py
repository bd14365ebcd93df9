"""
Core type definitions for the compass layer.

Enums are the canonical vocabulary; Position is the runtime coordinate.
Registry entry types are loaded from the YAML lookup table and are frozen
after startup and never written to at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ── Enums ──────────────────────────────────────────────────────────────────────


class Direction(str, Enum):
    """The four cardinal facings of the walker."""

    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"


class Turn(str, Enum):
    """Relative rotation applied before moving."""

    LEFT = "LEFT"  # counter-clockwise
    RIGHT = "RIGHT"  # clockwise


# ── Coordinates ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Position:
    """
    A cell on the unbounded integer grid.

    Python ints are arbitrary precision, so coordinates never overflow.
    Positions are hashable and used directly as visited-set members.
    """

    x: int = 0
    y: int = 0

    @classmethod
    def origin(cls) -> Position:
        return cls(0, 0)

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def scaled(self, factor: int) -> Position:
        return Position(self.x * factor, self.y * factor)

    def taxicab_norm(self) -> int:
        return taxicab_norm(self)


def taxicab_norm(position: Position) -> int:
    """L1 distance of *position* from the origin."""
    return abs(position.x) + abs(position.y)


# ── Registry entry types (frozen, loaded from YAML) ───────────────────────────


@dataclass(frozen=True)
class DirectionEntry:
    id: Direction
    offset: Position
    notes: str = ""


@dataclass(frozen=True)
class TurnEntry:
    id: Turn
    letter: str
    notes: str = ""
