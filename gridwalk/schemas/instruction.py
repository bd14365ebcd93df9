"""
Instruction schema for the grid walker.

An Instruction is one leg of the walk: a quarter turn followed by a straight
run of ``amount`` cells. Instructions are created once by the parser and are
immutable for the rest of the run.
"""

from __future__ import annotations

from dataclasses import dataclass

from gridwalk.compass.registry import get_registry
from gridwalk.compass.types import Turn


class InvalidInstruction(ValueError):
    """Raised when a token cannot be turned into an Instruction.

    Attributes:
        token: The offending token text (after trimming).
        index: 0-based position of the token in the full input, or None when
            a single token was parsed on its own.
        reason: Human-readable description of what was wrong.
    """

    def __init__(self, token: str, reason: str, index: int | None = None) -> None:
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"invalid instruction {token!r}{where}: {reason}")
        self.token = token
        self.reason = reason
        self.index = index


@dataclass(frozen=True)
class Instruction:
    """
    A single walk instruction.

    Attributes:
        turn: Rotation applied to the current facing before moving.
        amount: Number of grid cells to advance; zero is a pure turn.
    """

    turn: Turn
    amount: int

    def __post_init__(self) -> None:
        if not isinstance(self.turn, Turn):
            raise TypeError(f"turn must be a Turn, got {self.turn!r}")
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(f"amount must be an int, got {self.amount!r}")
        if self.amount < 0:
            raise InvalidInstruction(str(self), f"amount must be >= 0, got {self.amount}")

    def __str__(self) -> str:
        return f"{get_registry().get_letter(self.turn)}{self.amount}"
