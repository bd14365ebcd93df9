"""
Walk simulation over an instruction sequence.

Two modes share the same rotation rules and starting state (origin, facing
NORTH):

  - simulate_walk / final_position apply each instruction's run in bulk,
    O(number of instructions) regardless of the amounts.
  - walk_path / find_first_revisit step one cell at a time, O(sum of amounts)
    in both time and visited-set size, and stop at the first cell entered
    twice.

The origin is not in the visited set when the walk starts; it only counts as
visited once a step re-enters it. A walk that never crosses itself raises
NoRevisitFound rather than returning a placeholder coordinate.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from gridwalk.compass.types import Position
from gridwalk.schemas.instruction import Instruction

from .operations import apply_turn, execute_instruction, step_once
from .walk_state import WalkState

logger = logging.getLogger(__name__)


class NoRevisitFound(Exception):
    """Raised when a first-revisit walk ends without entering any cell twice.

    Attributes:
        steps_taken: Number of unit steps walked before the instructions ran out.
        final_position: Where the walk ended.
    """

    def __init__(self, steps_taken: int, final_position: Position) -> None:
        super().__init__(
            f"no cell visited twice in {steps_taken} steps "
            f"(walk ended at ({final_position.x}, {final_position.y}))"
        )
        self.steps_taken = steps_taken
        self.final_position = final_position


@dataclass(frozen=True)
class RevisitResult:
    """Outcome of a successful first-revisit walk.

    Attributes:
        position: The first cell entered for the second time.
        steps_taken: 1-based step number at which the repeat happened.
        visited_count: Distinct cells recorded before the repeating step.
    """

    position: Position
    steps_taken: int
    visited_count: int


def simulate_walk(instructions: Iterable[Instruction]) -> WalkState:
    """Run every instruction with bulk moves and return the final state."""
    state = WalkState()
    for instruction in instructions:
        execute_instruction(state, instruction)
    logger.debug(
        f"walk ended at ({state.position.x}, {state.position.y}) "
        f"facing {state.facing.value} after {state.steps_taken} steps"
    )
    return state


def final_position(instructions: Iterable[Instruction]) -> Position:
    return simulate_walk(instructions).position


def walk_path(
    instructions: Iterable[Instruction],
    state: WalkState | None = None,
) -> Iterator[Position]:
    """
    Yield every cell entered, one unit step at a time, in walk order.

    The starting cell is not yielded. If *state* is given it is updated as
    the generator advances, so the caller can inspect where the walk stopped.
    """
    if state is None:
        state = WalkState()
    for instruction in instructions:
        apply_turn(state, instruction)
        for _ in range(instruction.amount):
            yield step_once(state)


def find_first_revisit(instructions: Iterable[Instruction]) -> RevisitResult:
    """
    Walk cell by cell and return the first cell entered twice.

    Cells are tested and inserted in strict walk order, so the returned cell
    is the earliest repeat on the path. Raises NoRevisitFound when the
    instructions run out first.
    """
    state = WalkState()
    visited: set[Position] = set()
    for position in walk_path(instructions, state):
        if position in visited:
            logger.debug(
                f"first revisit at ({position.x}, {position.y}) on step {state.steps_taken}"
            )
            return RevisitResult(
                position=position,
                steps_taken=state.steps_taken,
                visited_count=len(visited),
            )
        visited.add(position)

    raise NoRevisitFound(state.steps_taken, state.position)


def first_revisit(instructions: Iterable[Instruction]) -> Position:
    return find_first_revisit(instructions).position
