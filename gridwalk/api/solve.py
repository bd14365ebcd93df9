"""
Public solving API.

part1() and part2() turn a parsed instruction sequence into the taxicab
distance of the final cell and of the first revisited cell. solve() parses
raw text and runs both, returning a SolveReport regardless of whether
parsing or the revisit walk succeeds, so callers can inspect partial results
on failure.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from gridwalk.compass.types import taxicab_norm
from gridwalk.parser.parser import parse_instructions
from gridwalk.schemas.instruction import Instruction, InvalidInstruction
from gridwalk.simulator.simulate import NoRevisitFound, final_position, first_revisit


@dataclass(frozen=True)
class SolveReport:
    """Outcome of solving one instruction text.

    Attributes:
        part1: Distance from the origin to the final cell, or None if parsing failed.
        part2: Distance from the origin to the first revisited cell, or None if
            parsing failed or the walk never crossed itself.
        parse_error: Error message if parsing raised, else None.
        revisit_error: Error message if the revisit walk found no repeat, else None.
    """

    part1: int | None
    part2: int | None
    parse_error: str | None = None
    revisit_error: str | None = None

    @property
    def passed(self) -> bool:
        return self.part1 is not None and self.part2 is not None


def part1(instructions: Sequence[Instruction]) -> int:
    return taxicab_norm(final_position(instructions))


def part2(instructions: Sequence[Instruction]) -> int:
    """Raises NoRevisitFound if no cell is entered twice."""
    return taxicab_norm(first_revisit(instructions))


def solve(text: str) -> SolveReport:
    """
    Parse *text* and compute both answers.

    Returns
    -------
    SolveReport
        Always returned; never raises for bad input. A parse failure skips
        both parts; a walk without a revisit still reports part1.
    """
    try:
        instructions = parse_instructions(text)
    except InvalidInstruction as exc:
        return SolveReport(part1=None, part2=None, parse_error=str(exc))

    answer1 = part1(instructions)
    try:
        answer2 = part2(instructions)
    except NoRevisitFound as exc:
        return SolveReport(part1=answer1, part2=None, revisit_error=str(exc))

    return SolveReport(part1=answer1, part2=answer2)
