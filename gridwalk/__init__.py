"""
gridwalk: taxicab walks on an unbounded integer grid.

A walk starts at the origin facing north and follows comma-separated
instructions such as ``"R2, L3"`` (turn, then advance). The package reports
how far the walk ends from the origin and how far away the first cell
entered twice lies.
"""

from gridwalk.api.solve import SolveReport, part1, part2, solve
from gridwalk.parser.parser import parse_instruction, parse_instructions
from gridwalk.schemas.instruction import Instruction, InvalidInstruction
from gridwalk.simulator.simulate import NoRevisitFound, final_position, first_revisit

__all__ = [
    "solve",
    "SolveReport",
    "part1",
    "part2",
    "parse_instruction",
    "parse_instructions",
    "Instruction",
    "InvalidInstruction",
    "final_position",
    "first_revisit",
    "NoRevisitFound",
]
