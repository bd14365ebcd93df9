from .solve import SolveReport, part1, part2, solve

__all__ = ["SolveReport", "part1", "part2", "solve"]
