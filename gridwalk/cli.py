"""
Command line front end.

    gridwalk [INPUT] [--part {1,2,both}] [-v]

Reads instruction text from INPUT (or stdin when INPUT is omitted or ``-``)
and prints ``part1: N`` / ``part2: N``. Exit status is 1 when the input
cannot be parsed or part 2 has no answer, 2 for usage errors.
"""

from __future__ import annotations

import argparse
import logging
import sys

from gridwalk.api.solve import part1, part2
from gridwalk.parser.parser import parse_instructions
from gridwalk.schemas.instruction import InvalidInstruction
from gridwalk.simulator.simulate import NoRevisitFound

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridwalk",
        description="Walk a grid from comma-separated turn instructions and report taxicab distances.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="file holding the instruction text; '-' or omitted reads stdin",
    )
    parser.add_argument(
        "--part",
        choices=["1", "2", "both"],
        default="both",
        help="which answer to print: final distance (1), first revisit distance (2), or both",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log simulation details to stderr",
    )
    return parser


def _read_input(parser: argparse.ArgumentParser, path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path) as f:
            return f.read()
    except OSError as exc:
        parser.error(f"cannot read {path}: {exc.strerror}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    text = _read_input(parser, args.input)
    try:
        instructions = parse_instructions(text)
    except InvalidInstruction as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    logger.info(f"read {len(instructions)} instructions from {args.input}")

    if args.part in ("1", "both"):
        print(f"part1: {part1(instructions)}")
    if args.part in ("2", "both"):
        try:
            print(f"part2: {part2(instructions)}")
        except NoRevisitFound as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
