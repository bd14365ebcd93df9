"""
Instruction parser: turns comma-separated instruction text into Instructions.

A token is a turn letter immediately followed by an unsigned decimal amount,
e.g. ``R2`` or ``L130``. Tokens are separated by commas and may carry
surrounding whitespace. Anything else is rejected with InvalidInstruction;
nothing is coerced.
"""

from __future__ import annotations

import logging
import re

from gridwalk.compass.registry import get_registry
from gridwalk.schemas.instruction import Instruction, InvalidInstruction

logger = logging.getLogger(__name__)

# ASCII digits only: no sign, no decimal point, no non-ASCII numerals.
_AMOUNT_RE = re.compile(r"[0-9]+")


def parse_instruction(token: str, index: int | None = None) -> Instruction:
    """
    Parse a single ``<TurnLetter><Amount>`` token.

    Surrounding whitespace is trimmed. *index* is only used to locate the
    token in error messages when called from parse_instructions().

    Raises InvalidInstruction for an empty token, an unknown turn letter, a
    missing amount, or an amount that is not plain decimal digits.
    """
    token = token.strip()
    if not token:
        raise InvalidInstruction(token, "empty token", index)

    turn = get_registry().get_turn(token[0])
    if turn is None:
        raise InvalidInstruction(token, f"unknown turn letter {token[0]!r}", index)

    rest = token[1:]
    if not rest:
        raise InvalidInstruction(token, "missing amount", index)
    if not _AMOUNT_RE.fullmatch(rest):
        raise InvalidInstruction(token, f"amount {rest!r} is not an unsigned integer", index)

    try:
        amount = int(rest)
    except ValueError as exc:
        # int() refuses strings past sys.get_int_max_str_digits().
        raise InvalidInstruction(
            token, f"amount of {len(rest)} digits is too large", index
        ) from exc

    return Instruction(turn=turn, amount=amount)


def parse_instructions(text: str) -> tuple[Instruction, ...]:
    """
    Parse a full instruction list, preserving input order.

    The first malformed token raises InvalidInstruction carrying its index;
    no partial result is returned.
    """
    tokens = text.strip().split(",")
    instructions = tuple(parse_instruction(tok, index=i) for i, tok in enumerate(tokens))
    logger.debug(f"parsed {len(instructions)} instructions")
    return instructions
