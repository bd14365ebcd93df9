"""
Compass registry: loads the direction cycle, unit offsets, and turn letters
from YAML at startup, validates them against each other, and exposes a
read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
The table is loaded and validated once at import time. Nothing writes to
the registry after startup.

──────────────────────────────────────────────────────────────────────────────
Geometry contract
──────────────────────────────────────────────────────────────────────────────
The offsets are free to use any sign convention, but the table must describe
a genuine compass:

  - every Direction appears exactly once in the clockwise cycle;
  - every offset is a unit vector (taxicab length 1);
  - opposite directions (two places apart in the cycle) cancel;
  - neighbouring directions in the cycle are perpendicular.

Any table satisfying these rules yields the same taxicab distances.
──────────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml

from .types import Direction, DirectionEntry, Position, Turn, TurnEntry

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
_COMPASS_FILE = "compass.yaml"


class CompassRegistry:
    """
    Immutable registry of the compass lookup tables.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        self.clockwise: tuple[Direction, ...] = ()
        self.directions: dict[Direction, DirectionEntry] = {}
        self.turns: dict[Turn, TurnEntry] = {}
        self.letters: dict[str, Turn] = {}

        self._load_all()
        self._validate_cross_references()
        logger.debug(f"compass registry loaded from {self._data_dir}")

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict:
        path = self._data_dir / filename
        with open(path) as f:
            return yaml.safe_load(f)

    def _load_all(self) -> None:
        data = self._load_yaml(_COMPASS_FILE)
        self._load_clockwise(data)
        self._load_directions(data)
        self._load_turns(data)

    def _load_clockwise(self, data: dict) -> None:
        self.clockwise = tuple(Direction(d) for d in data["clockwise"])

    def _load_directions(self, data: dict) -> None:
        for entry in data["directions"]:
            d = Direction(entry["id"])
            dx, dy = entry["offset"]
            self.directions[d] = DirectionEntry(
                id=d,
                offset=Position(int(dx), int(dy)),
                notes=entry.get("notes", "").strip(),
            )

    def _load_turns(self, data: dict) -> None:
        for entry in data["turns"]:
            t = Turn(entry["id"])
            letter = str(entry["letter"])
            self.turns[t] = TurnEntry(
                id=t,
                letter=letter,
                notes=entry.get("notes", "").strip(),
            )
            self.letters[letter] = t

    # ── Cross-reference validation ─────────────────────────────────────────────

    def _validate_cross_references(self) -> None:
        """
        Run at startup. Raises ValueError listing all problems found if the
        cycle, offsets, or turn letters do not describe a consistent compass.
        """
        errors: list[str] = []

        # The cycle must be a permutation of all four directions
        if sorted(self.clockwise) != sorted(Direction):
            errors.append(
                f"clockwise cycle must list each direction exactly once, got "
                f"{[d.value for d in self.clockwise]}"
            )

        for d in Direction:
            if d not in self.directions:
                errors.append(f"direction {d!r} has no offset entry")

        for d, entry in self.directions.items():
            if entry.offset.taxicab_norm() != 1:
                errors.append(
                    f"offset for {d!r} must be a unit vector, got "
                    f"({entry.offset.x}, {entry.offset.y})"
                )

        # Geometry checks only make sense once the cycle and offsets are whole
        if not errors:
            n = len(self.clockwise)
            for i, d in enumerate(self.clockwise):
                here = self.directions[d].offset
                nxt = self.directions[self.clockwise[(i + 1) % n]].offset
                opposite = self.directions[self.clockwise[(i + 2) % n]].offset
                if here + opposite != Position.origin():
                    errors.append(
                        f"{d!r} and {self.clockwise[(i + 2) % n]!r} offsets do not cancel"
                    )
                if here.x * nxt.x + here.y * nxt.y != 0:
                    errors.append(
                        f"{d!r} and {self.clockwise[(i + 1) % n]!r} offsets are not perpendicular"
                    )

        for t in Turn:
            if t not in self.turns:
                errors.append(f"turn {t!r} has no letter entry")

        for t, entry in self.turns.items():
            if len(entry.letter) != 1:
                errors.append(
                    f"letter for {t!r} must be a single character, got {entry.letter!r}"
                )
        if len(self.letters) != len(self.turns):
            errors.append("turn letters must be distinct")

        if errors:
            raise ValueError(
                "Compass registry cross-reference validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def get_offset(self, direction: Direction) -> Position:
        return self.directions[direction].offset

    def get_turn(self, letter: str) -> Optional[Turn]:
        """Return the Turn for an instruction letter, or None if unknown."""
        return self.letters.get(letter)

    def get_letter(self, turn: Turn) -> str:
        return self.turns[turn].letter

    def step_clockwise(self, direction: Direction, quarter_turns: int) -> Direction:
        """Rotate *direction* by *quarter_turns* (negative is counter-clockwise)."""
        i = self.clockwise.index(direction)
        return self.clockwise[(i + quarter_turns) % len(self.clockwise)]


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time. The registry is read-only after
# construction.

_registry: CompassRegistry = CompassRegistry()


def get_registry() -> CompassRegistry:
    """Return the module-level registry singleton."""
    return _registry
