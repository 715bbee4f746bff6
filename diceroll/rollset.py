"""Dice roll generation and rendering.

A RollSet holds one rolling request (how many dice, how many sides, and
whether to print die-face glyphs) plus the outcome of its most recent roll.

Rendering modes
---------------
numbers   "4 1 6"  decimal results joined by a single space
glyphs    "⚃ ⚀ ⚅"  Unicode die faces, only for dice with six or fewer sides

Both modes render an unrolled or zero-dice set as an empty string.
"""

from __future__ import annotations

import logging
import random
from typing import Protocol

from diceroll.num import DiceError, InvalidArgumentError, PositiveCount, non_negative

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DIE_GLYPHS: dict[int, str] = {
    1: "⚀",
    2: "⚁",
    3: "⚂",
    4: "⚃",
    5: "⚄",
    6: "⚅",
}

UNKNOWN_GLYPH = "?"

MAX_GLYPH_SIDES = len(DIE_GLYPHS)


class UnsupportedError(DiceError):
    """Raised when a rendering mode cannot represent the requested dice."""


class RandomSource(Protocol):
    """Anything that can draw an integer uniformly from an inclusive range.

    ``random.Random`` and ``random.SystemRandom`` both satisfy this.
    """

    def randint(self, a: int, b: int) -> int: ...


def roll_to_glyph(roll: int) -> str:
    """Return the die-face glyph for a roll of 1 to 6, or "?" for anything else."""
    return DIE_GLYPHS.get(roll, UNKNOWN_GLYPH)


# ---------------------------------------------------------------------------
# RollSet
# ---------------------------------------------------------------------------


class RollSet:
    """A set of identical dice and the results of the latest roll.

    Args:
        number_of_dice: How many dice to roll; zero is allowed.
        number_of_sides: Sides per die.
        output_glyphs: Render results as die-face glyphs instead of numbers.
        rng: Source of randomness. Defaults to a fresh ``random.Random``.

    Raises:
        InvalidArgumentError: If number_of_dice is negative or not an integer,
            or number_of_sides is not a PositiveCount.
        UnsupportedError: If output_glyphs is set and the dice have more
            than six sides.
    """

    def __init__(
        self,
        number_of_dice: int,
        number_of_sides: PositiveCount,
        output_glyphs: bool = False,
        *,
        rng: RandomSource | None = None,
    ) -> None:
        self._number_of_dice = non_negative(number_of_dice, "number_of_dice")
        if not isinstance(number_of_sides, PositiveCount):
            raise InvalidArgumentError(
                f"number_of_sides must be a PositiveCount, got {number_of_sides!r}"
            )
        if output_glyphs and number_of_sides.value > MAX_GLYPH_SIDES:
            raise UnsupportedError(
                f"Glyph output not supported when number_of_sides > {MAX_GLYPH_SIDES}, "
                f"number_of_sides is {number_of_sides.value}."
            )
        self._number_of_sides = number_of_sides
        self._output_glyphs = bool(output_glyphs)
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._results: list[int] = []
        logger.debug("Created %r", self)

    @property
    def number_of_dice(self) -> int:
        return self._number_of_dice

    @property
    def number_of_sides(self) -> PositiveCount:
        return self._number_of_sides

    @property
    def output_glyphs(self) -> bool:
        return self._output_glyphs

    @property
    def results(self) -> tuple[int, ...]:
        """Results of the most recent roll; empty before the first one."""
        return tuple(self._results)

    @property
    def total(self) -> int:
        return sum(self._results)

    def roll(self) -> list[int]:
        """Roll every die, replacing any previous results.

        Returns:
            The new results, one per die, each in [1, number_of_sides].
        """
        sides = self.number_of_sides.value
        self._results = [self._rng.randint(1, sides) for _ in range(self.number_of_dice)]
        logger.debug("Rolled %dd%d: %s", self.number_of_dice, sides, self._results)
        return list(self._results)

    def render(self) -> str:
        """Format the current results as a single space-separated line."""
        if self.output_glyphs:
            return " ".join(roll_to_glyph(r) for r in self._results)
        return " ".join(str(r) for r in self._results)

    def __str__(self) -> str:
        return self.render()

    def _key(self) -> tuple[int, PositiveCount, bool]:
        return (self.number_of_dice, self.number_of_sides, self.output_glyphs)

    # Equality is about the request, not about what happened to be rolled.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RollSet):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"RollSet(number_of_dice={self.number_of_dice}, "
            f"number_of_sides={self.number_of_sides.value}, "
            f"output_glyphs={self.output_glyphs})"
        )
