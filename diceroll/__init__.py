"""Roll any number of dice with any number of sides."""

from diceroll.num import DiceError, InvalidArgumentError, PositiveCount
from diceroll.rollset import DIE_GLYPHS, RollSet, UnsupportedError, roll_to_glyph

__version__ = "0.1.0"

__all__ = [
    "DIE_GLYPHS",
    "DiceError",
    "InvalidArgumentError",
    "PositiveCount",
    "RollSet",
    "UnsupportedError",
    "roll_to_glyph",
]
