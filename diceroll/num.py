"""Validated integer counts for the dice engine."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class DiceError(ValueError):
    """Raised when a dice configuration is invalid."""


class InvalidArgumentError(DiceError):
    """Raised when a count is not a usable non-negative or positive integer."""


def _require_int(raw: object, message: str) -> int:
    # bool is an int subclass but never a meaningful count
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise InvalidArgumentError(message)
    return raw


class PositiveCount:
    """An integer guaranteed to be strictly greater than zero.

    Args:
        value: The raw integer to wrap.

    Raises:
        InvalidArgumentError: If value is zero, negative or not an integer.
    """

    __slots__ = ("_value",)

    MESSAGE = "Input must be an integer greater than zero"

    def __init__(self, value: int) -> None:
        value = _require_int(value, self.MESSAGE)
        if value <= 0:
            logger.debug("Rejected non-positive count %d", value)
            raise InvalidArgumentError(self.MESSAGE)
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PositiveCount):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"PositiveCount({self._value})"


def non_negative(raw: int, name: str = "count") -> int:
    """Return raw unchanged if it is an integer >= 0.

    Raises:
        InvalidArgumentError: If raw is negative or not an integer.
    """
    message = f"{name} must be an integer greater than or equal to zero"
    value = _require_int(raw, message)
    if value < 0:
        raise InvalidArgumentError(message)
    return value
