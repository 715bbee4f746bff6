"""Shared test fixtures for the diceroll test suite."""

from __future__ import annotations

from collections.abc import Iterable

import pytest
from click.testing import CliRunner


class ScriptedRandom:
    """Deterministic stand-in for random.Random that replays fixed values.

    Records every (a, b) range it was asked for so tests can check the bounds
    the roller requested.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = iter(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return next(self._values)


@pytest.fixture
def scripted_random():
    """Factory fixture: scripted_random([3, 6]) returns a ScriptedRandom."""
    return ScriptedRandom


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
