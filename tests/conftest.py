"""Shared fixtures for the dice sampling tests."""

from typing import Iterable, List

import pytest

from dice_prob.random_source import RandomSource


class ScriptedRandomSource(RandomSource):
    """RandomSource that replays a fixed sequence of unit values."""

    def __init__(self, units: Iterable[float]):
        super().__init__(seed=0)
        self._units: List[float] = list(units)
        self._pos = 0

    def uniform_unit(self) -> float:
        if self._pos >= len(self._units):
            raise AssertionError("scripted random sequence exhausted")
        u = self._units[self._pos]
        self._pos += 1
        return u

    @classmethod
    def for_dice(cls, faces: Iterable[int], side_count: int) -> "ScriptedRandomSource":
        """Script unit values that make int_in_range(1, side_count) yield faces in order."""
        return cls([(f - 0.5) / side_count for f in faces])


@pytest.fixture
def scripted():
    """Factory for die-face scripted sources.

    :return: Callable building a ScriptedRandomSource from faces and a side count.
    """
    return ScriptedRandomSource.for_dice


@pytest.fixture
def seeded_source() -> RandomSource:
    """Deterministic RandomSource for statistical tests.

    :return: Seeded RandomSource.
    :rtype: RandomSource
    """
    return RandomSource(seed=1234)
