"""Shared pytest fixtures for all tests."""

import random

import pytest

from astumian import SEED


class ScriptedRng:
    """Stand-in for random.Random that replays a fixed list of draws."""

    def __init__(self, draws):
        self._draws = list(draws)
        self.consumed = 0

    def random(self):
        if not self._draws:
            raise AssertionError("scripted rng ran out of draws")
        self.consumed += 1
        return self._draws.pop(0)


@pytest.fixture
def rng():
    """Provide a freshly seeded generator, independent per test."""
    return random.Random(SEED)


@pytest.fixture
def scripted_rng():
    """Factory for generators that replay the given draws."""
    return ScriptedRng
