import random

import pytest

from spgen.charsets import default_registry


class SequenceRandom:
    """Random source returning a fixed, repeating sequence of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randrange(self, stop):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)
