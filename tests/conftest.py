"""Pytest configuration for ray tracer tests.

Provides the random sources shared by the test modules. Every sampling
function takes its generator explicitly, so tests either seed a real
generator or pass a constant stub.
"""

import random

import pytest


class ConstantRandom:
    """Stand-in generator whose every draw returns the same value."""

    def __init__(self, value: float = 0.0):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class SequenceRandom:
    """Generator that replays a fixed list of draws, cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.index = 0

    def random(self) -> float:
        value = self.values[self.index % len(self.values)]
        self.index += 1
        return value


@pytest.fixture
def rng():
    """Seeded generator so sampled results are reproducible."""
    return random.Random(42)


@pytest.fixture
def zero_rng():
    """Generator that always returns 0."""
    return ConstantRandom(0.0)


@pytest.fixture
def make_sequence_rng():
    return SequenceRandom
