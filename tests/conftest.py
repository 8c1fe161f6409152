"""Shared pytest fixtures for the rsabench test suite."""

import pytest

from rsabench.rsa.keygen import generate_key_pair, generate_key_pair_of_size
from rsabench.rsa.randomness import RandomSource


@pytest.fixture()
def rng():
    """A freshly seeded random source."""
    return RandomSource(1234)


@pytest.fixture()
def demo_key_pair():
    """The small fixed key of the demo run: p=29, q=19, e=47."""
    return generate_key_pair(29, 19, 47)


@pytest.fixture(scope="session")
def key_pair():
    """A reproducible 256-bit key shared by the slower tests."""
    return generate_key_pair_of_size(256, RandomSource(2024))
