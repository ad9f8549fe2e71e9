"""
Shared fixtures for slice-bcrypt tests.
"""

import pytest


class FakeClock:
    """Clock that advances by a fixed tick on every reading."""

    def __init__(self, tick: float):
        self.tick = tick
        self.now = 0.0
        self.readings = 0

    def __call__(self) -> float:
        value = self.now
        self.now += self.tick
        self.readings += 1
        return value


@pytest.fixture
def fast_config():
    """Lowest cost so hashing stays quick in pure Python."""
    from slice_bcrypt.config import BcryptConfig

    return BcryptConfig(default_cost=4, slice_budget_ms=1.0, initial_batch_size=25)


@pytest.fixture
def fake_clock():
    return FakeClock
