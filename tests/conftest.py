"""Shared fixtures: deterministic random sources."""

from collections import deque

import pytest
import structlog

from adapters.random_sources import PseudoRandomSource


class ScriptedRandomSource:
    """Returns queued values; falls back to `low` once the script runs out."""

    def __init__(self, values=()):
        self.values = deque(values)
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        if not self.values:
            return low
        value = self.values.popleft()
        assert low <= value <= high, f"scripted value {value} outside [{low}, {high}]"
        return value


@pytest.fixture
def scripted_rng():
    """Factory for scripted sources: `scripted_rng(5, 0, 1)`."""

    def _make(*values):
        return ScriptedRandomSource(values)

    return _make


@pytest.fixture
def seeded_rng():
    return PseudoRandomSource(seed=1234)


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI runs bind structlog to the runner's stderr; drop that binding after each test."""

    yield
    structlog.reset_defaults()
