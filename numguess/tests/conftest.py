"""
Pytest fixtures for numguess tests.
"""

import random

import pytest

from ..engine_core.rng import RandomNumberGenerator
from ..engine_core.state import GameSession
from ..session import SessionLifecycle
from ..api.service import APIService


class FixedSource(random.Random):
    """Entropy source that always yields the same value."""

    def __init__(self, value: int):
        super().__init__()
        self.value = value

    def randint(self, a, b):
        return self.value


class BrokenSource(random.Random):
    """Entropy source whose backing device is missing."""

    def randint(self, a, b):
        raise NotImplementedError("/dev/urandom (or equivalent) not found")


@pytest.fixture
def fixed_rng() -> RandomNumberGenerator:
    """Generator that always draws 42."""
    return RandomNumberGenerator(source=FixedSource(42))


@pytest.fixture
def broken_rng() -> RandomNumberGenerator:
    return RandomNumberGenerator(source=BrokenSource())


@pytest.fixture
def lifecycle(fixed_rng: RandomNumberGenerator) -> SessionLifecycle:
    return SessionLifecycle(rng=fixed_rng)


@pytest.fixture
def session_42() -> GameSession:
    """Fresh session with target 42."""
    return GameSession.new(42)


@pytest.fixture
def service(lifecycle: SessionLifecycle) -> APIService:
    return APIService(lifecycle=lifecycle)
