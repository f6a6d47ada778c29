"""
Random Number Generator - Draws the hidden target for a new session.

The default source is the operating system CSPRNG. Its randint() draws
with rejection sampling over getrandbits(), so there is no modulo bias.

A seeded source can be injected for deterministic runs (tests, demos).
Seeded sources carry internal state, so access to them is serialized.
"""

from __future__ import annotations
import logging
import random
import threading

from .errors import EntropyUnavailable
from .state import MIN_TARGET, MAX_TARGET


logger = logging.getLogger(__name__)


class RandomNumberGenerator:
    """
    Produces integers uniformly distributed over [low, high] inclusive.

    Usage:
        rng = RandomNumberGenerator()          # OS entropy
        rng = RandomNumberGenerator(seed=7)    # deterministic
        target = rng.generate()
    """

    def __init__(
        self,
        seed: int | None = None,
        source: random.Random | None = None,
        low: int = MIN_TARGET,
        high: int = MAX_TARGET,
    ):
        if seed is not None and source is not None:
            raise ValueError("Pass either seed or source, not both")
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")

        self.low = low
        self.high = high

        if source is not None:
            self._source = source
        elif seed is not None:
            self._source = random.Random(seed)
        else:
            self._source = random.SystemRandom()

        # SystemRandom holds no state of its own
        self._lock = None if isinstance(self._source, random.SystemRandom) else threading.Lock()

    @property
    def is_deterministic(self) -> bool:
        return self._lock is not None

    def generate(self) -> int:
        """
        Draw one integer in [low, high].

        Raises:
            EntropyUnavailable: the source could not produce a value
        """
        try:
            if self._lock is None:
                value = self._source.randint(self.low, self.high)
            else:
                with self._lock:
                    value = self._source.randint(self.low, self.high)
        except (NotImplementedError, OSError) as e:
            logger.error("Entropy source unavailable: %s", e)
            raise EntropyUnavailable(f"Entropy source unavailable: {e}") from e

        if not isinstance(value, int) or not self.low <= value <= self.high:
            raise EntropyUnavailable(
                f"Entropy source returned {value!r}, outside [{self.low}, {self.high}]"
            )
        return value
