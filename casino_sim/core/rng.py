"""
Uniform random sources for round resolution.

The resolver only needs one float in [0, 1) per round. Sources are injected
so that sessions and simulations can run against the operating system's
entropy pool in play and against a fixed seed in tests.
"""

import random
import secrets
from typing import Optional, Protocol

from .config import BettingConfig
from .enums import RandomSourceKind
from .exceptions import RandomSourceError


class RandomSource(Protocol):
    """Protocol for uniform random sources.

    Implementations must return a float in the half-open interval [0, 1).
    """

    def random(self) -> float:
        """Draw one uniform value in [0, 1)."""
        ...


class SecureRandomSource:
    """Random source backed by the operating system's entropy pool."""

    kind = RandomSourceKind.SECURE

    def __init__(self, generator: Optional[secrets.SystemRandom] = None):
        """Initialize the source.

        Args:
            generator: Optional SystemRandom instance, mainly for testing
        """
        self._generator = generator or secrets.SystemRandom()

    def random(self) -> float:
        """Draw one uniform value in [0, 1).

        Raises:
            RandomSourceError: If the entropy pool cannot be read
        """
        try:
            return self._generator.random()
        except (OSError, NotImplementedError) as e:
            raise RandomSourceError(f"Secure random source failed: {e}") from e


class SeededRandomSource:
    """Reproducible random source backed by random.Random."""

    kind = RandomSourceKind.SEEDED

    def __init__(self, seed: Optional[int] = None):
        """Initialize the source.

        Args:
            seed: Seed for the underlying generator
        """
        self.seed = seed
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()


def create_random_source(config: BettingConfig) -> RandomSource:
    """Create the random source a configuration asks for.

    Args:
        config: Betting configuration

    Returns:
        A seeded source when config.random_seed is set, a secure one otherwise
    """
    if config.random_seed is not None:
        return SeededRandomSource(config.random_seed)
    return SecureRandomSource()
