"""
Signal-Mind – Random Arrival Generator
Per-second vehicle arrival counts drawn from a Poisson-like sampler.
"""

import math
import random

from config.settings import ARRIVAL_MAX_ITERATIONS, DEFAULT_SEED


class ArrivalGenerator:
    """
    Samples integer arrivals for a one-second interval using Knuth's method.

    Each generator owns its random source, so independent simulation
    contexts never share state. Re-seed to replay a run exactly.
    """

    def __init__(self, seed: int | None = DEFAULT_SEED,
                 max_iterations: int = ARRIVAL_MAX_ITERATIONS):
        self.max_iterations = max_iterations
        self._rng = random.Random(seed)

    def seed(self, seed: int | None) -> None:
        """Reset the random source for deterministic replay."""
        self._rng.seed(seed)

    def sample(self, rate: float) -> int:
        """
        Args:
            rate: mean arrivals per second (lambda)

        Returns:
            Non-negative arrival count. Very large rates hit the iteration
            cap and return the count reached so far.
        """
        if rate <= 0:
            return 0

        limit = math.exp(-rate)
        product = 1.0
        count = 0
        while count < self.max_iterations:
            count += 1
            product *= self._rng.random()
            if product < limit:
                break
        return count - 1
