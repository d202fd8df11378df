"""Seeded randomness source shared by all generators."""

import random


class Random:
    """Mutable randomness source.

    Every draw advances the internal state, so two sources built from the
    same seed produce the same sequence of values.

    Args:
        seed: Integer seed for the underlying Mersenne Twister.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def next_int(self, min_value: int, max_value: int) -> int:
        """Draw an integer uniformly from [min_value, max_value]."""
        return self._rng.randint(min_value, max_value)

    def next_double(self) -> float:
        """Draw a float uniformly from [0, 1)."""
        return self._rng.random()

    def clone(self) -> "Random":
        """Return an independent source positioned at the same state."""
        other = Random(self.seed)
        other._rng.setstate(self._rng.getstate())
        return other

    def __repr__(self) -> str:
        return f"Random(seed={self.seed})"
