"""Integer generators."""

from typing import Iterator

from ..core.random import Random
from ..core.shrinkable import Shrinkable
from .base import Generator


MIN_INT = -(2**31)
MAX_INT = 2**31 - 1


def _half_towards_zero(gap: int) -> int:
    return gap // 2 if gap >= 0 else -((-gap) // 2)


def _shrink_integer(value: int, target: int) -> Iterator[Shrinkable]:
    """Yield candidates from `target` towards `value`, halving the gap each step."""
    gap = value - target
    while gap != 0:
        candidate = value - gap
        yield Shrinkable(candidate, lambda c=candidate: _shrink_integer(c, target))
        gap = _half_towards_zero(gap)


class IntegerGenerator(Generator):
    """Uniform integers in [min_value, max_value], shrinking towards zero."""

    def __init__(self, min_value: int, max_value: int) -> None:
        if min_value > max_value:
            raise ValueError(
                f"integer: min_value ({min_value}) must not exceed max_value ({max_value})"
            )
        self.min_value = min_value
        self.max_value = max_value

    @property
    def target(self) -> int:
        """Value in range closest to zero."""
        return min(max(0, self.min_value), self.max_value)

    def _envelope(self, value: int) -> Shrinkable:
        target = self.target
        return Shrinkable(value, lambda: _shrink_integer(value, target))

    def generate(self, rng: Random) -> Shrinkable:
        return self._envelope(rng.next_int(self.min_value, self.max_value))

    def with_bias(self, frequency: int) -> Generator:
        # Width of the biased range grows with the log of the full span
        radius = (self.max_value - self.min_value).bit_length()
        target = self.target
        low = max(self.min_value, target - radius)
        high = min(self.max_value, target + radius)
        if (low, high) == (self.min_value, self.max_value):
            return self
        return BiasedIntegerGenerator(self, IntegerGenerator(low, high), frequency)

    def __repr__(self) -> str:
        return f"IntegerGenerator({self.min_value}, {self.max_value})"


class BiasedIntegerGenerator(Generator):
    """Draws from a small range near the target once every `frequency` draws on average."""

    def __init__(self, full: IntegerGenerator, small: IntegerGenerator, frequency: int) -> None:
        self.full = full
        self.small = small
        self.frequency = frequency

    def generate(self, rng: Random) -> Shrinkable:
        if rng.next_int(1, self.frequency) == 1:
            value = rng.next_int(self.small.min_value, self.small.max_value)
        else:
            value = rng.next_int(self.full.min_value, self.full.max_value)
        return self.full._envelope(value)

    def with_bias(self, frequency: int) -> Generator:
        return self


def integer(min_value: int = MIN_INT, max_value: int = MAX_INT) -> IntegerGenerator:
    """Integers between min_value and max_value (both inclusive)."""
    return IntegerGenerator(min_value, max_value)


def nat(max_value: int = MAX_INT) -> IntegerGenerator:
    """Natural numbers between 0 and max_value (both inclusive)."""
    if max_value < 0:
        raise ValueError(f"nat: max_value must be non-negative, got {max_value}")
    return IntegerGenerator(0, max_value)
