"""List generator."""

from typing import Iterator

from ..core.random import Random
from ..core.shrinkable import Shrinkable
from .base import Generator


def _shrink_array(items: list[Shrinkable], min_length: int) -> Iterator[Shrinkable]:
    # Removing elements first shrinks size fastest
    if len(items) > min_length:
        for index in range(len(items)):
            yield _combine(items[:index] + items[index + 1:], min_length)
    for index, item in enumerate(items):
        for candidate in item.shrink():
            yield _combine(items[:index] + [candidate] + items[index + 1:], min_length)


def _combine(items: list[Shrinkable], min_length: int) -> Shrinkable:
    return Shrinkable(
        [item.value for item in items],
        lambda: _shrink_array(items, min_length),
    )


class ArrayGenerator(Generator):
    def __init__(self, item: Generator, min_length: int, max_length: int) -> None:
        self.item = item
        self.min_length = min_length
        self.max_length = max_length

    def _length(self, rng: Random) -> int:
        return rng.next_int(self.min_length, self.max_length)

    def generate(self, rng: Random) -> Shrinkable:
        length = self._length(rng)
        return _combine([self.item.generate(rng) for _ in range(length)], self.min_length)

    def with_bias(self, frequency: int) -> Generator:
        return BiasedArrayGenerator(
            self.item.with_bias(frequency), self.min_length, self.max_length, frequency
        )


class BiasedArrayGenerator(ArrayGenerator):
    """Produces arrays of at most a few items once every `frequency` draws on average."""

    def __init__(self, item: Generator, min_length: int, max_length: int, frequency: int) -> None:
        super().__init__(item, min_length, max_length)
        self.frequency = frequency

    def _length(self, rng: Random) -> int:
        if rng.next_int(1, self.frequency) == 1:
            short = min(self.max_length, self.min_length + self.max_length.bit_length())
            return rng.next_int(self.min_length, short)
        return super()._length(rng)

    def with_bias(self, frequency: int) -> Generator:
        return self


def array_of(item: Generator, min_length: int = 0, max_length: int = 10) -> ArrayGenerator:
    """Lists of values from `item`, with a length in [min_length, max_length]."""
    if min_length < 0 or min_length > max_length:
        raise ValueError(
            f"array_of: invalid length range [{min_length}, {max_length}]"
        )
    return ArrayGenerator(item, min_length, max_length)
