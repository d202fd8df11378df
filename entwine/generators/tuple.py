"""Tuple generator."""

from typing import Iterator

from ..core.random import Random
from ..core.shrinkable import Shrinkable
from .base import Generator


def _shrink_tuple(parts: tuple[Shrinkable, ...]) -> Iterator[Shrinkable]:
    """Shrink one component at a time, keeping the others fixed."""
    for index, part in enumerate(parts):
        for candidate in part.shrink():
            yield _combine(parts[:index] + (candidate,) + parts[index + 1:])


def _combine(parts: tuple[Shrinkable, ...]) -> Shrinkable:
    return Shrinkable(
        tuple(part.value for part in parts),
        lambda: _shrink_tuple(parts),
    )


class TupleGenerator(Generator):
    def __init__(self, generators: tuple[Generator, ...]) -> None:
        self.generators = generators

    def generate(self, rng: Random) -> Shrinkable:
        return _combine(tuple(generator.generate(rng) for generator in self.generators))

    def with_bias(self, frequency: int) -> Generator:
        return TupleGenerator(tuple(g.with_bias(frequency) for g in self.generators))


def tuple_of(*generators: Generator) -> TupleGenerator:
    """Tuples whose i-th item comes from the i-th generator."""
    return TupleGenerator(generators)
