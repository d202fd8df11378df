"""Abstract base class for generators."""

from abc import ABC, abstractmethod
from typing import Any, Callable

from ..core.random import Random
from ..core.shrinkable import Shrinkable


class Generator(ABC):
    """Abstract base class for value generators.

    All generators, including the lazy placeholders handed out by letrec,
    implement these methods so that they can be composed interchangeably.
    """

    @abstractmethod
    def generate(self, rng: Random) -> Shrinkable:
        """Produce a value envelope, drawing randomness from rng."""
        ...

    def with_bias(self, frequency: int) -> "Generator":
        """Return a variant favouring small or edge values.

        Roughly one draw out of `frequency` should come from the biased
        region. Generators without a meaningful bias return themselves.
        """
        return self

    def map(self, mapper: Callable[[Any], Any]) -> "Generator":
        return MappedGenerator(self, mapper)


class MappedGenerator(Generator):
    """Applies a function to every value (and shrink) of another generator."""

    def __init__(self, source: Generator, mapper: Callable[[Any], Any]) -> None:
        self.source = source
        self.mapper = mapper

    def generate(self, rng: Random) -> Shrinkable:
        return self.source.generate(rng).map(self.mapper)

    def with_bias(self, frequency: int) -> Generator:
        biased = self.source.with_bias(frequency)
        if biased is self.source:
            return self
        return MappedGenerator(biased, self.mapper)
