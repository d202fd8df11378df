"""Constant generator."""

from typing import Any

from ..core.random import Random
from ..core.shrinkable import Shrinkable
from .base import Generator


class ConstantGenerator(Generator):
    def __init__(self, value: Any) -> None:
        self.value = value

    def generate(self, rng: Random) -> Shrinkable:
        return Shrinkable(self.value)

    def __repr__(self) -> str:
        return f"ConstantGenerator({self.value!r})"


def constant(value: Any) -> ConstantGenerator:
    """Always produce `value`; never shrinks and draws no randomness."""
    return ConstantGenerator(value)
