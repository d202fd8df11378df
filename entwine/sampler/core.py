"""Sampling loop: draw a batch of values from a generator."""

import logging
import random
from typing import Any

from pydantic import BaseModel, Field

from ..core.random import Random
from ..generators.base import Generator


logger = logging.getLogger(__name__)


class SampleResult(BaseModel):
    """Values drawn by sample_values() plus what is needed to reproduce them."""

    values: list[Any] = Field(default_factory=list)
    seed: int
    count: int
    bias_frequency: int | None = None


def sample_values(
    generator: Generator,
    count: int,
    seed: int | None = None,
    bias_frequency: int | None = None,
) -> SampleResult:
    """Draw `count` values from a generator.

    Args:
        generator: Generator to sample from
        count: Number of values to draw
        seed: Seed for the randomness source (drawn at random if None)
        bias_frequency: If set, bias the generator once before sampling

    Returns:
        SampleResult with the values and the seed actually used

    Raises:
        ValueError: If count is negative or bias_frequency is below 1
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if bias_frequency is not None and bias_frequency < 1:
        raise ValueError(f"bias_frequency must be at least 1, got {bias_frequency}")

    if seed is None:
        seed = random.randrange(2**32)
        logger.info(f"No seed given, using seed={seed}")

    if bias_frequency is not None:
        generator = generator.with_bias(bias_frequency)

    rng = Random(seed)
    values = [generator.generate(rng).value for _ in range(count)]
    logger.debug(f"Sampled {count} values (seed={seed}, bias_frequency={bias_frequency})")

    return SampleResult(
        values=values,
        seed=seed,
        count=count,
        bias_frequency=bias_frequency,
    )
