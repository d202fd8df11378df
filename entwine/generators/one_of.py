"""Weighted choice between generators, with depth control for recursive families.

A recursive family usually routes through the same one_of() on every level
(e.g. a tree choosing between a leaf and a node). Each one_of() keeps a depth
context counting how many of its generate() calls are currently on the stack;
depth_factor and max_depth use it to favour the first alternative, which
should be the terminating one, as the structure grows deeper.
"""

import logging

from ..core.random import Random
from ..core.shrinkable import Shrinkable
from .base import Generator


logger = logging.getLogger(__name__)


class DepthContext:
    """Mutable recursion depth shared by cooperating one_of() generators."""

    __slots__ = ("depth",)

    def __init__(self) -> None:
        self.depth = 0


_depth_contexts: dict[str, DepthContext] = {}


def get_depth_context(identifier: str) -> DepthContext:
    """Return the depth context registered under identifier, creating it on first use.

    Contexts are kept for the life of the process, one per distinct
    identifier, so identifiers should come from a small fixed set.
    """
    context = _depth_contexts.get(identifier)
    if context is None:
        context = DepthContext()
        _depth_contexts[identifier] = context
    return context


class OneOfGenerator(Generator):
    def __init__(
        self,
        generators: tuple[Generator, ...],
        weights: tuple[float, ...],
        depth_factor: float,
        max_depth: int | None,
        context: DepthContext,
    ) -> None:
        self.generators = generators
        self.weights = weights
        self.depth_factor = depth_factor
        self.max_depth = max_depth
        self.context = context

    def _pick(self, rng: Random) -> int:
        depth = self.context.depth
        # Depth rules favour the first alternative that can be picked at all
        first = next(i for i, w in enumerate(self.weights) if w > 0)
        if self.max_depth is not None and depth >= self.max_depth:
            return first

        total = sum(self.weights)
        weights = list(self.weights)
        if depth > 0 and self.depth_factor > 0:
            weights[first] += self.depth_factor * depth * total
            total = sum(weights)

        threshold = rng.next_double() * total
        for index, weight in enumerate(weights):
            threshold -= weight
            if threshold < 0 and weight > 0:
                return index
        # Float rounding may leave threshold at 0; fall back to the last usable alternative
        return max(i for i, w in enumerate(weights) if w > 0)

    def generate(self, rng: Random) -> Shrinkable:
        index = self._pick(rng)
        self.context.depth += 1
        try:
            return self.generators[index].generate(rng)
        finally:
            self.context.depth -= 1

    def with_bias(self, frequency: int) -> Generator:
        return OneOfGenerator(
            tuple(g.with_bias(frequency) for g in self.generators),
            self.weights,
            self.depth_factor,
            self.max_depth,
            self.context,
        )


def one_of(
    *generators: Generator,
    weights: list[float] | None = None,
    depth_factor: float = 0.0,
    max_depth: int | None = None,
    depth_identifier: str | None = None,
) -> OneOfGenerator:
    """Pick one of several generators for each value.

    Args:
        *generators: Alternatives. Put the non-recursive one first.
        weights: Relative weight per alternative (default: all equal).
        depth_factor: Extra weight given to the first alternative per level
            of nesting, as a fraction of the total weight.
        max_depth: Nesting level from which only the first alternative is used.

    In both depth rules the first alternative is the first one with a
    positive weight.
        depth_identifier: Share the depth context with every other one_of()
            created with the same identifier.

    Returns:
        OneOfGenerator
    """
    if not generators:
        raise ValueError("one_of: at least one generator is required")
    if weights is None:
        weights = [1.0] * len(generators)
    if len(weights) != len(generators):
        raise ValueError(
            f"one_of: got {len(weights)} weights for {len(generators)} generators"
        )
    if any(w < 0 for w in weights) or sum(weights) <= 0:
        raise ValueError(f"one_of: weights must be non-negative with a positive sum, got {weights}")
    if depth_factor < 0:
        raise ValueError(f"one_of: depth_factor must be non-negative, got {depth_factor}")

    if depth_identifier is not None:
        context = get_depth_context(depth_identifier)
        logger.debug(f"one_of: sharing depth context '{depth_identifier}'")
    else:
        context = DepthContext()

    return OneOfGenerator(
        tuple(generators),
        tuple(float(w) for w in weights),
        depth_factor,
        max_depth,
        context,
    )
