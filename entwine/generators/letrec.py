"""Deferred binding for mutually recursive generator families.

letrec() hands a `tie` callback to a builder. `tie(name)` returns a
LazyGenerator placeholder immediately, so the builder can reference any
name of the family (including the one it is defining) before it exists.
Once the builder returns, every placeholder is bound to the definition
supplied for its name.

Example:
    >>> family = letrec(lambda tie: {
    ...     "tree": one_of(tie("leaf"), tie("node")),
    ...     "node": tuple_of(tie("tree"), tie("tree")),
    ...     "leaf": nat(),
    ... })
    >>> family["tree"].generate(Random(42)).value
"""

import json
import logging
from typing import Callable, Mapping, NamedTuple

from ..core.random import Random
from ..core.shrinkable import Shrinkable
from .base import Generator


logger = logging.getLogger(__name__)

Tie = Callable[[str], Generator]
Builder = Callable[[Tie], Mapping[str, Generator]]


class UninitializedGeneratorError(RuntimeError):
    """Raised when a lazy generator is used but was never bound.

    This happens when `tie` was called with a name that the builder did
    not define.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Lazy generator {json.dumps(name, ensure_ascii=False)} not correctly initialized")


class _BiasMemo(NamedTuple):
    source: Generator
    frequency: int
    level: int
    biased: Generator


class LazyGenerator(Generator):
    """Placeholder generator whose definition is bound after creation.

    `underlying` is written once by letrec() after the builder returns.
    Until then generate() and with_bias() raise UninitializedGeneratorError.
    """

    MAX_BIAS_LEVELS = 5

    def __init__(self, name: str) -> None:
        self.name = name
        self.underlying: Generator | None = None
        self._num_bias_levels = 0
        self._last_biased: _BiasMemo | None = None

    def _bound(self) -> Generator:
        if self.underlying is None:
            raise UninitializedGeneratorError(self.name)
        return self.underlying

    def generate(self, rng: Random) -> Shrinkable:
        return self._bound().generate(rng)

    def with_bias(self, frequency: int) -> Generator:
        underlying = self._bound()
        # Biasing a recursive family re-enters this method through the family;
        # past the ceiling the rest of the recursion stays unbiased.
        if self._num_bias_levels >= self.MAX_BIAS_LEVELS:
            return self
        memo = self._last_biased
        if (
            memo is not None
            and memo.frequency == frequency
            and memo.source is underlying
            and memo.level == self._num_bias_levels
        ):
            return memo.biased
        self._num_bias_levels += 1
        try:
            biased = underlying.with_bias(frequency)
        finally:
            self._num_bias_levels -= 1
        self._last_biased = _BiasMemo(underlying, frequency, self._num_bias_levels, biased)
        return biased

    def __repr__(self) -> str:
        state = "bound" if self.underlying is not None else "unbound"
        return f"LazyGenerator({self.name!r}, {state})"


def is_lazy_generator(generator: object) -> bool:
    """Check whether a generator is a letrec placeholder.

    Only LazyGenerator instances qualify; other objects that happen to expose
    an `underlying` attribute do not.
    """
    return isinstance(generator, LazyGenerator)


def letrec(builder: Builder) -> dict[str, Generator]:
    """Build a family of generators that may reference each other.

    Args:
        builder: Callable receiving `tie` and returning a mapping from name
            to generator. Values may be concrete generators or results of
            `tie`, in any (possibly cyclic) arrangement.

    Returns:
        Dict with the builder's entries. Names defined without a direct tie
        keep the builder's original generator object; a name defined as
        `tie(other)` maps to the very placeholder registered for `other`.

    Resolution never fails on ties to names the builder did not define;
    those placeholders raise UninitializedGeneratorError when used.
    """
    lazy_generators: dict[str, LazyGenerator] = {}

    def tie(name: str) -> LazyGenerator:
        if name not in lazy_generators:
            lazy_generators[name] = LazyGenerator(name)
        return lazy_generators[name]

    strict_generators = builder(tie)

    for name in strict_generators.keys():
        lazy_at_name = lazy_generators.get(name)
        lazy = lazy_at_name if is_lazy_generator(lazy_at_name) else LazyGenerator(name)
        lazy.underlying = strict_generators[name]
        lazy_generators[name] = lazy

    dangling = [name for name in lazy_generators if name not in strict_generators]
    if dangling:
        logger.debug(f"letrec: tied but undefined names {dangling}")
    logger.debug(
        f"letrec: bound {len(strict_generators)} definitions, {len(lazy_generators)} placeholders"
    )

    return {name: strict_generators[name] for name in strict_generators.keys()}
