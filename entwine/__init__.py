"""Entwine: recursive random generators for property-based testing.

    from entwine import letrec, one_of, tuple_of, nat, Random

    family = letrec(lambda tie: {
        "tree": one_of(tie("leaf"), tie("node"), max_depth=8),
        "node": tuple_of(tie("tree"), tie("tree")),
        "leaf": nat(),
    })
    family["tree"].generate(Random(42)).value
"""

__version__ = "0.1.0"

from .core import Random, Shrinkable
from .generators import (
    Generator,
    LazyGenerator,
    UninitializedGeneratorError,
    array_of,
    constant,
    integer,
    is_lazy_generator,
    letrec,
    nat,
    one_of,
    tuple_of,
)
from .sampler import SampleResult, sample_values

__all__ = [
    "__version__",
    # Core
    "Random",
    "Shrinkable",
    # Generators
    "Generator",
    "LazyGenerator",
    "UninitializedGeneratorError",
    "is_lazy_generator",
    "letrec",
    "array_of",
    "constant",
    "integer",
    "nat",
    "one_of",
    "tuple_of",
    # Sampling
    "SampleResult",
    "sample_values",
]
