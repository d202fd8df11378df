"""Generators for Entwine.

- base.py: Generator abstract base class and mapped generators
- letrec.py: Deferred binding for mutually recursive families
- integer.py, constant.py, one_of.py, tuple.py, array.py: combinators
"""

from .base import Generator, MappedGenerator
from .letrec import (
    LazyGenerator,
    UninitializedGeneratorError,
    is_lazy_generator,
    letrec,
)
from .integer import IntegerGenerator, BiasedIntegerGenerator, integer, nat
from .constant import ConstantGenerator, constant
from .one_of import OneOfGenerator, DepthContext, get_depth_context, one_of
from .tuple import TupleGenerator, tuple_of
from .array import ArrayGenerator, BiasedArrayGenerator, array_of

__all__ = [
    # Base
    "Generator",
    "MappedGenerator",
    # Recursion
    "LazyGenerator",
    "UninitializedGeneratorError",
    "is_lazy_generator",
    "letrec",
    # Combinators
    "IntegerGenerator",
    "BiasedIntegerGenerator",
    "integer",
    "nat",
    "ConstantGenerator",
    "constant",
    "OneOfGenerator",
    "DepthContext",
    "get_depth_context",
    "one_of",
    "TupleGenerator",
    "tuple_of",
    "ArrayGenerator",
    "BiasedArrayGenerator",
    "array_of",
]
