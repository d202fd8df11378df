"""Core primitives for Entwine.

- random.py: Random, the seeded randomness source
- shrinkable.py: Shrinkable, the value envelope returned by generators
"""

from .random import Random
from .shrinkable import Shrinkable

__all__ = [
    "Random",
    "Shrinkable",
]
