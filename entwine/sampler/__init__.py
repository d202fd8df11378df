"""Sampling for Entwine."""

from .core import SampleResult, sample_values

__all__ = [
    "SampleResult",
    "sample_values",
]
