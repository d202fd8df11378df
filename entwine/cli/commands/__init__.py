"""CLI commands for Entwine."""

from . import (
    config,
    sample,
)

__all__ = [
    "config",
    "sample",
]
