"""Command-line interface for Entwine."""

from .app import app, main

__all__ = ["app", "main"]
